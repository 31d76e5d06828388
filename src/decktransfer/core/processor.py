"""Orchestration of the section transfer workflow.

This module ties the builder, deriver, serializer and transfer together
and records what happened through the TransferLogger.

Key components:
- SectionProcessor: Export (build -> derive -> write), load (read ->
  derive) and transfer (section -> PolygonSink)
"""

import time
from collections.abc import Sequence
from pathlib import Path

import structlog

from decktransfer.config import DeckTransferSettings, ImportConfig
from decktransfer.core.builder import ReferencePointMode, SectionBuilder
from decktransfer.core.derivation import CenterlineDeriver, DerivedLines
from decktransfer.core.transfer import PolygonSink, SectionTransfer, TransferReport
from decktransfer.domain import DeckSection, MaterialProperties, Point2D, Polygon, SectionDocument
from decktransfer.exceptions import DeckTransferError
from decktransfer.io import SectionReader, SectionWriter
from decktransfer.utils import ProcessingStats, TransferLogger, configure_logging


class SectionProcessor:
    """Runs the export and import sides of a section transfer.

    Example:
        processor = SectionProcessor(DeckTransferSettings())
        section = processor.export(polygons, Path("Deck.json"), name="Deck")
        document = processor.load(Path("Deck.json"))
    """

    def __init__(
        self,
        config: DeckTransferSettings | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the processor.

        Args:
            config: Application settings (defaults if None)
            logger: Pre-configured logger; logging is configured from the
                settings when omitted
        """
        self.config = config or DeckTransferSettings()
        if logger is None:
            logger = configure_logging(
                log_file=self.config.logging.log_file,
                console_level=self.config.logging.log_level,
                file_level=self.config.logging.file_log_level,
            )
        self.logger = logger
        self.transfer_logger = TransferLogger(logger)
        self.builder = SectionBuilder(self.config.geometry)
        self.deriver = CenterlineDeriver(self.config.derivation, self.config.geometry)

    @property
    def stats(self) -> ProcessingStats:
        """Statistics collected so far."""
        return self.transfer_logger.stats

    def derive(self, section: DeckSection) -> DerivedLines:
        """Derive and store centerlines/cutlines for one section.

        Args:
            section: Section to populate

        Returns:
            Derived lines

        Raises:
            InvalidGeometryError: If derivation fails (section left unchanged)
        """
        start = time.time()
        self.transfer_logger.log_section_start(section.name, section.void_count)
        try:
            lines = self.deriver.populate(section)
        except DeckTransferError as e:
            self.transfer_logger.log_section_error(section.name, e)
            raise

        self.transfer_logger.log_section_complete(
            section.name,
            centerlines=len(lines.centerlines),
            cutlines=len(lines.cutlines),
            duration_ms=(time.time() - start) * 1000,
        )
        return lines

    def export(
        self,
        polygons: Sequence[Polygon],
        output_path: Path | None = None,
        name: str = "DeckSection_01",
        station: float = 0.0,
        reference: ReferencePointMode = ReferencePointMode.CENTERLINE,
        picked_point: Point2D | None = None,
        material: MaterialProperties | None = None,
    ) -> DeckSection:
        """Build a section from selected polygons, derive lines and write it.

        Args:
            polygons: Selected polygons in selection order
            output_path: Destination file (<name>.json if None)
            name: Section name
            station: Station along the alignment
            reference: Reference point choice
            picked_point: Point for ReferencePointMode.PICK
            material: Material properties

        Returns:
            The exported section, with derived lines
        """
        self.stats.start_time = time.time()
        section = self.builder.build(
            polygons,
            name=name,
            station=station,
            reference=reference,
            picked_point=picked_point,
            material=material,
        )
        self.derive(section)

        path = output_path or SectionWriter.get_default_path(section)
        SectionWriter(path, self.config.export).write([section])
        self.transfer_logger.log_file_written(path, 1)

        self.stats.end_time = time.time()
        return section

    def load(self, path: Path, derive: bool = True) -> SectionDocument:
        """Load an interchange file, optionally deriving lines.

        Args:
            path: File to read
            derive: Derive centerlines/cutlines for every section

        Returns:
            Loaded document
        """
        self.stats.start_time = time.time()
        document = SectionReader(path).load()
        self.transfer_logger.log_file_loaded(
            path, len(document.sections), document.export_info.tool
        )

        if derive:
            for section in document.sections:
                self.derive(section)

        self.stats.end_time = time.time()
        return document

    def transfer(
        self,
        section: DeckSection,
        sink: PolygonSink,
        options: ImportConfig | None = None,
    ) -> TransferReport:
        """Hand a section to the analysis-side adapter.

        Args:
            section: Section to transfer
            sink: Adapter for the target tool
            options: Import options (settings default if None)

        Returns:
            TransferReport from the transfer
        """
        transfer = SectionTransfer(sink, options or self.config.transfer)
        report = transfer.transfer(section)
        for warning in report.warnings:
            self.transfer_logger.log_transfer_warning(report.section_name, warning)
        return report
