"""Tests for the section processing workflow."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from decktransfer.config import DeckTransferSettings, ImportConfig
from decktransfer.core.builder import polygons_from_coordinates
from decktransfer.core.processor import SectionProcessor
from decktransfer.domain import DeckSection, Polygon, PolygonType
from decktransfer.exceptions import EmptyDocumentError, InvalidGeometryError
from decktransfer.io import SectionReader

BOX_SELECTION = [
    [(0, 0), (10, 0), (10, 2), (0, 2)],
    [(1, 0.3), (4, 0.3), (4, 1.7), (1, 1.7)],
    [(6, 0.3), (9, 0.3), (9, 1.7), (6, 1.7)],
]


@pytest.fixture
def processor() -> SectionProcessor:
    """Processor with a mock logger."""
    return SectionProcessor(DeckTransferSettings(), logger=MagicMock())


class TestSectionProcessorInit:
    """Tests for processor construction."""

    @patch("decktransfer.core.processor.configure_logging")
    def test_configures_logging(self, mock_logging) -> None:
        """Test logging is configured from settings when no logger is given."""
        mock_logging.return_value = MagicMock()
        settings = DeckTransferSettings()
        settings.logging.log_level = "INFO"

        processor = SectionProcessor(settings)

        mock_logging.assert_called_once_with(
            log_file=None, console_level="INFO", file_level="DEBUG"
        )
        assert processor.logger is mock_logging.return_value

    def test_uses_given_logger(self) -> None:
        """Test a provided logger is used as is."""
        logger = MagicMock()
        with patch("decktransfer.core.processor.configure_logging") as mock_logging:
            processor = SectionProcessor(logger=logger)
        mock_logging.assert_not_called()
        assert processor.logger is logger


class TestDerive:
    """Tests for SectionProcessor.derive."""

    def test_derive_updates_stats(
        self, processor: SectionProcessor, two_cell_section: DeckSection
    ) -> None:
        """Test derived lines are stored and counted."""
        lines = processor.derive(two_cell_section)

        assert two_cell_section.centerlines == lines.centerlines
        assert processor.stats.sections_processed == 1
        assert processor.stats.centerlines_derived == 5
        assert processor.stats.cutlines_derived == 4
        processor.logger.info.assert_called()

    def test_derive_failure_logged(self, processor: SectionProcessor) -> None:
        """Test a failed derivation is logged and re-raised."""
        section = DeckSection(name="Empty")
        with pytest.raises(InvalidGeometryError):
            processor.derive(section)

        assert processor.stats.error_count == 1
        assert processor.stats.errors[0][0] == "Empty"
        processor.logger.error.assert_called_once()


class TestExport:
    """Tests for SectionProcessor.export."""

    def test_export_writes_file(self, processor: SectionProcessor, tmp_path: Path) -> None:
        """Test export builds, derives and writes a section."""
        output = tmp_path / "Box.json"
        section = processor.export(
            polygons_from_coordinates(BOX_SELECTION), output, name="Box", station=12.5
        )

        assert output.exists()
        assert section.void_count == 2
        assert len(section.centerlines) == 5
        reloaded = SectionReader(output).load()
        assert reloaded.first() == section
        assert processor.stats.duration_seconds >= 0.0

    def test_export_invalid_selection(self, processor: SectionProcessor, tmp_path: Path) -> None:
        """Test nothing is written for an invalid selection."""
        output = tmp_path / "Bad.json"
        with pytest.raises(InvalidGeometryError):
            processor.export([], output)
        assert not output.exists()


class TestLoad:
    """Tests for SectionProcessor.load."""

    def test_load_derives(self, processor: SectionProcessor, section_file: Path) -> None:
        """Test loading derives lines by default."""
        document = processor.load(section_file)
        assert document.first().has_derived_lines()

    def test_load_without_derive(self, processor: SectionProcessor, section_file: Path) -> None:
        """Test derivation can be skipped."""
        document = processor.load(section_file, derive=False)
        assert not document.first().has_derived_lines()
        assert processor.stats.sections_processed == 0

    def test_load_empty(self, processor: SectionProcessor, tmp_path: Path) -> None:
        """Test errors from the reader propagate."""
        path = tmp_path / "empty.json"
        path.write_text(
            '{"exportInfo": {"date": "2024-01-01T00:00:00", "tool": "t", "version": "1", '
            '"units": "Meters", "coordinateSystem": "Local"}, "sections": []}',
            encoding="utf-8",
        )
        with pytest.raises(EmptyDocumentError):
            processor.load(path)


class TestTransfer:
    """Tests for SectionProcessor.transfer."""

    def test_transfer_uses_settings(
        self, two_cell_section: DeckSection, recording_sink
    ) -> None:
        """Test default import options come from settings."""
        settings = DeckTransferSettings()
        settings.transfer.target_section_name = "Deck1"
        processor = SectionProcessor(settings, logger=MagicMock())

        report = processor.transfer(two_cell_section, recording_sink)
        assert report.section_name == "Deck1"

    def test_transfer_warnings_counted(
        self, processor: SectionProcessor, two_cell_section: DeckSection, recording_sink
    ) -> None:
        """Test transfer warnings are logged."""
        two_cell_section.voids.append(Polygon("Void_3", PolygonType.OPENING))
        report = processor.transfer(
            two_cell_section, recording_sink, ImportConfig(set_reference_point=False)
        )

        assert len(report.warnings) == 1
        assert processor.stats.warning_count == 1
        processor.logger.warning.assert_called_once()
