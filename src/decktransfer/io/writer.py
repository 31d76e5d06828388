"""Section writer for saving interchange files.

This module provides render_document for producing JSON text and the
SectionWriter class for writing sections with a fresh export header.
"""

from collections.abc import Sequence
from datetime import datetime
from pathlib import Path

from decktransfer.config import ExportConfig
from decktransfer.domain import DeckSection, ExportInfo, SectionDocument
from decktransfer.exceptions import FileWriteError
from decktransfer.io.converter import document_to_dto


def render_document(document: SectionDocument) -> str:
    """Render a document as indented camelCase JSON.

    Args:
        document: Document to render

    Returns:
        JSON text with None fields omitted
    """
    dto = document_to_dto(document)
    return dto.model_dump_json(by_alias=True, exclude_none=True, indent=2)


class SectionWriter:
    """Writes sections to an interchange file.

    Example:
        writer = SectionWriter(Path("BoxGirder.json"))
        writer.write([section])
    """

    def __init__(self, output_path: Path, config: ExportConfig | None = None) -> None:
        """Initialize the section writer.

        Args:
            output_path: Path where the file will be written
            config: Export header values (defaults if None)
        """
        self._output_path = output_path
        self._config = config or ExportConfig()

    @property
    def output_path(self) -> Path:
        """Destination path."""
        return self._output_path

    def make_export_info(self) -> ExportInfo:
        """Build an export header stamped with the current time."""
        return ExportInfo(
            date=datetime.now(),
            tool=self._config.tool,
            version=self._config.version,
            units=self._config.units,
            coordinate_system=self._config.coordinate_system,
        )

    def write(self, sections: Sequence[DeckSection]) -> SectionDocument:
        """Write sections to the output path.

        Args:
            sections: Sections to write, in order

        Returns:
            The document that was written

        Raises:
            FileWriteError: If the file cannot be written
        """
        document = SectionDocument(
            export_info=self.make_export_info(),
            sections=list(sections),
        )
        text = render_document(document)

        try:
            self._output_path.write_text(text, encoding="utf-8")
        except OSError as e:
            raise FileWriteError(str(self._output_path), str(e)) from e

        return document

    @staticmethod
    def get_default_path(section: DeckSection, directory: Path | None = None) -> Path:
        """Generate the default output path for a section.

        Converts: section "Pier 3" -> <directory>/Pier 3.json

        Args:
            section: Section being exported
            directory: Target directory (current directory if None)

        Returns:
            Path named after the section
        """
        return (directory or Path(".")) / f"{section.name}.json"
