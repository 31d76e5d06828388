"""Section reader for loading interchange files.

This module provides parse_document for JSON text and the SectionReader
class for loading files into domain models.
"""

from collections.abc import Iterator
from pathlib import Path

from pydantic import ValidationError

from decktransfer.domain import DeckSection, ExportInfo, SectionDocument
from decktransfer.exceptions import EmptyDocumentError, FileReadError, MalformedFileError
from decktransfer.io.converter import dto_to_document
from decktransfer.io.schema import SectionDocumentDTO


def _describe_validation_error(error: ValidationError) -> str:
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"]) or "document"
    extra = f" (+{error.error_count() - 1} more)" if error.error_count() > 1 else ""
    return f"{location}: {first['msg']}{extra}"


def parse_document(text: str, source: str = "<string>") -> SectionDocument:
    """Parse interchange JSON text.

    Args:
        text: JSON document
        source: Name used in error messages (usually the file path)

    Returns:
        SectionDocument with at least one section

    Raises:
        MalformedFileError: If the text is not valid JSON or breaks the schema
        EmptyDocumentError: If the document holds no sections
    """
    try:
        dto = SectionDocumentDTO.model_validate_json(text)
    except ValidationError as e:
        raise MalformedFileError(source, _describe_validation_error(e)) from e

    if not dto.sections:
        raise EmptyDocumentError(source)

    return dto_to_document(dto)


class SectionReader:
    """Loads interchange files and exposes their sections.

    Example:
        reader = SectionReader(Path("BoxGirder.json"))
        reader.load()
        for section in reader.iter_sections():
            print(section.name)
    """

    def __init__(self, path: Path) -> None:
        """Initialize the section reader.

        Args:
            path: Path to the interchange JSON file
        """
        self._path = path
        self._document: SectionDocument | None = None

    def load(self) -> SectionDocument:
        """Read and parse the file.

        Returns:
            Parsed document

        Raises:
            FileReadError: If the file is missing or cannot be read
            MalformedFileError: If the contents are invalid
            EmptyDocumentError: If the file holds no sections
        """
        if not self._path.exists():
            raise FileReadError(str(self._path), "file not found")

        try:
            text = self._path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise MalformedFileError(str(self._path), f"not UTF-8 text: {e}") from e
        except OSError as e:
            raise FileReadError(str(self._path), str(e)) from e

        self._document = parse_document(text, source=str(self._path))
        return self._document

    @property
    def document(self) -> SectionDocument:
        """Return the loaded document.

        Raises:
            RuntimeError: If the file has not been loaded yet
        """
        if self._document is None:
            raise RuntimeError("Document not loaded. Call load() first.")
        return self._document

    @property
    def export_info(self) -> ExportInfo:
        """Return the export header."""
        return self.document.export_info

    @property
    def section_count(self) -> int:
        """Return the number of sections in the file."""
        return len(self.document.sections)

    def iter_sections(self) -> Iterator[DeckSection]:
        """Iterate over sections in file order."""
        yield from self.document.sections

    def first_section(self) -> DeckSection:
        """Return the first section in the file."""
        return self.document.first()

    def get_section(self, name: str) -> DeckSection | None:
        """Get a section by name.

        Args:
            name: Section name

        Returns:
            Matching section, or None if not found
        """
        for section in self.document.sections:
            if section.name == name:
                return section
        return None

    def __enter__(self) -> "SectionReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self._document = None
