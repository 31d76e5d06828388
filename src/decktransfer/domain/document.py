"""Interchange document: export header plus sections."""

from dataclasses import dataclass, field
from datetime import datetime

from decktransfer.domain.section import DeckSection


@dataclass
class ExportInfo:
    """Metadata header written with every interchange file.

    Attributes:
        date: Export timestamp
        tool: Exporting tool name
        version: Exporting tool version
        units: Unit label (carried through, never converted)
        coordinate_system: Coordinate system label
    """

    date: datetime
    tool: str
    version: str
    units: str
    coordinate_system: str


@dataclass
class SectionDocument:
    """Contents of one interchange file."""

    export_info: ExportInfo
    sections: list[DeckSection] = field(default_factory=list)

    def first(self) -> DeckSection:
        """Return the first section.

        Raises:
            IndexError: If the document has no sections
        """
        return self.sections[0]
