"""Hand a deck section to the analysis-side tool.

The analysis tool's automation API is reached through a PolygonSink
adapter. The core only decides what to define and in which order; the
adapter owns every host-specific call.
"""

from dataclasses import dataclass, field
from typing import Protocol

from decktransfer.config import ImportConfig
from decktransfer.domain import DeckSection, Point2D
from decktransfer.exceptions import InvalidGeometryError, TransferError


class PolygonSink(Protocol):
    """Capabilities the analysis-side adapter must provide.

    Implementations raise an exception when the host rejects a call.
    """

    def clear_voids(self, section_name: str) -> None:
        """Remove voids already defined on a section."""
        ...

    def define_exterior(self, section_name: str, points: list[Point2D]) -> None:
        """Create or replace the solid outline of a section."""
        ...

    def define_void(self, section_name: str, void_name: str, points: list[Point2D]) -> None:
        """Add an opening polygon to a section."""
        ...

    def set_reference_point(self, section_name: str, x: float, y: float) -> None:
        """Set the insertion point of a section."""
        ...


@dataclass
class TransferReport:
    """Outcome of a section transfer.

    Attributes:
        section_name: Name the section was created under
        exterior_vertices: Vertices sent for the exterior
        voids_created: Names of voids the sink accepted
        warnings: Non-fatal problems (skipped voids, reference point)
        reference_point_set: Whether the insertion point was set
    """

    section_name: str
    exterior_vertices: int = 0
    voids_created: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    reference_point_set: bool = False

    @property
    def succeeded(self) -> bool:
        """True when the transfer finished without warnings."""
        return not self.warnings


class SectionTransfer:
    """Replays a DeckSection against a PolygonSink.

    Example:
        transfer = SectionTransfer(sink, ImportConfig(target_section_name="Deck1"))
        report = transfer.transfer(section)
    """

    def __init__(self, sink: PolygonSink, options: ImportConfig | None = None) -> None:
        self.sink = sink
        self.options = options or ImportConfig()

    def target_name(self, section: DeckSection) -> str:
        """Name the section will have in the target tool."""
        return self.options.target_section_name or section.name

    def transfer(self, section: DeckSection) -> TransferReport:
        """Define the section's polygons through the sink.

        Args:
            section: Section to transfer

        Returns:
            TransferReport describing what was created

        Raises:
            InvalidGeometryError: If the exterior has fewer than 3 points
            TransferError: If the sink rejects the exterior or void clearing
        """
        if not section.exterior.is_valid():
            raise InvalidGeometryError(
                f"Exterior boundary of section '{section.name}' has "
                f"{section.exterior.vertex_count} points, at least 3 are required"
            )

        name = self.target_name(section)
        report = TransferReport(section_name=name)

        if self.options.clear_existing_voids:
            try:
                self.sink.clear_voids(name)
            except Exception as e:
                raise TransferError(name, f"could not clear existing voids: {e}") from e

        try:
            self.sink.define_exterior(name, list(section.exterior.points))
        except Exception as e:
            raise TransferError(name, f"exterior polygon rejected: {e}") from e
        report.exterior_vertices = section.exterior.vertex_count

        for void in section.voids:
            void_name = f"{name}_{void.name}"
            if not void.is_valid():
                report.warnings.append(
                    f"Void '{void.name}' skipped: {void.vertex_count} points"
                )
                continue
            try:
                self.sink.define_void(name, void_name, list(void.points))
            except Exception as e:
                report.warnings.append(f"Void '{void.name}' rejected: {e}")
                continue
            report.voids_created.append(void_name)

        if self.options.set_reference_point:
            ref = section.reference_point
            try:
                self.sink.set_reference_point(name, ref.x, ref.y)
                report.reference_point_set = True
            except Exception as e:
                report.warnings.append(f"Reference point rejected: {e}")

        return report
