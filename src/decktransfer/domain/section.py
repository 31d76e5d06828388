"""Deck section representation.

This module defines the deck section domain model: the exterior boundary,
its voids, section properties and the derived centerlines/cutlines.
"""

from dataclasses import dataclass, field

from decktransfer.domain.lines import Centerline, CenterlineType, Cutline
from decktransfer.domain.polygon import Point2D, Polygon, PolygonType


@dataclass
class ReferencePoint:
    """Insertion point of the section in the analysis model.

    Attributes:
        x: X coordinate
        y: Y coordinate
        description: How the point was chosen (e.g. "Section centroid")
    """

    x: float = 0.0
    y: float = 0.0
    description: str = ""


@dataclass
class MaterialProperties:
    """Concrete material assigned to the section.

    Attributes:
        concrete_strength: Characteristic compressive strength (MPa)
        density: Mass density (kg/m3)
        elastic_modulus: Young's modulus (MPa)
    """

    concrete_strength: float = 30.0
    density: float = 2400.0
    elastic_modulus: float = 30000.0

    def __post_init__(self) -> None:
        for label, value in (
            ("concrete_strength", self.concrete_strength),
            ("density", self.density),
            ("elastic_modulus", self.elastic_modulus),
        ):
            if value <= 0:
                raise ValueError(f"{label} must be positive, got {value}")


@dataclass
class DeckSection:
    """A bridge-deck cross-section.

    Centerlines and cutlines are derived data: they are excluded from
    equality so a section compares equal to its reloaded copy.

    Attributes:
        name: Section name
        station: Position along the alignment (passthrough)
        area: Net area (exterior minus voids)
        centroid: Centroid of the exterior boundary
        reference_point: Insertion point for the analysis model
        material: Concrete properties
        exterior: Exterior boundary (solid, clockwise)
        voids: Interior openings (counter-clockwise)
        centerlines: Derived slab/web centerlines
        cutlines: Derived cutlines
    """

    name: str = ""
    station: float = 0.0
    area: float = 0.0
    centroid: Point2D = field(default_factory=lambda: Point2D(0.0, 0.0))
    reference_point: ReferencePoint = field(default_factory=ReferencePoint)
    material: MaterialProperties = field(default_factory=MaterialProperties)
    exterior: Polygon = field(
        default_factory=lambda: Polygon(name="Exterior", polygon_type=PolygonType.SOLID)
    )
    voids: list[Polygon] = field(default_factory=list)
    centerlines: list[Centerline] = field(default_factory=list, compare=False)
    cutlines: list[Cutline] = field(default_factory=list, compare=False)

    @property
    def void_count(self) -> int:
        """Number of interior voids."""
        return len(self.voids)

    def has_voids(self) -> bool:
        """Check if the section has interior voids."""
        return len(self.voids) > 0

    def get_void(self, name: str) -> Polygon | None:
        """Get a void by name.

        Args:
            name: Void name (e.g. "Void_1")

        Returns:
            Matching void, or None if not found
        """
        for void in self.voids:
            if void.name == name:
                return void
        return None

    def web_centerlines(self) -> list[Centerline]:
        """Get exterior and interior web centerlines, left to right."""
        webs = [
            cl for cl in self.centerlines
            if cl.line_type in (CenterlineType.WEB_EXTERIOR, CenterlineType.WEB_INTERIOR)
        ]
        return sorted(webs, key=lambda cl: cl.points[0].x)

    def has_derived_lines(self) -> bool:
        """Check if centerlines or cutlines have been derived."""
        return bool(self.centerlines or self.cutlines)

    def clear_derived(self) -> None:
        """Drop derived centerlines and cutlines."""
        self.centerlines = []
        self.cutlines = []
