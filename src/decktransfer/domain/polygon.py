"""Core geometric types for section boundaries.

This module defines the fundamental geometric types used throughout decktransfer:
- Point2D: An immutable 2D coordinate
- Polygon: A closed boundary (exterior or void) of a deck section
- PolygonType: Solid or opening, using the analysis tool's type codes
- WindingDirection: Enum for polygon winding direction
"""

from dataclasses import dataclass, field
from enum import Enum, auto


class WindingDirection(Enum):
    """Polygon winding direction.

    Sections follow the screen convention of the source CAD tool:
    - Positive signed area is clockwise (exterior boundaries)
    - Negative signed area is counter-clockwise (voids)
    """

    CLOCKWISE = auto()
    COUNTER_CLOCKWISE = auto()


class PolygonType(Enum):
    """Polygon role inside a deck section.

    Values match the polygon type codes of the analysis-side bridge modeler.
    """

    SOLID = 1
    OPENING = 2


@dataclass(frozen=True, slots=True)
class Point2D:
    """A point in the section plane.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: Horizontal coordinate (transverse to the alignment)
        y: Vertical coordinate (elevation)
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)


@dataclass
class Polygon:
    """A closed boundary of a deck section.

    The polygon is closed implicitly: the last point connects back to the
    first, so the first point is never repeated at the end.

    Attributes:
        name: Polygon name ("Exterior", "Void_1", ...)
        polygon_type: Solid (exterior) or opening (void)
        points: Ordered vertices
        handle: Entity handle in the source CAD drawing, if known. Not
            persisted and excluded from equality.
    """

    name: str
    polygon_type: PolygonType
    points: list[Point2D] = field(default_factory=list)
    handle: str = field(default="", compare=False)

    @property
    def vertex_count(self) -> int:
        """Number of vertices."""
        return len(self.points)

    def is_valid(self) -> bool:
        """Check the polygon has enough vertices to enclose an area.

        Returns:
            True if the polygon has at least 3 points
        """
        return len(self.points) >= 3

    def is_opening(self) -> bool:
        """Check if this polygon is a void."""
        return self.polygon_type == PolygonType.OPENING

    def bounding_box(self) -> tuple[float, float, float, float]:
        """Calculate bounding box of the polygon.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y), all zero for an empty polygon
        """
        if not self.points:
            return (0.0, 0.0, 0.0, 0.0)

        xs = [p.x for p in self.points]
        ys = [p.y for p in self.points]
        return (min(xs), min(ys), max(xs), max(ys))
