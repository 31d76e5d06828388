"""Reference line types derived from a section.

Centerlines are mid-thickness lines of slabs and webs used for shell/frame
idealization. Cutlines sit between centerlines and split the section into
modeling sub-regions. Both are polylines; the current derivation only
produces straight 2-point lines.
"""

import math
from dataclasses import dataclass, field
from enum import Enum

from decktransfer.domain.polygon import Point2D


class CenterlineType(Enum):
    """Structural element a centerline belongs to."""

    TOP_SLAB = "TopSlab"
    BOTTOM_SLAB = "BottomSlab"
    WEB_EXTERIOR = "WebExterior"
    WEB_INTERIOR = "WebInterior"


class CutlineType(Enum):
    """Orientation/role of a cutline."""

    HORIZONTAL_TOP = "HorizontalTop"
    HORIZONTAL_BOTTOM = "HorizontalBottom"
    VERTICAL_WEB = "VerticalWeb"


class _PolylineMixin:
    """Shared helpers for centerlines and cutlines."""

    points: list[Point2D]

    @property
    def start(self) -> Point2D:
        """First point of the polyline."""
        return self.points[0]

    @property
    def end(self) -> Point2D:
        """Last point of the polyline."""
        return self.points[-1]

    def length(self) -> float:
        """Total polyline length."""
        return sum(
            math.hypot(b.x - a.x, b.y - a.y)
            for a, b in zip(self.points, self.points[1:])
        )

    def is_horizontal(self, tolerance: float = 1e-6) -> bool:
        """Check if all points share one Y within tolerance."""
        return all(abs(p.y - self.start.y) < tolerance for p in self.points)

    def is_vertical(self, tolerance: float = 1e-6) -> bool:
        """Check if all points share one X within tolerance."""
        return all(abs(p.x - self.start.x) < tolerance for p in self.points)


@dataclass
class Centerline(_PolylineMixin):
    """Mid-thickness reference line of a slab or web.

    Attributes:
        points: Polyline points (at least 2)
        line_type: Slab or web classification
        name: Line name (e.g. "TopSlabCL", "Web1CL")
        description: Human-readable placement summary
    """

    points: list[Point2D] = field(default_factory=list)
    line_type: CenterlineType = CenterlineType.TOP_SLAB
    name: str = ""
    description: str = ""


@dataclass
class Cutline(_PolylineMixin):
    """Reference line between centerlines delimiting a modeling sub-region.

    Attributes:
        points: Polyline points (at least 2)
        line_type: Horizontal top/bottom or vertical web cut
        name: Line name (e.g. "TopCutline", "VerticalCut1")
        description: Human-readable placement summary
    """

    points: list[Point2D] = field(default_factory=list)
    line_type: CutlineType = CutlineType.VERTICAL_WEB
    name: str = ""
    description: str = ""
