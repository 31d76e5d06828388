"""Section extrema used by centerline and cutline derivation.

The analyzer reduces a section to the handful of coordinates the derivation
rules need: the overall bounding box, the top and bottom surfaces, and the
void edges closest to each surface and side.
"""

from dataclasses import dataclass, field

from decktransfer.config import GeometryConfig
from decktransfer.core.geometry import bounding_box, polygon_centroid
from decktransfer.domain import DeckSection, Point2D
from decktransfer.exceptions import InvalidGeometryError


@dataclass
class VoidBounds:
    """Bounding box and centroid of one void.

    Attributes:
        void_name: Name of the void polygon
        min_x, max_x, min_y, max_y: Void bounding box
        centroid: Area-weighted centroid of the void
    """

    void_name: str
    min_x: float
    max_x: float
    min_y: float
    max_y: float
    centroid: Point2D


@dataclass
class SectionGeometryBounds:
    """Extrema of a section, owned by a single derivation pass.

    The four void-edge values are None when the section has no voids.

    Attributes:
        min_x, max_x, min_y, max_y: Exterior bounding box
        top_surface_y: Highest exterior Y
        bottom_surface_y: Lowest exterior Y
        top_void_edge_y: Lowest void top (closest to the top slab soffit)
        bottom_void_edge_y: Highest void bottom (closest to the bottom slab)
        leftmost_void_edge_x: Smallest void min X
        rightmost_void_edge_x: Largest void max X
        void_bounds: Per-void bounds in section order
    """

    min_x: float
    max_x: float
    min_y: float
    max_y: float
    top_surface_y: float
    bottom_surface_y: float
    top_void_edge_y: float | None = None
    bottom_void_edge_y: float | None = None
    leftmost_void_edge_x: float | None = None
    rightmost_void_edge_x: float | None = None
    void_bounds: list[VoidBounds] = field(default_factory=list)

    @property
    def width(self) -> float:
        """Overall section width."""
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        """Overall section depth."""
        return self.max_y - self.min_y

    @property
    def has_voids(self) -> bool:
        """Check if any void bounds were collected."""
        return len(self.void_bounds) > 0


class BoundsAnalyzer:
    """Computes section-level extrema from a section's polygons.

    The analyzer is stateless apart from its configuration.
    """

    def __init__(self, config: GeometryConfig | None = None) -> None:
        self.config = config or GeometryConfig()

    def analyze(self, section: DeckSection) -> SectionGeometryBounds:
        """Analyze a section's exterior and voids.

        Args:
            section: Section with a non-empty exterior boundary

        Returns:
            SectionGeometryBounds for the section

        Raises:
            InvalidGeometryError: If the exterior or a void has no points
        """
        exterior_points = section.exterior.points
        if not exterior_points:
            raise InvalidGeometryError(
                f"Exterior boundary of section '{section.name}' has no points"
            )

        min_x, min_y, max_x, max_y = bounding_box(exterior_points)
        bounds = SectionGeometryBounds(
            min_x=min_x,
            max_x=max_x,
            min_y=min_y,
            max_y=max_y,
            top_surface_y=max_y,
            bottom_surface_y=min_y,
        )

        if not section.voids:
            return bounds

        for void in section.voids:
            if not void.points:
                raise InvalidGeometryError(
                    f"Void '{void.name}' of section '{section.name}' has no points"
                )
            v_min_x, v_min_y, v_max_x, v_max_y = bounding_box(void.points)
            bounds.void_bounds.append(
                VoidBounds(
                    void_name=void.name,
                    min_x=v_min_x,
                    max_x=v_max_x,
                    min_y=v_min_y,
                    max_y=v_max_y,
                    centroid=polygon_centroid(void.points, self.config.degenerate_area),
                )
            )

        bounds.top_void_edge_y = min(vb.max_y for vb in bounds.void_bounds)
        bounds.bottom_void_edge_y = max(vb.min_y for vb in bounds.void_bounds)
        bounds.leftmost_void_edge_x = min(vb.min_x for vb in bounds.void_bounds)
        bounds.rightmost_void_edge_x = max(vb.max_x for vb in bounds.void_bounds)

        return bounds
