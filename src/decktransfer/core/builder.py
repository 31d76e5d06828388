"""Assemble a deck section from raw CAD polygons.

The design-side tool hands over the selected closed polylines without
saying which one is the outline. The builder picks the largest polygon as
the exterior, treats the rest as voids, normalizes winding and computes
the section properties.
"""

from collections.abc import Iterable, Sequence
from enum import Enum

from decktransfer.config import GeometryConfig
from decktransfer.core.geometry import (
    ensure_clockwise,
    ensure_counter_clockwise,
    net_area,
    polygon_centroid,
    signed_area,
)
from decktransfer.domain import (
    DeckSection,
    MaterialProperties,
    Point2D,
    Polygon,
    PolygonType,
    ReferencePoint,
)
from decktransfer.exceptions import InvalidGeometryError

DEFAULT_SECTION_NAME = "DeckSection_01"


class ReferencePointMode(str, Enum):
    """How the section insertion point is chosen."""

    CENTERLINE = "centerline"
    CENTROID = "centroid"
    PICK = "pick"


def polygons_from_coordinates(
    coordinates: Iterable[Sequence[tuple[float, float]]],
    handles: Sequence[str] | None = None,
) -> list[Polygon]:
    """Wrap raw vertex lists as unnamed polygons.

    Args:
        coordinates: One (x, y) sequence per selected polyline
        handles: Optional source handles, parallel to coordinates

    Returns:
        Polygons in selection order (type SOLID until assigned)
    """
    polygons = []
    for idx, coords in enumerate(coordinates):
        polygons.append(
            Polygon(
                name="",
                polygon_type=PolygonType.SOLID,
                points=[Point2D(float(x), float(y)) for x, y in coords],
                handle=handles[idx] if handles else "",
            )
        )
    return polygons


def resolve_reference_point(
    mode: ReferencePointMode,
    centroid: Point2D,
    picked_point: Point2D | None = None,
) -> ReferencePoint:
    """Build the reference point for the chosen mode.

    Args:
        mode: Reference point choice
        centroid: Section centroid (used by CENTROID)
        picked_point: User-picked point (used by PICK)

    Returns:
        ReferencePoint, (0, 0, "Default") when PICK has no point
    """
    if mode == ReferencePointMode.CENTERLINE:
        return ReferencePoint(x=0.0, y=0.0, description="Centerline at origin")
    if mode == ReferencePointMode.CENTROID:
        return ReferencePoint(x=centroid.x, y=centroid.y, description="Section centroid")
    if mode == ReferencePointMode.PICK and picked_point is not None:
        return ReferencePoint(x=picked_point.x, y=picked_point.y, description="Custom point")
    return ReferencePoint(x=0.0, y=0.0, description="Default")


class SectionBuilder:
    """Builds DeckSection instances from selected polygons.

    Example:
        builder = SectionBuilder()
        section = builder.build(polygons_from_coordinates(selection), name="Pier3")
    """

    def __init__(self, config: GeometryConfig | None = None) -> None:
        self.config = config or GeometryConfig()

    def build(
        self,
        polygons: Sequence[Polygon],
        name: str = DEFAULT_SECTION_NAME,
        station: float = 0.0,
        reference: ReferencePointMode = ReferencePointMode.CENTERLINE,
        picked_point: Point2D | None = None,
        material: MaterialProperties | None = None,
    ) -> DeckSection:
        """Classify polygons and compute section properties.

        Args:
            polygons: Selected polygons in selection order
            name: Section name (blank falls back to the default name)
            station: Station along the alignment
            reference: Reference point choice
            picked_point: Point for ReferencePointMode.PICK
            material: Material properties (defaults if None)

        Returns:
            DeckSection with exterior, voids, area and centroid set

        Raises:
            InvalidGeometryError: If nothing is selected, a polygon has fewer
                than 3 points, or the exterior has no area
        """
        if not polygons:
            raise InvalidGeometryError("No polygons selected")

        for idx, polygon in enumerate(polygons):
            if not polygon.is_valid():
                raise InvalidGeometryError(
                    f"Polygon {idx} ('{polygon.name or polygon.handle or 'unnamed'}') "
                    f"has {polygon.vertex_count} points, at least 3 are required"
                )

        # sorted() is stable: equal areas keep selection order
        ranked = sorted(polygons, key=lambda p: abs(signed_area(p.points)), reverse=True)

        outline = ranked[0]
        if abs(signed_area(outline.points)) < self.config.degenerate_area:
            raise InvalidGeometryError("Exterior boundary has zero area")

        exterior = Polygon(
            name="Exterior",
            polygon_type=PolygonType.SOLID,
            points=ensure_clockwise(outline.points),
            handle=outline.handle,
        )
        voids = [
            Polygon(
                name=f"Void_{idx}",
                polygon_type=PolygonType.OPENING,
                points=ensure_counter_clockwise(polygon.points),
                handle=polygon.handle,
            )
            for idx, polygon in enumerate(ranked[1:], start=1)
        ]

        section = DeckSection(
            name=name.strip() or DEFAULT_SECTION_NAME,
            station=station,
            material=material or MaterialProperties(),
            exterior=exterior,
            voids=voids,
        )
        section.area = net_area(section)
        section.centroid = polygon_centroid(exterior.points, self.config.degenerate_area)
        section.reference_point = resolve_reference_point(
            reference, section.centroid, picked_point
        )
        return section
