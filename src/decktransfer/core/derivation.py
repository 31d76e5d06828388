"""Centerline and cutline derivation for deck sections.

This module infers the slab/web skeleton of a section purely from its
polygon coordinates:

1. Slab centerlines at mid-thickness of the top and bottom slabs
2. Web centerlines midway between the section sides and the voids, and
   between adjacent voids
3. Horizontal cutlines through the second-highest and second-lowest
   void vertex levels
4. Vertical cutlines midway between adjacent web centerlines
5. A bounds check of every derived point against the exterior

The rules are heuristics, not closed-form results. Their thresholds come
from DerivationConfig and the defaults must be kept for downstream models
to line up.
"""

from dataclasses import dataclass, field

from decktransfer.config import DerivationConfig, GeometryConfig
from decktransfer.core.bounds import BoundsAnalyzer, SectionGeometryBounds
from decktransfer.domain import (
    Centerline,
    CenterlineType,
    Cutline,
    CutlineType,
    DeckSection,
    Point2D,
)
from decktransfer.exceptions import LineOutOfBoundsError


@dataclass
class DerivedLines:
    """Result of one derivation pass.

    Attributes:
        centerlines: Slab centerlines followed by web centerlines
        cutlines: Horizontal cutlines followed by vertical cutlines
        bounds: Section extrema the lines were derived from
    """

    centerlines: list[Centerline] = field(default_factory=list)
    cutlines: list[Cutline] = field(default_factory=list)
    bounds: SectionGeometryBounds | None = None


def select_second_level(
    values: list[float],
    descending: bool,
    tolerance: float = 1e-6,
    shared_fraction: float = 0.25,
) -> float | None:
    """Pick the "second" Y level from a sample of void vertex coordinates.

    Values are grouped within tolerance. If the second most frequent group
    holds at least shared_fraction of the samples it wins, so a level shared
    by most void tops or bottoms is preferred over a single stray vertex.
    Otherwise the second distinct value in the requested order is used.

    Args:
        values: Y samples
        descending: True to look from the top, False from the bottom
        tolerance: Grouping tolerance
        shared_fraction: Minimum share of samples for the group rule

    Returns:
        Selected level, or None for fewer than 2 samples
    """
    if len(values) < 2:
        return None

    ordered = sorted(values, reverse=descending)

    # Keys keep first-appearance order; the count sort below is stable.
    counts: dict[float, int] = {}
    for value in ordered:
        key = round(value / tolerance) * tolerance
        counts[key] = counts.get(key, 0) + 1

    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)

    if len(ranked) < 2:
        return ordered[1]

    second_key, second_count = ranked[1]
    if second_count >= len(ordered) * shared_fraction:
        return second_key

    unique = sorted(set(ordered), reverse=descending)
    if len(unique) >= 2:
        return unique[1]
    return None


def x_at_y(points: list[Point2D], target_y: float, tolerance: float = 1e-6) -> float:
    """Interpolate the X of a polyline at a given Y.

    Args:
        points: Polyline points
        target_y: Y to sample at
        tolerance: Segments with a smaller Y extent count as flat

    Returns:
        Interpolated X. Flat bracketing segments return their start X. A
        target outside the polyline's Y range returns the X of the lowest or
        highest point. An empty polyline returns 0.0.
    """
    if not points:
        return 0.0

    for a, b in zip(points, points[1:]):
        if min(a.y, b.y) <= target_y <= max(a.y, b.y):
            if abs(b.y - a.y) < tolerance:
                return a.x
            t = (target_y - a.y) / (b.y - a.y)
            return a.x + t * (b.x - a.x)

    lowest = min(points, key=lambda p: p.y)
    if target_y < lowest.y:
        return lowest.x
    return max(points, key=lambda p: p.y).x


def interpolate_between(
    left: list[Point2D], right: list[Point2D], tolerance: float = 1e-6
) -> list[Point2D]:
    """Build a 2-point line midway between two web polylines.

    The result spans the union of both Y ranges.

    Args:
        left: Left web polyline (bottom to top)
        right: Right web polyline (bottom to top)
        tolerance: Flat-segment tolerance for interpolation

    Returns:
        [bottom point, top point]
    """
    if len(left) == 2 and len(right) == 2:
        bottom = Point2D((left[0].x + right[0].x) / 2.0, min(left[0].y, right[0].y))
        top = Point2D((left[1].x + right[1].x) / 2.0, max(left[1].y, right[1].y))
        return [bottom, top]

    min_y = min(min(p.y for p in left), min(p.y for p in right))
    max_y = max(max(p.y for p in left), max(p.y for p in right))

    mid_bottom = (x_at_y(left, min_y, tolerance) + x_at_y(right, min_y, tolerance)) / 2.0
    mid_top = (x_at_y(left, max_y, tolerance) + x_at_y(right, max_y, tolerance)) / 2.0
    return [Point2D(mid_bottom, min_y), Point2D(mid_top, max_y)]


def validate_lines(
    centerlines: list[Centerline],
    cutlines: list[Cutline],
    bounds: SectionGeometryBounds,
    tolerance: float = 1e-6,
) -> None:
    """Check every derived point lies inside the section bounding box.

    Args:
        centerlines: Derived centerlines
        cutlines: Derived cutlines
        bounds: Section extrema
        tolerance: Amount the bounding box is expanded by

    Raises:
        LineOutOfBoundsError: On the first point outside the expanded box
    """
    x_min = bounds.min_x - tolerance
    x_max = bounds.max_x + tolerance
    y_min = bounds.bottom_surface_y - tolerance
    y_max = bounds.top_surface_y + tolerance

    checks: list[tuple[str, Centerline | Cutline]] = [
        ("Centerline", cl) for cl in centerlines
    ]
    checks.extend(("Cutline", cut) for cut in cutlines)

    for kind, line in checks:
        for point in line.points:
            if not (x_min <= point.x <= x_max and y_min <= point.y <= y_max):
                raise LineOutOfBoundsError(
                    line_kind=kind,
                    line_name=line.name,
                    point=point.to_tuple(),
                    bounds=(x_min, x_max, y_min, y_max),
                )


class CenterlineDeriver:
    """Derives centerlines and cutlines for deck sections.

    The deriver is stateless apart from its configuration. A failure at any
    stage aborts the whole pass.

    Example:
        deriver = CenterlineDeriver()
        lines = deriver.populate(section)
        print([cl.name for cl in section.centerlines])
    """

    def __init__(
        self,
        config: DerivationConfig | None = None,
        geometry: GeometryConfig | None = None,
    ) -> None:
        self.config = config or DerivationConfig()
        self.analyzer = BoundsAnalyzer(geometry)

    def derive(self, section: DeckSection) -> DerivedLines:
        """Derive lines for a section without modifying it.

        Args:
            section: Section with a non-empty exterior

        Returns:
            DerivedLines with centerlines, cutlines and bounds

        Raises:
            InvalidGeometryError: If the geometry is empty or a derived
                point falls outside the section
        """
        bounds = self.analyzer.analyze(section)

        centerlines = [
            self._top_slab_centerline(bounds),
            self._bottom_slab_centerline(bounds),
        ]
        centerlines.extend(self._web_centerlines(bounds))

        cutlines = self._horizontal_cutlines(section, bounds)
        cutlines.extend(self._vertical_cutlines(centerlines))

        validate_lines(centerlines, cutlines, bounds, self.config.tolerance)

        return DerivedLines(centerlines=centerlines, cutlines=cutlines, bounds=bounds)

    def populate(self, section: DeckSection) -> DerivedLines:
        """Derive lines and store them on the section.

        The section is only modified when derivation succeeds.

        Args:
            section: Section to populate

        Returns:
            DerivedLines that were assigned
        """
        lines = self.derive(section)
        section.centerlines = lines.centerlines
        section.cutlines = lines.cutlines
        return lines

    def _top_slab_centerline(self, bounds: SectionGeometryBounds) -> Centerline:
        if bounds.top_void_edge_y is not None:
            y = (bounds.top_surface_y + bounds.top_void_edge_y) / 2.0
            description = f"Top slab centerline at Y={y:.4f} (midpoint of top slab)"
        else:
            thickness = bounds.height * self.config.slab_thickness_ratio
            y = bounds.top_surface_y - thickness / 2.0
            description = (
                f"Top slab centerline at Y={y:.4f} (estimated thickness={thickness:.4f})"
            )

        return Centerline(
            points=[Point2D(bounds.min_x, y), Point2D(bounds.max_x, y)],
            line_type=CenterlineType.TOP_SLAB,
            name="TopSlabCL",
            description=description,
        )

    def _bottom_slab_centerline(self, bounds: SectionGeometryBounds) -> Centerline:
        if bounds.bottom_void_edge_y is not None:
            y = (bounds.bottom_surface_y + bounds.bottom_void_edge_y) / 2.0
            description = f"Bottom slab centerline at Y={y:.4f} (midpoint of bottom slab)"
        else:
            thickness = bounds.height * self.config.slab_thickness_ratio
            y = bounds.bottom_surface_y + thickness / 2.0
            description = (
                f"Bottom slab centerline at Y={y:.4f} (estimated thickness={thickness:.4f})"
            )

        return Centerline(
            points=[Point2D(bounds.min_x, y), Point2D(bounds.max_x, y)],
            line_type=CenterlineType.BOTTOM_SLAB,
            name="BottomSlabCL",
            description=description,
        )

    def _web_centerlines(self, bounds: SectionGeometryBounds) -> list[Centerline]:
        if not bounds.has_voids:
            return []

        voids = sorted(bounds.void_bounds, key=lambda vb: vb.centroid.x)

        def vertical(x: float) -> list[Point2D]:
            return [Point2D(x, bounds.bottom_surface_y), Point2D(x, bounds.top_surface_y)]

        left_x = (bounds.min_x + voids[0].min_x) / 2.0
        right_x = (bounds.max_x + voids[-1].max_x) / 2.0
        webs = [
            Centerline(
                points=vertical(left_x),
                line_type=CenterlineType.WEB_EXTERIOR,
                name="LeftWebCL",
                description=f"Left exterior web at X={left_x:.4f}",
            ),
            Centerline(
                points=vertical(right_x),
                line_type=CenterlineType.WEB_EXTERIOR,
                name="RightWebCL",
                description=f"Right exterior web at X={right_x:.4f}",
            ),
        ]

        for i, (left_void, right_void) in enumerate(zip(voids, voids[1:]), start=1):
            x = (left_void.max_x + right_void.min_x) / 2.0
            webs.append(
                Centerline(
                    points=vertical(x),
                    line_type=CenterlineType.WEB_INTERIOR,
                    name=f"Web{i}CL",
                    description=f"Interior web {i} at X={x:.4f}",
                )
            )

        return webs

    def _horizontal_cutlines(
        self, section: DeckSection, bounds: SectionGeometryBounds
    ) -> list[Cutline]:
        if not section.voids:
            return []

        void_ys = [p.y for void in section.voids for p in void.points]
        if len(void_ys) < 2:
            return []

        cutlines: list[Cutline] = []

        top_y = select_second_level(
            void_ys, True, self.config.tolerance, self.config.shared_level_fraction
        )
        if top_y is not None:
            cutlines.append(
                Cutline(
                    points=[Point2D(bounds.min_x, top_y), Point2D(bounds.max_x, top_y)],
                    line_type=CutlineType.HORIZONTAL_TOP,
                    name="TopCutline",
                    description=(
                        f"Top horizontal cutline at Y={top_y:.4f} (second-highest void points)"
                    ),
                )
            )

        bottom_y = select_second_level(
            void_ys, False, self.config.tolerance, self.config.shared_level_fraction
        )
        if bottom_y is not None:
            cutlines.append(
                Cutline(
                    points=[Point2D(bounds.min_x, bottom_y), Point2D(bounds.max_x, bottom_y)],
                    line_type=CutlineType.HORIZONTAL_BOTTOM,
                    name="BottomCutline",
                    description=(
                        f"Bottom horizontal cutline at Y={bottom_y:.4f} "
                        "(second-lowest void points)"
                    ),
                )
            )

        return cutlines

    def _vertical_cutlines(self, centerlines: list[Centerline]) -> list[Cutline]:
        webs = sorted(
            (
                cl for cl in centerlines
                if cl.line_type in (CenterlineType.WEB_EXTERIOR, CenterlineType.WEB_INTERIOR)
            ),
            key=lambda cl: cl.points[0].x,
        )

        cutlines: list[Cutline] = []
        for i, (left, right) in enumerate(zip(webs, webs[1:]), start=1):
            cutlines.append(
                Cutline(
                    points=interpolate_between(left.points, right.points, self.config.tolerance),
                    line_type=CutlineType.VERTICAL_WEB,
                    name=f"VerticalCut{i}",
                    description=f"Vertical cutline between {left.name} and {right.name}",
                )
            )
        return cutlines
