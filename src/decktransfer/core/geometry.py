"""Geometric operations on section polygons.

This module provides the polygon math used throughout decktransfer:
- Signed area calculation (shoelace formula)
- Area-weighted centroid
- Winding direction detection and normalization
- Perimeter and bounding box
- Net section area (exterior minus voids)

All functions are pure and never mutate their input.
"""

import math

from decktransfer.domain import DeckSection, Point2D, WindingDirection
from decktransfer.exceptions import InvalidGeometryError

DEGENERATE_AREA = 1e-10


def signed_area(points: list[Point2D]) -> float:
    """Calculate signed area of a polygon using the shoelace formula.

    The sign of the area indicates winding direction in the section's
    screen convention:
    - Positive area: clockwise winding
    - Negative area: counter-clockwise winding

    Args:
        points: Polygon vertices (closed implicitly)

    Returns:
        Signed area in square units. Returns 0.0 for fewer than 3 points.

    Examples:
        >>> square = [Point2D(0, 0), Point2D(1, 0), Point2D(1, 1), Point2D(0, 1)]
        >>> signed_area(square)
        1.0
        >>> signed_area(square[::-1])
        -1.0
    """
    n = len(points)
    if n < 3:
        return 0.0

    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += points[i].x * points[j].y
        area -= points[j].x * points[i].y

    return area / 2.0


def polygon_centroid(
    points: list[Point2D], degenerate_area: float = DEGENERATE_AREA
) -> Point2D:
    """Calculate the area-weighted centroid of a polygon.

    Callers must treat the (0, 0) result for degenerate input as "no
    centroid", not as a real location.

    Args:
        points: Polygon vertices (closed implicitly)
        degenerate_area: Absolute area below which the polygon is degenerate

    Returns:
        Centroid point, or Point2D(0, 0) for fewer than 3 points or a
        degenerate polygon
    """
    n = len(points)
    if n < 3:
        return Point2D(0.0, 0.0)

    area = signed_area(points)
    if abs(area) < degenerate_area:
        return Point2D(0.0, 0.0)

    cx = 0.0
    cy = 0.0
    for i in range(n):
        j = (i + 1) % n
        cross = points[i].x * points[j].y - points[j].x * points[i].y
        cx += (points[i].x + points[j].x) * cross
        cy += (points[i].y + points[j].y) * cross

    factor = 6.0 * area
    return Point2D(cx / factor, cy / factor)


def winding_direction(points: list[Point2D]) -> WindingDirection | None:
    """Determine winding direction from the sign of the signed area.

    Args:
        points: Polygon vertices

    Returns:
        Winding direction, or None for zero-area polygons
    """
    area = signed_area(points)
    if area > 0:
        return WindingDirection.CLOCKWISE
    if area < 0:
        return WindingDirection.COUNTER_CLOCKWISE
    return None


def ensure_clockwise(points: list[Point2D]) -> list[Point2D]:
    """Return the vertices in clockwise order (non-negative signed area).

    Args:
        points: Polygon vertices

    Returns:
        New list, reversed if the input winds counter-clockwise
    """
    if len(points) >= 3 and signed_area(points) < 0:
        return list(reversed(points))
    return list(points)


def ensure_counter_clockwise(points: list[Point2D]) -> list[Point2D]:
    """Return the vertices in counter-clockwise order (non-positive signed area).

    Args:
        points: Polygon vertices

    Returns:
        New list, reversed if the input winds clockwise
    """
    if len(points) >= 3 and signed_area(points) > 0:
        return list(reversed(points))
    return list(points)


def net_area(section: DeckSection) -> float:
    """Calculate net area of a section (exterior minus voids).

    Args:
        section: The deck section

    Returns:
        |area(exterior)| minus the sum of |area(void)|
    """
    exterior_area = abs(signed_area(section.exterior.points))
    voids_area = sum(abs(signed_area(void.points)) for void in section.voids)
    return exterior_area - voids_area


def perimeter(points: list[Point2D]) -> float:
    """Calculate the perimeter of a closed polygon.

    Args:
        points: Polygon vertices (closed implicitly)

    Returns:
        Sum of edge lengths, 0.0 for fewer than 2 points
    """
    n = len(points)
    if n < 2:
        return 0.0

    total = 0.0
    for i in range(n):
        j = (i + 1) % n
        total += math.hypot(points[j].x - points[i].x, points[j].y - points[i].y)
    return total


def bounding_box(points: list[Point2D]) -> tuple[float, float, float, float]:
    """Calculate the bounding box of a point list.

    Args:
        points: Points to bound

    Returns:
        Tuple of (min_x, min_y, max_x, max_y)

    Raises:
        InvalidGeometryError: If the point list is empty
    """
    if not points:
        raise InvalidGeometryError("Cannot compute bounding box of an empty point list")

    xs = [p.x for p in points]
    ys = [p.y for p in points]
    return (min(xs), min(ys), max(xs), max(ys))
