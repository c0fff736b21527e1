"""Low level geometric helpers for the offset engine.

This module provides:
- Signed area calculation (shoelace formula)
- Closed polyline detection
- Intersection of two lines given by a point and a direction
- Closest parameter of a point on a ray

All functions are pure and stateless.
"""

from collections.abc import Sequence

from polyoffset.domain import Point, Vector

DEFAULT_CLOSED_TOLERANCE_SQ = 1e-12


def signed_area(points: Sequence[Point]) -> float:
    """Calculate signed area of a polygon using the shoelace formula.

    The sign of the area indicates winding direction:
    - Positive area: counter-clockwise winding
    - Negative area: clockwise winding

    Args:
        points: Points forming the polygon boundary, closing duplicate optional

    Returns:
        Signed area in square units. Returns 0.0 for degenerate polygons.

    Examples:
        >>> square = [Point(0.0, 0.0), Point(1.0, 0.0), Point(1.0, 1.0), Point(0.0, 1.0)]
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


def is_closed(
    points: Sequence[Point], tolerance_sq: float = DEFAULT_CLOSED_TOLERANCE_SQ
) -> bool:
    """Check whether first and last point coincide.

    Args:
        points: Point sequence
        tolerance_sq: Maximum squared distance between first and last point

    Returns:
        True if the sequence has at least 3 points and is closed
    """
    if len(points) < 3:
        return False
    return points[0].distance_sq_to(points[-1]) <= tolerance_sq


def intersect_rays(
    a: Point, dir_a: Vector, b: Point, dir_b: Vector, tolerance: float = 1e-12
) -> Point | None:
    """Intersect two infinite lines given by a point and a direction each.

    Args:
        a: Point on the first line
        dir_a: Direction of the first line
        b: Point on the second line
        dir_b: Direction of the second line
        tolerance: Cross product below which the lines count as parallel

    Returns:
        The intersection point, or None if the lines are parallel
    """
    det = dir_a.cross(dir_b)
    if abs(det) < tolerance:
        return None
    t = (b - a).cross(dir_b) / det
    return a + dir_a * t


def closest_parameter(origin: Point, direction: Vector, point: Point) -> float:
    """Parameter of the point on a ray closest to ``point``.

    The ray is ``origin + direction * t``; t is 0 at the origin and 1 at
    ``origin + direction``. A zero direction yields 0.0.

    Examples:
        >>> closest_parameter(Point(0.0, 0.0), Vector(2.0, 0.0), Point(1.0, 5.0))
        0.5
    """
    length_sq = direction.length_sq
    if length_sq == 0.0:
        return 0.0
    return (point - origin).dot(direction) / length_sq


def lerp(a: Point, b: Point, t: float) -> Point:
    """Point at parameter t on the segment from a to b."""
    return a + (b - a) * t
