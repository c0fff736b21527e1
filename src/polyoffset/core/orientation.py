"""Offset side resolution.

The engine always offsets along left-hand segment normals. For closed
polylines callers usually want a positive distance to mean inward, whatever
the winding; the helpers here compute the factor that makes it so.
"""

from collections.abc import Sequence

from polyoffset.core.geometry import signed_area
from polyoffset.domain import Point
from polyoffset.exceptions import GeometryError


def orientation_sign(points: Sequence[Point], reference_orient: float = 0.0) -> float:
    """Get the winding sign of a point loop.

    Args:
        points: Points of the loop, closing duplicate optional
        reference_orient: If non-zero, its sign is returned and the winding
            is not computed

    Returns:
        1.0 for counter-clockwise winding, -1.0 for clockwise

    Raises:
        GeometryError: If the loop has zero signed area

    Examples:
        >>> square = [Point(0.0, 0.0), Point(1.0, 0.0), Point(1.0, 1.0), Point(0.0, 1.0)]
        >>> orientation_sign(square), orientation_sign(square[::-1])
        (1.0, -1.0)
    """
    if reference_orient != 0.0:
        return 1.0 if reference_orient > 0.0 else -1.0

    area = signed_area(points)
    if area == 0.0:
        raise GeometryError(
            f"Cannot derive winding of {len(points)} points with zero signed area"
        )
    return 1.0 if area > 0.0 else -1.0


def resolve_sign(
    points: Sequence[Point],
    closed: bool,
    loop: bool = False,
    reference_orient: float = 0.0,
) -> float:
    """Get the factor applied to offset distances before offsetting.

    Closed or looped input uses the winding so that a positive distance
    offsets inward. Open input offsets to the left for positive distances
    unless ``reference_orient`` pins the side.

    Args:
        points: Input points
        closed: Whether the input is closed
        loop: Whether open input is treated as a loop
        reference_orient: Sign override, 0.0 for automatic

    Returns:
        1.0 or -1.0
    """
    if closed or loop:
        return orientation_sign(points, reference_orient)
    if reference_orient == 0.0:
        return 1.0
    return 1.0 if reference_orient > 0.0 else -1.0
