"""Corner joining for uniform offset distances.

A regular corner yields the single intersection point of its two offset
lines. A U-turn corner is resolved by the selected UTurn policy, which may
yield zero, one or two points.
"""

import logging
import math

from polyoffset.core.classifier import turn_degrees
from polyoffset.domain import Corner, CornerKind, Point, UTurn, Vector
from polyoffset.exceptions import GeometryError, UTurnError

logger = logging.getLogger(__name__)

DEFAULT_REVERSAL_TOLERANCE = 1e-9


def miter_point(pt: Point, n_prev: Vector, n_next: Vector, distance: float, cosine: float) -> Point:
    """Intersect the offset lines of two segments meeting at ``pt``.

    Uses the closed form ``pt + (n_prev + n_next) * d / (1 + cos)``. For
    parallel normals this is simply ``pt + n * d``.

    Args:
        pt: The shared vertex
        n_prev: Unit normal of the incoming segment
        n_next: Unit normal of the outgoing segment
        distance: Offset distance of both segments
        cosine: Dot product of the normals, must be greater than -1

    Returns:
        The offset corner point
    """
    return pt + (n_prev + n_next) * (distance / (1.0 + cosine))


def is_exact_reversal(
    n_prev: Vector, n_next: Vector, tolerance: float = DEFAULT_REVERSAL_TOLERANCE
) -> bool:
    """True if the polyline turns back on itself by 180 degrees exactly."""
    return abs(n_prev.cross(n_next)) < tolerance and n_prev.dot(n_next) < 0.0


def reversal_bisector(
    n_prev: Vector, n_next: Vector, index: int = -1, tolerance: float = DEFAULT_REVERSAL_TOLERANCE
) -> Vector:
    """Unit vector halfway between two normals that nearly oppose each other.

    Built from the normal difference, which stays well conditioned when the
    normals are close to anti-parallel. The result points to the same side as
    both normals.

    Raises:
        GeometryError: If the normals are exactly opposed
    """
    if is_exact_reversal(n_prev, n_next, tolerance):
        raise GeometryError(
            f"Point {index} reverses direction by exactly 180 degrees, "
            "the offset side is undefined"
        )
    bisector = (n_prev - n_next).unitized().rotate90_ccw()
    if bisector.dot(n_prev) < 0.0:
        bisector = -bisector
    return bisector


def chamfer_points(
    pt: Point,
    n_prev: Vector,
    n_next: Vector,
    distance: float,
    index: int = -1,
    tolerance: float = DEFAULT_REVERSAL_TOLERANCE,
) -> tuple[Point, Point]:
    """Cap a U-turn with two points.

    The cap line has the reversal bisector as its normal and lies at
    ``distance`` from the vertex. Each point is the intersection of the cap
    line with one of the two offset lines.

    Returns:
        The points on the incoming and on the outgoing offset line
    """
    n_mid = reversal_bisector(n_prev, n_next, index, tolerance)
    half_cosine = n_prev.dot(n_mid)
    first = miter_point(pt, n_prev, n_mid, distance, half_cosine)
    second = miter_point(pt, n_mid, n_next, distance, half_cosine)
    return first, second


def threshold_point(
    pt: Point,
    n_prev: Vector,
    n_next: Vector,
    distance: float,
    cosine_threshold: float,
    index: int = -1,
    tolerance: float = DEFAULT_REVERSAL_TOLERANCE,
) -> Point:
    """Place one miter point as if the corner turned by the threshold angle.

    The point lies on the reversal bisector at ``distance / cos(half angle)``
    from the vertex, where the half angle belongs to the threshold turn.
    """
    n_mid = reversal_bisector(n_prev, n_next, index, tolerance)
    half_cosine = math.sqrt((1.0 + cosine_threshold) / 2.0)
    return pt + n_mid * (distance / half_cosine)


def join_uturn(
    corner: Corner,
    uturn: UTurn,
    cosine_threshold: float,
    tolerance: float = DEFAULT_REVERSAL_TOLERANCE,
) -> list[Point]:
    """Resolve a U-turn corner with equal distances by the given policy.

    Args:
        corner: The corner, with ``d_prev == d_next``
        uturn: U-turn policy
        cosine_threshold: Cosine of the U-turn threshold angle
        tolerance: Cross product below which the turn is an exact reversal

    Returns:
        Zero, one or two points

    Raises:
        UTurnError: If the policy is FAIL
        GeometryError: On an exact reversal with CHAMFER or USE_THRESHOLD
    """
    if uturn is UTurn.FAIL:
        raise UTurnError(
            corner.index, turn_degrees(corner.cosine), turn_degrees(cosine_threshold)
        )

    if uturn is UTurn.CHAMFER:
        return list(
            chamfer_points(
                corner.point, corner.n_prev, corner.n_next, corner.d_prev, corner.index, tolerance
            )
        )

    if uturn is UTurn.USE_THRESHOLD:
        return [
            threshold_point(
                corner.point,
                corner.n_prev,
                corner.n_next,
                corner.d_prev,
                cosine_threshold,
                corner.index,
                tolerance,
            )
        ]

    logger.debug("Skipping U-turn at point %d", corner.index)
    return []


def join_uniform(
    corner: Corner,
    uturn: UTurn,
    cosine_threshold: float,
    tolerance: float = DEFAULT_REVERSAL_TOLERANCE,
) -> list[Point]:
    """Offset one corner whose two segments share a distance.

    Near reversals are handed to ``join_uturn``. Every other kind yields the
    miter point.
    """
    if corner.kind is CornerKind.NEAR_REVERSAL:
        return join_uturn(corner, uturn, cosine_threshold, tolerance)
    return [miter_point(corner.point, corner.n_prev, corner.n_next, corner.d_prev, corner.cosine)]
