"""Corner classification.

Every vertex is one of:
- CONVEX: The offset lies on the outer side of the turn
- REFLEX: The offset lies on the inner side of the turn
- NEAR_REVERSAL: The turn exceeds the U-turn threshold
- COLLINEAR: The segments run straight on within the parallel threshold

The engine builds one Corner per vertex with ``build_corner`` and picks the
join from its kind.
"""

import math

from polyoffset.core.filter import is_collinear
from polyoffset.domain import Corner, CornerKind, Point, Vector

DEFAULT_UTURN_DEGREES = 170.0


def cosine_of_degrees(degrees: float) -> float:
    """Convert a turn angle in degrees to the cosine between segment normals.

    Examples:
        >>> round(cosine_of_degrees(90.0), 12)
        0.0
    """
    return math.cos(math.radians(degrees))


def turn_degrees(cosine: float) -> float:
    """Convert the cosine between segment normals back to a turn angle."""
    return math.degrees(math.acos(max(-1.0, min(1.0, cosine))))


def classify_corner(
    n_prev: Vector,
    n_next: Vector,
    side: float,
    cosine_threshold: float = cosine_of_degrees(DEFAULT_UTURN_DEGREES),
    parallel_threshold: float | None = None,
) -> CornerKind:
    """Classify a corner between two segments.

    Args:
        n_prev: Unit normal of the incoming segment
        n_next: Unit normal of the outgoing segment
        side: Signed offset distance, positive for the left-hand side
        cosine_threshold: Cosines at or below this are U-turns
        parallel_threshold: Cosines at or above this are collinear; None
            classifies every non-reversal by its turn direction

    Returns:
        The corner kind
    """
    if n_prev.dot(n_next) <= cosine_threshold:
        return CornerKind.NEAR_REVERSAL
    if parallel_threshold is not None and is_collinear(n_prev, n_next, parallel_threshold):
        return CornerKind.COLLINEAR

    # a left turn has its inner side on the left
    if n_prev.cross(n_next) * side > 0.0:
        return CornerKind.REFLEX
    return CornerKind.CONVEX


def build_corner(
    index: int,
    point: Point,
    n_prev: Vector,
    n_next: Vector,
    d_prev: float,
    d_next: float,
    cosine_threshold: float = cosine_of_degrees(DEFAULT_UTURN_DEGREES),
    parallel_threshold: float | None = None,
) -> Corner:
    """Build the classified corner at one vertex.

    The offset side is taken from the sum of both distances, so a corner
    whose incoming distance is zero is still classified by its outgoing one.
    """
    kind = classify_corner(n_prev, n_next, d_prev + d_next, cosine_threshold, parallel_threshold)
    return Corner(index, point, n_prev, n_next, d_prev, d_next, n_prev.dot(n_next), kind)
