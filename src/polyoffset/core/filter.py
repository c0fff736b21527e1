"""Collinear and duplicate point filtering.

Offset lines are built from segment normals, so every segment must have a
usable direction. This module removes consecutive duplicate points before
normals are built and decides which vertices are straight pass-throughs.
"""

import logging
from collections.abc import Sequence

from polyoffset.domain import Point, Segment, Vector
from polyoffset.exceptions import GeometryError

logger = logging.getLogger(__name__)

DEFAULT_DUPLICATE_TOLERANCE = 1e-6


def remove_duplicate_points(
    points: Sequence[Point], tolerance: float = DEFAULT_DUPLICATE_TOLERANCE
) -> tuple[list[Point], list[int]]:
    """Drop consecutive points that coincide with the last kept point.

    Segment ``i`` runs from ``points[i]`` to ``points[i + 1]``. A segment
    survives if its end point is kept; the returned indices let callers
    filter per-segment data (such as offset distances) in step.

    Args:
        points: Input points
        tolerance: Points closer than this to the last kept point are dropped

    Returns:
        Tuple of (kept points, indices of surviving segments)

    Examples:
        >>> pts = [Point(0.0, 0.0), Point(1.0, 0.0), Point(1.0, 0.0), Point(1.0, 1.0)]
        >>> kept, segments = remove_duplicate_points(pts)
        >>> len(kept), segments
        (3, [0, 2])
    """
    if not points:
        return [], []

    tolerance_sq = tolerance * tolerance
    kept = [points[0]]
    segments: list[int] = []
    for i in range(1, len(points)):
        p = points[i]
        if kept[-1].distance_sq_to(p) < tolerance_sq:
            logger.debug("Dropping duplicate point %d at (%s, %s)", i, p.x, p.y)
            continue
        kept.append(p)
        segments.append(i - 1)

    return kept, segments


def segment_normals(points: Sequence[Point], tolerance: float = DEFAULT_DUPLICATE_TOLERANCE) -> list[Vector]:
    """Build the unit left-hand normal of every segment.

    The normal is the segment direction rotated 90 degrees counter-clockwise,
    so there is one normal less than there are points.

    Args:
        points: Points without consecutive duplicates
        tolerance: Segments shorter than this are rejected

    Returns:
        List of unit normals, one per segment

    Raises:
        GeometryError: If a segment is shorter than the tolerance
    """
    normals: list[Vector] = []
    for i in range(len(points) - 1):
        segment = Segment(i, i + 1)
        v = segment.direction(points)
        length = v.length
        if length < tolerance:
            end = points[segment.end_index]
            raise GeometryError(
                f"Points {segment.start_index} and {segment.end_index} coincide at ({end.x}, {end.y})"
            )
        normals.append(Vector(-v.y / length, v.x / length))
    return normals


def is_collinear(n_prev: Vector, n_next: Vector, cosine_threshold: float) -> bool:
    """Check whether two consecutive segments run straight on.

    Args:
        n_prev: Unit normal of the incoming segment
        n_next: Unit normal of the outgoing segment
        cosine_threshold: Cosine of the largest turn angle still counted as straight

    Returns:
        True if the vertex between the segments is a pass-through
    """
    return n_prev.dot(n_next) >= cosine_threshold
