"""Polyline-level offsetting.

Adds what a bare point list cannot express on top of the engine: treating
an open polyline as a loop, and offsetting loops inward for positive
distances whatever their winding.
"""

import logging
from collections.abc import Sequence

from polyoffset.config import PolyoffsetSettings, get_default_settings
from polyoffset.core.geometry import is_closed
from polyoffset.core.offset import offset_ex, offset_variable_ex
from polyoffset.core.orientation import resolve_sign
from polyoffset.domain import Point, Polyline2D, UTurn, VarDistParallel
from polyoffset.exceptions import ArgumentError, DistanceCountError
from polyoffset.utils.logging import OffsetLogger

logger = logging.getLogger(__name__)


def offset_polyline(
    polyline: Polyline2D | Sequence[Point],
    distance: float | Sequence[float],
    loop: bool = False,
    reference_orient: float = 0.0,
    *,
    uturn: UTurn | str | None = None,
    var_dist_parallel: VarDistParallel | str | None = None,
    settings: PolyoffsetSettings | None = None,
    offset_logger: OffsetLogger | None = None,
) -> Polyline2D:
    """Offset a polyline by one distance or by one distance per segment.

    Closed polylines (first point equals last point) are offset inward for
    positive distances, on either winding. Open polylines are offset to the
    left of the direction of travel, unless ``loop`` is set: then the last
    point is joined back to the first, distances count one per point, the
    offset is computed as for a closed loop, and the result stays open.

    Args:
        polyline: Polyline or sequence of points
        distance: One distance, or a sequence with one distance per segment
            (one per point when looping an open polyline); a sequence with a
            single distance offsets every segment by it
        loop: Treat an open polyline as closed from its last point to its first
        reference_orient: If non-zero, its sign replaces winding detection:
            positive assumes counter-clockwise, negative clockwise
        uturn: U-turn policy (from settings if None)
        var_dist_parallel: Collinear distance policy (from settings if None)
        settings: Library settings (defaults if None)
        offset_logger: Collects corner statistics

    Returns:
        New Polyline2D, closed iff the input is closed

    Raises:
        ArgumentError: On too few points or a distance count mismatch
        GeometryError: If a loop has zero area and no reference orientation
    """
    settings = settings or get_default_settings()
    line = polyline if isinstance(polyline, Polyline2D) else Polyline2D.of(polyline)
    points = list(line.points)
    if len(points) < 2:
        raise ArgumentError(f"At least 2 points are required but got {len(points)}")
    uturn = UTurn(uturn) if uturn is not None else settings.offset.uturn
    var_dist_parallel = (
        VarDistParallel(var_dist_parallel)
        if var_dist_parallel is not None
        else settings.offset.var_dist_parallel
    )

    closed = is_closed(points, settings.tolerance.closed_tolerance_sq)
    looping = loop and not closed
    if looping:
        points.append(points[0])
    sign = resolve_sign(points, closed, looping, reference_orient)
    logger.debug(
        "Offsetting %d points, closed=%s, loop=%s, sign=%s",
        len(line.points),
        closed,
        looping,
        sign,
    )

    if isinstance(distance, Sequence) and len(distance) == 1:
        distance = distance[0]

    if isinstance(distance, Sequence):
        expected = len(points) - 1
        if len(distance) != expected:
            context = "one per point for a looped polyline" if looping else "one per segment"
            raise DistanceCountError(len(distance), expected, context)
        result = offset_variable_ex(
            uturn,
            var_dist_parallel,
            [d * sign for d in distance],
            points,
            settings=settings,
            offset_logger=offset_logger,
        )
    else:
        result = offset_ex(
            settings.offset.uturn_cosine(),
            uturn,
            distance * sign,
            points,
            settings=settings,
            offset_logger=offset_logger,
        )

    if looping:
        result = result[:-1]
    return Polyline2D(result)
