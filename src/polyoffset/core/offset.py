"""Offset engine loops and public entry points.

The engine walks the vertices once, building the corner at each vertex from
the normals of its two segments and handing it to the uniform or the
variable-distance joiner. Closed input (first point equals last point) is
walked as a loop and the result is closed again; open input gets plain
perpendicular end points.

Two families of entry points exist:
- offset / offset_ex: One distance for all segments
- offset_variable / offset_variable_ex: One distance per segment

Positive distances offset to the left of the direction of travel, which is
inward on counter-clockwise loops.
"""

import math
import numbers
from collections.abc import Sequence
from typing import Any

from polyoffset.config import PolyoffsetSettings, get_default_settings
from polyoffset.core.classifier import build_corner, turn_degrees
from polyoffset.core.filter import remove_duplicate_points, segment_normals
from polyoffset.core.geometry import is_closed
from polyoffset.core.joiner import DEFAULT_REVERSAL_TOLERANCE, join_uniform
from polyoffset.core.variable import (
    ProjectFix,
    ProportionalFix,
    close_deferred,
    join_collinear,
    join_uturn_variable,
    variable_miter_point,
)
from polyoffset.domain import CornerKind, Point, UTurn, VarDistParallel, Vector
from polyoffset.exceptions import ArgumentError, DistanceCountError
from polyoffset.utils.logging import OffsetLogger

DEFAULT_UTURN_COSINE = math.cos(math.radians(170.0))
DEFAULT_PARALLEL_COSINE = math.cos(math.radians(2.5))
CLOSED_TOLERANCE_SQ = 1e-12


def _is_distance(value: Any) -> bool:
    return isinstance(value, numbers.Real)


def _is_distance_list(value: Any) -> bool:
    return (
        isinstance(value, Sequence)
        and not isinstance(value, (str, bytes))
        and len(value) > 0
        and _is_distance(value[0])
    )


def _check_finite(distances: Sequence[float]) -> None:
    for i, d in enumerate(distances):
        if not math.isfinite(d):
            raise ArgumentError(f"Offset distance {i} is not finite: {d}")


def _prepare_points(points: Any, operation: str) -> list[Point]:
    try:
        coerced = [Point.of(p) for p in points]
    except (TypeError, ValueError) as e:
        raise ArgumentError(f"{operation}: points must be (x, y) pairs: {e}") from e
    if len(coerced) < 2:
        raise ArgumentError(
            f"{operation}: at least 2 points are required but got {len(coerced)}"
        )
    return coerced


def _dedupe(
    points: list[Point], settings: PolyoffsetSettings, operation: str, offset_logger: OffsetLogger
) -> tuple[list[Point], list[int]]:
    kept, segments = remove_duplicate_points(points, settings.tolerance.duplicate_tolerance)
    offset_logger.log_duplicates(len(points) - len(kept))
    if len(kept) < 2:
        raise ArgumentError(f"{operation}: all {len(points)} points coincide")
    return kept, segments


def offset_with_normals(
    points: Sequence[Point],
    normals: Sequence[Vector],
    distance: float,
    uturn: UTurn = UTurn.CHAMFER,
    cosine_threshold: float = DEFAULT_UTURN_COSINE,
    *,
    parallel_threshold: float = DEFAULT_PARALLEL_COSINE,
    reversal_tolerance: float = DEFAULT_REVERSAL_TOLERANCE,
    closed_tolerance_sq: float = CLOSED_TOLERANCE_SQ,
    offset_logger: OffsetLogger | None = None,
) -> list[Point]:
    """Offset all segments by one distance, using precomputed normals.

    Args:
        points: Points without consecutive duplicates
        normals: Unit left-hand normal of every segment, one less than points
        distance: Offset distance, positive to the left
        uturn: What to do at corners turning beyond the threshold
        cosine_threshold: Cosines between normals at or below this are U-turns
        parallel_threshold: Cosines at or above this are straight pass-throughs
        reversal_tolerance: Cross product below which a U-turn is an exact reversal
        closed_tolerance_sq: Squared distance below which first equals last
        offset_logger: Collects corner statistics

    Returns:
        New list of offset points; closed if the input is closed

    Raises:
        ArgumentError: If there are fewer than 2 points or normals do not match
        GeometryError: If a U-turn cannot be resolved
    """
    if len(points) < 2:
        raise ArgumentError(f"At least 2 points are required but got {len(points)}")
    if len(normals) != len(points) - 1:
        raise ArgumentError(
            f"Expected {len(points) - 1} segment normals but got {len(normals)}"
        )
    offset_logger = offset_logger if offset_logger is not None else OffsetLogger()
    uturn = UTurn(uturn)

    closed = is_closed(points, closed_tolerance_sq)
    result: list[Point] = []
    if closed:
        start = 0
        n_prev = normals[-1]
    else:
        start = 1
        n_prev = normals[0]
        result.append(points[0] + n_prev * distance)

    for i in range(start, len(points) - 1):
        n_next = normals[i]
        corner = build_corner(
            i, points[i], n_prev, n_next, distance, distance, cosine_threshold, parallel_threshold
        )
        offset_logger.log_corner(i, corner.kind)
        emitted = join_uniform(corner, uturn, cosine_threshold, reversal_tolerance)
        if corner.kind is CornerKind.NEAR_REVERSAL:
            offset_logger.log_uturn(i, turn_degrees(corner.cosine), uturn.value, len(emitted))
        result.extend(emitted)
        n_prev = n_next

    if closed:
        if result:
            result.append(result[0])
    else:
        result.append(points[-1] + normals[-1] * distance)
    return result


def offset_variable_with_normals(
    points: Sequence[Point],
    normals: Sequence[Vector],
    distances: Sequence[float],
    uturn: UTurn = UTurn.CHAMFER,
    var_dist_parallel: VarDistParallel = VarDistParallel.PROPORTIONAL,
    cosine_threshold: float = DEFAULT_UTURN_COSINE,
    parallel_threshold: float = DEFAULT_PARALLEL_COSINE,
    *,
    equal_distance_tolerance: float = 1e-6,
    reversal_tolerance: float = DEFAULT_REVERSAL_TOLERANCE,
    closed_tolerance_sq: float = CLOSED_TOLERANCE_SQ,
    offset_logger: OffsetLogger | None = None,
) -> list[Point]:
    """Offset every segment by its own distance, using precomputed normals.

    Args:
        points: Points without consecutive duplicates
        normals: Unit left-hand normal of every segment, one less than points
        distances: Offset distance of every segment, one less than points
        uturn: What to do at corners turning beyond the threshold
        var_dist_parallel: What to do at collinear segments with different distances
        cosine_threshold: Cosines between normals at or below this are U-turns
        parallel_threshold: Cosines at or above this are straight pass-throughs
        equal_distance_tolerance: Distances closer than this count as equal
        reversal_tolerance: Cross product below which a U-turn is an exact reversal
        closed_tolerance_sq: Squared distance below which first equals last
        offset_logger: Collects corner statistics

    Returns:
        New list of offset points; closed if the input is closed

    Raises:
        ArgumentError: If counts do not match, or a collinear policy is FAIL
        GeometryError: If a U-turn cannot be resolved
    """
    if len(points) < 2:
        raise ArgumentError(f"At least 2 points are required but got {len(points)}")
    if len(normals) != len(points) - 1:
        raise ArgumentError(
            f"Expected {len(points) - 1} segment normals but got {len(normals)}"
        )
    if len(distances) != len(points) - 1:
        raise DistanceCountError(len(distances), len(points) - 1, "one per segment")
    offset_logger = offset_logger if offset_logger is not None else OffsetLogger()
    uturn = UTurn(uturn)
    var_dist_parallel = VarDistParallel(var_dist_parallel)

    result: list[Point] = []
    proportional: list[ProportionalFix] = []
    projections: list[ProjectFix] = []

    closed = is_closed(points, closed_tolerance_sq)
    if closed:
        start = 0
        n_prev = normals[-1]
        d_prev = distances[-1]
    else:
        start = 1
        n_prev = normals[0]
        d_prev = distances[0]
        result.append(points[0] + n_prev * d_prev)

    for i in range(start, len(points) - 1):
        n_next = normals[i]
        d_next = distances[i]
        corner = build_corner(
            i, points[i], n_prev, n_next, d_prev, d_next, cosine_threshold, parallel_threshold
        )
        offset_logger.log_corner(i, corner.kind)

        if corner.has_equal_distances(equal_distance_tolerance):
            emitted = join_uniform(corner, uturn, cosine_threshold, reversal_tolerance)
            if corner.kind is CornerKind.NEAR_REVERSAL:
                offset_logger.log_uturn(i, turn_degrees(corner.cosine), uturn.value, len(emitted))
            result.extend(emitted)
        elif corner.kind is CornerKind.NEAR_REVERSAL:
            emitted = join_uturn_variable(corner, uturn, cosine_threshold, reversal_tolerance)
            offset_logger.log_uturn(i, turn_degrees(corner.cosine), uturn.value, len(emitted))
            result.extend(emitted)
        elif corner.kind is CornerKind.COLLINEAR:
            offset_logger.log_distance_change(i, d_prev, d_next, var_dist_parallel.value)
            before = len(result)
            join_collinear(corner, var_dist_parallel, result, proportional, projections)
            if len(result) == before:
                offset_logger.log_skipped(i, "collinear distance change")
        else:
            result.append(
                variable_miter_point(points[i], n_prev, n_next, d_prev, d_next, corner.cosine)
            )

        n_prev = n_next
        d_prev = d_next

    if closed:
        if result:
            result.append(result[0])
    else:
        result.append(points[-1] + normals[-1] * distances[-1])

    resolved = close_deferred(result, proportional, projections, list(points))
    if resolved:
        offset_logger.log_deferred(resolved, var_dist_parallel.value)
    return result


def _run_uniform(
    distance: float,
    points: Any,
    uturn: UTurn,
    cosine_threshold: float,
    settings: PolyoffsetSettings,
    offset_logger: OffsetLogger | None,
    operation: str,
) -> list[Point]:
    offset_logger = offset_logger if offset_logger is not None else OffsetLogger()
    pts = _prepare_points(points, operation)
    _check_finite([distance])
    tolerance = settings.tolerance
    offset_logger.log_start(operation, len(pts), is_closed(pts, tolerance.closed_tolerance_sq))

    kept, _ = _dedupe(pts, settings, operation, offset_logger)
    if abs(distance) < tolerance.zero_distance_tolerance:
        result = list(kept)
    else:
        result = offset_with_normals(
            kept,
            segment_normals(kept, tolerance.duplicate_tolerance),
            distance,
            uturn,
            cosine_threshold,
            parallel_threshold=settings.offset.parallel_cosine(),
            reversal_tolerance=tolerance.reversal_tolerance,
            closed_tolerance_sq=tolerance.closed_tolerance_sq,
            offset_logger=offset_logger,
        )
    offset_logger.log_complete(len(result))
    return result


def _run_variable(
    distances: Any,
    points: Any,
    uturn: UTurn,
    var_dist_parallel: VarDistParallel,
    cosine_threshold: float,
    parallel_threshold: float,
    settings: PolyoffsetSettings,
    offset_logger: OffsetLogger | None,
    operation: str,
) -> list[Point]:
    offset_logger = offset_logger if offset_logger is not None else OffsetLogger()
    pts = _prepare_points(points, operation)
    dists = [float(d) for d in distances]
    if len(dists) != len(pts) - 1:
        raise DistanceCountError(len(dists), len(pts) - 1, operation)
    _check_finite(dists)
    tolerance = settings.tolerance
    offset_logger.log_start(operation, len(pts), is_closed(pts, tolerance.closed_tolerance_sq))

    kept, segments = _dedupe(pts, settings, operation, offset_logger)
    result = offset_variable_with_normals(
        kept,
        segment_normals(kept, tolerance.duplicate_tolerance),
        [dists[s] for s in segments],
        uturn,
        var_dist_parallel,
        cosine_threshold,
        parallel_threshold,
        equal_distance_tolerance=tolerance.equal_distance_tolerance,
        reversal_tolerance=tolerance.reversal_tolerance,
        closed_tolerance_sq=tolerance.closed_tolerance_sq,
        offset_logger=offset_logger,
    )
    offset_logger.log_complete(len(result))
    return result


def offset(
    distance: Any,
    points: Any,
    *,
    settings: PolyoffsetSettings | None = None,
    offset_logger: OffsetLogger | None = None,
) -> list[Point]:
    """Offset a polyline by one distance.

    Closed or open input is detected from the first and last point. Corners
    turning by more than the configured U-turn angle (170 degrees by default)
    are chamfered with two points.

    The arguments may also be given points first: ``offset(points, 2.0)``.

    Args:
        distance: Offset distance, positive to the left of the direction of travel
        points: Sequence of Point or (x, y) pairs
        settings: Library settings (defaults if None)
        offset_logger: Collects corner statistics

    Returns:
        New list of offset points

    Raises:
        ArgumentError: If there are fewer than 2 points or the distance is not finite
        GeometryError: If the polyline reverses onto itself exactly

    Examples:
        >>> offset(1.0, [(0, 0), (4, 0)])
        [Point(x=0.0, y=1.0), Point(x=4.0, y=1.0)]
    """
    settings = settings or get_default_settings()
    if not _is_distance(distance) and _is_distance(points):
        distance, points = points, distance
    if not _is_distance(distance):
        raise ArgumentError(f"offset: distance must be a number, got {type(distance).__name__}")
    return _run_uniform(
        float(distance),
        points,
        settings.offset.uturn,
        settings.offset.uturn_cosine(),
        settings,
        offset_logger,
        "offset",
    )


def offset_ex(
    cosine_threshold: float,
    uturn: UTurn | str,
    distance: float,
    points: Any,
    *,
    settings: PolyoffsetSettings | None = None,
    offset_logger: OffsetLogger | None = None,
) -> list[Point]:
    """Offset a polyline by one distance with an explicit U-turn policy.

    Args:
        cosine_threshold: Cosine of the turn angle above which a corner is a
            U-turn, e.g. ``cosine_of_degrees(170.0)``
        uturn: U-turn policy
        distance: Offset distance, positive to the left of the direction of travel
        points: Sequence of Point or (x, y) pairs
        settings: Library settings for tolerances (defaults if None)
        offset_logger: Collects corner statistics

    Returns:
        New list of offset points
    """
    settings = settings or get_default_settings()
    if not _is_distance(distance):
        raise ArgumentError(f"offset_ex: distance must be a number, got {type(distance).__name__}")
    return _run_uniform(
        float(distance),
        points,
        UTurn(uturn),
        cosine_threshold,
        settings,
        offset_logger,
        "offset_ex",
    )


def offset_variable(
    distances: Any,
    points: Any,
    *,
    settings: PolyoffsetSettings | None = None,
    offset_logger: OffsetLogger | None = None,
) -> list[Point]:
    """Offset every segment of a polyline by its own distance.

    U-turns and collinear segments with different distances are resolved by
    the configured policies (CHAMFER and PROPORTIONAL by default).

    The arguments may also be given points first.

    Args:
        distances: One offset distance per segment
        points: Sequence of Point or (x, y) pairs
        settings: Library settings (defaults if None)
        offset_logger: Collects corner statistics

    Returns:
        New list of offset points

    Raises:
        DistanceCountError: If the distance count does not equal the segment count
        ArgumentError: If there are fewer than 2 points or a distance is not finite
    """
    settings = settings or get_default_settings()
    if not _is_distance_list(distances) and _is_distance_list(points):
        distances, points = points, distances
    return _run_variable(
        distances,
        points,
        settings.offset.uturn,
        settings.offset.var_dist_parallel,
        settings.offset.uturn_cosine(),
        settings.offset.parallel_cosine(),
        settings,
        offset_logger,
        "offset_variable",
    )


def offset_variable_ex(
    uturn: UTurn | str,
    var_dist_parallel: VarDistParallel | str,
    distances: Sequence[float],
    points: Any,
    cosine_threshold: float | None = None,
    parallel_threshold: float | None = None,
    *,
    settings: PolyoffsetSettings | None = None,
    offset_logger: OffsetLogger | None = None,
) -> list[Point]:
    """Offset every segment by its own distance with explicit policies.

    Args:
        uturn: U-turn policy
        var_dist_parallel: Policy for collinear segments with different distances
        distances: One offset distance per segment
        points: Sequence of Point or (x, y) pairs
        cosine_threshold: Cosine of the U-turn angle (from settings if None)
        parallel_threshold: Cosine of the collinearity angle (from settings if None)
        settings: Library settings (defaults if None)
        offset_logger: Collects corner statistics

    Returns:
        New list of offset points
    """
    settings = settings or get_default_settings()
    if cosine_threshold is None:
        cosine_threshold = settings.offset.uturn_cosine()
    if parallel_threshold is None:
        parallel_threshold = settings.offset.parallel_cosine()
    return _run_variable(
        distances,
        points,
        UTurn(uturn),
        VarDistParallel(var_dist_parallel),
        cosine_threshold,
        parallel_threshold,
        settings,
        offset_logger,
        "offset_variable_ex",
    )
