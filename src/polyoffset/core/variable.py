"""Corner joining for per-segment offset distances.

When the two segments at a corner carry different distances, the offset
point is the intersection of two offset lines that are no longer symmetric
about the vertex. Collinear segments with different distances have parallel
offset lines that never meet; the VarDistParallel policy reconciles them,
for PROPORTIONAL and PROJECT in a pass after the main loop.
"""

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

from polyoffset.core.classifier import turn_degrees
from polyoffset.core.geometry import closest_parameter, intersect_rays, lerp
from polyoffset.core.joiner import (
    DEFAULT_REVERSAL_TOLERANCE,
    reversal_bisector,
)
from polyoffset.domain import Corner, OffsetLine, Point, UTurn, VarDistParallel, Vector
from polyoffset.exceptions import CollinearDistanceError, GeometryError, UTurnError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class ProportionalFix:
    """A placeholder point to be blended between its resolved neighbours.

    Attributes:
        result_index: Index of the placeholder in the result list
        input_index: Index of the original vertex in the input points
    """

    result_index: int
    input_index: int


@dataclass(frozen=True, slots=True)
class ProjectFix:
    """A placeholder point to be projected onto the line between its neighbours.

    Attributes:
        result_index: Index of the placeholder in the result list
        direction: Direction to project along, the sum of both segment normals
    """

    result_index: int
    direction: Vector


def variable_miter_point(
    pt: Point,
    n_prev: Vector,
    n_next: Vector,
    d_prev: float,
    d_next: float,
    cosine: float,
) -> Point:
    """Intersect two offset lines with different distances.

    The common distance ``d_next`` is handled by the uniform miter formula;
    the distance delta slides the point along the outgoing segment.

    Args:
        pt: The shared vertex
        n_prev: Unit normal of the incoming segment
        n_next: Unit normal of the outgoing segment
        d_prev: Offset distance of the incoming segment
        d_next: Offset distance of the outgoing segment
        cosine: Dot product of the normals; the normals must not be parallel

    Returns:
        The offset corner point
    """
    v_next = n_next.rotate90_cw()
    cos2 = n_prev.dot(v_next)
    return (
        pt
        + v_next * ((d_prev - d_next) / cos2)
        + (n_prev + n_next) * (d_next / (1.0 + cosine))
    )


def join_uturn_variable(
    corner: Corner,
    uturn: UTurn,
    cosine_threshold: float,
    tolerance: float = DEFAULT_REVERSAL_TOLERANCE,
) -> list[Point]:
    """Resolve a U-turn corner whose segments carry different distances.

    CHAMFER caps the U-turn at the mean distance; USE_THRESHOLD intersects
    offset lines whose normals are turned to the threshold angle.

    Raises:
        UTurnError: If the policy is FAIL
        GeometryError: On an exact reversal with CHAMFER or USE_THRESHOLD
    """
    if uturn is UTurn.FAIL:
        raise UTurnError(
            corner.index, turn_degrees(corner.cosine), turn_degrees(cosine_threshold)
        )

    if uturn is UTurn.SKIP:
        logger.debug("Skipping U-turn at point %d", corner.index)
        return []

    n_mid = reversal_bisector(corner.n_prev, corner.n_next, corner.index, tolerance)

    if uturn is UTurn.CHAMFER:
        cap = OffsetLine.from_vertex(corner.point, n_mid, (corner.d_prev + corner.d_next) * 0.5)
        return [corner.prev_line.intersect(cap), cap.intersect(corner.next_line)]

    half_cosine = math.sqrt((1.0 + cosine_threshold) / 2.0)
    half_sine = math.sqrt(max(0.0, 1.0 - half_cosine * half_cosine))
    left = n_mid.rotate(half_cosine, half_sine)
    right = n_mid.rotate(half_cosine, -half_sine)
    if left.dot(corner.n_prev) >= right.dot(corner.n_prev):
        prev_normal, next_normal = left, right
    else:
        prev_normal, next_normal = right, left
    prev_line = OffsetLine(corner.prev_line.anchor, prev_normal)
    next_line = OffsetLine(corner.next_line.anchor, next_normal)
    return [prev_line.intersect(next_line)]


def join_collinear(
    corner: Corner,
    policy: VarDistParallel,
    result: list[Point],
    proportional: list[ProportionalFix],
    projections: list[ProjectFix],
) -> None:
    """Apply the VarDistParallel policy at a collinear vertex.

    Points are appended to ``result`` directly because PROPORTIONAL and
    PROJECT need to know where their placeholder ends up.

    Raises:
        CollinearDistanceError: If the policy is FAIL
    """
    if policy is VarDistParallel.FAIL:
        raise CollinearDistanceError(corner.index, corner.d_prev, corner.d_next)

    if policy is VarDistParallel.SKIP:
        return

    if policy is VarDistParallel.PROPORTIONAL:
        proportional.append(ProportionalFix(len(result), corner.index))
        result.append(corner.point)
    elif policy is VarDistParallel.PROJECT:
        projections.append(ProjectFix(len(result), corner.n_prev + corner.n_next))
        result.append(corner.point)
    else:
        result.append(corner.point + corner.n_prev * corner.d_prev)
        result.append(corner.point + corner.n_next * corner.d_next)


def chunk_consecutive(items: list[T], key: Callable[[T], int]) -> list[list[T]]:
    """Split items into runs whose keys increase by exactly one.

    Examples:
        >>> chunk_consecutive([1, 2, 4, 5, 6, 9], key=lambda i: i)
        [[1, 2], [4, 5, 6], [9]]
    """
    chunks: list[list[T]] = []
    for i, item in enumerate(items):
        if i == 0 or key(item) != key(items[i - 1]) + 1:
            chunks.append([])
        chunks[-1].append(item)
    return chunks


def reloop(chunks: list[list[T]], last_index: int, key: Callable[[T], int]) -> None:
    """Merge the last run into the first when both touch the loop seam.

    Examples:
        >>> chunks = [[0, 1], [4], [8, 9]]
        >>> reloop(chunks, 9, key=lambda i: i)
        >>> chunks
        [[8, 9, 0, 1], [4]]
    """
    if len(chunks) < 2:
        return
    first = chunks[0]
    last = chunks[-1]
    if key(first[0]) == 0 and key(last[-1]) == last_index:
        last.extend(first)
        chunks[0] = last
        chunks.pop()


def distribute_proportionally(
    result: list[Point], fixes: list[ProportionalFix], points: list[Point]
) -> None:
    """Replace placeholders by points blended between their neighbours.

    Each run of consecutive placeholders is spread along the line between
    the resolved points before and after the run, at the parameter each
    original vertex has between the original points around the run.
    """
    chunks = chunk_consecutive(fixes, key=lambda f: f.result_index)
    reloop(chunks, len(result) - 1, key=lambda f: f.result_index)

    n = len(result)
    m = len(points)
    for chunk in chunks:
        start = result[(chunk[0].result_index - 1) % n]
        end = result[(chunk[-1].result_index + 1) % n]
        orig_start = points[(chunk[0].input_index - 1) % m]
        orig_end = points[(chunk[-1].input_index + 1) % m]
        direction = orig_end - orig_start
        for fix in chunk:
            t = closest_parameter(orig_start, direction, points[fix.input_index])
            result[fix.result_index] = lerp(start, end, t)
        logger.debug(
            "Blended %d point(s) between result points %d and %d",
            len(chunk),
            (chunk[0].result_index - 1) % n,
            (chunk[-1].result_index + 1) % n,
        )


def project_deferred(result: list[Point], fixes: list[ProjectFix]) -> None:
    """Project placeholders onto the line between their resolved neighbours.

    Raises:
        GeometryError: If a projection direction is parallel to that line
    """
    chunks = chunk_consecutive(fixes, key=lambda f: f.result_index)
    reloop(chunks, len(result) - 1, key=lambda f: f.result_index)

    n = len(result)
    for chunk in chunks:
        start = result[(chunk[0].result_index - 1) % n]
        end = result[(chunk[-1].result_index + 1) % n]
        for fix in chunk:
            pt = result[fix.result_index]
            hit = intersect_rays(start, end - start, pt, fix.direction)
            if hit is None:
                raise GeometryError(
                    f"Cannot project result point {fix.result_index} onto the line "
                    "between its neighbours"
                )
            result[fix.result_index] = hit


def close_deferred(
    result: list[Point],
    proportional: list[ProportionalFix],
    projections: list[ProjectFix],
    points: list[Point],
) -> int:
    """Run the deferred pass that matches the collected placeholders.

    A placeholder at result index 0 is repeated at the closing point so the
    seam of a closed polyline stays closed.

    Returns:
        Number of placeholders resolved
    """
    if proportional:
        if proportional[0].result_index == 0:
            proportional.append(ProportionalFix(len(result) - 1, len(points) - 1))
        distribute_proportionally(result, proportional, points)
        return len(proportional)
    if projections:
        if projections[0].result_index == 0:
            projections.append(ProjectFix(len(result) - 1, projections[0].direction))
        project_deferred(result, projections)
        return len(projections)
    return 0
