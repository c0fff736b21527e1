"""Corner resolution policies.

These enums select how the offset engine resolves the two corner situations
that have no single correct parallel offset point.
"""

from enum import Enum


class UTurn(str, Enum):
    """What to do at a corner that (nearly) turns back on itself.

    Corners turning by more than the U-turn threshold angle have offset lines
    that are almost anti-parallel; intersecting them would fling the miter
    point far away from the polyline.
    """

    FAIL = "fail"
    """Raise a UTurnError."""

    CHAMFER = "chamfer"
    """Replace the corner point by two points on a cap across the U-turn."""

    USE_THRESHOLD = "use_threshold"
    """Place one miter point as if the corner turned by the threshold angle."""

    SKIP = "skip"
    """Omit the corner point; the result cuts across the U-turn."""


class VarDistParallel(str, Enum):
    """What to do at collinear segments that have different offset distances.

    Two collinear segments offset by different distances have parallel offset
    lines that never intersect, so a distance mismatch has to be reconciled.
    """

    FAIL = "fail"
    """Raise a CollinearDistanceError."""

    SKIP = "skip"
    """Omit the shared vertex; reduces the point count."""

    PROPORTIONAL = "proportional"
    """Blend one point between the resolved neighbours; keeps the point count."""

    PROJECT = "project"
    """Project the vertex along its normal onto the line between the neighbours."""

    STEP_WITH_TWO_POINTS = "step_with_two_points"
    """Emit both independent offset endpoints, producing a visible step."""
