"""polyoffset - Parallel offsets of 2D polylines.

polyoffset computes the curve parallel to an open or closed 2D polyline at a
given perpendicular distance. Convex and reflex corners are mitered, corners
that nearly turn back on themselves are chamfered, and each segment may carry
its own offset distance.

Example:
    >>> from polyoffset import offset
    >>> square = [(0, 0), (10, 0), (10, 10), (0, 10), (0, 0)]
    >>> offset(2.0, square)[:2]
    [Point(x=2.0, y=2.0), Point(x=8.0, y=2.0)]
"""

from polyoffset.core.offset import (
    offset,
    offset_ex,
    offset_variable,
    offset_variable_ex,
)
from polyoffset.core.polyline_offset import offset_polyline
from polyoffset.domain import Point, Polyline2D, UTurn, VarDistParallel, Vector

__version__ = "0.1.0"

__all__ = [
    "Point",
    "Polyline2D",
    "UTurn",
    "VarDistParallel",
    "Vector",
    "__version__",
    "offset",
    "offset_ex",
    "offset_polyline",
    "offset_variable",
    "offset_variable_ex",
]
