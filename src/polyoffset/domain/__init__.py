"""Domain models for polyoffset.

This module contains the value types the offset engine consumes and produces.
All point-like types are immutable; the polyline container owns a private
copy of its points.

Key classes:
- Point, Vector: Planar coordinates and displacements
- Polyline2D: An open or closed point sequence
- Corner, OffsetLine, Segment: Transient values derived per vertex
- UTurn, VarDistParallel: Corner resolution policies
"""

from polyoffset.domain.corner import Corner, CornerKind, OffsetLine, Segment
from polyoffset.domain.point import Point, Vector
from polyoffset.domain.policy import UTurn, VarDistParallel
from polyoffset.domain.polyline import Polyline2D

__all__: list[str] = [
    # Enums
    "CornerKind",
    "UTurn",
    "VarDistParallel",
    # Core types
    "Point",
    "Vector",
    "Polyline2D",
    "Segment",
    "OffsetLine",
    "Corner",
]
