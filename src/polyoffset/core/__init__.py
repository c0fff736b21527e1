"""Core offsetting logic for polyoffset.

This module contains the offset engine:

- Geometry helpers (signed area, closedness, line intersection)
- Duplicate point filtering and segment normals
- Offset side resolution and corner classification
- Uniform and variable-distance corner joining
- Public offset entry points and the polyline wrapper
"""

from polyoffset.core.classifier import build_corner, classify_corner, cosine_of_degrees
from polyoffset.core.filter import is_collinear, remove_duplicate_points, segment_normals
from polyoffset.core.geometry import closest_parameter, is_closed, signed_area
from polyoffset.core.offset import (
    offset,
    offset_ex,
    offset_variable,
    offset_variable_ex,
    offset_variable_with_normals,
    offset_with_normals,
)
from polyoffset.core.orientation import orientation_sign, resolve_sign
from polyoffset.core.polyline_offset import offset_polyline

__all__ = [
    "build_corner",
    "classify_corner",
    "closest_parameter",
    "cosine_of_degrees",
    "is_closed",
    "is_collinear",
    "offset",
    "offset_ex",
    "offset_polyline",
    "offset_variable",
    "offset_variable_ex",
    "offset_variable_with_normals",
    "offset_with_normals",
    "orientation_sign",
    "remove_duplicate_points",
    "resolve_sign",
    "segment_normals",
    "signed_area",
]
