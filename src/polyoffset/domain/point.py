"""Planar point and vector types.

This module defines the two value types the offset engine computes with:
- Point: A location in the plane
- Vector: A displacement, used for segment directions and normals

Both are immutable named tuples, so a Point compares equal to the plain
``(x, y)`` tuple with the same coordinates.
"""

import math
from typing import Any, NamedTuple

from polyoffset.exceptions import GeometryError


class Vector(NamedTuple):
    """A 2D vector.

    Attributes:
        x: X component
        y: Y component
    """

    x: float
    y: float

    def __add__(self, other: "Vector") -> "Vector":  # type: ignore[override]
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector") -> "Vector":
        return Vector(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> "Vector":  # type: ignore[override]
        return Vector(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __neg__(self) -> "Vector":
        return Vector(-self.x, -self.y)

    @property
    def length(self) -> float:
        """Euclidean length."""
        return math.hypot(self.x, self.y)

    @property
    def length_sq(self) -> float:
        """Squared Euclidean length."""
        return self.x * self.x + self.y * self.y

    def unitized(self) -> "Vector":
        """Return the vector scaled to length 1.

        Raises:
            GeometryError: If the vector has (almost) zero length
        """
        length = self.length
        if length < 1e-12:
            raise GeometryError(f"Cannot unitize zero-length vector {self}")
        return Vector(self.x / length, self.y / length)

    def dot(self, other: "Vector") -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Vector") -> float:
        """2D cross product, the signed area of the spanned parallelogram.

        Positive if ``other`` points to the left of this vector.
        """
        return self.x * other.y - self.y * other.x

    def rotate90_ccw(self) -> "Vector":
        """Rotate 90 degrees counter-clockwise: (x, y) -> (-y, x)."""
        return Vector(-self.y, self.x)

    def rotate90_cw(self) -> "Vector":
        """Rotate 90 degrees clockwise: (x, y) -> (y, -x)."""
        return Vector(self.y, -self.x)

    def rotate(self, cos: float, sin: float) -> "Vector":
        """Rotate counter-clockwise by the angle with the given cosine and sine."""
        return Vector(cos * self.x - sin * self.y, sin * self.x + cos * self.y)


class Point(NamedTuple):
    """A point in 2D space.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def __add__(self, other: Vector) -> "Point":  # type: ignore[override]
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> Vector:
        return Vector(self.x - other.x, self.y - other.y)

    def distance_to(self, other: "Point") -> float:
        """Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def distance_sq_to(self, other: "Point") -> float:
        """Squared Euclidean distance to another point."""
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=float(data["x"]), y=float(data["y"]))

    @classmethod
    def of(cls, value: "Point | tuple[float, float] | Any") -> "Point":
        """Coerce a Point or an (x, y) pair to a Point."""
        if isinstance(value, Point):
            return value
        x, y = value
        return cls(float(x), float(y))
