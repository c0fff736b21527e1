"""Polyline container.

A Polyline2D owns an ordered point sequence. It is closed when its first and
last point coincide; there is no separate closed flag.
"""

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any

from polyoffset.domain.point import Point
from polyoffset.exceptions import ArgumentError

CLOSED_TOLERANCE_SQ = 1e-12


@dataclass
class Polyline2D:
    """An open or closed 2D polyline.

    Attributes:
        points: Points in drawing order, closed iff first equals last
    """

    points: list[Point] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.points = [Point.of(p) for p in self.points]

    @classmethod
    def of(cls, points: Iterable[Point | tuple[float, float]]) -> "Polyline2D":
        """Build a polyline from any iterable of points or (x, y) pairs."""
        return cls([Point.of(p) for p in points])

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __getitem__(self, index: int) -> Point:
        return self.points[index]

    @property
    def point_count(self) -> int:
        """Number of points, including a closing duplicate."""
        return len(self.points)

    @property
    def segment_count(self) -> int:
        """Number of segments between consecutive points."""
        return max(len(self.points) - 1, 0)

    @property
    def start(self) -> Point:
        """First point.

        Raises:
            ArgumentError: If the polyline has no points
        """
        if not self.points:
            raise ArgumentError("Cannot get start point of an empty polyline")
        return self.points[0]

    @property
    def end(self) -> Point:
        """Last point.

        Raises:
            ArgumentError: If the polyline has no points
        """
        if not self.points:
            raise ArgumentError("Cannot get end point of an empty polyline")
        return self.points[-1]

    @property
    def is_closed(self) -> bool:
        """True if the polyline has at least 3 points and ends where it starts."""
        if len(self.points) < 3:
            return False
        return self.points[0].distance_sq_to(self.points[-1]) <= CLOSED_TOLERANCE_SQ

    @property
    def length(self) -> float:
        """Total length of all segments."""
        return sum(
            a.distance_to(b) for a, b in zip(self.points, self.points[1:])
        )

    def signed_area(self) -> float:
        """Calculate signed area using shoelace formula.

        The polygon is closed implicitly from the last point back to the first.

        Returns:
            Signed area, positive for counter-clockwise winding
        """
        n = len(self.points)
        if n < 3:
            return 0.0

        area = 0.0
        for i in range(n):
            j = (i + 1) % n
            area += self.points[i].x * self.points[j].y
            area -= self.points[j].x * self.points[i].y

        return area / 2.0

    @property
    def is_counter_clockwise(self) -> bool:
        """True if the points wind counter-clockwise (positive area)."""
        return self.signed_area() > 0.0

    def reversed(self) -> "Polyline2D":
        """Return a copy with the point order reversed."""
        return Polyline2D(list(reversed(self.points)))

    def close(self) -> "Polyline2D":
        """Return a closed copy, appending the start point if needed."""
        if self.is_closed or not self.points:
            return Polyline2D(list(self.points))
        return Polyline2D([*self.points, self.points[0]])

    def offset(
        self,
        distance: float | Sequence[float],
        loop: bool = False,
        reference_orient: float = 0.0,
        **kwargs: Any,
    ) -> "Polyline2D":
        """Offset the polyline.

        See ``polyoffset.core.polyline_offset.offset_polyline`` for details.
        """
        from polyoffset.core.polyline_offset import offset_polyline

        return offset_polyline(
            self, distance, loop=loop, reference_orient=reference_orient, **kwargs
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {"points": [p.to_dict() for p in self.points]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Polyline2D":
        """Deserialize from dictionary."""
        return cls([Point.from_dict(p) for p in data["points"]])
