"""Transient values derived while offsetting one corner.

All of these are plain values derived from indices into the input point
list; adjacency is purely positional (i - 1, i, i + 1).
"""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum, auto

from polyoffset.domain.point import Point, Vector


class CornerKind(Enum):
    """Classification of a polyline vertex for offsetting.

    - CONVEX: Offset on the outer side of the turn, miter point extends out
    - REFLEX: Offset on the inner side of the turn, miter point pulls in
    - NEAR_REVERSAL: Turn close to 180 degrees, handled by the U-turn policy
    - COLLINEAR: Straight pass-through, where a distance change needs a policy
    """

    CONVEX = auto()
    REFLEX = auto()
    NEAR_REVERSAL = auto()
    COLLINEAR = auto()


@dataclass(frozen=True, slots=True)
class Segment:
    """A segment between two consecutive points of a point list.

    Attributes:
        start_index: Index of the start point
        end_index: Index of the end point
    """

    start_index: int
    end_index: int

    def endpoints(self, points: Sequence[Point]) -> tuple[Point, Point]:
        """Look up the segment's endpoints in the owning point list."""
        return points[self.start_index], points[self.end_index]

    def direction(self, points: Sequence[Point]) -> Vector:
        """Vector from start to end point."""
        start, end = self.endpoints(points)
        return end - start


@dataclass(frozen=True, slots=True)
class OffsetLine:
    """Infinite line parallel to a segment, described by its unit normal.

    Attributes:
        anchor: A point on the line, usually a segment end moved by the distance
        normal: Unit normal of the line
    """

    anchor: Point
    normal: Vector

    @classmethod
    def from_vertex(cls, vertex: Point, normal: Vector, distance: float) -> "OffsetLine":
        """Build the offset line of a segment through ``vertex``."""
        return cls(vertex + normal * distance, normal)

    def intersect(self, other: "OffsetLine", tolerance: float = 1e-12) -> Point:
        """Intersect with another offset line.

        Solves ``p . n_a = anchor_a . n_a`` and ``p . n_b = anchor_b . n_b``.
        Parallel lines do not cross; the anchor of this line is returned.

        Args:
            other: The second line
            tolerance: Cross product of the normals below which lines are parallel

        Returns:
            The intersection point
        """
        na = self.normal
        nb = other.normal
        det = na.cross(nb)
        if abs(det) < tolerance:
            return self.anchor
        ca = na.x * self.anchor.x + na.y * self.anchor.y
        cb = nb.x * other.anchor.x + nb.y * other.anchor.y
        return Point((ca * nb.y - cb * na.y) / det, (na.x * cb - nb.x * ca) / det)


@dataclass(frozen=True, slots=True)
class Corner:
    """A polyline vertex with everything needed to offset it.

    Attributes:
        index: Index of the vertex in the input point list
        point: The vertex
        n_prev: Unit normal of the incoming segment
        n_next: Unit normal of the outgoing segment
        d_prev: Offset distance of the incoming segment
        d_next: Offset distance of the outgoing segment
        cosine: Dot product of the normals, the cosine of the turn angle
        kind: How the corner is joined
    """

    index: int
    point: Point
    n_prev: Vector
    n_next: Vector
    d_prev: float
    d_next: float
    cosine: float
    kind: CornerKind

    @property
    def turn(self) -> float:
        """Signed turn, positive for a left (counter-clockwise) turn."""
        return self.n_prev.cross(self.n_next)

    @property
    def prev_line(self) -> OffsetLine:
        """Offset line of the incoming segment."""
        return OffsetLine.from_vertex(self.point, self.n_prev, self.d_prev)

    @property
    def next_line(self) -> OffsetLine:
        """Offset line of the outgoing segment."""
        return OffsetLine.from_vertex(self.point, self.n_next, self.d_next)

    def has_equal_distances(self, tolerance: float) -> bool:
        """True if both segments are offset by the same distance."""
        return abs(self.d_prev - self.d_next) < tolerance
