"""Tests for domain models to verify they work correctly."""

import math

import pytest

from polyoffset.domain import (
    Corner,
    CornerKind,
    OffsetLine,
    Point,
    Polyline2D,
    Segment,
    UTurn,
    VarDistParallel,
    Vector,
)
from polyoffset.exceptions import ArgumentError, GeometryError


class TestVector:
    """Tests for Vector class."""

    def test_arithmetic(self) -> None:
        """Test addition, subtraction, scaling and negation."""
        a = Vector(1.0, 2.0)
        b = Vector(3.0, 4.0)
        assert a + b == Vector(4.0, 6.0)
        assert b - a == Vector(2.0, 2.0)
        assert a * 2.0 == Vector(2.0, 4.0)
        assert -a == Vector(-1.0, -2.0)

    def test_length(self) -> None:
        """Test length and squared length."""
        v = Vector(3.0, 4.0)
        assert v.length == 5.0
        assert v.length_sq == 25.0

    def test_unitized(self) -> None:
        """Test unitizing keeps the direction."""
        u = Vector(3.0, 4.0).unitized()
        assert abs(u.x - 0.6) < 1e-12
        assert abs(u.y - 0.8) < 1e-12

    def test_unitize_zero_vector_fails(self) -> None:
        """Test that a zero vector cannot be unitized."""
        with pytest.raises(GeometryError):
            Vector(0.0, 0.0).unitized()

    def test_dot_and_cross(self) -> None:
        """Test dot and cross product signs."""
        x = Vector(1.0, 0.0)
        y = Vector(0.0, 1.0)
        assert x.dot(y) == 0.0
        assert x.cross(y) == 1.0
        assert y.cross(x) == -1.0

    def test_rotations(self) -> None:
        """Test 90 degree and arbitrary rotations."""
        v = Vector(1.0, 0.0)
        assert v.rotate90_ccw() == (0.0, 1.0)
        assert v.rotate90_cw() == (0.0, -1.0)
        r = v.rotate(math.cos(math.pi / 2), math.sin(math.pi / 2))
        assert abs(r.x) < 1e-12
        assert abs(r.y - 1.0) < 1e-12


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(100.0, 200.0)
        assert p.x == 100.0
        assert p.y == 200.0

    def test_point_equals_tuple(self) -> None:
        """Test that a point compares equal to a plain tuple."""
        assert Point(1.0, 2.0) == (1.0, 2.0)

    def test_point_arithmetic(self) -> None:
        """Test point minus point and point plus vector."""
        a = Point(1.0, 1.0)
        b = Point(4.0, 5.0)
        v = b - a
        assert isinstance(v, Vector)
        assert v == (3.0, 4.0)
        assert isinstance(a + v, Point)
        assert a + v == b

    def test_distance(self) -> None:
        """Test distance and squared distance."""
        a = Point(1.0, 1.0)
        b = Point(4.0, 5.0)
        assert a.distance_to(b) == 5.0
        assert a.distance_sq_to(b) == 25.0

    def test_point_to_tuple(self) -> None:
        """Test point to tuple conversion."""
        p = Point(100.0, 200.0)
        assert p.to_tuple() == (100.0, 200.0)

    def test_point_serialization(self) -> None:
        """Test point serialization and deserialization."""
        p1 = Point(100.0, 200.0)
        data = p1.to_dict()
        p2 = Point.from_dict(data)

        assert data == {"x": 100.0, "y": 200.0}
        assert p2 == p1

    def test_point_of_coerces_pairs(self) -> None:
        """Test coercing pairs to points."""
        p = Point.of((1, 2))
        assert isinstance(p, Point)
        assert isinstance(p.x, float)
        assert p == (1.0, 2.0)

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(100.0, 200.0)
        with pytest.raises(AttributeError):
            p.x = 300.0  # type: ignore


class TestPolyline2D:
    """Tests for Polyline2D class."""

    def test_polyline_creation(self) -> None:
        """Test creation from pairs coerces to points."""
        pl = Polyline2D.of([(0, 0), (10, 0), (10, 10)])
        assert len(pl) == 3
        assert all(isinstance(p, Point) for p in pl)
        assert pl.segment_count == 2

    def test_polyline_copies_input(self) -> None:
        """Test that the polyline does not alias the given list."""
        points = [Point(0.0, 0.0), Point(1.0, 0.0)]
        pl = Polyline2D(points)
        points.append(Point(2.0, 0.0))
        assert len(pl) == 2

    def test_start_and_end(self) -> None:
        """Test start and end points."""
        pl = Polyline2D.of([(0, 0), (10, 0), (10, 10)])
        assert pl.start == (0.0, 0.0)
        assert pl.end == (10.0, 10.0)

    def test_empty_polyline_queries_fail(self) -> None:
        """Test that start and end of an empty polyline raise."""
        pl = Polyline2D()
        with pytest.raises(ArgumentError):
            _ = pl.start
        with pytest.raises(ArgumentError):
            _ = pl.end

    def test_is_closed(self) -> None:
        """Test closed detection from first and last point."""
        assert Polyline2D.of([(0, 0), (1, 0), (1, 1), (0, 0)]).is_closed
        assert not Polyline2D.of([(0, 0), (1, 0), (1, 1)]).is_closed
        assert not Polyline2D.of([(0, 0), (0, 0)]).is_closed

    def test_length(self) -> None:
        """Test total length of a closed square."""
        pl = Polyline2D.of([(0, 0), (10, 0), (10, 10), (0, 10), (0, 0)])
        assert pl.length == 40.0

    def test_signed_area_counterclockwise(self) -> None:
        """Test signed area for counter-clockwise square."""
        pl = Polyline2D.of([(0, 0), (100, 0), (100, 100), (0, 100), (0, 0)])
        area = pl.signed_area()
        assert area > 0
        assert abs(area - 10000.0) < 0.1
        assert pl.is_counter_clockwise

    def test_signed_area_clockwise(self) -> None:
        """Test signed area for clockwise square."""
        pl = Polyline2D.of([(0, 0), (0, 100), (100, 100), (100, 0), (0, 0)])
        area = pl.signed_area()
        assert area < 0
        assert abs(area + 10000.0) < 0.1
        assert not pl.is_counter_clockwise

    def test_reversed(self) -> None:
        """Test reversing flips the winding."""
        pl = Polyline2D.of([(0, 0), (10, 0), (10, 10), (0, 0)])
        rev = pl.reversed()
        assert rev.points == list(reversed(pl.points))
        assert rev.signed_area() == -pl.signed_area()

    def test_close(self) -> None:
        """Test closing an open polyline appends the start point."""
        pl = Polyline2D.of([(0, 0), (10, 0), (10, 10)])
        closed = pl.close()
        assert closed.is_closed
        assert len(closed) == 4
        assert len(closed.close()) == 4

    def test_serialization(self) -> None:
        """Test polyline serialization and deserialization."""
        pl = Polyline2D.of([(0, 0), (10, 0), (10, 10)])
        assert Polyline2D.from_dict(pl.to_dict()) == pl

    def test_offset_method(self) -> None:
        """Test the offset convenience method returns a polyline."""
        pl = Polyline2D.of([(0, 0), (10, 0), (10, 10), (0, 10), (0, 0)])
        result = pl.offset(2.0)
        assert isinstance(result, Polyline2D)
        assert result.is_closed
        assert result.start == (2.0, 2.0)


class TestSegment:
    """Tests for Segment class."""

    def test_segment_lookup(self) -> None:
        """Test endpoints and direction from the owning list."""
        points = [Point(0.0, 0.0), Point(3.0, 4.0)]
        seg = Segment(0, 1)
        assert seg.endpoints(points) == (points[0], points[1])
        assert seg.direction(points) == (3.0, 4.0)


class TestOffsetLine:
    """Tests for OffsetLine class."""

    def test_intersect(self) -> None:
        """Test intersecting a horizontal and a vertical line."""
        horizontal = OffsetLine(Point(0.0, 1.0), Vector(0.0, 1.0))
        vertical = OffsetLine(Point(2.0, 0.0), Vector(1.0, 0.0))
        hit = horizontal.intersect(vertical)
        assert abs(hit.x - 2.0) < 1e-12
        assert abs(hit.y - 1.0) < 1e-12

    def test_parallel_lines_return_anchor(self) -> None:
        """Test that parallel lines fall back to the anchor."""
        a = OffsetLine(Point(0.0, 1.0), Vector(0.0, 1.0))
        b = OffsetLine(Point(5.0, 2.0), Vector(0.0, 1.0))
        assert a.intersect(b) == a.anchor

    def test_from_vertex(self) -> None:
        """Test building the line through an offset vertex."""
        line = OffsetLine.from_vertex(Point(1.0, 1.0), Vector(0.0, 1.0), 2.0)
        assert line.anchor == (1.0, 3.0)


class TestCorner:
    """Tests for Corner class."""

    def test_corner_properties(self) -> None:
        """Test turn, offset lines and distance comparison."""
        corner = Corner(
            index=1,
            point=Point(10.0, 0.0),
            n_prev=Vector(0.0, 1.0),
            n_next=Vector(-1.0, 0.0),
            d_prev=2.0,
            d_next=2.0,
            cosine=0.0,
            kind=CornerKind.REFLEX,
        )
        assert corner.turn == 1.0
        assert corner.prev_line.anchor == (10.0, 2.0)
        assert corner.next_line.anchor == (8.0, 0.0)
        assert corner.has_equal_distances(1e-6)

    def test_corner_immutable(self) -> None:
        """Test that corner is immutable."""
        corner = Corner(
            0, Point(0.0, 0.0), Vector(0.0, 1.0), Vector(0.0, 1.0), 1.0, 1.0, 1.0, CornerKind.COLLINEAR
        )
        with pytest.raises(AttributeError):
            corner.index = 3  # type: ignore


class TestPolicies:
    """Tests for policy enums."""

    def test_policies_from_strings(self) -> None:
        """Test that policies can be looked up by value."""
        assert UTurn("chamfer") is UTurn.CHAMFER
        assert UTurn("use_threshold") is UTurn.USE_THRESHOLD
        assert VarDistParallel("step_with_two_points") is VarDistParallel.STEP_WITH_TWO_POINTS

    def test_corner_kinds(self) -> None:
        """Test corner kinds are distinct."""
        assert len(set(CornerKind)) == 4
