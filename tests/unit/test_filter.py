"""Unit tests for duplicate filtering and segment normals.

Tests cover:
- Consecutive duplicate removal and surviving segment indices
- Unit left-hand normals
- Collinearity detection
"""

import math

import pytest

from polyoffset.core.filter import is_collinear, remove_duplicate_points, segment_normals
from polyoffset.domain import Point, Vector
from polyoffset.exceptions import GeometryError


class TestRemoveDuplicatePoints:
    """Tests for removing consecutive duplicates."""

    def test_no_duplicates(self):
        points = [Point(0.0, 0.0), Point(1.0, 0.0), Point(1.0, 1.0)]
        kept, segments = remove_duplicate_points(points)
        assert kept == points
        assert segments == [0, 1]

    def test_duplicate_in_middle(self):
        """The segment ending in the duplicate is dropped."""
        points = [Point(0.0, 0.0), Point(1.0, 0.0), Point(1.0, 1e-8), Point(1.0, 1.0)]
        kept, segments = remove_duplicate_points(points)
        assert kept == [points[0], points[1], points[3]]
        assert segments == [0, 2]

    def test_duplicate_run(self):
        """A run is compared against the last kept point, not the previous one."""
        points = [Point(0.0, 0.0), Point(4e-7, 0.0), Point(8e-7, 0.0), Point(1.2e-6, 0.0), Point(1.0, 0.0)]
        kept, segments = remove_duplicate_points(points)
        assert kept == [points[0], points[3], points[4]]
        assert segments == [2, 3]

    def test_closing_point_is_kept(self):
        points = [Point(0.0, 0.0), Point(1.0, 0.0), Point(1.0, 1.0), Point(0.0, 0.0)]
        kept, _ = remove_duplicate_points(points)
        assert kept == points

    def test_empty(self):
        assert remove_duplicate_points([]) == ([], [])


class TestSegmentNormals:
    """Tests for building segment normals."""

    def test_normals_point_left(self):
        points = [Point(0.0, 0.0), Point(10.0, 0.0), Point(10.0, 5.0)]
        normals = segment_normals(points)
        assert normals == [(0.0, 1.0), (-1.0, 0.0)]

    def test_normals_are_unit(self):
        points = [Point(0.0, 0.0), Point(3.0, 4.0)]
        (n,) = segment_normals(points)
        assert abs(n.length - 1.0) < 1e-12
        assert abs(n.x + 0.8) < 1e-12
        assert abs(n.y - 0.6) < 1e-12

    def test_zero_length_segment_fails(self):
        points = [Point(0.0, 0.0), Point(1.0, 0.0), Point(1.0, 0.0)]
        with pytest.raises(GeometryError, match="Points 1 and 2 coincide"):
            segment_normals(points)


class TestIsCollinear:
    """Tests for collinear vertex detection."""

    def test_straight(self):
        n = Vector(0.0, 1.0)
        assert is_collinear(n, n, math.cos(math.radians(2.5)))

    def test_small_turn_within_threshold(self):
        n_next = Vector(-math.sin(math.radians(1.0)), math.cos(math.radians(1.0)))
        assert is_collinear(Vector(0.0, 1.0), n_next, math.cos(math.radians(2.5)))

    def test_corner(self):
        assert not is_collinear(Vector(0.0, 1.0), Vector(-1.0, 0.0), math.cos(math.radians(2.5)))
