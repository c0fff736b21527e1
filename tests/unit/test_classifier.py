"""Unit tests for corner classification."""

import math

from polyoffset.core.classifier import build_corner, classify_corner, cosine_of_degrees, turn_degrees
from polyoffset.domain import CornerKind, Point, Vector

# Segment heading +x, then +y: a left turn
N_EAST = Vector(0.0, 1.0)
N_NORTH = Vector(-1.0, 0.0)
# Segment heading +x, then -y: a right turn
N_SOUTH = Vector(1.0, 0.0)


class TestClassifyCorner:
    """Tests for classifying corners."""

    def test_left_turn_offset_left_is_reflex(self):
        assert classify_corner(N_EAST, N_NORTH, 1.0) is CornerKind.REFLEX

    def test_left_turn_offset_right_is_convex(self):
        assert classify_corner(N_EAST, N_NORTH, -1.0) is CornerKind.CONVEX

    def test_right_turn_offset_left_is_convex(self):
        assert classify_corner(N_EAST, N_SOUTH, 1.0) is CornerKind.CONVEX

    def test_right_turn_offset_right_is_reflex(self):
        assert classify_corner(N_EAST, N_SOUTH, -1.0) is CornerKind.REFLEX

    def test_sharp_turn_is_near_reversal(self):
        """A 175 degree turn exceeds the default 170 degree threshold."""
        angle = math.radians(175.0)
        n_next = N_EAST.rotate(math.cos(angle), math.sin(angle))
        assert classify_corner(N_EAST, n_next, 1.0) is CornerKind.NEAR_REVERSAL
        assert classify_corner(N_EAST, n_next, -1.0) is CornerKind.NEAR_REVERSAL

    def test_custom_threshold(self):
        """A 175 degree turn passes a 178 degree threshold."""
        angle = math.radians(175.0)
        n_next = N_EAST.rotate(math.cos(angle), math.sin(angle))
        kind = classify_corner(N_EAST, n_next, 1.0, cosine_of_degrees(178.0))
        assert kind is CornerKind.REFLEX

    def test_straight_on_is_collinear(self):
        """A 1 degree turn is within the 2.5 degree parallel threshold."""
        angle = math.radians(1.0)
        n_next = N_EAST.rotate(math.cos(angle), math.sin(angle))
        parallel = cosine_of_degrees(2.5)
        assert classify_corner(N_EAST, n_next, 1.0, parallel_threshold=parallel) is CornerKind.COLLINEAR
        assert classify_corner(N_EAST, n_next, 1.0) is CornerKind.REFLEX

    def test_right_angle_is_not_collinear(self):
        parallel = cosine_of_degrees(2.5)
        assert classify_corner(N_EAST, N_NORTH, 1.0, parallel_threshold=parallel) is CornerKind.REFLEX


class TestBuildCorner:
    """Tests for building classified corners."""

    def test_fields(self):
        corner = build_corner(1, Point(10.0, 0.0), N_EAST, N_NORTH, 2.0, 3.0)
        assert corner.index == 1
        assert corner.point == (10.0, 0.0)
        assert corner.d_prev == 2.0
        assert corner.d_next == 3.0
        assert corner.cosine == 0.0
        assert corner.kind is CornerKind.REFLEX

    def test_side_from_both_distances(self):
        """A zero incoming distance still takes the side from the outgoing one."""
        corner = build_corner(1, Point(10.0, 0.0), N_EAST, N_NORTH, 0.0, -1.0)
        assert corner.kind is CornerKind.CONVEX

    def test_thresholds_are_applied(self):
        angle = math.radians(175.0)
        n_next = N_EAST.rotate(math.cos(angle), math.sin(angle))
        sharp = build_corner(1, Point(0.0, 0.0), N_EAST, n_next, 1.0, 1.0)
        straight = build_corner(
            1, Point(0.0, 0.0), N_EAST, N_EAST, 1.0, 2.0, parallel_threshold=cosine_of_degrees(2.5)
        )
        assert sharp.kind is CornerKind.NEAR_REVERSAL
        assert straight.kind is CornerKind.COLLINEAR


class TestAngles:
    """Tests for angle conversion."""

    def test_cosine_of_degrees(self):
        assert cosine_of_degrees(0.0) == 1.0
        assert cosine_of_degrees(180.0) == -1.0
        assert abs(cosine_of_degrees(90.0)) < 1e-15

    def test_turn_degrees_round_trip(self):
        assert abs(turn_degrees(cosine_of_degrees(170.0)) - 170.0) < 1e-9

    def test_turn_degrees_clamps(self):
        assert turn_degrees(1.0000000001) == 0.0
        assert turn_degrees(-1.0000000001) == 180.0
