# File: tests/utils/test_geometry.py
"""Tests for 2D point rotation helpers."""

import math

import pytest

from src.canvas_table.utils.geometry import (
    Point,
    point_from,
    point_rotate_rads,
    rect_center,
    rotated_rect_corners,
    vector_rotate_rads,
)


class TestPoint:

    def test_arithmetic(self):
        assert Point(1, 2) + Point(3, 4) == Point(4, 6)
        assert Point(1, 2) - Point(3, 4) == Point(-2, -2)
        assert Point(1, 2).scale(3) == Point(3, 6)

    def test_unpacking(self):
        x, y = point_from(3, 4)
        assert (x, y) == (3.0, 4.0)

    def test_distance(self):
        assert Point(0, 0).distance_to(Point(3, 4)) == pytest.approx(5)


class TestRotation:

    def test_quarter_turn_is_clockwise_on_screen(self):
        # y grows downward, so +x turns toward +y
        p = vector_rotate_rads(Point(1, 0), math.pi / 2)
        assert p.x == pytest.approx(0, abs=1e-12)
        assert p.y == pytest.approx(1)

    def test_rotate_about_pivot(self):
        p = point_rotate_rads(Point(105, 105), Point(200, 150), math.pi / 2)
        assert p.x == pytest.approx(245)
        assert p.y == pytest.approx(55)

    def test_negative_angle_undoes_rotation(self):
        pivot = Point(-3, 8)
        p = Point(12.5, -4)
        turned = point_rotate_rads(p, pivot, 1.234)
        back = point_rotate_rads(turned, pivot, -1.234)
        assert back.x == pytest.approx(p.x)
        assert back.y == pytest.approx(p.y)

    def test_pivot_is_fixed(self):
        pivot = Point(7, 7)
        assert point_rotate_rads(pivot, pivot, 2.0) == pivot

    def test_rect_corners_unrotated(self):
        corners = rotated_rect_corners(0, 0, 10, 4, 0)
        assert [tuple(c) for c in corners] == [(0, 0), (10, 0), (10, 4), (0, 4)]

    def test_rect_corners_half_turn(self):
        corners = rotated_rect_corners(0, 0, 10, 4, math.pi)
        top_left = corners[0]
        assert top_left.x == pytest.approx(10)
        assert top_left.y == pytest.approx(4)
        assert rect_center(0, 0, 10, 4) == Point(5, 2)
