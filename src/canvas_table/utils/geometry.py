# File: src/canvas_table/utils/geometry.py
"""
2D point math for scene coordinates.

Scene space has x growing right and y growing down, so a positive angle
turns clockwise on screen. Points are plain immutable value objects and do
not depend on any rendering library.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Point:
    """A point (or vector) in scene coordinates."""
    x: float
    y: float

    def __iter__(self):
        yield self.x
        yield self.y

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def scale(self, factor: float) -> "Point":
        return Point(self.x * factor, self.y * factor)

    def distance_to(self, other: "Point") -> float:
        return math.hypot(self.x - other.x, self.y - other.y)


def point_from(x: float, y: float) -> Point:
    return Point(float(x), float(y))


def vector_rotate_rads(vector: Point, angle: float) -> Point:
    """Rotate a vector about the origin by ``angle`` radians."""
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    return Point(
        vector.x * cos_a - vector.y * sin_a,
        vector.x * sin_a + vector.y * cos_a,
    )


def point_rotate_rads(point: Point, pivot: Point, angle: float) -> Point:
    """Rotate ``point`` about ``pivot`` by ``angle`` radians.

    Args:
        point: Point to rotate.
        pivot: Center of rotation.
        angle: Rotation in radians; negate it to undo a rotation.

    Returns:
        The rotated point.
    """
    return pivot + vector_rotate_rads(point - pivot, angle)


def rect_center(x: float, y: float, width: float, height: float) -> Point:
    return Point(x + width / 2.0, y + height / 2.0)


def rotated_rect_corners(
    x: float, y: float, width: float, height: float, angle: float
) -> Tuple[Point, Point, Point, Point]:
    """Scene positions of a rotated rectangle's corners.

    Returns:
        (top_left, top_right, bottom_right, bottom_left) in the rectangle's
        own frame, each rotated about the rectangle center.
    """
    pivot = rect_center(x, y, width, height)
    return tuple(
        point_rotate_rads(Point(px, py), pivot, angle)
        for px, py in (
            (x, y),
            (x + width, y),
            (x + width, y + height),
            (x, y + height),
        )
    )
