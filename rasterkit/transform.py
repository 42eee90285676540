"""2D transformations of polygon vertex lists."""

from __future__ import annotations

import math
from enum import IntEnum
from typing import Iterable

Point = tuple[int, int]

AXIS = 300


class Transformation(IntEnum):
    """Transformations offered by the menu, keyed by their menu entry."""

    TRANSLATE = 1
    SCALE = 2
    ROTATE = 3
    ROTATE_ABOUT = 4
    REFLECT_X = 5
    REFLECT_Y = 6
    REFLECT_XY = 7


def translate(points: Iterable[Point], tx: int, ty: int) -> list[Point]:
    """Shift every point by (tx, ty)."""
    return [(x + tx, y + ty) for x, y in points]


def scale(points: Iterable[Point], sx: float, sy: float) -> list[Point]:
    """Scale every point about the origin, rounding to whole pixels."""
    return [(round(x * sx), round(y * sy)) for x, y in points]


def rotate(points: Iterable[Point], angle: float) -> list[Point]:
    """Rotate counter-clockwise about the origin by ``angle`` degrees."""
    return rotate_about(points, angle, 0, 0)


def rotate_about(points: Iterable[Point], angle: float, px: int, py: int) -> list[Point]:
    """Rotate counter-clockwise about (px, py) by ``angle`` degrees."""
    rad = math.radians(angle)
    cos, sin = math.cos(rad), math.sin(rad)
    rotated = []
    for x, y in points:
        dx, dy = x - px, y - py
        rotated.append((round(dx * cos - dy * sin) + px, round(dx * sin + dy * cos) + py))
    return rotated


def reflect_x(points: Iterable[Point], axis: int = AXIS) -> list[Point]:
    """Mirror across the horizontal line y = axis."""
    return [(x, 2 * axis - y) for x, y in points]


def reflect_y(points: Iterable[Point], axis: int = AXIS) -> list[Point]:
    """Mirror across the vertical line x = axis."""
    return [(2 * axis - x, y) for x, y in points]


def reflect_xy(points: Iterable[Point], axis: int = AXIS) -> list[Point]:
    """Mirror through the point (axis, axis)."""
    return [(2 * axis - x, 2 * axis - y) for x, y in points]