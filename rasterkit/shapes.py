"""Basic drawing primitives and chessboard layout."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from rasterkit.lines import Pixel, bresenham_line

Color = tuple[float, float, float]

WHITE: Color = (1.0, 1.0, 1.0)
BLACK: Color = (0.0, 0.0, 0.0)
RED: Color = (1.0, 0.0, 0.0)
BLUE: Color = (0.0, 0.0, 1.0)
CYAN: Color = (0.0, 1.0, 1.0)

BOARD_EXTENT = 600


class Primitive(IntEnum):
    """Primitives offered by the drawing menu, keyed by their menu entry."""

    PIXEL = 1
    LINE = 2
    TRIANGLE = 3
    POLYGON = 4


@dataclass(frozen=True)
class Shape:
    """A primitive with its vertices, colour and point size or line width."""

    primitive: Primitive
    vertices: tuple[Pixel, ...]
    color: Color
    size: float = 1.0


@dataclass(frozen=True)
class Square:
    """One square of a chessboard, corners listed counter-clockwise."""

    row: int
    col: int
    corners: tuple[Pixel, Pixel, Pixel, Pixel]
    color: Color


_PRIMITIVES = {
    Primitive.PIXEL: Shape(Primitive.PIXEL, ((100, 100),), RED, 10.0),
    Primitive.LINE: Shape(Primitive.LINE, ((10, 10), (300, 10)), RED, 3.0),
    Primitive.TRIANGLE: Shape(
        Primitive.TRIANGLE, ((50, 50), (300, 50), (150, 100)), BLUE
    ),
    Primitive.POLYGON: Shape(
        Primitive.POLYGON, ((150, 150), (400, 150), (400, 250), (150, 250)), CYAN
    ),
}


def primitive_shape(primitive: Primitive | int) -> Shape:
    """Return the fixed shape drawn for a menu primitive."""
    return _PRIMITIVES[Primitive(primitive)]


def _square_size(board_size: int, extent: int) -> int:
    if board_size < 1:
        raise ValueError(f"board size must be positive, got {board_size}")
    size = extent // board_size
    if size < 1:
        raise ValueError(f"extent {extent} is too small for {board_size} squares")
    return size


def chessboard_squares(board_size: int, extent: int = BOARD_EXTENT) -> list[Square]:
    """Lay out a chessboard; squares with an even row+column sum are white."""
    size = _square_size(board_size, extent)
    squares: list[Square] = []
    for row in range(board_size):
        for col in range(board_size):
            left, bottom = col * size, row * size
            right, top = left + size, bottom + size
            squares.append(
                Square(
                    row,
                    col,
                    ((left, bottom), (right, bottom), (right, top), (left, top)),
                    WHITE if (row + col) % 2 == 0 else BLACK,
                )
            )
    return squares


def chessboard_grid(board_size: int, extent: int = BOARD_EXTENT) -> list[Pixel]:
    """Pixels of the board's grid lines, horizontal and vertical in turn."""
    size = _square_size(board_size, extent)
    span = board_size * size
    pixels: list[Pixel] = []
    for i in range(board_size + 1):
        offset = i * size
        pixels.extend(bresenham_line(0, offset, span, offset))
        pixels.extend(bresenham_line(offset, 0, offset, span))
    return pixels