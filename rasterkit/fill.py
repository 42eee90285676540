"""A small pixel canvas with flood fill and boundary fill."""

from __future__ import annotations

from typing import Callable, Iterable

from rasterkit.lines import dda_line
from rasterkit.shapes import BLACK, WHITE, Color

Point = tuple[int, int]


class Canvas:
    """A width x height grid of RGB colours, origin at the bottom left."""

    def __init__(self, width: int = 600, height: int = 600, background: Color = WHITE) -> None:
        if width < 1 or height < 1:
            raise ValueError(f"canvas size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.background = tuple(background)
        self._rows = [[self.background] * width for _ in range(height)]

    def __contains__(self, point: Point) -> bool:
        x, y = point
        return 0 <= x < self.width and 0 <= y < self.height

    def _check(self, x: int, y: int) -> None:
        if (x, y) not in self:
            raise IndexError(f"pixel ({x}, {y}) is outside the {self.width}x{self.height} canvas")

    def get(self, x: int, y: int) -> Color:
        """Colour of the pixel at (x, y)."""
        self._check(x, y)
        return self._rows[y][x]

    def set(self, x: int, y: int, color: Color) -> None:
        """Paint the pixel at (x, y)."""
        self._check(x, y)
        self._rows[y][x] = tuple(color)

    def draw_polygon(self, points: Iterable[Point], color: Color = BLACK) -> None:
        """Draw a closed outline through the points; parts off the canvas are dropped."""
        corners = list(points)
        if not corners:
            raise ValueError("a polygon needs at least one point")
        color = tuple(color)
        for (x1, y1), (x2, y2) in zip(corners, corners[1:] + corners[:1]):
            for px, py in dda_line(x1, y1, x2, y2):
                if (px, py) in self:
                    self._rows[py][px] = color

    def draw_rectangle(self, x1: int, y1: int, x2: int, y2: int, color: Color = BLACK) -> None:
        """Draw the outline of the axis-aligned rectangle with the given corners."""
        self.draw_polygon([(x1, y1), (x1, y2), (x2, y2), (x2, y1)], color)


def _spread(canvas: Canvas, x: int, y: int, paintable: Callable[[Color], bool], color: Color) -> int:
    filled = 0
    stack = [(x, y)]
    while stack:
        px, py = stack.pop()
        if (px, py) not in canvas or not paintable(canvas.get(px, py)):
            continue
        canvas.set(px, py, color)
        filled += 1
        # Pushed in reverse so the right neighbour is visited first.
        stack.extend(((px, py - 1), (px, py + 1), (px - 1, py), (px + 1, py)))
    return filled


def flood_fill(canvas: Canvas, x: int, y: int, old_color: Color, new_color: Color) -> int:
    """Repaint the 4-connected region of ``old_color`` around (x, y); return pixels painted."""
    old_color, new_color = tuple(old_color), tuple(new_color)
    if old_color == new_color:
        return 0
    return _spread(canvas, x, y, lambda c: c == old_color, new_color)


def boundary_fill(canvas: Canvas, x: int, y: int, fill_color: Color, border_color: Color) -> int:
    """Paint outward from (x, y) until ``border_color`` stops it; return pixels painted."""
    fill_color, border_color = tuple(fill_color), tuple(border_color)
    return _spread(
        canvas,
        x,
        y,
        lambda c: c != border_color and c != fill_color,
        fill_color,
    )