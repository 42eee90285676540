"""Line rasterisation: Bresenham, DDA and styled DDA variants."""

from __future__ import annotations

from enum import Enum
from itertools import islice
from typing import Iterator

Pixel = tuple[int, int]

THICK_WIDTH = 20
_DOT_SPACING = 3
_DASH_ON = 10
_DASH_CYCLE = 15


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def bresenham_line(x1: int, y1: int, x2: int, y2: int) -> list[Pixel]:
    """Rasterise an integer line with the slope-split Bresenham algorithm.

    The slope is computed with truncating integer division; lines whose
    truncated slope has magnitude below one are walked along x, the rest
    along y.
    """
    run = x2 - x1
    slope = (y2 - y1) if run == 0 else _trunc_div(y2 - y1, run)
    pixels: list[Pixel] = []

    if abs(slope) < 1:
        if x1 > x2:
            x1, y1, x2, y2 = x2, y2, x1, y1
        dx, dy = abs(x2 - x1), abs(y2 - y1)
        p = 2 * dy - dx
        x, y = x1, y1
        while x <= x2:
            pixels.append((x, y))
            x += 1
            if p >= 0:
                y += 1
                p += 2 * dy - 2 * dx
            else:
                p += 2 * dy
    else:
        if y1 > y2:
            x1, y1, x2, y2 = x2, y2, x1, y1
        dx, dy = abs(x2 - x1), abs(y2 - y1)
        p = 2 * dx - dy
        x, y = x1, y1
        while y <= y2:
            pixels.append((x, y))
            y += 1
            if p >= 0:
                x += 1 if slope >= 1 else -1
                p += 2 * dx - 2 * dy
            else:
                p += 2 * dx
    return pixels


def _pixel(x: float, y: float) -> Pixel:
    return int(x), int(y)


def _increments(x1: float, y1: float, x2: float, y2: float) -> tuple[float, float, float]:
    dx = x2 - x1
    dy = y2 - y1
    step = max(abs(dx), abs(dy))
    if step == 0:
        return 0.0, 0.0, 0.0
    return step, dx / step, dy / step


def _positions(x: float, y: float, xinc: float, yinc: float) -> Iterator[tuple[float, float]]:
    while True:
        yield x, y
        x += xinc
        y += yinc


def dda_line(x1: float, y1: float, x2: float, y2: float) -> list[Pixel]:
    """Rasterise a line with the digital differential analyser."""
    step, xinc, yinc = _increments(x1, y1, x2, y2)
    if not step:
        return [_pixel(x1, y1)]
    walk = _positions(x1, y1, xinc, yinc)
    return [_pixel(x, y) for x, y in islice(walk, int(step) + 1)]


def dotted_line(x1: float, y1: float, x2: float, y2: float) -> list[Pixel]:
    """Rasterise a line keeping the start and every third DDA step after it."""
    step, xinc, yinc = _increments(x1, y1, x2, y2)
    if not step:
        return [_pixel(x1, y1)]
    walk = _positions(x1, y1, xinc, yinc)
    pixels = [_pixel(*next(walk))]
    for i, (x, y) in enumerate(islice(walk, int(step) + 1)):
        if i % _DOT_SPACING == 0:
            pixels.append(_pixel(x, y))
    return pixels


def dashed_line(x1: float, y1: float, x2: float, y2: float) -> list[Pixel]:
    """Rasterise a line as dashes of visible steps separated by gaps."""
    step, xinc, yinc = _increments(x1, y1, x2, y2)
    if not step:
        return [_pixel(x1, y1)]
    walk = _positions(x1, y1, xinc, yinc)
    pixels = [_pixel(*next(walk))]
    count = 1
    for x, y in islice(walk, int(step) + 1):
        count += 1
        if count <= _DASH_ON:
            pixels.append(_pixel(x, y))
        elif count > _DASH_CYCLE:
            count = 1
    return pixels


def thick_line(x1: float, y1: float, x2: float, y2: float, width: int = THICK_WIDTH) -> list[Pixel]:
    """Rasterise a line as square brushes of ``width`` pixels along a DDA path."""
    if width < 1:
        raise ValueError(f"width must be positive, got {width}")
    low = -(width // 2)
    high = width - width // 2
    covered: dict[Pixel, None] = {}
    for cx, cy in dda_line(x1, y1, x2, y2):
        for ox in range(low, high):
            for oy in range(low, high):
                covered[(cx + ox, cy + oy)] = None
    return list(covered)


class LineStyle(Enum):
    """Line styles, keyed by the character that selects them."""

    SIMPLE = "s"
    DOTTED = "d"
    DASHED = "D"
    THICK = "T"


def styled_line(style: LineStyle | str, x1: float, y1: float, x2: float, y2: float) -> list[Pixel]:
    """Rasterise a line in the given style."""
    style = LineStyle(style)
    if style is LineStyle.SIMPLE:
        return dda_line(x1, y1, x2, y2)
    if style is LineStyle.DOTTED:
        return dotted_line(x1, y1, x2, y2)
    if style is LineStyle.DASHED:
        return dashed_line(x1, y1, x2, y2)
    return thick_line(x1, y1, x2, y2, THICK_WIDTH)


class LineTool:
    """Polyline drawing state driven by clicks.

    The first click sets a start point; each later click draws a segment
    from the previous point and makes the click the new start.
    """

    def __init__(self, style: LineStyle | str) -> None:
        self.style = LineStyle(style)
        self._start: tuple[float, float] | None = None

    def click(self, x: float, y: float) -> list[Pixel]:
        """Register a click and return the pixels of any segment it completes."""
        if self._start is None:
            self._start = (x, y)
            return []
        pixels = styled_line(self.style, *self._start, x, y)
        self._start = (x, y)
        return pixels

    def reset(self) -> None:
        """Forget the start point so the next click begins a new polyline."""
        self._start = None