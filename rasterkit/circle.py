"""Midpoint circle rasterisation."""

from __future__ import annotations

from rasterkit.lines import Pixel, dda_line

TRIANGLE = ((200, 200), (400, 200), (300, 400))
INSCRIBED_CENTRE = (300, 263)


def midpoint_circle(xc: int, yc: int, r: int) -> list[Pixel]:
    """Rasterise a circle, eight symmetric pixels per step of the first octant."""
    pixels: list[Pixel] = []
    x, y = 0, r
    d = 1 - r
    while x <= y:
        pixels.extend(
            [
                (xc + x, yc + y),
                (xc - x, yc + y),
                (xc + x, yc - y),
                (xc - x, yc - y),
                (xc + y, yc + x),
                (xc - y, yc + x),
                (xc + y, yc - x),
                (xc - y, yc - x),
            ]
        )
        x += 1
        if d > 0:
            y -= 1
            d += 2 * (x - y) + 1
        else:
            d += 2 * x + 1
    return pixels


def circle_in_triangle(r: int = 60) -> list[Pixel]:
    """Pixels of the fixed triangle followed by a circle of radius ``r`` inside it."""
    pixels: list[Pixel] = []
    corners = list(TRIANGLE)
    for (x1, y1), (x2, y2) in zip(corners, corners[1:] + corners[:1]):
        pixels.extend(dda_line(x1, y1, x2, y2))
    pixels.extend(midpoint_circle(*INSCRIBED_CENTRE, r))
    return pixels