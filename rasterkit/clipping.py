"""Cohen-Sutherland line clipping and Sutherland-Hodgman polygon clipping."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntFlag
from typing import Iterable, Sequence

PointF = tuple[float, float]


class Edge(IntFlag):
    """Window edges; the same bits make up a region outcode."""

    LEFT = 1
    RIGHT = 2
    BOTTOM = 4
    TOP = 8


_SINGLE_EDGES = (Edge.LEFT, Edge.RIGHT, Edge.TOP, Edge.BOTTOM)


@dataclass(frozen=True)
class ClipWindow:
    """An axis-aligned clipping rectangle."""

    xmin: float
    ymin: float
    xmax: float
    ymax: float

    def __post_init__(self) -> None:
        if self.xmin > self.xmax or self.ymin > self.ymax:
            raise ValueError(
                f"empty clip window ({self.xmin}, {self.ymin})-({self.xmax}, {self.ymax})"
            )

    def outcode(self, x: float, y: float) -> Edge:
        """Region code of a point: the edges it lies beyond."""
        code = Edge(0)
        if x < self.xmin:
            code |= Edge.LEFT
        if x > self.xmax:
            code |= Edge.RIGHT
        if y < self.ymin:
            code |= Edge.BOTTOM
        if y > self.ymax:
            code |= Edge.TOP
        return code


LINE_WINDOW = ClipWindow(50, 50, 400, 400)
POLYGON_WINDOW = ClipWindow(300, 300, 600, 600)


def cohen_sutherland(
    window: ClipWindow, x1: float, y1: float, x2: float, y2: float
) -> tuple[PointF, PointF] | None:
    """Clip a segment to the window; return its visible endpoints or None."""
    x1, y1, x2, y2 = float(x1), float(y1), float(x2), float(y2)
    run = x2 - x1
    slope = 0.0 if run == 0 else (y2 - y1) / run
    code1 = window.outcode(x1, y1)
    code2 = window.outcode(x2, y2)
    while True:
        if not (code1 | code2):
            return (x1, y1), (x2, y2)
        if code1 & code2:
            return None
        out = code1 or code2
        if out & Edge.TOP:
            y = float(window.ymax)
            x = x1 + (y - y1) / slope if slope else x1
        elif out & Edge.BOTTOM:
            y = float(window.ymin)
            x = x1 + (y - y1) / slope if slope else x1
        elif out & Edge.LEFT:
            x = float(window.xmin)
            y = y1 + slope * (x - x1)
        else:
            x = float(window.xmax)
            y = y1 + slope * (x - x1)
        if out == code1:
            x1, y1 = x, y
            code1 = window.outcode(x1, y1)
        else:
            x2, y2 = x, y
            code2 = window.outcode(x2, y2)


def _inside(point: PointF, window: ClipWindow, edge: Edge) -> bool:
    x, y = point
    if edge is Edge.LEFT:
        return x >= window.xmin
    if edge is Edge.RIGHT:
        return x <= window.xmax
    if edge is Edge.BOTTOM:
        return y >= window.ymin
    return y <= window.ymax


def _intersect(p: PointF, q: PointF, window: ClipWindow, edge: Edge) -> PointF:
    (x1, y1), (x2, y2) = p, q
    if edge in (Edge.LEFT, Edge.RIGHT):
        bound = float(window.xmin if edge is Edge.LEFT else window.xmax)
        y = y1 if x2 == x1 else (y2 - y1) / (x2 - x1) * (bound - x1) + y1
        return bound, float(y)
    bound = float(window.ymin if edge is Edge.BOTTOM else window.ymax)
    x = x1 if y2 == y1 else (x2 - x1) / (y2 - y1) * (bound - y1) + x1
    return float(x), bound


def clip_edge(polygon: Iterable[Sequence[float]], window: ClipWindow, edge: Edge) -> list[PointF]:
    """Clip a closed polygon against one edge of the window."""
    edge = Edge(edge)
    if edge not in _SINGLE_EDGES:
        raise ValueError(f"expected a single window edge, got {edge!r}")
    vertices = [(float(x), float(y)) for x, y in polygon]
    clipped: list[PointF] = []
    for p, q in zip(vertices, vertices[1:] + vertices[:1]):
        p_in = _inside(p, window, edge)
        q_in = _inside(q, window, edge)
        if not p_in and q_in:
            clipped.append(_intersect(p, q, window, edge))
            clipped.append(q)
        elif p_in and q_in:
            clipped.append(q)
        elif p_in and not q_in:
            clipped.append(_intersect(p, q, window, edge))
    return clipped


def clip_polygon(polygon: Iterable[Sequence[float]], window: ClipWindow) -> list[PointF]:
    """Clip a closed polygon against the left, right, top and bottom edges in turn."""
    vertices = [(float(x), float(y)) for x, y in polygon]
    for edge in _SINGLE_EDGES:
        vertices = clip_edge(vertices, window, edge)
    return vertices