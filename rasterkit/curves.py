"""Bezier curves, the Koch snowflake and an animated sine wave."""

from __future__ import annotations

import math
from typing import Sequence

PointF = tuple[float, float]
Segment = tuple[PointF, PointF]

DEFAULT_CONTROL_POINTS: tuple[PointF, ...] = ((200, 200), (300, 450), (500, 150))
KOCH_START: PointF = (-0.7, 0.5)
KOCH_LENGTH = 0.015
KOCH_ITERATIONS = 4
WAVE_SEGMENTS = 20
WAVE_TIME_STEP = 0.01
FRAME_INTERVAL_MS = 16


def combination(n: int, k: int) -> int:
    """Number of ways to choose ``k`` items from ``n``."""
    if n < 0 or not 0 <= k <= n:
        raise ValueError(f"invalid combination C({n}, {k})")
    return math.comb(n, k)


def bezier_blend(t: float, n: int, k: int) -> float:
    """Bernstein basis polynomial of degree ``n`` and index ``k`` at ``t``."""
    return combination(n, k) * t**k * (1 - t) ** (n - k)


def bezier_curve(control_points: Sequence[Sequence[float]], step: float = 0.001) -> list[PointF]:
    """Sample the Bezier curve of the control points at t = 0, step, ..., 1."""
    points = [(float(x), float(y)) for x, y in control_points]
    if not points:
        raise ValueError("a Bezier curve needs at least one control point")
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")
    degree = len(points) - 1
    samples = int(round(1 / step))
    curve: list[PointF] = []
    for i in range(samples + 1):
        t = min(i * step, 1.0)
        weights = [bezier_blend(t, degree, k) for k in range(degree + 1)]
        curve.append(
            (
                sum(w * x for w, (x, _) in zip(weights, points)),
                sum(w * y for w, (_, y) in zip(weights, points)),
            )
        )
    return curve


def _koch_directions(direction: float, iterations: int) -> list[float]:
    directions = [direction]
    for _ in range(iterations):
        directions = [d + turn for d in directions for turn in (0.0, 60.0, -60.0, 0.0)]
    return directions


def koch_snowflake(
    start: PointF = KOCH_START, length: float = KOCH_LENGTH, iterations: int = KOCH_ITERATIONS
) -> list[Segment]:
    """Segments of a Koch snowflake whose smallest segments are ``length`` long."""
    if iterations < 0:
        raise ValueError(f"iterations must not be negative, got {iterations}")
    x, y = float(start[0]), float(start[1])
    segments: list[Segment] = []
    for side in (0.0, -120.0, 120.0):
        for direction in _koch_directions(side, iterations):
            rad = math.radians(direction)
            nx, ny = x + length * math.cos(rad), y + length * math.sin(rad)
            segments.append(((x, y), (nx, ny)))
            x, y = nx, ny
    return segments


def wave_points(time: float, segments: int = WAVE_SEGMENTS) -> list[PointF]:
    """Vertices of the sine wave line strip at the given time."""
    if segments < 2:
        raise ValueError(f"a wave needs at least two points, got {segments}")
    points = []
    for i in range(segments):
        t = i / (segments - 1)
        points.append((-0.8 + 1.6 * t, 0.3 * math.sin(time + t * 6.28)))
    return points


class WaveAnimation:
    """A sine wave whose shape, width and colour change with time."""

    def __init__(self, segments: int = WAVE_SEGMENTS) -> None:
        if segments < 2:
            raise ValueError(f"a wave needs at least two points, got {segments}")
        self.segments = segments
        self.time = 0.0
        self.points: list[PointF] = []

    def step(self) -> list[PointF]:
        """Advance one frame and return the new line vertices."""
        self.time += WAVE_TIME_STEP
        self.points = wave_points(self.time, self.segments)
        return self.points

    def line_width(self) -> float:
        """Current line width."""
        return 5.0 * (1.0 - 0.5 * math.sin(self.time * 2.0))

    def color(self) -> tuple[float, float, float]:
        """Current RGB colour of the line."""
        return (
            0.5 + 0.5 * math.sin(self.time),
            0.5 + 0.5 * math.cos(self.time),
            1.0 - 0.5 * math.sin(self.time),
        )