"""Line rasterisation: the DDA and Bresenham line algorithms."""

from __future__ import annotations

from collections.abc import Iterator


def dda(x0: float, y0: float, x1: float, y1: float) -> Iterator[tuple[float, float]]:
    """Yield the points of a line drawn with the digital differential analyser.

    The number of steps is the larger of the two deltas, truncated towards
    zero. A line shorter than one unit on both axes yields only its start point.
    """
    dx = x1 - x0
    dy = y1 - y0
    steps = max(abs(int(dx)), abs(int(dy)))
    if steps == 0:
        yield (x0, y0)
        return
    x_increment = dx / steps
    y_increment = dy / steps
    x, y = x0, y0
    for _ in range(steps + 1):
        yield (x, y)
        x += x_increment
        y += y_increment


def bresenham_line(x0: int, y0: int, x1: int, y1: int) -> Iterator[tuple[int, int]]:
    """Yield the integer points of a line drawn with Bresenham's algorithm.

    The line advances one unit in x per point while x is below ``x1`` and
    steps up by at most one unit in y per point, so it is meant for lines
    running left to right with a slope between 0 and 1.
    """
    dx = x1 - x0
    dy = y1 - y0
    x, y = x0, y0
    p = 2 * dy - 2 * dx
    yield (x, y)
    while x < x1:
        if p > 0:
            p += 2 * dy - 2 * dx
            y += 1
        else:
            p += 2 * dy
        x += 1
        yield (x, y)