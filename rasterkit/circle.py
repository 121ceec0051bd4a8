"""Circle rasterisation with Bresenham's midpoint circle algorithm."""

from __future__ import annotations

from collections.abc import Iterator


def eight_way_symmetry(cx: int, cy: int, x: int, y: int) -> tuple[tuple[int, int], ...]:
    """Return the eight points symmetric to offset ``(x, y)`` around ``(cx, cy)``."""
    return (
        (x + cx, y + cy),
        (y + cx, x + cy),
        (-y + cx, x + cy),
        (-x + cx, y + cy),
        (-x + cx, -y + cy),
        (-y + cx, -x + cy),
        (y + cx, -x + cy),
        (x + cx, -y + cy),
    )


def bresenham_circle(cx: int, cy: int, radius: int) -> Iterator[tuple[int, int]]:
    """Yield the points of a circle of ``radius`` centred on ``(cx, cy)``.

    Points come in groups of eight, one per octant, in the order that
    :func:`eight_way_symmetry` gives them.
    """
    x = 0
    y = radius
    d = 3 - 2 * radius
    yield from eight_way_symmetry(cx, cy, x, y)
    while x <= y:
        if d <= 0:
            d += 4 * x + 6
        else:
            d += 4 * (x - y) + 10
            y -= 1
        x += 1
        yield from eight_way_symmetry(cx, cy, x, y)