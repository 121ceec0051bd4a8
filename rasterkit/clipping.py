"""Cohen-Sutherland line clipping and window-to-viewport mapping."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class OutCode(enum.IntFlag):
    """Region code of a point relative to a clipping rectangle."""

    INSIDE = 0
    LEFT = 1
    RIGHT = 2
    BOTTOM = 4
    TOP = 8


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its minimum and maximum corners."""

    xmin: float
    ymin: float
    xmax: float
    ymax: float

    @property
    def width(self) -> float:
        return self.xmax - self.xmin

    @property
    def height(self) -> float:
        return self.ymax - self.ymin

    def corners(self) -> tuple[tuple[float, float], ...]:
        """Return the corners counter-clockwise from the bottom-left one."""
        return (
            (self.xmin, self.ymin),
            (self.xmax, self.ymin),
            (self.xmax, self.ymax),
            (self.xmin, self.ymax),
        )

    def outcode(self, x: float, y: float) -> OutCode:
        """Return the region code of ``(x, y)`` relative to this rectangle."""
        code = OutCode.INSIDE
        if x < self.xmin:
            code |= OutCode.LEFT
        elif x > self.xmax:
            code |= OutCode.RIGHT
        if y < self.ymin:
            code |= OutCode.BOTTOM
        elif y > self.ymax:
            code |= OutCode.TOP
        return code


def cohen_sutherland_clip(
    window: Rect, x0: float, y0: float, x1: float, y1: float
) -> tuple[float, float, float, float] | None:
    """Clip the segment to ``window``.

    Returns the clipped endpoints as ``(x0, y0, x1, y1)``, in the same order
    as given, or ``None`` when no part of the segment lies inside.
    """
    out0 = window.outcode(x0, y0)
    out1 = window.outcode(x1, y1)
    while True:
        if not (out0 | out1):
            return (x0, y0, x1, y1)
        if out0 & out1:
            return None
        outside = out0 or out1
        if outside & OutCode.TOP:
            x = x0 + (x1 - x0) * (window.ymax - y0) / (y1 - y0)
            y = window.ymax
        elif outside & OutCode.BOTTOM:
            x = x0 + (x1 - x0) * (window.ymin - y0) / (y1 - y0)
            y = window.ymin
        elif outside & OutCode.RIGHT:
            y = y0 + (y1 - y0) * (window.xmax - x0) / (x1 - x0)
            x = window.xmax
        else:
            y = y0 + (y1 - y0) * (window.xmin - x0) / (x1 - x0)
            x = window.xmin
        if outside == out0:
            x0, y0 = x, y
            out0 = window.outcode(x0, y0)
        else:
            x1, y1 = x, y
            out1 = window.outcode(x1, y1)


def window_to_viewport(
    window: Rect, viewport: Rect, x: float, y: float
) -> tuple[float, float]:
    """Map a point in ``window`` coordinates to ``viewport`` coordinates."""
    if window.width == 0 or window.height == 0:
        raise ValueError("window must have a non-zero width and height")
    sx = viewport.width / window.width
    sy = viewport.height / window.height
    return (
        viewport.xmin + (x - window.xmin) * sx,
        viewport.ymin + (y - window.ymin) * sy,
    )