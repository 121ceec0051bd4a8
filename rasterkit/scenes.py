"""Render the demonstration scenes to raster images."""

from __future__ import annotations

import argparse
import math
from collections.abc import Callable, Iterable, Sequence

from PIL import Image, ImageDraw

from rasterkit.circle import bresenham_circle
from rasterkit.clipping import Rect, cohen_sutherland_clip, window_to_viewport
from rasterkit.lines import bresenham_line, dda

Color = tuple[int, int, int]

BLACK: Color = (0, 0, 0)
WHITE: Color = (255, 255, 255)
RED: Color = (255, 0, 0)
GREEN: Color = (0, 255, 0)
YELLOW: Color = (255, 255, 0)
CYAN: Color = (0, 255, 255)
MAGENTA: Color = (255, 0, 255)

CLIP_WINDOW = Rect(50.0, 10.0, 80.0, 40.0)
VIEWPORT = Rect(200.0, 50.0, 350.0, 150.0)
LINE_START = (70.0, 20.0)
LINE_END = (100.0, 10.0)


class Canvas:
    """A pixel image onto which a 2D orthographic world is projected.

    World coordinates run from ``(0, 0)`` at the bottom-left corner to
    ``(world_width, world_height)`` at the top-right corner.
    """

    def __init__(
        self, width: int, height: int, world_width: float, world_height: float
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("canvas size must be positive")
        if world_width <= 0 or world_height <= 0:
            raise ValueError("world size must be positive")
        self.width = width
        self.height = height
        self.world_width = world_width
        self.world_height = world_height
        self._image = Image.new("RGB", (width, height), BLACK)

    def to_pixel(self, x: float, y: float) -> tuple[int, int]:
        """Return the pixel holding world point ``(x, y)``; it may lie off the canvas."""
        px = math.floor(x / self.world_width * self.width)
        py = self.height - 1 - math.floor(y / self.world_height * self.height)
        return (px, py)

    def _inside(self, pixel: tuple[int, int]) -> bool:
        px, py = pixel
        return 0 <= px < self.width and 0 <= py < self.height

    def plot(self, points: Iterable[tuple[float, float]], color: Color) -> int:
        """Set the pixel of every world point that falls on the canvas.

        Returns the number of points that were drawn.
        """
        drawn = 0
        for x, y in points:
            pixel = self.to_pixel(x, y)
            if self._inside(pixel):
                self._image.putpixel(pixel, color)
                drawn += 1
        return drawn

    def outline(self, rect: Rect, color: Color) -> None:
        """Draw the closed outline of ``rect``."""
        corners = [self.to_pixel(x, y) for x, y in rect.corners()]
        ImageDraw.Draw(self._image).line(corners + corners[:1], fill=color, width=1)

    def to_image(self) -> Image.Image:
        """Return a copy of the rendered image."""
        return self._image.copy()


def circle_scene() -> Canvas:
    """A red circle of radius 20 centred on (100, 100)."""
    canvas = Canvas(600, 600, 420.0, 200.0)
    canvas.plot(bresenham_circle(100, 100, 20), RED)
    return canvas


def dda_scene() -> Canvas:
    """A red DDA line from (110, 110) to (800, 300)."""
    canvas = Canvas(640, 480, 640.0, 480.0)
    canvas.plot(dda(110, 110, 800, 300), RED)
    return canvas


def bresenham_scene() -> Canvas:
    """A white Bresenham line from (110, 10) to (210, 30)."""
    canvas = Canvas(600, 600, 420.0, 200.0)
    canvas.plot(bresenham_line(110, 10, 210, 30), WHITE)
    return canvas


def clipping_scene(clip: bool = False) -> Canvas:
    """The line-clipping scene, with the clipped and mapped lines when ``clip``."""
    canvas = Canvas(640, 480, 400.0, 200.0)
    canvas.plot(dda(*LINE_START, *LINE_END), RED)
    canvas.outline(CLIP_WINDOW, GREEN)
    if not clip:
        return canvas
    clipped = cohen_sutherland_clip(CLIP_WINDOW, *LINE_START, *LINE_END)
    if clipped is None:
        return canvas
    cx0, cy0, cx1, cy1 = clipped
    canvas.plot(dda(cx0, cy0, cx1, cy1), CYAN)
    canvas.outline(VIEWPORT, YELLOW)
    vx0, vy0 = window_to_viewport(CLIP_WINDOW, VIEWPORT, cx0, cy0)
    vx1, vy1 = window_to_viewport(CLIP_WINDOW, VIEWPORT, cx1, cy1)
    canvas.plot(dda(vx0, vy0, vx1, vy1), MAGENTA)
    return canvas


_SCENES: dict[str, Callable[[], Canvas]] = {
    "circle": circle_scene,
    "dda": dda_scene,
    "bresenham": bresenham_scene,
    "clipping": clipping_scene,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Render a scene and save it as an image file."""
    parser = argparse.ArgumentParser(
        prog="rasterkit", description="Render a rasterisation scene to an image."
    )
    parser.add_argument("scene", choices=sorted(_SCENES))
    parser.add_argument(
        "-c",
        "--clip",
        action="store_true",
        help="perform the clipping step (clipping scene only)",
    )
    parser.add_argument(
        "-o", "--output", help="output image path (default: <scene>.png)"
    )
    args = parser.parse_args(argv)

    if args.scene == "clipping":
        canvas = clipping_scene(args.clip)
    else:
        canvas = _SCENES[args.scene]()
    output = args.output or f"{args.scene}.png"
    canvas.to_image().save(output)
    return 0