# rasterkit

rasterkit collects the classic algorithms from an introductory computer-graphics
course and renders their demonstration scenes to images with Pillow:

- **DDA** and **Bresenham** line rasterisation (`rasterkit.lines`)
- **Bresenham's midpoint circle**, using eight-way symmetry (`rasterkit.circle`)
- **Cohen-Sutherland** line clipping against a rectangular window (`rasterkit.clipping`)
- **Window-to-viewport** mapping of clipped segments (`rasterkit.clipping`)

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Using the algorithms

Every rasteriser is a generator. It yields the points it would plot, in the
order it plots them.

```python
from rasterkit.lines import dda, bresenham_line
from rasterkit.circle import bresenham_circle, eight_way_symmetry

points = list(bresenham_line(110, 10, 210, 30))
samples = list(dda(110, 110, 800, 300))
ring = list(bresenham_circle(100, 100, 20))
```

- `dda(x0, y0, x1, y1)` yields float points. The number of steps is the larger
  of the two deltas truncated towards zero; a line shorter than one unit on
  both axes yields only its start point.
- `bresenham_line(x0, y0, x1, y1)` yields integer points, advancing one unit in
  x per point and at most one unit in y. It is meant for lines running left to
  right with a slope between 0 and 1.
- `bresenham_circle(cx, cy, radius)` yields points in groups of eight, one per
  octant, in the order `eight_way_symmetry(cx, cy, x, y)` returns them.

Clipping works on a `Rect` window. `Rect.outcode(x, y)` gives the region code
of a point as an `OutCode` flag set (`INSIDE`, `LEFT`, `RIGHT`, `BOTTOM`,
`TOP`), and `Rect.corners()` returns the corners counter-clockwise from the
bottom-left one.

```python
from rasterkit.clipping import Rect, cohen_sutherland_clip, window_to_viewport

window = Rect(50, 10, 80, 40)
viewport = Rect(200, 50, 350, 150)

segment = cohen_sutherland_clip(window, 70, 20, 100, 10)
if segment is not None:
    x0, y0, x1, y1 = segment
    print(window_to_viewport(window, viewport, x0, y0))
```

`cohen_sutherland_clip` returns `None` when no part of the line lies inside
the window. `window_to_viewport` raises `ValueError` if the window has zero
width or height.

## Rendering scenes

`rasterkit.scenes` draws each demonstration scene on a `Canvas`. A canvas
projects a world whose origin is at the bottom-left corner onto a pixel image;
`plot` sets the pixels of world points that fall on the canvas (and returns how
many did), `outline` draws a `Rect`, and `to_image()` returns a Pillow image.

```python
from rasterkit.scenes import circle_scene, clipping_scene

circle_scene().to_image().save("circle.png")
clipping_scene(clip=True).to_image().save("clipping.png")
```

The scenes are:

- `circle_scene()`: a red circle of radius 20 centred on (100, 100).
- `dda_scene()`: a red DDA line from (110, 110) to (800, 300); the part past
  the canvas edge is not drawn.
- `bresenham_scene()`: a white Bresenham line from (110, 10) to (210, 30).
- `clipping_scene(clip=False)`: a red line from (70, 20) to (100, 10) and the
  green clipping window. With `clip=True` it also draws the clipped segment in
  cyan, the yellow viewport, and the segment mapped into the viewport in
  magenta.

The same scenes can be rendered from the command line:

```
rasterkit circle
rasterkit clipping --clip -o clipping.png
rasterkit --help
```

The scene is one of `bresenham`, `circle`, `clipping` or `dda`. `-c`/`--clip`
performs the clipping step for the clipping scene, and `-o`/`--output` sets the
output path (default `<scene>.png`).

## What it does not do

rasterkit does not open a window or respond to keyboard input. Scenes are
rendered once to an image file or a Pillow image; the clipping step is chosen
up front with `clip=True` or `--clip`.