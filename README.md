# rasterkit

Classic 2D raster graphics algorithms in plain Python, with no dependencies.
Every function returns the pixels, points, segments or polygons it computes,
so you can draw them however you like: onto an image, in a GUI, or check them
in a test.

## Installation

```
pip install rasterkit
```

## What is inside

### `rasterkit.lines`

- `bresenham_line(x1, y1, x2, y2)`: integer line rasterisation with the
  slope-split Bresenham algorithm.
- `dda_line(x1, y1, x2, y2)`: the digital differential analyser; pixel
  coordinates are truncated to integers.
- `dotted_line(...)`: the start pixel and every third DDA step after it.
- `dashed_line(...)`: dashes of visible steps separated by gaps.
- `thick_line(x1, y1, x2, y2, width=20)`: a square brush of `width` pixels
  stamped along the DDA path; raises `ValueError` for a width below 1.
- `LineStyle`: `SIMPLE` (`"s"`), `DOTTED` (`"d"`), `DASHED` (`"D"`) and
  `THICK` (`"T"`); `styled_line(style, x1, y1, x2, y2)` draws in a style
  given as a member or its character.
- `LineTool(style)`: chains clicks into a polyline. The first `click(x, y)`
  sets the start point and returns no pixels; each later click returns the
  segment from the previous point. `reset()` starts a new polyline.

### `rasterkit.circle`

- `midpoint_circle(xc, yc, r)`: midpoint circle, eight symmetric pixels per
  step of the first octant.
- `circle_in_triangle(r=60)`: the outline of the triangle
  (200, 200), (400, 200), (300, 400) followed by a circle of radius `r`
  centred at (300, 263).

### `rasterkit.shapes`

- `Primitive` (`PIXEL`, `LINE`, `TRIANGLE`, `POLYGON`) and
  `primitive_shape(primitive)`, which returns a fixed `Shape` (vertices,
  colour and point size or line width) for each.
- `chessboard_squares(board_size, extent=600)`: a list of `Square` records
  (row, column, corners, colour); squares with an even row+column sum are
  white.
- `chessboard_grid(board_size, extent=600)`: the pixels of the grid lines,
  drawn with `bresenham_line`.

### `rasterkit.fill`

- `Canvas(width=600, height=600, background=WHITE)`: an RGB pixel grid with
  its origin at the bottom left. `get`, `set`, `draw_polygon` and
  `draw_rectangle`; `(x, y) in canvas` tests bounds, and out-of-range
  `get`/`set` raise `IndexError`.
- `flood_fill(canvas, x, y, old_color, new_color)` and
  `boundary_fill(canvas, x, y, fill_color, border_color)`: 4-connected fills
  that return the number of pixels painted.

### `rasterkit.transform`

`translate`, `scale`, `rotate` (degrees, counter-clockwise, about the
origin), `rotate_about`, `reflect_x`, `reflect_y` and `reflect_xy` (mirror
lines through 300 by default). Each takes a list of integer points and
returns a new list, rounded to whole pixels where needed. `Transformation`
enumerates these operations.

### `rasterkit.clipping`

- `ClipWindow(xmin, ymin, xmax, ymax)` with `outcode(x, y)`, returning an
  `Edge` flag (`LEFT`, `RIGHT`, `BOTTOM`, `TOP`).
- `cohen_sutherland(window, x1, y1, x2, y2)`: the visible endpoints of a
  segment, or `None` when it lies wholly outside.
- `clip_edge(polygon, window, edge)` and `clip_polygon(polygon, window)`:
  Sutherland–Hodgman clipping against one edge, or against the left, right,
  top and bottom edges in turn.

### `rasterkit.curves`

- `combination(n, k)`, `bezier_blend(t, n, k)` and
  `bezier_curve(control_points, step=0.001)`.
- `koch_snowflake(start=(-0.7, 0.5), length=0.015, iterations=4)`: the
  segments of a Koch snowflake.
- `wave_points(time, segments=20)` and `WaveAnimation`, whose `step()`
  advances the time by 0.01 and returns the new wave; `line_width()` and
  `color()` give the current width and RGB colour.

## Example

```python
from rasterkit.lines import bresenham_line, dashed_line
from rasterkit.fill import Canvas, flood_fill
from rasterkit.clipping import ClipWindow, cohen_sutherland
from rasterkit.curves import bezier_curve

pixels = bresenham_line(0, 0, 10, 4)
dashes = dashed_line(0, 0, 100, 0)

white, black, red = (1.0, 1.0, 1.0), (0.0, 0.0, 0.0), (1.0, 0.0, 0.0)
canvas = Canvas(60, 60, white)
canvas.draw_rectangle(10, 10, 40, 40, black)
painted = flood_fill(canvas, 20, 20, white, red)

window = ClipWindow(50, 50, 400, 400)
segment = cohen_sutherland(window, 0, 100, 500, 100)

curve = bezier_curve([(200, 200), (300, 450), (500, 150)], 0.001)
```

## What it does not do

rasterkit only computes geometry. It opens no window, shows nothing on
screen, reads no mouse or keyboard input and has no command-line program;
`LineTool` and `WaveAnimation` hold the state an interactive program would
need, but driving them and displaying the result is left to you.

## Running the tests

```
pip install -e ".[test]"
pytest
```