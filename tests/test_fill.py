import pytest

from rasterkit.fill import Canvas, boundary_fill, flood_fill
from rasterkit.shapes import BLACK, BLUE, RED, WHITE

GREEN = (0.0, 1.0, 0.0)


@pytest.fixture
def boxed():
    canvas = Canvas(20, 20)
    canvas.draw_rectangle(5, 5, 15, 15)
    return canvas


def _count(canvas, color):
    return sum(
        canvas.get(x, y) == color for x in range(canvas.width) for y in range(canvas.height)
    )


def test_new_canvas_is_background():
    canvas = Canvas(4, 3)
    assert _count(canvas, WHITE) == 4 * 3


def test_set_then_get():
    canvas = Canvas(10, 10)
    canvas.set(3, 7, RED)
    assert canvas.get(3, 7) == RED
    assert canvas.get(7, 3) == WHITE


def test_get_out_of_range():
    canvas = Canvas(10, 10)
    with pytest.raises(IndexError):
        canvas.get(10, 0)
    with pytest.raises(IndexError):
        canvas.set(-1, 0, RED)


def test_bad_canvas_size():
    with pytest.raises(ValueError):
        Canvas(0, 5)


def test_polygon_outline_passes_through_vertices():
    canvas = Canvas(50, 50)
    corners = [(10, 10), (30, 40), (40, 12)]
    canvas.draw_polygon(corners, BLACK)
    assert all(canvas.get(x, y) == BLACK for x, y in corners)


def test_empty_polygon_rejected():
    with pytest.raises(ValueError):
        Canvas(5, 5).draw_polygon([])


def test_flood_fill_paints_interior_only(boxed):
    border = _count(boxed, BLACK)
    filled = flood_fill(boxed, 10, 10, WHITE, RED)
    assert filled == _count(boxed, RED)
    assert _count(boxed, BLACK) == border
    assert boxed.get(10, 10) == RED
    assert boxed.get(0, 0) == WHITE
    assert boxed.get(16, 10) == WHITE


def test_flood_fill_outside_leaves_interior(boxed):
    flood_fill(boxed, 0, 0, WHITE, RED)
    assert boxed.get(10, 10) == WHITE
    assert boxed.get(19, 19) == RED


def test_flood_fill_same_colour_does_nothing(boxed):
    assert flood_fill(boxed, 10, 10, WHITE, WHITE) == 0


def test_flood_fill_wrong_start_colour(boxed):
    assert flood_fill(boxed, 5, 5, WHITE, RED) == 0
    assert boxed.get(5, 5) == BLACK


def test_flood_fill_skips_other_colours(boxed):
    boxed.set(8, 8, GREEN)
    flood_fill(boxed, 10, 10, WHITE, RED)
    assert boxed.get(8, 8) == GREEN


def test_boundary_fill_overwrites_other_colours(boxed):
    boxed.set(8, 8, GREEN)
    filled = boundary_fill(boxed, 10, 10, BLUE, BLACK)
    assert boxed.get(8, 8) == BLUE
    assert filled == _count(boxed, BLUE)
    assert boxed.get(0, 0) == WHITE


def test_boundary_and_flood_fill_cover_same_region():
    first, second = Canvas(20, 20), Canvas(20, 20)
    for canvas in (first, second):
        canvas.draw_polygon([(2, 2), (15, 4), (12, 17)])
    assert flood_fill(first, 10, 8, WHITE, RED) == boundary_fill(second, 10, 8, RED, BLACK)


def test_boundary_fill_on_border(boxed):
    assert boundary_fill(boxed, 5, 10, BLUE, BLACK) == 0