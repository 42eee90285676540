import pytest

from rasterkit.lines import (
    LineStyle,
    LineTool,
    bresenham_line,
    dashed_line,
    dda_line,
    dotted_line,
    styled_line,
    thick_line,
)


def test_bresenham_horizontal():
    assert bresenham_line(0, 0, 5, 0) == [(x, 0) for x in range(6)]


def test_bresenham_horizontal_reversed_matches_forward():
    assert bresenham_line(5, 2, 0, 2) == bresenham_line(0, 2, 5, 2)


def test_bresenham_vertical():
    assert bresenham_line(0, 0, 0, 3) == [(0, y) for y in range(4)]


def test_bresenham_vertical_reversed_same_pixels():
    assert set(bresenham_line(4, 9, 4, 1)) == {(4, y) for y in range(1, 10)}


def test_bresenham_diagonal():
    assert bresenham_line(0, 0, 3, 3) == [(i, i) for i in range(4)]


def test_bresenham_single_point():
    assert bresenham_line(7, 7, 7, 7) == [(7, 7)]


def test_bresenham_gentle_slope_invariants():
    pts = bresenham_line(0, 0, 10, 4)
    assert pts[0] == (0, 0)
    assert pts[-1] == (10, 4)
    assert len(pts) == 11
    for (ax, ay), (bx, by) in zip(pts, pts[1:]):
        assert bx - ax == 1
        assert by - ay in (0, 1)


def test_bresenham_steep_slope_invariants():
    pts = bresenham_line(0, 0, 4, 10)
    assert pts[0] == (0, 0)
    assert pts[-1] == (4, 10)
    assert len(pts) == 11
    for (ax, ay), (bx, by) in zip(pts, pts[1:]):
        assert by - ay == 1
        assert bx - ax in (0, 1)


def test_dda_horizontal():
    assert dda_line(0, 0, 4, 0) == [(x, 0) for x in range(5)]


def test_dda_diagonal():
    assert dda_line(0, 0, 3, 3) == [(i, i) for i in range(4)]


def test_dda_degenerate_point():
    assert dda_line(2, 3, 2, 3) == [(2, 3)]


def test_dda_steep_length_and_endpoints():
    pts = dda_line(10, 10, 14, 30)
    assert len(pts) == 21
    assert pts[0] == (10, 10)
    assert all(10 <= x <= 14 for x, _ in pts)
    assert [y for _, y in pts] == list(range(10, 31))


def test_dotted_line_positions():
    xs = [x for x, _ in dotted_line(0, 0, 9, 0)]
    assert xs == [0, 1, 4, 7, 10]


def test_dotted_line_is_sparser_than_simple():
    assert len(dotted_line(0, 0, 60, 0)) < len(dda_line(0, 0, 60, 0))


def test_dashed_line_pattern():
    xs = {x for x, _ in dashed_line(0, 0, 40, 0)}
    assert set(range(0, 10)) <= xs
    assert xs.isdisjoint(range(10, 16))
    assert 16 in xs


def test_dashed_line_degenerate():
    assert dashed_line(5, 5, 5, 5) == [(5, 5)]


def test_thick_line_single_point_square():
    pts = thick_line(0, 0, 0, 0, 3)
    assert len(pts) == 9
    assert set(pts) == {(x, y) for x in (-1, 0, 1) for y in (-1, 0, 1)}


def test_thick_line_has_no_duplicates_and_covers_path():
    pts = thick_line(0, 0, 10, 0, 4)
    assert len(pts) == len(set(pts))
    assert set(dda_line(0, 0, 10, 0)) <= set(pts)


def test_thick_line_rejects_nonpositive_width():
    with pytest.raises(ValueError):
        thick_line(0, 0, 5, 5, 0)


def test_line_style_from_key():
    assert LineStyle("d") is LineStyle.DOTTED
    assert LineStyle("D") is LineStyle.DASHED


def test_line_style_unknown_key():
    with pytest.raises(ValueError):
        LineStyle("x")


@pytest.mark.parametrize(
    "style, func",
    [
        (LineStyle.SIMPLE, dda_line),
        (LineStyle.DOTTED, dotted_line),
        (LineStyle.DASHED, dashed_line),
    ],
)
def test_styled_line_dispatch(style, func):
    assert styled_line(style, 0, 0, 30, 12) == func(0, 0, 30, 12)


def test_styled_line_thick_uses_default_width():
    assert styled_line("T", 0, 0, 8, 3) == thick_line(0, 0, 8, 3)


def test_line_tool_chains_segments():
    tool = LineTool(LineStyle.SIMPLE)
    assert tool.click(0, 0) == []
    assert tool.click(5, 0) == dda_line(0, 0, 5, 0)
    assert tool.click(5, 5) == dda_line(5, 0, 5, 5)


def test_line_tool_reset_starts_new_polyline():
    tool = LineTool("d")
    tool.click(0, 0)
    tool.reset()
    assert tool.click(10, 10) == []
    assert tool.click(20, 10) == dotted_line(10, 10, 20, 10)


def test_line_tool_style_change():
    tool = LineTool("s")
    tool.click(0, 0)
    tool.style = LineStyle.DASHED
    assert tool.click(40, 0) == dashed_line(0, 0, 40, 0)