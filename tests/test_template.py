from __future__ import annotations

from patchvision.balloon import Balloon
from patchvision.grid import Grid
from patchvision.placeholder import (
    ARROW_LEFT,
    ARROW_OVERLAY_NORTH_LEFT,
    ARROW_OVERLAY_NORTH_RIGHT,
    EAST,
    NONE,
    NORTH,
    PADDING,
    TRANSITION_LEFT,
    TRANSITION_RIGHT,
    WEST,
    Color,
    Placeholder,
)
from patchvision.template import Template

GREEN = Color(0, 255, 0)


def test_grid_push_row_keeps_rectangle() -> None:
    grid = Grid()
    grid.push_row([NORTH, NORTH])
    grid.push_row([EAST])
    grid.push_row([WEST, WEST, WEST])
    assert (grid.rows, grid.cols) == (3, 3)
    assert grid[1, 1] == NONE
    assert grid[0, 2] == NONE
    assert grid.get(3, 0) is None
    assert grid.get(0, 3) is None


def test_grid_push_col_and_pop_row() -> None:
    grid = Grid(2, 1)
    grid.push_col([NORTH, EAST])
    assert grid.cols == 2
    assert grid[1, 1] == EAST
    assert grid.pop_row() == [NONE, EAST]
    assert grid.pop_row() == [NONE, NORTH]
    assert (grid.rows, grid.cols) == (0, 0)
    assert grid.pop_row() is None


def test_overlay_aligns_bottom_rows_and_pads_columns() -> None:
    tall = Template(Grid.from_rows([[NONE, NONE], [NONE, EAST], [WEST, NONE]]))
    short = Template(Grid.from_rows([[PADDING, NORTH, ARROW_LEFT]]))

    result = tall.overlay(short)

    assert (result.grid.rows, result.grid.cols) == (3, 3)
    assert list(result.grid.iter_row(0)) == [NONE, NONE, NONE]
    assert list(result.grid.iter_row(1)) == [NONE, EAST, NONE]
    assert list(result.grid.iter_row(2)) == [PADDING, NORTH, ARROW_LEFT]


def test_overlay_does_not_touch_inputs() -> None:
    tall = Template(Grid.from_rows([[NONE], [WEST]]))
    short = Template(Grid.from_rows([[EAST, NORTH]]))
    tall_before = tall.grid.copy()
    short_before = short.grid.copy()

    result = tall.overlay(short)
    result.grid[0, 0] = NORTH

    assert tall.grid == tall_before
    assert short.grid == short_before
    assert result.grid is not tall.grid


def test_overlay_order_does_not_matter() -> None:
    one = Balloon.new(GREEN, "Paarden", 0, 0, 1).pre_render()
    two = Balloon.new(GREEN, "Ferkels", 1, 1, 1).pre_render()
    three = Balloon.new(GREEN, "Johans", 1, 0, 0).pre_render()

    forward = Template.overlay_all([one, two, three])
    backward = Template.overlay_all([three, two, one])

    assert one.overlay(two).grid == two.overlay(one).grid
    assert forward.grid == backward.grid


def test_shaft_crossing_lower_balloon() -> None:
    upper = Balloon.new(GREEN, "Ferkels", 1, 1, 1).pre_render()
    lower = Balloon.new(GREEN, "Johans", 1, 0, 0).pre_render()

    canvas = lower.overlay(upper).grid

    assert canvas.rows == 6
    assert canvas[3, 25] == ARROW_OVERLAY_NORTH_LEFT
    assert canvas[3, 26] == ARROW_OVERLAY_NORTH_RIGHT
    assert canvas[4, 25] == PADDING
    assert canvas[4, 26] == Placeholder.text("J", GREEN)
    assert canvas[5, 25] == TRANSITION_LEFT
    assert canvas[5, 26] == TRANSITION_RIGHT


def test_single_balloon_on_empty_canvas_keeps_its_cells() -> None:
    balloon = Balloon.new(GREEN, "Lorum ipsum", 5, 1, 1).pre_render()

    assert Template().overlay(balloon).grid == balloon.grid

    canvas = Template(Grid(10, 250))
    result = canvas.overlay(balloon)
    offset = result.grid.rows - balloon.grid.rows
    for row in range(result.grid.rows):
        for col in range(result.grid.cols):
            expected = balloon.grid.get(row - offset, col) if row >= offset else None
            assert result.grid[row, col] == (expected or NONE)


def test_overlay_all_of_nothing_is_blank_cell() -> None:
    blank = Template.overlay_all([])
    assert (blank.grid.rows, blank.grid.cols) == (1, 1)
    assert blank.grid[0, 0] == NONE
