import random

import pytest

from warpgrid.grid import Cell, Grid


@pytest.fixture
def grid():
    return Grid(400, 400, 20, wrap=True)


@pytest.mark.parametrize("cell, expected", [
    (Cell(400, 200), Cell(0, 200)),
    (Cell(-20, 200), Cell(380, 200)),
    (Cell(200, 400), Cell(200, 0)),
    (Cell(200, -20), Cell(200, 380)),
    (Cell(220, 200), Cell(220, 200)),
])
def test_wrap_maps_to_opposite_edge(grid, cell, expected):
    assert grid.wrap_or_clamp(cell) == expected


def test_clamp_mode_reports_violation():
    grid = Grid(400, 400, 20, wrap=False)
    assert grid.wrap_or_clamp(Cell(400, 0)) is None
    assert grid.wrap_or_clamp(Cell(0, -20)) is None
    assert grid.wrap_or_clamp(Cell(380, 380)) == Cell(380, 380)


def test_non_square_canvas_wraps_each_axis_on_its_own_extent():
    grid = Grid(400, 200, 20)
    assert grid.wrap_or_clamp(Cell(100, 200)) == Cell(100, 0)
    assert grid.wrap_or_clamp(Cell(-20, 100)) == Cell(380, 100)


def test_cells_row_major(grid):
    cells = list(grid.cells())
    assert len(cells) == len(grid) == 400
    assert cells[0] == Cell(0, 0)
    assert cells[1] == Cell(20, 0)
    assert cells[-1] == Cell(380, 380)


def test_random_cell_is_grid_aligned_and_in_bounds(grid):
    rng = random.Random(5)
    for _ in range(200):
        cell = grid.random_cell(rng)
        assert cell.x % 20 == 0 and cell.y % 20 == 0
        assert grid.in_bounds(cell)


def test_rejects_canvas_smaller_than_a_cell():
    with pytest.raises(ValueError):
        Grid(10, 400, 20)


@pytest.mark.parametrize("width, height", [(410, 400), (400, 390)])
def test_rejects_canvas_not_aligned_to_cells(width, height):
    with pytest.raises(ValueError):
        Grid(width, height, 20)
