import pytest

from water import Cell, CellKind, Grid


@pytest.mark.parametrize("rows,columns", [(0, 4), (4, 0), (-1, 3)])
def test_rejects_non_positive_dimensions(rows, columns):
    with pytest.raises(ValueError):
        Grid(rows, columns)


def test_new_grid_is_empty_fluid():
    grid = Grid(3, 4)
    assert grid.shape == (3, 4)
    assert (grid.rows, grid.columns) == (3, 4)
    assert all(c.kind == CellKind.FLUID and c.fill == 0.0 for c in grid.cells())
    assert grid.total_fill() == 0.0


def test_cells_know_their_position():
    grid = Grid(3, 4)
    cells = list(grid.cells())
    assert len(cells) == 12
    assert [(c.row, c.column) for c in cells[:5]] == [(0, 0), (0, 1), (0, 2), (0, 3), (1, 0)]
    assert grid.get_cell(2, 1) == Cell(CellKind.FLUID, 0.0, 0.0, 0.0, 2, 1)


def test_set_cell_fluid():
    grid = Grid(2, 2)
    grid.set_cell(1, 0, CellKind.FLUID, 0.25)
    assert grid.get_cell(1, 0).fill == 0.25


def test_solid_forces_zero_fill():
    grid = Grid(2, 2)
    grid.paint_fluid(0, 0)
    grid.set_cell(0, 0, CellKind.SOLID, 0.7)
    cell = grid.get_cell(0, 0)
    assert cell.kind == CellKind.SOLID
    assert cell.fill == 0.0


@pytest.mark.parametrize("fill", [-0.1, 1.5])
def test_set_cell_rejects_bad_fill(fill):
    with pytest.raises(ValueError):
        Grid(2, 2).set_cell(0, 0, CellKind.FLUID, fill)


@pytest.mark.parametrize("row,column", [(-1, 0), (0, 2), (2, 0)])
def test_out_of_bounds(row, column):
    grid = Grid(2, 2)
    assert not grid.in_bounds(row, column)
    with pytest.raises(IndexError):
        grid.get_cell(row, column)
    with pytest.raises(IndexError):
        grid.paint_fluid(row, column)


def test_paint_and_clear():
    grid = Grid(2, 3)
    grid.paint_fluid(0, 1)
    grid.paint_fluid(1, 1)
    grid.paint_solid(1, 2)
    assert grid.total_fill() == 2.0
    grid.clear_cell(0, 1)
    assert grid.get_cell(0, 1) == Cell(CellKind.FLUID, 0.0, 0.0, 0.0, 0, 1)
    assert grid.get_cell(1, 2).kind == CellKind.SOLID


def test_edits_keep_velocity():
    grid = Grid(1, 1)
    grid.velocity_x[0, 0] = 0.2
    grid.paint_fluid(0, 0)
    assert grid.get_cell(0, 0).velocity_x == 0.2


def test_reset():
    grid = Grid(2, 2)
    grid.paint_solid(0, 0)
    grid.paint_fluid(1, 1)
    grid.velocity_y[1, 1] = 0.5
    grid.reset()
    assert grid.shape == (2, 2)
    assert all(c == Cell(CellKind.FLUID, 0.0, 0.0, 0.0, c.row, c.column) for c in grid.cells())
