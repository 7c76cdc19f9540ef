import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import numpy as np
import pygame
import pytest

from water import CellKind, Grid


def make_grid(fill, solid=None) -> Grid:
    """Grid from a 2D list of fill levels; solid is a list of (row, column)."""
    fill = np.asarray(fill, dtype=np.float64)
    grid = Grid(*fill.shape)
    grid.fill[:] = fill
    for row, column in solid or ():
        grid.set_cell(row, column, CellKind.SOLID)
    return grid


@pytest.fixture
def random_grid():
    rng = np.random.default_rng(7)
    grid = Grid(12, 16)
    grid.fill[:] = rng.random(grid.shape)
    solid = rng.random(grid.shape) < 0.25
    for row, column in zip(*np.nonzero(solid)):
        grid.set_cell(int(row), int(column), CellKind.SOLID)
    return grid


@pytest.fixture
def pygame_ready():
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    import config

    monkeypatch.setattr(config, "CONFIG_DIR", tmp_path / "configs")
    monkeypatch.setattr(config, "LAST_FILE", tmp_path / "configs" / "last.txt")
    return tmp_path / "configs"
