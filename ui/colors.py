"""
Display-only mapping from cell state to RGB. Solids are white, empty fluid is black,
liquid is a blue that brightens with fill. Fluid cells also get a water rectangle whose
height is proportional to fill, drawn bottom-aligned by grid_view.
"""

import numpy as np

from water.constants import CellKind

SOLID_COLOR = np.array([255, 255, 255], dtype=np.uint8)
EMPTY_COLOR = np.array([0, 0, 0], dtype=np.uint8)
GRID_LINE_COLOR = (31, 31, 31)
# Blue channel = WATER_BLUE_BASE + WATER_BLUE_RANGE * fill
WATER_BLUE_BASE = 200
WATER_BLUE_RANGE = 55


def cell_colors(kind: np.ndarray, fill: np.ndarray) -> np.ndarray:
    """Returns (rows, columns, 3) uint8 RGB: the color of each cell's liquid, or of the cell itself for solids and empty fluid."""
    rows, columns = kind.shape
    rgb = np.tile(EMPTY_COLOR, (rows, columns, 1))
    solid = kind == CellKind.SOLID
    wet = (kind == CellKind.FLUID) & (fill > 0)
    rgb[solid] = SOLID_COLOR
    blue = WATER_BLUE_BASE + WATER_BLUE_RANGE * np.clip(fill[wet], 0.0, 1.0)
    rgb[wet, :2] = 0
    rgb[wet, 2] = blue.astype(np.uint8)
    return rgb


def water_heights(fill: np.ndarray, cell_size: int) -> np.ndarray:
    """Pixel height of the liquid rectangle per cell, 0..cell_size."""
    return np.clip((fill * cell_size).astype(np.int32), 0, cell_size)
