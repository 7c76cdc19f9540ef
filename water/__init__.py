"""Water: liquid grid and the per-tick flow update."""

from water.constants import CellKind, DEFAULT_ROWS, DEFAULT_COLUMNS
from water.grid import Cell, Grid
from water.flow import DEFAULT_PARAMS, FlowParams, step

__all__ = [
    "Cell", "CellKind", "Grid", "FlowParams", "DEFAULT_PARAMS", "step",
    "DEFAULT_ROWS", "DEFAULT_COLUMNS",
]
