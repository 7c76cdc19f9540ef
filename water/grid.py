"""2D grid of liquid cells. Shape (rows, columns), fixed for the grid's lifetime."""

from dataclasses import dataclass
from typing import Iterator

import numpy as np

from water.constants import CellKind, DEFAULT_ROWS, DEFAULT_COLUMNS


@dataclass(frozen=True)
class Cell:
    """Read-only snapshot of one cell, handed to renderers and tests."""

    kind: CellKind
    fill: float
    velocity_x: float
    velocity_y: float
    row: int
    column: int


class Grid:
    """Per-cell kind, fill level and velocity arrays. Only step() moves fill during a run."""

    __slots__ = ("shape", "kind", "fill", "velocity_x", "velocity_y")

    def __init__(self, rows: int = DEFAULT_ROWS, columns: int = DEFAULT_COLUMNS) -> None:
        if rows <= 0 or columns <= 0:
            raise ValueError(f"grid dimensions must be positive, got {rows}x{columns}")
        self.shape = (rows, columns)
        self.kind = np.full(self.shape, CellKind.FLUID, dtype=np.int8)
        self.fill = np.zeros(self.shape, dtype=np.float64)
        self.velocity_x = np.zeros(self.shape, dtype=np.float64)
        self.velocity_y = np.zeros(self.shape, dtype=np.float64)

    @property
    def rows(self) -> int:
        return self.shape[0]

    @property
    def columns(self) -> int:
        return self.shape[1]

    def in_bounds(self, row: int, column: int) -> bool:
        return 0 <= row < self.shape[0] and 0 <= column < self.shape[1]

    def _check_bounds(self, row: int, column: int) -> None:
        if not self.in_bounds(row, column):
            raise IndexError(f"cell ({row}, {column}) outside {self.shape[0]}x{self.shape[1]} grid")

    def get_cell(self, row: int, column: int) -> Cell:
        self._check_bounds(row, column)
        return Cell(
            kind=CellKind(int(self.kind[row, column])),
            fill=float(self.fill[row, column]),
            velocity_x=float(self.velocity_x[row, column]),
            velocity_y=float(self.velocity_y[row, column]),
            row=row,
            column=column,
        )

    def cells(self) -> Iterator[Cell]:
        """All cells, row-major from the top-left."""
        rows, columns = self.shape
        for i in range(rows):
            for j in range(columns):
                yield self.get_cell(i, j)

    def set_cell(self, row: int, column: int, kind: CellKind, fill: float = 0.0) -> None:
        """External edit between steps. Solids never hold fill, so theirs is forced to 0."""
        self._check_bounds(row, column)
        kind = CellKind(kind)
        if kind == CellKind.SOLID:
            fill = 0.0
        elif not 0.0 <= fill <= 1.0:
            raise ValueError(f"fill must be within [0, 1], got {fill}")
        self.kind[row, column] = kind
        self.fill[row, column] = fill

    def paint_fluid(self, row: int, column: int) -> None:
        self.set_cell(row, column, CellKind.FLUID, 1.0)

    def paint_solid(self, row: int, column: int) -> None:
        self.set_cell(row, column, CellKind.SOLID)

    def clear_cell(self, row: int, column: int) -> None:
        self.set_cell(row, column, CellKind.FLUID, 0.0)

    def reset(self) -> None:
        """Every cell back to empty fluid."""
        self.kind.fill(CellKind.FLUID)
        self.fill.fill(0.0)
        self.velocity_x.fill(0.0)
        self.velocity_y.fill(0.0)

    def total_fill(self) -> float:
        return float(np.sum(self.fill[self.kind == CellKind.FLUID]))
