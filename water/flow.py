"""
Per-tick update: one in-place pass over the grid, bottom row first, columns left to right.
Each fluid cell with fill > 0 pushes liquid down (gravity), sideways (spreading), then to
any lower neighbour (pressure), and finally damps its own velocity. Cells read the live
state left by cells visited earlier in the same pass; there is no second buffer.
"""

from dataclasses import dataclass

import numpy as np

from water.constants import (
    CellKind,
    GRAVITY,
    FLOW_RATE,
    MAX_PRESSURE,
    MIN_FLOW,
    DAMPING,
    VERTICAL_FLOW_MULTIPLIER,
    HORIZONTAL_FLOW_MULTIPLIER,
    HORIZONTAL_OFFSETS,
    NEIGHBOR_OFFSETS,
)
from water.grid import Grid

_FLUID = int(CellKind.FLUID)


@dataclass(frozen=True)
class FlowParams:
    """Physical constants for one run. Immutable; build a new one to change a value."""

    gravity: float = GRAVITY
    flow_rate: float = FLOW_RATE
    max_pressure: float = MAX_PRESSURE
    min_flow: float = MIN_FLOW
    damping: float = DAMPING
    vertical_flow_multiplier: float = VERTICAL_FLOW_MULTIPLIER
    horizontal_flow_multiplier: float = HORIZONTAL_FLOW_MULTIPLIER

    def __post_init__(self) -> None:
        for name in (
            "gravity", "flow_rate", "max_pressure", "min_flow",
            "vertical_flow_multiplier", "horizontal_flow_multiplier",
        ):
            value = getattr(self, name)
            if not value >= 0:
                raise ValueError(f"{name} must be non-negative, got {value}")
        # horizontal_flow_multiplier is applied after the source and headroom clamps,
        # so it may only shrink a transfer.
        for name in ("damping", "horizontal_flow_multiplier"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be within [0, 1], got {value}")

    @property
    def vertical_cap(self) -> float:
        """Most liquid a cell can pass to the one below in a single step."""
        return self.gravity * self.vertical_flow_multiplier


DEFAULT_PARAMS = FlowParams()


def _flow_down(kind, fill, vel_y, i: int, j: int, rows: int, p: FlowParams) -> None:
    if i + 1 >= rows:
        return
    below = fill[i + 1]
    if kind[i + 1][j] != _FLUID or below[j] >= 1.0:
        return
    src = fill[i]
    flow = min(src[j], 1.0 - below[j])
    flow = min(flow, p.vertical_cap)
    if flow > p.min_flow:
        actual = min(flow, src[j])
        src[j] -= actual
        below[j] += actual
        vel_y[i + 1][j] += actual


def _flow_sideways(kind, fill, vel_x, i: int, j: int, columns: int, p: FlowParams) -> None:
    row_kind, row_fill = kind[i], fill[i]
    for dj in HORIZONTAL_OFFSETS:
        nj = j + dj
        if not 0 <= nj < columns:
            continue
        if row_kind[nj] != _FLUID or row_fill[nj] >= row_fill[j]:
            continue
        flow = (row_fill[j] - row_fill[nj]) * p.flow_rate
        flow = min(flow, row_fill[j])
        flow = min(flow, 1.0 - row_fill[nj])
        flow *= p.horizontal_flow_multiplier
        if flow > p.min_flow:
            row_fill[j] -= flow
            row_fill[nj] += flow
            vel_x[i][nj] += flow if dj > 0 else -flow


def _flow_pressure(kind, fill, i: int, j: int, rows: int, columns: int, p: FlowParams) -> None:
    src = fill[i]
    # Negative below half full; the min_flow guard then blocks every transfer.
    pressure = min(src[j] - 0.5, p.max_pressure)
    for di, dj in NEIGHBOR_OFFSETS:
        ni, nj = i + di, j + dj
        if not (0 <= ni < rows and 0 <= nj < columns):
            continue
        dst = fill[ni]
        if kind[ni][nj] != _FLUID or dst[nj] >= src[j]:
            continue
        flow = pressure * p.flow_rate
        flow = min(flow, src[j])
        flow = min(flow, 1.0 - dst[nj])
        if flow > p.min_flow:
            src[j] -= flow
            dst[nj] += flow


def step(grid: Grid, params: FlowParams = DEFAULT_PARAMS) -> None:
    """
    Advance the grid by one tick, in place. Visit order is load-bearing: rows bottom-up,
    columns left to right, single pass. Every transfer removes from the source exactly
    what it adds to the destination, and destination headroom is read live before each
    one, so fill stays within [0, 1] without a final clamp.
    """
    rows, columns = grid.shape
    # Plain nested lists: scalar indexing on ndarrays is much slower in this loop.
    kind = grid.kind.tolist()
    fill = grid.fill.tolist()
    vel_x = grid.velocity_x.tolist()
    vel_y = grid.velocity_y.tolist()
    damping = params.damping
    for i in range(rows - 1, -1, -1):
        for j in range(columns):
            if kind[i][j] != _FLUID or fill[i][j] <= 0:
                continue
            _flow_down(kind, fill, vel_y, i, j, rows, params)
            _flow_sideways(kind, fill, vel_x, i, j, columns, params)
            _flow_pressure(kind, fill, i, j, rows, columns, params)
            vel_y[i][j] *= damping
            vel_x[i][j] *= damping
    grid.fill[:] = np.asarray(fill, dtype=np.float64)
    grid.velocity_x[:] = np.asarray(vel_x, dtype=np.float64)
    grid.velocity_y[:] = np.asarray(vel_y, dtype=np.float64)
