"""Simulation constants. Row 0 is the top of the grid; "below" is row + 1."""

from enum import IntEnum


class CellKind(IntEnum):
    FLUID = 0
    SOLID = 1


# 800x1200 window at 10 px per cell.
DEFAULT_ROWS, DEFAULT_COLUMNS = 80, 120

GRAVITY = 0.15
FLOW_RATE = 0.08
MAX_PRESSURE = 2.0
MIN_FLOW = 0.01
DAMPING = 0.9
VERTICAL_FLOW_MULTIPLIER = 1.1
HORIZONTAL_FLOW_MULTIPLIER = 0.6

# Lateral spreading: left first, then right.
HORIZONTAL_OFFSETS = (-1, 1)
# Pressure diffusion neighbours (drow, dcol), row-major.
NEIGHBOR_OFFSETS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1),
)
