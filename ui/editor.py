"""Pointer editing: paint solids or liquid with the mouse between steps. Space swaps the brush, Backspace toggles erase."""

import logging

import pygame

from water import CellKind, Grid

logger = logging.getLogger(__name__)


class Editor:
    """Brush state plus the pixel -> cell mapping for one grid rect."""

    def __init__(self, grid_rect: pygame.Rect, cell_size: int) -> None:
        self.rect = grid_rect
        self.cell_size = cell_size
        self.current_kind = CellKind.SOLID
        self.delete_mode = False

    def cell_at(self, pos: tuple[int, int], grid: Grid) -> tuple[int, int] | None:
        """(row, column) under pos, or None outside the grid."""
        if not self.rect.collidepoint(pos):
            return None
        row = (pos[1] - self.rect.y) // self.cell_size
        column = (pos[0] - self.rect.x) // self.cell_size
        if not grid.in_bounds(row, column):
            return None
        return row, column

    def apply(self, grid: Grid, row: int, column: int) -> None:
        if self.delete_mode:
            grid.clear_cell(row, column)
        elif self.current_kind == CellKind.FLUID:
            grid.paint_fluid(row, column)
        else:
            grid.paint_solid(row, column)

    def handle_event(self, event: pygame.event.Event, grid: Grid) -> bool:
        """Returns True if event was consumed."""
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_SPACE:
                self.current_kind = CellKind.FLUID if self.current_kind == CellKind.SOLID else CellKind.SOLID
                logger.debug("Brush set to %s", self.current_kind.name)
                return True
            if event.key == pygame.K_BACKSPACE:
                self.delete_mode = not self.delete_mode
                logger.debug("Delete mode %s", "on" if self.delete_mode else "off")
                return True
            return False
        if event.type == pygame.MOUSEBUTTONDOWN or (event.type == pygame.MOUSEMOTION and any(event.buttons)):
            cell = self.cell_at(event.pos, grid)
            if cell is None:
                return False
            self.apply(grid, *cell)
            return True
        return False
