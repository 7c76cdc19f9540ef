"""Left panel: the liquid grid. Cells first, grid lines on top."""

import pygame

from water import CellKind, Grid
from ui.colors import cell_colors, water_heights, EMPTY_COLOR, GRID_LINE_COLOR


def _draw_cells(surface: pygame.Surface, rect: pygame.Rect, grid: Grid, cell_size: int) -> None:
    """Solids fill the whole cell; fluid cells get a black cell and a bottom-aligned water bar."""
    rgb = cell_colors(grid.kind, grid.fill)
    heights = water_heights(grid.fill, cell_size)
    background = tuple(int(c) for c in EMPTY_COLOR)
    rows, columns = grid.shape
    for i in range(rows):
        for j in range(columns):
            x = rect.x + j * cell_size
            y = rect.y + i * cell_size
            color = (int(rgb[i, j, 0]), int(rgb[i, j, 1]), int(rgb[i, j, 2]))
            if grid.kind[i, j] == CellKind.SOLID:
                pygame.draw.rect(surface, color, (x, y, cell_size, cell_size))
                continue
            pygame.draw.rect(surface, background, (x, y, cell_size, cell_size))
            h = int(heights[i, j])
            if h > 0:
                pygame.draw.rect(surface, color, (x, y + cell_size - h, cell_size, h))


def _draw_lines(surface: pygame.Surface, rect: pygame.Rect, grid: Grid, cell_size: int, line_width: int) -> None:
    rows, columns = grid.shape
    for j in range(columns):
        pygame.draw.rect(surface, GRID_LINE_COLOR, (rect.x + j * cell_size, rect.y, line_width, rows * cell_size))
    for i in range(rows):
        pygame.draw.rect(surface, GRID_LINE_COLOR, (rect.x, rect.y + i * cell_size, columns * cell_size, line_width))


def draw_grid(
    surface: pygame.Surface,
    grid_rect: pygame.Rect,
    grid: Grid,
    cell_size: int = 10,
    line_width: int = 2,
) -> None:
    """Draw the grid into grid_rect at cell_size px per cell. line_width 0 hides the lines."""
    _draw_cells(surface, grid_rect, grid, cell_size)
    if line_width > 0:
        _draw_lines(surface, grid_rect, grid, cell_size, line_width)
