"""UI: grid view, pointer editor and control panel."""

from ui.grid_view import draw_grid
from ui.editor import Editor
from ui.panel import ControlPanel
from ui.colors import cell_colors

__all__ = ["draw_grid", "Editor", "ControlPanel", "cell_colors"]
