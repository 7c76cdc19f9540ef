"""
App shell: display and main loop. Each frame: apply pointer edits, advance the grid one
step unless paused, then draw. Nothing else touches the grid while step() runs.
"""

import json
import logging
from pathlib import Path

import pygame

from water import Grid, step
from ui.editor import Editor
from ui.grid_view import draw_grid
from ui.panel import ControlPanel
import config

logger = logging.getLogger(__name__)

TITLE = "Liquid Simulation"
BACKGROUND = (0, 0, 0)
PANEL_WIDTH = 240


def _load_settings(config_path) -> dict:
    """Settings with physics already checked; anything unreadable or invalid falls back to defaults."""
    try:
        cfg = config.load_config(config_path)
        config.flow_params_from_config(cfg)
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning("Could not read settings (%s); using defaults", exc)
        return config._default_config()
    except (ValueError, TypeError) as exc:
        logger.warning("Invalid physics settings (%s); using defaults", exc)
        return config._default_config()
    return cfg


def _save_name(config_path) -> str:
    """Name to save under: the file run() was started from, else the last saved name."""
    if config_path is not None:
        return Path(config_path).stem
    return config.get_last_config() or "default"


def run(config_path=None) -> None:
    cfg = _load_settings(config_path)
    save_name = _save_name(config_path)
    logging.basicConfig(
        level=cfg.get("log_level", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    rows = cfg["world"]["rows"]
    columns = cfg["world"]["columns"]
    cell_size = cfg["cell_size"]
    fps = max(1, cfg["fps"])

    pygame.init()
    grid_w, grid_h = columns * cell_size, rows * cell_size
    screen = pygame.display.set_mode((grid_w + PANEL_WIDTH, grid_h))
    pygame.display.set_caption(TITLE)
    clock = pygame.time.Clock()

    grid = Grid(rows=rows, columns=columns)
    logger.info("Grid %dx%d, %d px cells, %d fps", rows, columns, cell_size, fps)
    grid_rect = pygame.Rect(0, 0, grid_w, grid_h)
    panel_rect = pygame.Rect(grid_w, 0, PANEL_WIDTH, grid_h)
    editor = Editor(grid_rect, cell_size)
    total_ticks = 0

    def do_restart() -> None:
        nonlocal total_ticks
        grid.reset()
        total_ticks = 0
        logger.info("Grid reset")

    def save_current_config() -> None:
        out = {**cfg, "physics": panel.physics_dict(), "paused": panel.get_params()["paused"]}
        config.save_config(out, save_name)

    panel = ControlPanel(panel_rect, cfg, on_save=save_current_config, on_restart=do_restart)

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
                break
            if panel.handle_event(event):
                continue
            editor.handle_event(event, grid)

        if not panel.get_params()["paused"]:
            step(grid, panel.flow_params())
            total_ticks += 1

        screen.fill(BACKGROUND)
        draw_grid(screen, grid_rect, grid, cell_size, cfg["line_width"])
        panel.draw(
            screen,
            tick_count=total_ticks,
            total_fill=grid.total_fill(),
            brush=editor.current_kind,
            delete_mode=editor.delete_mode,
        )
        pygame.display.flip()
        clock.tick(fps)

    pygame.quit()


if __name__ == "__main__":
    run()
