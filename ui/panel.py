"""Right panel: status lines, live-updatable physics sliders, pause/restart/save buttons."""

import dataclasses
from typing import Callable

import pygame

import config
from water import CellKind, FlowParams

FONT_SIZE = 16
LABEL_COLOR = (200, 200, 200)
SLIDER_COLOR = (100, 100, 100)
KNOB_COLOR = (180, 180, 180)
BUTTON_COLOR = (60, 60, 60)

# key -> (label, slider min, slider max); slider ints are hundredths of the param value.
SLIDERS = {
    "gravity": ("Gravity", 0, 50),
    "flow_rate": ("Flow rate", 0, 30),
    "damping": ("Damping", 50, 100),
}


class ControlPanel:
    """State: params dict; draw and handle events. Save and Restart callbacks."""

    def __init__(
        self,
        rect: pygame.Rect,
        initial: dict,
        on_save: Callable[[], None],
        on_restart: Callable[[], None],
    ) -> None:
        self.rect = rect
        self._base = config.flow_params_from_config(initial)
        self.params = {
            "gravity": self._base.gravity,
            "flow_rate": self._base.flow_rate,
            "damping": self._base.damping,
            "paused": initial.get("paused", False),
        }
        self.on_save = on_save
        self.on_restart = on_restart
        self._font = None
        self._slider_rects: dict[str, tuple[pygame.Rect, int, int]] = {}
        self._button_rects: dict[str, pygame.Rect] = {}
        self._dragging: str | None = None

    def _ensure_font(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.Font(None, FONT_SIZE)
        return self._font

    def get_params(self) -> dict:
        return self.params.copy()

    def flow_params(self) -> FlowParams:
        """Physics from config with slider overrides applied."""
        return dataclasses.replace(
            self._base,
            gravity=self.params["gravity"],
            flow_rate=self.params["flow_rate"],
            damping=self.params["damping"],
        )

    def physics_dict(self) -> dict:
        return dataclasses.asdict(self.flow_params())

    def draw(
        self,
        surface: pygame.Surface,
        tick_count: int = 0,
        total_fill: float = 0.0,
        brush: CellKind = CellKind.SOLID,
        delete_mode: bool = False,
    ) -> None:
        font = self._ensure_font()
        x, y = self.rect.x + 8, self.rect.y + 6
        line_h = 18
        gap = 4
        self._slider_rects.clear()
        self._button_rects.clear()

        slider_w = self.rect.width - 16 - 44  # leave 44px for value text
        slider_h = 12

        brush_name = "erase" if delete_mode else brush.name.lower()
        for text in (f"Tick: {tick_count}", f"Total fill: {total_fill:.2f}", f"Brush: {brush_name}"):
            surface.blit(font.render(text, True, LABEL_COLOR), (x, y))
            y += line_h
        y += gap

        for key, (label, lo, hi) in SLIDERS.items():
            surface.blit(font.render(label, True, LABEL_COLOR), (x, y))
            y += line_h
            value = int(round(self.params[key] * 100))
            sr = _draw_slider(surface, x, y, slider_w, slider_h, value, lo, hi)
            _draw_slider_value(surface, font, x + slider_w + 4, y, f"{self.params[key]:.2f}")
            self._slider_rects[key] = (sr, lo, hi)
            y += slider_h + gap

        y += gap
        for key, label in (
            ("pause", "Play" if self.params["paused"] else "Pause"),
            ("restart", "Restart"),
            ("save", "Save settings"),
        ):
            btn = pygame.Rect(x, y, 120, 22)
            pygame.draw.rect(surface, BUTTON_COLOR, btn)
            surface.blit(font.render(label, True, LABEL_COLOR), (btn.x + 6, btn.y + 4))
            self._button_rects[key] = btn
            y += 22 + gap

        y += gap
        for hint in ("Space: solid/fluid brush", "Backspace: erase mode"):
            surface.blit(font.render(hint, True, LABEL_COLOR), (x, y))
            y += line_h

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Returns True if event was consumed."""
        if event.type == pygame.MOUSEBUTTONDOWN:
            for key, (slider_rect, lo, hi) in self._slider_rects.items():
                if slider_rect.collidepoint(event.pos):
                    self._dragging = key
                    self._set_slider_value(key, event.pos, slider_rect, lo, hi)
                    return True
            for key, btn_rect in self._button_rects.items():
                if btn_rect.collidepoint(event.pos):
                    if key == "pause":
                        self.params["paused"] = not self.params["paused"]
                    elif key == "restart":
                        self.on_restart()
                    elif key == "save":
                        self.on_save()
                    return True
            return False
        if event.type == pygame.MOUSEBUTTONUP:
            self._dragging = None
        elif event.type == pygame.MOUSEMOTION and self._dragging is not None:
            sr, lo, hi = self._slider_rects[self._dragging]
            self._set_slider_value(self._dragging, event.pos, sr, lo, hi)
            return True
        return False

    def _set_slider_value(self, key: str, pos: tuple[int, int], slider_rect: pygame.Rect, lo: int, hi: int) -> None:
        t = (pos[0] - slider_rect.x) / max(1, slider_rect.width - 8)
        t = max(0, min(1, t))
        val = int(lo + t * (hi - lo))
        self.params[key] = val / 100.0


def _draw_slider(
    surface: pygame.Surface, x: int, y: int, w: int, h: int, value: int, vmin: int, vmax: int
) -> pygame.Rect:
    rect = pygame.Rect(x, y, w, h)
    pygame.draw.rect(surface, SLIDER_COLOR, rect)
    t = (value - vmin) / max(1, vmax - vmin)
    t = max(0.0, min(1.0, t))
    knob_x = x + 4 + int(t * (w - 8))
    pygame.draw.rect(surface, KNOB_COLOR, (knob_x, y, 8, h))
    return rect


def _draw_slider_value(
    surface: pygame.Surface, font: pygame.font.Font, x: int, y: int, value_str: str
) -> None:
    text = font.render(value_str, True, LABEL_COLOR)
    surface.blit(text, (x, y))
