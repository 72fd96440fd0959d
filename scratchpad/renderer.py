"""Drawing of the editor text and its blinking cursor."""

from __future__ import annotations

import time
from dataclasses import dataclass, field

import pygame

from .errors import internal

BLINK_INTERVAL = 0.5
FONT_SIZE = 32
X_MARGIN = 30.0
Y_MARGIN = 40.0
CHAR_WIDTH = 15.2
BACKGROUND = (255, 255, 255)
FOREGROUND = (0, 0, 0)


def cursor_x(text_before_cursor: str) -> float:
    """Horizontal position of the cursor after ``text_before_cursor``."""
    return X_MARGIN + len(text_before_cursor.encode("utf-8")) * CHAR_WIDTH


@dataclass
class CursorBlink:
    """Visibility state of the cursor, toggled every half second."""

    last_toggle: float = field(default_factory=time.monotonic)
    visible: bool = True

    def tick(self, now: float) -> bool:
        """Advance the blink to ``now`` and return whether the cursor shows."""
        if now - self.last_toggle > BLINK_INTERVAL:
            self.visible = not self.visible
            self.last_toggle = now
        return self.visible


class Renderer:
    """Draws editor content onto a pygame surface."""

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface
        self.size = surface.get_size()
        self.cursor_blink = CursorBlink()
        try:
            if not pygame.font.get_init():
                pygame.font.init()
            self.font = pygame.font.Font(None, FONT_SIZE)
        except (pygame.error, OSError) as exc:
            raise internal(f"failed to load font: {exc}") from exc

    def resize(self, width: int, height: int) -> None:
        """Record a new drawing area; zero-sized areas are ignored."""
        if width > 0 and height > 0:
            self.size = (width, height)
            display = pygame.display.get_surface() if pygame.display.get_init() else None
            if display is not None:
                self.surface = display

    def _is_display(self) -> bool:
        return pygame.display.get_init() and self.surface is pygame.display.get_surface()

    def _draw_text(self, text: str, x: float, y: float) -> None:
        line_height = self.font.get_linesize()
        for row, line in enumerate(text.split("\n")):
            if line:
                rendered = self.font.render(line, True, FOREGROUND)
                self.surface.blit(rendered, (x, y + row * line_height))

    def render(self, text_content: str, cursor_position: int) -> None:
        """Draw ``text_content`` and, when visible, the cursor."""
        self.cursor_blink.tick(time.monotonic())

        previous_clip = self.surface.get_clip()
        self.surface.set_clip(pygame.Rect((0, 0), self.size))
        try:
            self.surface.fill(BACKGROUND)

            text_before_cursor = text_content[:cursor_position]

            try:
                self._draw_text(text_content, X_MARGIN, Y_MARGIN)
            except pygame.error as exc:
                raise internal(f"Failed to render text: {exc}") from exc

            if self.cursor_blink.visible:
                try:
                    self._draw_text("|", cursor_x(text_before_cursor), Y_MARGIN)
                except pygame.error as exc:
                    raise internal(f"Failed to render cursor: {exc}") from exc
        finally:
            self.surface.set_clip(previous_clip)

        if self._is_display():
            pygame.display.flip()