"""Editor state and the window event loop that drives it."""

from __future__ import annotations

import enum

import pygame

from .errors import CreateWindowError
from .renderer import Renderer

TITLE = "scratchpad"
WINDOW_SIZE = (1600, 1200)
FRAME_RATE = 60
KEY_REPEAT_DELAY_MS = 400
KEY_REPEAT_INTERVAL_MS = 30


class NamedKey(enum.Enum):
    """Keys that carry a meaning rather than a character."""

    BACKSPACE = "Backspace"
    DELETE = "Delete"
    ARROW_LEFT = "ArrowLeft"
    ARROW_RIGHT = "ArrowRight"
    HOME = "Home"
    END = "End"
    ENTER = "Enter"
    SPACE = "Space"
    ESCAPE = "Escape"


class ElementState(enum.Enum):
    """Whether a key went down or came up."""

    PRESSED = "pressed"
    RELEASED = "released"


_NAMED_KEYS = {
    pygame.K_BACKSPACE: NamedKey.BACKSPACE,
    pygame.K_DELETE: NamedKey.DELETE,
    pygame.K_LEFT: NamedKey.ARROW_LEFT,
    pygame.K_RIGHT: NamedKey.ARROW_RIGHT,
    pygame.K_HOME: NamedKey.HOME,
    pygame.K_END: NamedKey.END,
    pygame.K_RETURN: NamedKey.ENTER,
    pygame.K_KP_ENTER: NamedKey.ENTER,
    pygame.K_SPACE: NamedKey.SPACE,
    pygame.K_ESCAPE: NamedKey.ESCAPE,
}

Key = "NamedKey | str"


def key_from_event(event: pygame.event.Event) -> NamedKey | str | None:
    """Return the logical key of a keyboard event, or None if it has none."""
    if event.type not in (pygame.KEYDOWN, pygame.KEYUP):
        return None
    named = _NAMED_KEYS.get(getattr(event, "key", None))
    if named is not None:
        return named
    text = getattr(event, "unicode", "")
    if text and text.isprintable():
        return text
    return None


class App:
    """A single text buffer with a cursor, edited through key presses."""

    def __init__(self) -> None:
        self.cursor_position = 0
        self.editor_content = ""
        self.renderer: Renderer | None = None

    def _insert(self, text: str) -> None:
        position = self.cursor_position
        self.editor_content = (
            self.editor_content[:position] + text + self.editor_content[position:]
        )
        self.cursor_position += len(text)

    def handle_keyboard_input(self, key: NamedKey | str, state: ElementState) -> None:
        """Apply a key press to the buffer and cursor; releases do nothing."""
        if state is not ElementState.PRESSED:
            return
        content = self.editor_content
        position = self.cursor_position
        match key:
            case NamedKey.BACKSPACE:
                if position > 0:
                    self.editor_content = content[: position - 1] + content[position:]
                    self.cursor_position -= 1
            case NamedKey.DELETE:
                if position < len(content):
                    self.editor_content = content[:position] + content[position + 1 :]
            case NamedKey.ARROW_LEFT:
                if position > 0:
                    self.cursor_position -= 1
            case NamedKey.ARROW_RIGHT:
                if position < len(content):
                    self.cursor_position += 1
            case NamedKey.HOME:
                self.cursor_position = 0
            case NamedKey.END:
                self.cursor_position = len(content)
            case NamedKey.ENTER:
                self._insert("\n")
            case NamedKey.SPACE:
                self._insert(" ")
            case str() as text:
                self._insert(text)
            case _:
                pass

    def resize(self, width: int, height: int) -> None:
        """Pass a new window size on to the renderer, ignoring empty sizes."""
        if width > 0 and height > 0 and self.renderer is not None:
            self.renderer.resize(width, height)

    def render(self) -> None:
        """Draw the current buffer, if a renderer is attached."""
        if self.renderer is not None:
            self.renderer.render(self.editor_content, self.cursor_position)

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Handle one window event; return False when the editor should stop."""
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.VIDEORESIZE:
            self.resize(event.w, event.h)
            return True
        if event.type in (pygame.KEYDOWN, pygame.KEYUP):
            key = key_from_event(event)
            if key is None:
                return True
            if event.type == pygame.KEYDOWN:
                if key is NamedKey.ESCAPE:
                    return False
                self.handle_keyboard_input(key, ElementState.PRESSED)
            else:
                self.handle_keyboard_input(key, ElementState.RELEASED)
        return True

    def run(self) -> None:
        """Open the window and process events until it is closed."""
        pygame.init()
        try:
            try:
                surface = pygame.display.set_mode(WINDOW_SIZE, pygame.RESIZABLE)
            except pygame.error as exc:
                raise CreateWindowError() from exc
            pygame.display.set_caption(TITLE)
            pygame.key.set_repeat(KEY_REPEAT_DELAY_MS, KEY_REPEAT_INTERVAL_MS)
            self.renderer = Renderer(surface)
            clock = pygame.time.Clock()
            running = True
            while running:
                for event in pygame.event.get():
                    if not self.handle_event(event):
                        running = False
                        break
                if running:
                    self.render()
                    clock.tick(FRAME_RATE)
        finally:
            self.renderer = None
            pygame.quit()