import time

import pygame
import pytest

from scratchpad.renderer import CursorBlink, Renderer, cursor_x


@pytest.fixture
def renderer():
    pygame.font.init()
    surface = pygame.Surface((400, 200))
    return Renderer(surface)


def _dark_pixels(surface, rect):
    x0, y0, w, h = rect
    return [
        (x, y)
        for x in range(x0, x0 + w)
        for y in range(y0, y0 + h)
        if surface.get_at((x, y))[:3] != (255, 255, 255)
    ]


def test_cursor_x_at_start_is_margin():
    assert cursor_x("") == pytest.approx(30.0)


def test_cursor_x_advances_by_char_width():
    assert cursor_x("ab") - cursor_x("a") == pytest.approx(15.2)


def test_cursor_x_counts_utf8_bytes():
    assert cursor_x("é") == pytest.approx(cursor_x("ab"))


def test_blink_stays_visible_within_interval():
    blink = CursorBlink(last_toggle=100.0)
    assert blink.tick(100.4) is True
    assert blink.last_toggle == 100.0


def test_blink_toggles_after_interval():
    blink = CursorBlink(last_toggle=100.0)
    assert blink.tick(100.6) is False
    assert blink.tick(101.0) is False
    assert blink.tick(101.2) is True


def test_background_is_white(renderer):
    renderer.render("", 0)
    assert renderer.surface.get_at((0, 0))[:3] == (255, 255, 255)
    assert renderer.surface.get_at((399, 199))[:3] == (255, 255, 255)


def test_text_is_drawn(renderer):
    far_future = time.monotonic() + 3600
    renderer.cursor_blink = CursorBlink(last_toggle=far_future, visible=False)
    renderer.render("", 0)
    assert _dark_pixels(renderer.surface, (30, 40, 150, 40)) == []

    renderer.render("hello", 5)
    dark = _dark_pixels(renderer.surface, (30, 40, 150, 40))
    assert len(dark) > 0


def test_cursor_drawn_only_when_visible(renderer):
    far_future = time.monotonic() + 3600
    renderer.cursor_blink = CursorBlink(last_toggle=far_future, visible=True)
    renderer.render("", 0)
    assert len(_dark_pixels(renderer.surface, (30, 40, 20, 40))) > 0

    renderer.cursor_blink = CursorBlink(last_toggle=far_future, visible=False)
    renderer.render("", 0)
    assert _dark_pixels(renderer.surface, (30, 40, 20, 40)) == []


def test_resize_ignores_zero_sizes(renderer):
    renderer.resize(0, 100)
    assert renderer.size == (400, 200)
    renderer.resize(100, 0)
    assert renderer.size == (400, 200)


def test_resize_records_new_size(renderer):
    renderer.resize(300, 150)
    assert renderer.size == (300, 150)


def test_render_clips_to_size(renderer):
    renderer.surface.fill((10, 10, 10))
    renderer.resize(100, 100)
    renderer.render("", 0)
    assert renderer.surface.get_at((0, 0))[:3] == (255, 255, 255)
    assert renderer.surface.get_at((300, 150))[:3] == (10, 10, 10)