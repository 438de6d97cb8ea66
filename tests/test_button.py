import pygame
import pytest

from antcolony.button import Button, ButtonState

IDLE = (70, 70, 70)
HOVER = (150, 150, 150)
ACTIVE = (20, 20, 20)


@pytest.fixture
def button():
    return Button(10, 20, 150, 50, "Next Year", IDLE, HOVER, ACTIVE)


def test_contains_edges(button):
    assert button.contains((10, 20))
    assert button.contains((159, 69))
    assert not button.contains((160, 30))
    assert not button.contains((50, 70))
    assert not button.contains((9, 30))


def test_idle_outside(button):
    button.update((0, 0), True)
    assert button.state == ButtonState.IDLE
    assert button.fill_color == IDLE
    assert not button.is_pressed()


def test_hover_inside_without_click(button):
    button.update((50, 40), False)
    assert button.state == ButtonState.HOVER
    assert button.fill_color == HOVER
    assert not button.is_pressed()


def test_active_inside_with_click(button):
    button.update((50, 40), True)
    assert button.is_pressed()
    assert button.fill_color == ACTIVE
    button.update((500, 500), False)
    assert not button.is_pressed()
    assert button.fill_color == IDLE


def test_render_fills_rectangle(button):
    surface = pygame.Surface((200, 100))
    surface.fill((0, 0, 0))
    button.update((50, 40), False)
    button.render(surface, None)
    assert tuple(surface.get_at((11, 21)))[:3] == HOVER
    assert tuple(surface.get_at((5, 5)))[:3] == (0, 0, 0)


def test_render_with_label(button):
    pygame.font.init()
    font = pygame.font.Font(None, 20)
    surface = pygame.Surface((200, 100))
    button.update((0, 0), False)
    button.render(surface, font)
    assert tuple(surface.get_at((10, 20)))[:3] == IDLE
    region = [tuple(surface.get_at((x, 45)))[:3] for x in range(10, 160)]
    assert any(color != IDLE for color in region)