"""A clickable rectangular button."""

from enum import IntEnum
from typing import Optional, Tuple

import pygame

Color = Tuple[int, int, int]
TEXT_COLOR: Color = (255, 255, 255)
ERROR_COLOR: Color = (255, 0, 0)


class ButtonState(IntEnum):
    IDLE = 0
    HOVER = 1
    ACTIVE = 2
    DISABLED = 3


class Button:
    """A labelled rectangle that tracks hover and press."""

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        text: str,
        idle_color: Color,
        hover_color: Color,
        active_color: Color,
    ) -> None:
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.text = text
        self.idle_color = idle_color
        self.hover_color = hover_color
        self.active_color = active_color
        self.state = ButtonState.IDLE
        self.fill_color: Color = idle_color

    def is_pressed(self) -> bool:
        return self.state == ButtonState.ACTIVE

    def contains(self, pos: Tuple[float, float]) -> bool:
        px, py = pos
        return self.x <= px < self.x + self.width and self.y <= py < self.y + self.height

    def update(self, mouse_pos: Tuple[float, float], mouse_down: bool) -> None:
        """Set the state from the mouse position and the left button."""
        self.state = ButtonState.IDLE
        if self.contains(mouse_pos):
            self.state = ButtonState.ACTIVE if mouse_down else ButtonState.HOVER
        self.fill_color = {
            ButtonState.IDLE: self.idle_color,
            ButtonState.HOVER: self.hover_color,
            ButtonState.ACTIVE: self.active_color,
        }.get(self.state, ERROR_COLOR)

    def render(self, surface: pygame.Surface, font: Optional[pygame.font.Font]) -> None:
        """Draw the button, and its centred label when a font is given."""
        rect = pygame.Rect(int(self.x), int(self.y), int(self.width), int(self.height))
        surface.fill(self.fill_color, rect)
        if font is None:
            return
        label = font.render(self.text, True, TEXT_COLOR)
        left = self.x + self.width / 2 - label.get_width() / 2
        top = self.y + self.height / 2 - label.get_height() / 2
        surface.blit(label, (int(left), int(top)))