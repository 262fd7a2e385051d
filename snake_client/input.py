"""Translate pygame input events into game intents."""

from __future__ import annotations

from typing import Dict, Optional, Tuple

import pygame

from snake_engine.intents import ChangeDirection, Intent, Restart, SelectGridSize, SelectSpeed
from snake_engine.utils import Direction

from .layout import Layout

KEY_DIRECTIONS: Dict[int, Direction] = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}

LEFT_BUTTON = 1


class InputManager:
    """Map key presses and clicks onto intents using the current layout."""

    def __init__(self, layout: Layout) -> None:
        self.layout = layout

    def translate(self, event: pygame.event.Event) -> Optional[Intent]:
        if event.type == pygame.KEYDOWN:
            direction = KEY_DIRECTIONS.get(event.key)
            if direction is not None:
                return ChangeDirection(direction)
            return None
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == LEFT_BUTTON:
            return self.click(event.pos)
        return None

    def click(self, pos: Tuple[int, int]) -> Optional[Intent]:
        # The restart control is only visible once the game is over; the
        # controller decides whether to honour it.
        if self.layout.in_retry_button(pos):
            return Restart()
        for tag, rect in self.layout.speed_buttons.items():
            if rect.collidepoint(pos):
                return SelectSpeed(tag)
        for tag, rect in self.layout.grid_buttons.items():
            if rect.collidepoint(pos):
                return SelectGridSize(tag)
        return None
