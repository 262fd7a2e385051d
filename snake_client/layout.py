"""Screen geometry shared by the renderer and the input handling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

import pygame

from snake_engine import constants
from snake_engine.utils import Cell

BOARD_PIXELS = 400
PANEL_HEIGHT = 110
PANEL_MARGIN = 10

RETRY_WIDTH = 200
RETRY_HEIGHT = 56
RETRY_OFFSET = 40

SELECTOR_WIDTH = 58
SELECTOR_HEIGHT = 30
SELECTOR_GAP = 4
SELECTOR_ROW_OFFSET = 64
GRID_GROUP_X = 208


def _button_row(tags, left: int, top: int) -> Dict[str, pygame.Rect]:
    buttons: Dict[str, pygame.Rect] = {}
    for index, tag in enumerate(tags):
        x = left + index * (SELECTOR_WIDTH + SELECTOR_GAP)
        buttons[tag] = pygame.Rect(x, top, SELECTOR_WIDTH, SELECTOR_HEIGHT)
    return buttons


@dataclass
class Layout:
    """Fixed board area subdivided into ``grid_size`` tiles, plus a status panel."""

    grid_size: int
    board_size: int = BOARD_PIXELS
    panel_height: int = PANEL_HEIGHT

    @property
    def tile_size(self) -> float:
        return self.board_size / self.grid_size

    @property
    def window_size(self) -> Tuple[int, int]:
        return self.board_size, self.board_size + self.panel_height

    @property
    def board_rect(self) -> pygame.Rect:
        return pygame.Rect(0, 0, self.board_size, self.board_size)

    @property
    def panel_rect(self) -> pygame.Rect:
        return pygame.Rect(0, self.board_size, self.board_size, self.panel_height)

    @property
    def retry_button(self) -> pygame.Rect:
        x = self.board_size // 2 - RETRY_WIDTH // 2
        y = self.board_size // 2 + RETRY_OFFSET
        return pygame.Rect(x, y, RETRY_WIDTH, RETRY_HEIGHT)

    @property
    def speed_buttons(self) -> Dict[str, pygame.Rect]:
        top = self.board_size + SELECTOR_ROW_OFFSET
        return _button_row(constants.SPEED_OPTIONS, PANEL_MARGIN, top)

    @property
    def grid_buttons(self) -> Dict[str, pygame.Rect]:
        top = self.board_size + SELECTOR_ROW_OFFSET
        return _button_row(constants.GRID_SIZE_OPTIONS, GRID_GROUP_X, top)

    def cell_rect(self, cell: Cell) -> pygame.Rect:
        """Pixel rectangle of ``cell``, one pixel short to leave a gap."""

        tile = self.tile_size
        size = max(1, int(tile) - 1)
        return pygame.Rect(int(cell.x * tile), int(cell.y * tile), size, size)

    def in_retry_button(self, pos: Tuple[int, int]) -> bool:
        """Inclusive hit test on the restart control."""

        rect = self.retry_button
        x, y = pos
        return rect.left <= x <= rect.right and rect.top <= y <= rect.bottom
