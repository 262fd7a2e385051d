"""Pygame based renderer for the game window."""

from __future__ import annotations

from typing import Dict, Tuple

import pygame

from snake_engine.constants import GRID_SIZE_OPTIONS
from snake_engine.storage import Settings
from snake_engine.utils import Cell
from snake_engine.world import GameState

from .layout import Layout

GLOW_RADIUS = 6
GLOW_ALPHA = 90

SPEED_LABELS = {"slow": "Slow", "normal": "Normal", "fast": "Fast"}
GRID_LABELS = {tag: f"{cells}x{cells}" for tag, cells in GRID_SIZE_OPTIONS.items()}


class Renderer:
    """Responsible for all drawing tasks. Every frame is redrawn from scratch."""

    def __init__(self, screen: pygame.Surface, layout: Layout) -> None:
        self.screen = screen
        self.layout = layout
        self.title_font = pygame.font.SysFont("arial", 24)
        self.font = pygame.font.SysFont("arial", 16)
        self.button_font = pygame.font.SysFont("arial", 18)
        self.small_font = pygame.font.SysFont("arial", 13)
        self.background_color = (0x18, 0x18, 0x25)
        self.grid_color = (0x22, 0x27, 0x38)
        self.head_color = (0x00, 0xFF, 0xA2)
        self.body_color = (0xFF, 0xFF, 0xFF)
        self.food_color = (0xFF, 0xFF, 0xFF)
        self.button_color = (0x6E, 0x78, 0x88)
        self.panel_color = (0x11, 0x11, 0x1B)
        self.text_color = (255, 255, 255)
        self.muted_text_color = (150, 156, 170)

    def draw(self, state: GameState, settings: Settings) -> None:
        self.clear()
        self.draw_grid()
        self.draw_snake(state)
        self.draw_food(state)
        if state.game_over:
            self.draw_game_over(state)
        self.draw_panel(state, settings)

    def clear(self) -> None:
        self.screen.fill(self.background_color)

    def draw_grid(self) -> None:
        board = self.layout.board_rect
        tile = self.layout.tile_size
        for index in range(self.layout.grid_size + 1):
            offset = int(index * tile)
            pygame.draw.line(self.screen, self.grid_color, (offset, board.top), (offset, board.bottom))
            pygame.draw.line(self.screen, self.grid_color, (board.left, offset), (board.right, offset))

    def _draw_glow(self, rect: pygame.Rect, color: Tuple[int, int, int]) -> None:
        glow = pygame.Surface((rect.width + GLOW_RADIUS * 2, rect.height + GLOW_RADIUS * 2), pygame.SRCALPHA)
        pygame.draw.rect(glow, (*color, GLOW_ALPHA), glow.get_rect(), border_radius=GLOW_RADIUS)
        self.screen.blit(glow, (rect.x - GLOW_RADIUS, rect.y - GLOW_RADIUS))

    def _draw_cell(self, cell: Cell, color: Tuple[int, int, int], glow: bool = False) -> None:
        rect = self.layout.cell_rect(cell)
        if glow:
            self._draw_glow(rect, color)
        pygame.draw.rect(self.screen, color, rect)

    def draw_snake(self, state: GameState) -> None:
        # Body first so the head glow sits on top of its neighbour.
        for segment in state.snake.segments[1:]:
            self._draw_cell(segment, self.body_color)
        self._draw_cell(state.snake.head, self.head_color, glow=True)

    def draw_food(self, state: GameState) -> None:
        if state.food is not None:
            self._draw_cell(state.food, self.food_color, glow=True)

    def _blit_centered(self, font: pygame.font.Font, text: str, center: Tuple[int, int]) -> None:
        surface = font.render(text, True, self.text_color)
        self.screen.blit(surface, surface.get_rect(center=center))

    def draw_game_over(self, state: GameState) -> None:
        board = self.layout.board_rect
        self.screen.fill(self.background_color, board)
        cx, cy = board.centerx, board.centery
        self._blit_centered(self.title_font, "GAME OVER", (cx, cy - 40))
        self._blit_centered(self.font, f"SCORE: {state.score}", (cx, cy - 10))
        self._blit_centered(self.font, f"HIGH SCORE: {state.high_score}", (cx, cy + 20))

        button = self.layout.retry_button
        pygame.draw.rect(self.screen, self.button_color, button, border_radius=24)
        self._blit_centered(self.button_font, "Play again", button.center)

    def _draw_selector(self, buttons: Dict[str, pygame.Rect], labels: Dict[str, str], selected: str) -> None:
        for tag, rect in buttons.items():
            if tag == selected:
                pygame.draw.rect(self.screen, self.head_color, rect, border_radius=6)
                color = self.background_color
            else:
                pygame.draw.rect(self.screen, self.button_color, rect, width=1, border_radius=6)
                color = self.text_color
            label = self.small_font.render(labels[tag], True, color)
            self.screen.blit(label, label.get_rect(center=rect.center))

    def draw_panel(self, state: GameState, settings: Settings) -> None:
        panel = self.layout.panel_rect
        self.screen.fill(self.panel_color, panel)

        score = self.font.render(f"Score: {state.score}", True, self.text_color)
        self.screen.blit(score, (panel.left + 10, panel.top + 10))
        high = self.font.render(f"High score: {state.high_score}", True, self.text_color)
        self.screen.blit(high, (panel.right - 10 - high.get_width(), panel.top + 10))

        speed_buttons = self.layout.speed_buttons
        grid_buttons = self.layout.grid_buttons
        speed_caption = self.small_font.render("Speed", True, self.muted_text_color)
        grid_caption = self.small_font.render("Grid", True, self.muted_text_color)
        first_speed = next(iter(speed_buttons.values()))
        first_grid = next(iter(grid_buttons.values()))
        self.screen.blit(speed_caption, (first_speed.left, first_speed.top - 18))
        self.screen.blit(grid_caption, (first_grid.left, first_grid.top - 18))

        self._draw_selector(speed_buttons, SPEED_LABELS, settings.speed)
        self._draw_selector(grid_buttons, GRID_LABELS, settings.grid_size)

    def present(self) -> None:
        pygame.display.flip()
