"""Presentation-side game loop: phases, timer, persistence and input intents."""

from __future__ import annotations

import logging
import random
from typing import Optional, Tuple

import pygame

from snake_engine import world
from snake_engine.intents import (
    ChangeDirection,
    Intent,
    IntentQueue,
    Restart,
    SelectGridSize,
    SelectSpeed,
)
from snake_engine.storage import KeyValueStore, Settings
from snake_engine.utils import Direction

from .input import InputManager
from .layout import Layout
from .timer import TickTimer

ARROW_CURSOR = "arrow"
HAND_CURSOR = "hand"


class GameController:
    """High level orchestration of one player's session."""

    def __init__(
        self,
        settings: Settings,
        store: KeyValueStore,
        timer: TickTimer,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.settings = settings
        self.store = store
        self.timer = timer
        self.rng = rng or random.Random()
        self.layout = Layout(settings.grid_cells)
        self.input = InputManager(self.layout)
        self.intents = IntentQueue()
        self.cursor = ARROW_CURSOR
        self.state = world.new_game(settings.grid_cells, settings.high_score, self.rng)

    @property
    def retry_visible(self) -> bool:
        return self.state.game_over

    def process_event(self, event: pygame.event.Event) -> None:
        """Feed one pygame event through the game."""

        if event.type == self.timer.event_type:
            self.tick()
        elif event.type == pygame.MOUSEMOTION:
            self.pointer_moved(event.pos)
        else:
            intent = self.input.translate(event)
            if intent is not None:
                self.handle(intent)

    def handle(self, intent: Intent) -> None:
        if isinstance(intent, ChangeDirection):
            self.change_direction(intent.direction)
        elif isinstance(intent, Restart):
            self.restart()
        elif isinstance(intent, SelectSpeed):
            self.select_speed(intent.tag)
        elif isinstance(intent, SelectGridSize):
            self.select_grid_size(intent.tag)

    def change_direction(self, direction: Direction) -> None:
        """Queue a heading change, starting the game on the first one."""

        if self.state.game_over:
            return
        if world.start(self.state):
            self.timer.start(self.settings.tick_ms)
        self.intents.push(ChangeDirection(direction))

    def tick(self) -> world.TickOutcome:
        outcome = world.step(self.state, self.intents, self.rng)
        if outcome.game_over:
            self.end_game(outcome)
        return outcome

    def end_game(self, outcome: world.TickOutcome) -> None:
        self.timer.stop()
        self.intents.clear()
        if outcome.new_high_score:
            self.settings.save_high_score(self.store, self.state.high_score)
            logging.info("New high score: %s", self.state.score)

    def restart(self) -> bool:
        """Start over after a game over. Ignored while the control is hidden."""

        if not self.retry_visible:
            return False
        self._reset(world.restart(self.state, self.rng))
        return True

    def _reset(self, state: world.GameState) -> None:
        self.timer.stop()
        self.intents.clear()
        self.state = state
        self.cursor = ARROW_CURSOR

    def select_speed(self, tag: str) -> None:
        if tag == self.settings.speed or not self.settings.save_speed(self.store, tag):
            return
        logging.info("Speed set to %s (%s ms)", tag, self.settings.tick_ms)
        if self.timer.running:
            self.timer.start(self.settings.tick_ms)

    def select_grid_size(self, tag: str) -> None:
        if tag == self.settings.grid_size or not self.settings.save_grid_size(self.store, tag):
            return
        self.layout.grid_size = self.settings.grid_cells
        logging.info("Grid size set to %s (%s cells)", tag, self.settings.grid_cells)
        self._reset(world.new_game(self.settings.grid_cells, self.settings.high_score, self.rng))

    def pointer_moved(self, pos: Tuple[int, int]) -> None:
        if self.retry_visible and self.layout.in_retry_button(pos):
            self.cursor = HAND_CURSOR
        else:
            self.cursor = ARROW_CURSOR
