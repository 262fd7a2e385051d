"""Game state and the transitions applied on every tick."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from . import constants
from .collision import CollisionKind, detect_collision
from .food import spawn_food
from .intents import ChangeDirection, IntentQueue
from .snake import Snake
from .utils import Cell, validate_grid_size


class GamePhase(str, Enum):
    NOT_STARTED = "not-started"
    RUNNING = "running"
    GAME_OVER = "game-over"


@dataclass
class TickOutcome:
    """What happened during a single tick."""

    ate: bool = False
    collision: Optional[CollisionKind] = None
    new_high_score: bool = False

    @property
    def game_over(self) -> bool:
        return self.collision is not None


@dataclass
class GameState:
    """Everything the rules need to advance one game."""

    grid_size: int = constants.GRID_SIZE_OPTIONS[constants.DEFAULT_GRID_SIZE]
    snake: Snake = field(default_factory=Snake)
    food: Optional[Cell] = None
    score: int = 0
    high_score: int = 0
    phase: GamePhase = GamePhase.NOT_STARTED
    ticks: int = 0

    @property
    def running(self) -> bool:
        return self.phase is GamePhase.RUNNING

    @property
    def game_over(self) -> bool:
        return self.phase is GamePhase.GAME_OVER

    def to_dict(self) -> dict:
        return {
            "grid_size": self.grid_size,
            "snake": self.snake.to_snapshot(),
            "food": self.food.to_tuple() if self.food else None,
            "score": self.score,
            "high_score": self.high_score,
            "phase": self.phase.value,
            "ticks": self.ticks,
        }


def new_game(grid_size: int, high_score: int = 0, rng: Optional[random.Random] = None) -> GameState:
    """Return a fresh, not yet started game on a ``grid_size`` board."""

    validate_grid_size(grid_size)
    state = GameState(grid_size=grid_size, high_score=max(0, high_score))
    state.food = spawn_food(state.snake.segments, grid_size, rng)
    return state


def restart(state: GameState, rng: Optional[random.Random] = None) -> GameState:
    """Return a new game keeping the board size and the high score."""

    return new_game(state.grid_size, state.high_score, rng)


def start(state: GameState) -> bool:
    """Move a not-started game into the running phase."""

    if state.phase is not GamePhase.NOT_STARTED:
        return False
    state.phase = GamePhase.RUNNING
    logging.info("Game started on a %sx%s grid", state.grid_size, state.grid_size)
    return True


def step(
    state: GameState,
    intents: Optional[IntentQueue] = None,
    rng: Optional[random.Random] = None,
) -> TickOutcome:
    """Advance a running game by one tick.

    Pending direction changes are buffered first, then the buffered heading
    is applied and the snake moves. Food is scored and respawned before the
    collision check so a fatal move onto food still counts.
    """

    outcome = TickOutcome()
    if not state.running:
        return outcome

    snake = state.snake
    if intents is not None:
        for intent in intents.drain():
            if isinstance(intent, ChangeDirection):
                snake.change_direction(intent.direction)
            else:
                logging.debug("Ignoring %r during tick", intent)

    state.ticks += 1
    snake.apply_direction()

    if snake.advance(state.food):
        outcome.ate = True
        state.score += constants.FOOD_SCORE
        state.food = spawn_food(snake.segments, state.grid_size, rng)

    outcome.collision = detect_collision(snake.segments, state.grid_size)
    if outcome.collision is not None:
        state.phase = GamePhase.GAME_OVER
        if state.score > state.high_score:
            state.high_score = state.score
            outcome.new_high_score = True
        logging.info(
            "Game over after %s ticks: %s collision, score %s",
            state.ticks,
            outcome.collision.value,
            state.score,
        )
        logging.debug("Final state: %s", state.to_dict())
    return outcome
