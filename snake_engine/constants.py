"""Gameplay constants shared across the engine modules."""

from typing import Dict, Tuple

INITIAL_SEGMENT: Tuple[int, int] = (10, 10)
INITIAL_DIRECTION: str = "right"
FOOD_SCORE: int = 10
FOOD_SAMPLE_ATTEMPTS: int = 64

SPEED_OPTIONS: Dict[str, int] = {
    "slow": 150,
    "normal": 100,
    "fast": 50,
}
DEFAULT_SPEED: str = "normal"

GRID_SIZE_OPTIONS: Dict[str, int] = {
    "small": 20,
    "medium": 30,
    "large": 40,
}
DEFAULT_GRID_SIZE: str = "small"

HIGH_SCORE_KEY: str = "snakeHighScore"
SPEED_KEY: str = "snakeSpeed"
GRID_SIZE_KEY: str = "snakeGridSize"
