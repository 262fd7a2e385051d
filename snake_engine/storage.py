"""Scalar key-value persistence for the high score and the user's choices."""

from __future__ import annotations

import json
import logging
import math
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

from . import constants

DEFAULT_STORAGE_PATH = os.path.join(os.path.expanduser("~"), ".grid_snake.json")


class KeyValueStore:
    """A flat JSON object on disk holding a handful of scalars.

    Anything that prevents reading the file is treated the same as the key
    never having been written.
    """

    def __init__(self, path: str = DEFAULT_STORAGE_PATH) -> None:
        self.path = path

    def _load(self) -> Dict[str, Any]:
        try:
            with open(self.path, "r", encoding="utf-8") as handle:
                payload = json.load(handle)
        except (OSError, json.JSONDecodeError, UnicodeDecodeError):
            return {}
        if not isinstance(payload, dict):
            return {}
        return payload

    def get(self, key: str) -> Optional[Any]:
        return self._load().get(key)

    def set(self, key: str, value: Any) -> bool:
        """Store ``value`` under ``key``. Returns ``False`` if the write failed."""

        payload = self._load()
        payload[key] = value
        try:
            with open(self.path, "w", encoding="utf-8") as handle:
                json.dump(payload, handle, indent=2, sort_keys=True)
        except OSError:
            logging.warning("Could not write %s to %s", key, self.path, exc_info=True)
            return False
        return True


def _parse_score(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, float) and not math.isfinite(value):
        return 0
    try:
        score = int(value)
    except (TypeError, ValueError, OverflowError):
        return 0
    return max(0, score)


@dataclass
class Settings:
    """The persisted speed, grid size and high score."""

    speed: str = constants.DEFAULT_SPEED
    grid_size: str = constants.DEFAULT_GRID_SIZE
    high_score: int = 0

    @property
    def tick_ms(self) -> int:
        return constants.SPEED_OPTIONS[self.speed]

    @property
    def grid_cells(self) -> int:
        return constants.GRID_SIZE_OPTIONS[self.grid_size]

    @classmethod
    def load(cls, store: KeyValueStore) -> "Settings":
        """Read the stored values, falling back to defaults for bad entries."""

        speed = store.get(constants.SPEED_KEY)
        if not isinstance(speed, str) or speed not in constants.SPEED_OPTIONS:
            speed = constants.DEFAULT_SPEED
        grid_size = store.get(constants.GRID_SIZE_KEY)
        if not isinstance(grid_size, str) or grid_size not in constants.GRID_SIZE_OPTIONS:
            grid_size = constants.DEFAULT_GRID_SIZE
        high_score = _parse_score(store.get(constants.HIGH_SCORE_KEY))
        return cls(speed=speed, grid_size=grid_size, high_score=high_score)

    def save_speed(self, store: KeyValueStore, tag: str) -> bool:
        if tag not in constants.SPEED_OPTIONS:
            return False
        self.speed = tag
        store.set(constants.SPEED_KEY, tag)
        return True

    def save_grid_size(self, store: KeyValueStore, tag: str) -> bool:
        if tag not in constants.GRID_SIZE_OPTIONS:
            return False
        self.grid_size = tag
        store.set(constants.GRID_SIZE_KEY, tag)
        return True

    def save_high_score(self, store: KeyValueStore, score: int) -> bool:
        """Persist ``score`` if it beats the stored high score."""

        if score <= self.high_score:
            return False
        self.high_score = score
        store.set(constants.HIGH_SCORE_KEY, score)
        return True
