"""Queued requests coming from the input surface."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Deque, Iterator, Union

from .utils import Direction


@dataclass(frozen=True)
class ChangeDirection:
    direction: Direction


@dataclass(frozen=True)
class Restart:
    pass


@dataclass(frozen=True)
class SelectSpeed:
    tag: str


@dataclass(frozen=True)
class SelectGridSize:
    tag: str


Intent = Union[ChangeDirection, Restart, SelectSpeed, SelectGridSize]


class IntentQueue:
    """FIFO of intents waiting for the next tick."""

    def __init__(self) -> None:
        self._pending: Deque[Intent] = deque()

    def push(self, intent: Intent) -> None:
        self._pending.append(intent)

    def drain(self) -> Iterator[Intent]:
        """Yield and remove queued intents in arrival order."""

        while self._pending:
            yield self._pending.popleft()

    def clear(self) -> None:
        self._pending.clear()

    def __len__(self) -> int:
        return len(self._pending)
