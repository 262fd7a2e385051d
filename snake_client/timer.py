"""Fixed period tick source backed by the pygame event queue."""

from __future__ import annotations

from typing import Optional

import pygame

TICK_EVENT = pygame.USEREVENT + 1


class TickTimer:
    """Posts ``TICK_EVENT`` every ``period`` milliseconds while running."""

    def __init__(self, event_type: int = TICK_EVENT) -> None:
        self.event_type = event_type
        self.period: Optional[int] = None

    @property
    def running(self) -> bool:
        return self.period is not None

    def start(self, period: int) -> None:
        """Start ticking, replacing any timer that is already running."""

        pygame.time.set_timer(self.event_type, period)
        self.period = period

    def stop(self) -> None:
        pygame.time.set_timer(self.event_type, 0)
        self.period = None
