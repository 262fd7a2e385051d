import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from snake_engine.storage import KeyValueStore, Settings


class FakeTimer:
    """Stands in for TickTimer without touching pygame's timers."""

    def __init__(self, event_type=None):
        from snake_client.timer import TICK_EVENT

        self.event_type = event_type or TICK_EVENT
        self.period = None
        self.starts = []

    @property
    def running(self):
        return self.period is not None

    def start(self, period):
        self.period = period
        self.starts.append(period)

    def stop(self):
        self.period = None


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def store(tmp_path):
    return KeyValueStore(str(tmp_path / "snake.json"))


@pytest.fixture
def timer():
    return FakeTimer()


@pytest.fixture
def controller(store, timer, rng):
    from snake_client.controller import GameController

    return GameController(Settings.load(store), store, timer, rng)
