"""Grid model and game-state transitions for the Snake game."""

__all__ = [
    "collision",
    "constants",
    "food",
    "intents",
    "snake",
    "storage",
    "utils",
    "world",
]
