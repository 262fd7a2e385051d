"""Pygame window, input handling and game loop for the Snake game."""

__all__ = [
    "controller",
    "input",
    "layout",
    "main",
    "render",
    "timer",
]
