"""Collision helpers for the grid model."""

from __future__ import annotations

from enum import Enum
from typing import Optional, Sequence

from .utils import Cell


class CollisionKind(str, Enum):
    WALL = "wall"
    SELF = "self"


def hits_wall(cell: Cell, grid_size: int) -> bool:
    """Return ``True`` if ``cell`` lies outside the board."""

    return not cell.in_bounds(grid_size)


def hits_body(segments: Sequence[Cell]) -> bool:
    """Return ``True`` if the head shares a cell with any other segment.

    A chain of one segment can never hit itself.
    """

    if len(segments) < 2:
        return False
    head = segments[0]
    for segment in segments[1:]:
        if segment == head:
            return True
    return False


def detect_collision(segments: Sequence[Cell], grid_size: int) -> Optional[CollisionKind]:
    """Return the kind of collision the head is in, or ``None``."""

    if not segments:
        return None
    if hits_wall(segments[0], grid_size):
        return CollisionKind.WALL
    if hits_body(segments):
        return CollisionKind.SELF
    return None
