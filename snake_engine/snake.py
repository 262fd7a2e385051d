"""Snake entity implementation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from . import collision, constants
from .utils import Cell, Direction


def _initial_segments() -> List[Cell]:
    return [Cell.from_tuple(constants.INITIAL_SEGMENT)]


@dataclass
class Snake:
    """The segment chain steered by the player, head first."""

    segments: List[Cell] = field(default_factory=_initial_segments)
    direction: Direction = Direction(constants.INITIAL_DIRECTION)
    next_direction: Direction = Direction(constants.INITIAL_DIRECTION)

    @property
    def head(self) -> Cell:
        return self.segments[0]

    def __len__(self) -> int:
        return len(self.segments)

    def occupies(self, cell: Cell) -> bool:
        """Return ``True`` if any segment sits on ``cell``."""

        return cell in self.segments

    def change_direction(self, requested: "str | Direction") -> bool:
        """Buffer ``requested`` as the heading for the next tick.

        A reversal onto the current direction is rejected and leaves the
        buffer untouched. Returns whether the request was accepted.
        """

        requested = Direction.parse(requested)
        if requested is self.direction.opposite:
            return False
        self.next_direction = requested
        return True

    def apply_direction(self) -> None:
        """Make the buffered heading the current one."""

        self.direction = self.next_direction

    def advance(self, food: Optional[Cell]) -> bool:
        """Move one cell along the current direction.

        The new head is always prepended. Returns ``True`` when it lands on
        ``food``, in which case the tail is kept and the chain grows by one.
        """

        new_head = self.head.shifted(self.direction)
        self.segments.insert(0, new_head)
        if food is not None and new_head == food:
            return True
        self.segments.pop()
        return False

    def check_collision(self, grid_size: int) -> bool:
        """Return ``True`` if the head left the board or hit the body."""

        return collision.detect_collision(self.segments, grid_size) is not None

    def to_snapshot(self) -> dict:
        """Return a JSON friendly representation of the chain."""

        return {
            "segments": [cell.to_tuple() for cell in self.segments],
            "direction": self.direction.value,
            "next_direction": self.next_direction.value,
        }
