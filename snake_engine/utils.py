"""Grid primitives used by the snake model."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Tuple


class Direction(str, Enum):
    """One of the four headings a snake can travel in."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @classmethod
    def parse(cls, value: "str | Direction") -> "Direction":
        """Return the direction named by ``value``.

        Raises ``ValueError`` for anything that is not one of the four names.
        """

        if isinstance(value, Direction):
            return value
        try:
            return cls(str(value).lower())
        except ValueError as exc:
            raise ValueError(f"Unknown direction: {value!r}") from exc

    @property
    def offset(self) -> Tuple[int, int]:
        """Unit step for this heading; y grows downward."""

        return _OFFSETS[self]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]


_OFFSETS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


@dataclass(frozen=True)
class Cell:
    """An integer grid coordinate.

    Cells are immutable and hashable so a chain of them can be checked
    against sets of occupied positions.
    """

    x: int
    y: int

    def shifted(self, direction: Direction) -> "Cell":
        """Return the neighbouring cell one step towards ``direction``."""

        dx, dy = direction.offset
        return Cell(self.x + dx, self.y + dy)

    def in_bounds(self, grid_size: int) -> bool:
        """Return ``True`` if the cell lies inside ``[0, grid_size)`` on both axes."""

        return 0 <= self.x < grid_size and 0 <= self.y < grid_size

    def to_tuple(self) -> Tuple[int, int]:
        return self.x, self.y

    @classmethod
    def from_tuple(cls, value: Tuple[int, int]) -> "Cell":
        x, y = value
        return cls(int(x), int(y))


def validate_grid_size(grid_size: int) -> int:
    """Return ``grid_size`` if it describes a usable board."""

    if grid_size <= 0:
        raise ValueError(f"Grid size must be positive, got {grid_size}")
    return grid_size


def iter_cells(grid_size: int) -> Iterator[Cell]:
    """Yield every cell of a ``grid_size`` board in row-major order."""

    for y in range(grid_size):
        for x in range(grid_size):
            yield Cell(x, y)
