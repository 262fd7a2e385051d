"""Food placement on the grid."""

from __future__ import annotations

import logging
import random
from typing import Collection, List, Optional

from . import constants
from .utils import Cell, iter_cells, validate_grid_size


def free_cells(occupied: Collection[Cell], grid_size: int) -> List[Cell]:
    """Return every cell not in ``occupied``, in row-major order."""

    blocked = set(occupied)
    return [cell for cell in iter_cells(grid_size) if cell not in blocked]


def spawn_food(
    occupied: Collection[Cell],
    grid_size: int,
    rng: Optional[random.Random] = None,
    attempts: int = constants.FOOD_SAMPLE_ATTEMPTS,
) -> Optional[Cell]:
    """Pick a uniformly random empty cell for the next food item.

    Up to ``attempts`` cells are drawn at random. When every draw lands on
    the chain the free cells are enumerated and one is chosen from that list,
    so the result is never an occupied cell. Returns ``None`` if the board is
    full.
    """

    validate_grid_size(grid_size)
    rng = rng or random
    blocked = set(occupied)

    for _ in range(attempts):
        candidate = Cell(rng.randrange(grid_size), rng.randrange(grid_size))
        if candidate not in blocked:
            logging.debug("Food spawned at %s", candidate.to_tuple())
            return candidate

    remaining = free_cells(blocked, grid_size)
    if not remaining:
        logging.debug("No free cell left for food on a %sx%s grid", grid_size, grid_size)
        return None
    logging.debug("Sampling food from %s free cells", len(remaining))
    return rng.choice(remaining)
