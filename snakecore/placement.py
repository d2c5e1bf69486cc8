"""
Food placement on the post-move grid.
"""

import random
from typing import Optional

from .domain.grid import Grid
from .domain.position import Position
from .errors import GridFullError

_default_rng = random.Random()


def place_food(grid: Grid, rng: Optional[random.Random] = None) -> Position:
    """
    Pick an EMPTY cell uniformly at random.

    Args:
        grid: projection of the board the food is being placed on; must
            already reflect the latest snake position
        rng: random source; pass a seeded random.Random for reproducible games

    Raises:
        GridFullError: if the grid has no empty cell
    """
    empty = grid.empty_positions()
    if not empty:
        raise GridFullError()
    return (rng or _default_rng).choice(empty)
