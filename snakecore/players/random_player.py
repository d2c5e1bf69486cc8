"""
Random player implementation - picks random safe turns.
"""

import random
from typing import List, Optional

from ..collision import resolve
from ..domain.constants import Direction
from ..domain.events import ChangeDirection
from ..domain.game_state import GameModel
from ..domain.position import step, wrap
from .base import Player


class RandomPlayer(Player):
    """
    An autopilot that picks a direction that avoids walls, obstacles and
    its own body on the next move.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def safe_directions(self, state: GameModel) -> List[Direction]:
        current = state.snake.direction
        safe: List[Direction] = []
        for direction in Direction:
            if direction.is_opposite(current):
                continue
            head = step(state.snake.head, direction)
            if state.wrap_mode:
                head = wrap(head, state.width, state.height)
            if not resolve(head, state).is_lethal:
                safe.append(direction)
        return safe

    def get_event(self, state: GameModel) -> Optional[ChangeDirection]:
        current = state.snake.direction
        valid_moves = self.safe_directions(state)

        # If no valid moves, keep going (we'll die anyway)
        if not valid_moves:
            return None

        direction = self.rng.choice(valid_moves)
        if direction is current:
            return None
        return ChangeDirection(direction)
