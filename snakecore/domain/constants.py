"""
Game constants for the snake state machine.
"""

from enum import Enum
from typing import Tuple


class Direction(str, Enum):
    """Cardinal movement direction. UP decreases y, DOWN increases it."""

    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"

    @property
    def delta(self) -> Tuple[int, int]:
        return _DELTAS[self]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    def is_opposite(self, other: "Direction") -> bool:
        return self.opposite is other


_DELTAS = {
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


class CellContent(str, Enum):
    EMPTY = "EMPTY"
    HEAD = "HEAD"
    BODY = "BODY"
    FOOD = "FOOD"
    OBSTACLE = "OBSTACLE"


class CollisionType(str, Enum):
    NONE = "NONE"
    WALL = "WALL"
    SELF = "SELF"
    FOOD = "FOOD"
    OBSTACLE = "OBSTACLE"

    @property
    def is_lethal(self) -> bool:
        return self in LETHAL_COLLISIONS


LETHAL_COLLISIONS = frozenset({CollisionType.WALL, CollisionType.SELF, CollisionType.OBSTACLE})


class GameStatus(str, Enum):
    RUNNING = "RUNNING"
    PAUSED = "PAUSED"
    GAME_OVER = "GAME_OVER"


# Movement directions
UP = Direction.UP
DOWN = Direction.DOWN
LEFT = Direction.LEFT
RIGHT = Direction.RIGHT
VALID_MOVES = frozenset(Direction)

# Game settings
DEFAULT_INITIAL_LENGTH = 3
DEFAULT_INITIAL_DIRECTION = Direction.LEFT
DEFAULT_SPEED = 5
DEFAULT_MIN_SPEED = 1
DEFAULT_MAX_SPEED = 10
DEFAULT_SPEED_STEP = 1
DEFAULT_FOOD_VALUE = 1
DEFAULT_HIGH_SCORE_LIMIT = 10
