"""
snakecore - deterministic state-transition core of a grid snake game.

    state = init(GameConfig(grid_width=10, grid_height=10))
    state = update(state, ChangeDirection(Direction.UP))
    state = update(state, MoveSnake())
    assert validate(state)
"""

from .domain import (
    ChangeDirection,
    ChangeSpeed,
    Direction,
    GameConfig,
    GameModel,
    GameStatus,
    MoveSnake,
    Position,
    ResetGame,
    TogglePause,
)
from .engine import replay, update
from .errors import ConfigurationError, GridFullError, ProjectionError, SnakeCoreError
from .initializer import init
from .validation import find_violations, validate

__version__ = "0.1.0"

__all__ = [
    'init', 'update', 'replay', 'validate', 'find_violations',
    'GameConfig', 'GameModel', 'GameStatus', 'Direction', 'Position',
    'ChangeDirection', 'ChangeSpeed', 'MoveSnake', 'ResetGame', 'TogglePause',
    'SnakeCoreError', 'ConfigurationError', 'GridFullError', 'ProjectionError',
]
