"""
Domain entities for the snake state machine.

This module contains the core game entities. They are plain immutable
values with no knowledge of rendering, input or persistence.
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES,
    CellContent, CollisionType, Direction, GameStatus,
)
from .position import Position, step, wrap, in_bounds, is_adjacent, manhattan
from .snake import Food, Snake
from .grid import Cell, Grid, GridDimensions, empty_grid, project
from .game_state import GameConfig, GameModel
from .events import ChangeDirection, ChangeSpeed, Event, MoveSnake, ResetGame, TogglePause

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES',
    'CellContent', 'CollisionType', 'Direction', 'GameStatus',
    'Position', 'step', 'wrap', 'in_bounds', 'is_adjacent', 'manhattan',
    'Food', 'Snake',
    'Cell', 'Grid', 'GridDimensions', 'empty_grid', 'project',
    'GameConfig', 'GameModel',
    'ChangeDirection', 'ChangeSpeed', 'Event', 'MoveSnake', 'ResetGame', 'TogglePause',
]
