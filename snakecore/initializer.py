"""
Builds the starting state of a game from its configuration.
"""

import random
from typing import Optional

from .domain.constants import DEFAULT_INITIAL_DIRECTION, GameStatus
from .domain.game_state import GameConfig, GameModel
from .domain.grid import GridDimensions, project
from .domain.snake import Food, Snake
from .placement import place_food


def init(config: GameConfig, rng: Optional[random.Random] = None) -> GameModel:
    """
    Create a fresh RUNNING game.

    The snake's head starts at (width // 4, height // 2) facing LEFT, with
    the body trailing to the right. One food item is placed on a random
    empty cell.

    Raises:
        ConfigurationError: if the configuration cannot produce a valid board
    """
    config.validate()

    dimensions = GridDimensions(config.grid_width, config.grid_height)
    obstacles = config.obstacle_positions
    snake = Snake(
        head=config.start_head,
        body=config.start_body,
        direction=DEFAULT_INITIAL_DIRECTION,
        growing=False,
    )

    without_food = project(snake, None, obstacles, dimensions)
    food = Food(place_food(without_food, rng), config.food_value)

    return GameModel(
        config=config,
        grid=project(snake, food, obstacles, dimensions),
        snake=snake,
        food=food,
        obstacles=obstacles,
        status=GameStatus.RUNNING,
        score=0,
        speed=config.initial_speed,
        is_paused=False,
    )
