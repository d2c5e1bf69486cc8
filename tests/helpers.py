"""
Builders for hand-made game states used across the tests.
"""

from typing import Iterable, Optional, Tuple

from snakecore.domain import (
    Direction,
    Food,
    GameConfig,
    GameModel,
    GameStatus,
    GridDimensions,
    Position,
    Snake,
    project,
)

Coord = Tuple[int, int]


class LastChoiceRng:
    """Stand-in random source that always picks the last candidate."""

    def choice(self, seq):
        return seq[-1]


def make_state(
    head: Coord,
    body: Iterable[Coord] = (),
    direction: Direction = Direction.LEFT,
    food: Optional[Coord] = (9, 9),
    width: int = 10,
    height: int = 10,
    obstacles: Iterable[Coord] = (),
    growing: bool = False,
    wall_mode: bool = True,
    wrap_mode: bool = False,
    status: GameStatus = GameStatus.RUNNING,
    score: int = 0,
    speed: int = 5,
    food_value: int = 1,
) -> GameModel:
    config = GameConfig(
        grid_width=width,
        grid_height=height,
        wall_mode=wall_mode,
        wrap_mode=wrap_mode,
        initial_speed=speed,
        food_value=food_value,
    )
    snake = Snake(Position(*head), tuple(Position(*p) for p in body), direction, growing)
    food_item = Food(Position(*food), food_value) if food is not None else None
    obstacle_set = frozenset(Position(*p) for p in obstacles)
    return GameModel(
        config=config,
        grid=project(snake, food_item, obstacle_set, GridDimensions(width, height)),
        snake=snake,
        food=food_item,
        obstacles=obstacle_set,
        status=status,
        score=score,
        speed=speed,
        is_paused=status is GameStatus.PAUSED,
    )
