"""
Collision resolution for a prospective head position.
"""

from .domain.constants import CollisionType
from .domain.game_state import GameModel
from .domain.position import Position, in_bounds


def blocking_segments(snake):
    """
    Segments the head cannot move into on the next move.

    The tail is left out unless the snake is growing, since the same move
    vacates it.
    """
    if snake.growing or not snake.body:
        return snake.segments
    return snake.segments[:-1]


def resolve(prospective_head: Position, state: GameModel) -> CollisionType:
    """
    Classify what the head would hit at prospective_head.

    Checked in order: wall, self, obstacle, food. Under wrap mode the
    position has already been wrapped onto the grid, so WALL only fires
    when wrapping is off.
    """
    if not in_bounds(prospective_head, state.width, state.height):
        return CollisionType.WALL

    if prospective_head in blocking_segments(state.snake):
        return CollisionType.SELF

    if prospective_head in state.obstacles:
        return CollisionType.OBSTACLE

    if state.food is not None and prospective_head == state.food.position:
        return CollisionType.FOOD

    return CollisionType.NONE
