"""
The transition function: (state, event) -> next state.

Every accepted event produces a new GameModel built from the parts of
the old one; no model is modified after it has been returned. Events
that do not apply to the current state (a reversal, a move while
paused, anything but a reset once the game is over, an unknown event)
return the input state unchanged.
"""

import random
from dataclasses import replace
from typing import Callable, Dict, Iterable, Optional

from .collision import resolve
from .domain.constants import CollisionType, Direction, GameStatus
from .domain.events import (
    ChangeDirection,
    ChangeSpeed,
    Event,
    MoveSnake,
    ResetGame,
    TogglePause,
)
from .domain.game_state import GameModel
from .domain.grid import project
from .domain.position import Position, step, wrap
from .domain.snake import Food
from .errors import GridFullError
from .initializer import init
from .placement import place_food


def next_head(state: GameModel) -> Position:
    """Where the head lands on the next move, wrapped when wrap mode is on."""
    head = step(state.snake.head, state.snake.direction)
    if state.wrap_mode:
        head = wrap(head, state.width, state.height)
    return head


def _change_direction(state: GameModel, event: ChangeDirection, rng) -> GameModel:
    try:
        direction = Direction(event.direction)
    except ValueError:
        return state

    current = state.snake.direction
    if direction is current or direction.is_opposite(current):
        return state
    return replace(state, snake=replace(state.snake, direction=direction))


def _move_snake(state: GameModel, event: MoveSnake, rng) -> GameModel:
    if state.status is not GameStatus.RUNNING:
        return state

    snake = state.snake
    head = next_head(state)
    collision = resolve(head, state)

    if collision.is_lethal:
        # Snake and score stay frozen at their pre-collision values.
        return replace(state, status=GameStatus.GAME_OVER, is_paused=False)

    ate_food = collision is CollisionType.FOOD

    # The tail is only kept on the move after eating.
    body = (snake.head,) + snake.body
    if not snake.growing:
        body = body[:-1]
    moved = replace(snake, head=head, body=body, growing=ate_food)

    if not ate_food:
        return replace(
            state,
            snake=moved,
            grid=project(moved, state.food, state.obstacles, state.grid.dimensions),
        )

    score = state.score + state.food.value
    without_food = project(moved, None, state.obstacles, state.grid.dimensions)
    try:
        position = place_food(without_food, rng)
    except GridFullError as exc:
        terminal = replace(
            state,
            snake=moved,
            food=None,
            grid=without_food,
            score=score,
            status=GameStatus.GAME_OVER,
            is_paused=False,
        )
        raise GridFullError("The snake filled the grid; no cell is left for food", state=terminal) from exc

    food = Food(position, state.config.food_value)
    return replace(
        state,
        snake=moved,
        food=food,
        score=score,
        grid=project(moved, food, state.obstacles, state.grid.dimensions),
    )


def _toggle_pause(state: GameModel, event: TogglePause, rng) -> GameModel:
    if state.status is GameStatus.RUNNING:
        return replace(state, status=GameStatus.PAUSED, is_paused=True)
    if state.status is GameStatus.PAUSED:
        return replace(state, status=GameStatus.RUNNING, is_paused=False)
    return state


def _change_speed(state: GameModel, event: ChangeSpeed, rng) -> GameModel:
    if state.status is not GameStatus.RUNNING:
        return state
    if type(event.delta) is not int or event.delta not in (1, -1):
        return state

    speed = state.speed + event.delta * state.speed_step
    speed = max(state.min_speed, min(state.max_speed, speed))
    if speed == state.speed:
        return state
    return replace(state, speed=speed)


def _reset_game(state: GameModel, event: ResetGame, rng) -> GameModel:
    return init(state.config.with_speed(state.speed), rng)


_HANDLERS: Dict[type, Callable] = {
    ChangeDirection: _change_direction,
    MoveSnake: _move_snake,
    TogglePause: _toggle_pause,
    ChangeSpeed: _change_speed,
    ResetGame: _reset_game,
}


def update(state: GameModel, event: Event, rng: Optional[random.Random] = None) -> GameModel:
    """
    Apply one event to state and return the resulting state.

    Args:
        state: current game state; never modified
        event: one of ChangeDirection, MoveSnake, TogglePause, ChangeSpeed,
            ResetGame
        rng: random source used for food placement and resets

    Raises:
        GridFullError: when eating food leaves no empty cell for the next
            one. The error's `state` holds the terminal GAME_OVER state.
    """
    if state.status is GameStatus.GAME_OVER and not isinstance(event, ResetGame):
        return state

    handler = _HANDLERS.get(type(event))
    if handler is None:
        return state
    return handler(state, event, rng)


def replay(state: GameModel, events: Iterable[Event], rng: Optional[random.Random] = None) -> GameModel:
    """Fold a sequence of events over state, one at a time."""
    for event in events:
        state = update(state, event, rng)
    return state
