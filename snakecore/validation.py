"""
Structural invariants of a game state.

validate() and find_violations() are pure: they neither raise on a bad
state nor log. Tests assert on them after every transition.
"""

from typing import List

from .domain.constants import Direction, GameStatus
from .domain.game_state import GameModel
from .domain.grid import project
from .domain.position import in_bounds, is_adjacent
from .errors import ProjectionError


def find_violations(state: GameModel) -> List[str]:
    """Return a description of every invariant state breaks; empty if valid."""
    violations: List[str] = []
    width, height = state.grid.dimensions

    # Grid structure
    if width <= 0 or height <= 0:
        return [f"grid dimensions must be positive, got {width}x{height}"]
    if (width, height) != (state.config.grid_width, state.config.grid_height):
        violations.append(
            f"grid is {width}x{height} but the game was configured for "
            f"{state.config.grid_width}x{state.config.grid_height}"
        )
    if len(state.grid.cells) != height or any(len(row) != width for row in state.grid.cells):
        violations.append("cell array does not match the grid dimensions")

    # Status and direction
    if not isinstance(state.status, GameStatus):
        violations.append(f"unknown status {state.status!r}")
    elif state.is_paused != (state.status is GameStatus.PAUSED):
        violations.append(f"is_paused={state.is_paused} disagrees with status {state.status.value}")
    if not isinstance(state.snake.direction, Direction):
        violations.append(f"unknown direction {state.snake.direction!r}")

    # Snake continuity
    segments = state.snake.segments
    for previous, segment in zip(segments, segments[1:]):
        if not is_adjacent(previous, segment, width, height, wrapping=state.wrap_mode):
            violations.append(f"snake is broken between {previous} and {segment}")
            break

    # Bounds
    for segment in segments:
        if not in_bounds(segment, width, height):
            violations.append(f"snake segment {segment} is outside the grid")
    for obstacle in state.obstacles:
        if not in_bounds(obstacle, width, height):
            violations.append(f"obstacle {obstacle} is outside the grid")

    # Uniqueness of head, body, obstacles and food
    seen = {}
    claims = [(segment, "snake") for segment in segments]
    claims += [(obstacle, "obstacle") for obstacle in state.obstacles]
    if state.food is not None:
        claims.append((state.food.position, "food"))
    for position, owner in claims:
        if position in seen:
            violations.append(f"{owner} and {seen[position]} share cell {position}")
        else:
            seen[position] = owner

    # Food
    if state.status is not GameStatus.GAME_OVER:
        if state.food is None:
            violations.append("no food on the board while the game is running")
        elif not in_bounds(state.food.position, width, height):
            violations.append(f"food {state.food.position} is outside the grid")

    # Score and speed
    if state.score < 0:
        violations.append(f"negative score {state.score}")
    if not state.min_speed <= state.speed <= state.max_speed:
        violations.append(f"speed {state.speed} outside [{state.min_speed}, {state.max_speed}]")

    # Cell projection must match the entities exactly
    if not violations:
        try:
            expected = project(state.snake, state.food, state.obstacles, state.grid.dimensions)
        except ProjectionError as exc:
            violations.append(str(exc))
        else:
            if expected.cells != state.grid.cells:
                violations.append("grid cells are out of sync with snake, food and obstacles")

    return violations


def validate(state: GameModel) -> bool:
    """True when every structural invariant holds for state."""
    return not find_violations(state)
