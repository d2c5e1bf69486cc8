"""
GameConfig and GameModel - the configuration a game is built from and the
immutable snapshot of the game at a point in time.
"""

from dataclasses import dataclass, field, replace
from typing import FrozenSet, Optional, Tuple

from ..errors import ConfigurationError
from .constants import (
    CellContent,
    DEFAULT_FOOD_VALUE,
    DEFAULT_INITIAL_LENGTH,
    DEFAULT_MAX_SPEED,
    DEFAULT_MIN_SPEED,
    DEFAULT_SPEED,
    DEFAULT_SPEED_STEP,
    GameStatus,
)
from .grid import Grid
from .position import Position, in_bounds
from .snake import Food, Snake

BOARD_SYMBOLS = {
    CellContent.EMPTY: ".",
    CellContent.HEAD: "H",
    CellContent.BODY: "o",
    CellContent.FOOD: "*",
    CellContent.OBSTACLE: "#",
}


@dataclass(frozen=True)
class GameConfig:
    """
    Settings consumed when a game is initialized or reset.

    The snake starts with its head at (grid_width // 4, grid_height // 2)
    and its body extending to the right. The fit check is measured from
    that start column, not the full width: a snake of length 4 needs a
    grid at least 5 wide, since a 4-wide grid starts it at column 1.
    """

    grid_width: int
    grid_height: int
    initial_snake_length: int = DEFAULT_INITIAL_LENGTH
    wall_mode: bool = True
    initial_speed: int = DEFAULT_SPEED
    wrap_mode: bool = False
    min_speed: int = DEFAULT_MIN_SPEED
    max_speed: int = DEFAULT_MAX_SPEED
    speed_step: int = DEFAULT_SPEED_STEP
    food_value: int = DEFAULT_FOOD_VALUE
    obstacles: FrozenSet[Position] = field(default_factory=frozenset)

    @property
    def obstacle_positions(self) -> FrozenSet[Position]:
        """
        Obstacles as Position values; plain (x, y) pairs are accepted.

        Raises ConfigurationError for any entry that is not a pair of ints.
        """
        positions = set()
        for obstacle in self.obstacles:
            if (
                not isinstance(obstacle, tuple)
                or len(obstacle) != 2
                or any(type(value) is not int for value in obstacle)
            ):
                raise ConfigurationError(f"Obstacle must be an (x, y) pair of ints, got {obstacle!r}")
            positions.add(Position(*obstacle))
        return frozenset(positions)

    @property
    def start_head(self) -> Position:
        return Position(self.grid_width // 4, self.grid_height // 2)

    @property
    def start_body(self) -> Tuple[Position, ...]:
        head = self.start_head
        return tuple(Position(head.x + i, head.y) for i in range(1, self.initial_snake_length))

    def validate(self) -> None:
        """Raise ConfigurationError describing the first problem found."""
        width, height = self.grid_width, self.grid_height
        if width <= 0 or height <= 0:
            raise ConfigurationError(f"Grid dimensions must be positive, got {width}x{height}")
        if self.initial_snake_length < 1:
            raise ConfigurationError(
                f"Initial snake length must be at least 1, got {self.initial_snake_length}"
            )
        head = self.start_head
        if head.x + self.initial_snake_length > width:
            raise ConfigurationError(
                f"A snake of length {self.initial_snake_length} starting at column {head.x} "
                f"does not fit in a grid {width} cells wide"
            )
        if self.wrap_mode and self.wall_mode:
            raise ConfigurationError("wrap_mode can only be enabled when wall_mode is disabled")
        if self.min_speed > self.max_speed:
            raise ConfigurationError(
                f"min_speed ({self.min_speed}) is greater than max_speed ({self.max_speed})"
            )
        if not self.min_speed <= self.initial_speed <= self.max_speed:
            raise ConfigurationError(
                f"initial_speed {self.initial_speed} is outside [{self.min_speed}, {self.max_speed}]"
            )
        if self.speed_step <= 0:
            raise ConfigurationError(f"speed_step must be positive, got {self.speed_step}")
        if self.food_value <= 0:
            raise ConfigurationError(f"food_value must be positive, got {self.food_value}")

        snake_cells = {head, *self.start_body}
        obstacles = self.obstacle_positions
        for obstacle in obstacles:
            if not in_bounds(obstacle, width, height):
                raise ConfigurationError(f"Obstacle out of bounds at {obstacle}")
            if obstacle in snake_cells:
                raise ConfigurationError(f"Obstacle at {obstacle} overlaps the starting snake")

        if len(snake_cells) + len(obstacles) >= width * height:
            raise ConfigurationError("No empty cell is left for the first food item")

    def with_speed(self, speed: int) -> "GameConfig":
        return replace(self, initial_speed=speed)


@dataclass(frozen=True)
class GameModel:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        config: the configuration the game was created from; reused on reset
        grid: cell projection of snake, food and obstacles
        snake: the snake
        food: the food item; None only once the board has filled up
        obstacles: static blocked cells
        status: RUNNING, PAUSED or GAME_OVER
        score: points collected so far
        speed: current speed, within [min_speed, max_speed]
        is_paused: mirrors status == PAUSED
    """

    config: GameConfig
    grid: Grid
    snake: Snake
    food: Optional[Food]
    obstacles: FrozenSet[Position]
    status: GameStatus
    score: int
    speed: int
    is_paused: bool = False

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    @property
    def min_speed(self) -> int:
        return self.config.min_speed

    @property
    def max_speed(self) -> int:
        return self.config.max_speed

    @property
    def speed_step(self) -> int:
        return self.config.speed_step

    @property
    def wall_mode(self) -> bool:
        return self.config.wall_mode

    @property
    def wrap_mode(self) -> bool:
        return self.config.wrap_mode

    @property
    def is_over(self) -> bool:
        return self.status is GameStatus.GAME_OVER

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        H = snake head
        o = snake body
        * = food
        # = obstacle
        Row 0 is printed first, x-axis labels at the bottom.
        """
        result = []
        for y, row in enumerate(self.grid.cells):
            result.append(f"{y:2d} {' '.join(BOARD_SYMBOLS[cell.content] for cell in row)}")
        result.append("   " + " ".join(str(x % 10) for x in range(self.width)))
        return "\n".join(result)

    def __repr__(self):
        food = self.food.position if self.food is not None else None
        return (
            f"<GameModel status={self.status.value}, score={self.score}, "
            f"head={self.snake.head}, length={self.snake.length}, food={food}>"
        )
