"""
Snake entity for the game engine.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .constants import Direction
from .position import Position


@dataclass(frozen=True)
class Snake:
    """
    Represents the snake on the board.

    Attributes:
        head: current head position
        body: segments from the one closest to the head to the tail,
            excluding the head itself
        direction: direction the next move will take
        growing: True for the move right after eating; that move keeps
            the tail instead of dropping it
    """

    head: Position
    body: Tuple[Position, ...] = ()
    direction: Direction = Direction.LEFT
    growing: bool = False

    @property
    def segments(self) -> Tuple[Position, ...]:
        """Head followed by the body, head at index 0."""
        return (self.head,) + self.body

    @property
    def tail(self) -> Optional[Position]:
        """Last body segment, or None for a head-only snake."""
        return self.body[-1] if self.body else None

    @property
    def length(self) -> int:
        return 1 + len(self.body)

    def occupies(self, position: Position) -> bool:
        return position == self.head or position in self.body


@dataclass(frozen=True)
class Food:
    """A single food item worth `value` points."""

    position: Position
    value: int = 1
