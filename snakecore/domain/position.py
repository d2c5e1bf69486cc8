"""
Position entity and grid arithmetic.
"""

from typing import NamedTuple

from .constants import Direction


class Position(NamedTuple):
    """Integer grid coordinate, (0, 0) at the top left."""

    x: int
    y: int

    def __repr__(self) -> str:
        return f"({self.x}, {self.y})"


def step(position: Position, direction: Direction) -> Position:
    """Return the cell one unit away from position in the given direction."""
    dx, dy = direction.delta
    return Position(position.x + dx, position.y + dy)


def wrap(position: Position, width: int, height: int) -> Position:
    """
    Map an off-grid coordinate onto the opposite edge.

    Only ever one cell off the grid, so a negative coordinate goes to
    dimension - 1 and an overflowing one goes to 0.
    """
    x, y = position
    if x < 0:
        x = width - 1
    elif x >= width:
        x = 0
    if y < 0:
        y = height - 1
    elif y >= height:
        y = 0
    return Position(x, y)


def in_bounds(position: Position, width: int, height: int) -> bool:
    return 0 <= position.x < width and 0 <= position.y < height


def manhattan(a: Position, b: Position) -> int:
    return abs(a.x - b.x) + abs(a.y - b.y)


def is_adjacent(a: Position, b: Position, width: int, height: int, wrapping: bool = False) -> bool:
    """
    True when a and b are one orthogonal step apart.

    With wrapping, cells on opposite edges of the same row or column
    also count as neighbours.
    """
    dx = abs(a.x - b.x)
    dy = abs(a.y - b.y)
    if dx + dy == 1:
        return True
    if not wrapping:
        return False
    return (dy == 0 and width > 1 and dx == width - 1) or (dx == 0 and height > 1 and dy == height - 1)
