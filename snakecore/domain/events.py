"""
Events accepted by the transition function.

Each event is an immutable value; the engine dispatches on its type.
"""

from dataclasses import dataclass
from typing import Union

from .constants import Direction


@dataclass(frozen=True)
class ChangeDirection:
    direction: Direction


@dataclass(frozen=True)
class MoveSnake:
    pass


@dataclass(frozen=True)
class TogglePause:
    pass


@dataclass(frozen=True)
class ResetGame:
    pass


@dataclass(frozen=True)
class ChangeSpeed:
    """Raise (+1) or lower (-1) the speed by one configured step."""

    delta: int


Event = Union[ChangeDirection, MoveSnake, TogglePause, ResetGame, ChangeSpeed]
