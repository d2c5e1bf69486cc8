"""
Keyboard mapping - translates raw key names into engine events.
"""

from typing import Dict, Optional

from ..domain.constants import Direction
from ..domain.events import (
    ChangeDirection,
    ChangeSpeed,
    Event,
    ResetGame,
    TogglePause,
)

KEY_BINDINGS: Dict[str, Event] = {
    "ArrowUp": ChangeDirection(Direction.UP),
    "ArrowDown": ChangeDirection(Direction.DOWN),
    "ArrowLeft": ChangeDirection(Direction.LEFT),
    "ArrowRight": ChangeDirection(Direction.RIGHT),
    "w": ChangeDirection(Direction.UP),
    "s": ChangeDirection(Direction.DOWN),
    "a": ChangeDirection(Direction.LEFT),
    "d": ChangeDirection(Direction.RIGHT),
    "r": ResetGame(),
    "p": TogglePause(),
    "+": ChangeSpeed(1),
    "=": ChangeSpeed(1),
    "-": ChangeSpeed(-1),
}


def map_key(key: str) -> Optional[Event]:
    """Return the event bound to key, or None for unbound keys."""
    if len(key) == 1:
        key = key.lower()
    return KEY_BINDINGS.get(key)
