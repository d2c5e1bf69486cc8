"""
Input sources for the driver loop.

Players decide which event to feed the engine next; the keyboard map
translates raw key presses into the same event vocabulary.
"""

from .base import Player
from .random_player import RandomPlayer
from .keyboard import KEY_BINDINGS, map_key

__all__ = [
    'Player',
    'RandomPlayer',
    'KEY_BINDINGS',
    'map_key',
]
