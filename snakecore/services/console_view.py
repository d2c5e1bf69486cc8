"""
Text rendering of game snapshots.
"""

import sys
from typing import Optional, TextIO

from ..domain.game_state import GameModel


def render_status(model: GameModel) -> str:
    return (
        f"Score: {model.score} | Length: {model.snake.length} | "
        f"Speed: {model.speed} | {model.status.value}"
    )


def render_board(model: GameModel) -> str:
    """Board followed by the status line."""
    return model.print_board() + "\n" + render_status(model)


class ConsoleRenderer:
    """Prints each snapshot it receives. Never modifies the snapshot."""

    def __init__(self, stream: Optional[TextIO] = None, clear_screen: bool = False):
        self.stream = stream or sys.stdout
        self.clear_screen = clear_screen
        self._last: Optional[GameModel] = None

    def __call__(self, model: GameModel) -> None:
        if model is self._last:
            return
        self._last = model
        if self.clear_screen:
            self.stream.write("\033[2J\033[H")
        print("\n" + render_board(model) + "\n", file=self.stream)
