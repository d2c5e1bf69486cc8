"""
Base player interface for the driver loop.
"""

from typing import Optional

from ..domain.events import Event
from ..domain.game_state import GameModel


class Player:
    """
    Base class/interface for input sources.

    A player looks at the current snapshot and returns the event it wants
    applied before the next tick, or None to leave the game as it is.
    """

    def get_event(self, state: GameModel) -> Optional[Event]:
        """
        Return an event given the current game state.

        Args:
            state: Current state of the game (read-only)

        Returns:
            An event such as ChangeDirection, or None
        """
        raise NotImplementedError
