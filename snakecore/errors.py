"""
Exceptions raised by the snake core.

Expected misuse (a reversal, a malformed event) never raises: the
transition function hands back the state it was given. Only the
conditions below reach the caller.
"""


class SnakeCoreError(Exception):
    """Base class for all snakecore errors."""


class ConfigurationError(SnakeCoreError, ValueError):
    """The requested game configuration cannot produce a valid state."""


class GridFullError(SnakeCoreError):
    """
    No empty cell is left for the next food item.

    Attributes:
        state: the terminal state reached by the move that filled the grid
            (snake moved, score awarded, status GAME_OVER, no food), or
            None when raised outside a transition
    """

    def __init__(self, message: str = "No empty cells available for food", state=None):
        super().__init__(message)
        self.state = state


class ProjectionError(SnakeCoreError):
    """Two entities were asked to occupy the same cell, or one lies off the grid."""
