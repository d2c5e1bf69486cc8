"""
Services that sit outside the pure core: the driver loop and rendering.
"""

from .console_view import ConsoleRenderer, render_board, render_status
from .driver import GameDriver

__all__ = [
    'ConsoleRenderer',
    'GameDriver',
    'render_board',
    'render_status',
]
