"""
Utilities Package

Contains logging and formatting helpers.
"""

from .game_logger import GameLogger, game_logger
from .helpers import escape_key, format_elapsed, ordinal, pluralize_guesses

__all__ = ['GameLogger', 'game_logger', 'escape_key', 'format_elapsed', 'ordinal', 'pluralize_guesses']
