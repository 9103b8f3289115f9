"""
Terminal Wordle Package

A terminal word-guessing game: guess the hidden five letter word in six
attempts, with per-letter feedback after every guess.
"""

from .config import Config
from .utils.game_logger import game_logger

__version__ = "0.1.0"


def create_game(config_class=Config, word_list=None):
    """
    Factory for a configured game service.

    Args:
        config_class: Configuration class to use
        word_list: Pre-loaded dictionary; loaded (and downloaded if
            needed) from ``config_class.WORD_LIST_PATH`` when omitted

    Returns:
        GameService ready to create sessions
    """
    from .services.game_service import GameService
    from .services.word_list import ensure_word_list

    if word_list is None:
        word_list = ensure_word_list(config_class)

    return GameService(word_list, config_class)
