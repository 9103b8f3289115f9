"""
Services Package

Contains the game engine: scoring, keyboard tracking, line editing,
session management and word list loading.
"""

from .game_service import GameService, GameSession
from .keyboard import KeyboardStatus
from .line_editor import KeyEvent, KeyKind, LineEditor
from .scoring import evaluate_guess, score_guess
from .word_list import download_word_list, ensure_word_list, load_word_list, parse_word_list, pick_solution

__all__ = [
    'GameService', 'GameSession',
    'KeyboardStatus',
    'KeyEvent', 'KeyKind', 'LineEditor',
    'evaluate_guess', 'score_guess',
    'download_word_list', 'ensure_word_list', 'load_word_list', 'parse_word_list', 'pick_solution'
]
