"""
UI Package

Curses presentation layer for the game.
"""

from .terminal import TerminalView, game_over_lines, run, translate_key

__all__ = ['TerminalView', 'game_over_lines', 'run', 'translate_key']
