"""
Data Models Package

Contains all data models used throughout the game.
"""

from .game import (
    GameOverEvent, GameState, Guess, LetterStatus, RoundResult, ScoredGuess, SessionOutcome,
)

__all__ = [
    'GameOverEvent', 'GameState', 'Guess', 'LetterStatus', 'RoundResult',
    'ScoredGuess', 'SessionOutcome'
]
