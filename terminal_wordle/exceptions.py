"""
Exception Types

Errors raised by the game engine and its collaborators. Invalid player
input is never an exception: the line editor simply refuses it.
"""


class WordleError(Exception):
    """Base class for all terminal_wordle errors."""


class InvalidLengthError(WordleError, ValueError):
    """A guess and the solution have different lengths (caller bug)."""


class WordListError(WordleError):
    """The word list could not be read, downloaded or was empty."""


class TimingError(WordleError):
    """The clock went backwards while measuring the game duration."""


class GameOverError(WordleError, RuntimeError):
    """A guess was submitted to a session that has already finished."""


class DuplicateGuessError(WordleError, ValueError):
    """A word was submitted twice in the same session."""
