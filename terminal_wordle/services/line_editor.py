"""
Line Editor

Turns a stream of key events into one validated guess per round.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Collection, Iterable, List, Optional, Tuple

from ..config.game_settings import WORD_LENGTH
from ..models.game import Guess
from ..utils.helpers import escape_key

SUBMIT_KEYS = ('\n', '\r')
DELETE_KEYS = ('\x7f', '\b')


class KeyKind(Enum):
    INSERT = "INSERT"
    DELETE = "DELETE"
    SUBMIT = "SUBMIT"


@dataclass(frozen=True)
class KeyEvent:
    """One key press. ``literal`` is what was actually typed."""
    kind: KeyKind
    literal: str = ""

    @classmethod
    def from_char(cls, char: str) -> "KeyEvent":
        if char in SUBMIT_KEYS:
            return cls(KeyKind.SUBMIT, char)
        if char in DELETE_KEYS:
            return cls(KeyKind.DELETE, char)
        return cls(KeyKind.INSERT, char)

    @classmethod
    def insert(cls, char: str) -> "KeyEvent":
        return cls(KeyKind.INSERT, char)

    @classmethod
    def delete(cls) -> "KeyEvent":
        return cls(KeyKind.DELETE, DELETE_KEYS[0])

    @classmethod
    def submit(cls) -> "KeyEvent":
        return cls(KeyKind.SUBMIT, SUBMIT_KEYS[0])


class LineEditor:
    """
    Accumulates letters for the current round.

    Insert and delete requests that cannot apply are ignored. A submission
    is accepted only for a full-length word that was not already guessed
    this session and, when ``require_dictionary_word`` is set, that appears
    in the dictionary. Refused input never raises; the editor simply keeps
    its buffer and waits for more keys.
    """

    def __init__(self,
                 dictionary: Optional[Iterable[str]] = None,
                 require_dictionary_word: bool = False,
                 word_length: int = WORD_LENGTH):
        self.word_length = word_length
        self.require_dictionary_word = require_dictionary_word
        self._dictionary: Collection[str] = frozenset(dictionary or ())
        self._buffer: List[str] = []
        self.last_rejected: Optional[str] = None
        self.last_refusal: str = ""

    @property
    def buffer(self) -> str:
        return "".join(self._buffer)

    def __len__(self) -> int:
        return len(self._buffer)

    def reset(self) -> None:
        self._buffer = []
        self.last_refusal = ""

    def insert(self, char: str) -> bool:
        if len(char) == 1 and char.isascii() and char.isalpha() and len(self._buffer) < self.word_length:
            self._buffer.append(char.lower())
            return True
        self._reject(char)
        return False

    def delete(self) -> bool:
        if self._buffer:
            self._buffer.pop()
            return True
        self._reject(DELETE_KEYS[0])
        return False

    def validate(self, history: Collection[str] = ()) -> Tuple[bool, str]:
        """
        Check whether the buffer may be submitted.

        Returns:
            Tuple of (is_valid, error_message)
        """
        candidate = self.buffer
        if len(candidate) != self.word_length:
            return False, f"Guess must be exactly {self.word_length} letters"

        if candidate in history:
            return False, "Word already guessed"

        if self.require_dictionary_word and candidate not in self._dictionary:
            return False, "Word not in word list"

        return True, ""

    def submit(self, history: Collection[str] = ()) -> Optional[Guess]:
        is_valid, error = self.validate(history)
        if not is_valid:
            self.last_refusal = error
            self._reject(SUBMIT_KEYS[0])
            return None

        guess = Guess(self.buffer)
        self.reset()
        return guess

    def handle(self, event: KeyEvent, history: Collection[str] = ()) -> Optional[Guess]:
        """Apply one key event; return a Guess when the round's word is complete."""
        if event.kind is KeyKind.SUBMIT:
            return self.submit(history)
        if event.kind is KeyKind.DELETE:
            self.delete()
        else:
            self.insert(event.literal)
        return None

    def _reject(self, literal: str) -> None:
        self.last_rejected = escape_key(literal)
