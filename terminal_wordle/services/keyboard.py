"""
Keyboard Status Tracker

Keeps the best verdict seen for every letter across a session, used to
colour the on-screen alphabet.
"""

from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Tuple

from ..config.game_settings import ALPHABET
from ..models.game import LetterStatus, ScoredGuess


class KeyboardStatus:
    """
    Immutable letter -> best LetterStatus mapping.

    ``update`` returns a new tracker; a letter can only move up the
    ``UNUSED < MISS < PRESENT < HIT`` ordering, never back down.
    """

    def __init__(self, statuses: Optional[Mapping[str, LetterStatus]] = None, alphabet: str = ALPHABET):
        self._alphabet = alphabet
        self._statuses: Dict[str, LetterStatus] = dict(statuses or {})

    def update(self, scored_guess: ScoredGuess) -> "KeyboardStatus":
        """Fold one scored guess in, returning the new tracker."""
        return self.update_pairs(scored_guess.pairs())

    def update_pairs(self, pairs: Iterable[Tuple[str, LetterStatus]]) -> "KeyboardStatus":
        """Fold (letter, verdict) pairs in, returning the new tracker."""
        statuses = dict(self._statuses)
        for letter, verdict in pairs:
            current = statuses.get(letter, LetterStatus.UNUSED)
            statuses[letter] = current.best(verdict)
        return KeyboardStatus(statuses, self._alphabet)

    def get(self, letter: str) -> LetterStatus:
        return self._statuses.get(letter, LetterStatus.UNUSED)

    def __getitem__(self, letter: str) -> LetterStatus:
        return self.get(letter)

    def snapshot(self) -> Mapping[str, LetterStatus]:
        """Total, read-only mapping over the alphabet (absent letters are UNUSED)."""
        total = {letter: self.get(letter) for letter in self._alphabet}
        # Letters outside the alphabet are still reported if they were guessed
        for letter, status in self._statuses.items():
            total.setdefault(letter, status)
        return MappingProxyType(total)

    def as_values(self) -> Dict[str, str]:
        return {letter: status.value for letter, status in self.snapshot().items()}

    def __eq__(self, other) -> bool:
        if not isinstance(other, KeyboardStatus):
            return NotImplemented
        return dict(self.snapshot()) == dict(other.snapshot())

    def __repr__(self) -> str:
        seen = {letter: status.value for letter, status in sorted(self._statuses.items())}
        return f"KeyboardStatus({seen})"
