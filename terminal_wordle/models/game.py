"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

from ..config.game_settings import WORD_LENGTH
from ..exceptions import InvalidLengthError


class LetterStatus(Enum):
    """Letter evaluation status. UNUSED means the letter was never guessed."""
    HIT = "HIT"
    PRESENT = "PRESENT"
    MISS = "MISS"
    UNUSED = "UNUSED"

    @property
    def rank(self) -> int:
        return _STATUS_RANK[self]

    def best(self, other: "LetterStatus") -> "LetterStatus":
        """Return whichever of the two statuses carries more information."""
        return other if other.rank > self.rank else self


_STATUS_RANK = {
    LetterStatus.UNUSED: 0,
    LetterStatus.MISS: 1,
    LetterStatus.PRESENT: 2,
    LetterStatus.HIT: 3,
}


class SessionOutcome(Enum):
    """Lifecycle of a single game."""
    ACTIVE = "ACTIVE"
    WON = "WON"
    LOST = "LOST"

    @property
    def is_terminal(self) -> bool:
        return self is not SessionOutcome.ACTIVE


@dataclass(frozen=True)
class Guess:
    """A submitted word of exactly ``WORD_LENGTH`` lowercase letters."""
    word: str

    def __post_init__(self):
        if len(self.word) != WORD_LENGTH:
            raise InvalidLengthError(
                f"Guess '{self.word}' has {len(self.word)} letters, expected {WORD_LENGTH}"
            )

    def __str__(self) -> str:
        return self.word

    def __len__(self) -> int:
        return len(self.word)

    def __iter__(self):
        return iter(self.word)


@dataclass(frozen=True)
class ScoredGuess:
    """A guess paired with one verdict per letter position."""
    guess: Guess
    verdicts: Tuple[LetterStatus, ...]

    @property
    def word(self) -> str:
        return self.guess.word

    @property
    def is_solved(self) -> bool:
        return all(verdict is LetterStatus.HIT for verdict in self.verdicts)

    def pairs(self) -> List[Tuple[str, LetterStatus]]:
        return list(zip(self.guess.word, self.verdicts))

    def to_dict(self) -> Dict:
        return {
            'guess': self.guess.word,
            'verdicts': [verdict.value for verdict in self.verdicts],
        }


@dataclass(frozen=True)
class RoundResult:
    """Emitted to the presentation layer after every scored round."""
    game_id: str
    attempt_number: int
    scored_guess: ScoredGuess
    keyboard_status: Dict[str, LetterStatus]
    outcome: SessionOutcome


@dataclass(frozen=True)
class GameOverEvent:
    """Emitted once, when a session reaches WON or LOST."""
    game_id: str
    outcome: SessionOutcome
    history: Tuple[ScoredGuess, ...]
    elapsed_seconds: float
    solution: str
    solution_index: int
    word_count: int

    @property
    def guesses_taken(self) -> int:
        return len(self.history)

    @property
    def won(self) -> bool:
        return self.outcome is SessionOutcome.WON


@dataclass
class GameState:
    """Read-only snapshot of a session."""
    game_id: str
    current_round: int
    max_rounds: int
    game_over: bool
    won: bool
    guesses: List[str]
    guess_results: List[List[Tuple[str, str]]]  # Letter status as string for logging
    letter_status: Dict[str, str]
    require_dictionary_word: bool = False
    answer: Optional[str] = None  # Only included when game is over
    pending_input: str = ""
