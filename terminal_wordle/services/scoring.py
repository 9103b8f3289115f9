"""
Guess Scorer

Implements the Wordle letter evaluation algorithm.
"""

from collections import Counter
from typing import List, Optional, Tuple, Union

from ..exceptions import InvalidLengthError
from ..models.game import Guess, LetterStatus, ScoredGuess


def evaluate_guess(guess: str, solution: str) -> Tuple[LetterStatus, ...]:
    """
    Score ``guess`` against ``solution``, one verdict per position.

    Exact matches are claimed first. Every remaining letter is then marked
    PRESENT only while an unclaimed occurrence of it is left in the solution,
    so a repeated letter is never credited more often than it appears.

    Raises:
        InvalidLengthError: If the two words differ in length
    """
    if len(guess) != len(solution):
        raise InvalidLengthError(
            f"Guess length ({len(guess)}) != solution length ({len(solution)})"
        )

    verdicts: List[Optional[LetterStatus]] = [None] * len(solution)
    remaining = Counter(solution)

    # First pass: exact position matches (HIT)
    for i, (letter, expected) in enumerate(zip(guess, solution)):
        if letter == expected:
            verdicts[i] = LetterStatus.HIT
            remaining[letter] -= 1

    # Second pass: PRESENT while unclaimed occurrences remain, otherwise MISS
    for i, letter in enumerate(guess):
        if verdicts[i] is not None:
            continue
        if remaining[letter] > 0:
            verdicts[i] = LetterStatus.PRESENT
            remaining[letter] -= 1
        else:
            verdicts[i] = LetterStatus.MISS

    return tuple(verdicts)


def score_guess(guess: Union[Guess, str], solution: str) -> ScoredGuess:
    """Pair a guess with its verdicts."""
    if not isinstance(guess, Guess):
        guess = Guess(guess)
    return ScoredGuess(guess=guess, verdicts=evaluate_guess(guess.word, solution))
