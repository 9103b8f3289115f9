"""
Game Configuration Constants Module

This module defines the fixed rules of the terminal game.
All game parameters are centralized here so the engine, the word list
loader and the terminal view agree on them.
"""

from typing import Dict, Final, Sequence

# Core Game Configuration Constants
WORD_LENGTH: Final[int] = 5
"""
Number of letters in every dictionary word and every guess.
Type: Final[int] - Immutable to prevent accidental modification
"""

MAX_GUESSES: Final[int] = 6
"""
Maximum number of guess attempts allowed per game.
"""

ALPHABET: Final[str] = "abcdefghijklmnopqrstuvwxyz"

# Terminal layout
MAX_DEBUG_LENGTH: Final[int] = 20
WIN_TEXT_LINES: Final[int] = 5

VOWELS: Final[str] = "aeiou"


def validate_word_list_integrity(words: Sequence[str], word_length: int = WORD_LENGTH) -> bool:
    """
    Validates the integrity and consistency of a loaded word list.

    This function performs validation to ensure:
    1. Length validation: All words must be exactly ``word_length`` characters
    2. Character validation: Only alphabetic characters allowed
    3. Format validation: Consistent lowercase formatting

    Duplicates are allowed: the list order is only used to report the
    position of the solution.

    Returns:
        bool: True if word list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    if not words:
        raise ValueError("Word list cannot be empty")

    for index, word in enumerate(words):
        if len(word) != word_length:
            raise ValueError(f"Word at index {index} '{word}' is not {word_length} characters long")

        if not word.isalpha():
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if not word.islower():
            raise ValueError(f"Word at index {index} '{word}' is not in lowercase format")

    return True


def get_word_statistics(words: Sequence[str]) -> Dict:
    """
    Analyzes a word list and returns statistical information.

    Returns:
        dict: Statistical analysis including:
            - total_words: Number of words in the list
            - avg_vowel_count: Average vowels per word
            - letter_frequency: Distribution of letters across all words
            - most_common_letters: Five most frequent letters with counts
    """
    if not words:
        return {"error": "Word list is empty"}

    total_vowels = sum(len([char for char in word if char in VOWELS]) for word in words)

    letter_frequency: Dict[str, int] = {}
    for word in words:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": len(words),
        "avg_vowel_count": round(total_vowels / len(words), 2),
        "letter_frequency": letter_frequency,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }
