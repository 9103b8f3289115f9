"""
Word List Service

Loads the dictionary from a local file, downloading it first when the
file does not exist yet.
"""

import random
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

import httpx

from ..config.game_settings import WORD_LENGTH
from ..exceptions import WordListError
from ..utils.game_logger import game_logger

PathLike = Union[str, Path]


def is_playable_word(word: str, word_length: int = WORD_LENGTH) -> bool:
    """True for words of ``word_length`` ASCII letters, the only keys the editor accepts."""
    return len(word) == word_length and word.isascii() and word.isalpha()


def parse_word_list(text: str, word_length: int = WORD_LENGTH) -> List[str]:
    """Split on whitespace, lower-case, and keep playable words of ``word_length``."""
    words = []
    for token in text.split():
        word = token.lower().strip()
        if is_playable_word(word, word_length):
            words.append(word)
    return words


def load_word_list(path: PathLike, word_length: int = WORD_LENGTH) -> Tuple[str, ...]:
    """
    Read the dictionary from ``path``.

    Returns:
        Tuple of words in file order

    Raises:
        WordListError: If the file is missing, unreadable or has no usable words
    """
    source = Path(path)
    try:
        text = source.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise WordListError(f"Could not read word list {source}: {e}") from e

    words = parse_word_list(text, word_length)
    if not words:
        raise WordListError(f"No {word_length}-letter words found in {source}")

    game_logger.log_game_event(None, 'word_list_loaded', path=str(source), word_count=len(words))
    return tuple(words)


def download_word_list(url: str,
                       path: PathLike,
                       timeout: float = 30.0,
                       word_length: int = WORD_LENGTH,
                       client: Optional[httpx.Client] = None) -> int:
    """
    Fetch a word list over HTTP and save its ``word_length`` words to ``path``.

    Returns:
        int: Number of words written

    Raises:
        WordListError: If the request fails or the file cannot be written
    """
    destination = Path(path)
    game_logger.log_game_event(None, 'word_list_download', url=url, path=str(destination))

    try:
        if client is None:
            with httpx.Client(timeout=timeout, follow_redirects=True) as owned_client:
                response = owned_client.get(url)
                response.raise_for_status()
                text = response.text
        else:
            response = client.get(url)
            response.raise_for_status()
            text = response.text
    except httpx.HTTPError as e:
        raise WordListError(f"Could not download word list from {url}: {e}") from e

    words = [word for word in text.split() if is_playable_word(word, word_length)]
    try:
        if destination.parent != Path('.'):
            destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text("\n".join(words), encoding='utf-8')
    except OSError as e:
        raise WordListError(f"Could not write word list {destination}: {e}") from e

    game_logger.log_game_event(None, 'word_list_downloaded', url=url, word_count=len(words))
    return len(words)


def ensure_word_list(config_class, word_length: int = WORD_LENGTH) -> Tuple[str, ...]:
    """Load ``config_class.WORD_LIST_PATH``, downloading it first if it is missing."""
    path = Path(config_class.WORD_LIST_PATH)
    if not path.exists():
        download_word_list(
            config_class.WORD_LIST_URL,
            path,
            timeout=config_class.DOWNLOAD_TIMEOUT_SECONDS,
            word_length=word_length,
        )
    return load_word_list(path, word_length)


def pick_solution(words: Sequence[str], rng: Optional[random.Random] = None) -> Tuple[str, int]:
    """Choose one word uniformly at random; returns (word, zero-based index)."""
    if not words:
        raise WordListError("Cannot pick a solution from an empty word list")
    rng = rng or random.Random()
    index = rng.randrange(len(words))
    return words[index], index
