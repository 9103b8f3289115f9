"""
Terminal Wordle - Main Entry Point

Loads the word list, then runs one game in a curses screen.
"""

import argparse
import curses
import sys

from terminal_wordle import create_game
from terminal_wordle.config import config, get_config, get_word_statistics, validate_word_list_integrity
from terminal_wordle.exceptions import TimingError, WordListError
from terminal_wordle.services.word_list import ensure_word_list
from terminal_wordle.ui.terminal import run
from terminal_wordle.utils.game_logger import game_logger


def positive_int(value: str) -> int:
    """argparse type for counts that must be at least 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def build_config(args) -> type:
    """Apply command line overrides on top of the selected configuration."""
    base = get_config(args.env)
    overrides = {}
    if args.word_list:
        overrides['WORD_LIST_PATH'] = args.word_list
    if args.strict:
        overrides['REQUIRE_DICTIONARY_WORD'] = True
    if args.max_guesses is not None:
        overrides['MAX_GUESSES'] = args.max_guesses
    if not overrides:
        return base
    return type('CommandLineConfig', (base,), overrides)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Guess the hidden five letter word.")
    parser.add_argument("--env", choices=sorted(config), default=None,
                        help="Configuration to use (default: $WORDLE_ENV or 'default')")
    parser.add_argument("--word-list", default=None,
                        help="Word list file (downloaded if it does not exist)")
    parser.add_argument("--strict", action="store_true",
                        help="Only accept guesses that are in the word list")
    parser.add_argument("--max-guesses", type=positive_int, default=None,
                        help="Number of attempts per game")
    parser.add_argument("--stats", action="store_true",
                        help="Print word list and log statistics and exit")
    return parser.parse_args(argv)


def print_stats(word_list) -> None:
    stats = get_word_statistics(word_list)
    print(f"Words: {stats['total_words']}")
    print(f"Average vowel count: {stats['avg_vowel_count']}")
    print("Most common letters: " + ", ".join(
        f"{letter} ({count})" for letter, count in stats['most_common_letters']))

    try:
        validate_word_list_integrity(word_list)
        print("Word list check: passed")
    except ValueError as e:
        print(f"Word list check: {e}")

    log_stats = game_logger.get_log_stats()
    if 'error' in log_stats:
        print(f"Log: {log_stats['error']}")
    else:
        print(f"Log: {log_stats['total_entries']} entries "
              f"({log_stats['user_actions']} actions, {log_stats['game_events']} events, "
              f"{log_stats['errors']} errors)")


def main(argv=None) -> int:
    """Main function to load the word list and play one game."""
    args = parse_args(argv)
    try:
        config_class = build_config(args)
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1
    game_logger.configure(config_class.LOG_DIR, config_class.LOG_LEVEL)

    try:
        word_list = ensure_word_list(config_class)
    except WordListError as e:
        game_logger.log_error(e, 'load_word_list')
        print(f"Error loading word list: {e}", file=sys.stderr)
        return 1

    if args.stats:
        print_stats(word_list)
        return 0

    try:
        game_service = create_game(config_class, word_list)
        session = game_service.get_session(game_service.create_new_game())
    except ValueError as e:
        game_logger.log_error(e, 'create_game')
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    try:
        curses.wrapper(run, session)
    except KeyboardInterrupt:
        game_logger.logger.info("Game interrupted (KeyboardInterrupt)")
        return 130
    except TimingError as e:
        print(f"Error measuring game time: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
