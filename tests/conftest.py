"""Shared fixtures for the terminal_wordle test suite."""

import pytest

from terminal_wordle.services.game_service import GameSession


WORDS = ("crane", "trace", "allow", "lolly", "about", "slate", "pious", "mound", "flick", "zesty")


class RecordingSink:
    """Collects the events a session emits to its presentation layer."""

    def __init__(self):
        self.rounds = []
        self.game_over = []

    def on_round(self, result):
        self.rounds.append(result)

    def on_game_over(self, event):
        self.game_over.append(event)


class FakeClock:
    """Clock returning queued timestamps, then repeating the last one."""

    def __init__(self, *times):
        self.times = list(times)

    def __call__(self):
        if len(self.times) > 1:
            return self.times.pop(0)
        return self.times[0]


@pytest.fixture
def words():
    return WORDS


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def make_session(words, sink):
    """Build a session for a known solution with a recording sink attached."""
    def _make(solution="crane", clock=None, **kwargs):
        kwargs.setdefault("dictionary", words)
        kwargs.setdefault("solution_index", words.index(solution) if solution in words else 0)
        return GameSession(
            solution,
            clock=clock or FakeClock(100.0, 112.5),
            sinks=[sink],
            **kwargs
        )
    return _make


def type_word(word, submit=True):
    """Key stream for typing ``word`` and optionally pressing Enter."""
    keys = list(word)
    if submit:
        keys.append("\n")
    return keys
