"""
Game Service

Contains the round-by-round session state machine and the service that
creates and owns independent game sessions.
"""

import random
import time
import uuid
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple, Union

from ..config.app_config import Config
from ..config.game_settings import MAX_GUESSES, WORD_LENGTH
from ..exceptions import DuplicateGuessError, GameOverError, InvalidLengthError, TimingError
from ..models.game import (
    GameOverEvent, GameState, Guess, RoundResult, ScoredGuess, SessionOutcome,
)
from ..utils.game_logger import game_logger
from .keyboard import KeyboardStatus
from .line_editor import KeyEvent, KeyKind, LineEditor
from .scoring import score_guess
from .word_list import pick_solution

KeySource = Callable[[], Union[str, KeyEvent]]


class GameSession:
    """
    A single game: one hidden solution and up to ``max_guesses`` rounds.

    The session starts ACTIVE on attempt 1. Each accepted guess is scored,
    appended to the history and folded into the keyboard status; the session
    then becomes WON (guess equals the solution), LOST (last attempt used) or
    stays ACTIVE. WON and LOST are terminal.

    Presentation sinks are notified through ``on_round(RoundResult)`` after
    every round and ``on_game_over(GameOverEvent)`` once at the end.
    """

    def __init__(self,
                 solution: str,
                 solution_index: int = 0,
                 dictionary: Sequence[str] = (),
                 game_id: Optional[str] = None,
                 max_guesses: int = MAX_GUESSES,
                 require_dictionary_word: bool = False,
                 clock: Callable[[], float] = time.time,
                 sinks: Iterable = ()):
        if len(solution) != WORD_LENGTH:
            raise InvalidLengthError(f"Solution '{solution}' is not {WORD_LENGTH} letters long")
        if max_guesses < 1:
            raise ValueError(f"max_guesses must be at least 1, got {max_guesses}")

        self.game_id = game_id or str(uuid.uuid4())
        self.solution = solution
        self.solution_index = solution_index
        self.word_count = len(dictionary)
        self.max_guesses = max_guesses
        self.editor = LineEditor(dictionary, require_dictionary_word=require_dictionary_word)
        self.outcome = SessionOutcome.ACTIVE
        self.game_over_event: Optional[GameOverEvent] = None

        self._history: List[ScoredGuess] = []
        self._keyboard = KeyboardStatus()
        self._clock = clock
        self._sinks = list(sinks)
        self.started_at = clock()

        game_logger.log_game_event(
            self.game_id, 'game_created',
            max_guesses=max_guesses,
            require_dictionary_word=require_dictionary_word,
            word_count=self.word_count
        )

    @property
    def history(self) -> Tuple[ScoredGuess, ...]:
        return tuple(self._history)

    @property
    def guessed_words(self) -> List[str]:
        return [scored.word for scored in self._history]

    @property
    def keyboard_status(self) -> KeyboardStatus:
        return self._keyboard

    @property
    def attempt_number(self) -> int:
        """The round being played, or the last round played once the game is over."""
        if self.outcome.is_terminal:
            return len(self._history)
        return len(self._history) + 1

    @property
    def is_over(self) -> bool:
        return self.outcome.is_terminal

    def add_sink(self, sink) -> None:
        self._sinks.append(sink)

    def handle_key(self, key: Union[str, KeyEvent]) -> Optional[RoundResult]:
        """Feed one key to the line editor; score the guess if it completes one."""
        if self.is_over:
            raise GameOverError("Game is already over")

        event = key if isinstance(key, KeyEvent) else KeyEvent.from_char(key)
        guess = self.editor.handle(event, self.guessed_words)
        if guess is None:
            if event.kind is KeyKind.SUBMIT:
                game_logger.log_user_action(
                    'guess_refused', self.game_id,
                    attempt=self.attempt_number,
                    reason=self.editor.last_refusal
                )
            return None
        return self.submit_guess(guess)

    def play_round(self, read_key: KeySource) -> RoundResult:
        """Pull keys from ``read_key`` until one guess has been scored."""
        while True:
            result = self.handle_key(read_key())
            if result is not None:
                return result

    def play(self, read_key: KeySource) -> GameOverEvent:
        """Play rounds until the game is won or lost."""
        while not self.is_over:
            self.play_round(read_key)
        return self.game_over_event

    def submit_guess(self, guess: Union[Guess, str]) -> RoundResult:
        """
        Score a validated guess and advance the session.

        Raises:
            GameOverError: If the session is already WON or LOST
            DuplicateGuessError: If the word was already guessed this session
            TimingError: If the clock ran backwards when the game ended
        """
        if self.is_over:
            raise GameOverError("Game is already over")
        if not isinstance(guess, Guess):
            guess = Guess(guess)
        if guess.word in self.guessed_words:
            raise DuplicateGuessError(f"'{guess.word}' was already guessed")

        attempt = len(self._history) + 1
        scored = score_guess(guess, self.solution)
        self._history.append(scored)
        self._keyboard = self._keyboard.update(scored)

        if guess.word == self.solution:
            self.outcome = SessionOutcome.WON
        elif attempt >= self.max_guesses:
            self.outcome = SessionOutcome.LOST

        game_logger.log_user_action(
            'submit_guess', self.game_id,
            attempt=attempt,
            guess=guess.word,
            verdicts=[verdict.value for verdict in scored.verdicts],
            outcome=self.outcome.value
        )

        result = RoundResult(
            game_id=self.game_id,
            attempt_number=attempt,
            scored_guess=scored,
            keyboard_status=dict(self._keyboard.snapshot()),
            outcome=self.outcome
        )
        for sink in self._sinks:
            sink.on_round(result)

        if self.is_over:
            event = self._finish()
            for sink in self._sinks:
                sink.on_game_over(event)

        return result

    def _finish(self) -> GameOverEvent:
        finished_at = self._clock()
        elapsed = finished_at - self.started_at
        if elapsed < 0:
            error = TimingError(
                f"Clock went backwards: game ended {-elapsed:.3f}s before it started"
            )
            game_logger.log_error(error, 'finish_game', self.game_id)
            raise error

        self.game_over_event = GameOverEvent(
            game_id=self.game_id,
            outcome=self.outcome,
            history=self.history,
            elapsed_seconds=elapsed,
            solution=self.solution,
            solution_index=self.solution_index,
            word_count=self.word_count
        )
        game_logger.log_game_event(
            self.game_id,
            'game_won' if self.outcome is SessionOutcome.WON else 'game_lost',
            attempts=len(self._history),
            elapsed_seconds=round(elapsed, 2),
            solution=self.solution,
            solution_index=self.solution_index
        )
        return self.game_over_event

    def get_game_state(self) -> GameState:
        """Snapshot of the session; the answer is only revealed once the game is over."""
        return GameState(
            game_id=self.game_id,
            current_round=len(self._history),
            max_rounds=self.max_guesses,
            game_over=self.is_over,
            won=self.outcome is SessionOutcome.WON,
            guesses=self.guessed_words,
            guess_results=[
                [(letter, status.value) for letter, status in scored.pairs()]
                for scored in self._history
            ],
            letter_status=self._keyboard.as_values(),
            require_dictionary_word=self.editor.require_dictionary_word,
            answer=self.solution if self.is_over else None,
            pending_input=self.editor.buffer
        )


class GameService:
    """
    Creates game sessions over one loaded word list.

    Every session owns its own solution, history and keyboard status;
    sessions are kept by game id until deleted.
    """

    def __init__(self,
                 word_list: Sequence[str],
                 config_class=Config,
                 clock: Callable[[], float] = time.time,
                 rng: Optional[random.Random] = None):
        self.word_list = tuple(word_list)
        self.config = config_class
        self.games: Dict[str, GameSession] = {}
        self._clock = clock
        self._rng = rng or random.Random()

    def create_new_game(self, solution: Optional[str] = None, sinks: Iterable = ()) -> str:
        """
        Creates a new game session with a randomly selected word.

        Args:
            solution: Force the hidden word (must be in the word list)
            sinks: Presentation sinks notified of rounds and the final result

        Returns:
            str: Unique game ID for this session
        """
        if solution is None:
            solution, index = pick_solution(self.word_list, self._rng)
        else:
            if solution not in self.word_list:
                raise ValueError(f"solution {solution!r} is not in the word list")
            index = self.word_list.index(solution)

        session = GameSession(
            solution,
            solution_index=index,
            dictionary=self.word_list,
            max_guesses=self.config.MAX_GUESSES,
            require_dictionary_word=self.config.REQUIRE_DICTIONARY_WORD,
            clock=self._clock,
            sinks=sinks
        )
        self.games[session.game_id] = session
        return session.game_id

    def get_session(self, game_id: str) -> Optional[GameSession]:
        return self.games.get(game_id)

    def get_game_state(self, game_id: str) -> Optional[GameState]:
        session = self.games.get(game_id)
        if session is None:
            return None
        return session.get_game_state()

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Returns:
            bool: True if game was deleted, False if not found
        """
        if game_id in self.games:
            del self.games[game_id]
            return True
        return False
