"""
Terminal View

Curses presentation of a game session: guess rows coloured by verdict,
an alphabet row coloured by keyboard status, a diagnostic field showing
the last rejected key, and the final result text.
"""

import curses
from typing import List, Tuple, Union

from ..config.game_settings import MAX_DEBUG_LENGTH, WIN_TEXT_LINES, WORD_LENGTH
from ..models.game import GameOverEvent, LetterStatus, RoundResult
from ..services.game_service import GameSession
from ..services.line_editor import KeyEvent
from ..utils.helpers import format_elapsed, ordinal, pluralize_guesses

# Color pair indices
COLOR_HIT = 1
COLOR_PRESENT = 2
COLOR_MISS = 3

STATUS_COLORS = {
    LetterStatus.HIT: COLOR_HIT,
    LetterStatus.PRESENT: COLOR_PRESENT,
    LetterStatus.MISS: COLOR_MISS,
    LetterStatus.UNUSED: 0,
}

# (text, highlighted) segments; non-highlighted text is drawn dim
Segment = Tuple[str, bool]


def init_colors():
    """Initialize curses color pairs."""
    curses.start_color()
    curses.use_default_colors()
    curses.init_pair(COLOR_HIT, -1, curses.COLOR_GREEN)
    curses.init_pair(COLOR_PRESENT, -1, curses.COLOR_YELLOW)
    curses.init_pair(COLOR_MISS, -1, curses.COLOR_BLACK)


def translate_key(key: Union[str, int]) -> KeyEvent:
    """Map a ``get_wch`` result to a line editor key event."""
    if isinstance(key, str):
        return KeyEvent.from_char(key)
    if key == curses.KEY_ENTER:
        return KeyEvent.submit()
    if key == curses.KEY_BACKSPACE:
        return KeyEvent.delete()
    name = curses.keyname(key).decode('ascii', 'replace')
    return KeyEvent.insert(name)


def game_over_lines(event: GameOverEvent) -> List[List[Segment]]:
    """Build the final result text as lines of (text, highlighted) segments."""
    if event.won:
        lines = [
            [("You took ", False), (str(event.guesses_taken), True),
             (f" {pluralize_guesses(event.guesses_taken)}", False)],
            [("to guess the word `", False)],
        ]
    else:
        lines = [
            [("You ran out of guesses", False)],
            [("trying to guess the word `", False)],
        ]

    lines[1] += [
        (event.solution, True),
        ("` (the ", False),
        (ordinal(event.solution_index + 1), True),
        (" word in the word list of ", False),
        (str(event.word_count), True),
        (" words)", False),
    ]
    lines.append([("in ~", False), (format_elapsed(event.elapsed_seconds), True), (" seconds!", False)])
    lines.append([])
    lines.append([("Press any key to exit!", True)])
    return lines


def safe_addstr(win, y, x, text, attr=0):
    """addstr that ignores curses errors at screen edges."""
    try:
        win.addstr(y, x, text, attr)
    except curses.error:
        pass


class TerminalView:
    """Draws a session on a curses window and supplies its key events."""

    def __init__(self, window, session: GameSession):
        self.window = window
        self.session = session
        session.add_sink(self)

    def _prompt(self, attempt: int) -> str:
        return f"{attempt} "

    def _draw_prompt(self, attempt: int) -> int:
        prompt = self._prompt(attempt)
        safe_addstr(self.window, attempt - 1, 0, prompt, curses.A_DIM)
        return len(prompt)

    def _draw_alphabet(self, statuses) -> None:
        row = self.session.max_guesses + 2
        for index, letter in enumerate(sorted(statuses)):
            color = STATUS_COLORS[statuses[letter]]
            safe_addstr(self.window, row, index, letter, curses.color_pair(color))

    def _draw_debug(self) -> None:
        max_y, max_x = self.window.getmaxyx()
        text = (self.session.editor.last_rejected or "")[-(MAX_DEBUG_LENGTH - 1):]
        safe_addstr(self.window, max_y - 1, max_x - MAX_DEBUG_LENGTH, " " * (MAX_DEBUG_LENGTH - 1))
        safe_addstr(self.window, max_y - 1, max_x - len(text) - 1, text)

    def render_input(self) -> None:
        """Draw the round being typed, with the cursor after the last letter."""
        attempt = self.session.attempt_number
        x = self._draw_prompt(attempt)
        buffer = self.session.editor.buffer
        safe_addstr(self.window, attempt - 1, x, buffer.ljust(WORD_LENGTH))
        self._draw_alphabet(self.session.keyboard_status.snapshot())
        self._draw_debug()
        try:
            self.window.move(attempt - 1, x + len(buffer))
        except curses.error:
            pass
        self.window.refresh()

    def read_key(self) -> KeyEvent:
        self.render_input()
        return translate_key(self.window.get_wch())

    def on_round(self, result: RoundResult) -> None:
        attempt = result.attempt_number
        x = self._draw_prompt(attempt)
        for offset, (letter, verdict) in enumerate(result.scored_guess.pairs()):
            safe_addstr(self.window, attempt - 1, x + offset, letter,
                        curses.color_pair(STATUS_COLORS[verdict]))
        self._draw_alphabet(result.keyboard_status)
        self.window.refresh()

    def on_game_over(self, event: GameOverEvent) -> None:
        max_y, _ = self.window.getmaxyx()
        for row, segments in enumerate(game_over_lines(event), start=max_y - WIN_TEXT_LINES):
            x = 0
            for text, highlighted in segments:
                safe_addstr(self.window, row, x, text, 0 if highlighted else curses.A_DIM)
                x += len(text)
        self.window.refresh()

    def wait_for_exit(self) -> None:
        self.window.get_wch()


def run(window, session: GameSession) -> GameOverEvent:
    """Play ``session`` on ``window``; intended for ``curses.wrapper``."""
    window.keypad(True)
    curses.noecho()
    init_colors()
    try:
        curses.curs_set(1)
    except curses.error:
        pass

    view = TerminalView(window, session)
    event = session.play(view.read_key)
    view.wait_for_exit()
    return event
