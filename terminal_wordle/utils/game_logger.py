"""
Game Logger Module

This module provides structured logging for player actions and game events.
Entries are JSON encoded so a day's log file can be parsed line by line.
"""

import logging
import json
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path


class GameLogger:
    """
    Centralized logging system for the terminal game.

    Features:
    - Player action tracking (guesses, refused submissions)
    - Game event logging (start, win, loss, word list downloads)
    - JSON structured logs in a dated file
    - Console output restricted to warnings so the game screen stays clean
    """

    def __init__(self, log_dir: str = "logs", level: str = "INFO"):
        self.log_dir = Path(log_dir)
        self.level = level.upper()
        self.logger = logging.getLogger('terminal_wordle')

    def configure(self, log_dir: Optional[str] = None, level: Optional[str] = None) -> logging.Logger:
        """Point the logger at ``log_dir`` and (re)attach its handlers."""
        if log_dir is not None:
            self.log_dir = Path(log_dir)
        if level is not None:
            self.level = level.upper()
        self._setup_logger()
        return self.logger

    def _setup_logger(self) -> logging.Logger:
        """Setup the game logger with file and console handlers."""
        logger = self.logger
        logger.setLevel(self.level)

        # Prevent duplicate handlers
        if logger.handlers:
            for handler in list(logger.handlers):
                handler.close()
            logger.handlers.clear()

        self.log_dir.mkdir(parents=True, exist_ok=True)
        log_file = self.log_file

        # File handler for detailed logs
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(self.level)

        # Console handler for only important messages (WARNING and above)
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)

        file_formatter = logging.Formatter(
            '%(asctime)s | %(levelname)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        console_formatter = logging.Formatter('%(levelname)s: %(message)s')

        file_handler.setFormatter(file_formatter)
        console_handler.setFormatter(console_formatter)

        logger.addHandler(file_handler)
        logger.addHandler(console_handler)
        logger.propagate = False

        return logger

    @property
    def log_file(self) -> Path:
        return self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"

    def _create_log_entry(self,
                          event_type: str,
                          action: str,
                          details: Dict[str, Any]) -> str:
        """Create a structured log entry."""
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'details': details
        }
        return json.dumps(log_entry, ensure_ascii=False, default=str)

    def log_user_action(self,
                        action: str,
                        game_id: Optional[str] = None,
                        **kwargs):
        """
        Log player actions.

        Args:
            action: Type of action (e.g., 'submit_guess', 'guess_refused')
            game_id: Game identifier if applicable
            **kwargs: Additional details to log
        """
        details = {'game_id': game_id, **kwargs}
        self.logger.info(self._create_log_entry('USER_ACTION', action, details))

    def log_game_event(self,
                       game_id: Optional[str],
                       event: str,
                       **kwargs):
        """
        Log game-specific events (start, wins, losses, word list loading).

        Args:
            game_id: Game identifier, None for process-level events
            event: Type of game event (e.g., 'game_won', 'game_lost')
            **kwargs: Additional game details
        """
        details = {'game_id': game_id, **kwargs}
        self.logger.info(self._create_log_entry('GAME_EVENT', event, details))

    def log_error(self,
                  error: Exception,
                  action: str,
                  game_id: Optional[str] = None):
        """
        Log errors with full context.

        Args:
            error: Exception that occurred
            action: Action that was being performed
            game_id: Game identifier if applicable
        """
        details = {
            'game_id': game_id,
            'error_type': type(error).__name__,
            'error_message': str(error),
            'action': action
        }
        self.logger.error(self._create_log_entry('ERROR', action, details))

    def get_log_stats(self) -> Dict[str, Any]:
        """Count today's entries per event type."""
        log_file = self.log_file
        if not log_file.exists():
            return {'error': 'No log file found for today'}

        stats = {
            'log_file': str(log_file),
            'total_entries': 0,
            'user_actions': 0,
            'game_events': 0,
            'errors': 0
        }

        counters = {
            'USER_ACTION': 'user_actions',
            'GAME_EVENT': 'game_events',
            'ERROR': 'errors'
        }

        with open(log_file, 'r', encoding='utf-8') as f:
            for line in f:
                if not line.strip():
                    continue
                stats['total_entries'] += 1
                event_type = self._parse_event_type(line)
                if event_type in counters:
                    stats[counters[event_type]] += 1

        return stats

    @staticmethod
    def _parse_event_type(line: str) -> Optional[str]:
        """Event type of a structured entry, None for plain messages."""
        message = line.rstrip("\n").split(" | ", 2)[-1]
        try:
            entry = json.loads(message)
        except ValueError:
            return None
        if not isinstance(entry, dict):
            return None
        return entry.get('event_type')


# Global logger instance, handlers are attached by configure()
game_logger = GameLogger()
