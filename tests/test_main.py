"""Tests for the command line entry point."""

import argparse
from unittest.mock import patch

import pytest

import main
from terminal_wordle.config import app_config
from terminal_wordle.exceptions import WordListError


@pytest.fixture(autouse=True)
def no_wordle_env(monkeypatch):
    monkeypatch.delenv("WORDLE_ENV", raising=False)


class TestPositiveInt:
    def test_accepts_positive(self):
        assert main.positive_int("4") == 4

    @pytest.mark.parametrize("value", ["0", "-1", "six"])
    def test_rejects_others(self, value):
        with pytest.raises(argparse.ArgumentTypeError):
            main.positive_int(value)

    def test_zero_max_guesses_rejected_by_parser(self, capsys):
        with pytest.raises(SystemExit):
            main.parse_args(["--max-guesses", "0"])
        assert "must be at least 1" in capsys.readouterr().err


class TestBuildConfig:
    def test_defaults_use_default_config(self):
        args = main.parse_args([])
        assert main.build_config(args) is app_config.config['default']

    def test_env_option_selects_config(self):
        args = main.parse_args(["--env", "development"])
        assert main.build_config(args) is app_config.DevelopmentConfig

    def test_wordle_env_variable_selects_config(self, monkeypatch):
        monkeypatch.setenv("WORDLE_ENV", "testing")
        assert main.build_config(main.parse_args([])) is app_config.TestingConfig

    def test_overrides(self):
        args = main.parse_args(["--env", "testing", "--word-list", "mywords",
                                "--strict", "--max-guesses", "4"])
        config_class = main.build_config(args)
        assert config_class.WORD_LIST_PATH == "mywords"
        assert config_class.REQUIRE_DICTIONARY_WORD is True
        assert config_class.MAX_GUESSES == 4
        assert issubclass(config_class, app_config.TestingConfig)


class TestMain:
    def test_word_list_failure_exits_non_zero(self, capsys):
        with patch.object(main.game_logger, "configure"), \
                patch("main.ensure_word_list", side_effect=WordListError("unreachable")), \
                patch("main.curses.wrapper") as wrapper:
            assert main.main([]) == 1
        wrapper.assert_not_called()
        assert "unreachable" in capsys.readouterr().err

    def test_unknown_wordle_env_exits_non_zero(self, monkeypatch, capsys):
        monkeypatch.setenv("WORDLE_ENV", "staging")
        with patch.object(main.game_logger, "configure"), \
                patch("main.ensure_word_list") as ensure:
            assert main.main([]) == 1
        ensure.assert_not_called()
        assert "staging" in capsys.readouterr().err

    def test_non_positive_configured_max_guesses_exits_non_zero(self, capsys):
        class NoGuessesConfig(app_config.TestingConfig):
            MAX_GUESSES = 0

        with patch.object(main.game_logger, "configure"), \
                patch("main.build_config", return_value=NoGuessesConfig), \
                patch("main.ensure_word_list", return_value=("crane", "slate")), \
                patch("main.curses.wrapper") as wrapper:
            assert main.main([]) == 1
        wrapper.assert_not_called()
        assert "max_guesses" in capsys.readouterr().err

    def test_stats_prints_and_skips_game(self, capsys):
        with patch.object(main.game_logger, "configure"), \
                patch.object(main.game_logger, "get_log_stats",
                             return_value={'total_entries': 3, 'user_actions': 1,
                                           'game_events': 1, 'errors': 1}), \
                patch("main.ensure_word_list", return_value=("crane", "slate")), \
                patch("main.curses.wrapper") as wrapper:
            assert main.main(["--stats"]) == 0
        wrapper.assert_not_called()
        out = capsys.readouterr().out
        assert "Words: 2" in out
        assert "Word list check: passed" in out
        assert "Log: 3 entries (1 actions, 1 events, 1 errors)" in out

    def test_stats_reports_failed_word_list_check(self, capsys):
        with patch.object(main.game_logger, "configure"), \
                patch.object(main.game_logger, "get_log_stats",
                             return_value={'error': 'No log file found for today'}), \
                patch("main.ensure_word_list", return_value=("crane", "Slate")), \
                patch("main.curses.wrapper"):
            assert main.main(["--stats"]) == 0
        out = capsys.readouterr().out
        assert "Word list check: Word at index 1 'Slate' is not in lowercase format" in out
        assert "Log: No log file found for today" in out

    def test_runs_one_game(self):
        with patch.object(main.game_logger, "configure"), \
                patch("main.ensure_word_list", return_value=("crane", "slate")), \
                patch("main.curses.wrapper") as wrapper:
            assert main.main([]) == 0
        wrapper.assert_called_once()
        run, session = wrapper.call_args.args
        assert run is main.run
        assert session.solution in ("crane", "slate")
