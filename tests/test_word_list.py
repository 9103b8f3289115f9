"""Tests for terminal_wordle.services.word_list."""

import random
from unittest.mock import MagicMock, patch

import httpx
import pytest

from terminal_wordle.exceptions import WordListError
from terminal_wordle.services.word_list import (
    download_word_list, ensure_word_list, is_playable_word, load_word_list, parse_word_list,
    pick_solution,
)

URL = "https://words.example.com/words.txt"


def mock_client(text="", status_code=200):
    response = httpx.Response(status_code, text=text, request=httpx.Request("GET", URL))
    client = MagicMock()
    client.get.return_value = response
    return client


class TestParseWordList:
    def test_lowercases_and_filters_by_length(self):
        text = "Crane  SLATE\nab toolong\n\ttrace\n"
        assert parse_word_list(text) == ["crane", "slate", "trace"]

    def test_order_preserved(self):
        assert parse_word_list("zesty about crane") == ["zesty", "about", "crane"]

    def test_other_word_length(self):
        assert parse_word_list("cat dog crane", word_length=3) == ["cat", "dog"]

    def test_empty_text(self):
        assert parse_word_list("") == []


class TestLoadWordList:
    def test_reads_file(self, tmp_path):
        path = tmp_path / "words"
        path.write_text("crane\nslate\nab\n", encoding="utf-8")
        assert load_word_list(path) == ("crane", "slate")

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(WordListError):
            load_word_list(tmp_path / "missing")

    def test_no_usable_words_raises(self, tmp_path):
        path = tmp_path / "words"
        path.write_text("a bb ccc toolong\n", encoding="utf-8")
        with pytest.raises(WordListError, match="No 5-letter words"):
            load_word_list(path)


class TestDownloadWordList:
    def test_writes_filtered_words(self, tmp_path):
        path = tmp_path / "words"
        count = download_word_list(URL, path, client=mock_client("apple banana\ncrane ab\n"))
        assert count == 2
        assert path.read_text(encoding="utf-8") == "apple\ncrane"

    def test_creates_parent_directory(self, tmp_path):
        path = tmp_path / "data" / "words"
        download_word_list(URL, path, client=mock_client("crane"))
        assert path.exists()

    def test_connection_error_raises(self, tmp_path):
        client = MagicMock()
        client.get.side_effect = httpx.ConnectError("connection refused")
        with pytest.raises(WordListError, match="Could not download"):
            download_word_list(URL, tmp_path / "words", client=client)
        assert not (tmp_path / "words").exists()

    def test_http_error_status_raises(self, tmp_path):
        with pytest.raises(WordListError):
            download_word_list(URL, tmp_path / "words", client=mock_client("Not Found", 404))

    def test_owned_client_used_when_none_given(self, tmp_path):
        with patch("terminal_wordle.services.word_list.httpx.Client") as client_class:
            client_class.return_value.__enter__.return_value = mock_client("crane")
            download_word_list(URL, tmp_path / "words", timeout=5)
        client_class.assert_called_once_with(timeout=5, follow_redirects=True)


class TestEnsureWordList:
    def _config(self, path):
        class WordListConfig:
            WORD_LIST_PATH = str(path)
            WORD_LIST_URL = URL
            DOWNLOAD_TIMEOUT_SECONDS = 2.0
        return WordListConfig

    def test_existing_file_is_not_downloaded(self, tmp_path):
        path = tmp_path / "words"
        path.write_text("crane slate", encoding="utf-8")
        with patch("terminal_wordle.services.word_list.download_word_list") as download:
            assert ensure_word_list(self._config(path)) == ("crane", "slate")
        download.assert_not_called()

    def test_missing_file_is_downloaded_then_loaded(self, tmp_path):
        path = tmp_path / "words"

        def fake_download(url, dest, timeout, word_length):
            dest.write_text("trace", encoding="utf-8")
            return 1

        with patch("terminal_wordle.services.word_list.download_word_list",
                   side_effect=fake_download) as download:
            assert ensure_word_list(self._config(path)) == ("trace",)
        download.assert_called_once()
        assert download.call_args.args[0] == URL

    def test_download_failure_propagates(self, tmp_path):
        with patch("terminal_wordle.services.word_list.download_word_list",
                   side_effect=WordListError("offline")):
            with pytest.raises(WordListError):
                ensure_word_list(self._config(tmp_path / "words"))


class TestPickSolution:
    def test_index_matches_word(self):
        words = ("crane", "slate", "trace")
        for seed in range(10):
            word, index = pick_solution(words, random.Random(seed))
            assert words[index] == word

    def test_all_words_reachable(self):
        words = ("crane", "slate", "trace")
        rng = random.Random(3)
        seen = {pick_solution(words, rng)[1] for _ in range(200)}
        assert seen == {0, 1, 2}

    def test_empty_word_list_raises(self):
        with pytest.raises(WordListError):
            pick_solution(())


class TestPlayableWords:
    def test_accented_words_dropped(self):
        assert parse_word_list("éclat crane naïve") == ["crane"]

    def test_words_with_digits_or_punctuation_dropped(self):
        assert parse_word_list("cr4ne it's! o'neil slate") == ["slate"]

    def test_download_drops_unplayable_words(self, tmp_path):
        path = tmp_path / "words"
        download_word_list(URL, path, client=mock_client("éclat crane ab-cd slate"))
        assert path.read_text(encoding="utf-8") == "crane\nslate"

    def test_loaded_solution_is_always_typeable(self, tmp_path):
        path = tmp_path / "words"
        path.write_text("éclat\ncafé!\ncrane\n", encoding="utf-8")
        words = load_word_list(path)
        assert words == ("crane",)
        assert pick_solution(words, random.Random(0)) == ("crane", 0)

    def test_is_playable_word(self):
        assert is_playable_word("crane")
        assert not is_playable_word("éclat")
        assert not is_playable_word("cranes")
