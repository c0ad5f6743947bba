"""Tests for puszta.utils."""

import logging

import pytest

from puszta.utils import get_logger, is_blank, split_words


class TestSplitWords:
    def test_basic(self) -> None:
        assert split_words("hello world") == ["hello", "world"]

    def test_whitespace_runs(self) -> None:
        assert split_words("  a \n\t b  ") == ["a", "b"]

    @pytest.mark.parametrize("text", ["", " ", "\n\t "])
    def test_no_words(self, text: str) -> None:
        assert split_words(text) == []


class TestIsBlank:
    @pytest.mark.parametrize("text", ["", " ", "\n\t\r "])
    def test_blank(self, text: str) -> None:
        assert is_blank(text)

    @pytest.mark.parametrize("text", ["a", " a ", " x"])
    def test_not_blank(self, text: str) -> None:
        assert not is_blank(text)


class TestGetLogger:
    def test_prefix_added(self) -> None:
        assert get_logger("engine").name == "puszta.engine"

    def test_prefix_not_doubled(self) -> None:
        assert get_logger("puszta.layout.engine").name == "puszta.layout.engine"
        assert get_logger("puszta").name == "puszta"

    def test_returns_stdlib_logger(self) -> None:
        assert isinstance(get_logger("x"), logging.Logger)
