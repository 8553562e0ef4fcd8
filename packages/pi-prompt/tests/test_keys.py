"""Tests for key parsing and matching."""

from __future__ import annotations

import pytest

from pi.prompt.keys import Key, matches_key, parse_key


class TestParseKey:
    """parse_key maps raw input to key identifiers."""

    @pytest.mark.parametrize(
        "data,expected",
        [
            ("\x1b[A", "up"),
            ("\x1b[B", "down"),
            ("\x1b[C", "right"),
            ("\x1b[D", "left"),
            ("\x1bOA", "up"),
            ("\x1bOB", "down"),
            ("\x1b[3~", "delete"),
            ("\r", "enter"),
            ("\n", "enter"),
            ("\x1b", "escape"),
            ("\t", "tab"),
            (" ", "space"),
            ("\x7f", "backspace"),
            ("\x03", "ctrl+c"),
            ("\x1bx", "alt+x"),
            ("w", "w"),
            ("W", "W"),
            ("é", "é"),
        ],
    )
    def test_parse(self, data: str, expected: str) -> None:
        assert parse_key(data) == expected

    def test_empty_input(self) -> None:
        assert parse_key("") is None

    def test_unknown_sequence(self) -> None:
        assert parse_key("\x1b[99~") is None


class TestMatchesKey:
    """matches_key compares raw input with a key id."""

    def test_arrow(self) -> None:
        assert matches_key("\x1b[A", Key.up)
        assert not matches_key("\x1b[B", Key.up)

    def test_letters_match_case_insensitively(self) -> None:
        assert matches_key("w", "w")
        assert matches_key("W", "w")
        assert matches_key("d", "D")

    def test_ctrl_combinator(self) -> None:
        assert matches_key("\x03", Key.ctrl("c"))

    def test_no_match_for_unparseable_input(self) -> None:
        assert not matches_key("\x1b[99~", "up")

    def test_enter_variants(self) -> None:
        assert matches_key("\r", Key.enter)
        assert matches_key("\n", Key.enter)
