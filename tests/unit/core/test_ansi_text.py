"""Tests for color helpers and ANSI-aware text layout."""

from __future__ import annotations

import pytest

from termchart.core.ansi import COLORS, bg, bg_code, fg, fg_code
from termchart.core.text import (
    format_number,
    pad_end,
    pad_mid,
    pad_start,
    round_half_up,
    strip_ansi,
    visible_length,
)
from termchart.errors import ErrorCategory, InvalidColorError


class TestColors:
    def test_palette_codes(self) -> None:
        for index, color in enumerate(COLORS):
            assert bg_code(color) == 40 + index
            assert fg_code(color) == 30 + index

    def test_bg_block(self) -> None:
        assert bg("red", 3) == "\x1b[41m   \x1b[0m"
        assert bg() == "\x1b[46m \x1b[0m"

    def test_fg_text(self) -> None:
        assert fg("green", "ok") == "\x1b[32mok\x1b[0m"

    def test_invalid_background(self) -> None:
        with pytest.raises(InvalidColorError) as info:
            bg("purple")
        assert info.value.color == "purple"
        assert info.value.category == ErrorCategory.COLOR
        assert "background" in str(info.value)

    def test_invalid_foreground(self) -> None:
        with pytest.raises(InvalidColorError):
            fg(3, "x")  # type: ignore[arg-type]


class TestVisibleLength:
    def test_plain(self) -> None:
        assert visible_length("abc") == 3

    def test_ignores_color(self) -> None:
        assert visible_length(fg("red", "abc")) == 3
        assert visible_length(bg("blue", 4)) == 4
        assert strip_ansi(fg("red", "abc") + "d") == "abcd"


class TestPadding:
    def test_pad_mid(self) -> None:
        assert pad_mid("5", 3) == " 5 "
        assert pad_mid("11", 3) == " 11"
        assert pad_mid("ab", 5) == "  ab "
        assert pad_mid("A", 11) == "     A     "

    def test_pad_mid_too_wide(self) -> None:
        assert pad_mid("abcd", 3) == "abcd"

    def test_pad_mid_colored(self) -> None:
        assert visible_length(pad_mid(fg("red", "x"), 3)) == 3

    def test_pad_start_and_end(self) -> None:
        assert pad_start("ab", 4) == "  ab"
        assert pad_end("ab", 4) == "ab  "
        assert pad_start("abcdef", 4) == "abcdef"
        assert visible_length(pad_end(fg("red", "x"), 3)) == 3


class TestNumbers:
    def test_round_half_up(self) -> None:
        assert round_half_up(2.5) == 3
        assert round_half_up(0.5) == 1
        assert round_half_up(-2.5) == -2
        assert round_half_up(1.49) == 1

    def test_format_number(self) -> None:
        assert format_number(5) == "5"
        assert format_number(5.0) == "5"
        assert format_number(0.5) == "0.5"
        assert format_number(-3) == "-3"
