"""Layout helpers for glyph strings that may carry ANSI color codes."""

from __future__ import annotations

import math
import re

from termchart.core.ansi import PAD

# SGR sequences only; glyphs never carry cursor movement.
_SGR_RE = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    """Remove SGR color sequences from *text*."""
    return _SGR_RE.sub("", text)


def visible_length(text: str) -> int:
    """Length of *text* as drawn on screen, ignoring color codes."""
    return len(strip_ansi(text))


def round_half_up(x: float) -> int:
    """Round to the nearest integer, halves going up (``2.5 -> 3``, ``-2.5 -> -2``)."""
    return math.floor(x + 0.5)


def pad_start(text: str, width: int) -> str:
    """Right-align *text* within *width* visible columns."""
    return PAD * max(0, width - visible_length(text)) + text


def pad_end(text: str, width: int) -> str:
    """Left-align *text* within *width* visible columns."""
    return text + PAD * max(0, width - visible_length(text))


def pad_mid(text: str, width: int) -> str:
    """Center *text* within *width* columns.

    Text wider than *width* is returned unchanged. When the slack is odd the
    extra column goes on the left.
    """
    length = visible_length(text)
    if length > width:
        return text
    mid = round_half_up((width - length) / 2)
    right = mid - 1 if mid * 2 + length > width else mid
    return f"{PAD * mid}{text}{PAD * right}"


def format_number(value: float) -> str:
    """Format a datum value for display: integral values drop the ``.0``."""
    if isinstance(value, bool):
        value = int(value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
