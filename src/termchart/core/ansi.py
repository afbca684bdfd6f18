"""ANSI escape sequences: SGR colors and relative cursor movement.

Colors come from the fixed 8-entry terminal palette. Background codes are
``40 + index`` and foreground codes are ten lower.

Cursor helpers never emit a zero-length move, since terminals read
``CSI 0 C`` as a move of one column. A negative count moves the other way.
"""

from __future__ import annotations

from termchart.errors import InvalidColorError

ESC = "\x1b"
CSI = f"{ESC}["
RESET = f"{CSI}0m"
PAD = " "

COLORS: tuple[str, ...] = (
    "black",
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "white",
)


def bg_code(color: str) -> int:
    """Return the SGR background code for *color*."""
    if not isinstance(color, str) or color not in COLORS:
        raise InvalidColorError(color, role="background color")
    return 40 + COLORS.index(color)


def fg_code(color: str) -> int:
    """Return the SGR foreground code for *color*."""
    if not isinstance(color, str) or color not in COLORS:
        raise InvalidColorError(color, role="foreground color")
    return bg_code(color) - 10


def bg(color: str = "cyan", length: int = 1) -> str:
    """A block of *length* spaces painted with a background color."""
    return f"{CSI}{bg_code(color)}m{PAD * length}{RESET}"


def fg(color: str, text: str) -> str:
    """Wrap *text* in a foreground color."""
    return f"{CSI}{fg_code(color)}m{text}{RESET}"


def _move(step: int, forward: str, backward: str) -> str:
    if step == 0:
        return ""
    if step < 0:
        return f"{CSI}{-step}{backward}"
    return f"{CSI}{step}{forward}"


def cursor_up(step: int = 1) -> str:
    return _move(step, "A", "B")


def cursor_down(step: int = 1) -> str:
    return _move(step, "B", "A")


def cursor_forward(step: int = 1) -> str:
    return _move(step, "C", "D")


def cursor_back(step: int = 1) -> str:
    return _move(step, "D", "C")
