"""Terminal size providers used to fill size-dependent option defaults."""

from __future__ import annotations

import math
import shutil
from collections.abc import Callable

TerminalSize = Callable[[], tuple[int, int]]

FALLBACK_SIZE = (80, 24)


def default_terminal_size() -> tuple[int, int]:
    """Current ``(columns, lines)``, or 80x24 when there is no terminal."""
    size = shutil.get_terminal_size(FALLBACK_SIZE)
    return size.columns, size.lines


def fixed_terminal_size(width: int, height: int) -> TerminalSize:
    """A provider that always reports ``(width, height)``."""

    def _size() -> tuple[int, int]:
        return width, height

    return _size


def share(total: int, fraction: float, minimum: int) -> int:
    """``floor(total * fraction)``, but never below *minimum*."""
    return max(minimum, math.floor(total * fraction))
