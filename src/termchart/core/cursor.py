"""Cursor-relative compositing of glyph blocks onto a character stream.

A chart is a single string. Markers that do not fall on the current line are
written by moving the cursor with CSI sequences, drawing, and moving back, so
that callers can place any number of markers in any order and keep writing
from where they started.

``Canvas`` replays such a stream into a plain 2-D grid. It backs
``flatten()``, which turns cursor-relative output into ordinary lines for
files, widgets and tests.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import StrEnum

from termchart.core.ansi import RESET, cursor_back, cursor_down, cursor_forward, cursor_up
from termchart.core.text import visible_length

_CSI_RE = re.compile(r"\x1b\[([0-9;]*)([A-Za-z])")


class BlockKind(StrEnum):
    """What a placed block represents."""

    COORDINATE = "coordinate"  # background fill, writing resumes below it
    DATA = "data"  # plotted marker, cursor returns to its starting point


def place_block(
    width: int,
    height: int,
    glyph: str,
    offset_x: int = 0,
    offset_y: int = 0,
    kind: BlockKind = BlockKind.COORDINATE,
) -> str:
    """Draw a ``width`` x ``height`` block of *glyph* at an offset.

    The block's top-left cell sits *offset_x* columns right of and
    *offset_y* rows above the current cursor position.

    Coordinate blocks are laid out with line feeds and end on a fresh line
    below the block. Data blocks move with CSI sequences only and return the
    cursor to exactly where it was before the call.
    """
    row_length = width * visible_length(glyph)
    multi_cell = width > 1 or height > 1
    parts = [cursor_forward(offset_x), cursor_up(offset_y)]

    for row in range(height):
        last = row == height - 1
        parts.append(glyph * width)
        if kind == BlockKind.DATA:
            if not last:
                parts.append(cursor_back(row_length))
                parts.append(cursor_down(1))
        elif multi_cell:
            parts.append("\n")
            if not last:
                parts.append(cursor_forward(offset_x))

    if kind == BlockKind.DATA:
        drawn_rows = max(height - 1, 0)
        drawn_width = row_length if height > 0 else 0
        parts.append(cursor_down(offset_y - drawn_rows))
        parts.append(cursor_back(offset_x + drawn_width))

    return "".join(parts)


@dataclass(slots=True)
class Canvas:
    """Replays a chart stream into a sparse grid of styled cells.

    Understands printable characters, ``\\n``, ``\\r``, CSI ``A``/``B``/``C``/``D``
    moves and SGR color sequences. Rows above the starting row are allowed,
    since a stream may move up into lines it printed earlier.
    """

    row: int = 0
    col: int = 0
    cells: dict[tuple[int, int], tuple[str, str]] = field(default_factory=dict)
    _style: str = ""

    def feed(self, stream: str) -> Canvas:
        pos = 0
        while pos < len(stream):
            match = _CSI_RE.match(stream, pos)
            if match:
                self._apply_csi(match.group(1), match.group(2), match.group(0))
                pos = match.end()
                continue
            ch = stream[pos]
            if ch == "\n":
                self.row += 1
                self.col = 0
            elif ch == "\r":
                self.col = 0
            else:
                self.cells[(self.row, self.col)] = (self._style, ch)
                self.col += 1
            pos += 1
        return self

    def _apply_csi(self, params: str, command: str, raw: str) -> None:
        if command == "m":
            if params in ("", "0"):
                self._style = ""
            else:
                self._style += raw
            return
        step = int(params) if params.isdigit() else 1
        if command == "A":
            self.row -= step
        elif command == "B":
            self.row += step
        elif command == "C":
            self.col += step
        elif command == "D":
            self.col = max(0, self.col - step)

    @property
    def position(self) -> tuple[int, int]:
        return self.row, self.col

    def char_at(self, row: int, col: int) -> str:
        return self.cells.get((row, col), ("", " "))[1]

    def lines(self, *, plain: bool = False) -> list[str]:
        if not self.cells:
            return []
        rows = [r for r, _ in self.cells]
        top, bottom = min(rows), max(rows)
        out: list[str] = []
        for r in range(top, bottom + 1):
            cols = [c for (rr, c) in self.cells if rr == r]
            if not cols:
                out.append("")
                continue
            out.append(self._render_row(r, max(cols) + 1, plain))
        return out

    def _render_row(self, row: int, width: int, plain: bool) -> str:
        parts: list[str] = []
        active = ""
        for c in range(width):
            style, ch = self.cells.get((row, c), ("", " "))
            if plain:
                parts.append(ch)
                continue
            if style != active:
                if active:
                    parts.append(RESET)
                parts.append(style)
                active = style
            parts.append(ch)
        if active and not plain:
            parts.append(RESET)
        return "".join(parts)

    def render(self, *, plain: bool = False) -> str:
        return "\n".join(self.lines(plain=plain))


def flatten(stream: str, *, plain: bool = False) -> str:
    """Resolve cursor movement in *stream* into plain lines of text.

    With *plain* set, color codes are dropped as well.
    """
    return Canvas().feed(stream).render(plain=plain)
