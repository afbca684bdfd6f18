"""Vertical bar chart.

Usage::

    print(bar([{"key": "A", "value": 5}, {"key": "B", "value": 11}], height=3, padding=1))

Output::

          11
         ***
      5  ***
     *** ***
      A   B
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from termchart.core.ansi import PAD
from termchart.core.text import format_number, pad_end, pad_mid, round_half_up, visible_length
from termchart.terminal import TerminalSize, default_terminal_size, share
from termchart.types.datum import ChartDatum, ValueShape, require_non_negative, validate_dataset
from termchart.types.options import BarOptions, resolve_options

logger = logging.getLogger(__name__)


def bar_top(value: float, peak: float, height: int) -> int:
    """Row (0 = top) holding the value label; the bar fills the rows below it."""
    if peak <= 0:
        return height
    return round_half_up(height - height * value / peak)


def _key_cell(key: str, bar_width: int, padding: int) -> str:
    column = bar_width + padding
    if visible_length(key) <= bar_width:
        return pad_mid(key, bar_width) + PAD * padding
    # Too long for the bar: left-align and cut, keeping one space of gap.
    keep = column - 1 if padding > 0 else bar_width
    return pad_end(key[:keep], column)


def render(
    data: Iterable[ChartDatum | Mapping[str, Any]],
    options: BarOptions | Mapping[str, Any] | None = None,
    *,
    terminal_size: TerminalSize | None = None,
    **overrides: Any,
) -> str:
    """Render *data* as vertical bars scaled against the dataset maximum."""
    items = validate_dataset(data, ValueShape.SCALAR)
    require_non_negative(items, "bar")
    opts = resolve_options(BarOptions, options, **overrides)

    height = opts.height
    if height is None:
        _, lines = (terminal_size or default_terminal_size)()
        height = share(lines, 0.4, 6)

    peak = max(item.scalar for item in items)
    tops = [bar_top(item.scalar, peak, height) for item in items]
    gap = PAD * opts.padding
    logger.debug("bar: %d items, height=%d, peak=%s", len(items), height, peak)

    rows: list[str] = []
    for i in range(height + 1):
        row = PAD * opts.left
        for item, top in zip(items, tops):
            if i == top:
                row += pad_mid(format_number(item.scalar), opts.bar_width) + gap
            elif i > top:
                row += (item.style or opts.style) * opts.bar_width + gap
            else:
                row += PAD * opts.bar_width + gap
        rows.append(row)

    keys = "".join(_key_cell(item.key, opts.bar_width, opts.padding) for item in items)
    rows.append(PAD * opts.left + keys)
    return "\n".join(rows)
