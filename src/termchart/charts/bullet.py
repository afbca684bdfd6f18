"""Horizontal bullet chart.

Usage::

    print(bullet([
        {"key": "A", "value": 10, "style": "*", "thickness": 2},
        {"key": "B", "value": 20, "style": "#"},
    ], width=10))

Output::

     A [10] *****
            *****

     B [20] ##########
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from termchart.core.ansi import PAD
from termchart.core.text import format_number, pad_start, round_half_up, visible_length
from termchart.terminal import TerminalSize, default_terminal_size, share
from termchart.types.datum import ChartDatum, ValueShape, require_non_negative, validate_dataset
from termchart.types.options import BulletOptions, resolve_options

logger = logging.getLogger(__name__)


def render(
    data: Iterable[ChartDatum | Mapping[str, Any]],
    options: BulletOptions | Mapping[str, Any] | None = None,
    *,
    terminal_size: TerminalSize | None = None,
    **overrides: Any,
) -> str:
    items = validate_dataset(data, ValueShape.SCALAR)
    require_non_negative(items, "bullet")
    opts = resolve_options(BulletOptions, options, **overrides)

    width = opts.width
    if width is None:
        columns, _ = (terminal_size or default_terminal_size)()
        width = share(columns, 0.6, 10)

    peak = max(item.scalar for item in items)
    labels = [f"{item.key} [{format_number(item.scalar)}]" for item in items]
    label_width = max(visible_length(label) for label in labels)
    margin = PAD * opts.left
    logger.debug("bullet: %d items, width=%d, peak=%s", len(items), width, peak)

    lines: list[str] = []
    for index, (item, label) in enumerate(zip(items, labels)):
        length = round_half_up(width * item.scalar / peak) if peak > 0 else 0
        body = (item.style or opts.style) * length
        thickness = item.thickness if item.thickness is not None else opts.bar_width

        lines.append(f"{margin}{pad_start(label, label_width)}{PAD}{body}")
        for _ in range(1, thickness):
            lines.append(f"{margin}{PAD * (label_width + 1)}{body}")

        if index != len(items) - 1:
            lines.extend([""] * opts.padding)
    return "\n".join(lines)
