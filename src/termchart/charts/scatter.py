"""Scatter plot composed with relative cursor movement.

Usage::

    print(scatter([
        {"key": "A", "value": (1, 2), "style": "# "},
        {"key": "B", "value": (3, 4), "style": "o "},
    ], width=15, height=10))

The plot is drawn as a stream: a legend line, a blank background area, the
vertical axis, the origin and horizontal axis, then every data marker placed
relative to the horizontal axis line with ``place_block``, and finally the
row of horizontal tick labels. Each grid column is two characters wide.

Both axes use min-max linear scaling over a nice domain sized so that every
``gap``-th grid position lands on a multiple of the nice step. Tick labels
show the data value at the tick multiplied by ``ratio``. The axis rule only
draws ticks inside the grid, so every tick has a label position.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from termchart.core.ansi import PAD, cursor_back, cursor_up
from termchart.core.cursor import BlockKind, place_block
from termchart.core.scale import ValueScaler, domain, format_tick, step_precision, tick_domain
from termchart.core.text import pad_start, visible_length
from termchart.terminal import TerminalSize, default_terminal_size, share
from termchart.types.datum import ChartDatum, ValueShape, validate_dataset
from termchart.types.options import ScatterOptions, resolve_options

logger = logging.getLogger(__name__)

CELL_WIDTH = 2


def axis_scaler(values: Sequence[float], cells: int, gap: int) -> ValueScaler:
    """Scaler onto grid positions ``0..cells`` with a nice tick every *gap* positions."""
    lo, hi = domain(values)
    nice = tick_domain(lo, hi, cells / gap)
    return ValueScaler(nice.nice_min, nice.nice_max, cells + 1)


def tick_labels(scaler: ValueScaler, gap: int, ratio: float) -> dict[int, str]:
    """Labels for every *gap*-th grid position, keyed by position."""
    step = 0.0
    if scaler.range_size > 1:
        step = (scaler.domain_max - scaler.domain_min) * gap / (scaler.range_size - 1)
    precision = step_precision(round(step * ratio, 12))
    return {
        k: format_tick(scaler.value_at(k) * ratio, precision)
        for k in range(0, scaler.range_size, gap)
    }


def legend(items: Sequence[ChartDatum], default_style: str) -> str:
    """``key: style`` for each distinct key, using the first style seen for it."""
    styles: dict[str, str] = {}
    for item in items:
        if item.key not in styles:
            styles[item.key] = item.style or default_style
    return " | ".join(f"{key}: {style}" for key, style in styles.items())


def _x_label_row(labels: dict[int, str], gutter: int) -> str:
    """Tick labels under their ticks; a label that would touch the previous one is dropped."""
    row: list[str] = []
    end = 0
    for k, label in sorted(labels.items()):
        start = gutter + k * CELL_WIDTH
        if start < end:
            continue
        row.extend(PAD * (start - len(row)))
        row.extend(label)
        end = start + len(label) + 1
    return "".join(row).rstrip()


def render(
    data: Iterable[ChartDatum | Mapping[str, Any]],
    options: ScatterOptions | Mapping[str, Any] | None = None,
    *,
    terminal_size: TerminalSize | None = None,
    **overrides: Any,
) -> str:
    items = validate_dataset(data, ValueShape.PAIR)
    opts = resolve_options(ScatterOptions, options, **overrides)

    width, height = opts.width, opts.height
    if width is None or height is None:
        columns, lines = (terminal_size or default_terminal_size)()
        width = width if width is not None else share(columns, 0.4, 10)
        height = height if height is not None else share(lines, 0.4, 10)

    h_gap, v_gap = max(opts.h_gap, 1), max(opts.v_gap, 1)
    x_scaler = axis_scaler([item.pair[0] for item in items], width, h_gap)
    y_scaler = axis_scaler([item.pair[1] for item in items], height, v_gap)
    y_labels = tick_labels(y_scaler, v_gap, opts.ratio[1])
    x_labels = tick_labels(x_scaler, h_gap, opts.ratio[0])
    gutter = max(opts.left + 1, *(len(label) for label in y_labels.values()))
    logger.debug(
        "scatter: %d points, width=%d, height=%d, x=[%s, %s], y=[%s, %s]",
        len(items), width, height,
        x_scaler.domain_min, x_scaler.domain_max, y_scaler.domain_min, y_scaler.domain_max,
    )

    parts: list[str] = [
        f"{PAD * opts.left}{opts.v_name}{PAD * opts.legend_gap}{legend(items, opts.style)}\n\n",
    ]

    # Blank area the axes and markers are drawn over; ends one line below it.
    parts.append(place_block(gutter + CELL_WIDTH * width + 2, height + 1, PAD))

    # Vertical axis, top to bottom, ending on the origin.
    v_line, v_arrow = opts.v_axis
    parts.append(f"{cursor_up(height + 1)}{PAD * gutter}{v_arrow}")
    for k in range(height, 0, -1):
        parts.append(f"\n{pad_start(y_labels.get(k, ''), gutter)}{v_line}")

    # Origin and horizontal axis.
    tick, h_line, h_arrow = opts.h_axis
    axis_length = CELL_WIDTH * width + h_gap - 1
    rule = "".join(
        tick if c % (h_gap * CELL_WIDTH) == 0 and c <= CELL_WIDTH * width else h_line
        for c in range(1, axis_length + 1)
    )
    axis_row = f"{pad_start(y_labels.get(0, ''), gutter)}{opts.zero}{rule}{h_arrow}{PAD}{opts.h_name}"
    parts.append(f"\n{axis_row}")

    # Markers, each placed relative to the start of the axis row.
    parts.append(cursor_back(visible_length(axis_row)))
    for item in items:
        x, y = item.pair
        columns_wide, rows_tall = item.sides or opts.sides
        parts.append(
            place_block(
                columns_wide,
                rows_tall,
                item.style or opts.style,
                gutter + CELL_WIDTH * x_scaler.position(x),
                y_scaler.position(y),
                BlockKind.DATA,
            )
        )

    parts.append(f"\n{_x_label_row(x_labels, gutter)}")
    return "".join(parts)
