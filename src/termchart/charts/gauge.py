"""Half-disk gauge for a single ratio in ``[0, 1]``.

Usage::

    print(gauge([{"key": "CPU", "value": 0.7}], radius=7))

The arc fills from the left up to the value. The rounded percentage sits in
a blank square at the center and a ``0 ... key ... 100`` scale line closes
the drawing.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from termchart.core.ansi import PAD
from termchart.core.disk import GAUGE_LABEL_CELL, DiskRasterizer, half_angle, in_gauge_label
from termchart.core.text import pad_mid, pad_start, round_half_up
from termchart.errors import InvalidOptionsError
from termchart.terminal import TerminalSize
from termchart.types.datum import ChartDatum, ValueShape, validate_dataset
from termchart.types.options import GaugeOptions, resolve_options

logger = logging.getLogger(__name__)

BLANK_CELL = PAD * 2
KEY_FIELD_WIDTH = 11


def scale_line(key: str, radius: int) -> str:
    return (
        f"{PAD * (radius - 2)}0{PAD * (radius - 4)}"
        f"{pad_mid(key, KEY_FIELD_WIDTH)}{PAD * (radius - 4)}100"
    )


def render(
    data: Iterable[ChartDatum | Mapping[str, Any]],
    options: GaugeOptions | Mapping[str, Any] | None = None,
    *,
    terminal_size: TerminalSize | None = None,
    **overrides: Any,
) -> str:
    items = validate_dataset(data, ValueShape.SCALAR)
    if len(items) != 1:
        raise InvalidOptionsError(f"gauge takes exactly one data item, got {len(items)}")
    opts = resolve_options(GaugeOptions, options, **overrides)

    item = items[0]
    value = item.scalar
    fill = item.style or opts.style
    percent = pad_start(str(round_half_up(value * 100)), len(BLANK_CELL))
    logger.debug("gauge: key=%r value=%s radius=%d", item.key, value, opts.radius)

    def paint(i: int, j: int) -> str:
        if in_gauge_label(i, j):
            return percent if (i, j) == GAUGE_LABEL_CELL else BLANK_CELL
        return fill if half_angle(i, j) <= value else opts.bg_style

    margin = PAD * opts.left
    rows = DiskRasterizer(opts.radius).render(paint, half=True, blank=BLANK_CELL)
    lines = [margin + row for row in rows]
    lines.append(margin + scale_line(item.key, opts.radius))
    return "\n".join(lines)
