"""Pie and donut charts drawn on a rasterized disk.

Usage::

    print(pie([
        {"key": "A", "value": 5, "style": "* "},
        {"key": "B", "value": 10, "style": "+ "},
    ], radius=4))

Slices run clockwise from the left edge in data order. The legend
below the disk lists ``glyph key: value (percent%)`` per item.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from termchart.core.ansi import PAD
from termchart.core.disk import DiskRasterizer, assign_slice, full_angle, in_square_hole, slice_ratios
from termchart.core.text import format_number, pad_start, round_half_up, visible_length
from termchart.errors import InvalidDatasetError
from termchart.terminal import TerminalSize
from termchart.types.datum import ChartDatum, ValueShape, require_non_negative, validate_dataset
from termchart.types.options import PieOptions, resolve_options

logger = logging.getLogger(__name__)

BLANK_CELL = PAD * 2


def legend(items: list[ChartDatum], glyphs: list[str], ratios: list[float]) -> list[str]:
    key_width = max(visible_length(item.key) for item in items)
    return [
        f"{glyph}{PAD}{pad_start(item.key, key_width)}: {format_number(item.scalar)}"
        f"{PAD}({round_half_up(ratio * 100)}%)"
        for item, glyph, ratio in zip(items, glyphs, ratios)
    ]


def _render(items: list[ChartDatum], opts: PieOptions, *, donut: bool) -> str:
    require_non_negative(items, "pie")
    values = [item.scalar for item in items]
    if sum(values) <= 0:
        raise InvalidDatasetError("Invalid data: pie values must have a positive sum")

    ratios = slice_ratios(values)
    glyphs = [
        item.style if item.style is not None else opts.styles[index % len(opts.styles)]
        for index, item in enumerate(items)
    ]
    fallback = glyphs[-1]
    logger.debug(
        "%s: %d slices, radius=%d, inner_radius=%d",
        "donut" if donut else "pie", len(items), opts.radius, opts.inner_radius,
    )

    def paint(i: int, j: int) -> str:
        if donut and in_square_hole(i, j, opts.inner_radius):
            return BLANK_CELL
        return assign_slice(full_angle(i, j), ratios, glyphs, fallback)

    margin = PAD * opts.left
    rows = DiskRasterizer(opts.radius).render(paint, blank=BLANK_CELL)
    lines = [margin + row for row in rows]
    lines.append("")
    lines.extend(margin + line for line in legend(items, glyphs, ratios))
    return "\n".join(lines)


def render(
    data: Iterable[ChartDatum | Mapping[str, Any]],
    options: PieOptions | Mapping[str, Any] | None = None,
    *,
    terminal_size: TerminalSize | None = None,
    **overrides: Any,
) -> str:
    """Render a full pie. *terminal_size* is accepted for a uniform signature."""
    items = validate_dataset(data, ValueShape.SCALAR)
    return _render(items, resolve_options(PieOptions, options, **overrides), donut=False)


def render_donut(
    data: Iterable[ChartDatum | Mapping[str, Any]],
    options: PieOptions | Mapping[str, Any] | None = None,
    *,
    terminal_size: TerminalSize | None = None,
    **overrides: Any,
) -> str:
    """Render a pie with a square hole of half-width ``inner_radius``."""
    items = validate_dataset(data, ValueShape.SCALAR)
    return _render(items, resolve_options(PieOptions, options, **overrides), donut=True)
