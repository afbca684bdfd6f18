"""Multi-row sparkline with a numeric left axis.

Usage::

    print(sparkline([{"key": str(i), "value": v} for i, v in enumerate([1, 5, 2, 8])],
                    width=12, height=5))

Points are spread evenly across ``width`` columns and scaled onto ``height``
rows. When two neighbouring points land further apart than ``tolerance``
(Manhattan distance) the gap between them is filled in, so the line has no
holes.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any, NamedTuple

from termchart.core.ansi import PAD
from termchart.core.scale import ValueScaler, axis_precision, format_tick
from termchart.core.text import pad_start, round_half_up, visible_length
from termchart.terminal import TerminalSize
from termchart.types.datum import ChartDatum, ValueShape, validate_dataset
from termchart.types.options import SparklineOptions, resolve_options

logger = logging.getLogger(__name__)


class GridPoint(NamedTuple):
    x: int
    y: int


def manhattan(a: GridPoint, b: GridPoint) -> int:
    return abs(b.x - a.x) + abs(b.y - a.y)


def interpolate(a: GridPoint, b: GridPoint) -> list[GridPoint]:
    """Points strictly between *a* and *b*, one per unit of the larger delta."""
    dx, dy = b.x - a.x, b.y - a.y
    steps = max(abs(dx), abs(dy))
    return [
        GridPoint(round_half_up(a.x + dx * t / steps), round_half_up(a.y + dy * t / steps))
        for t in range(1, steps)
    ]


def connect(a: GridPoint, b: GridPoint) -> list[GridPoint]:
    """Path from *a* (exclusive) to *b* (inclusive) moving one cell at a time.

    Diagonal steps of the fixed-step interpolation get an elbow cell so that
    consecutive cells always share an edge.
    """
    path: list[GridPoint] = []
    previous = a
    for point in [*interpolate(a, b), b]:
        if point.x != previous.x and point.y != previous.y:
            path.append(GridPoint(point.x, previous.y))
        path.append(point)
        previous = point
    return path


def trace(points: Sequence[GridPoint], tolerance: int) -> list[GridPoint]:
    """Every cell to plot, in drawing order, starting with the first point."""
    if not points:
        return []
    cells = [points[0]]
    for a, b in zip(points, points[1:]):
        if manhattan(a, b) > tolerance:
            cells.extend(connect(a, b))
        else:
            cells.append(b)
    return cells


def grid_points(values: Sequence[float], width: int, height: int) -> list[GridPoint]:
    scaler = ValueScaler.from_values(values, height)
    last = len(values) - 1
    return [
        GridPoint(
            round_half_up(index / last * (width - 1)) if last else 0,
            height - 1 - scaler.position(value),
        )
        for index, value in enumerate(values)
    ]


def axis_labels(values: Sequence[float], height: int) -> dict[int, str]:
    """Labels for the top, middle and bottom rows."""
    scaler = ValueScaler.from_values(values, height)
    precision = axis_precision(scaler.domain_max - scaler.domain_min)
    bottom = height - 1
    if scaler.degenerate:
        return {bottom: format_tick(scaler.domain_min, precision)}
    return {
        row: format_tick(scaler.value_at(bottom - row), precision)
        for row in (0, height // 2, bottom)
    }


def render(
    data: Iterable[ChartDatum | Mapping[str, Any]],
    options: SparklineOptions | Mapping[str, Any] | None = None,
    *,
    terminal_size: TerminalSize | None = None,
    **overrides: Any,
) -> str:
    items = validate_dataset(data, ValueShape.SCALAR)
    opts = resolve_options(SparklineOptions, options, **overrides)

    values = [item.scalar for item in items]
    width = opts.width if opts.width is not None else len(values)
    height = opts.height
    points = grid_points(values, width, height)
    logger.debug("sparkline: %d points, %dx%d, tolerance=%d", len(values), width, height, opts.tolerance)

    grid = [[PAD] * width for _ in range(height)]
    for cell in trace(points, opts.tolerance):
        grid[cell.y][cell.x] = opts.style
    for item, point in zip(items, points):
        grid[point.y][point.x] = item.style or opts.style

    labels = axis_labels(values, height)
    label_width = max(visible_length(label) for label in labels.values())
    return "\n".join(
        f"{pad_start(labels.get(row, ''), label_width)}{PAD}{opts.y_axis_char}{''.join(cells)}"
        for row, cells in enumerate(grid)
    )
