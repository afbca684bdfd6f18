"""Disk rasterization for angle-sliced charts (pie, donut, gauge).

The lattice is ``i, j in [-radius, radius)`` with ``i`` as the row and ``j``
as the column. A cell belongs to the disk when ``i**2 + j**2 < radius**2``;
cells exactly on the circle are left out for every chart type.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass

# Half-width of the square kept clear for the gauge percentage label.
GAUGE_LABEL_HALF = 2
GAUGE_LABEL_CELL = (-1, 0)


def in_disk(i: int, j: int, radius: int) -> bool:
    return i * i + j * j < radius * radius


def full_angle(i: int, j: int) -> float:
    """Polar parameter in ``[0, 1]`` for full-circle charts, a quarter turn at straight up."""
    return math.atan2(i, j) / math.pi * 0.5 + 0.5


def half_angle(i: int, j: int) -> float:
    """Polar parameter for the upper half-disk, growing left to right."""
    return math.atan2(i, j) / math.pi + 1


def in_square_hole(i: int, j: int, inner_radius: int) -> bool:
    """Donut hole test. The hole is a square, not a circle."""
    return abs(i) <= inner_radius and abs(j) <= inner_radius


def in_gauge_label(i: int, j: int) -> bool:
    return abs(i) <= GAUGE_LABEL_HALF and abs(j) <= GAUGE_LABEL_HALF


def slice_ratios(values: Sequence[float]) -> list[float]:
    """Share of the total for each value. The caller guarantees a positive total."""
    total = sum(values)
    return [value / total for value in values]


def assign_slice(
    t: float,
    ratios: Sequence[float],
    glyphs: Sequence[str],
    fallback: str,
) -> str:
    """Glyph of the first item whose cumulative ratio reaches *t*.

    Falls back to *fallback* when *t* lies past the accumulated total, which
    happens when the ratios drift below 1.0.
    """
    cumulative = 0.0
    for ratio, glyph in zip(ratios, glyphs):
        cumulative += ratio
        if t <= cumulative:
            return glyph
    return fallback


@dataclass(frozen=True, slots=True)
class DiskCell:
    """One lattice cell of a rasterized disk."""

    i: int
    j: int
    inside: bool


class DiskRasterizer:
    """Enumerates the lattice around a disk of the given radius, row-major.

    Usage::

        disk = DiskRasterizer(4)
        for row in disk.rows():
            for cell in row:
                ...
    """

    def __init__(self, radius: int) -> None:
        self.radius = radius

    def row_indices(self, *, half: bool = False) -> range:
        """Row indices; the upper half only when *half* is set."""
        return range(-self.radius, 0 if half else self.radius)

    def column_indices(self) -> range:
        return range(-self.radius, self.radius)

    def rows(self, *, half: bool = False) -> Iterator[list[DiskCell]]:
        for i in self.row_indices(half=half):
            yield [DiskCell(i, j, in_disk(i, j, self.radius)) for j in self.column_indices()]

    def cells(self, *, half: bool = False) -> Iterator[DiskCell]:
        """Cells inside the disk only."""
        for row in self.rows(half=half):
            for cell in row:
                if cell.inside:
                    yield cell

    def render(
        self,
        paint: Callable[[int, int], str],
        *,
        half: bool = False,
        blank: str = "  ",
    ) -> list[str]:
        """Build text rows, asking ``paint(i, j)`` for each cell inside the disk."""
        lines: list[str] = []
        for row in self.rows(half=half):
            lines.append("".join(paint(c.i, c.j) if c.inside else blank for c in row))
        return lines
