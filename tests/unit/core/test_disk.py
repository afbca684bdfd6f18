"""Tests for disk rasterization and slice assignment."""

from __future__ import annotations

from collections import Counter

import pytest

from termchart.core.disk import (
    DiskRasterizer,
    assign_slice,
    full_angle,
    half_angle,
    in_disk,
    in_gauge_label,
    in_square_hole,
    slice_ratios,
)


class TestMembership:
    @pytest.mark.parametrize("radius", range(1, 9))
    def test_matches_brute_force(self, radius: int) -> None:
        expected = {
            (i, j)
            for i in range(-radius, radius)
            for j in range(-radius, radius)
            if i * i + j * j < radius * radius
        }
        observed = {(c.i, c.j) for c in DiskRasterizer(radius).cells()}
        assert observed == expected

    def test_boundary_cells_excluded(self) -> None:
        assert not in_disk(-5, 0, 5)
        assert not in_disk(-3, -4, 5)
        assert not in_disk(-4, 3, 5)
        assert in_disk(-4, 2, 5)

    def test_row_layout(self) -> None:
        disk = DiskRasterizer(4)
        rows = list(disk.rows())
        assert len(rows) == 8
        assert all(len(row) == 8 for row in rows)
        assert [row[0].i for row in rows] == list(range(-4, 4))

    def test_half_disk_rows(self) -> None:
        rows = list(DiskRasterizer(5).rows(half=True))
        assert [row[0].i for row in rows] == [-5, -4, -3, -2, -1]

    def test_render_uses_blank_outside(self) -> None:
        lines = DiskRasterizer(2).render(lambda i, j: "##", blank="..")
        assert lines == [
            "........",
            "..######",
            "..######",
            "..######",
        ]


class TestAngles:
    def test_full_angle_range(self) -> None:
        for cell in DiskRasterizer(6).cells():
            assert 0.0 <= full_angle(cell.i, cell.j) <= 1.0

    def test_full_angle_quarters(self) -> None:
        assert full_angle(-1, 0) == pytest.approx(0.25)  # straight up
        assert full_angle(0, 1) == pytest.approx(0.5)  # right
        assert full_angle(1, 0) == pytest.approx(0.75)  # straight down

    def test_half_angle_grows_left_to_right(self) -> None:
        assert half_angle(-1, 0) == pytest.approx(0.5)
        assert half_angle(-1, -5) < half_angle(-3, -1) < half_angle(-3, 1) < half_angle(-1, 5)
        for cell in DiskRasterizer(6).cells(half=True):
            assert 0.0 < half_angle(cell.i, cell.j) <= 1.0


class TestAssignSlice:
    def test_cumulative_boundaries(self) -> None:
        ratios, glyphs = [0.25, 0.25, 0.5], ["a", "b", "c"]
        assert assign_slice(0.1, ratios, glyphs, "z") == "a"
        assert assign_slice(0.25, ratios, glyphs, "z") == "a"
        assert assign_slice(0.26, ratios, glyphs, "z") == "b"
        assert assign_slice(0.9, ratios, glyphs, "z") == "c"

    def test_past_total_uses_fallback(self) -> None:
        assert assign_slice(1.2, [0.5, 0.5], ["a", "b"], "z") == "z"
        assert assign_slice(0.995, [0.33, 0.33, 0.33], ["a", "b", "c"], "z") == "z"

    def test_large_dataset_is_iterative(self) -> None:
        n = 5000
        glyphs = [str(k) for k in range(n)]
        assert assign_slice(0.5, [1 / n] * n, glyphs, "z") in glyphs
        assert assign_slice(2.0, [1 / n] * n, glyphs, "z") == "z"

    def test_slice_ratios(self) -> None:
        ratios = slice_ratios([5, 10, 10, 10])
        assert sum(ratios) == pytest.approx(1.0)
        assert ratios[0] == pytest.approx(5 / 35)


class TestPartition:
    def test_every_cell_assigned_and_proportional(self) -> None:
        radius = 10
        ratios = slice_ratios([1, 1.5, 2.5])
        glyphs = ["a", "b", "c"]
        counts = Counter(
            assign_slice(full_angle(c.i, c.j), ratios, glyphs, glyphs[-1])
            for c in DiskRasterizer(radius).cells()
        )
        total = sum(counts.values())
        assert set(counts) == set(glyphs)
        for glyph, ratio in zip(glyphs, ratios):
            # each slice has two edges, each crossing at most `radius` cells
            assert abs(counts[glyph] - ratio * total) <= 2 * radius


class TestCarveOuts:
    def test_square_hole(self) -> None:
        assert in_square_hole(1, 1, 1)
        assert in_square_hole(-1, 0, 1)
        assert not in_square_hole(2, 0, 1)
        assert in_square_hole(2, 2, 2)

    def test_gauge_label_square(self) -> None:
        assert in_gauge_label(-1, 0)
        assert in_gauge_label(-2, 2)
        assert not in_gauge_label(-3, 0)
        assert not in_gauge_label(-1, 3)
