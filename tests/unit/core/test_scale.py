"""Tests for linear scaling and nice-domain ticks."""

from __future__ import annotations

import math

import pytest

from termchart.core.scale import (
    NiceDomain,
    ValueScaler,
    axis_precision,
    domain,
    format_tick,
    nice_domain,
    nice_step,
    scale,
    step_precision,
    tick_domain,
)
from termchart.errors import EmptyDomainError


class TestScale:
    def test_endpoints(self) -> None:
        assert scale(0, 0, 10, 11) == 0
        assert scale(10, 0, 10, 11) == 10
        assert scale(5, 0, 10, 11) == 5

    def test_rounds_half_up(self) -> None:
        # 0.25 * 2 = 0.5 -> 1
        assert scale(1, 0, 4, 3) == 1

    def test_degenerate_domain_maps_to_zero(self) -> None:
        for value in (-100, 3, 3.0, 1e9):
            assert scale(value, 3, 3, 10) == 0

    def test_clamps_out_of_domain_values(self) -> None:
        assert scale(20, 0, 10, 5) == 4
        assert scale(-5, 0, 10, 5) == 0

    def test_single_cell_range(self) -> None:
        assert scale(7, 0, 10, 1) == 0

    def test_always_a_finite_position(self) -> None:
        cases = [(0, 0, 0, 5), (1e308, -1e308, 1e308, 8), (2.5, 1, 4, 2), (-1, -1, -1, 1)]
        for value, lo, hi, size in cases:
            position = scale(value, lo, hi, size)
            assert isinstance(position, int)
            assert 0 <= position <= max(size - 1, 0)


class TestValueScaler:
    def test_from_values(self) -> None:
        scaler = ValueScaler.from_values([3, 7, 12], range_size=8)
        assert (scaler.domain_min, scaler.domain_max) == (3, 12)
        assert scaler.position(7) == 3
        assert scaler.value_at(7) == 12.0

    def test_value_at_is_inverse_on_grid(self) -> None:
        scaler = ValueScaler(0, 10, 11)
        for k in range(11):
            assert scaler.position(scaler.value_at(k)) == k

    def test_degenerate(self) -> None:
        scaler = ValueScaler(4, 4, 6)
        assert scaler.degenerate
        assert scaler.position(4) == 0
        assert scaler.value_at(5) == 4.0

    def test_empty_values(self) -> None:
        with pytest.raises(EmptyDomainError):
            ValueScaler.from_values([], 5)

    def test_domain_empty(self) -> None:
        with pytest.raises(EmptyDomainError):
            domain([])

    def test_domain(self) -> None:
        assert domain([4, -2, 9]) == (-2, 9)


class TestNiceDomain:
    def test_fractional_bounds(self) -> None:
        assert nice_domain(0.7, 9.2, tick_count=5) == NiceDomain(0.0, 10.0, 2.5)

    def test_already_round(self) -> None:
        assert nice_domain(0, 100, tick_count=5) == NiceDomain(0, 100, 25)

    def test_snaps_outward(self) -> None:
        result = nice_domain(3, 97, tick_count=11)
        assert result.step == 10
        assert (result.nice_min, result.nice_max) == (0, 100)

    def test_negative_range(self) -> None:
        assert nice_domain(-7, 13, tick_count=5) == NiceDomain(-10, 15, 5)

    def test_tick_count_below_two(self) -> None:
        assert nice_domain(0, 8, tick_count=1) == NiceDomain(0, 10, 10)

    def test_zero_width_range(self) -> None:
        result = nice_domain(5, 5, tick_count=5)
        assert result.nice_min <= 5 <= result.nice_max
        assert result.nice_max > result.nice_min
        assert result == NiceDomain(4, 6, 2)

    def test_zero_width_at_zero(self) -> None:
        result = nice_domain(0, 0)
        assert result.nice_max > result.nice_min
        assert all(math.isfinite(v) for v in (result.nice_min, result.nice_max, result.step))

    def test_swapped_bounds(self) -> None:
        assert nice_domain(9.2, 0.7) == nice_domain(0.7, 9.2)

    def test_nice_step(self) -> None:
        assert nice_step(0.3) == 0.5
        assert nice_step(7) == 10
        assert nice_step(1) == 1
        assert nice_step(22) == 25


class TestAxisLabels:
    def test_precision(self) -> None:
        assert axis_precision(10) == 0
        assert axis_precision(250) == 0
        assert axis_precision(9.99) == 1
        assert axis_precision(1) == 1
        assert axis_precision(0.5) == 2

    def test_format_tick_trims_zeros(self) -> None:
        assert format_tick(2.5, 2) == "2.5"
        assert format_tick(3.0, 1) == "3"
        assert format_tick(0.25, 2) == "0.25"
        assert format_tick(12.345, 0) == "12"

    def test_format_tick_no_negative_zero(self) -> None:
        assert format_tick(-0.001, 2) == "0"
        assert format_tick(-0.2, 0) == "0"


class TestTickDomain:
    def test_ticks_land_on_step_multiples(self) -> None:
        result = tick_domain(1, 3, 7.5)
        assert result == NiceDomain(1.0, 4.75, 0.5)

    def test_widens_to_reach_maximum(self) -> None:
        # a step of 10 over two ticks stops at 20, short of 21
        assert tick_domain(9, 21, 2) == NiceDomain(0, 40, 20)

    def test_covers_data(self) -> None:
        for lo, hi, ticks in [(0.7, 9.2, 5), (-7, 13, 3.5), (3, 97, 10), (5, 5, 4), (1, 7, 5)]:
            result = tick_domain(lo, hi, ticks)
            assert result.nice_min <= lo
            assert result.nice_max >= hi
            assert result.nice_min / result.step == pytest.approx(round(result.nice_min / result.step))

    def test_fewer_than_one_tick(self) -> None:
        result = tick_domain(0, 4, 0)
        assert result.nice_max >= 4

    def test_step_precision(self) -> None:
        assert step_precision(10) == 0
        assert step_precision(2.5) == 1
        assert step_precision(0.25) == 2
        assert step_precision(0.1 + 0.2) == 1
