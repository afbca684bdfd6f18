"""Linear value-to-grid scaling and axis tick helpers.

Usage::

    scaler = ValueScaler.from_values([3, 7, 12], range_size=8)
    scaler.position(7)      # -> 3
    scaler.value_at(7)      # -> 12.0

    nice_domain(0.7, 9.2, tick_count=5)  # -> NiceDomain(0.0, 10.0, 2.5)
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from termchart.core.text import round_half_up
from termchart.errors import EmptyDomainError

# Candidate step multipliers, ascending, applied to a power of ten.
_NICE_MULTIPLIERS: tuple[float, ...] = (1.0, 2.0, 2.5, 5.0, 10.0)

# Slack for float division when snapping bounds to a step.
_SNAP_EPSILON = 1e-9


def domain(values: Iterable[float]) -> tuple[float, float]:
    """Return ``(min, max)`` of *values*."""
    items = list(values)
    if not items:
        raise EmptyDomainError()
    return min(items), max(items)


def scale(value: float, domain_min: float, domain_max: float, range_size: int) -> int:
    """Map *value* onto an integer position in ``[0, range_size - 1]``.

    A degenerate domain (``domain_min == domain_max``) sends every value to 0.
    """
    if range_size <= 1 or domain_max == domain_min:
        return 0
    ratio = (value - domain_min) / (domain_max - domain_min)
    if not math.isfinite(ratio):
        return 0
    position = round_half_up(ratio * (range_size - 1))
    return min(max(position, 0), range_size - 1)


@dataclass(frozen=True, slots=True)
class ValueScaler:
    """A linear mapping from a value domain onto ``range_size`` grid cells."""

    domain_min: float
    domain_max: float
    range_size: int

    @classmethod
    def from_values(cls, values: Sequence[float], range_size: int) -> ValueScaler:
        lo, hi = domain(values)
        return cls(lo, hi, range_size)

    @property
    def degenerate(self) -> bool:
        return self.domain_min == self.domain_max

    def position(self, value: float) -> int:
        return scale(value, self.domain_min, self.domain_max, self.range_size)

    def value_at(self, position: int) -> float:
        """Inverse mapping: the domain value sitting at grid *position*."""
        if self.degenerate or self.range_size <= 1:
            return float(self.domain_min)
        span = self.domain_max - self.domain_min
        return self.domain_min + position * span / (self.range_size - 1)


@dataclass(frozen=True, slots=True)
class NiceDomain:
    """Domain bounds snapped to multiples of a human-friendly step."""

    nice_min: float
    nice_max: float
    step: float


def nice_step(raw_step: float) -> float:
    """Smallest of ``{1, 2, 2.5, 5, 10} * 10**k`` that is at least *raw_step*."""
    magnitude = 10 ** math.floor(math.log10(raw_step))
    for multiplier in _NICE_MULTIPLIERS:
        candidate = multiplier * magnitude
        if candidate >= raw_step:
            return candidate
    return 10 * magnitude


def nice_domain(lo: float, hi: float, tick_count: int = 5) -> NiceDomain:
    """Expand ``[lo, hi]`` outward to round bounds for *tick_count* ticks."""
    if lo > hi:
        lo, hi = hi, lo
    intervals = max(tick_count, 2) - 1
    span = hi - lo
    if span > 0:
        raw_step = span / intervals
    else:
        raw_step = max(abs(lo), 1.0) / intervals

    step = nice_step(raw_step)
    nice_min = math.floor(lo / step + _SNAP_EPSILON) * step
    nice_max = math.ceil(hi / step - _SNAP_EPSILON) * step
    if nice_max <= nice_min:
        nice_max = nice_min + step
    return NiceDomain(round(nice_min, 12), round(nice_max, 12), step)


def tick_domain(lo: float, hi: float, ticks: float) -> NiceDomain:
    """Nice domain whose labelled ticks fall on multiples of ``step``.

    *ticks* is how many steps the axis spans (it may be fractional when the
    grid does not end on a tick). ``nice_max`` is ``nice_min + step * ticks``;
    the step is raised to the next nice value until that reaches *hi*.
    """
    if lo > hi:
        lo, hi = hi, lo
    ticks = max(ticks, 1.0)
    nice = nice_domain(lo, hi, tick_count=max(math.floor(ticks), 1) + 1)
    step, nice_min = nice.step, nice.nice_min
    while nice_min + step * ticks < hi - _SNAP_EPSILON * max(abs(hi), 1.0):
        step = nice_step(step * (1 + _SNAP_EPSILON))
        nice_min = math.floor(lo / step + _SNAP_EPSILON) * step
    return NiceDomain(round(nice_min, 12), round(nice_min + step * ticks, 12), step)


def step_precision(step: float) -> int:
    """Fewest decimal places that show multiples of *step* exactly."""
    step = abs(step)
    for places in range(10):
        if abs(round(step, places) - step) <= _SNAP_EPSILON * max(step, 1.0):
            return places
    return 10


def axis_precision(span: float) -> int:
    """Decimal places for axis labels covering a value range of *span*."""
    span = abs(span)
    if span >= 10:
        return 0
    if span >= 1:
        return 1
    return 2


def format_tick(value: float, precision: int) -> str:
    """Format an axis label, trimming trailing zeros."""
    text = f"{value:.{precision}f}"
    if precision > 0:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return text
