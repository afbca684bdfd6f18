"""Chart data model and eager dataset validation."""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from enum import StrEnum
from numbers import Real
from typing import Any

from termchart.errors import InvalidDatasetError

Pair = tuple[float, float]


class ValueShape(StrEnum):
    """Shape of a datum's value."""

    SCALAR = "scalar"
    PAIR = "pair"


@dataclass(frozen=True, slots=True)
class ChartDatum:
    """One keyed data point.

    ``value`` is a finite number, or an ``(x, y)`` pair for coordinate charts.
    ``thickness`` (bullet rows) and ``sides`` (scatter marker width/height)
    override the chart-wide option for this item.
    """

    key: str
    value: float | Pair
    style: str | None = None
    thickness: int | None = None
    sides: tuple[int, int] | None = None

    @property
    def shape(self) -> ValueShape:
        return ValueShape.PAIR if isinstance(self.value, tuple) else ValueShape.SCALAR

    @property
    def scalar(self) -> float:
        if isinstance(self.value, tuple):
            raise TypeError(f"Datum {self.key!r} holds a coordinate pair")
        return self.value

    @property
    def pair(self) -> Pair:
        if not isinstance(self.value, tuple):
            raise TypeError(f"Datum {self.key!r} holds a scalar")
        return self.value


def _is_finite_number(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)


def _coerce_value(value: object, index: int) -> float | Pair:
    if _is_finite_number(value):
        return value  # type: ignore[return-value]
    if isinstance(value, (list, tuple)):
        if len(value) != 2:
            raise InvalidDatasetError(
                f"Invalid data: item {index} coordinate must have exactly 2 members, got {len(value)}",
                index=index,
            )
        if not all(_is_finite_number(v) for v in value):
            raise InvalidDatasetError(
                f"Invalid data: item {index} coordinate has a non-finite member: {list(value)!r}",
                index=index,
            )
        return (value[0], value[1])
    raise InvalidDatasetError(
        f"Invalid data: item {index} value must be a finite number or an (x, y) pair, got {value!r}",
        index=index,
    )


def _coerce_sides(sides: object, index: int) -> tuple[int, int] | None:
    if sides is None:
        return None
    if (
        isinstance(sides, (list, tuple))
        and len(sides) == 2
        and all(isinstance(s, int) and not isinstance(s, bool) for s in sides)
    ):
        return (sides[0], sides[1])
    raise InvalidDatasetError(f"Invalid data: item {index} sides must be two integers", index=index)


def coerce_datum(item: ChartDatum | Mapping[str, Any], index: int = 0) -> ChartDatum:
    """Build a validated ``ChartDatum`` from a datum or a mapping with the same keys."""
    if isinstance(item, ChartDatum):
        fields: Mapping[str, Any] = {
            "key": item.key,
            "value": item.value,
            "style": item.style,
            "thickness": item.thickness,
            "sides": item.sides,
        }
    elif isinstance(item, Mapping):
        fields = item
    else:
        raise InvalidDatasetError(f"Invalid data: item {index} is not a mapping: {item!r}", index=index)

    key = fields.get("key")
    if not isinstance(key, str) or not key:
        raise InvalidDatasetError(f"Invalid data: item {index} has a missing or empty key", index=index)

    style = fields.get("style")
    if style is not None and not isinstance(style, str):
        raise InvalidDatasetError(f"Invalid data: item {index} style must be a string", index=index)

    thickness = fields.get("thickness")
    if thickness is not None and (not isinstance(thickness, int) or isinstance(thickness, bool)):
        raise InvalidDatasetError(f"Invalid data: item {index} thickness must be an integer", index=index)

    return ChartDatum(
        key=key,
        value=_coerce_value(fields.get("value"), index),
        style=style,
        thickness=thickness,
        sides=_coerce_sides(fields.get("sides"), index),
    )


def validate_dataset(
    data: Iterable[ChartDatum | Mapping[str, Any]] | None,
    shape: ValueShape | None = None,
) -> list[ChartDatum]:
    """Coerce and validate a whole dataset before any rendering happens.

    The dataset must be non-empty and homogeneous in value shape; when
    *shape* is given every item must have that shape.
    """
    if data is None or isinstance(data, (str, bytes, Mapping)):
        raise InvalidDatasetError(f"Invalid data: expected a sequence of items, got {data!r}")
    items = [coerce_datum(item, index) for index, item in enumerate(data)]
    if not items:
        raise InvalidDatasetError("Invalid data: dataset is empty")

    expected = shape or items[0].shape
    for index, item in enumerate(items):
        if item.shape != expected:
            raise InvalidDatasetError(
                f"Invalid data: item {index} is a {item.shape} value, expected {expected}",
                index=index,
            )
    return items


def require_non_negative(items: Sequence[ChartDatum], chart: str) -> None:
    for index, item in enumerate(items):
        if item.scalar < 0:
            raise InvalidDatasetError(
                f"Invalid data: {chart} values must be non-negative, item {index} is {item.scalar!r}",
                index=index,
            )
