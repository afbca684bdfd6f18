"""Per-chart option records.

Each chart type has a frozen dataclass with a default for every field.
Callers pass an instance, a mapping, keyword overrides, or any mix of these;
``resolve_options`` merges them over the defaults and checks value types.
Fields left as ``None`` are filled from the terminal size at render time.
"""

from __future__ import annotations

import re
import types
import typing
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from numbers import Real
from typing import Any, TypeVar

from termchart.errors import InvalidOptionsError

DEFAULT_SLICE_STYLES: tuple[str, ...] = ("* ", "+ ", "# ", "O ", "@ ", "% ", "x ", "o ")


@dataclass(frozen=True, slots=True)
class BarOptions:
    """Vertical bar chart options."""

    bar_width: int = 3
    left: int = 1
    height: int | None = None  # 40% of terminal height, at least 6
    padding: int = 3
    style: str = "*"


@dataclass(frozen=True, slots=True)
class BulletOptions:
    """Horizontal bullet chart options."""

    bar_width: int = 1
    style: str = "*"
    left: int = 1
    width: int | None = None  # 60% of terminal width, at least 10
    padding: int = 1


@dataclass(frozen=True, slots=True)
class PieOptions:
    """Pie and donut chart options.

    ``styles`` is cycled for items that carry no style of their own.
    """

    radius: int = 4
    left: int = 0
    inner_radius: int = 1
    styles: tuple[str, ...] = DEFAULT_SLICE_STYLES


DonutOptions = PieOptions


@dataclass(frozen=True, slots=True)
class GaugeOptions:
    """Half-disk gauge options."""

    radius: int = 5
    left: int = 2
    style: str = "# "
    bg_style: str = "+ "


@dataclass(frozen=True, slots=True)
class ScatterOptions:
    """Scatter plot options.

    ``sides`` is the default marker block (columns, rows). ``ratio`` scales
    the printed tick values on each axis.
    """

    width: int | None = None  # 40% of terminal width, at least 10
    height: int | None = None  # 40% of terminal height, at least 10
    left: int = 2
    style: str = "# "
    sides: tuple[int, int] = (1, 1)
    h_axis: tuple[str, str, str] = ("+", "-", ">")
    v_axis: tuple[str, str] = ("|", "A")
    h_name: str = "X Axis"
    v_name: str = "Y Axis"
    zero: str = "+"
    ratio: tuple[float, float] = (1, 1)
    h_gap: int = 2
    v_gap: int = 2
    legend_gap: int = 4


@dataclass(frozen=True, slots=True)
class SparklineOptions:
    """Sparkline options. ``width`` defaults to one column per data point."""

    width: int | None = None
    height: int = 8
    tolerance: int = 1
    style: str = "*"
    y_axis_char: str = "|"


OptionsT = TypeVar("OptionsT")

_CAMEL_RE = re.compile(r"(?<!^)(?=[A-Z])")


def _snake(name: str) -> str:
    """``barWidth`` -> ``bar_width``; snake_case names pass through."""
    return _CAMEL_RE.sub("_", name).lower()


def _matches(value: Any, hint: Any) -> bool:
    if hint is Any:
        return True
    origin = typing.get_origin(hint)
    if origin in (typing.Union, types.UnionType):
        return any(_matches(value, arg) for arg in typing.get_args(hint))
    if hint is type(None):
        return value is None
    if hint is bool:
        return isinstance(value, bool)
    if hint is int:
        return isinstance(value, int) and not isinstance(value, bool)
    if hint is float:
        return isinstance(value, Real) and not isinstance(value, bool)
    if origin is tuple:
        if not isinstance(value, (tuple, list)):
            return False
        args = typing.get_args(hint)
        if len(args) == 2 and args[1] is Ellipsis:
            return all(_matches(v, args[0]) for v in value)
        return len(value) == len(args) and all(_matches(v, a) for v, a in zip(value, args))
    return isinstance(value, hint)


def resolve_options(
    cls: type[OptionsT],
    options: OptionsT | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> OptionsT:
    """Merge *options* and *overrides* over the defaults of *cls*.

    Unknown names and mistyped values raise ``InvalidOptionsError``.
    camelCase names are accepted as aliases of their snake_case fields.
    """
    if isinstance(options, cls):
        base = options
        supplied: dict[str, Any] = {}
    elif options is None or isinstance(options, Mapping):
        base = cls()
        supplied = dict(options or {})
    else:
        raise InvalidOptionsError(
            f"Options for {cls.__name__} must be a mapping or {cls.__name__}, got {type(options).__name__}"
        )
    supplied.update(overrides)

    hints = typing.get_type_hints(cls)
    known = {f.name for f in fields(cls)}  # type: ignore[arg-type]
    changes: dict[str, Any] = {}
    for raw_name, value in supplied.items():
        name = _snake(raw_name)
        if name not in known:
            raise InvalidOptionsError(f"Unknown {cls.__name__} option: {raw_name!r}", option=raw_name)
        if not _matches(value, hints[name]):
            raise InvalidOptionsError(
                f"Invalid {cls.__name__} option {raw_name!r}: {value!r}",
                option=raw_name,
            )
        changes[name] = tuple(value) if isinstance(value, list) else value
    return replace(base, **changes)  # type: ignore[type-var]
