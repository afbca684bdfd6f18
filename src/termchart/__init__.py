"""Termchart - small numeric datasets drawn as terminal text charts."""

from __future__ import annotations

from termchart.charts import bar, bullet, donut, gauge, pie, scatter, sparkline
from termchart.core.ansi import COLORS, bg, fg
from termchart.core.cursor import flatten
from termchart.errors import (
    ChartError,
    ConfigurationError,
    EmptyDomainError,
    ErrorCategory,
    InvalidColorError,
    InvalidDatasetError,
    InvalidOptionsError,
)
from termchart.terminal import fixed_terminal_size
from termchart.types.datum import ChartDatum

__version__ = "0.1.0"

__all__ = [
    "COLORS",
    "ChartDatum",
    "ChartError",
    "ConfigurationError",
    "EmptyDomainError",
    "ErrorCategory",
    "InvalidColorError",
    "InvalidDatasetError",
    "InvalidOptionsError",
    "__version__",
    "bar",
    "bg",
    "bullet",
    "donut",
    "fg",
    "fixed_terminal_size",
    "flatten",
    "gauge",
    "pie",
    "scatter",
    "sparkline",
]
