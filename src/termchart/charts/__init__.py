"""Chart renderers.

Every renderer takes ``(data, options=None, *, terminal_size=None,
**overrides)`` and returns the finished drawing as one string.
"""

from __future__ import annotations

from collections.abc import Callable

from termchart.charts.bar import render as bar
from termchart.charts.bullet import render as bullet
from termchart.charts.gauge import render as gauge
from termchart.charts.pie import render as pie
from termchart.charts.pie import render_donut as donut
from termchart.charts.scatter import render as scatter
from termchart.charts.sparkline import render as sparkline

Renderer = Callable[..., str]

CHARTS: dict[str, Renderer] = {
    "bar": bar,
    "bullet": bullet,
    "donut": donut,
    "gauge": gauge,
    "pie": pie,
    "scatter": scatter,
    "sparkline": sparkline,
}

__all__ = [
    "CHARTS",
    "Renderer",
    "bar",
    "bullet",
    "donut",
    "gauge",
    "pie",
    "scatter",
    "sparkline",
]
