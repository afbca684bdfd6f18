"""Textual integration for termchart charts."""

from __future__ import annotations

from termchart.tui.chart_view import ChartView

__all__ = ["ChartView"]
