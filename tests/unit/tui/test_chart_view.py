"""Tests for the ChartView widget."""

from __future__ import annotations

from rich.text import Text

from termchart.tui import ChartView

PIE = [{"key": "A", "value": 1, "style": "a "}, {"key": "B", "value": 3, "style": "b "}]


class TestChartView:
    def test_empty_data(self) -> None:
        view = ChartView("bar")
        result = view.render()
        assert isinstance(result, Text)
        assert str(result) == "(no data)"

    def test_pie(self) -> None:
        view = ChartView("pie", data=PIE, options={"radius": 3})
        rendered = str(view.render())
        assert "a " in rendered
        assert "A: 1 (25%)" in rendered

    def test_lines_match_renderer(self) -> None:
        view = ChartView("sparkline", data=[{"key": "a", "value": 1}, {"key": "b", "value": 2}],
                         options={"height": 2})
        assert view.chart_lines() == ["2 | *", "1 |**"]

    def test_scatter_is_flattened(self) -> None:
        data = [{"key": "A", "value": [0, 0]}, {"key": "B", "value": [4, 4]}]
        view = ChartView("scatter", data=data, options={"width": 4, "height": 4})
        rendered = str(view.render())
        assert "\x1b" not in rendered
        assert "Y Axis" in rendered.splitlines()[0]

    def test_colors_become_styles(self) -> None:
        view = ChartView("bar", data=[{"key": "A", "value": 1, "style": "\x1b[31m#\x1b[0m"}],
                         options={"height": 2})
        result = view.render()
        assert "\x1b" not in str(result)
        assert "###" in str(result)
        assert result.spans

    def test_error_is_shown(self) -> None:
        view = ChartView("pie", data=[{"key": "A", "value": -1}])
        result = view.render()
        assert "Invalid data" in str(result)
        assert result.style == "red"

    def test_unknown_chart(self) -> None:
        view = ChartView("radar", data=PIE)
        assert "Unknown chart type" in str(view.render())

    def test_content_height(self) -> None:
        view = ChartView("pie", data=PIE, options={"radius": 3})
        assert view.get_content_height(None, None, 80) == 6 + 1 + 2
        assert ChartView("bar").get_content_height(None, None, 80) == 1
