"""Chart widget -- show any termchart chart inside a Textual app.

Usage::

    view = ChartView("pie", data=[{"key": "A", "value": 3}, {"key": "B", "value": 5}],
                     options={"radius": 5})
"""

from __future__ import annotations

from typing import Any

from textual.reactive import reactive
from textual.widget import Widget

from rich.text import Text

from termchart.charts import CHARTS
from termchart.core.cursor import Canvas
from termchart.errors import ChartError
from termchart.terminal import FALLBACK_SIZE


class ChartView(Widget):
    """Renders a chart string as Rich text.

    Cursor movement in the chart stream (scatter plots) is resolved through a
    ``Canvas`` first, then ANSI colors are converted to Rich styles. Invalid
    data shows the error message instead of raising inside the app.
    """

    DEFAULT_CSS = """
    ChartView {
        height: auto;
    }
    """

    chart: reactive[str] = reactive("bar", layout=True)
    data: reactive[list[Any]] = reactive(list, layout=True)
    options: reactive[dict[str, Any]] = reactive(dict, layout=True)

    def __init__(
        self,
        chart: str = "bar",
        data: list[Any] | None = None,
        options: dict[str, Any] | None = None,
        *,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(name=name, id=id, classes=classes)
        self.chart = chart
        self.data = list(data) if data else []
        self.options = dict(options) if options else {}

    def chart_lines(self) -> list[str]:
        """The chart as flattened lines, still carrying ANSI colors."""
        renderer = CHARTS.get(self.chart)
        if renderer is None:
            raise ChartError(f"Unknown chart type: {self.chart!r}")
        stream = renderer(self.data, self.options, terminal_size=self._widget_size)
        return Canvas().feed(stream).lines()

    def _widget_size(self) -> tuple[int, int]:
        """Size defaults follow the widget, not the host terminal."""
        width, height = self.size.width, self.size.height
        return width or FALLBACK_SIZE[0], height or FALLBACK_SIZE[1]

    def render(self) -> Text:
        if not self.data:
            return Text("(no data)")
        try:
            lines = self.chart_lines()
        except ChartError as e:
            return Text(str(e), style="red")
        return Text("\n").join(Text.from_ansi(line) for line in lines)

    def get_content_height(self, container, viewport, width: int) -> int:  # noqa: ANN001
        """Report the number of rows needed."""
        if not self.data:
            return 1
        try:
            return max(len(self.chart_lines()), 1)
        except ChartError:
            return 1
