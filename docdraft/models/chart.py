"""
Chart builder.

Collects a date/number series and display options, hands them to a chart
service and exposes the rendered result through ``get_blob()`` and
``get_options()``, which is what ``Image.from_chart`` consumes.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, Iterable, Optional, Tuple, Union

from ..charts.dataset import DataTable
from ..charts.pillow_service import PillowChartService
from ..charts.service import ChartService, RenderedChart
from ..exceptions import ChartError
from ..utils.enums import ChartKind, ColumnType

logger = logging.getLogger(__name__)

LEGEND_POSITIONS = ("none", "top", "bottom", "right")


class Chart:
    """
    Builds a line or column chart over a date/number series.

    Every configuration call returns the builder; rendering happens lazily
    on the first ``get_blob()``/``get_options()`` and is cached until the
    builder changes.
    """

    def __init__(self, kind: Union[ChartKind, str] = ChartKind.LINE,
                 service: Optional[ChartService] = None):
        """
        Initialize chart.

        Args:
            kind: Chart kind (line or column)
            service: Chart service used to draw the image
        """
        self.kind = ChartKind(kind)
        self.service = service or PillowChartService()
        self.data = DataTable().add_column(ColumnType.DATE, "Date").add_column(ColumnType.NUMBER, "Value")
        self.options: Dict[str, Any] = {}
        self._rendered: Optional[RenderedChart] = None

        logger.debug(f"Chart initialized: {self.kind.value}")

    def _changed(self) -> "Chart":
        self._rendered = None
        return self

    def line(self) -> "Chart":
        self.kind = ChartKind.LINE
        return self._changed()

    def column(self) -> "Chart":
        self.kind = ChartKind.COLUMN
        return self._changed()

    def columns(self, x_label: str, y_label: str) -> "Chart":
        """Relabel the date and number columns, keeping existing rows."""
        rows = self.data.rows
        self.data = DataTable().add_column(ColumnType.DATE, x_label).add_column(ColumnType.NUMBER, y_label)
        self.data.rows = rows
        return self._changed()

    def point(self, x_value: date, y_value: float) -> "Chart":
        self.data.add_row(x_value, y_value)
        return self._changed()

    def points(self, values: Iterable[Tuple[date, float]]) -> "Chart":
        for x_value, y_value in values:
            self.data.add_row(x_value, y_value)
        return self._changed()

    def table(self, table: DataTable) -> "Chart":
        """Replace the dataset."""
        if len(table.columns) < 2:
            raise ChartError("Chart table needs an x and a y column")
        self.data = table
        return self._changed()

    def colors(self, *colors: str) -> "Chart":
        if not colors:
            raise ValueError("At least one color is required")
        self.options["colors"] = list(colors)
        return self._changed()

    def gridlines(self, count: int) -> "Chart":
        if count < 0:
            raise ValueError("Gridline count must be >= 0")
        self.options["gridlines"] = count
        return self._changed()

    def axis_text(self, color: str = "#555555", size: int = 11) -> "Chart":
        self.options["axis_text"] = {"color": color, "size": size}
        return self._changed()

    def chart_area(self, left: int, top: int, width: Optional[int] = None,
                   height: Optional[int] = None) -> "Chart":
        self.options["chart_area"] = {"left": left, "top": top, "width": width, "height": height}
        return self._changed()

    def dimensions(self, width: int, height: int) -> "Chart":
        if width <= 0 or height <= 0:
            raise ValueError("Chart dimensions must be positive")
        self.options["width"] = width
        self.options["height"] = height
        return self._changed()

    def legend(self, position: str) -> "Chart":
        if position not in LEGEND_POSITIONS:
            raise ValueError(f"Legend position must be one of {LEGEND_POSITIONS}")
        self.options["legend"] = position
        return self._changed()

    def number_format(self, spec: str) -> "Chart":
        self.options["number_format"] = spec
        return self._changed()

    def build(self) -> RenderedChart:
        """Render the chart through the service (cached)."""
        if self._rendered is None:
            self._rendered = self.service.render(self.kind, self.data, dict(self.options))
        return self._rendered

    def get_blob(self) -> bytes:
        return self.build().get_blob()

    def get_options(self) -> Dict[str, Any]:
        return self.build().get_options()

    def __repr__(self) -> str:
        return f"Chart(kind={self.kind.value}, points={len(self.data)})"
