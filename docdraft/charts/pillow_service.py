"""
Chart rendering with Pillow.

Draws line and column charts for a date/number table into a PNG image.
Recognised options:

- ``width`` / ``height``: overall image size in pixels
- ``colors``: series colors, first entry is used
- ``gridlines``: number of horizontal gridlines
- ``axis_text``: ``{"color": ..., "size": ...}`` for axis labels
- ``chart_area``: ``{"left", "top", "width", "height"}`` of the plot area
- ``legend``: ``"none"``, ``"top"``, ``"bottom"`` or ``"right"``
- ``number_format``: format spec for y-axis labels (e.g. ``",.0f"``)
- ``background``: image background color
"""

from __future__ import annotations

import logging
import math
from datetime import date
from io import BytesIO
from typing import Any, Dict, List, Tuple

from PIL import Image as PILImage
from PIL import ImageDraw, ImageFont

from .dataset import DataTable
from .service import ChartService, RenderedChart
from ..exceptions import ChartError
from ..utils.enums import ChartKind

logger = logging.getLogger(__name__)

DEFAULT_OPTIONS: Dict[str, Any] = {
    "width": 600,
    "height": 400,
    "colors": ["#4285F4"],
    "gridlines": 5,
    "axis_text": {"color": "#555555", "size": 11},
    "chart_area": {"left": 70, "top": 20},
    "legend": "none",
    "number_format": ",.0f",
    "background": "#FFFFFF",
}

GRID_COLOR = "#E0E0E0"
AXIS_COLOR = "#9E9E9E"


class PillowChartService(ChartService):
    """Chart service drawing PNG charts with Pillow."""

    def render(self, kind: ChartKind, table: DataTable, options: Dict[str, Any]) -> RenderedChart:
        kind = ChartKind(kind)
        opts = {**DEFAULT_OPTIONS, **(options or {})}

        if len(table.columns) < 2:
            raise ChartError("Chart table needs an x and a y column")
        if not table.rows:
            raise ChartError("Chart table has no rows")

        width, height = int(opts["width"]), int(opts["height"])
        if width <= 0 or height <= 0:
            raise ChartError("Chart dimensions must be positive", f"{width}x{height}")

        xs = table.column_values(0)
        ys = [float(value) for value in table.column_values(1)]

        image = PILImage.new("RGB", (width, height), opts["background"])
        draw = ImageDraw.Draw(image)
        axis_text = {**DEFAULT_OPTIONS["axis_text"], **(opts.get("axis_text") or {})}
        font = ImageFont.load_default(size=axis_text["size"])

        area = self._plot_area(opts, width, height)
        low, high = self._value_range(ys)

        self._draw_grid(draw, area, low, high, opts, axis_text["color"], font)
        color = (opts.get("colors") or DEFAULT_OPTIONS["colors"])[0]
        if kind is ChartKind.LINE:
            self._draw_line(draw, area, ys, low, high, color)
        else:
            self._draw_columns(draw, area, ys, low, high, color)
        self._draw_x_labels(draw, area, xs, axis_text["color"], font)
        self._draw_legend(draw, opts.get("legend", "none"), table.labels()[1], color,
                          axis_text["color"], font, width, height, area)

        buffer = BytesIO()
        image.save(buffer, format="PNG")
        logger.debug(f"Rendered {kind.value} chart {width}x{height} with {len(ys)} points")

        rendered_options = dict(opts)
        rendered_options["width"], rendered_options["height"] = width, height
        return RenderedChart(blob=buffer.getvalue(), options=rendered_options)

    @staticmethod
    def _plot_area(opts: Dict[str, Any], width: int, height: int) -> Tuple[int, int, int, int]:
        """Return ``(left, top, right, bottom)`` of the plot area."""
        area = {**DEFAULT_OPTIONS["chart_area"], **(opts.get("chart_area") or {})}
        left, top = int(area["left"]), int(area["top"])
        area_width = area.get("width") or width - left - 20
        area_height = area.get("height") or height - top - 40
        right = min(width - 1, left + int(area_width))
        bottom = min(height - 1, top + int(area_height))
        if right <= left or bottom <= top:
            raise ChartError("Chart area does not fit the image", repr(area))
        return left, top, right, bottom

    @staticmethod
    def _value_range(values: List[float]) -> Tuple[float, float]:
        low = min(0.0, min(values))
        high = max(0.0, max(values))
        if high == low:
            high = low + 1.0
        return low, high

    @staticmethod
    def _y(value: float, area: Tuple[int, int, int, int], low: float, high: float) -> float:
        _, top, _, bottom = area
        return bottom - (value - low) / (high - low) * (bottom - top)

    @staticmethod
    def _x_positions(count: int, area: Tuple[int, int, int, int]) -> List[float]:
        left, _, right, _ = area
        slot = (right - left) / count
        return [left + slot * (i + 0.5) for i in range(count)]

    def _draw_grid(self, draw, area, low, high, opts, text_color, font) -> None:
        left, top, right, bottom = area
        intervals = max(int(opts.get("gridlines") or 0) - 1, 1)
        number_format = opts.get("number_format") or DEFAULT_OPTIONS["number_format"]

        for i in range(intervals + 1):
            value = low + (high - low) * i / intervals
            y = self._y(value, area, low, high)
            draw.line([(left, y), (right, y)], fill=GRID_COLOR)
            label = format(value, number_format)
            text_width = draw.textlength(label, font=font)
            draw.text((left - 6 - text_width, y - 6), label, fill=text_color, font=font)

        draw.line([(left, top), (left, bottom)], fill=AXIS_COLOR)
        draw.line([(left, bottom), (right, bottom)], fill=AXIS_COLOR)

    def _draw_line(self, draw, area, values, low, high, color) -> None:
        xs = self._x_positions(len(values), area)
        points = [(x, self._y(v, area, low, high)) for x, v in zip(xs, values)]
        if len(points) > 1:
            draw.line(points, fill=color, width=2)
        for x, y in points:
            draw.ellipse([x - 2, y - 2, x + 2, y + 2], fill=color)

    def _draw_columns(self, draw, area, values, low, high, color) -> None:
        left, _, right, _ = area
        bar_width = (right - left) / len(values) * 0.7
        baseline = self._y(0.0, area, low, high)
        for x, value in zip(self._x_positions(len(values), area), values):
            y = self._y(value, area, low, high)
            draw.rectangle([x - bar_width / 2, min(y, baseline), x + bar_width / 2, max(y, baseline)],
                           fill=color)

    def _draw_x_labels(self, draw, area, xs, text_color, font) -> None:
        left, _, right, bottom = area
        capacity = max(1, int((right - left) // 60))
        step = max(1, math.ceil(len(xs) / capacity))
        for i, (x, raw) in enumerate(zip(self._x_positions(len(xs), area), xs)):
            if i % step:
                continue
            label = raw.strftime("%b %d") if isinstance(raw, date) else str(raw)
            text_width = draw.textlength(label, font=font)
            draw.text((x - text_width / 2, bottom + 6), label, fill=text_color, font=font)

    @staticmethod
    def _draw_legend(draw, position, label, color, text_color, font, width, height, area) -> None:
        if not position or position == "none" or not label:
            return

        text_width = draw.textlength(label, font=font)
        box_width = 12 + 6 + text_width
        if position == "top":
            x, y = (width - box_width) / 2, 2
        elif position == "bottom":
            x, y = (width - box_width) / 2, height - 16
        elif position == "right":
            x, y = max(area[2] - box_width, 0), area[1]
        else:
            raise ChartError("Unknown legend position", repr(position))

        draw.rectangle([x, y + 2, x + 10, y + 12], fill=color)
        draw.text((x + 16, y), label, fill=text_color, font=font)
