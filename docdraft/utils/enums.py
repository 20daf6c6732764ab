"""Common enumerations used across the docdraft models and backends."""

from __future__ import annotations

from enum import Enum


class Attribute(str, Enum):
    """Style attributes a backend understands."""

    BOLD = "bold"
    ITALIC = "italic"
    STRIKETHROUGH = "strikethrough"
    FONT_FAMILY = "font_family"
    FOREGROUND_COLOR = "foreground_color"
    LINK_URL = "link_url"
    SPACING_BEFORE = "spacing_before"
    SPACING_AFTER = "spacing_after"
    GLYPH_TYPE = "glyph_type"
    NESTING_LEVEL = "nesting_level"
    WIDTH = "width"
    HEIGHT = "height"


class GlyphType(str, Enum):
    """List marker styles."""

    BULLET = "bullet"
    HOLLOW_BULLET = "hollow_bullet"
    SQUARE_BULLET = "square_bullet"
    NUMBER = "number"
    LATIN_UPPER = "latin_upper"
    LATIN_LOWER = "latin_lower"
    ROMAN_UPPER = "roman_upper"
    ROMAN_LOWER = "roman_lower"


class ChartKind(str, Enum):
    """Chart kinds the chart service can draw."""

    LINE = "line"
    COLUMN = "column"


class ColumnType(str, Enum):
    """Column types of a chart data table."""

    DATE = "date"
    NUMBER = "number"
    STRING = "string"
