"""
Utility helpers for docdraft: enumerations and logging setup.
"""

from .enums import Attribute, GlyphType, ChartKind, ColumnType
from .logger import add_file_handler, parse_level
from .rich_logger import setup_logging, print_summary

__all__ = [
    "Attribute",
    "GlyphType",
    "ChartKind",
    "ColumnType",
    "add_file_handler",
    "parse_level",
    "setup_logging",
    "print_summary",
]
