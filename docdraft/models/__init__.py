"""
Models module for draft trees.

This module contains the builder nodes: the Draft root, block elements and
their leaves, the StyleMap attribute bag and the chart builder.
"""

from .base import Node
from .style import StyleMap, BULLET_GLYPHS, NUMBER_GLYPHS, LATIN_GLYPHS
from .run import TextRun
from .rule import Rule
from .image import Image
from .element import Element
from .paragraph import Paragraph
from .list_item import ListItem
from .draft import Draft
from .chart import Chart

__all__ = [
    "Node",
    "StyleMap",
    "BULLET_GLYPHS",
    "NUMBER_GLYPHS",
    "LATIN_GLYPHS",
    "TextRun",
    "Rule",
    "Image",
    "Element",
    "Paragraph",
    "ListItem",
    "Draft",
    "Chart",
]
