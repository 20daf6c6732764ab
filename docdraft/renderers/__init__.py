"""
Renderers for documents held by the memory backend.
"""

from .markers import MarkerFormatter
from .text_renderer import TextRenderer
from .html_renderer import HTMLRenderer
from .pdf_renderer import PDFRenderer

__all__ = [
    "MarkerFormatter",
    "TextRenderer",
    "HTMLRenderer",
    "PDFRenderer",
]
