"""Text run model: a leaf holding literal text plus its character style."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from .base import Node
from .style import StyleMap
from ..config import DEFAULT_CONFIG, DraftConfig
from ..utils.enums import Attribute

if TYPE_CHECKING:
    from ..backend.base import Handle


class TextRun(Node):
    """Represents a run of text with consistent formatting."""

    def __init__(self, text: str = "", config: Optional[DraftConfig] = None):
        """Initialize run with immutable text."""
        super().__init__()
        self._text = text
        self.config = config or DEFAULT_CONFIG
        self.style = StyleMap()

    def get_text(self) -> str:
        return self._text

    def bold(self) -> "TextRun":
        self.style.set(Attribute.BOLD, True)
        return self

    def italic(self) -> "TextRun":
        self.style.set(Attribute.ITALIC, True)
        return self

    def strike(self) -> "TextRun":
        self.style.set(Attribute.STRIKETHROUGH, True)
        return self

    def mono(self) -> "TextRun":
        """Monospaced text; font family and color are always set together."""
        self.style.set(Attribute.FONT_FAMILY, self.config.mono_font)
        self.style.set(Attribute.FOREGROUND_COLOR, self.config.mono_color)
        return self

    def link(self, url: str) -> "TextRun":
        """Hyperlink the run; the link color comes with the URL."""
        self.style.set(Attribute.LINK_URL, url)
        self.style.set(Attribute.FOREGROUND_COLOR, self.config.link_color)
        return self

    def text(self, text: str) -> "TextRun":
        """Start a new sibling run in the owning element."""
        if self.parent is None:
            raise ValueError("TextRun.text() requires a run that belongs to an element")
        return self.parent.text(text)

    def apply(self, handle: "Handle", start: int, end: int) -> None:
        """
        Style ``[start, end)`` of the element text.

        Backends address ranges by inclusive last index, so the run styles
        ``[start, max(start, end - 1)]``; an empty run marks ``[start, start]``.
        """
        handle.edit_as_text().set_attributes(start, max(start, end - 1), self.style)

    def describe(self):
        return {'type': 'TextRun', 'text': self._text, 'style': self.style.to_dict()}

    def __repr__(self) -> str:
        return f"TextRun({self._text!r}, style={self.style.to_dict()!r})"
