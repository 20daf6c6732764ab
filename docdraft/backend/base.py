"""
Backend interfaces a draft is applied to.

A backend owns the document body. Inserting an element returns a handle
that exposes block styling, an editable-text view for character ranges
and appenders for inline rules and images.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..models.style import StyleMap


class EditableText(ABC):
    """Character-level view of an inserted block."""

    @abstractmethod
    def set_attributes(self, start: int, end_inclusive: int, style: StyleMap) -> None:
        """Apply ``style`` to characters ``start`` through ``end_inclusive``."""


class ImageHandle(ABC):
    """Inline image inserted into a block."""

    @abstractmethod
    def set_attributes(self, style: StyleMap) -> None:
        """Apply ``style`` (width, height) to the image."""


class Handle(ABC):
    """Block returned by the backend after insertion."""

    @abstractmethod
    def set_attributes(self, style: StyleMap) -> None:
        """Apply block-level ``style``."""

    @abstractmethod
    def edit_as_text(self) -> EditableText:
        """Return the editable-text view of the block."""

    @abstractmethod
    def append_horizontal_rule(self) -> None:
        """Append a horizontal rule to the block."""

    @abstractmethod
    def append_inline_image(self, blob: bytes) -> ImageHandle:
        """Append an inline image built from ``blob``."""

    @abstractmethod
    def get_num_children(self) -> int:
        """Number of inline children of the block."""


class Backend(ABC):
    """Document body elements are inserted into."""

    @abstractmethod
    def get_num_children(self) -> int:
        """Number of blocks currently in the body."""

    @abstractmethod
    def insert_paragraph(self, index: int, text: str) -> Handle:
        """Insert a paragraph holding ``text`` at ``index``."""

    @abstractmethod
    def insert_list_item(self, index: int, text: str) -> Handle:
        """Insert a list item holding ``text`` at ``index``."""
