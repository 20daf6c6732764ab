"""Paragraph model."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .element import Element

if TYPE_CHECKING:
    from ..backend.base import Backend, Handle


class Paragraph(Element):
    """A plain paragraph of runs, rules and images."""

    kind = "paragraph"

    def _insert(self, backend: "Backend", index: int, text: str) -> "Handle":
        return backend.insert_paragraph(index, text)
