"""
Block-level element model shared by paragraphs and list items.

An element concatenates the text of its leaves, inserts itself into the
backend in one call and then hands every leaf the slice of that text it
owns. Slices are assigned strictly in insertion order: each leaf starts
where the previous one ended, so the ranges partition the inserted text
without gaps or overlaps. Rules and images report empty text and receive
a zero-width range.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple

from .base import Node
from .image import Image
from .rule import Rule
from .run import TextRun
from .style import StyleMap
from ..config import DEFAULT_CONFIG, DraftConfig
from ..exceptions import DraftStateError
from ..utils.enums import Attribute

if TYPE_CHECKING:
    from ..backend.base import Backend, Handle

logger = logging.getLogger(__name__)


class Element(Node):
    """Base class for elements inserted into the backend as one block."""

    kind = "element"

    def __init__(self, config: Optional[DraftConfig] = None):
        super().__init__()
        self.config = config or DEFAULT_CONFIG
        self.style = StyleMap()
        self.style.set(Attribute.SPACING_BEFORE, self.config.spacing_before)
        self.ranges: List[Tuple[int, int]] = []
        self._handle: Optional["Handle"] = None

    @property
    def handle(self) -> Optional["Handle"]:
        """Backend handle created by ``apply``; None before that."""
        return self._handle

    def text(self, text: str) -> TextRun:
        return self.push(TextRun(text, self.config))

    def rule(self) -> Rule:
        return self.push(Rule())

    def image(self) -> Image:
        return self.push(Image())

    def spacing_before(self, value: float) -> "Element":
        self.style.set(Attribute.SPACING_BEFORE, value)
        return self

    def spacing_after(self, value: float) -> "Element":
        self.style.set(Attribute.SPACING_AFTER, value)
        return self

    def get_text(self) -> str:
        return "".join(child.get_text() for child in self.children)

    def _insert(self, backend: "Backend", index: int, text: str) -> "Handle":
        raise NotImplementedError

    def apply(self, backend: "Backend") -> "Handle":
        """Insert the element, style it, then style each leaf over its range."""
        if self._handle is not None:
            raise DraftStateError(f"{self.__class__.__name__} has already been applied")

        text = self.get_text()
        index = backend.get_num_children()
        self._handle = self._insert(backend, index, text)
        self._handle.set_attributes(self.style)
        logger.debug(f"{self.kind} inserted at {index}: {len(text)} chars, {len(self.children)} leaves")

        self.ranges = []
        start = 0
        for child in self.children:
            end = start + len(child.get_text())
            child.apply(self._handle, start, end)
            self.ranges.append((start, end))
            start = end

        return self._handle

    def finish(self, state: Dict[str, Any]) -> None:
        """Second pass after every element of the draft has been applied."""
        return None

    def describe(self):
        return {
            'type': self.__class__.__name__,
            'style': self.style.to_dict(),
            'children': [child.describe() for child in self.children],
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(text={self.get_text()!r}, children={len(self.children)})"
