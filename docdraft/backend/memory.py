"""
In-memory backend.

Keeps inserted blocks, their block attributes, character spans and inline
rules/images as plain Python objects so a draft can be inspected, rendered
or exported without a live document service.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union

from .base import Backend, EditableText, Handle, ImageHandle
from ..exceptions import RangeError
from ..models.style import StyleMap
from ..utils.enums import Attribute, GlyphType

logger = logging.getLogger(__name__)

Attributes = Dict[Attribute, Any]


@dataclass
class Span:
    """Attributes applied to characters ``start`` through ``end`` (inclusive)."""
    start: int
    end: int
    attributes: Attributes = field(default_factory=dict)


@dataclass
class MemoryRule:
    """Horizontal rule appended to a block."""
    kind: str = "rule"


class MemoryImage(ImageHandle):
    """Inline image appended to a block."""

    kind = "image"

    def __init__(self, blob: bytes):
        self.blob = blob
        self.attributes: Attributes = {}

    def set_attributes(self, style: StyleMap) -> None:
        self.attributes.update(style.items())

    @property
    def width(self) -> Optional[float]:
        return self.attributes.get(Attribute.WIDTH)

    @property
    def height(self) -> Optional[float]:
        return self.attributes.get(Attribute.HEIGHT)


class MemoryText(EditableText):
    """Editable-text view recording spans on its block."""

    def __init__(self, block: "MemoryBlock"):
        self.block = block

    def set_attributes(self, start: int, end_inclusive: int, style: StyleMap) -> None:
        """
        Record a span.

        The position right after the last character is accepted only as a
        zero-width mark (``start == end_inclusive == len(text)``).

        Raises:
            RangeError: If the range is reversed or leaves the block text
        """
        length = len(self.block.text)
        if start < 0 or end_inclusive < start:
            raise RangeError("Invalid character range", f"[{start}, {end_inclusive}]")
        if end_inclusive >= length and not start == end_inclusive == length:
            raise RangeError(
                "Character range outside block text",
                f"[{start}, {end_inclusive}] for {length} chars",
            )

        attributes = dict(style.items())
        self.block.spans.append(Span(start, end_inclusive, attributes))
        self.block.attribute_log.append(("text", (start, end_inclusive), attributes))


class MemoryBlock(Handle):
    """Paragraph or list item stored by the memory backend."""

    def __init__(self, kind: str, text: str):
        self.kind = kind
        self.text = text
        self.attributes: Attributes = {}
        self.spans: List[Span] = []
        self.inline: List[Union[MemoryRule, MemoryImage]] = []
        self.attribute_log: List[Tuple[str, Any, Attributes]] = []
        self._text_view = MemoryText(self)

    def set_attributes(self, style: StyleMap) -> None:
        attributes = dict(style.items())
        self.attributes.update(attributes)
        self.attribute_log.append(("block", None, attributes))

    def edit_as_text(self) -> MemoryText:
        return self._text_view

    def append_horizontal_rule(self) -> None:
        self.inline.append(MemoryRule())

    def append_inline_image(self, blob: bytes) -> MemoryImage:
        image = MemoryImage(blob)
        self.inline.append(image)
        return image

    def get_num_children(self) -> int:
        return (1 if self.text else 0) + len(self.inline)

    @property
    def level(self) -> int:
        return int(self.attributes.get(Attribute.NESTING_LEVEL) or 0)

    @property
    def glyph(self) -> Optional[GlyphType]:
        return self.attributes.get(Attribute.GLYPH_TYPE)

    def styled_segments(self) -> List[Tuple[str, Attributes]]:
        """
        Split the text into runs of equally styled characters.

        Spans are overlaid in the order they were applied, so later spans
        win for the attributes they set.
        """
        if not self.text:
            return []

        per_char: List[Attributes] = [{} for _ in self.text]
        for span in self.spans:
            for index in range(span.start, min(span.end, len(self.text) - 1) + 1):
                per_char[index].update(span.attributes)

        segments: List[Tuple[str, Attributes]] = []
        for char, attributes in zip(self.text, per_char):
            if segments and segments[-1][1] == attributes:
                segments[-1] = (segments[-1][0] + char, attributes)
            else:
                segments.append((char, attributes))
        return segments

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "text": self.text,
            "attributes": _plain(self.attributes),
            "spans": [
                {"start": span.start, "end": span.end, "attributes": _plain(span.attributes)}
                for span in self.spans
            ],
            "inline": [
                {"kind": "image", "bytes": len(item.blob), "attributes": _plain(item.attributes)}
                if isinstance(item, MemoryImage) else {"kind": "rule"}
                for item in self.inline
            ],
        }

    def __repr__(self) -> str:
        return f"MemoryBlock({self.kind}, {self.text!r})"


def _plain(attributes: Attributes) -> Dict[str, Any]:
    return {
        key.value: value.value if isinstance(value, GlyphType) else value
        for key, value in attributes.items()
    }


class MemoryBackend(Backend):
    """
    Document body held in memory.

    Args:
        reset_list_glyphs: Mimic editors that reset the glyph of earlier list
            items whenever another list item is inserted.
    """

    def __init__(self, reset_list_glyphs: bool = False):
        self.blocks: List[MemoryBlock] = []
        self.reset_list_glyphs = reset_list_glyphs

    def get_num_children(self) -> int:
        return len(self.blocks)

    def insert_paragraph(self, index: int, text: str) -> MemoryBlock:
        return self._insert("paragraph", index, text)

    def insert_list_item(self, index: int, text: str) -> MemoryBlock:
        if self.reset_list_glyphs:
            for block in self.blocks:
                if block.kind == "list_item" and Attribute.GLYPH_TYPE in block.attributes:
                    block.attributes[Attribute.GLYPH_TYPE] = GlyphType.BULLET
        return self._insert("list_item", index, text)

    def _insert(self, kind: str, index: int, text: str) -> MemoryBlock:
        if not 0 <= index <= len(self.blocks):
            raise RangeError("Insertion index out of range", f"{index} for {len(self.blocks)} blocks")
        block = MemoryBlock(kind, text)
        self.blocks.insert(index, block)
        logger.debug(f"Inserted {kind} at {index}")
        return block

    def get_text(self) -> str:
        return "\n".join(block.text for block in self.blocks)

    def to_dict(self) -> Dict[str, Any]:
        return {"blocks": [block.to_dict() for block in self.blocks]}
