"""
List item model.

A list item is a paragraph with a nesting level and a glyph table that
assigns a marker style to each depth. The three predefined tables cycle
through visually distinct markers so that nested levels can be told apart.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, Optional, Tuple

from .element import Element
from .style import BULLET_GLYPHS, LATIN_GLYPHS, NUMBER_GLYPHS
from ..config import DraftConfig
from ..exceptions import DraftStateError, GlyphError
from ..utils.enums import Attribute, GlyphType

if TYPE_CHECKING:
    from ..backend.base import Backend, Handle

logger = logging.getLogger(__name__)


class ListItem(Element):
    """Represents a list item with nesting level and per-level glyphs."""

    kind = "list_item"

    def __init__(self, config: Optional[DraftConfig] = None):
        super().__init__(config)
        self.level: int = 0
        self.glyphs: Tuple[GlyphType, ...] = BULLET_GLYPHS
        self.nest(0)

    def _insert(self, backend: "Backend", index: int, text: str) -> "Handle":
        return backend.insert_list_item(index, text)

    def nest(self, level: int) -> "ListItem":
        """
        Set nesting level and the glyph configured for it.

        A level past the end of the glyph table sets the glyph to None
        (no wraparound). With ``strict_glyphs`` enabled it raises instead.

        Raises:
            ValueError: If level is negative
            GlyphError: If level has no glyph and strict glyphs are enabled
        """
        if level < 0:
            raise ValueError(f"Nesting level must be >= 0, got {level}")

        glyph = self.glyphs[level] if level < len(self.glyphs) else None
        if glyph is None:
            if self.config.strict_glyphs:
                raise GlyphError(
                    f"No glyph for nesting level {level}",
                    f"table has {len(self.glyphs)} entries",
                )
            logger.warning(f"No glyph for nesting level {level} (table has {len(self.glyphs)} entries)")

        self.level = level
        self.style.set(Attribute.NESTING_LEVEL, level)
        self.style.set(Attribute.GLYPH_TYPE, glyph)
        return self

    def glyph_type(self, level: int, *glyphs: GlyphType) -> "ListItem":
        """
        Replace the glyph table.

        The item is re-nested at its current level; ``level`` does not move it.
        """
        self.glyphs = tuple(GlyphType(glyph) for glyph in glyphs)
        return self.nest(self.level)

    def bullet(self) -> "ListItem":
        return self.glyph_type(self.level, *BULLET_GLYPHS)

    def number(self) -> "ListItem":
        return self.glyph_type(self.level, *NUMBER_GLYPHS)

    def latin(self) -> "ListItem":
        return self.glyph_type(self.level, *LATIN_GLYPHS)

    def finish(self, state: Dict[str, Any]) -> None:
        """Re-apply the block style on the existing handle."""
        if not self.config.reassert_list_attributes:
            return
        if self._handle is None:
            raise DraftStateError("ListItem cannot be finished before it is applied")
        self._handle.set_attributes(self.style)
