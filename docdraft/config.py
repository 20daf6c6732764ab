"""Configuration for building and applying drafts."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Optional


@dataclass(slots=True)
class DraftConfig:
    """Defaults shared by every node of a draft."""
    spacing_before: float = 10.0
    mono_font: str = "Courier New"
    mono_color: str = "#666666"
    link_color: str = "#1155CC"
    # Some backends only honor list glyph/nesting once every sibling item exists.
    reassert_list_attributes: bool = True
    strict_glyphs: bool = False

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "DraftConfig":
        """Create config from a dictionary, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in (data or {}).items() if k in known})

    def with_overrides(self, **overrides: Any) -> "DraftConfig":
        """Return a copy with the given fields replaced."""
        return replace(self, **overrides)


DEFAULT_CONFIG = DraftConfig()
