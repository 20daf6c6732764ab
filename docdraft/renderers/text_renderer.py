"""Plain-text rendering of a memory backend document."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Union

from .markers import MarkerFormatter
from ..backend.memory import MemoryBackend, MemoryImage

logger = logging.getLogger(__name__)


class TextRenderer:
    """Renders blocks as lines of text, list items indented by level."""

    def __init__(self, document: MemoryBackend, indent: str = "  "):
        self.document = document
        self.indent = indent

    def render(self) -> str:
        markers = MarkerFormatter()
        lines: List[str] = []

        for block in self.document.blocks:
            if block.kind == "list_item":
                marker = markers.format(block.glyph, block.level)
                prefix = self.indent * block.level + (f"{marker} " if marker else "")
            else:
                markers.reset()
                prefix = ""

            lines.append(prefix + block.text)
            for item in block.inline:
                if isinstance(item, MemoryImage):
                    lines.append(f"[image {_dimension(item.width)}x{_dimension(item.height)}]")
                else:
                    lines.append("----")

        return "\n".join(lines) + ("\n" if lines else "")

    def save(self, output_path: Union[str, Path]) -> Path:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.render(), encoding="utf-8")
        logger.info(f"Document exported to text: {output_path}")
        return output_path


def _dimension(value) -> str:
    if value is None:
        return "?"
    return str(int(value)) if float(value).is_integer() else f"{value:g}"
