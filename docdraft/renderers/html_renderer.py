"""
HTML rendering of a memory backend document.

Produces a standalone page: paragraphs become ``<p>``, list items become
indented ``<div>`` rows with their marker, character spans become inline
tags and images are embedded as data URIs.
"""

from __future__ import annotations

import base64
import html
import logging
from pathlib import Path
from io import BytesIO
from typing import Any, Dict, List, Union

from PIL import Image as PILImage
from PIL import UnidentifiedImageError

from .markers import MarkerFormatter
from ..backend.memory import MemoryBackend, MemoryBlock, MemoryImage
from ..utils.enums import Attribute

logger = logging.getLogger(__name__)

DEFAULT_CSS = """body { font-family: Arial, sans-serif; font-size: 11pt; line-height: 1.4; }
p, .list-item { margin: 0; }
.list-item .marker { display: inline-block; min-width: 1.5em; }
hr { border: none; border-top: 1px solid #ccc; }"""


class HTMLRenderer:
    """Exports a memory backend document to HTML."""

    def __init__(self, document: MemoryBackend, title: str = "Document", include_css: bool = True):
        """
        Initialize HTML renderer.

        Args:
            document: Applied memory backend
            title: Page title
            include_css: Whether to include default CSS
        """
        self.document = document
        self.title = title
        self.include_css = include_css

    def render(self) -> str:
        """Generate complete HTML document."""
        html_parts = [
            '<!DOCTYPE html>',
            '<html lang="en">',
            '<head>',
            '<meta charset="UTF-8">',
            f'<title>{html.escape(self.title)}</title>',
        ]
        if self.include_css:
            html_parts.append(f'<style>\n{DEFAULT_CSS}\n</style>')
        html_parts.append('</head>')
        html_parts.append('<body>')
        html_parts.extend(self.render_blocks())
        html_parts.append('</body>')
        html_parts.append('</html>')
        return '\n'.join(html_parts)

    def render_blocks(self) -> List[str]:
        markers = MarkerFormatter()
        parts: List[str] = []

        for block in self.document.blocks:
            content = self._render_text(block)
            style = self._block_style(block)
            if block.kind == "list_item":
                marker = markers.format(block.glyph, block.level)
                style += f"margin-left: {1.5 * (block.level + 1):g}em;"
                parts.append(
                    f'<div class="list-item level-{block.level}" style="{style}">'
                    f'<span class="marker">{html.escape(marker)}</span>{content}</div>'
                )
            else:
                markers.reset()
                parts.append(f'<p style="{style}">{content}</p>' if style else f'<p>{content}</p>')

            for item in block.inline:
                if isinstance(item, MemoryImage):
                    parts.append(self._render_image(item))
                else:
                    parts.append('<hr>')

        return parts

    @staticmethod
    def _block_style(block: MemoryBlock) -> str:
        style = ""
        before = block.attributes.get(Attribute.SPACING_BEFORE)
        after = block.attributes.get(Attribute.SPACING_AFTER)
        if before is not None:
            style += f"margin-top: {before:g}pt;"
        if after is not None:
            style += f"margin-bottom: {after:g}pt;"
        return style

    def _render_text(self, block: MemoryBlock) -> str:
        return "".join(self._render_segment(text, attributes)
                       for text, attributes in block.styled_segments())

    @staticmethod
    def _render_segment(text: str, attributes: Dict[Attribute, Any]) -> str:
        result = html.escape(text)
        if attributes.get(Attribute.BOLD):
            result = f"<strong>{result}</strong>"
        if attributes.get(Attribute.ITALIC):
            result = f"<em>{result}</em>"
        if attributes.get(Attribute.STRIKETHROUGH):
            result = f"<s>{result}</s>"

        css = []
        if attributes.get(Attribute.FONT_FAMILY):
            css.append(f"font-family: '{attributes[Attribute.FONT_FAMILY]}', monospace")
        if attributes.get(Attribute.FOREGROUND_COLOR):
            css.append(f"color: {attributes[Attribute.FOREGROUND_COLOR]}")
        if css:
            result = f'<span style="{html.escape("; ".join(css))}">{result}</span>'

        url = attributes.get(Attribute.LINK_URL)
        if url:
            result = f'<a href="{html.escape(url, quote=True)}">{result}</a>'
        return result

    @staticmethod
    def _render_image(image: MemoryImage) -> str:
        try:
            with PILImage.open(BytesIO(image.blob)) as pil_img:
                mime = PILImage.MIME.get(pil_img.format or "", "image/png")
        except UnidentifiedImageError:
            logger.warning(f"Unrecognised image data ({len(image.blob)} bytes), embedding as octet-stream")
            mime = "application/octet-stream"
        data = base64.b64encode(image.blob).decode("ascii")
        size = ""
        if image.width is not None:
            size += f' width="{image.width:g}"'
        if image.height is not None:
            size += f' height="{image.height:g}"'
        return f'<img src="data:{mime};base64,{data}"{size} alt="">'

    def save(self, output_path: Union[str, Path]) -> Path:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.render(), encoding="utf-8")
        logger.info(f"Document exported to HTML: {output_path}")
        return output_path
