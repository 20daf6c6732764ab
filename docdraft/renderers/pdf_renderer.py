"""
PDF rendering of a memory backend document with ReportLab platypus.

Each block becomes a ``Paragraph`` flowable with inline markup for its
character spans. List items carry their marker as bullet text and are
indented by nesting level; rules become ``HRFlowable`` and images become
``Image`` flowables sized by their width/height attributes (1px = 1pt).
"""

from __future__ import annotations

import logging
from io import BytesIO
from pathlib import Path
from typing import Any, Dict, List, Union
from xml.sax.saxutils import escape, quoteattr

from PIL import Image as PILImage
from PIL import UnidentifiedImageError
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import cm
from reportlab.platypus import HRFlowable, Image, Paragraph, SimpleDocTemplate

from .markers import MarkerFormatter
from ..backend.memory import MemoryBackend, MemoryBlock, MemoryImage
from ..exceptions import MediaError
from ..utils.enums import Attribute

logger = logging.getLogger(__name__)

# Standard PDF fonts only; anything else falls back to Helvetica.
FONT_MAP = {
    "courier new": "Courier",
    "courier": "Courier",
    "consolas": "Courier",
    "roboto mono": "Courier",
    "times new roman": "Times-Roman",
    "georgia": "Times-Roman",
    "arial": "Helvetica",
    "helvetica": "Helvetica",
}

# Markers outside WinAnsi are replaced for the standard fonts.
PDF_MARKERS = {"◦": "o", "▪": "-"}

LEVEL_INDENT = 18


class PDFRenderer:
    """Exports a memory backend document to PDF."""

    def __init__(self, document: MemoryBackend, pagesize=A4, margin: float = 2 * cm):
        self.document = document
        self.pagesize = pagesize
        self.margin = margin
        self.base_style = getSampleStyleSheet()["BodyText"]

    def build_flowables(self) -> List[Any]:
        markers = MarkerFormatter()
        flowables: List[Any] = []

        for block in self.document.blocks:
            style = self._paragraph_style(block)
            markup = self._markup(block)
            if block.kind == "list_item":
                marker = markers.format(block.glyph, block.level)
                marker = PDF_MARKERS.get(marker, marker)
                flowables.append(Paragraph(markup, style, bulletText=marker or None))
            else:
                markers.reset()
                flowables.append(Paragraph(markup, style))

            for item in block.inline:
                if isinstance(item, MemoryImage):
                    flowables.append(self._image(item))
                else:
                    flowables.append(HRFlowable(width="100%", thickness=0.5, color=colors.HexColor("#CCCCCC"),
                                                spaceBefore=4, spaceAfter=4))

        return flowables

    def _paragraph_style(self, block: MemoryBlock) -> ParagraphStyle:
        level = block.level if block.kind == "list_item" else 0
        indent = LEVEL_INDENT * (level + 1) if block.kind == "list_item" else 0
        return ParagraphStyle(
            name=f"{block.kind}-{level}",
            parent=self.base_style,
            spaceBefore=float(block.attributes.get(Attribute.SPACING_BEFORE) or 0),
            spaceAfter=float(block.attributes.get(Attribute.SPACING_AFTER) or 0),
            leftIndent=indent,
            bulletIndent=max(indent - LEVEL_INDENT, 0),
        )

    def _markup(self, block: MemoryBlock) -> str:
        return "".join(self._segment_markup(text, attributes)
                       for text, attributes in block.styled_segments())

    @staticmethod
    def _segment_markup(text: str, attributes: Dict[Attribute, Any]) -> str:
        result = escape(text)
        if attributes.get(Attribute.BOLD):
            result = f"<b>{result}</b>"
        if attributes.get(Attribute.ITALIC):
            result = f"<i>{result}</i>"
        if attributes.get(Attribute.STRIKETHROUGH):
            result = f"<strike>{result}</strike>"

        font_attrs = ""
        family = attributes.get(Attribute.FONT_FAMILY)
        if family:
            font_attrs += f" face={quoteattr(FONT_MAP.get(str(family).lower(), 'Helvetica'))}"
        color = attributes.get(Attribute.FOREGROUND_COLOR)
        if color:
            font_attrs += f" color={quoteattr(str(color))}"
        if font_attrs:
            result = f"<font{font_attrs}>{result}</font>"

        url = attributes.get(Attribute.LINK_URL)
        if url:
            result = f"<a href={quoteattr(str(url))}>{result}</a>"
        return result

    @staticmethod
    def _image(image: MemoryImage) -> Image:
        """
        Build an image flowable.

        Raises:
            MediaError: If the blob is not an image format Pillow recognises
        """
        try:
            with PILImage.open(BytesIO(image.blob)):
                pass
        except UnidentifiedImageError as e:
            raise MediaError("Unrecognised image data", f"{len(image.blob)} bytes") from e

        kwargs = {}
        if image.width is not None:
            kwargs["width"] = float(image.width)
        if image.height is not None:
            kwargs["height"] = float(image.height)
        return Image(BytesIO(image.blob), **kwargs)

    def save(self, output_path: Union[str, Path]) -> Path:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        doc = SimpleDocTemplate(
            str(output_path),
            pagesize=self.pagesize,
            leftMargin=self.margin,
            rightMargin=self.margin,
            topMargin=self.margin,
            bottomMargin=self.margin,
        )
        doc.build(self.build_flowables())
        logger.info(f"Document exported to PDF: {output_path}")
        return output_path
