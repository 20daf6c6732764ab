"""
docdraft - declarative builder for styled rich-text documents.

Compose paragraphs, list items, runs of styled text, rules and inline
images in memory, then apply the whole tree to a document backend in one
pass.

Quick Start:
    from docdraft import Draft, MemoryBackend

    draft = Draft()
    draft.paragraph().text("Hello ").bold().text("world").italic()
    draft.list_item().text("first point")
    draft.list_item().latin().nest(1).text("nested point")

    backend = MemoryBackend()
    draft.apply(backend)
"""

from .version import __version__, __version_info__

from .exceptions import (
    DocDraftError,
    StyleError,
    RangeError,
    GlyphError,
    MediaError,
    ChartError,
    DraftStateError,
    LoaderError,
)
from .config import DraftConfig, DEFAULT_CONFIG
from .utils.enums import Attribute, GlyphType, ChartKind, ColumnType
from .models import (
    Node,
    StyleMap,
    BULLET_GLYPHS,
    NUMBER_GLYPHS,
    LATIN_GLYPHS,
    TextRun,
    Rule,
    Image,
    Element,
    Paragraph,
    ListItem,
    Draft,
    Chart,
)
from .backend import Backend, Handle, EditableText, ImageHandle, MemoryBackend
from .charts import DataTable, ChartService, RenderedChart, PillowChartService
from .loader import DraftLoader, load_draft

__all__ = [
    "__version__",
    "__version_info__",
    "DocDraftError",
    "StyleError",
    "RangeError",
    "GlyphError",
    "MediaError",
    "ChartError",
    "DraftStateError",
    "LoaderError",
    "DraftConfig",
    "DEFAULT_CONFIG",
    "Attribute",
    "GlyphType",
    "ChartKind",
    "ColumnType",
    "Node",
    "StyleMap",
    "BULLET_GLYPHS",
    "NUMBER_GLYPHS",
    "LATIN_GLYPHS",
    "TextRun",
    "Rule",
    "Image",
    "Element",
    "Paragraph",
    "ListItem",
    "Draft",
    "Chart",
    "Backend",
    "Handle",
    "EditableText",
    "ImageHandle",
    "MemoryBackend",
    "DataTable",
    "ChartService",
    "RenderedChart",
    "PillowChartService",
    "DraftLoader",
    "load_draft",
]
