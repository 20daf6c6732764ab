"""
Draft loader.

Builds a Draft from a JSON description:

    {
      "config": {"spacing_before": 12},
      "blocks": [
        {"type": "paragraph", "spacing_after": 6,
         "children": [{"text": "Hello ", "bold": true}, {"text": "world", "link": "https://example.com"}]},
        {"type": "list_item", "glyphs": "number", "level": 1,
         "children": [{"text": "Nested"}]},
        {"type": "paragraph",
         "children": [{"rule": true},
                      {"image": {"path": "logo.png", "scale": 0.5}},
                      {"image": {"chart": {"kind": "column", "points": [["2024-01-01", 3]]}}}]}
      ]
    }

Relative paths are resolved against ``base_dir`` (the JSON file directory
when loading from a file).
"""

from __future__ import annotations

import json
import logging
from datetime import date
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .charts.dataset import DataTable
from .config import DraftConfig
from .exceptions import LoaderError
from .models.chart import Chart
from .models.draft import Draft
from .models.element import Element
from .models.image import Image
from .models.list_item import ListItem

logger = logging.getLogger(__name__)

RUN_FLAGS = ("bold", "italic", "strike", "mono")
GLYPH_FAMILIES = ("bullet", "number", "latin")


class DraftLoader:
    """Converts a JSON description into a Draft."""

    def __init__(self, data: Dict[str, Any], base_dir: Optional[Union[str, Path]] = None,
                 config: Optional[DraftConfig] = None):
        """
        Args:
            data: Parsed JSON description
            base_dir: Directory relative image and workbook paths are resolved against
            config: Config overriding the ``config`` section of the description
        """
        if not isinstance(data, dict):
            raise LoaderError("Draft description must be a JSON object")
        self.data = data
        self.base_dir = Path(base_dir) if base_dir else Path.cwd()
        self.config = config or DraftConfig.from_dict(data.get("config"))

    @classmethod
    def from_file(cls, path: Union[str, Path], config: Optional[DraftConfig] = None) -> "DraftLoader":
        path = Path(path)
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError as e:
            raise LoaderError("Draft description not found", str(path)) from e
        except json.JSONDecodeError as e:
            raise LoaderError("Draft description is not valid JSON", str(e)) from e
        return cls(data, base_dir=path.parent, config=config)

    def load(self) -> Draft:
        draft = Draft(self.config)
        blocks = self.data.get("blocks", [])
        if not isinstance(blocks, list):
            raise LoaderError("'blocks' must be a list")

        for index, block in enumerate(blocks):
            if not isinstance(block, dict):
                raise LoaderError("Block must be a JSON object", f"block {index}")
            block_type = block.get("type", "paragraph")
            if block_type not in ("paragraph", "list_item"):
                raise LoaderError("Unknown block type", f"{block_type!r} at block {index}")

            try:
                if block_type == "paragraph":
                    element = draft.paragraph()
                else:
                    element = self._list_item(draft.list_item(), block)
                self._element(element, block)
            except (TypeError, ValueError) as e:
                raise LoaderError(f"Invalid block {index}", str(e)) from e

        logger.debug(f"Loaded draft with {len(draft.children)} blocks")
        return draft

    def _list_item(self, item: ListItem, block: Dict[str, Any]) -> ListItem:
        family = block.get("glyphs", "bullet")
        if family not in GLYPH_FAMILIES:
            raise LoaderError("Unknown glyph family", repr(family))
        getattr(item, family)()
        item.nest(int(block.get("level", 0)))
        return item

    def _element(self, element: Element, block: Dict[str, Any]) -> None:
        if "spacing_before" in block:
            element.spacing_before(block["spacing_before"])
        if "spacing_after" in block:
            element.spacing_after(block["spacing_after"])

        for child in block.get("children", []):
            if not isinstance(child, dict):
                raise LoaderError("Child must be a JSON object", json.dumps(child, default=str))
            if "text" in child:
                run = element.text(str(child["text"]))
                for flag in RUN_FLAGS:
                    if child.get(flag):
                        getattr(run, flag)()
                if child.get("link"):
                    run.link(child["link"])
            elif child.get("rule"):
                element.rule()
            elif "image" in child:
                self._image(element.image(), child["image"])
            else:
                raise LoaderError("Unknown child", json.dumps(child, default=str))

    def _image(self, image: Image, entry: Dict[str, Any]) -> None:
        if not isinstance(entry, dict):
            raise LoaderError("Image must be a JSON object", json.dumps(entry, default=str))
        if "chart" in entry:
            image.from_chart(self._chart(entry["chart"]))
        elif "path" in entry:
            image.from_file(self.base_dir / entry["path"])
        else:
            raise LoaderError("Image needs a 'path' or a 'chart'")

        if "width" in entry:
            image.width(entry["width"])
        if "height" in entry:
            image.height(entry["height"])
        if "scale" in entry:
            image.scale(entry["scale"])

    def _chart(self, entry: Dict[str, Any]) -> Chart:
        if not isinstance(entry, dict):
            raise LoaderError("Chart must be a JSON object", json.dumps(entry, default=str))
        chart = Chart(entry.get("kind", "line"))

        if "xlsx" in entry:
            chart.table(DataTable.from_xlsx(self.base_dir / entry["xlsx"], entry.get("sheet")))
        else:
            try:
                chart.points((date.fromisoformat(x), float(y)) for x, y in entry.get("points", []))
            except (TypeError, ValueError) as e:
                raise LoaderError("Chart points must be [ISO date, number] pairs", str(e)) from e
        if "labels" in entry:
            chart.columns(*entry["labels"])

        if "colors" in entry:
            chart.colors(*entry["colors"])
        if "gridlines" in entry:
            chart.gridlines(entry["gridlines"])
        if "axis_text" in entry:
            chart.axis_text(**entry["axis_text"])
        if "chart_area" in entry:
            chart.chart_area(**entry["chart_area"])
        if "width" in entry or "height" in entry:
            chart.dimensions(entry.get("width", 600), entry.get("height", 400))
        if "legend" in entry:
            chart.legend(entry["legend"])
        if "number_format" in entry:
            chart.number_format(entry["number_format"])
        return chart


def load_draft(path: Union[str, Path], config: Optional[DraftConfig] = None) -> Draft:
    """Load a draft from a JSON file."""
    return DraftLoader.from_file(path, config=config).load()
