"""Chart service interface and the rendered chart it returns."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict

from .dataset import DataTable
from ..utils.enums import ChartKind


@dataclass
class RenderedChart:
    """Image data plus the options the chart was drawn with."""
    blob: bytes
    options: Dict[str, Any] = field(default_factory=dict)
    mime_type: str = "image/png"

    def get_blob(self) -> bytes:
        return self.blob

    def get_options(self) -> Dict[str, Any]:
        return dict(self.options)


class ChartService(ABC):
    """Turns a data table and display options into an image."""

    @abstractmethod
    def render(self, kind: ChartKind, table: DataTable, options: Dict[str, Any]) -> RenderedChart:
        """Draw ``table`` as a chart of ``kind``."""
