"""Horizontal rule model."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .base import Node

if TYPE_CHECKING:
    from ..backend.base import Handle


class Rule(Node):
    """A horizontal rule; contributes no text to its element."""

    def apply(self, handle: "Handle", start: int, end: int) -> None:
        handle.append_horizontal_rule()

    def describe(self):
        return {'type': 'Rule'}
