"""
Draft: root of a document tree.

Build the whole tree first, then call ``apply`` once. Applying walks the
top-level elements in insertion order and then runs the finish pass over
them. Nothing is caught: the first failing element aborts the rest and the
backend keeps whatever was inserted before the failure.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, Optional

from .base import Node
from .element import Element
from .list_item import ListItem
from .paragraph import Paragraph
from ..config import DEFAULT_CONFIG, DraftConfig
from ..exceptions import DraftStateError

if TYPE_CHECKING:
    from ..backend.base import Backend

logger = logging.getLogger(__name__)


class Draft(Node):
    """Root node owning the top-level elements of a document."""

    def __init__(self, config: Optional[DraftConfig] = None):
        super().__init__()
        self.config = config or DEFAULT_CONFIG
        # Local state handed to the finish pass; the draft never writes to it.
        self.state: Dict[str, Any] = {}
        self._applied = False

    def paragraph(self) -> Paragraph:
        return self.push(Paragraph(self.config))

    def list_item(self) -> ListItem:
        return self.push(ListItem(self.config))

    @property
    def applied(self) -> bool:
        return self._applied

    def apply(self, backend: "Backend") -> None:
        """
        Apply every element to ``backend`` and run the finish pass.

        Raises:
            DraftStateError: If the draft was applied before
        """
        if self._applied:
            raise DraftStateError("Draft has already been applied")
        self._applied = True

        logger.debug(f"Applying draft with {len(self.children)} elements")
        for child in self.iter_children(Element):
            child.apply(backend)

        self.finish()

    def finish(self) -> None:
        """Run the second attribute pass over the top-level elements."""
        for child in self.iter_children(Element):
            child.finish(self.state)
        logger.debug("Draft finished")
