"""
Base node class for draft trees.

Every builder node owns an ordered list of children; ``push`` keeps the
insertion order and hands the child back so configuration can be chained.
"""

from typing import Any, Iterator, List, Optional, Type, TypeVar
import logging

logger = logging.getLogger(__name__)

N = TypeVar("N", bound="Node")


class Node:
    """Base class for draft nodes with tree helpers."""

    def __init__(self):
        """Initialize node."""
        self.parent: Optional['Node'] = None
        self.children: List['Node'] = []

    def push(self, child: N) -> N:
        """Append child and return it unchanged."""
        self.children.append(child)
        child.parent = self
        return child

    def iter_children(self, type_filter: Optional[Type['Node']] = None) -> Iterator['Node']:
        """Iterate over children, optionally filtered by type."""
        for child in self.children:
            if type_filter is None or isinstance(child, type_filter):
                yield child

    def get_text(self) -> str:
        """Text this node contributes to its block."""
        return ""

    def describe(self) -> Any:
        """Plain-data view of the node, used for debugging and logging."""
        return {
            'type': self.__class__.__name__,
            'children': [child.describe() for child in self.children],
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(children={len(self.children)})"
