"""
Style attribute bag shared by every styled node.

A StyleMap accumulates attribute assignments made by the chained builder
calls and is handed to the backend wholesale. Keys are ``Attribute``
members; plain strings are accepted and coerced so that misspelt keys fail
at build time instead of being silently ignored by the backend.
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, Mapping, Tuple, Union

from ..exceptions import StyleError
from ..utils.enums import Attribute, GlyphType

AttributeKey = Union[Attribute, str]

BULLET_GLYPHS: Tuple[GlyphType, ...] = (
    GlyphType.BULLET,
    GlyphType.HOLLOW_BULLET,
    GlyphType.SQUARE_BULLET,
)
NUMBER_GLYPHS: Tuple[GlyphType, ...] = (
    GlyphType.NUMBER,
    GlyphType.LATIN_LOWER,
    GlyphType.ROMAN_LOWER,
)
LATIN_GLYPHS: Tuple[GlyphType, ...] = (
    GlyphType.LATIN_UPPER,
    GlyphType.LATIN_LOWER,
    GlyphType.ROMAN_LOWER,
)


def to_attribute(key: AttributeKey) -> Attribute:
    """Coerce ``key`` to an ``Attribute``."""
    if isinstance(key, Attribute):
        return key
    try:
        return Attribute(key)
    except ValueError:
        raise StyleError("Unknown style attribute", repr(key)) from None


class StyleMap:
    """Attribute-to-value mapping with last-write-wins assignment."""

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[AttributeKey, Any] = None):
        self._values: Dict[Attribute, Any] = {}
        if values:
            self.update(values)

    def set(self, key: AttributeKey, value: Any) -> "StyleMap":
        """Assign ``value`` to ``key``; later assignments replace earlier ones."""
        self._values[to_attribute(key)] = value
        return self

    def get(self, key: AttributeKey, default: Any = None) -> Any:
        return self._values.get(to_attribute(key), default)

    def update(self, other: Union["StyleMap", Mapping[AttributeKey, Any]]) -> "StyleMap":
        """Assign every entry of ``other`` in order."""
        for key, value in other.items():
            self.set(key, value)
        return self

    def items(self) -> Iterator[Tuple[Attribute, Any]]:
        return iter(list(self._values.items()))

    def copy(self) -> "StyleMap":
        return StyleMap(self._values)

    def to_dict(self) -> Dict[str, Any]:
        """Plain dictionary with string keys and enum values unwrapped."""
        result = {}
        for key, value in self._values.items():
            if isinstance(value, GlyphType):
                value = value.value
            result[key.value] = value
        return result

    def __contains__(self, key: AttributeKey) -> bool:
        return to_attribute(key) in self._values

    def __getitem__(self, key: AttributeKey) -> Any:
        return self._values[to_attribute(key)]

    def __iter__(self) -> Iterator[Attribute]:
        return iter(list(self._values))

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, StyleMap):
            return self._values == other._values
        return NotImplemented

    def __repr__(self) -> str:
        return f"StyleMap({self.to_dict()!r})"
