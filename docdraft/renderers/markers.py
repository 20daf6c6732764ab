"""Helpers for formatting list markers of applied list items."""

from __future__ import annotations

import logging
from typing import Dict, Optional

from ..utils.enums import GlyphType

logger = logging.getLogger(__name__)

BULLET_MARKERS = {
    GlyphType.BULLET: "•",
    GlyphType.HOLLOW_BULLET: "◦",
    GlyphType.SQUARE_BULLET: "▪",
}


class MarkerFormatter:
    """Formats list markers, keeping one counter per nesting level."""

    def __init__(self) -> None:
        self._counters: Dict[int, int] = {}

    def reset(self) -> None:
        self._counters.clear()

    def format(self, glyph: Optional[GlyphType], level: int) -> str:
        """Advance the counter for ``level`` and return its marker text."""
        for deeper in [key for key in self._counters if key > level]:
            del self._counters[deeper]
        self._counters[level] = self._counters.get(level, 0) + 1
        counter = self._counters[level]

        if glyph is None:
            return ""
        glyph = GlyphType(glyph)
        if glyph in BULLET_MARKERS:
            return BULLET_MARKERS[glyph]
        return f"{self._format_counter(counter, glyph)}."

    def _format_counter(self, counter: int, glyph: GlyphType) -> str:
        if glyph is GlyphType.LATIN_LOWER:
            return self._number_to_letters(counter, lower=True)
        if glyph is GlyphType.LATIN_UPPER:
            return self._number_to_letters(counter, lower=False)
        if glyph is GlyphType.ROMAN_LOWER:
            return self._number_to_roman(counter, upper=False)
        if glyph is GlyphType.ROMAN_UPPER:
            return self._number_to_roman(counter, upper=True)
        return str(counter)

    @staticmethod
    def _number_to_letters(num: int, lower: bool = True) -> str:
        """Convert number to letters (a-z, aa-zz, etc.)."""
        if num <= 0:
            return ""

        # Excel-style numbering: a-z, aa-az, ba-bz, ... (no zero)
        num -= 1
        result = ""
        while num >= 0:
            result = chr(ord('a' if lower else 'A') + (num % 26)) + result
            num = num // 26 - 1
        return result

    @staticmethod
    def _number_to_roman(num: int, upper: bool = True) -> str:
        """Convert number to Roman numerals."""
        if num <= 0:
            return ""
        if num > 3999:
            return str(num)

        values = [
            (1000, "M"), (900, "CM"), (500, "D"), (400, "CD"),
            (100, "C"), (90, "XC"), (50, "L"), (40, "XL"),
            (10, "X"), (9, "IX"), (5, "V"), (4, "IV"),
            (1, "I"),
        ]
        roman = ""
        for value, symbol in values:
            while num >= value:
                roman += symbol
                num -= value
        return roman if upper else roman.lower()
