"""
Tests for MarkerFormatter.
"""

import pytest

from docdraft.renderers.markers import MarkerFormatter
from docdraft.utils.enums import GlyphType


class TestMarkerFormatter:
    """Test cases for list marker formatting."""

    def test_numbers_count_up(self):
        formatter = MarkerFormatter()

        markers = [formatter.format(GlyphType.NUMBER, 0) for _ in range(3)]

        assert markers == ["1.", "2.", "3."]

    def test_bullets(self):
        formatter = MarkerFormatter()

        assert formatter.format(GlyphType.BULLET, 0) == "•"
        assert formatter.format(GlyphType.HOLLOW_BULLET, 1) == "◦"
        assert formatter.format(GlyphType.SQUARE_BULLET, 2) == "▪"

    def test_deeper_levels_restart(self):
        formatter = MarkerFormatter()
        formatter.format(GlyphType.NUMBER, 0)
        formatter.format(GlyphType.LATIN_LOWER, 1)
        formatter.format(GlyphType.LATIN_LOWER, 1)
        formatter.format(GlyphType.NUMBER, 0)

        assert formatter.format(GlyphType.LATIN_LOWER, 1) == "a."

    @pytest.mark.parametrize("glyph,count,expected", [
        (GlyphType.LATIN_LOWER, 2, "b."),
        (GlyphType.LATIN_UPPER, 27, "AA."),
        (GlyphType.ROMAN_LOWER, 4, "iv."),
        (GlyphType.ROMAN_UPPER, 9, "IX."),
    ])
    def test_counter_styles(self, glyph, count, expected):
        formatter = MarkerFormatter()
        for _ in range(count - 1):
            formatter.format(glyph, 0)

        assert formatter.format(glyph, 0) == expected

    def test_absent_glyph(self):
        assert MarkerFormatter().format(None, 3) == ""

    def test_reset(self):
        formatter = MarkerFormatter()
        formatter.format(GlyphType.NUMBER, 0)
        formatter.reset()

        assert formatter.format(GlyphType.NUMBER, 0) == "1."
