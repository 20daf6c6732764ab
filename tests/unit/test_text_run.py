"""
Tests for TextRun.
"""

from unittest.mock import Mock

import pytest

from docdraft.config import DraftConfig
from docdraft.models.paragraph import Paragraph
from docdraft.models.run import TextRun
from docdraft.utils.enums import Attribute


@pytest.fixture
def handle():
    """Handle mock recording editable-text calls."""
    mock_handle = Mock()
    mock_handle.edit_as_text.return_value = Mock()
    return mock_handle


class TestTextRunDecorators:
    """Chained style decorators."""

    def test_decorators_return_same_run(self):
        run = TextRun("x")

        assert run.bold() is run
        assert run.italic() is run
        assert run.strike() is run
        assert run.mono() is run
        assert run.link("https://example.com") is run

    def test_single_attribute_decorators(self):
        run = TextRun("x").bold().italic().strike()

        assert run.style.to_dict() == {"bold": True, "italic": True, "strikethrough": True}

    def test_mono_sets_font_and_color(self):
        config = DraftConfig(mono_font="Consolas", mono_color="#111111")
        run = TextRun("code", config).mono()

        assert run.style[Attribute.FONT_FAMILY] == "Consolas"
        assert run.style[Attribute.FOREGROUND_COLOR] == "#111111"

    def test_link_sets_url_and_color(self):
        run = TextRun("docs").link("https://example.com")

        assert run.style[Attribute.LINK_URL] == "https://example.com"
        assert run.style[Attribute.FOREGROUND_COLOR] == "#1155CC"

    def test_link_after_mono_overrides_color(self):
        run = TextRun("x").mono().link("https://example.com")

        assert run.style[Attribute.FOREGROUND_COLOR] == "#1155CC"
        assert run.style[Attribute.FONT_FAMILY] == "Courier New"

    def test_text_starts_sibling_run(self):
        paragraph = Paragraph()
        first = paragraph.text("a").bold()
        second = first.text("b")

        assert second is not first
        assert paragraph.children == [first, second]
        assert second.style.to_dict() == {}

    def test_text_without_parent_raises(self):
        with pytest.raises(ValueError):
            TextRun("orphan").text("next")


class TestTextRunApply:
    """Range handling when applying a run."""

    def test_styles_inclusive_range(self, handle):
        run = TextRun("Hello").bold()
        run.apply(handle, 0, 5)

        handle.edit_as_text.return_value.set_attributes.assert_called_once_with(0, 4, run.style)

    def test_offset_range(self, handle):
        run = TextRun("world")
        run.apply(handle, 6, 11)

        handle.edit_as_text.return_value.set_attributes.assert_called_once_with(6, 10, run.style)

    def test_empty_run_marks_start(self, handle):
        run = TextRun("")
        run.apply(handle, 3, 3)

        handle.edit_as_text.return_value.set_attributes.assert_called_once_with(3, 3, run.style)

    def test_single_character(self, handle):
        TextRun("x").apply(handle, 7, 8)

        args = handle.edit_as_text.return_value.set_attributes.call_args[0]
        assert args[:2] == (7, 7)
