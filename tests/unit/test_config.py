"""
Tests for configuration, exceptions and logging helpers.
"""

import logging

import pytest
from rich.console import Console
from rich.logging import RichHandler

from docdraft.config import DEFAULT_CONFIG, DraftConfig
from docdraft.exceptions import DocDraftError, RangeError
from docdraft.utils.logger import add_file_handler, parse_level
from docdraft.utils.rich_logger import print_summary, setup_logging


class TestDraftConfig:
    """Test cases for DraftConfig."""

    def test_defaults(self):
        assert DEFAULT_CONFIG.spacing_before == 10.0
        assert DEFAULT_CONFIG.reassert_list_attributes is True
        assert DEFAULT_CONFIG.strict_glyphs is False

    def test_from_dict_ignores_unknown(self):
        config = DraftConfig.from_dict({"mono_font": "Menlo", "unknown": 1})

        assert config.mono_font == "Menlo"
        assert config.link_color == "#1155CC"

    def test_from_none(self):
        assert DraftConfig.from_dict(None) == DraftConfig()

    def test_with_overrides(self):
        config = DEFAULT_CONFIG.with_overrides(strict_glyphs=True)

        assert config.strict_glyphs is True
        assert DEFAULT_CONFIG.strict_glyphs is False


class TestExceptions:
    """Exception formatting."""

    def test_message_with_details(self):
        error = RangeError("Character range outside block text", "[0, 5] for 3 chars")

        assert str(error) == "Character range outside block text: [0, 5] for 3 chars"
        assert isinstance(error, DocDraftError)

    def test_message_only(self):
        assert str(DocDraftError("boom")) == "boom"


class TestLogging:
    """Logging helpers."""

    def test_file_handler_writes_records(self, temp_dir):
        log_file = temp_dir / "logs" / "docdraft.log"
        root_logger = logging.getLogger()
        root_logger.setLevel(logging.DEBUG)

        handler = add_file_handler(root_logger, str(log_file), "DEBUG")
        logging.getLogger("docdraft.file_output").debug("written to file")
        handler.close()

        assert "written to file" in log_file.read_text(encoding="utf-8")

    def test_file_handler_level(self, temp_dir):
        handler = add_file_handler(logging.getLogger(), str(temp_dir / "docdraft.log"), "error")
        handler.close()

        assert handler.level == logging.ERROR

    @pytest.mark.parametrize("path", ["", None])
    def test_file_handler_rejects_empty_path(self, path):
        with pytest.raises(ValueError):
            add_file_handler(logging.getLogger(), path)

    def test_parse_level(self):
        assert parse_level("debug") == logging.DEBUG

    def test_invalid_level(self):
        with pytest.raises(ValueError):
            parse_level("LOUD")

    def test_setup_rich_logging(self):
        console = Console(record=True, width=100)

        assert setup_logging("DEBUG", console) is console
        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], RichHandler)

    def test_print_summary(self):
        console = Console(record=True, width=100)

        print_summary(console, "Draft", {"paragraphs": 2})

        output = console.export_text()
        assert "paragraphs" in output
        assert "2" in output
