"""
Pytest configuration for docdraft
"""

import logging
import sys
from io import BytesIO
from pathlib import Path

import pytest
from PIL import Image as PILImage

from docdraft.backend.memory import MemoryBackend


def reset_package_loggers():
    """Return every docdraft logger to NOTSET without handlers."""
    for name in list(logging.root.manager.loggerDict):
        if name == "docdraft" or name.startswith("docdraft."):
            package_logger = logging.getLogger(name)
            package_logger.setLevel(logging.NOTSET)
            package_logger.handlers.clear()


@pytest.fixture(autouse=True)
def configure_logging():
    """Configure logging for tests to avoid handler and level leaks between tests."""
    reset_package_loggers()
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(logging.Formatter('%(name)s - %(levelname)s - %(message)s'))

    root_logger.addHandler(console_handler)
    root_logger.setLevel(logging.WARNING)

    yield

    for handler in root_logger.handlers:
        if isinstance(handler, logging.FileHandler):
            handler.close()
    root_logger.handlers.clear()
    reset_package_loggers()


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    import tempfile
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def backend():
    """Fresh in-memory backend."""
    return MemoryBackend()


@pytest.fixture
def png_bytes():
    """A small PNG image (8x4 pixels)."""
    buffer = BytesIO()
    PILImage.new("RGB", (8, 4), "#336699").save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def png_file(temp_dir, png_bytes):
    """The small PNG image written to disk."""
    path = temp_dir / "logo.png"
    path.write_bytes(png_bytes)
    return path
