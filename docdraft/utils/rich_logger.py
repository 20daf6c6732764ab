"""
Rich logging for docdraft.

Console logging with colors and tracebacks rendered by the rich library.
"""

import logging
from typing import Any, Dict, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table


def _rich_handler(console: Console) -> RichHandler:
    handler = RichHandler(
        console=console,
        show_time=True,
        show_path=True,
        markup=False,
        rich_tracebacks=True
    )
    handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
    return handler


def setup_logging(level: str = "INFO", console: Optional[Console] = None) -> Console:
    """
    Route root logging through a rich handler.

    Args:
        level: Log level
        console: Console to write to (stderr by default)

    Returns:
        The console used by the handler
    """
    console = console or Console(stderr=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    root_logger.handlers.clear()
    root_logger.addHandler(_rich_handler(console))

    return console


def print_summary(console: Console, title: str, data: Dict[str, Any]) -> None:
    """Display a key/value summary as a rich table."""
    table = Table(title=title)
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="magenta")

    for key, value in data.items():
        table.add_row(str(key), str(value))

    console.print(table)
