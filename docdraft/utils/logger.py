"""
File logging helpers for docdraft.

Console output goes through ``rich_logger.setup_logging``; this module adds
an optional rotating log file next to it.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'


def parse_level(level: str) -> int:
    """
    Convert a level name to its numeric value.

    Raises:
        ValueError: If level is not one of LOG_LEVELS
    """
    if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
        raise ValueError(f"Invalid log level: {level}")
    return getattr(logging, level.upper())


def add_file_handler(logger: logging.Logger, file_path: str, level: str = "INFO",
                     formatter: Optional[logging.Formatter] = None,
                     max_file_size: int = 10 * 1024 * 1024, backup_count: int = 5) -> RotatingFileHandler:
    """
    Attach a rotating file handler to ``logger``.

    Args:
        logger: Logger receiving the handler (usually the root logger)
        file_path: Log file path; missing directories are created
        level: Log level of the handler
        formatter: Formatter to use (DEFAULT_FORMAT by default)
        max_file_size: Maximum log file size in bytes
        backup_count: Number of backup files to keep

    Returns:
        The attached handler
    """
    if not file_path or not isinstance(file_path, str):
        raise ValueError("File path must be a non-empty string")

    log_dir = os.path.dirname(file_path)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    file_handler = RotatingFileHandler(file_path, maxBytes=max_file_size, backupCount=backup_count,
                                       encoding='utf-8')
    file_handler.setLevel(parse_level(level))
    file_handler.setFormatter(formatter or logging.Formatter(DEFAULT_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
    logger.addHandler(file_handler)
    return file_handler
