"""
Logging utilities for metaOrchestra.

This module contains logging configuration and utilities.
"""

import logging
import sys
from typing import Optional, Union
from pathlib import Path

LOG_FORMAT = '%(asctime)s | %(levelname)s | %(name)s:%(lineno)d | %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def get_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """
    Get a logger instance for the given name.

    Loggers live under the ``metaOrchestra`` namespace so that an application
    can silence or redirect the whole library at once. Until ``setup_logging``
    or the application configures the root logger, the package logger prints
    to stdout itself.

    Args:
        name: Logger name
        level: Logging level

    Returns:
        Logger instance
    """
    if not name.startswith("metaOrchestra"):
        name = f"metaOrchestra.{name}"

    package_logger = logging.getLogger("metaOrchestra")
    if not package_logger.handlers and not logging.getLogger().handlers:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        package_logger.addHandler(console_handler)
    if package_logger.level == logging.NOTSET:
        package_logger.setLevel(level)

    return logging.getLogger(name)


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
    log_format: Optional[str] = None
) -> None:
    """
    Setup logging configuration for the entire application.

    Args:
        level: Logging level
        log_file: Optional log file path
        log_format: Optional custom log format
    """
    if log_format is None:
        log_format = LOG_FORMAT

    root = logging.getLogger()
    root.setLevel(level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(log_format, datefmt=DATE_FORMAT))
    root.addHandler(console_handler)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(log_format, datefmt=DATE_FORMAT))
        root.addHandler(file_handler)

    # Root handlers take over; a package handler would print every record twice
    package_logger = logging.getLogger("metaOrchestra")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(level)
