"""Logging setup for the ffdriver CLI.

configure_logging() attaches handlers to the ``ffdriver`` package logger
only; applications embedding the library keep control of the root logger.
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

from ffdriver.logging.handlers import JSONFormatter, TextFormatter

if TYPE_CHECKING:
    from ffdriver.config.models import LoggingConfig

PACKAGE_LOGGER = "ffdriver"


def _file_handler(config: LoggingConfig) -> logging.Handler | None:
    if not config.file:
        return None
    path = Path(config.file).expanduser()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        return RotatingFileHandler(
            path,
            maxBytes=config.max_bytes,
            backupCount=config.backup_count,
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"Warning: Could not open log file {path}: {e}\n")
        return None


def configure_logging(config: LoggingConfig) -> logging.Logger:
    """Route ffdriver log records according to config.

    Records go to the configured file, to stderr, or both when
    ``include_stderr`` is set. Without a usable file they go to stderr.
    Calling this again replaces the handlers of the previous call.

    Returns:
        The configured package logger.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
        handler.close()

    package_logger.setLevel(config.level.upper())
    package_logger.propagate = False

    if config.format.lower() == "json":
        formatter: logging.Formatter = JSONFormatter()
    else:
        formatter = TextFormatter()

    handlers: list[logging.Handler] = []
    file_handler = _file_handler(config)
    if file_handler is not None:
        handlers.append(file_handler)
    if config.include_stderr or file_handler is None:
        handlers.append(logging.StreamHandler(sys.stderr))

    for handler in handlers:
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)
    return package_logger
