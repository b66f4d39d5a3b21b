"""Log formatting and handler setup for ffdriver."""

from ffdriver.logging.config import PACKAGE_LOGGER, configure_logging
from ffdriver.logging.handlers import (
    CONTEXT_FIELDS,
    JSONFormatter,
    TextFormatter,
    record_context,
)

__all__ = [
    "CONTEXT_FIELDS",
    "JSONFormatter",
    "PACKAGE_LOGGER",
    "TextFormatter",
    "configure_logging",
    "record_context",
]
