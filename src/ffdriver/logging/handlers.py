"""Formatters for ffdriver log output.

Driver log calls attach the binary name, the command line and the exit
code as record extras (see CONTEXT_FIELDS). Both formatters surface those
fields next to the message, so a failed invocation can be replayed from the
log alone.
"""

from __future__ import annotations

import json
import logging
import shlex
from datetime import datetime, timezone
from typing import Any

CONTEXT_FIELDS = ("binary", "command", "return_code", "path")

TEXT_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def record_context(record: logging.LogRecord) -> dict[str, Any]:
    """Return the ffdriver context fields present on record."""
    return {
        name: getattr(record, name) for name in CONTEXT_FIELDS if hasattr(record, name)
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per line.

    Keys are ``time`` (ISO-8601 UTC), ``level``, ``logger`` and ``message``,
    followed by any context fields. ``command`` stays a list of arguments.
    """

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        entry: dict[str, Any] = {
            "time": created.isoformat(timespec="milliseconds"),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(record_context(record))
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


class TextFormatter(logging.Formatter):
    """Human readable lines with context appended as key=value pairs."""

    def __init__(self) -> None:
        super().__init__(TEXT_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S%z")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = record_context(record)
        if not context:
            return line

        pairs = []
        for name, value in context.items():
            if name == "command" and isinstance(value, list):
                value = shlex.join(str(arg) for arg in value)
            pairs.append(f"{name}={value}")
        return f"{line} [{' '.join(pairs)}]"
