"""Output listeners attached to a driver invocation.

A listener receives every line the running binary writes, tagged with the
stream it came from ("out" or "err").
"""

import logging
from typing import Protocol

logger = logging.getLogger(__name__)

STREAM_OUT = "out"
STREAM_ERR = "err"


class Listener(Protocol):
    """Protocol for output listeners."""

    def handle(self, stream: str, line: str) -> None:
        """Receive one line of output.

        Args:
            stream: STREAM_OUT or STREAM_ERR.
            line: The line, without trailing newline.
        """
        ...


class DebugListener:
    """Forward every output line to a logger at DEBUG level."""

    def __init__(self, prefix: str = "", target: logging.Logger | None = None):
        self.prefix = prefix
        self.logger = target or logger

    def handle(self, stream: str, line: str) -> None:
        self.logger.debug("%s[%s] %s", self.prefix, stream, line)
