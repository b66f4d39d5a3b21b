"""High level ffprobe queries.

FFProbe checks the binary's capabilities through OptionsTester before
issuing a query, parses the JSON answer into ProbeFormat/ProbeStream, and
memoises raw answers in the shared cache backend.
"""

import json
import logging
from pathlib import Path
from typing import Any

from ffdriver.cache import CacheBackend
from ffdriver.driver.binary import BinaryDriver
from ffdriver.exceptions import (
    ExecutionFailureError,
    ProbeError,
    ProbeUnavailableError,
)
from ffdriver.probe.models import ProbeFormat, ProbeStream
from ffdriver.probe.options import OptionsTester

logger = logging.getLogger(__name__)

TYPE_FORMAT = "format"
TYPE_STREAMS = "streams"


class FFProbe:
    """Query media information from ffprobe."""

    def __init__(
        self,
        ffprobe: BinaryDriver,
        cache: CacheBackend,
        options_tester: OptionsTester | None = None,
    ) -> None:
        """Initialize the prober.

        Args:
            ffprobe: Driver for the ffprobe binary.
            cache: Cache backend shared with the options tester.
            options_tester: Capability tester. Built from ffprobe and cache
                when omitted.
        """
        self.ffprobe = ffprobe
        self.cache = cache
        self.options_tester = options_tester or OptionsTester(ffprobe, cache)

    def format(self, path: Path | str) -> ProbeFormat:
        """Probe container information for path.

        Raises:
            ProbeUnavailableError: If ffprobe lacks the required options.
            ProbeError: If ffprobe fails or its output is unusable.
        """
        data = self._probe(path, "-show_format", TYPE_FORMAT)
        section = data.get("format")
        if not isinstance(section, dict):
            raise ProbeError(f"ffprobe returned no format section for {path}")
        return ProbeFormat.from_dict(section)

    def streams(self, path: Path | str) -> list[ProbeStream]:
        """Probe the streams of path.

        Raises:
            ProbeUnavailableError: If ffprobe lacks the required options.
            ProbeError: If ffprobe fails or its output is unusable.
        """
        data = self._probe(path, "-show_streams", TYPE_STREAMS)
        section = data.get("streams")
        if not isinstance(section, list):
            raise ProbeError(f"ffprobe returned no streams section for {path}")
        return [ProbeStream.from_dict(stream) for stream in section]

    def is_valid(self, path: Path | str) -> bool:
        """Return True if ffprobe can read at least one stream from path."""
        try:
            return len(self.streams(path)) > 0
        except ProbeError as e:
            logger.debug("%s is not a valid media file: %s", path, e)
            return False

    def _probe(self, path: Path | str, command: str, data_type: str) -> dict[str, Any]:
        key = f"{data_type}-{path}"
        if self.cache.has(key):
            return self.cache.get(key)

        for option in (command, "-print_format"):
            if not self.options_tester.supports(option):
                raise ProbeUnavailableError(
                    f"This version of ffprobe is too old and does not support "
                    f"`{option}` option, please upgrade"
                )

        logger.info("ffprobe %s %s", command, path)
        try:
            output = self.ffprobe.command(
                [command, str(path), "-print_format", "json"]
            )
        except ExecutionFailureError as e:
            raise ProbeError(f"Unable to probe {path}") from e

        try:
            data = json.loads(output)
        except json.JSONDecodeError as e:
            raise ProbeError(f"Unable to parse ffprobe output for {path}: {e}") from e

        if not isinstance(data, dict):
            raise ProbeError(f"Unexpected ffprobe output for {path}")

        self.cache.set(key, data)
        return data
