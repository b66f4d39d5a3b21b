"""Capability detection for ffprobe command-line options.

OptionsTester answers "does this ffprobe support option X?" by scanning
the binary's -help output, memoising both the help text and each answer
in the cache backend it is given.
"""

import logging
import re

from ffdriver.cache import CacheBackend
from ffdriver.driver.binary import BinaryDriver
from ffdriver.exceptions import ExecutionFailureError, ProbeUnavailableError

logger = logging.getLogger(__name__)

HELP_CACHE_KEY = "help"
HELP_ARGS = ("-help", "-loglevel", "quiet")


def option_cache_key(name: str) -> str:
    """Cache key holding the answer for option name."""
    return f"option-{name}"


class OptionsTester:
    """Test which options the probe binary supports.

    The help text is fetched at most once per cache lifetime. An option is
    supported when its name starts a line of that text.
    """

    def __init__(self, ffprobe: BinaryDriver, cache: CacheBackend) -> None:
        self.ffprobe = ffprobe
        self.cache = cache

    def supports(self, name: str) -> bool:
        """Check whether the probe binary supports option name.

        Args:
            name: Option as written on the command line, e.g. "-show_format".

        Returns:
            True if the option starts a line of the -help output.

        Raises:
            ProbeUnavailableError: If the -help invocation fails.
        """
        key = option_cache_key(name)
        if self.cache.has(key):
            return self.cache.get(key)

        output = self._retrieve_help_output()
        supported = (
            re.search("^" + re.escape(name), output, flags=re.MULTILINE) is not None
        )
        logger.debug("ffprobe option %s supported: %s", name, supported)

        self.cache.set(key, supported)
        return supported

    has = supports

    def _retrieve_help_output(self) -> str:
        if self.cache.has(HELP_CACHE_KEY):
            return self.cache.get(HELP_CACHE_KEY)

        try:
            output = self.ffprobe.command(list(HELP_ARGS))
        except ExecutionFailureError as e:
            logger.error("ffprobe -help failed: %s", e)
            raise ProbeUnavailableError(
                "Your FFProbe version is too old and does not support `-help` "
                "option, please upgrade.",
                e.return_code,
            ) from e

        self.cache.set(HELP_CACHE_KEY, output)
        return output
