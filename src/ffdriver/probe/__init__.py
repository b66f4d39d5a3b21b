"""ffprobe capability detection and media queries."""

from ffdriver.probe.ffprobe import FFProbe
from ffdriver.probe.models import ProbeFormat, ProbeStream
from ffdriver.probe.options import HELP_CACHE_KEY, OptionsTester, option_cache_key

__all__ = [
    "FFProbe",
    "HELP_CACHE_KEY",
    "OptionsTester",
    "ProbeFormat",
    "ProbeStream",
    "option_cache_key",
]
