"""ffdriver - drive the ffmpeg and ffprobe binaries from Python."""

from ffdriver.cache import JsonFileCache, MemoryCache
from ffdriver.capabilities import Capability, Modality
from ffdriver.driver import DriverConfiguration, FFMpegDriver, FFProbeDriver
from ffdriver.exceptions import (
    BinaryNotFoundError,
    EncodingFailedError,
    ExecutionFailureError,
    FFDriverError,
    InvalidFilterError,
    InvalidFormatError,
    ProbeError,
    ProbeUnavailableError,
)
from ffdriver.ffmpeg import FFMpeg
from ffdriver.format import Aac, AudioFormat, Flac, Mp3, Vorbis, Wav
from ffdriver.media import Audio
from ffdriver.probe import FFProbe, OptionsTester

__version__ = "0.1.0"

__all__ = [
    "Aac",
    "Audio",
    "AudioFormat",
    "BinaryNotFoundError",
    "Capability",
    "DriverConfiguration",
    "EncodingFailedError",
    "ExecutionFailureError",
    "FFDriverError",
    "FFMpeg",
    "FFMpegDriver",
    "FFProbe",
    "FFProbeDriver",
    "Flac",
    "InvalidFilterError",
    "InvalidFormatError",
    "JsonFileCache",
    "MemoryCache",
    "Modality",
    "Mp3",
    "OptionsTester",
    "ProbeError",
    "ProbeUnavailableError",
    "Vorbis",
    "Wav",
    "__version__",
]
