"""Output formats and progress reporting."""

from ffdriver.format.audio import (
    DEFAULT_AUDIO_KILO_BITRATE,
    FORMATS,
    Aac,
    AudioFormat,
    Flac,
    Mp3,
    ProgressableAudioFormat,
    Vorbis,
    Wav,
)
from ffdriver.format.progress import (
    AudioProgressListener,
    ProgressEvent,
    ProgressSample,
    parse_progress_line,
)

__all__ = [
    "Aac",
    "AudioFormat",
    "AudioProgressListener",
    "DEFAULT_AUDIO_KILO_BITRATE",
    "FORMATS",
    "Flac",
    "Mp3",
    "ProgressEvent",
    "ProgressSample",
    "ProgressableAudioFormat",
    "Vorbis",
    "Wav",
    "parse_progress_line",
]
