"""Audio output formats.

An AudioFormat describes the encoding parameters of one save: codec,
bitrate, channel count and any extra arguments. Formats that can report
progress declare Capability.PROGRESS and build listeners on request.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from ffdriver.capabilities import Capability
from ffdriver.driver.listeners import Listener
from ffdriver.exceptions import InvalidFormatError
from ffdriver.format.progress import AudioProgressListener, ProgressCallback

if TYPE_CHECKING:
    from ffdriver.media.audio import Audio
    from ffdriver.probe.ffprobe import FFProbe

DEFAULT_AUDIO_KILO_BITRATE = 128


class AudioFormat:
    """Encoding parameters for an audio save.

    Subclasses restrict the accepted codecs through
    ``available_audio_codecs`` and pick a ``default_audio_codec``. The base
    class accepts any codec, or none at all.
    """

    capabilities: frozenset[Capability] = frozenset()
    available_audio_codecs: tuple[str, ...] = ()
    default_audio_codec: str | None = None

    def __init__(
        self,
        audio_codec: str | None = None,
        audio_kilo_bitrate: int | None = DEFAULT_AUDIO_KILO_BITRATE,
        audio_channels: int | None = None,
        extra_params: Sequence[str] | None = None,
    ) -> None:
        self._audio_codec: str | None = None
        self._audio_kilo_bitrate: int | None = None
        self._audio_channels: int | None = None
        self._extra_params: list[str] = []

        codec = audio_codec or self.default_audio_codec
        if codec is not None:
            self.set_audio_codec(codec)
        self.set_audio_kilo_bitrate(audio_kilo_bitrate)
        self.set_audio_channels(audio_channels)
        self.set_extra_params(extra_params or [])

    def get_audio_codec(self) -> str | None:
        return self._audio_codec

    def set_audio_codec(self, codec: str) -> AudioFormat:
        if self.available_audio_codecs and codec not in self.available_audio_codecs:
            raise InvalidFormatError(
                f"Wrong audio codec value for {codec}, available formats are "
                f"{', '.join(self.available_audio_codecs)}"
            )
        self._audio_codec = codec
        return self

    def get_audio_kilo_bitrate(self) -> int | None:
        return self._audio_kilo_bitrate

    def set_audio_kilo_bitrate(self, kilo_bitrate: int | None) -> AudioFormat:
        if kilo_bitrate is not None and kilo_bitrate < 1:
            raise InvalidFormatError("Wrong kiloBitrate value")
        self._audio_kilo_bitrate = kilo_bitrate
        return self

    def get_audio_channels(self) -> int | None:
        return self._audio_channels

    def set_audio_channels(self, channels: int | None) -> AudioFormat:
        if channels is not None and channels < 1:
            raise InvalidFormatError("Channels value must be 1 or greater")
        self._audio_channels = channels
        return self

    def get_extra_params(self) -> list[str]:
        return list(self._extra_params)

    def set_extra_params(self, extra_params: Sequence[str]) -> AudioFormat:
        self._extra_params = [str(param) for param in extra_params]
        return self

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(codec={self._audio_codec!r}, "
            f"kbps={self._audio_kilo_bitrate!r}, channels={self._audio_channels!r})"
        )


class ProgressableAudioFormat(AudioFormat):
    """Audio format that reports encoding progress to callbacks."""

    capabilities = frozenset({Capability.PROGRESS})

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._progress_callbacks: list[ProgressCallback] = []

    def on_progress(self, callback: ProgressCallback) -> ProgressableAudioFormat:
        """Register a callback receiving ProgressEvents during saves."""
        self._progress_callbacks.append(callback)
        return self

    def create_progress_listener(
        self,
        media: Audio,
        ffprobe: FFProbe,
        current_pass: int,
        total_passes: int,
        duration: float = 0.0,
    ) -> list[Listener]:
        """Build the listeners for one save of media."""
        return [
            AudioProgressListener(
                ffprobe,
                media.path,
                current_pass,
                total_passes,
                duration,
                callbacks=self._progress_callbacks,
            )
        ]


class Mp3(ProgressableAudioFormat):
    """MPEG-1 Layer III."""

    available_audio_codecs = ("libmp3lame",)
    default_audio_codec = "libmp3lame"


class Aac(ProgressableAudioFormat):
    """Advanced Audio Coding."""

    available_audio_codecs = ("libfdk_aac", "aac")
    default_audio_codec = "libfdk_aac"


class Flac(ProgressableAudioFormat):
    """Free Lossless Audio Codec."""

    available_audio_codecs = ("flac",)
    default_audio_codec = "flac"


class Vorbis(ProgressableAudioFormat):
    """Ogg Vorbis.

    The native vorbis encoder is experimental and needs ``-strict -2``.
    """

    available_audio_codecs = ("vorbis", "libvorbis")
    default_audio_codec = "vorbis"

    def get_extra_params(self) -> list[str]:
        params = super().get_extra_params()
        if self.get_audio_codec() == "vorbis":
            return ["-strict", "-2", *params]
        return params


class Wav(ProgressableAudioFormat):
    """Uncompressed PCM in a WAV container."""

    available_audio_codecs = ("pcm_s16le",)
    default_audio_codec = "pcm_s16le"


FORMATS: dict[str, type[ProgressableAudioFormat]] = {
    "mp3": Mp3,
    "aac": Aac,
    "flac": Flac,
    "vorbis": Vorbis,
    "wav": Wav,
}
