"""Unit tests for audio output formats."""

from unittest.mock import MagicMock

import pytest

from ffdriver.capabilities import Capability
from ffdriver.exceptions import InvalidFormatError
from ffdriver.format.audio import (
    DEFAULT_AUDIO_KILO_BITRATE,
    FORMATS,
    Aac,
    AudioFormat,
    Flac,
    Mp3,
    Vorbis,
    Wav,
)
from ffdriver.format.progress import AudioProgressListener


class TestAudioFormat:
    """Tests for the AudioFormat base class."""

    def test_defaults(self) -> None:
        """The base format has no codec and the default bitrate."""
        format = AudioFormat()

        assert format.get_audio_codec() is None
        assert format.get_audio_kilo_bitrate() == DEFAULT_AUDIO_KILO_BITRATE
        assert format.get_audio_channels() is None
        assert format.get_extra_params() == []
        assert format.capabilities == frozenset()

    def test_accepts_any_codec(self) -> None:
        """The base format does not restrict codecs."""
        assert AudioFormat("anything").get_audio_codec() == "anything"

    @pytest.mark.parametrize("bitrate", [0, -128])
    def test_rejects_bad_bitrate(self, bitrate: int) -> None:
        """Non-positive bitrates raise InvalidFormatError."""
        with pytest.raises(InvalidFormatError, match="kiloBitrate"):
            AudioFormat().set_audio_kilo_bitrate(bitrate)

    def test_rejects_bad_channels(self) -> None:
        """Channel counts below one raise InvalidFormatError."""
        with pytest.raises(InvalidFormatError):
            AudioFormat(audio_channels=0)

    def test_invalid_format_is_value_error(self) -> None:
        """InvalidFormatError can be caught as ValueError."""
        with pytest.raises(ValueError):
            AudioFormat(audio_kilo_bitrate=-1)

    def test_extra_params_are_copied(self) -> None:
        """Mutating returned extra params does not affect the format."""
        format = AudioFormat(extra_params=["-vn"])

        format.get_extra_params().append("-sn")

        assert format.get_extra_params() == ["-vn"]

    def test_setters_chain(self) -> None:
        """Setters return the format."""
        format = AudioFormat()

        assert format.set_audio_channels(2).set_audio_kilo_bitrate(320) is format


class TestConcreteFormats:
    """Tests for the shipped formats."""

    @pytest.mark.parametrize(
        ("format_class", "codec"),
        [
            (Mp3, "libmp3lame"),
            (Aac, "libfdk_aac"),
            (Flac, "flac"),
            (Vorbis, "vorbis"),
            (Wav, "pcm_s16le"),
        ],
    )
    def test_default_codecs(self, format_class, codec: str) -> None:
        """Each format selects its default codec and supports progress."""
        format = format_class()

        assert format.get_audio_codec() == codec
        assert Capability.PROGRESS in format.capabilities

    def test_rejects_foreign_codec(self) -> None:
        """Codecs outside the format's list are rejected."""
        with pytest.raises(InvalidFormatError, match="libmp3lame"):
            Mp3("flac")

    def test_aac_accepts_native_encoder(self) -> None:
        """Aac accepts the native aac encoder."""
        assert Aac("aac").get_audio_codec() == "aac"

    def test_vorbis_native_needs_strict(self) -> None:
        """The native vorbis encoder prepends -strict -2."""
        format = Vorbis(extra_params=["-vn"])

        assert format.get_extra_params() == ["-strict", "-2", "-vn"]

    def test_libvorbis_needs_no_strict(self) -> None:
        """libvorbis does not need -strict."""
        assert Vorbis("libvorbis").get_extra_params() == []

    def test_registry(self) -> None:
        """FORMATS maps names to format classes."""
        assert FORMATS["mp3"] is Mp3
        assert set(FORMATS) == {"mp3", "aac", "flac", "vorbis", "wav"}


class TestProgressListenerCreation:
    """Tests for ProgressableAudioFormat.create_progress_listener."""

    def test_builds_listener_with_callbacks(self) -> None:
        """The listener is bound to the media path and callbacks."""
        callback = MagicMock()
        format = Mp3().on_progress(callback)
        media = MagicMock()
        media.path = "/music/in.wav"
        ffprobe = MagicMock()

        (listener,) = format.create_progress_listener(media, ffprobe, 1, 2)

        assert isinstance(listener, AudioProgressListener)
        assert listener.path == "/music/in.wav"
        assert listener.ffprobe is ffprobe
        assert listener.total_passes == 2
        assert listener.callbacks == [callback]
