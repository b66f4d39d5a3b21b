"""Audio media and the transcode command assembly."""

from __future__ import annotations

import logging
from pathlib import Path

from ffdriver.capabilities import Capability, Modality
from ffdriver.config.models import DEFAULT_THREADS
from ffdriver.exceptions import (
    EncodingFailedError,
    ExecutionFailureError,
    InvalidFilterError,
)
from ffdriver.filters.audio import AudioFilters
from ffdriver.filters.base import Filter
from ffdriver.format.audio import AudioFormat
from ffdriver.media.base import AbstractMediaType

logger = logging.getLogger(__name__)

THREADS_KEY = "ffmpeg.threads"


class Audio(AbstractMediaType):
    """An audio file that can be filtered and saved to another format."""

    modality = Modality.AUDIO

    def filters(self) -> AudioFilters:
        """Return the fluent filter helper for this media."""
        return AudioFilters(self)

    def add_filter(self, filter: Filter) -> Audio:
        """Register a filter applied on every subsequent save.

        Raises:
            InvalidFilterError: If the filter is not an audio filter.
        """
        if getattr(filter, "modality", None) is not Modality.AUDIO:
            raise InvalidFilterError("Audio only accepts audio filters")
        self._filters.add(filter)
        return self

    def save(self, format: AudioFormat, output_path: Path | str) -> Audio:
        """Transcode the media into output_path using format.

        Raises:
            EncodingFailedError: If ffmpeg fails.
        """
        listeners = None
        if Capability.PROGRESS in format.capabilities:
            listeners = format.create_progress_listener(self, self.ffprobe, 1, 1)

        commands = self.build_command(format, output_path)

        try:
            self.driver.command(commands, False, listeners)
        except ExecutionFailureError as e:
            logger.error(
                "Encoding to %s failed: %s",
                output_path,
                e,
                extra={"path": str(self.path)},
            )
            raise EncodingFailedError("Encoding failed") from e

        logger.info("Encoded to %s", output_path, extra={"path": str(self.path)})
        return self

    def build_command(
        self, format: AudioFormat, output_path: Path | str
    ) -> list[str]:
        """Assemble the ffmpeg arguments for one save.

        Format-derived arguments are computed per call and never stored in
        the media's filter collection.
        """
        commands = ["-y", "-i", str(self.path)]

        extra_params = format.get_extra_params()
        codec = format.get_audio_codec()
        kilo_bitrate = format.get_audio_kilo_bitrate()
        channels = format.get_audio_channels()
        has_stream_params = (
            bool(codec) or kilo_bitrate is not None or channels is not None
        )

        if extra_params and not has_stream_params:
            commands.extend(extra_params)

        commands.extend(["-threads", str(self._threads())])

        if extra_params and has_stream_params:
            commands.extend(extra_params)

        if codec:
            commands.extend(["-acodec", codec])
        if kilo_bitrate is not None:
            commands.extend(["-b:a", f"{kilo_bitrate}k"])
        if channels is not None:
            commands.extend(["-ac", str(channels)])

        for filter in self._filters:
            commands.extend(filter.apply(self, format))

        commands.append(str(output_path))
        return commands

    def _threads(self) -> int | str:
        configuration = self.driver.configuration
        if configuration.has(THREADS_KEY):
            threads = configuration.get(THREADS_KEY)
            if threads:
                return threads
        return DEFAULT_THREADS
