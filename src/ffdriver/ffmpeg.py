"""Entry point wiring drivers, cache and prober together.

Example:
    >>> from ffdriver import FFMpeg, Mp3
    >>> ffmpeg = FFMpeg.create()
    >>> audio = ffmpeg.open("/path/to/input.wav")
    >>> audio.filters().resample(44100)
    >>> audio.save(Mp3(audio_kilo_bitrate=192), "/path/to/output.mp3")
"""

from __future__ import annotations

import logging
from pathlib import Path

from ffdriver.cache import CacheBackend, JsonFileCache, MemoryCache
from ffdriver.config.models import FFDriverConfig
from ffdriver.driver.configuration import DriverConfiguration
from ffdriver.driver.ffmpeg import FFMpegDriver, FFProbeDriver
from ffdriver.exceptions import FFDriverError
from ffdriver.media.audio import Audio
from ffdriver.probe.ffprobe import FFProbe

logger = logging.getLogger(__name__)


def create_cache(config: FFDriverConfig) -> CacheBackend:
    """Build the cache backend selected by configuration."""
    if config.cache.backend == "file":
        return JsonFileCache(config.cache.path, ttl_hours=config.cache.ttl_hours)
    return MemoryCache()


class FFMpeg:
    """Open media files for transcoding."""

    def __init__(self, driver: FFMpegDriver, ffprobe: FFProbe) -> None:
        self.driver = driver
        self.ffprobe = ffprobe

    @classmethod
    def create(
        cls,
        configuration: DriverConfiguration | FFDriverConfig | None = None,
        cache: CacheBackend | None = None,
    ) -> FFMpeg:
        """Create an FFMpeg with freshly resolved drivers.

        Args:
            configuration: Driver configuration, or a full FFDriverConfig
                which also selects the cache backend.
            cache: Cache backend shared by the options tester and prober.

        Raises:
            BinaryNotFoundError: If ffmpeg or ffprobe cannot be found.
        """
        if isinstance(configuration, FFDriverConfig):
            if cache is None:
                cache = create_cache(configuration)
            configuration = configuration.to_driver_configuration()
        configuration = configuration or DriverConfiguration()
        cache = cache if cache is not None else MemoryCache()

        driver = FFMpegDriver.create(configuration)
        ffprobe = FFProbe(FFProbeDriver.create(configuration), cache)
        return cls(driver, ffprobe)

    def open(self, path: Path | str) -> Audio:
        """Open an audio file.

        Raises:
            FFDriverError: If the file does not exist or has no audio stream.
            ProbeUnavailableError: If ffprobe cannot answer queries.
        """
        if not Path(path).exists():
            raise FFDriverError(f"File {path} does not exist")

        streams = self.ffprobe.streams(path)
        if not any(stream.is_audio() for stream in streams):
            raise FFDriverError(
                f"Unable to detect file format, only audio is supported: {path}"
            )

        logger.debug("Opened %s (%d streams)", path, len(streams))
        return Audio(path, self.driver, self.ffprobe)
