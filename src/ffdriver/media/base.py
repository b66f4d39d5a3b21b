"""Shared state of media objects."""

from __future__ import annotations

from pathlib import Path

from ffdriver.driver.ffmpeg import FFMpegDriver
from ffdriver.filters.collection import FiltersCollection
from ffdriver.probe.ffprobe import FFProbe


class AbstractMediaType:
    """A media file bound to the drivers that process it."""

    def __init__(
        self,
        path: Path | str,
        driver: FFMpegDriver,
        ffprobe: FFProbe,
    ) -> None:
        self.path = path
        self.driver = driver
        self.ffprobe = ffprobe
        self._filters = FiltersCollection()

    @property
    def filters_collection(self) -> FiltersCollection:
        return self._filters

    def set_filters_collection(self, filters: FiltersCollection) -> AbstractMediaType:
        self._filters = filters
        return self
