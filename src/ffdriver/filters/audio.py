"""Audio filters.

Each filter turns its settings into ffmpeg arguments when a save is
assembled. AudioFilters is the fluent entry point returned by
Audio.filters().
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING

from ffdriver.capabilities import Modality

if TYPE_CHECKING:
    from ffdriver.format.audio import AudioFormat
    from ffdriver.media.audio import Audio


class SimpleFilter:
    """Emit a fixed list of arguments."""

    modality = Modality.AUDIO

    def __init__(self, params: Sequence[str]) -> None:
        self.params = [str(param) for param in params]

    def apply(self, media: Audio, format: AudioFormat) -> list[str]:
        return list(self.params)


class AudioResamplableFilter:
    """Resample to a new rate, forcing stereo output."""

    modality = Modality.AUDIO

    def __init__(self, rate: int) -> None:
        if rate <= 0:
            raise ValueError(f"rate must be positive, got {rate}")
        self.rate = rate

    def apply(self, media: Audio, format: AudioFormat) -> list[str]:
        return ["-ac", "2", "-ar", str(self.rate)]


class AddMetadataFilter:
    """Write metadata tags, optionally embedding artwork.

    With no data, existing metadata is stripped instead. The special
    ``artwork`` key names an image file mapped in as a second input.
    """

    modality = Modality.AUDIO

    def __init__(self, data: Mapping[str, str] | None = None) -> None:
        self.data = dict(data) if data is not None else None

    def apply(self, media: Audio, format: AudioFormat) -> list[str]:
        if self.data is None:
            return ["-map_metadata", "-1", "-vn"]

        data = dict(self.data)
        args: list[str] = []
        artwork = data.pop("artwork", None)
        if artwork:
            args.extend(["-i", str(artwork), "-map", "0", "-map", "1"])
        for key, value in data.items():
            args.extend(["-metadata", f"{key}={value}"])
        return args


class CustomFilter:
    """Pass a raw -af filter graph."""

    modality = Modality.AUDIO

    def __init__(self, filter_graph: str) -> None:
        self.filter_graph = filter_graph

    def apply(self, media: Audio, format: AudioFormat) -> list[str]:
        return ["-af", self.filter_graph]


class AudioFilters:
    """Fluent helper registering audio filters on a media object."""

    def __init__(self, media: Audio) -> None:
        self.media = media

    def resample(self, rate: int) -> AudioFilters:
        self.media.add_filter(AudioResamplableFilter(rate))
        return self

    def add_metadata(self, data: Mapping[str, str] | None = None) -> AudioFilters:
        self.media.add_filter(AddMetadataFilter(data))
        return self

    def custom(self, filter_graph: str) -> AudioFilters:
        self.media.add_filter(CustomFilter(filter_graph))
        return self
