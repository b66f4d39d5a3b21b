"""Filter protocol."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from ffdriver.capabilities import Modality

if TYPE_CHECKING:
    from ffdriver.format.audio import AudioFormat
    from ffdriver.media.audio import Audio


class Filter(Protocol):
    """Protocol for filters.

    A filter contributes an ordered list of ffmpeg arguments to a save.
    Filters are applied in the order they were registered.
    """

    modality: Modality

    def apply(self, media: Audio, format: AudioFormat) -> list[str]:
        """Return the arguments this filter adds to the command."""
        ...
