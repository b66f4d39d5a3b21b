"""Media objects."""

from ffdriver.media.audio import Audio
from ffdriver.media.base import AbstractMediaType

__all__ = ["AbstractMediaType", "Audio"]
