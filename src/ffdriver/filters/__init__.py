"""Filters contributing arguments to ffmpeg commands."""

from ffdriver.filters.audio import (
    AddMetadataFilter,
    AudioFilters,
    AudioResamplableFilter,
    CustomFilter,
    SimpleFilter,
)
from ffdriver.filters.base import Filter
from ffdriver.filters.collection import FiltersCollection

__all__ = [
    "AddMetadataFilter",
    "AudioFilters",
    "AudioResamplableFilter",
    "CustomFilter",
    "Filter",
    "FiltersCollection",
    "SimpleFilter",
]
