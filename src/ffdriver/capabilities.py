"""Capability tags declared by filters and formats.

Filters and formats state what they are through these tags instead of
being inspected by type. Media objects check the tags when a filter is
registered or a save is assembled.
"""

from enum import Enum


class Modality(Enum):
    """Kind of media a filter applies to."""

    AUDIO = "audio"
    VIDEO = "video"


class Capability(Enum):
    """Optional behaviour an output format may provide."""

    # Format can build listeners that report encoding progress
    PROGRESS = "progress"
