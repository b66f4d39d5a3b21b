"""Data models for ffprobe results."""

from dataclasses import dataclass, field
from typing import Any


def parse_float(value: Any) -> float | None:
    """Parse a numeric ffprobe field into a float.

    ffprobe reports numbers as strings ("3600.000") and uses "N/A" for
    unknown values.
    """
    if value is None:
        return None
    try:
        return float(value)
    except (ValueError, TypeError):
        return None


def parse_int(value: Any) -> int | None:
    """Parse a numeric ffprobe field into an int."""
    if value is None:
        return None
    try:
        return int(value)
    except (ValueError, TypeError):
        return None


@dataclass
class ProbeFormat:
    """Container-level information from ``-show_format``."""

    filename: str
    format_name: str | None = None
    duration: float | None = None
    size: int | None = None
    bit_rate: int | None = None
    nb_streams: int | None = None
    tags: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ProbeFormat":
        return cls(
            filename=str(data.get("filename", "")),
            format_name=data.get("format_name"),
            duration=parse_float(data.get("duration")),
            size=parse_int(data.get("size")),
            bit_rate=parse_int(data.get("bit_rate")),
            nb_streams=parse_int(data.get("nb_streams")),
            tags=dict(data.get("tags") or {}),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "filename": self.filename,
            "format_name": self.format_name,
            "duration": self.duration,
            "size": self.size,
            "bit_rate": self.bit_rate,
            "nb_streams": self.nb_streams,
            "tags": self.tags,
        }


@dataclass
class ProbeStream:
    """One stream from ``-show_streams``."""

    index: int
    codec_type: str | None = None
    codec_name: str | None = None
    duration: float | None = None
    bit_rate: int | None = None
    channels: int | None = None
    sample_rate: int | None = None
    channel_layout: str | None = None
    tags: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ProbeStream":
        return cls(
            index=parse_int(data.get("index")) or 0,
            codec_type=data.get("codec_type"),
            codec_name=data.get("codec_name"),
            duration=parse_float(data.get("duration")),
            bit_rate=parse_int(data.get("bit_rate")),
            channels=parse_int(data.get("channels")),
            sample_rate=parse_int(data.get("sample_rate")),
            channel_layout=data.get("channel_layout"),
            tags=dict(data.get("tags") or {}),
        )

    def is_audio(self) -> bool:
        return self.codec_type == "audio"

    def to_dict(self) -> dict[str, Any]:
        return {
            "index": self.index,
            "codec_type": self.codec_type,
            "codec_name": self.codec_name,
            "duration": self.duration,
            "bit_rate": self.bit_rate,
            "channels": self.channels,
            "sample_rate": self.sample_rate,
            "channel_layout": self.channel_layout,
            "tags": self.tags,
        }
