"""Key/value configuration read by the process drivers."""

from collections.abc import Iterator, Mapping
from typing import Any


class DriverConfiguration:
    """Mutable string-keyed configuration.

    Known keys:
        ffmpeg.binaries: ffmpeg path or list of candidate names.
        ffprobe.binaries: ffprobe path or list of candidate names.
        timeout: Per-invocation timeout in seconds (None = no timeout).
        ffmpeg.threads: Value passed to ffmpeg's -threads flag.
    """

    def __init__(self, data: Mapping[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = dict(data or {})

    def has(self, key: str) -> bool:
        return key in self._data

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def all(self) -> dict[str, Any]:
        return dict(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __repr__(self) -> str:
        return f"DriverConfiguration({self._data!r})"
