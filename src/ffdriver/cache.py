"""Key/value cache backends.

The capability tester and the prober store their answers in a cache
backend handed to them at construction time. Two backends ship with the
package: an in-process dict and a JSON document on disk
(~/.ffdriver/cache.json by default).
"""

import json
import logging
import os
import tempfile
import time
from pathlib import Path
from typing import Any, Protocol

logger = logging.getLogger(__name__)

# Default cache TTL: 24 hours
DEFAULT_CACHE_TTL_HOURS = 24

DEFAULT_CACHE_DIR = Path.home() / ".ffdriver"
DEFAULT_CACHE_FILE = DEFAULT_CACHE_DIR / "cache.json"

# Schema version of the on-disk document
_SCHEMA_VERSION = 1


class CacheBackend(Protocol):
    """Protocol for cache backends.

    Keys are strings; values must be JSON-serializable for backends that
    persist them.
    """

    def has(self, key: str) -> bool:
        """Return True if a live entry exists for key."""
        ...

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value stored for key, or default."""
        ...

    def set(self, key: str, value: Any) -> None:
        """Store value under key."""
        ...


class MemoryCache:
    """Dict-backed cache with optional per-entry expiry."""

    def __init__(self, ttl_seconds: float | None = None) -> None:
        """Initialize the cache.

        Args:
            ttl_seconds: Lifetime of each entry. None keeps entries forever.
        """
        self.ttl_seconds = ttl_seconds
        self._entries: dict[str, tuple[Any, float | None]] = {}

    def _expires_at(self) -> float | None:
        if self.ttl_seconds is None:
            return None
        return time.monotonic() + self.ttl_seconds

    def has(self, key: str) -> bool:
        entry = self._entries.get(key)
        if entry is None:
            return False
        _, expires_at = entry
        if expires_at is not None and time.monotonic() >= expires_at:
            del self._entries[key]
            return False
        return True

    def get(self, key: str, default: Any = None) -> Any:
        if not self.has(key):
            return default
        return self._entries[key][0]

    def set(self, key: str, value: Any) -> None:
        self._entries[key] = (value, self._expires_at())

    def clear(self) -> None:
        """Drop every entry."""
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


class JsonFileCache:
    """Cache persisted as a JSON document.

    Each entry is stored with its expiry timestamp (epoch seconds). The
    whole document is rewritten on every set using an atomic
    temp-file-and-replace.
    """

    def __init__(
        self,
        cache_path: Path | None = None,
        ttl_hours: float = DEFAULT_CACHE_TTL_HOURS,
    ) -> None:
        """Initialize the cache.

        Args:
            cache_path: Path to cache file. Defaults to ~/.ffdriver/cache.json.
            ttl_hours: Entry lifetime in hours, must be positive. Defaults to 24.
        """
        if ttl_hours <= 0:
            raise ValueError(f"ttl_hours must be > 0, got {ttl_hours}")
        self.cache_path = cache_path or DEFAULT_CACHE_FILE
        self.ttl_seconds = ttl_hours * 3600
        self._entries: dict[str, dict[str, Any]] | None = None

    def _load(self) -> dict[str, dict[str, Any]]:
        """Load entries from disk once per instance."""
        if self._entries is not None:
            return self._entries

        self._entries = {}
        if not self.cache_path.exists():
            logger.debug("Cache file does not exist: %s", self.cache_path)
            return self._entries

        try:
            with open(self.cache_path, encoding="utf-8") as f:
                data = json.load(f)
            version = data.get("version", 0)
            if version != _SCHEMA_VERSION:
                raise ValueError(f"Unsupported cache schema version: {version}")
            self._entries = dict(data.get("entries", {}))
            logger.debug("Loaded cache from %s", self.cache_path)
        except (json.JSONDecodeError, ValueError, AttributeError) as e:
            logger.warning("Failed to load cache %s: %s", self.cache_path, e)
            self._entries = {}

        return self._entries

    def _save(self) -> None:
        """Write entries to disk atomically."""
        entries = self._load()
        self.cache_path.parent.mkdir(parents=True, exist_ok=True)

        try:
            json_content = json.dumps(
                {"version": _SCHEMA_VERSION, "entries": entries}, indent=2
            )
            fd, temp_path_str = tempfile.mkstemp(
                suffix=self.cache_path.suffix,
                dir=self.cache_path.parent,
                text=True,
            )
            temp_path = Path(temp_path_str)
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(json_content)
                temp_path.replace(self.cache_path)
                logger.debug("Saved cache to %s", self.cache_path)
            except Exception:
                temp_path.unlink(missing_ok=True)
                raise
        except OSError as e:
            logger.warning("Failed to save cache: %s", e)

    def has(self, key: str) -> bool:
        entry = self._load().get(key)
        if entry is None:
            return False
        expires_at = entry.get("expires_at")
        if expires_at is not None and time.time() >= expires_at:
            logger.debug("Cache entry %s expired", key)
            return False
        return True

    def get(self, key: str, default: Any = None) -> Any:
        if not self.has(key):
            return default
        return self._load()[key]["value"]

    def set(self, key: str, value: Any) -> None:
        self._load()[key] = {
            "value": value,
            "expires_at": time.time() + self.ttl_seconds,
        }
        self._save()

    def invalidate(self) -> None:
        """Delete the cache file and forget loaded entries."""
        self._entries = {}
        if self.cache_path.exists():
            try:
                self.cache_path.unlink()
                logger.debug("Invalidated cache at %s", self.cache_path)
            except OSError as e:
                logger.warning("Failed to invalidate cache: %s", e)
