"""Configuration data models.

This module defines dataclasses for ffdriver configuration options.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ffdriver.driver.configuration import DriverConfiguration

# Default ffmpeg thread count when none is configured
DEFAULT_THREADS = 2


@dataclass
class BinariesConfig:
    """Configuration for external binary locations.

    All paths are optional. If not specified, binaries are looked up in PATH.
    """

    ffmpeg: Path | None = None
    ffprobe: Path | None = None


@dataclass
class DriverConfig:
    """Configuration for process invocation."""

    # Per-invocation timeout in seconds (None = wait forever)
    timeout: int | None = 300

    # ffmpeg -threads value (None = driver default)
    threads: int | None = None

    def __post_init__(self) -> None:
        """Validate configuration."""
        if self.timeout is not None and self.timeout < 0:
            raise ValueError(f"timeout must be >= 0, got {self.timeout}")
        if self.threads is not None and self.threads < 1:
            raise ValueError(f"threads must be >= 1, got {self.threads}")


@dataclass
class CacheConfig:
    """Configuration for the capability cache."""

    # "memory" keeps answers for the process lifetime, "file" persists them
    backend: str = "memory"

    # Cache file path (file backend only)
    path: Path | None = None

    # Entry lifetime in hours (file backend only)
    ttl_hours: int = 24

    def __post_init__(self) -> None:
        """Validate configuration."""
        valid_backends = {"memory", "file"}
        if self.backend not in valid_backends:
            raise ValueError(
                f"backend must be one of {valid_backends}, got {self.backend}"
            )
        if self.ttl_hours <= 0:
            raise ValueError(f"ttl_hours must be > 0, got {self.ttl_hours}")


@dataclass
class LoggingConfig:
    """Configuration for structured logging."""

    # Log level: debug, info, warning, error
    level: str = "warning"

    # Log file path (None = stderr only)
    file: Path | None = None

    # Log format: text or json
    format: str = "text"

    # Also log to stderr when file is set
    include_stderr: bool = False

    # Rotation threshold in bytes (default 10MB)
    max_bytes: int = 10_485_760

    # Number of rotated files to keep
    backup_count: int = 5

    def __post_init__(self) -> None:
        """Validate configuration."""
        valid_levels = {"debug", "info", "warning", "error"}
        if self.level.lower() not in valid_levels:
            raise ValueError(f"level must be one of {valid_levels}, got {self.level}")
        valid_formats = {"text", "json"}
        if self.format.lower() not in valid_formats:
            raise ValueError(
                f"format must be one of {valid_formats}, got {self.format}"
            )


@dataclass
class FFDriverConfig:
    """Main configuration container for ffdriver.

    Aggregates all configuration sections.
    """

    binaries: BinariesConfig = field(default_factory=BinariesConfig)
    driver: DriverConfig = field(default_factory=DriverConfig)
    cache: CacheConfig = field(default_factory=CacheConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def to_driver_configuration(self) -> DriverConfiguration:
        """Flatten into the key/value configuration the drivers read.

        Unset values are left out so that drivers fall back to their own
        defaults.
        """
        from ffdriver.driver.configuration import DriverConfiguration

        data: dict[str, object] = {"timeout": self.driver.timeout}
        if self.binaries.ffmpeg is not None:
            data["ffmpeg.binaries"] = str(self.binaries.ffmpeg)
        if self.binaries.ffprobe is not None:
            data["ffprobe.binaries"] = str(self.binaries.ffprobe)
        if self.driver.threads is not None:
            data["ffmpeg.threads"] = self.driver.threads
        return DriverConfiguration(data)
