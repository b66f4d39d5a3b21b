"""Configuration loader with precedence handling.

Configuration is loaded with the following precedence (highest to lowest):
1. CLI arguments (passed directly to get_config)
2. Environment variables (FFDRIVER_*)
3. Config file (~/.ffdriver/config.toml)
4. Default values

Environment variables:
- FFDRIVER_CONFIG_PATH: Path to config file (overrides default location)
- FFDRIVER_FFMPEG_PATH: Path to ffmpeg executable
- FFDRIVER_FFPROBE_PATH: Path to ffprobe executable
- FFDRIVER_TIMEOUT: Per-invocation timeout in seconds (0 = none)
- FFDRIVER_THREADS: ffmpeg thread count
- FFDRIVER_CACHE_BACKEND: "memory" or "file"
- FFDRIVER_CACHE_PATH: Path to the cache file
- FFDRIVER_CACHE_TTL_HOURS: Cache entry lifetime in hours
- FFDRIVER_LOG_LEVEL: debug, info, warning or error
- FFDRIVER_LOG_FILE: Path to log file
- FFDRIVER_LOG_FORMAT: text or json
"""

import logging
import tomllib
from collections.abc import Mapping
from pathlib import Path

from ffdriver.config.env import EnvReader
from ffdriver.config.models import (
    BinariesConfig,
    CacheConfig,
    DriverConfig,
    FFDriverConfig,
    LoggingConfig,
)

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_DIR = Path.home() / ".ffdriver"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.toml"


def get_default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Get the default config file path.

    Can be overridden by FFDRIVER_CONFIG_PATH environment variable.
    """
    reader = EnvReader(env)
    return reader.get_path("FFDRIVER_CONFIG_PATH") or DEFAULT_CONFIG_FILE


def load_config_file(
    path: Path | None = None, env: Mapping[str, str] | None = None
) -> dict:
    """Load configuration from TOML file.

    Args:
        path: Path to config file. If None, uses default location.
        env: Optional environment mapping used to resolve the default path.

    Returns:
        Parsed configuration dict. Empty dict if file doesn't exist or
        cannot be parsed.
    """
    if path is None:
        path = get_default_config_path(env)

    if not path.exists():
        logger.debug("Config file not found: %s", path)
        return {}

    try:
        with open(path, "rb") as f:
            config = tomllib.load(f)
        logger.debug("Loaded config from %s", path)
        return config
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Failed to load config file %s: %s", path, e)
        return {}


def _file_path(section: dict, key: str) -> Path | None:
    value = section.get(key)
    return Path(value).expanduser() if value else None


def get_config(
    config_path: Path | None = None,
    env: Mapping[str, str] | None = None,
    # CLI overrides (highest precedence)
    ffmpeg_path: Path | None = None,
    ffprobe_path: Path | None = None,
    threads: int | None = None,
    timeout: int | None = None,
) -> FFDriverConfig:
    """Get ffdriver configuration with full precedence handling.

    Args:
        config_path: Path to config file (overrides FFDRIVER_CONFIG_PATH).
        env: Environment mapping. Defaults to os.environ.
        ffmpeg_path: CLI override for ffmpeg path.
        ffprobe_path: CLI override for ffprobe path.
        threads: CLI override for the ffmpeg thread count.
        timeout: CLI override for the invocation timeout.

    Returns:
        FFDriverConfig with merged configuration.
    """
    reader = EnvReader(env)
    file_config = load_config_file(config_path, env)

    binaries_file = file_config.get("binaries", {})
    binaries = BinariesConfig(
        ffmpeg=(
            ffmpeg_path
            or reader.get_path("FFDRIVER_FFMPEG_PATH")
            or _file_path(binaries_file, "ffmpeg")
        ),
        ffprobe=(
            ffprobe_path
            or reader.get_path("FFDRIVER_FFPROBE_PATH")
            or _file_path(binaries_file, "ffprobe")
        ),
    )

    driver_file = file_config.get("driver", {})
    if timeout is None:
        timeout = reader.get_int("FFDRIVER_TIMEOUT", driver_file.get("timeout", 300))
    if threads is None:
        threads = reader.get_int("FFDRIVER_THREADS", driver_file.get("threads"))
    driver = DriverConfig(
        # 0 disables the timeout
        timeout=timeout or None,
        threads=threads,
    )

    cache_file = file_config.get("cache", {})
    cache = CacheConfig(
        backend=reader.get_str(
            "FFDRIVER_CACHE_BACKEND", cache_file.get("backend", "memory")
        ),
        path=reader.get_path("FFDRIVER_CACHE_PATH") or _file_path(cache_file, "path"),
        ttl_hours=reader.get_int(
            "FFDRIVER_CACHE_TTL_HOURS", cache_file.get("ttl_hours", 24)
        ),
    )

    logging_file = file_config.get("logging", {})
    logging_config = LoggingConfig(
        level=reader.get_str(
            "FFDRIVER_LOG_LEVEL", logging_file.get("level", "warning")
        ),
        file=reader.get_path("FFDRIVER_LOG_FILE") or _file_path(logging_file, "file"),
        format=reader.get_str(
            "FFDRIVER_LOG_FORMAT", logging_file.get("format", "text")
        ),
        include_stderr=reader.get_bool(
            "FFDRIVER_LOG_INCLUDE_STDERR", logging_file.get("include_stderr", False)
        ),
        max_bytes=logging_file.get("max_bytes", 10_485_760),
        backup_count=logging_file.get("backup_count", 5),
    )

    return FFDriverConfig(
        binaries=binaries,
        driver=driver,
        cache=cache,
        logging=logging_config,
    )
