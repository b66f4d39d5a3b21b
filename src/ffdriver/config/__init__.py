"""Configuration management for ffdriver.

Configuration is loaded with precedence handling:
1. CLI flags (highest priority)
2. Environment variables (FFDRIVER_*)
3. Config file (~/.ffdriver/config.toml)
4. Default values (lowest priority)
"""

from ffdriver.config.env import EnvReader
from ffdriver.config.loader import (
    get_config,
    get_default_config_path,
    load_config_file,
)
from ffdriver.config.logging_factory import build_logging_config
from ffdriver.config.models import (
    DEFAULT_THREADS,
    BinariesConfig,
    CacheConfig,
    DriverConfig,
    FFDriverConfig,
    LoggingConfig,
)

__all__ = [
    # Models
    "BinariesConfig",
    "CacheConfig",
    "DEFAULT_THREADS",
    "DriverConfig",
    "FFDriverConfig",
    "LoggingConfig",
    # Loading
    "EnvReader",
    "build_logging_config",
    "get_config",
    "get_default_config_path",
    "load_config_file",
]
