"""Unit tests for configuration loading and precedence."""

from pathlib import Path

import pytest

from ffdriver.config.loader import (
    DEFAULT_CONFIG_FILE,
    get_config,
    get_default_config_path,
    load_config_file,
)

CONFIG_TOML = """
[binaries]
ffmpeg = "/opt/file/ffmpeg"
ffprobe = "/opt/file/ffprobe"

[driver]
timeout = 60
threads = 4

[cache]
backend = "file"
ttl_hours = 12

[logging]
level = "info"
format = "json"
"""


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "config.toml"
    path.write_text(CONFIG_TOML)
    return path


class TestLoadConfigFile:
    """Tests for load_config_file."""

    def test_missing_file_returns_empty(self, tmp_path: Path) -> None:
        """A missing file yields an empty dict."""
        assert load_config_file(tmp_path / "none.toml") == {}

    def test_invalid_toml_returns_empty(self, tmp_path: Path) -> None:
        """Unparseable TOML yields an empty dict."""
        path = tmp_path / "bad.toml"
        path.write_text("[driver\nthreads = ")

        assert load_config_file(path) == {}

    def test_parses_sections(self, config_file: Path) -> None:
        """Sections are returned as nested dicts."""
        assert load_config_file(config_file)["driver"]["threads"] == 4

    def test_default_path_from_env(self, tmp_path: Path) -> None:
        """FFDRIVER_CONFIG_PATH overrides the default location."""
        env = {"FFDRIVER_CONFIG_PATH": str(tmp_path / "alt.toml")}

        assert get_default_config_path(env) == tmp_path / "alt.toml"
        assert get_default_config_path({}) == DEFAULT_CONFIG_FILE


class TestGetConfigPrecedence:
    """Tests for get_config precedence: CLI > env > file > default."""

    def test_defaults(self, tmp_path: Path) -> None:
        """Without any source the defaults apply."""
        config = get_config(config_path=tmp_path / "none.toml", env={})

        assert config.binaries.ffmpeg is None
        assert config.driver.timeout == 300
        assert config.driver.threads is None
        assert config.cache.backend == "memory"
        assert config.logging.level == "warning"

    def test_file_values(self, config_file: Path) -> None:
        """Config file values override defaults."""
        config = get_config(config_path=config_file, env={})

        assert config.binaries.ffmpeg == Path("/opt/file/ffmpeg")
        assert config.driver.timeout == 60
        assert config.driver.threads == 4
        assert config.cache.backend == "file"
        assert config.cache.ttl_hours == 12
        assert config.logging.format == "json"

    def test_env_overrides_file(self, config_file: Path) -> None:
        """Environment variables override the config file."""
        env = {
            "FFDRIVER_FFMPEG_PATH": "/opt/env/ffmpeg",
            "FFDRIVER_THREADS": "8",
            "FFDRIVER_CACHE_BACKEND": "memory",
            "FFDRIVER_LOG_LEVEL": "debug",
        }

        config = get_config(config_path=config_file, env=env)

        assert config.binaries.ffmpeg == Path("/opt/env/ffmpeg")
        assert config.binaries.ffprobe == Path("/opt/file/ffprobe")
        assert config.driver.threads == 8
        assert config.cache.backend == "memory"
        assert config.logging.level == "debug"

    def test_cli_overrides_env(self, config_file: Path) -> None:
        """Explicit arguments override everything."""
        env = {"FFDRIVER_THREADS": "8", "FFDRIVER_TIMEOUT": "30"}

        config = get_config(
            config_path=config_file,
            env=env,
            ffmpeg_path=Path("/opt/cli/ffmpeg"),
            threads=16,
            timeout=10,
        )

        assert config.binaries.ffmpeg == Path("/opt/cli/ffmpeg")
        assert config.driver.threads == 16
        assert config.driver.timeout == 10

    def test_zero_timeout_disables(self, tmp_path: Path) -> None:
        """A timeout of zero means no timeout."""
        config = get_config(
            config_path=tmp_path / "none.toml", env={"FFDRIVER_TIMEOUT": "0"}
        )

        assert config.driver.timeout is None

    def test_invalid_env_int_falls_back(self, config_file: Path) -> None:
        """Unparseable integers keep the lower-precedence value."""
        config = get_config(config_path=config_file, env={"FFDRIVER_THREADS": "x"})

        assert config.driver.threads == 4

    def test_invalid_value_raises(self, tmp_path: Path) -> None:
        """Invalid settings fail validation."""
        with pytest.raises(ValueError, match="backend"):
            get_config(
                config_path=tmp_path / "none.toml",
                env={"FFDRIVER_CACHE_BACKEND": "redis"},
            )

    def test_zero_cache_ttl_rejected(self, tmp_path: Path) -> None:
        """A cache TTL of zero hours is refused."""
        with pytest.raises(ValueError, match="ttl_hours"):
            get_config(
                config_path=tmp_path / "none.toml",
                env={"FFDRIVER_CACHE_TTL_HOURS": "0"},
            )
