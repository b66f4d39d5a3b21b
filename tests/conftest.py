"""Shared test fixtures for ffdriver."""

import stat
import sys
from collections.abc import Callable
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from ffdriver.cache import MemoryCache
from ffdriver.driver.configuration import DriverConfiguration
from ffdriver.driver.ffmpeg import FFMpegDriver, FFProbeDriver

FFPROBE_HELP = """\
Simple multimedia streams analyzer
usage: ffprobe [OPTIONS] [INPUT_FILE]

Main options:
-L                  show license
-h topic            show help
-loglevel loglevel  set logging level
-show_format        show format/container info
-show_streams       show streams info
-print_format format  set the output printing format
-of format          alias for -print_format
"""


@pytest.fixture
def ffprobe_help() -> str:
    """Return a representative ffprobe -help output."""
    return FFPROBE_HELP


@pytest.fixture
def memory_cache() -> MemoryCache:
    """Create an empty in-memory cache."""
    return MemoryCache()


@pytest.fixture
def ffprobe_driver(ffprobe_help: str) -> MagicMock:
    """Create a mock ffprobe driver answering -help."""
    driver = MagicMock(spec=FFProbeDriver)
    driver.configuration = DriverConfiguration()
    driver.command.return_value = ffprobe_help
    return driver


@pytest.fixture
def ffmpeg_driver() -> MagicMock:
    """Create a mock ffmpeg driver with an empty configuration."""
    driver = MagicMock(spec=FFMpegDriver)
    driver.configuration = DriverConfiguration()
    driver.command.return_value = ""
    return driver


@pytest.fixture
def make_script(tmp_path: Path) -> Callable[[str], Path]:
    """Return a factory writing executable Python scripts.

    The scripts stand in for ffmpeg/ffprobe in driver tests.
    """

    def _make(body: str, name: str = "fake-binary") -> Path:
        script = tmp_path / name
        script.write_text(f"#!{sys.executable}\nimport sys\n{body}\n")
        script.chmod(script.stat().st_mode | stat.S_IXUSR)
        return script

    return _make
