"""Unit tests for logging configuration and formatting."""

import json
import logging
from collections.abc import Callable, Iterator
from logging.handlers import RotatingFileHandler
from pathlib import Path

import pytest

from ffdriver.config.models import LoggingConfig
from ffdriver.driver.binary import BinaryDriver
from ffdriver.exceptions import ExecutionFailureError
from ffdriver.logging import (
    PACKAGE_LOGGER,
    JSONFormatter,
    TextFormatter,
    configure_logging,
    record_context,
)


def make_record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "ffdriver.driver.binary",
        logging.ERROR,
        __file__,
        1,
        "%s failed",
        ("ffmpeg",),
        None,
    )
    record.__dict__.update(extra)
    return record


@pytest.fixture
def restore_package_logger() -> Iterator[logging.Logger]:
    """Restore the ffdriver logger after the test."""
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    handlers = package_logger.handlers[:]
    level = package_logger.level
    propagate = package_logger.propagate
    yield package_logger
    for handler in package_logger.handlers:
        if handler not in handlers:
            handler.close()
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)
    package_logger.propagate = propagate


class TestRecordContext:
    """Tests for record_context."""

    def test_only_known_fields(self) -> None:
        """Unrelated extras are not treated as context."""
        record = make_record(return_code=1, request_id="abc")

        assert record_context(record) == {"return_code": 1}


class TestJSONFormatter:
    """Tests for JSONFormatter."""

    def test_includes_driver_context(self) -> None:
        """Binary, command and exit code are top-level keys."""
        record = make_record(
            binary="ffmpeg", command=["ffmpeg", "-i", "in.wav"], return_code=1
        )

        data = json.loads(JSONFormatter().format(record))

        assert data["level"] == "error"
        assert data["logger"] == "ffdriver.driver.binary"
        assert data["message"] == "ffmpeg failed"
        assert data["binary"] == "ffmpeg"
        assert data["command"] == ["ffmpeg", "-i", "in.wav"]
        assert data["return_code"] == 1

    def test_without_context(self) -> None:
        """Records without context only carry the base keys."""
        data = json.loads(JSONFormatter().format(make_record()))

        assert set(data) == {"time", "level", "logger", "message"}


class TestTextFormatter:
    """Tests for TextFormatter."""

    def test_appends_context(self) -> None:
        """Context is appended with the command shell-quoted."""
        record = make_record(command=["ffmpeg", "-i", "my song.wav"], return_code=1)

        line = TextFormatter().format(record)

        assert line.endswith("[command=ffmpeg -i 'my song.wav' return_code=1]")
        assert "ERROR" in line

    def test_plain_line_without_context(self) -> None:
        """Records without context end with the message."""
        assert TextFormatter().format(make_record()).endswith("ffmpeg failed")


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_stderr_by_default(
        self, restore_package_logger: logging.Logger
    ) -> None:
        """Without a file, a single stderr handler is installed."""
        package_logger = configure_logging(LoggingConfig(level="debug"))

        assert package_logger is restore_package_logger
        assert package_logger.level == logging.DEBUG
        assert package_logger.propagate is False
        (handler,) = package_logger.handlers
        assert isinstance(handler.formatter, TextFormatter)

    def test_root_logger_untouched(
        self, restore_package_logger: logging.Logger
    ) -> None:
        """Only the package logger receives handlers."""
        root_handlers = logging.getLogger().handlers[:]

        configure_logging(LoggingConfig())

        assert logging.getLogger().handlers == root_handlers

    def test_reconfigure_replaces_handlers(
        self, restore_package_logger: logging.Logger
    ) -> None:
        """A second call does not stack handlers."""
        configure_logging(LoggingConfig())
        configure_logging(LoggingConfig())

        assert len(restore_package_logger.handlers) == 1

    def test_file_and_stderr(
        self, restore_package_logger: logging.Logger, tmp_path: Path
    ) -> None:
        """include_stderr adds a stderr handler next to the file."""
        configure_logging(
            LoggingConfig(file=tmp_path / "logs" / "ffdriver.log", include_stderr=True)
        )

        file_handler, stderr_handler = restore_package_logger.handlers
        assert isinstance(file_handler, RotatingFileHandler)
        assert not isinstance(stderr_handler, RotatingFileHandler)
        assert (tmp_path / "logs").is_dir()

    def test_driver_failure_logged_as_json(
        self,
        restore_package_logger: logging.Logger,
        tmp_path: Path,
        make_script: Callable[..., Path],
    ) -> None:
        """A failed invocation is logged with its command and exit code."""
        log_file = tmp_path / "ffdriver.log"
        configure_logging(LoggingConfig(file=log_file, format="json"))
        script = make_script("sys.exit(4)")

        with pytest.raises(ExecutionFailureError):
            BinaryDriver(script).command(["-i", "in.wav"])
        for handler in restore_package_logger.handlers:
            handler.flush()

        entries = [json.loads(line) for line in log_file.read_text().splitlines()]
        (failure,) = [e for e in entries if e["level"] == "error"]
        assert failure["return_code"] == 4
        assert failure["command"] == [str(script), "-i", "in.wav"]
        assert failure["binary"] == "binary"
