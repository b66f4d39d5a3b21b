"""Process invocation for external binaries.

BinaryDriver runs a binary with an argument list, captures its output, and
forwards every output line to the attached listeners while the process
runs. Non-zero exits, timeouts and start-up failures surface as
ExecutionFailureError.
"""

import logging
import shutil
import subprocess  # nosec B404 - subprocess is required to drive ffmpeg/ffprobe
import threading
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import IO, Self

from ffdriver.driver.configuration import DriverConfiguration
from ffdriver.driver.listeners import STREAM_ERR, STREAM_OUT, Listener
from ffdriver.exceptions import BinaryNotFoundError, ExecutionFailureError

logger = logging.getLogger(__name__)


class BinaryDriver:
    """Run one external binary.

    Subclasses set ``name``, ``binaries_key`` and ``default_binaries`` so that
    create() can resolve the executable from configuration.
    """

    name: str = "binary"
    binaries_key: str = ""
    default_binaries: tuple[str, ...] = ()

    # Seconds to wait for reader threads after the process has exited
    STREAM_DRAIN_TIMEOUT: float = 5.0

    def __init__(
        self,
        binary: Path | str,
        configuration: DriverConfiguration | None = None,
    ) -> None:
        self.binary = Path(binary)
        self._configuration = configuration or DriverConfiguration()

    @property
    def configuration(self) -> DriverConfiguration:
        return self._configuration

    @configuration.setter
    def configuration(self, configuration: DriverConfiguration) -> None:
        self._configuration = configuration

    @classmethod
    def create(cls, configuration: DriverConfiguration | None = None) -> Self:
        """Create a driver, resolving the binary from configuration.

        The ``<name>.binaries`` key may hold a path or a list of candidate
        names or paths; the first one that resolves wins. Without the key,
        ``default_binaries`` is searched in PATH.

        Raises:
            BinaryNotFoundError: If no candidate resolves to an executable.
        """
        configuration = configuration or DriverConfiguration()
        candidates = configuration.get(cls.binaries_key, cls.default_binaries)
        if isinstance(candidates, (str, Path)):
            candidates = [candidates]

        binary = _find_binary(candidates)
        if binary is None:
            raise BinaryNotFoundError(
                f"Executable not found, proposed: {', '.join(map(str, candidates))}"
            )

        logger.debug("Using %s binary at %s", cls.name, binary)
        return cls(binary, configuration)

    def command(
        self,
        args: Sequence[str],
        bypass_errors: bool = False,
        listeners: Iterable[Listener] | None = None,
    ) -> str:
        """Run the binary with args and return its stdout.

        Args:
            args: Arguments, without the binary itself.
            bypass_errors: Return output even when the exit code is non-zero.
            listeners: Listeners fed with each output line while running.

        Returns:
            Captured stdout.

        Raises:
            ExecutionFailureError: If the process cannot start, times out, or
                exits non-zero while bypass_errors is False.
        """
        cmd = [str(self.binary), *(str(arg) for arg in args)]
        listeners = list(listeners or ())
        timeout = self._configuration.get("timeout") or None

        context = {"binary": self.name, "command": cmd}
        logger.debug("Running %s", self.name, extra=context)
        try:
            process = subprocess.Popen(  # nosec B603
                cmd,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                errors="replace",
            )
        except OSError as e:
            logger.error("%s could not be started: %s", self.name, e, extra=context)
            raise ExecutionFailureError(
                f"{self.name} could not be started: {e}", command=cmd
            ) from e

        stdout_lines: list[str] = []
        stderr_lines: list[str] = []
        readers = [
            threading.Thread(
                target=_pump,
                args=(process.stdout, STREAM_OUT, stdout_lines, listeners),
                daemon=True,
            ),
            threading.Thread(
                target=_pump,
                args=(process.stderr, STREAM_ERR, stderr_lines, listeners),
                daemon=True,
            ),
        ]
        for reader in readers:
            reader.start()

        try:
            return_code = process.wait(timeout=timeout)
        except subprocess.TimeoutExpired as e:
            process.kill()
            process.wait()
            self._join(readers)
            logger.error(
                "%s timed out after %s seconds",
                self.name,
                timeout,
                extra={**context, "return_code": -1},
            )
            raise ExecutionFailureError(
                f"{self.name} timed out after {timeout} seconds",
                return_code=-1,
                stderr="".join(stderr_lines),
                command=cmd,
            ) from e

        self._join(readers)
        stdout = "".join(stdout_lines)
        stderr = "".join(stderr_lines)

        if return_code != 0 and not bypass_errors:
            logger.error(
                "%s failed with exit code %d: %s",
                self.name,
                return_code,
                stderr.strip(),
                extra={**context, "return_code": return_code},
            )
            raise ExecutionFailureError(
                f"{self.name} failed to execute command {' '.join(cmd)}",
                return_code=return_code,
                stderr=stderr,
                command=cmd,
            )

        logger.debug(
            "%s exited with code %d",
            self.name,
            return_code,
            extra={**context, "return_code": return_code},
        )
        return stdout

    def _join(self, readers: list[threading.Thread]) -> None:
        for reader in readers:
            reader.join(timeout=self.STREAM_DRAIN_TIMEOUT)
            if reader.is_alive():
                logger.warning("%s output reader did not terminate cleanly", self.name)


def _find_binary(candidates: Iterable[str | Path]) -> Path | None:
    """Return the first candidate that resolves to an executable."""
    for candidate in candidates:
        candidate_path = Path(candidate)
        if candidate_path.is_file():
            return candidate_path
        which_result = shutil.which(str(candidate))
        if which_result:
            return Path(which_result)
    return None


def _pump(
    pipe: IO[str] | None,
    stream: str,
    sink: list[str],
    listeners: list[Listener],
) -> None:
    """Read lines from pipe into sink, notifying listeners."""
    if pipe is None:
        return
    try:
        for line in pipe:
            sink.append(line)
            for listener in listeners:
                try:
                    listener.handle(stream, line.rstrip("\r\n"))
                except Exception as e:
                    logger.warning("Listener error on %s: %s", stream, e)
    except (ValueError, OSError) as e:
        # Pipe closed or process terminated
        logger.debug("%s reader stopped: %s", stream, e)
