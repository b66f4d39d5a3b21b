"""Exception hierarchy for ffdriver.

Every error raised by the package derives from FFDriverError so callers can
catch driver failures with a single except clause.
"""


class FFDriverError(Exception):
    """Base class for ffdriver errors."""

    pass


class ExecutionFailureError(FFDriverError):
    """An external binary exited abnormally.

    Raised by the process drivers when the invoked binary returns a
    non-zero exit code, times out, or cannot be started.
    """

    def __init__(
        self,
        message: str,
        return_code: int = -1,
        stderr: str = "",
        command: list[str] | None = None,
    ):
        self.return_code = return_code
        self.stderr = stderr
        self.command = command or []
        super().__init__(message)


class BinaryNotFoundError(FFDriverError):
    """None of the configured binary candidates could be resolved."""

    pass


class ProbeUnavailableError(FFDriverError):
    """The probe binary cannot answer capability queries.

    Usually means ffprobe is too old to support the ``-help`` option.
    """

    def __init__(self, message: str, code: int = 0):
        self.code = code
        super().__init__(message)


class ProbeError(FFDriverError):
    """ffprobe answered but its output could not be used."""

    pass


class InvalidFilterError(FFDriverError):
    """A filter does not apply to the media it was added to."""

    pass


class InvalidFormatError(FFDriverError, ValueError):
    """An output format was given invalid encoding parameters."""

    pass


class EncodingFailedError(FFDriverError):
    """The ffmpeg transcode invocation failed."""

    pass
