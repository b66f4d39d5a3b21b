"""Exit codes for ffdriver CLI commands.

Exit code ranges:
    0: Success
    1-9: General errors
    10-19: Invalid arguments
    20-29: Target/file errors
    30-39: Tool/dependency errors
    40-49: Operation errors
    50-59: Probe errors
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes for ffdriver CLI commands."""

    # Success (0)
    SUCCESS = 0

    # General errors (1-9)
    NOT_SUPPORTED = 1

    # Invalid arguments (10-19)
    INVALID_FORMAT = 10

    # Target/file errors (20-29)
    TARGET_NOT_FOUND = 20

    # Tool/dependency errors (30-39)
    TOOL_NOT_AVAILABLE = 30
    PROBE_UNAVAILABLE = 31

    # Operation errors (40-49)
    ENCODING_FAILED = 40

    # Probe errors (50-59)
    PROBE_ERROR = 50
