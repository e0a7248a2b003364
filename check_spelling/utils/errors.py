"""Custom exceptions and exit codes for CHECK-SPELLING.

This module defines the exit codes and exception hierarchy used throughout
the application. Failures of external commands keep the command's own exit
status so the wrapper exits exactly as the failing step did.
"""

from enum import IntEnum
from typing import ClassVar


class ExitCode(IntEnum):
    """Exit codes produced by the wrapper itself.

    Exit statuses of cargo and typos are passed through unchanged and are
    not limited to these values.
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    COMMAND_NOT_FOUND = 127  # Shell convention for a missing executable
    USER_CANCELLED = 130  # Shell convention for SIGINT (128 + 2)


def shell_exit_status(returncode: int) -> int:
    """Convert a subprocess return code to the status a shell would report.

    A child killed by signal N has a negative return code (-N) in Python;
    shells report it as 128 + N.
    """
    if returncode < 0:
        return 128 + -returncode
    return returncode


class CheckSpellingError(Exception):
    """Base exception for CHECK-SPELLING errors.

    All custom exceptions in this application should inherit from this class.
    Each exception type has an associated exit code for proper error reporting.
    """

    _default_exit_code: ClassVar[int] = ExitCode.GENERAL_ERROR

    def __init__(self, message: str, exit_code: int | None = None) -> None:
        """Initialize the exception."""
        super().__init__(message)
        self._exit_code = exit_code

    @property
    def exit_code(self) -> int:
        """Get the exit code for this exception."""
        if self._exit_code is not None:
            return self._exit_code
        return self.__class__._default_exit_code


class CommandFailedError(CheckSpellingError):
    """An external command exited with a non-zero status.

    Attributes:
        command: The command line that failed, as a display string
    """

    def __init__(self, message: str, command: str, exit_code: int | None = None) -> None:
        super().__init__(message, exit_code)
        self.command = command


class QueryFailedError(CommandFailedError):
    """Listing installed packages failed.

    Raised when:
    - The package manager executable is not found in PATH
    - 'cargo install --list' exits with a non-zero status
    """


class InstallFailedError(CommandFailedError):
    """Installing the pinned tool release failed.

    Raised when:
    - The package manager executable is not found in PATH
    - 'cargo install <package>@<version>' exits with a non-zero status
      (network error, unknown version, permission error)
    """


class ConfigurationError(CheckSpellingError):
    """A configuration value is invalid.

    Raised when:
    - A required value (package, version, executable) is empty
    - A value contains whitespace and cannot name a package or command
    - A config file cannot be read or is not valid UTF-8
    """

    _default_exit_code: ClassVar[int] = ExitCode.GENERAL_ERROR


__all__ = [
    "ExitCode",
    "CheckSpellingError",
    "CommandFailedError",
    "QueryFailedError",
    "InstallFailedError",
    "ConfigurationError",
    "shell_exit_status",
]
