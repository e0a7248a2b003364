"""typos CLI integration for CHECK-SPELLING.

This module provides the typos wrapper and version comparison used to
report how an installed release differs from the pinned one.
"""

import subprocess

from packaging import version

from check_spelling.utils.console import print_error
from check_spelling.utils.errors import ExitCode, shell_exit_status
from check_spelling.utils.logging import log_command


def describe_version_drift(installed: str, required: str) -> str:
    """Describe how an installed version relates to the required one.

    Args:
        installed: Version currently installed (e.g. "1.23.0")
        required: Pinned version (e.g. "1.24.6")

    Returns:
        "older" or "newer"; "different" when the two compare equal but are
        spelled differently (e.g. "1.24" vs "1.24.0") or either one is not
        a parseable version
    """
    try:
        found, wanted = version.parse(installed), version.parse(required)
    except version.InvalidVersion:
        return "different"
    if found < wanted:
        return "older"
    if found > wanted:
        return "newer"
    return "different"


class TyposClient:
    """Wrapper for running the typos executable.

    Attributes:
        executable: typos executable name or path
    """

    def __init__(self, executable: str = "typos") -> None:
        self.executable = executable

    def build_command(self, target: str | None = None) -> list[str]:
        """Build the typos command list.

        An absent or empty target adds no argument at all, so typos falls
        back to scanning the current directory.
        """
        cmd = [self.executable]
        if target:
            cmd.append(target)
        return cmd

    def run(self, target: str | None = None) -> int:
        """Run typos against a target path.

        stdin, stdout and stderr are inherited; findings are printed by
        typos itself.

        Args:
            target: Path to scan, or None/empty for the current directory

        Returns:
            typos exit status (127 if the executable is missing,
            128 + N if killed by signal N)
        """
        cmd = self.build_command(target)
        display = " ".join(cmd)
        try:
            result = subprocess.run(cmd)
        except FileNotFoundError:
            log_command(display, ExitCode.COMMAND_NOT_FOUND)
            print_error(
                f"{self.executable} is not installed or not in PATH "
                "(is the cargo bin directory on PATH?)"
            )
            return ExitCode.COMMAND_NOT_FOUND

        status = shell_exit_status(result.returncode)
        log_command(display, status)
        return status


__all__ = [
    "TyposClient",
    "describe_version_drift",
]
