"""Cargo integration for CHECK-SPELLING.

This module wraps the two package manager operations the wrapper needs:
listing installed packages and installing an exact package release.
"""

import re
import subprocess
from dataclasses import dataclass

from check_spelling.utils.errors import (
    ExitCode,
    InstallFailedError,
    QueryFailedError,
    shell_exit_status,
)
from check_spelling.utils.logging import log_command, log_message

# Header line of `cargo install --list`, e.g.
#   typos-cli v1.24.6:
#   my-tool v0.1.0 (/home/me/src/my-tool):
# Binaries provided by the package follow on indented lines.
_LIST_HEADER_RE = re.compile(r"^(?P<name>\S+) v(?P<version>\S+?)(?: \((?P<source>[^)]*)\))?:$")


@dataclass(frozen=True)
class InstalledPackage:
    """One package entry from the installed package listing.

    Attributes:
        name: Package name (e.g. "typos-cli")
        version: Installed version without the "v" prefix (e.g. "1.24.6")
        source: Install source for path/git installs, empty for registry installs
    """

    name: str
    version: str
    source: str = ""


def parse_install_list(output: str) -> list[InstalledPackage]:
    """Parse `cargo install --list` output into package entries.

    Indented binary lines and anything that is not a package header
    are skipped.

    Args:
        output: Text output of `cargo install --list`

    Returns:
        Installed packages in listing order
    """
    packages: list[InstalledPackage] = []
    for line in output.splitlines():
        if not line or line[0].isspace():
            continue
        match = _LIST_HEADER_RE.match(line.rstrip())
        if match:
            packages.append(
                InstalledPackage(
                    name=match.group("name"),
                    version=match.group("version"),
                    source=match.group("source") or "",
                )
            )
    return packages


class CargoClient:
    """Wrapper for the cargo commands used to manage the pinned tool.

    Attributes:
        executable: Cargo executable name or path
    """

    def __init__(self, executable: str = "cargo") -> None:
        self.executable = executable

    def list_installed(self) -> list[InstalledPackage]:
        """List packages installed with `cargo install`.

        Returns:
            Parsed package entries

        Raises:
            QueryFailedError: If cargo is missing or the listing exits non-zero
        """
        cmd = [self.executable, "install", "--list"]
        display = " ".join(cmd)
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                errors="replace",
                check=True,
            )
        except FileNotFoundError as e:
            log_command(display, ExitCode.COMMAND_NOT_FOUND)
            raise QueryFailedError(
                f"{self.executable} is not installed or not in PATH",
                command=display,
                exit_code=ExitCode.COMMAND_NOT_FOUND,
            ) from e
        except subprocess.CalledProcessError as e:
            status = shell_exit_status(e.returncode)
            log_command(display, status)
            if e.stderr:
                log_message(f"  stderr: {e.stderr.strip()}")
            raise QueryFailedError(
                f"Failed to list installed packages ('{display}' exited with {status})",
                command=display,
                exit_code=status,
            ) from e

        log_command(display, result.returncode)
        return parse_install_list(result.stdout)

    def installed_version(self, package: str) -> str | None:
        """Get the installed version of a package, or None if not installed."""
        for entry in self.list_installed():
            if entry.name == package:
                return entry.version
        return None

    def install(self, package: str, version: str) -> None:
        """Install an exact package release.

        Output is not captured, so cargo's download and build progress
        goes straight to the terminal.

        Args:
            package: Package name (e.g. "typos-cli")
            version: Exact version (e.g. "1.24.6")

        Raises:
            InstallFailedError: If cargo is missing or the install exits non-zero
        """
        cmd = [self.executable, "install", f"{package}@{version}"]
        display = " ".join(cmd)
        try:
            result = subprocess.run(cmd, check=True)
        except FileNotFoundError as e:
            log_command(display, ExitCode.COMMAND_NOT_FOUND)
            raise InstallFailedError(
                f"{self.executable} is not installed or not in PATH",
                command=display,
                exit_code=ExitCode.COMMAND_NOT_FOUND,
            ) from e
        except subprocess.CalledProcessError as e:
            status = shell_exit_status(e.returncode)
            log_command(display, status)
            raise InstallFailedError(
                f"Failed to install {package}@{version} ('{display}' exited with {status})",
                command=display,
                exit_code=status,
            ) from e

        log_command(display, result.returncode)


__all__ = [
    "CargoClient",
    "InstalledPackage",
    "parse_install_list",
]
