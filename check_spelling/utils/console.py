"""Rich-based console output utilities.

Messages are escaped before printing, so paths and command output with
square brackets are shown literally instead of being parsed as markup.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

from check_spelling import __version__

if TYPE_CHECKING:
    from check_spelling.config.settings import Settings

custom_theme = Theme(
    {
        "error": "bold red",
        "warning": "bold yellow",
        "info": "bold blue",
        "header": "bold magenta",
    }
)

console = Console(theme=custom_theme)
console_err = Console(theme=custom_theme, stderr=True)


def _emit(target: Console, level: str, color: str, message: str) -> None:
    from check_spelling.utils.logging import log_message

    style = level.lower()
    target.print(f"[{style}][[{level}]][/{style}] [{color}]{escape(message)}[/{color}]")
    log_message(f"{level}: {message}")


def print_error(message: str) -> None:
    """Print error message in red on stderr."""
    _emit(console_err, "ERROR", "red", message)


def print_warning(message: str) -> None:
    """Print warning message in yellow."""
    _emit(console, "WARNING", "yellow", message)


def print_info(message: str) -> None:
    """Print info message in cyan."""
    _emit(console, "INFO", "cyan", message)


def print_header(title: str) -> None:
    """Print section header in magenta."""
    console.print()
    console.print(f"[header]=== {escape(title)} ===[/header]")
    console.print()


def show_version(settings: Settings) -> None:
    """Display version information and the tool that will actually be used."""
    console.print(f"[bold]CHECK-SPELLING[/bold] v{__version__}")
    console.print()
    console.print("Pinned tool:")
    console.print(f"  - {escape(settings.tool_package)}: == {escape(settings.tool_version)}")
    console.print(f"  - Executable: {escape(settings.tool_executable)}")
    console.print(f"  - Installed with: {escape(settings.package_manager)}")
    console.print()


__all__ = [
    "console",
    "console_err",
    "custom_theme",
    "print_error",
    "print_warning",
    "print_info",
    "print_header",
    "show_version",
]
