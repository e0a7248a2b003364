"""CLI interface for CHECK-SPELLING.

This module provides the Typer-based command-line interface: one optional
TARGET argument plus informational --version and --config flags.
"""

from typing import Annotated

import typer

from check_spelling.config.manager import ConfigManager
from check_spelling.runner import run_spell_check
from check_spelling.utils.console import print_error, print_info, show_version
from check_spelling.utils.errors import CheckSpellingError, ExitCode
from check_spelling.utils.logging import setup_logging

app = typer.Typer(
    name="check-spelling",
    help="CHECK-SPELLING - Install the pinned typos-cli release and run it",
    add_completion=False,
    no_args_is_help=False,
)


def version_callback(value: bool) -> None:
    """Display version and the effective tool settings, then exit."""
    if value:
        config = ConfigManager()
        try:
            settings = config.load()
        except CheckSpellingError as e:
            print_error(str(e))
            raise typer.Exit(e.exit_code) from e
        show_version(settings)
        raise typer.Exit()


@app.command()
def main(
    target: Annotated[
        str | None,
        typer.Argument(
            help="Path to check for spelling mistakes (default: current directory)",
            show_default=False,
        ),
    ] = None,
    show_config: Annotated[
        bool,
        typer.Option(
            "--config",
            help="Show current configuration and exit",
        ),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version information",
        ),
    ] = None,
) -> None:
    """Install the pinned typos-cli release if needed, then run typos.

    The exit status is that of the first failing step: listing installed
    packages, installing typos-cli, or typos itself.
    """
    setup_logging()

    try:
        config = ConfigManager()
        config.load()

        if show_config:
            config.show()
            raise typer.Exit()

        settings = config.validate()
        exit_code = run_spell_check(settings, target)

    except CheckSpellingError as e:
        print_error(str(e))
        raise typer.Exit(e.exit_code) from e

    except KeyboardInterrupt as e:
        print_info("\nOperation cancelled by user")
        raise typer.Exit(ExitCode.USER_CANCELLED) from e

    raise typer.Exit(exit_code)


__all__ = ["app", "main"]
