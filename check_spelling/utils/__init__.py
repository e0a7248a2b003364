"""Utility modules for CHECK-SPELLING.

This package contains:
- console: Rich-based terminal output utilities
- errors: Custom exceptions and exit codes
- logging: Logging configuration
"""

from check_spelling.utils.console import (
    console,
    print_error,
    print_header,
    print_info,
    print_warning,
)
from check_spelling.utils.errors import (
    CheckSpellingError,
    CommandFailedError,
    ConfigurationError,
    ExitCode,
    InstallFailedError,
    QueryFailedError,
)
from check_spelling.utils.logging import log_command, log_message, setup_logging

__all__ = [
    # Console
    "console",
    "print_error",
    "print_warning",
    "print_info",
    "print_header",
    # Errors
    "ExitCode",
    "CheckSpellingError",
    "CommandFailedError",
    "QueryFailedError",
    "InstallFailedError",
    "ConfigurationError",
    # Logging
    "setup_logging",
    "log_message",
    "log_command",
]
