"""CHECK-SPELLING - Pinned typos-cli installer and runner.

This package provides a Python CLI that makes sure an exact release of
typos-cli is installed through cargo and then runs it against a target path.
"""

__version__ = "1.0.0"
SCRIPT_NAME = "CHECK-SPELLING"
TOOL_PACKAGE = "typos-cli"
TOOL_VERSION = "1.24.6"
TOOL_EXECUTABLE = "typos"
PACKAGE_MANAGER = "cargo"

__all__ = [
    "__version__",
    "SCRIPT_NAME",
    "TOOL_PACKAGE",
    "TOOL_VERSION",
    "TOOL_EXECUTABLE",
    "PACKAGE_MANAGER",
]
