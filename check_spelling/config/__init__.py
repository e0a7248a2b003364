"""Configuration management for CHECK-SPELLING.

This package contains:
- settings: Settings dataclass with configuration fields
- manager: ConfigManager class for loading configuration

Configuration Format
====================
Flat KEY=VALUE (environment variable style):

    CHECK_SPELLING_TOOL_PACKAGE=typos-cli
    CHECK_SPELLING_TOOL_VERSION="1.24.6"
    CHECK_SPELLING_TOOL_EXECUTABLE=typos
    CHECK_SPELLING_PACKAGE_MANAGER=cargo

The executable keys are only honored from the global config file and the
environment, never from a .check-spelling file inside the scanned tree.
"""

from check_spelling.config.manager import ConfigManager
from check_spelling.config.settings import CONFIG_FILE, Settings

__all__ = [
    "Settings",
    "ConfigManager",
    "CONFIG_FILE",
]
