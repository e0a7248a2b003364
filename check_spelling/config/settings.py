"""Settings dataclass for CHECK-SPELLING configuration.

This module defines the Settings dataclass that holds the pinned tool
identity and the package manager used to install it.
"""

from dataclasses import dataclass, field
from pathlib import Path

from check_spelling import PACKAGE_MANAGER, TOOL_EXECUTABLE, TOOL_PACKAGE, TOOL_VERSION


@dataclass
class Settings:
    """Configuration settings for CHECK-SPELLING.

    All settings default to the pinned release and can be overridden from
    the configuration files or environment variables.

    Attributes:
        tool_package: Package name registered with the package manager
        tool_version: Exact release that must be installed
        tool_executable: Executable provided by the package
        package_manager: Package manager executable used to list and install
    """

    tool_package: str = TOOL_PACKAGE
    tool_version: str = TOOL_VERSION
    tool_executable: str = TOOL_EXECUTABLE
    package_manager: str = PACKAGE_MANAGER

    # Config key to attribute mapping. Keys share the CHECK_SPELLING_ prefix so
    # unrelated environment variables never change the pinned tool.
    _key_mapping: dict[str, str] = field(
        default_factory=lambda: {
            "CHECK_SPELLING_TOOL_PACKAGE": "tool_package",
            "CHECK_SPELLING_TOOL_VERSION": "tool_version",
            "CHECK_SPELLING_TOOL_EXECUTABLE": "tool_executable",
            "CHECK_SPELLING_PACKAGE_MANAGER": "package_manager",
        },
        repr=False,
    )

    def get_attribute_for_key(self, key: str) -> str | None:
        """Get the attribute name for a config key, or None if unknown."""
        return self._key_mapping.get(key)

    def get_key_for_attribute(self, attr: str) -> str | None:
        """Get the config key for an attribute name, or None if unknown."""
        for key, value in self._key_mapping.items():
            if value == attr:
                return key
        return None

    @classmethod
    def get_config_keys(cls) -> list[str]:
        """Get list of all valid configuration keys."""
        temp = cls()
        return list(temp._key_mapping.keys())

    @property
    def package_spec(self) -> str:
        """Package identifier passed to the installer (e.g. typos-cli@1.24.6)."""
        return f"{self.tool_package}@{self.tool_version}"


# Default configuration file path
CONFIG_FILE = Path.home() / ".check-spelling-config"


__all__ = [
    "Settings",
    "CONFIG_FILE",
]
