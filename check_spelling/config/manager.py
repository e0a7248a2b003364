"""Configuration manager for CHECK-SPELLING.

This module provides the ConfigManager class for loading configuration
values with a cascading hierarchy:

    1. Environment Variables (highest priority)
    2. Local Config (.check-spelling in project/parent directories; cannot
       set the executable keys)
    3. Global Config (~/.check-spelling-config)
    4. Built-in Defaults (lowest priority)

With no config files and no environment overrides the pinned defaults
from the package are used unchanged.
"""

from __future__ import annotations

import os
import re
from pathlib import Path

from rich.markup import escape

from check_spelling.config.settings import CONFIG_FILE, Settings
from check_spelling.utils.console import console, print_header, print_info, print_warning
from check_spelling.utils.errors import ConfigurationError
from check_spelling.utils.logging import log_message


class ConfigManager:
    """Loads configuration with a cascading hierarchy.

    Configuration Precedence (highest to lowest):
    1. Environment Variables - CI/CD, temporary overrides
    2. Local Config (.check-spelling) - Project-specific settings
    3. Global Config (~/.check-spelling-config) - User defaults
    4. Built-in Defaults - Fallback values

    Files are parsed line by line; only KEY=VALUE, KEY="VALUE" and
    KEY='VALUE' lines are read.

    Attributes:
        settings: Current settings instance
        global_config_path: Path to global ~/.check-spelling-config file
        local_config_path: Path to discovered local .check-spelling file (after load)
    """

    LOCAL_CONFIG_NAME = ".check-spelling"

    # Keys naming commands to execute; a local file lives in the scanned tree
    # and may not set them.
    EXECUTABLE_KEYS: frozenset[str] = frozenset(
        {"CHECK_SPELLING_TOOL_EXECUTABLE", "CHECK_SPELLING_PACKAGE_MANAGER"}
    )
    GLOBAL_CONFIG_NAME = ".check-spelling-config"

    def __init__(self, global_config_path: Path | None = None) -> None:
        """Initialize the configuration manager.

        Args:
            global_config_path: Optional custom path to global config file.
                                Defaults to ~/.check-spelling-config.
        """
        self.global_config_path = global_config_path or CONFIG_FILE
        self.local_config_path: Path | None = None
        self.settings = Settings()
        self._raw_values: dict[str, str] = {}
        self._config_sources: dict[str, str] = {}

    def load(self) -> Settings:
        """Load configuration from all sources with cascading precedence.

        Each call starts from clean defaults so repeated loads never keep
        stale values.

        Returns:
            Settings instance with loaded values
        """
        self.settings = Settings()
        self.local_config_path = None
        self._raw_values = {}
        self._config_sources = {}

        if self.global_config_path.exists():
            log_message(f"Loading global configuration from {self.global_config_path}")
            self._load_file(self.global_config_path, source="global")

        local_path = self._find_local_config()
        if local_path:
            self.local_config_path = local_path
            log_message(f"Loading local configuration from {local_path}")
            self._load_file(local_path, source=f"local ({local_path})", trusted=False)

        self._load_environment()

        for key, value in self._raw_values.items():
            self._apply_value_to_settings(key, value)

        log_message(f"Configuration loaded successfully ({len(self._raw_values)} keys)")
        return self.settings

    def _find_local_config(self) -> Path | None:
        """Find local .check-spelling config by traversing up from CWD.

        Traversal stops at the first config file found, at a directory
        containing .git (repository root), or at the filesystem root.
        """
        current = Path.cwd()
        while True:
            config_path = current / self.LOCAL_CONFIG_NAME
            if config_path.exists() and config_path.is_file():
                return config_path

            # Stop at repository root
            if (current / ".git").exists():
                break

            parent = current.parent
            if parent == current:
                break
            current = parent

        return None

    def _load_file(self, path: Path, source: str = "file", trusted: bool = True) -> None:
        """Load key=value pairs from a config file.

        Args:
            path: Path to the config file
            source: Source identifier for debugging
            trusted: Whether the file may set EXECUTABLE_KEYS

        Raises:
            ConfigurationError: If the file cannot be read or is not UTF-8
        """
        pattern = re.compile(r"^([a-zA-Z_][a-zA-Z0-9_]*)=(.*)$")

        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationError(f"Cannot read config file {path}: {e}") from e

        for line in content.splitlines():
            line = line.strip()

            # Skip empty lines and comments
            if not line or line.startswith("#"):
                continue

            match = pattern.match(line)
            if not match:
                continue
            key, value = match.groups()

            if not trusted and key in self.EXECUTABLE_KEYS:
                print_warning(
                    f"Ignoring {key} from {path}: only allowed in {self.GLOBAL_CONFIG_NAME}"
                )
                continue

            # Only double-quoted values are unescaped; single quotes are literal
            if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
                value = self._unescape_value(value[1:-1])
            elif len(value) >= 2 and value.startswith("'") and value.endswith("'"):
                value = value[1:-1]

            self._raw_values[key] = value
            self._config_sources[key] = source

    def _load_environment(self) -> None:
        """Override config with environment variables for known keys only."""
        for key in Settings.get_config_keys():
            env_value = os.environ.get(key)
            if env_value is not None:
                self._raw_values[key] = env_value
                self._config_sources[key] = "environment"

    def _apply_value_to_settings(self, key: str, value: str) -> None:
        """Apply a raw config value to the settings object."""
        attr = self.settings.get_attribute_for_key(key)
        if attr is None:
            return  # Unknown key, ignore
        setattr(self.settings, attr, value.strip())

    @staticmethod
    def _unescape_value(value: str) -> str:
        """Unescape a double-quoted value read from a config file."""
        # Backslashes first, then quotes (handles \\\" correctly)
        result = value.replace("\\\\", "\\")
        result = result.replace('\\"', '"')
        return result

    def get(self, key: str, default: str = "") -> str:
        """Get a raw configuration value, or default if not set."""
        return self._raw_values.get(key, default)

    def get_source(self, key: str) -> str:
        """Get where a configuration key was loaded from ("default" if unset)."""
        return self._config_sources.get(key, "default")

    def validate(self) -> Settings:
        """Validate the loaded settings.

        Every value names a package, a version or an executable, so it must
        be non-empty and free of whitespace.

        Returns:
            The validated settings

        Raises:
            ConfigurationError: If any value is empty or contains whitespace
        """
        for key in Settings.get_config_keys():
            attr = self.settings.get_attribute_for_key(key)
            value = getattr(self.settings, attr)
            if not value:
                raise ConfigurationError(f"{key} must not be empty ({self.get_source(key)})")
            if re.search(r"\s", value):
                raise ConfigurationError(
                    f"{key} must not contain whitespace: {value!r} ({self.get_source(key)})"
                )
        return self.settings

    def show(self) -> None:
        """Display current configuration using Rich formatting."""
        print_header("Current Configuration")

        print_info(f"Global config: {self.global_config_path}")
        if self.local_config_path:
            print_info(f"Local config:  {self.local_config_path}")
        else:
            print_info("Local config:  (not found)")
        console.print()

        s = self.settings
        rows = [
            ("Tool", "Package", s.tool_package, "CHECK_SPELLING_TOOL_PACKAGE"),
            ("Tool", "Version", s.tool_version, "CHECK_SPELLING_TOOL_VERSION"),
            ("Tool", "Executable", s.tool_executable, "CHECK_SPELLING_TOOL_EXECUTABLE"),
            ("Package Manager", "Executable", s.package_manager, "CHECK_SPELLING_PACKAGE_MANAGER"),
        ]
        section = None
        for group, label, value, key in rows:
            if group != section:
                if section is not None:
                    console.print()
                console.print(f"  [bold]{group}:[/bold]")
                section = group
            console.print(
                f"    {label}: {escape(value)} [dim]({escape(self.get_source(key))})[/dim]"
            )
        console.print()


__all__ = [
    "ConfigManager",
]
