"""Shared pytest fixtures for CHECK-SPELLING tests."""

from pathlib import Path

import pytest

from check_spelling.config.settings import Settings


@pytest.fixture(autouse=True)
def _clean_config_env(monkeypatch):
    """Keep config keys from the developer's environment out of tests."""
    for key in Settings.get_config_keys():
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def temp_config_file(tmp_path: Path) -> Path:
    """Create a temporary config file with sample values."""
    config_file = tmp_path / ".check-spelling-config"
    config_file.write_text(
        """# CHECK-SPELLING Configuration
CHECK_SPELLING_TOOL_PACKAGE="typos-cli"
CHECK_SPELLING_TOOL_VERSION="1.25.0"
CHECK_SPELLING_TOOL_EXECUTABLE='typos'
CHECK_SPELLING_PACKAGE_MANAGER=/opt/cargo/bin/cargo
"""
    )
    return config_file


@pytest.fixture
def empty_config_file(tmp_path: Path) -> Path:
    """Create an empty config file."""
    config_file = tmp_path / ".check-spelling-config"
    config_file.write_text("")
    return config_file
