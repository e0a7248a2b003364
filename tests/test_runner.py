"""Tests for check_spelling.runner module."""

from unittest.mock import MagicMock, patch

import pytest

from check_spelling.config.settings import Settings
from check_spelling.runner import ensure_tool_installed, run_spell_check, run_tool
from check_spelling.utils.errors import InstallFailedError, QueryFailedError
from tests.fakes import FakeSubprocess


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def mock_info():
    with patch("check_spelling.runner.print_info") as mock:
        yield mock


def _messages(mock_info) -> list[str]:
    return [c[0][0] for c in mock_info.call_args_list]


class TestEnsureToolInstalled:
    @pytest.mark.parametrize("version", ["1.24.6", "1.0.0", "2.3.4-beta.1"])
    def test_already_installed_skips_install(self, mock_info, version):
        fake = FakeSubprocess({"typos-cli": version})

        with patch("subprocess.run", fake):
            installed = ensure_tool_installed(Settings(tool_version=version))

        assert installed is False
        assert fake.install_calls == []
        assert f"typos-cli@{version} is already installed." in _messages(mock_info)

    @pytest.mark.parametrize("version", ["1.24.6", "1.0.0", "2.3.4-beta.1"])
    def test_missing_installs_exactly_once(self, mock_info, version):
        fake = FakeSubprocess({"cargo-edit": "0.12.2"})

        with patch("subprocess.run", fake):
            installed = ensure_tool_installed(Settings(tool_version=version))

        assert installed is True
        assert fake.install_calls == [["cargo", "install", f"typos-cli@{version}"]]
        assert f"Installing typos-cli@{version}..." in _messages(mock_info)

    def test_other_version_installed_reports_drift(self, mock_info, settings):
        fake = FakeSubprocess({"typos-cli": "1.20.0"})

        with patch("subprocess.run", fake):
            ensure_tool_installed(settings)

        assert any("older" in m for m in _messages(mock_info))
        assert fake.install_calls == [["cargo", "install", "typos-cli@1.24.6"]]

    def test_query_failure_stops_before_install(self, mock_info, settings):
        fake = FakeSubprocess(list_returncode=101)

        with patch("subprocess.run", fake), pytest.raises(QueryFailedError) as exc_info:
            ensure_tool_installed(settings)

        assert exc_info.value.exit_code == 101
        assert fake.install_calls == []

    def test_install_failure_propagates(self, mock_info, settings):
        fake = FakeSubprocess(install_returncode=101)

        with patch("subprocess.run", fake), pytest.raises(InstallFailedError) as exc_info:
            ensure_tool_installed(settings)

        assert exc_info.value.exit_code == 101

    def test_uses_configured_package_manager(self, mock_info):
        cargo = MagicMock()
        cargo.installed_version.return_value = None

        ensure_tool_installed(Settings(tool_package="other-cli", tool_version="0.3.1"), cargo)

        cargo.installed_version.assert_called_once_with("other-cli")
        cargo.install.assert_called_once_with("other-cli", "0.3.1")


class TestRunTool:
    def test_no_target_passes_no_argument(self, settings):
        fake = FakeSubprocess()

        with patch("subprocess.run", fake):
            run_tool(settings, "")

        assert fake.typos_calls == [["typos"]]

    def test_target_passed_as_single_argument(self, settings):
        fake = FakeSubprocess()

        with patch("subprocess.run", fake):
            run_tool(settings, "/some/dir")

        assert fake.typos_calls == [["typos", "/some/dir"]]

    def test_returns_tool_exit_status(self, settings):
        fake = FakeSubprocess(typos_returncode=2)

        with patch("subprocess.run", fake):
            assert run_tool(settings, "./src") == 2


class TestRunSpellCheck:
    def test_not_installed_no_target(self, mock_info, settings):
        """Installs the pinned release, then runs typos with no path argument."""
        fake = FakeSubprocess(typos_returncode=2)

        with patch("subprocess.run", fake):
            exit_code = run_spell_check(settings)

        assert fake.calls == [
            ["cargo", "install", "--list"],
            ["cargo", "install", "typos-cli@1.24.6"],
            ["typos"],
        ]
        assert exit_code == 2

    def test_installed_with_target(self, mock_info, settings):
        """Skips install and runs typos against ./src."""
        fake = FakeSubprocess({"typos-cli": "1.24.6"})

        with patch("subprocess.run", fake):
            exit_code = run_spell_check(settings, "./src")

        assert fake.calls == [["cargo", "install", "--list"], ["typos", "./src"]]
        assert exit_code == 0

    def test_second_run_skips_install(self, mock_info, settings):
        fake = FakeSubprocess()

        with patch("subprocess.run", fake):
            run_spell_check(settings)
            run_spell_check(settings)

        assert len(fake.install_calls) == 1
        assert _messages(mock_info)[-1] == "typos-cli@1.24.6 is already installed."

    def test_install_failure_never_runs_tool(self, mock_info, settings):
        fake = FakeSubprocess(install_returncode=101)

        with patch("subprocess.run", fake), pytest.raises(InstallFailedError):
            run_spell_check(settings, "./src")

        assert fake.typos_calls == []

    def test_query_failure_never_runs_tool(self, mock_info, settings):
        fake = FakeSubprocess(missing=("cargo",))

        with patch("subprocess.run", fake), pytest.raises(QueryFailedError) as exc_info:
            run_spell_check(settings)

        assert exc_info.value.exit_code == 127
        assert fake.typos_calls == []
