"""Tests for check_spelling.integrations.typos module."""

from unittest.mock import MagicMock, patch

from check_spelling.integrations.typos import TyposClient, describe_version_drift


class TestDescribeVersionDrift:
    def test_older(self):
        assert describe_version_drift("1.23.0", "1.24.6") == "older"

    def test_newer(self):
        assert describe_version_drift("1.30.0", "1.24.6") == "newer"

    def test_equivalent_spelling(self):
        assert describe_version_drift("1.24", "1.24.0") == "different"

    def test_numeric_not_lexical(self):
        assert describe_version_drift("1.100.0", "1.24.6") == "newer"

    def test_unparseable_version(self):
        assert describe_version_drift("nightly-2024", "1.24.6") == "different"


class TestBuildCommand:
    def test_no_target(self):
        assert TyposClient().build_command() == ["typos"]

    def test_empty_target_adds_no_argument(self):
        assert TyposClient().build_command("") == ["typos"]

    def test_with_target(self):
        assert TyposClient().build_command("/some/dir") == ["typos", "/some/dir"]

    def test_target_with_spaces_is_one_argument(self):
        assert TyposClient().build_command("my docs") == ["typos", "my docs"]

    def test_custom_executable(self):
        assert TyposClient("/usr/local/bin/typos").build_command("src") == [
            "/usr/local/bin/typos",
            "src",
        ]


class TestRun:
    @patch("subprocess.run")
    def test_returns_exit_status(self, mock_run):
        mock_run.return_value = MagicMock(returncode=2)

        assert TyposClient().run("./src") == 2
        assert mock_run.call_args[0][0] == ["typos", "./src"]

    @patch("subprocess.run")
    def test_streams_are_inherited(self, mock_run):
        mock_run.return_value = MagicMock(returncode=0)

        TyposClient().run()

        assert mock_run.call_args[0] == (["typos"],)
        assert mock_run.call_args[1] == {}

    @patch("subprocess.run")
    def test_killed_by_signal(self, mock_run):
        mock_run.return_value = MagicMock(returncode=-15)

        assert TyposClient().run() == 143

    @patch("check_spelling.integrations.typos.print_error")
    @patch("subprocess.run")
    def test_missing_executable(self, mock_run, mock_error):
        mock_run.side_effect = FileNotFoundError("typos")

        assert TyposClient().run() == 127
        mock_error.assert_called_once()
