"""
Tests for the command line entry point and settings.
"""

import io
import os

import pytest

from file_explorer import cli
from file_explorer.config.settings import Settings
from file_explorer.exceptions import ConfigurationError


class TestMain:
    """Test cases for cli.main."""

    def test_runs_session_from_stdin(self, empty_directory, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("mkdir made\nexit\n"))

        code = cli.main(["--start-dir", empty_directory, "--no-color"])

        out = capsys.readouterr().out
        assert code == 0
        assert "Simple File Explorer" in out
        assert "Goodbye." in out
        assert os.path.isdir(os.path.join(empty_directory, "made"))

    def test_start_dir_from_environment(self, empty_directory, monkeypatch, capsys):
        monkeypatch.setenv("FILE_EXPLORER_START_DIR", empty_directory)
        monkeypatch.setattr("sys.stdin", io.StringIO("pwd\n"))

        assert cli.main(["--no-color"]) == 0
        assert f"]> {empty_directory}\n" in capsys.readouterr().out

    def test_invalid_start_dir(self, temp_directory, capsys):
        code = cli.main(["--start-dir", os.path.join(temp_directory, "test1.txt")])

        assert code == 2
        assert "Not a directory" in capsys.readouterr().err

    def test_invalid_log_level_env(self, monkeypatch, capsys):
        monkeypatch.setenv("FILE_EXPLORER_LOG_LEVEL", "LOUD")

        assert cli.main([]) == 2
        assert "Configuration error" in capsys.readouterr().err


class TestSettings:
    """Test cases for Settings."""

    def test_defaults(self, monkeypatch):
        for key in (
            "FILE_EXPLORER_START_DIR",
            "FILE_EXPLORER_LOG_LEVEL",
            "FILE_EXPLORER_LOG_FILE",
            "NO_COLOR",
        ):
            monkeypatch.delenv(key, raising=False)

        settings = Settings()

        assert settings.start_directory is None
        assert settings.log_level == "WARNING"
        assert settings.log_file is None
        assert settings.color is True

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("FILE_EXPLORER_LOG_LEVEL", "debug")
        monkeypatch.setenv("FILE_EXPLORER_LOG_FILE", "/tmp/fe.log")
        monkeypatch.setenv("NO_COLOR", "1")

        settings = Settings()

        assert settings.log_level == "DEBUG"
        assert settings.log_file == "/tmp/fe.log"
        assert settings.color is False

    def test_invalid_log_level(self, monkeypatch):
        monkeypatch.setenv("FILE_EXPLORER_LOG_LEVEL", "chatty")

        with pytest.raises(ConfigurationError, match="FILE_EXPLORER_LOG_LEVEL"):
            Settings()
