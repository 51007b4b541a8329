"""
Configuration settings for the application.
"""

import os

from dotenv import load_dotenv

from file_explorer.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.start_directory: str | None = self._get_env("FILE_EXPLORER_START_DIR", "") or None
        self.log_level: str = self._get_log_level("FILE_EXPLORER_LOG_LEVEL", "WARNING")
        self.log_file: str | None = self._get_env("FILE_EXPLORER_LOG_FILE", "") or None
        self.color: bool = not self._get_env("NO_COLOR", "")

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_log_level(self, key: str, default: str) -> str:
        """Get a log level name, raise error if it is not a known level."""
        value = self._get_env(key, default).strip().upper()
        if value not in _LOG_LEVELS:
            raise ConfigurationError(
                f"Environment variable {key} must be one of {', '.join(_LOG_LEVELS)}, got {value!r}"
            )
        return value
