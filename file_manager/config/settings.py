"""
Configuration settings for the file manager.
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

from file_manager.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()

DEFAULT_USERNAME = "Unknown user"
DEFAULT_CHUNK_SIZE = 64 * 1024


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.home_directory: str = self._get_env(
            "FILE_MANAGER_HOME", str(Path.home())
        )
        self.default_username: str = self._get_env(
            "FILE_MANAGER_DEFAULT_USERNAME", DEFAULT_USERNAME
        )
        self.log_level: int = self._get_log_level("FILE_MANAGER_LOG_LEVEL", "WARNING")
        self.chunk_size: int = self._get_positive_int(
            "FILE_MANAGER_CHUNK_SIZE", DEFAULT_CHUNK_SIZE
        )

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key) or default

    def _get_log_level(self, key: str, default: str) -> int:
        """Get a logging level name, raise error if it is not a known level."""
        name = self._get_env(key, default).strip().upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise ConfigurationError(f"Unknown log level in {key}: {name}")
        return level

    def _get_positive_int(self, key: str, default: int) -> int:
        """Get a positive integer, raise error if the value is malformed."""
        raw = os.getenv(key)
        if not raw:
            return default
        try:
            value = int(raw)
        except ValueError:
            raise ConfigurationError(f"{key} must be an integer, got {raw!r}")
        if value <= 0:
            raise ConfigurationError(f"{key} must be positive, got {value}")
        return value


# Global settings instance
settings = Settings()
