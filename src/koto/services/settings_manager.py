"""Settings Manager - Handles API key, database location and log level."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


class SettingsManager:
    """
    Manages settings read from the environment.

    Values come from a .env file in the project root, with variables already
    present in the process environment taking precedence.
    """

    DEFAULT_DB_NAME = "koto.db"
    DEFAULT_LOG_LEVEL = "WARNING"

    def __init__(self, project_root: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            project_root: Path to project root where .env is located.
                         If None, searches upward from current file.
        """
        if project_root is None:
            current = Path(__file__).resolve()
            project_root = current.parent.parent.parent.parent

        env_path = project_root / ".env"
        load_dotenv(dotenv_path=env_path)

        self._project_root = project_root

    def get_gemini_api_key(self) -> Optional[str]:
        """Get the Gemini API key from environment."""
        key = os.getenv("GEMINI_API_KEY")
        return key.strip() if key and key.strip() else None

    def get_database_path(self) -> Path:
        """Get the SQLite database path, defaulting to koto.db in the project root."""
        value = os.getenv("KOTO_DB_PATH")
        if value and value.strip():
            return Path(value.strip()).expanduser()
        return self._project_root / self.DEFAULT_DB_NAME

    def get_log_level(self) -> str:
        value = os.getenv("KOTO_LOG_LEVEL")
        return value.strip().upper() if value and value.strip() else self.DEFAULT_LOG_LEVEL

    def reload_env(self) -> None:
        """Reload environment variables from .env file."""
        env_path = self._project_root / ".env"
        load_dotenv(dotenv_path=env_path, override=True)
