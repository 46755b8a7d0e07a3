"""Settings Manager - Handles API key and model configuration."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_MODEL_NAME = "gemini-2.0-flash"


class SettingsManager:
    """
    Manages settings and API key configuration.

    Values are read from a .env file in the project root, falling back to
    the process environment.
    """

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

    def get_model_name(self) -> str:
        """Get the Gemini model name, defaulting to gemini-2.0-flash."""
        name = os.getenv("GEMINI_MODEL")
        return name.strip() if name and name.strip() else DEFAULT_MODEL_NAME

    def get_log_level(self) -> str:
        level = os.getenv("LOG_LEVEL")
        return level.strip().upper() if level and level.strip() else "INFO"

    def reload_env(self) -> None:
        """Reload environment variables from .env file."""
        env_path = self._project_root / ".env"
        load_dotenv(dotenv_path=env_path, override=True)
