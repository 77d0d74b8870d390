"""
Configuration management for the Recipe Allergen Catalog.

This module centralizes environment variable loading from the .env file at the
project root. It should be imported early in both the backend (api/main.py) and
the frontend (streamlit_app/app.py) so .env is loaded before any other code
reads environment variables.

When no .env exists, load_dotenv() is a no-op and the process environment is used.

Environment Variables:
- LOG_LEVEL: Optional, logging level name (defaults to "INFO")
- RECIPE_EVENT_LOG: Optional, path of the JSONL event file (unset disables it)
- BACKEND_URL: Optional, backend URL used by the frontend (defaults to http://localhost:8000)
- API_TIMEOUT_SECONDS: Optional, frontend request timeout in seconds (defaults to 5)
"""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from catalog.events import get_event_log_file


def load_env_file() -> None:
    """
    Load environment variables from .env file at project root.

    Locates the project root by going up from this file's location
    (api/config.py -> project root) and loads .env if it exists.

    Safe to call multiple times. Existing environment variables take precedence.
    """
    this_file = Path(__file__).resolve()
    project_root = this_file.parent.parent
    env_path = project_root / ".env"

    load_dotenv(env_path, override=False)


# Load .env file on module import
load_env_file()


class AppConfig:
    """Configuration shared by the API and the frontend."""

    @staticmethod
    def get_log_level() -> str:
        """
        Get the logging level name.

        Returns:
            Upper-cased level name (default: "INFO"). Unknown names fall back to "INFO".
        """
        level = os.getenv("LOG_LEVEL", "INFO").upper()
        if level not in ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"):
            return "INFO"
        return level

    @staticmethod
    def get_event_log_path() -> Optional[str]:
        """
        Get the JSONL event log path.

        Returns:
            Path string or None if event file logging is disabled
        """
        path = get_event_log_file()
        return str(path) if path is not None else None

    @staticmethod
    def get_backend_url() -> str:
        """
        Get the backend API base URL.

        Returns:
            Backend URL with trailing slash removed (default: http://localhost:8000)
        """
        url = os.getenv("BACKEND_URL", "http://localhost:8000")
        return url.rstrip("/")

    @staticmethod
    def get_api_timeout() -> float:
        """
        Get the frontend request timeout.

        Returns:
            Timeout in seconds (default: 5.0). Invalid or non-positive values fall back to 5.0.
        """
        raw = os.getenv("API_TIMEOUT_SECONDS", "5")
        try:
            timeout = float(raw)
        except ValueError:
            return 5.0
        return timeout if timeout > 0 else 5.0


def configure_logging() -> None:
    """
    Configure root logging for the process.

    Uses LOG_LEVEL for the level. Calling it again after handlers exist
    only updates the level.
    """
    level = AppConfig.get_log_level()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger().setLevel(level)
