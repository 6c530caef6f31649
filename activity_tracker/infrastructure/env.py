"""
Environment loader for the activity tracker jobs.

Entry points call ensure_env_loaded() (directly or through get_required_env)
before reading credentials, so a local .env works the same as CI secrets.

Side Effects:
    - Loads .env file from the working directory or a parent of it
    - Fails fast with MissingEnvironmentError for required variables

Usage:
    from activity_tracker.infrastructure.env import get_required_env

    token = get_required_env("GITHUB_TOKEN")
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from activity_tracker.observability.logging import get_logger

logger = get_logger(__name__)

_ENV_LOADED = False


class MissingEnvironmentError(RuntimeError):
    """A required environment variable is unset or empty."""

    def __init__(self, key: str):
        super().__init__(f"{key} environment variable not found")
        self.key = key


def ensure_env_loaded(env_path: Path | None = None) -> None:
    """
    Ensure the .env file is loaded exactly once.

    Values already present in the process environment win over the file.

    Args:
        env_path: Optional explicit path to a .env file. If None, searches
            upwards from the current working directory.
    """
    global _ENV_LOADED
    if _ENV_LOADED:
        return

    if env_path is None:
        found = find_dotenv(usecwd=True)
        env_path = Path(found) if found else None

    if env_path and env_path.exists():
        load_dotenv(env_path)
        logger.debug("Loaded environment from %s", env_path)
    _ENV_LOADED = True


def reset_env_loaded() -> None:
    """Forget that the .env file was loaded (tests only)."""
    global _ENV_LOADED
    _ENV_LOADED = False


def get_required_env(key: str) -> str:
    """
    Get required environment variable or fail.

    Raises:
        MissingEnvironmentError: If the variable is unset or empty
    """
    ensure_env_loaded()
    value = os.getenv(key)
    if not value:
        logger.error("%s not found in environment", key)
        raise MissingEnvironmentError(key)
    return value


def get_optional_env(key: str, default: str = "") -> str:
    ensure_env_loaded()
    return os.getenv(key, default)
