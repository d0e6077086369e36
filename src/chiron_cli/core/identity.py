"""User display-name lookup from git config and the environment."""

from __future__ import annotations

import logging
import os
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_USER_NAME = "Developer"


def git_user_name(project_dir: Path) -> str | None:
    """Return ``git config user.name`` for *project_dir*, or None."""
    try:
        result = subprocess.run(
            ["git", "config", "user.name"],
            cwd=project_dir,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=True,
            timeout=5,
        )
    except (subprocess.CalledProcessError, subprocess.TimeoutExpired, OSError):
        return None
    return result.stdout.strip() or None


def env_user_name() -> str | None:
    """Return the OS login name from USER or USERNAME, or None."""
    for var in ("USER", "USERNAME"):
        value = os.environ.get(var, "").strip()
        if value:
            return value
    return None


def detect_user_name(project_dir: Path) -> str | None:
    """Resolve a display name without prompting.

    Checks git config first, then the OS user environment variables.
    Returns None when neither yields a name so the caller can prompt.
    """
    name = git_user_name(project_dir)
    if name:
        logger.debug("Using git user name %r", name)
        return name
    name = env_user_name()
    if name:
        logger.debug("Using environment user name %r", name)
    return name


__all__ = ["DEFAULT_USER_NAME", "detect_user_name", "env_user_name", "git_user_name"]
