"""
Project Detection Module
========================

Inspects a project directory for marker files and classifies it as a
Rails or Python project (and, for Python, which web framework it uses).

Every function takes the directory explicitly and never prompts. Missing
or unreadable marker files are normal negative results, so detection is
total over any directory state.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .types import Framework, ProjectType

logger = logging.getLogger(__name__)


RUBY_MANIFEST = "Gemfile"
RAILS_MARKER = "rails"

# Canonical Python dependency manifests, any one of which marks a Python project.
PYTHON_MANIFESTS = ("requirements.txt", "pyproject.toml", "setup.py", "Pipfile")

DJANGO_ENTRY_POINT = "manage.py"
APP_ENTRY_POINTS = ("app.py", "main.py")
REQUIREMENTS_FILE = "requirements.txt"


# =============================================================================
# File Probes
# =============================================================================


def read_marker(path: Path) -> str | None:
    """
    Read a marker file, treating any read failure as absence.

    Returns:
        File contents, or None if the file is missing or unreadable.
    """
    if not path.is_file():
        return None
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Could not read %s: %s", path, exc)
        return None


def marker_contains(path: Path, needle: str) -> bool:
    """Return True if *path* is readable and contains *needle*."""
    content = read_marker(path)
    return content is not None and needle in content


def python_package_exists(project_dir: Path) -> bool:
    """Return True if any canonical Python manifest exists in *project_dir*."""
    return any((project_dir / name).exists() for name in PYTHON_MANIFESTS)


# =============================================================================
# Classification
# =============================================================================


def detect_project_type(project_dir: Path) -> ProjectType:
    """
    Classify *project_dir* by its dependency manifests.

    A Gemfile mentioning rails wins over any Python manifest; first match wins.

    Returns:
        ProjectType.RAILS, ProjectType.PYTHON, or ProjectType.UNKNOWN.
    """
    project_dir = Path(project_dir)

    if marker_contains(project_dir / RUBY_MANIFEST, RAILS_MARKER):
        detected = ProjectType.RAILS
    elif python_package_exists(project_dir):
        detected = ProjectType.PYTHON
    else:
        detected = ProjectType.UNKNOWN

    logger.debug("Detected project type %s for %s", detected, project_dir)
    return detected


def detect_python_framework(project_dir: Path) -> Framework:
    """
    Classify the web framework of a Python project.

    Only meaningful once detect_project_type() returned ProjectType.PYTHON.
    A Django entry point wins regardless of manifest content. FastAPI and
    Flask are recognised only when an application entry point exists and
    requirements.txt names the framework.

    Returns:
        The detected Framework, Framework.GENERIC when nothing matches.
    """
    project_dir = Path(project_dir)

    if (project_dir / DJANGO_ENTRY_POINT).exists():
        return Framework.DJANGO

    if any((project_dir / name).exists() for name in APP_ENTRY_POINTS):
        requirements = read_marker(project_dir / REQUIREMENTS_FILE) or ""
        if "fastapi" in requirements:
            return Framework.FASTAPI
        if "flask" in requirements:
            return Framework.FLASK

    return Framework.GENERIC


__all__ = [
    "APP_ENTRY_POINTS",
    "DJANGO_ENTRY_POINT",
    "PYTHON_MANIFESTS",
    "RUBY_MANIFEST",
    "detect_project_type",
    "detect_python_framework",
    "marker_contains",
    "python_package_exists",
    "read_marker",
]
