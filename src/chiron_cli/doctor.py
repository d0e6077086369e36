"""Project health checks for ``chiron doctor``.

Each check inspects the project directory for one piece of the generated
Claude setup. The set of checks depends on the detected project type.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from chiron_cli.core.constants import (
    CLAUDE_DIR,
    COMMANDS_DIR,
    GUIDANCE_FILE,
    JOURNAL_FILE,
    TASKS_DIR,
)
from chiron_cli.core.detection import detect_project_type, python_package_exists
from chiron_cli.core.types import ProjectType
from chiron_cli.gitignore_manager import GitignoreManager


@dataclass
class DoctorCheck:
    """Result of a single doctor health check."""

    name: str
    passed: bool
    message: str


def _exists_check(name: str, path: Path, *, directory: bool = False) -> DoctorCheck:
    present = path.is_dir() if directory else path.is_file()
    message = f"{path.name} present" if present else f"Missing: {path}"
    return DoctorCheck(name, present, message)


def check_project_type(project_type: ProjectType) -> DoctorCheck:
    recognized = project_type is not ProjectType.UNKNOWN
    return DoctorCheck(
        f"{project_type.value.capitalize()} project",
        recognized,
        "Recognized project type" if recognized else "No Rails or Python markers found",
    )


def check_gitignore(project_dir: Path) -> DoctorCheck:
    has_entry = GitignoreManager(project_dir).has_claude_entry()
    return DoctorCheck(
        ".gitignore entry",
        has_entry,
        ".claude/ is ignored" if has_entry else ".gitignore does not mention .claude/",
    )


def run_checks(project_dir: Path) -> list[DoctorCheck]:
    """Run every check applicable to *project_dir*.

    Returns:
        List of DoctorCheck results, common checks first.
    """
    project_type = detect_project_type(project_dir)
    checks = [
        check_project_type(project_type),
        _exists_check(f"{GUIDANCE_FILE} exists", project_dir / GUIDANCE_FILE),
        _exists_check(f"{CLAUDE_DIR} directory", project_dir / CLAUDE_DIR, directory=True),
        _exists_check(COMMANDS_DIR, project_dir / COMMANDS_DIR, directory=True),
        _exists_check("Development journal", project_dir / JOURNAL_FILE),
        _exists_check("Tasks directory", project_dir / TASKS_DIR, directory=True),
        check_gitignore(project_dir),
    ]

    if project_type is ProjectType.RAILS:
        checks.append(_exists_check("Gemfile exists", project_dir / "Gemfile"))
        checks.append(_exists_check("Rails app structure", project_dir / "app", directory=True))
    elif project_type is ProjectType.PYTHON:
        found = python_package_exists(project_dir)
        checks.append(
            DoctorCheck(
                "Python package file",
                found,
                "Dependency manifest present" if found else "No Python dependency manifest",
            )
        )
    return checks


__all__ = ["DoctorCheck", "check_gitignore", "check_project_type", "run_checks"]
