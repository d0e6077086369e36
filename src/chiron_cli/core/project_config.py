"""Per-project-type tool commands and dependency-manifest conventions."""

from __future__ import annotations

import logging
import shutil
import subprocess
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any

from .detection import marker_contains
from .types import Framework, ProjectType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToolCommands:
    """Base shell commands for one project type."""

    test_runner: str
    linter: str
    formatter: str
    # Appended to the formatter when no file is given (None = bare command).
    format_default_target: str | None = None


TOOL_COMMANDS: dict[ProjectType, ToolCommands] = {
    ProjectType.RAILS: ToolCommands(
        test_runner="bin/rspec",
        linter="bin/rubocop",
        formatter="bin/rubocop --autocorrect",
    ),
    ProjectType.PYTHON: ToolCommands(
        test_runner="pytest",
        linter="flake8",
        formatter="black",
        format_default_target=".",
    ),
}

FRAMEWORK_NAMES: dict[Framework, str] = {
    Framework.DJANGO: "Django",
    Framework.FASTAPI: "FastAPI",
    Framework.FLASK: "Flask",
}

RAILS_PACKAGE_FILE = "Gemfile"
RAILS_INSTALL_COMMAND = "bundle install"

# Probed in order; the last entry is the default even when it does not exist.
PYTHON_PACKAGE_FILES = ("pyproject.toml", "Pipfile", "setup.py", "requirements.txt")

POETRY_MARKER = "[tool.poetry]"
PIPENV_INSTALL_COMMAND = "pipenv install"
POETRY_INSTALL_COMMAND = "poetry install"
PIP_INSTALL_COMMAND = "pip install -r requirements.txt"

RUNTIME_VERSION_COMMANDS: dict[ProjectType, tuple[str, ...]] = {
    ProjectType.RAILS: ("ruby", "-v"),
    ProjectType.PYTHON: ("python3", "--version"),
}


def _with_file(base: str | None, file: str | None) -> str | None:
    if base is None:
        return None
    return f"{base} {file}" if file else base


@lru_cache(maxsize=None)
def _probe_version(command: tuple[str, ...]) -> str | None:
    """Run a version command, returning its first output line or None."""
    if shutil.which(command[0]) is None:
        return None
    try:
        result = subprocess.run(
            list(command),
            capture_output=True,
            text=True,
            timeout=5,
        )
    except (subprocess.TimeoutExpired, OSError) as exc:
        logger.debug("Version probe %s failed: %s", command, exc)
        return None
    if result.returncode != 0:
        return None
    output = (result.stdout or result.stderr).strip()
    return output.splitlines()[0] if output else None


@dataclass(frozen=True)
class ProjectConfig:
    """Tool commands and manifest conventions for a (type, framework) pair.

    Holds no mutable state. Manifest probes read ``project_dir`` each time
    they are accessed, so a config can be rebuilt or re-queried at will.
    """

    project_type: ProjectType
    framework: Framework | None = None
    project_dir: Path = field(default_factory=Path.cwd)

    @property
    def _tools(self) -> ToolCommands | None:
        return TOOL_COMMANDS.get(self.project_type)

    @property
    def test_runner(self) -> str | None:
        return self._tools.test_runner if self._tools else None

    @property
    def linter(self) -> str | None:
        return self._tools.linter if self._tools else None

    @property
    def formatter(self) -> str | None:
        return self._tools.formatter if self._tools else None

    @property
    def is_known(self) -> bool:
        return self._tools is not None

    @property
    def framework_name(self) -> str:
        if self.framework in FRAMEWORK_NAMES:
            return FRAMEWORK_NAMES[self.framework]
        return self.project_type.value.capitalize()

    def test_command(self, file: str | None = None) -> str | None:
        return _with_file(self.test_runner, file)

    def lint_command(self, file: str | None = None) -> str | None:
        return _with_file(self.linter, file)

    def format_command(self, file: str | None = None) -> str | None:
        """Formatter command for *file*, or for the default target.

        Rails' formatter already covers the whole project when run bare;
        Python's needs an explicit ``.`` target.
        """
        tools = self._tools
        if tools is None:
            return None
        if file:
            return f"{tools.formatter} {file}"
        if tools.format_default_target:
            return f"{tools.formatter} {tools.format_default_target}"
        return tools.formatter

    @property
    def package_file(self) -> str | None:
        if self.project_type is ProjectType.RAILS:
            return RAILS_PACKAGE_FILE
        if self.project_type is ProjectType.PYTHON:
            for name in PYTHON_PACKAGE_FILES[:-1]:
                if (self.project_dir / name).exists():
                    return name
            return PYTHON_PACKAGE_FILES[-1]
        return None

    @property
    def install_command(self) -> str | None:
        if self.project_type is ProjectType.RAILS:
            return RAILS_INSTALL_COMMAND
        if self.project_type is ProjectType.PYTHON:
            if (self.project_dir / "Pipfile").exists():
                return PIPENV_INSTALL_COMMAND
            if marker_contains(self.project_dir / "pyproject.toml", POETRY_MARKER):
                return POETRY_INSTALL_COMMAND
            return PIP_INSTALL_COMMAND
        return None

    def runtime_version(self) -> str | None:
        """Version string of the project's language runtime, if installed."""
        command = RUNTIME_VERSION_COMMANDS.get(self.project_type)
        return _probe_version(command) if command else None

    def template_context(self) -> dict[str, Any]:
        """Plain data exposed to templates for this configuration."""
        return {
            "project_type": self.project_type.value,
            "framework": self.framework.value if self.framework else None,
            "framework_name": self.framework_name,
            "test_runner": self.test_runner,
            "linter": self.linter,
            "formatter": self.formatter,
            "test_command": self.test_command(),
            "lint_command": self.lint_command(),
            "format_command": self.format_command(),
            "package_file": self.package_file,
            "install_command": self.install_command,
            "runtime_version": self.runtime_version(),
        }


def build_config(
    project_type: ProjectType,
    framework: Framework | None = None,
    project_dir: Path | None = None,
) -> ProjectConfig:
    """Build the ProjectConfig for a detected or chosen project type.

    Args:
        project_type: Classified project type
        framework: Python framework; ignored for non-Python types
        project_dir: Directory probed for manifests (defaults to cwd)

    Returns:
        An immutable ProjectConfig.
    """
    if project_type is not ProjectType.PYTHON:
        framework = None
    return ProjectConfig(
        project_type=project_type,
        framework=framework,
        project_dir=Path(project_dir) if project_dir is not None else Path.cwd(),
    )


__all__ = [
    "FRAMEWORK_NAMES",
    "PYTHON_PACKAGE_FILES",
    "ProjectConfig",
    "TOOL_COMMANDS",
    "ToolCommands",
    "build_config",
]
