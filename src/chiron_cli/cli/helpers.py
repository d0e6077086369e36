"""Console, prompts and shared option handling for chiron commands."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console

from chiron_cli.cli.ui import select_with_arrows
from chiron_cli.core import (
    DEFAULT_USER_NAME,
    SELECTABLE_TYPES,
    Framework,
    ProjectConfig,
    ProjectType,
    build_config,
    detect_project_type,
    detect_python_framework,
    detect_user_name,
)

console = Console()

NON_INTERACTIVE_ENV = "CHIRON_NON_INTERACTIVE"

_TRUTHY = {"1", "true", "yes", "on", "y"}


def _is_truthy_env(value: Optional[str]) -> bool:
    return bool(value) and value.strip().lower() in _TRUTHY


def is_non_interactive(flag: bool = False) -> bool:
    """Return True when prompts must be skipped.

    Prompts are skipped when requested by flag, by CHIRON_NON_INTERACTIVE,
    or when stdin is not a terminal.
    """
    if flag or _is_truthy_env(os.environ.get(NON_INTERACTIVE_ENV)):
        return True
    try:
        return not sys.stdin.isatty()
    except (AttributeError, ValueError):
        return True


def fail(message: str, hint: str | None = None) -> NoReturn:
    """Print an error (and optional hint) and exit with status 1."""
    console.print(f"[red]❌ {message}[/red]")
    if hint:
        console.print(hint)
    raise typer.Exit(1)


def parse_project_type(value: str) -> ProjectType:
    """Validate a ``--type`` value against the selectable project types."""
    choices = {t.value: t for t in SELECTABLE_TYPES}
    key = value.strip().lower()
    if key not in choices:
        fail(f"Unknown project type: {value}", f"Valid types: {', '.join(choices)}")
    return choices[key]


def determine_project_type(
    type_option: Optional[str],
    project_dir: Path,
    non_interactive: bool,
) -> ProjectType:
    """Return the forced, detected, or user-selected project type."""
    if type_option:
        return parse_project_type(type_option)

    detected = detect_project_type(project_dir)
    if detected is not ProjectType.UNKNOWN:
        console.print(f"[green]Detected {detected.value} project[/green]")
        return detected

    if non_interactive:
        fail(
            "Could not detect the project type.",
            "Pass --type rails or --type python.",
        )

    options = {t.value: f"{t.value.capitalize()} project" for t in SELECTABLE_TYPES}
    choice = select_with_arrows(options, "What type of project is this?", console=console)
    return ProjectType(choice)


def resolve_framework(
    project_type: ProjectType,
    project_dir: Path,
    with_django: bool = False,
    with_fastapi: bool = False,
) -> Framework | None:
    """Detect the Python framework, letting the ``--with-*`` flags force one."""
    if project_type is not ProjectType.PYTHON:
        return None
    if with_django:
        return Framework.DJANGO
    if with_fastapi:
        return Framework.FASTAPI
    return detect_python_framework(project_dir)


def resolve_user_name(option: Optional[str], project_dir: Path, non_interactive: bool) -> str:
    """CLI option, then git config / environment, then a prompt."""
    if option:
        return option
    detected = detect_user_name(project_dir)
    if detected:
        return detected
    if non_interactive:
        return DEFAULT_USER_NAME
    return typer.prompt("What is your name?", default=DEFAULT_USER_NAME)


def resolve_project_name(option: Optional[str], project_dir: Path, non_interactive: bool) -> str:
    if option:
        return option
    if non_interactive:
        return project_dir.name
    return typer.prompt("What's your project name?", default=project_dir.name)


def project_config(
    type_option: Optional[str],
    project_dir: Path,
    non_interactive: bool,
) -> ProjectConfig:
    """Determine the project type and framework and build its config."""
    project_type = determine_project_type(type_option, project_dir, non_interactive)
    framework = resolve_framework(project_type, project_dir)
    return build_config(project_type, framework, project_dir)


__all__ = [
    "console",
    "determine_project_type",
    "fail",
    "is_non_interactive",
    "parse_project_type",
    "project_config",
    "resolve_framework",
    "resolve_project_name",
    "resolve_user_name",
]
