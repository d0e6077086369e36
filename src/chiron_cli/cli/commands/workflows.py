"""Commands that manage individual workflow documents: add-workflow and update."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from chiron_cli.cli.helpers import console, fail, is_non_interactive, project_config
from chiron_cli.core import DEFAULT_USER_NAME, detect_user_name
from chiron_cli.core.project_config import ProjectConfig
from chiron_cli.errors import ChironError, UnknownWorkflowError
from chiron_cli.template import (
    backup_commands,
    build_variables,
    copy_workflow,
    get_template_root,
    render_and_copy,
)


def _default_variables(config: ProjectConfig, project_dir: Path) -> dict:
    return build_variables(
        config,
        project_dir.name,
        detect_user_name(project_dir) or DEFAULT_USER_NAME,
    )


def add_workflow(
    name: str = typer.Argument(..., help="Workflow name (template file name without .md)"),
    project_type_option: Optional[str] = typer.Option(None, "--type", help="Project type (rails, python)"),
    template_root: Optional[str] = typer.Option(None, "--template-root", help="Template directory override"),
) -> None:
    """Add a specific workflow to your setup."""
    project_dir = Path.cwd()
    config = project_config(project_type_option, project_dir, is_non_interactive())

    try:
        target = copy_workflow(
            name,
            config.project_type,
            get_template_root(template_root),
            project_dir,
            _default_variables(config, project_dir),
        )
    except UnknownWorkflowError as exc:
        fail(str(exc), f"Available workflows: {', '.join(exc.available)}")
    except ChironError as exc:
        fail(str(exc))

    console.print(f"[green]✅ Added {name} workflow[/green] [dim]({target.relative_to(project_dir)})[/dim]")


def update(
    project_type_option: Optional[str] = typer.Option(None, "--type", help="Project type (rails, python)"),
    template_root: Optional[str] = typer.Option(None, "--template-root", help="Template directory override"),
) -> None:
    """Update Claude workflows to the latest bundled version.

    The current .claude/commands directory is backed up to
    .claude/commands.backup.<timestamp> first. CLAUDE.md and the
    development journal are left untouched.
    """
    console.print("[blue]🔄 Updating Claude workflows...[/blue]")
    project_dir = Path.cwd()
    config = project_config(project_type_option, project_dir, is_non_interactive())

    backup = backup_commands(project_dir)
    if backup is not None:
        console.print(f"[yellow]📦 Backed up current commands to {backup.relative_to(project_dir)}[/yellow]")

    try:
        report = render_and_copy(
            config,
            get_template_root(template_root),
            project_dir,
            _default_variables(config, project_dir),
            update=True,
        )
    except ChironError as exc:
        fail(str(exc))

    console.print(f"[bright_blue]📋 Refreshed {len(report.command_sources)} command files[/bright_blue]")
    console.print("\n[green]✨ Workflows updated![/green]")
