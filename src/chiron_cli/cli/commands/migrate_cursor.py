"""CLI command for migrating a .cursor/rules layout to .claude/commands.

Usage:
    chiron migrate-cursor            # Migrate, then ask whether to remove .cursor
    chiron migrate-cursor --remove   # Remove .cursor without asking
    chiron migrate-cursor --keep     # Keep .cursor without asking
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from chiron_cli.cli.helpers import console, fail, is_non_interactive
from chiron_cli.core.constants import CURSOR_RULES_DIR
from chiron_cli.migration import migrate_cursor_rules, remove_cursor_dir
from chiron_cli.template import create_directories


def migrate_cursor(
    remove: Optional[bool] = typer.Option(
        None, "--remove/--keep", help="Remove .cursor after migrating (asks when omitted)"
    ),
) -> None:
    """Migrate from .cursor to .claude structure.

    Each .cursor/rules/*.mdc rule loses its front matter and is written to
    .claude/commands/{workflows,conventions,quality}/ based on its name.
    """
    console.print("[blue]🔄 Migrating from .cursor to .claude...[/blue]")
    project_dir = Path.cwd()

    if not (project_dir / CURSOR_RULES_DIR).is_dir():
        fail(f"No {CURSOR_RULES_DIR} directory found!")

    create_directories(project_dir)
    report = migrate_cursor_rules(project_dir)

    for rule, target in report.migrated:
        console.print(f"[bright_blue]📋 Migrated {rule.stem} -> {target.relative_to(project_dir)}[/bright_blue]")

    if remove is None:
        remove = False if is_non_interactive() else typer.confirm("Remove .cursor directory after migration?")
    if remove and remove_cursor_dir(project_dir):
        console.print("[green]✅ .cursor directory removed[/green]")

    console.print("\n[green]✨ Migration completed![/green]")
