"""Doctor and version commands."""

from __future__ import annotations

from pathlib import Path

from rich.table import Table

from chiron_cli.cli.helpers import console
from chiron_cli.doctor import run_checks


def doctor() -> None:
    """Check Claude setup health."""
    console.print("[blue]🏥 Running Claude setup diagnostics...[/blue]")

    checks = run_checks(Path.cwd())

    table = Table(show_header=True, header_style="bold")
    table.add_column("", width=2)
    table.add_column("Check")
    table.add_column("Detail", style="dim")
    for check in checks:
        status = "[green]✅[/green]" if check.passed else "[red]❌[/red]"
        table.add_row(status, check.name, check.message)
    console.print(table)

    if all(check.passed for check in checks):
        console.print("\n[green]✨ All checks passed![/green]")
    else:
        console.print("\n[yellow]⚠️  Some checks failed. Run 'chiron init' to fix.[/yellow]")


def version() -> None:
    """Show version."""
    from chiron_cli import __version__

    console.print(__version__)
