"""CLI command modules for chiron.

Each module holds plain functions; ``register_commands`` attaches them to
the Typer application under their command-line names.
"""

from __future__ import annotations

import typer

from .doctor import doctor, version
from .init import init
from .migrate_cursor import migrate_cursor
from .workflows import add_workflow, update


def register_commands(app: typer.Typer) -> None:
    """Attach every chiron command to *app*."""
    app.command()(init)
    app.command(name="migrate-cursor")(migrate_cursor)
    app.command(name="add-workflow")(add_workflow)
    app.command()(update)
    app.command()(doctor)
    app.command()(version)


__all__ = ["register_commands"]
