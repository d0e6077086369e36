"""
Chiron CLI - Claude workflow scaffolding for Rails and Python projects.

Usage:
    chiron init
    chiron init --type python --project-name my-api
    chiron doctor
"""

import logging
import sys

import typer
from rich.align import Align
from rich.text import Text
from typer.core import TyperGroup

__version__ = "0.3.0"

from chiron_cli.cli.commands import register_commands  # noqa: E402
from chiron_cli.cli.helpers import console  # noqa: E402

BANNER = """
 ██████╗██╗  ██╗██╗██████╗  ██████╗ ███╗   ██╗
██╔════╝██║  ██║██║██╔══██╗██╔═══██╗████╗  ██║
██║     ███████║██║██████╔╝██║   ██║██╔██╗ ██║
██║     ██╔══██║██║██╔══██╗██║   ██║██║╚██╗██║
╚██████╗██║  ██║██║██║  ██║╚██████╔╝██║ ╚████║
 ╚═════╝╚═╝  ╚═╝╚═╝╚═╝  ╚═╝ ╚═════╝ ╚═╝  ╚═══╝
"""

TAGLINE = "Claude workflows for Rails and Python projects"


def show_banner():
    """Display the ASCII art banner."""
    banner_lines = BANNER.strip().split('\n')
    colors = ["bright_blue", "blue", "cyan", "bright_cyan", "white", "bright_white"]

    styled_banner = Text()
    for i, line in enumerate(banner_lines):
        color = colors[i % len(colors)]
        styled_banner.append(line + "\n", style=color)

    console.print(Align.center(styled_banner))
    console.print(Align.center(Text(TAGLINE, style="italic bright_yellow")))
    console.print()


class BannerGroup(TyperGroup):
    """Custom group that shows banner before help."""

    def format_help(self, ctx, formatter):
        show_banner()
        super().format_help(ctx, formatter)


app = typer.Typer(
    name="chiron",
    help="Set up Claude workflows, commands and guidance docs in a project",
    add_completion=False,
    invoke_without_command=True,
    cls=BannerGroup,
)


@app.callback()
def callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log detection and template decisions"),
):
    """Show banner when no subcommand is provided."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )
    if ctx.invoked_subcommand is None:
        show_banner()
        console.print(Align.center("[dim]Run 'chiron --help' for usage information[/dim]"))
        console.print()


register_commands(app)


def main():
    app()


if __name__ == "__main__":
    main()
