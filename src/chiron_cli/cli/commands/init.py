"""Init command implementation for chiron."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.panel import Panel

from chiron_cli.cli.helpers import (
    console,
    determine_project_type,
    fail,
    is_non_interactive,
    resolve_framework,
    resolve_project_name,
    resolve_user_name,
)
from chiron_cli.cli.ui import StepTracker
from chiron_cli.core import ProjectConfig, ProjectType, build_config, python_package_exists
from chiron_cli.core.constants import GUIDANCE_FILE, JOURNAL_FILE, SETTINGS_FILE
from chiron_cli.errors import ChironError, IncompatibleProjectError
from chiron_cli.gitignore_manager import GitignoreManager
from chiron_cli.template import (
    build_variables,
    create_directories,
    get_template_root,
    render_and_copy,
)

REQUIREMENTS_STUB = "# Python dependencies\n"

PROJECT_TIPS = {
    ProjectType.PYTHON: (
        "Python project tips:",
        [
            "Install dev dependencies: pip install pytest black flake8",
            "Set up pre-commit hooks for code quality",
            "Configure your IDE to use black formatting",
        ],
    ),
    ProjectType.RAILS: (
        "Rails project tips:",
        [
            "Ensure binstubs are set up: bundle binstubs bundler --force",
            "Run 'bin/rubocop' to check code style",
            "Use 'bin/rspec' for running tests",
        ],
    ),
}


def check_project_compatibility(config: ProjectConfig, project_dir: Path, non_interactive: bool) -> None:
    """Verify the project matches the chosen type.

    A forced Rails type needs a Gemfile. A Python project without any
    manifest is offered a stub requirements.txt.

    Raises:
        IncompatibleProjectError: If a Rails project has no Gemfile.
    """
    if config.project_type is ProjectType.RAILS:
        if not (project_dir / "Gemfile").exists():
            raise IncompatibleProjectError("This doesn't appear to be a Rails project!")
    elif config.project_type is ProjectType.PYTHON and not python_package_exists(project_dir):
        if non_interactive or typer.confirm("No Python package file found. Create requirements.txt?"):
            (project_dir / "requirements.txt").write_text(REQUIREMENTS_STUB, encoding="utf-8")
            console.print("[bright_blue]📄 Created requirements.txt[/bright_blue]")


def _print_next_steps(project_type: ProjectType) -> None:
    steps = "\n".join(
        [
            f"1. Review and customize [cyan]{GUIDANCE_FILE}[/cyan] for your project",
            "2. Check [cyan].claude/commands/[/cyan] for available workflows",
            "3. Run [cyan]claude[/cyan] to start using Claude with your new setup",
        ]
    )
    console.print(Panel(steps, title="Next steps", border_style="yellow", padding=(1, 2)))

    if project_type in PROJECT_TIPS:
        title, tips = PROJECT_TIPS[project_type]
        console.print(f"\n[yellow]{title}[/yellow]")
        for tip in tips:
            console.print(f"  - {tip}")


def init(
    project_name: Optional[str] = typer.Option(None, "--project-name", help="Project name for CLAUDE.md"),
    user_name: Optional[str] = typer.Option(
        None, "--user-name", help="User name for templates. Auto-detected from git config if not specified"
    ),
    project_type_option: Optional[str] = typer.Option(
        None, "--type", help="Project type (rails, python). Auto-detected if not specified"
    ),
    with_oauth: bool = typer.Option(False, "--with-oauth", help="Include OAuth workflow examples"),
    with_viewcomponents: bool = typer.Option(False, "--with-viewcomponents", help="Include ViewComponent rules"),
    with_django: bool = typer.Option(False, "--with-django", help="Include Django-specific patterns"),
    with_fastapi: bool = typer.Option(False, "--with-fastapi", help="Include FastAPI-specific patterns"),
    skip_journal: bool = typer.Option(False, "--skip-journal", help="Skip development journal setup"),
    template_root: Optional[str] = typer.Option(
        None, "--template-root", help="Read templates from this directory instead of the bundled ones"
    ),
    non_interactive: bool = typer.Option(
        False, "--non-interactive", "--yes", help="Never prompt; use detected values and defaults"
    ),
) -> None:
    """Initialize Claude workflow in the current project.

    Detects the project type, creates the .claude/commands tree, tasks/ and
    docs/, renders CLAUDE.md and the development journal (only when they do
    not exist yet), copies the command documents and updates .gitignore.

    Examples:
        chiron init
        chiron init --type python --project-name api --non-interactive
    """
    console.print("[blue]🤖 Initializing Claude Setup...[/blue]")

    project_dir = Path.cwd()
    non_interactive = is_non_interactive(non_interactive)

    project_type = determine_project_type(project_type_option, project_dir, non_interactive)
    project_name = resolve_project_name(project_name, project_dir, non_interactive)
    user_name = resolve_user_name(user_name, project_dir, non_interactive)

    framework = resolve_framework(project_type, project_dir, with_django, with_fastapi)
    config = build_config(project_type, framework, project_dir)

    tracker = StepTracker("Claude Setup")
    tracker.add("detect", "Detect project")
    tracker.add("directories", "Create directories")
    tracker.add("templates", "Copy templates")
    tracker.add("journal", "Development journal")
    tracker.add("gitignore", "Update .gitignore")

    try:
        check_project_compatibility(config, project_dir, non_interactive)
        tracker.complete("detect", config.framework_name)

        created = create_directories(project_dir)
        for path in created:
            console.print(f"[bright_blue]📁 Created {path.relative_to(project_dir)}[/bright_blue]")
        tracker.complete("directories", f"{len(created)} new")

        variables = build_variables(
            config,
            project_name,
            user_name,
            with_oauth=with_oauth,
            with_viewcomponents=with_viewcomponents,
            with_django=with_django,
            with_fastapi=with_fastapi,
        )
        report = render_and_copy(
            config,
            get_template_root(template_root),
            project_dir,
            variables,
            skip_journal=skip_journal,
        )
    except ChironError as exc:
        fail(str(exc))

    for path in report.written:
        console.print(f"[bright_blue]📋 Wrote {path.relative_to(project_dir)}[/bright_blue]")
    for path in report.skipped:
        console.print(f"[yellow]↷ Kept existing {path.relative_to(project_dir)}[/yellow]")

    tracker.complete("templates", f"{len(report.command_sources)} command files")
    journal = project_dir / JOURNAL_FILE
    if skip_journal:
        tracker.skip("journal", "--skip-journal")
    elif journal in report.skipped:
        tracker.skip("journal", "already exists")
    elif journal in report.written:
        tracker.complete("journal", JOURNAL_FILE)
    else:
        tracker.skip("journal", "no template")

    if GitignoreManager(project_dir).ensure_claude_stanza():
        console.print("[bright_blue]📝 Updated .gitignore[/bright_blue]")
        tracker.complete("gitignore")
    else:
        tracker.skip("gitignore", "missing or already configured")

    if (project_dir / SETTINGS_FILE).exists():
        console.print(f"[dim]Settings: {SETTINGS_FILE}[/dim]")

    console.print()
    console.print(tracker.render())
    console.print("\n[green]✨ Claude workflow initialized successfully![/green]")
    _print_next_steps(project_type)
