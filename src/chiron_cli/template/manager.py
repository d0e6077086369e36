"""Template discovery, rendering and copy helpers."""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass, field
from datetime import date, datetime
from pathlib import Path
from typing import Any, Mapping

from chiron_cli.core.constants import (
    COMMANDS_DIR,
    GUIDANCE_FILE,
    JOURNAL_FILE,
    PROJECT_DIRECTORIES,
    SETTINGS_FILE,
)
from chiron_cli.core.project_config import ProjectConfig
from chiron_cli.core.types import ProjectType
from chiron_cli.errors import TemplateRenderError, UnknownWorkflowError
from chiron_cli.template.renderer import TEMPLATE_SUFFIX, output_name, render_file
from chiron_cli.template.resolver import (
    ResolutionResult,
    TemplateTier,
    resolve_command_dirs,
    resolve_template,
)

logger = logging.getLogger(__name__)

GUIDANCE_TEMPLATE = "CLAUDE.md.j2"
JOURNAL_TEMPLATE = "development_journal.md.j2"
SETTINGS_TEMPLATE = "claude/settings.json"
COMMAND_TEMPLATE_GLOB = "*.md"


@dataclass
class CopyReport:
    """Result of a template copy pass."""

    written: list[Path] = field(default_factory=list)
    """Files created or overwritten"""

    skipped: list[Path] = field(default_factory=list)
    """Protected files left alone because they already existed"""

    command_sources: dict[Path, TemplateTier] = field(default_factory=dict)
    """Command files written, mapped to the tier they came from"""


def create_directories(target_root: Path) -> list[Path]:
    """Create the command tree, ``tasks/`` and ``docs/``.

    Returns:
        The directories that did not exist before.
    """
    created = []
    for rel in PROJECT_DIRECTORIES:
        path = target_root / rel
        if not path.is_dir():
            path.mkdir(parents=True, exist_ok=True)
            created.append(path)
    return created


def build_variables(
    config: ProjectConfig,
    project_name: str,
    user_name: str,
    **flags: bool,
) -> dict[str, Any]:
    """Assemble the render context for a project.

    Args:
        config: Resolved project configuration
        project_name: Name shown in the guidance document
        user_name: Author name for the journal
        **flags: Boolean init options (``with_oauth`` and friends)
    """
    variables: dict[str, Any] = {
        "with_oauth": False,
        "with_viewcomponents": False,
        "with_django": False,
        "with_fastapi": False,
    }
    variables.update(flags)
    variables.update(config.template_context())
    variables["project_name"] = project_name
    variables["user_name"] = user_name
    variables["date"] = date.today().isoformat()
    return variables


def _iter_command_templates(source_dir: Path) -> list[Path]:
    templates = list(source_dir.rglob(COMMAND_TEMPLATE_GLOB))
    templates.extend(source_dir.rglob(f"{COMMAND_TEMPLATE_GLOB}{TEMPLATE_SUFFIX}"))
    return sorted(p for p in templates if p.is_file())


def _command_target(template: Path, source_dir: Path, target_root: Path) -> Path:
    relative = template.relative_to(source_dir)
    return target_root / COMMANDS_DIR / relative.parent / output_name(template)


def copy_commands(
    project_type: ProjectType,
    template_root: Path,
    target_root: Path,
    variables: Mapping[str, Any],
    report: CopyReport | None = None,
) -> CopyReport:
    """Copy every command template for the project type.

    Command documents are always overwritten; that is how ``update``
    refreshes them.
    """
    report = report or CopyReport()
    for source in resolve_command_dirs(project_type, template_root):
        for template in _iter_command_templates(source.path):
            target = _command_target(template, source.path, target_root)
            render_file(template, target, variables)
            report.written.append(target)
            report.command_sources[target] = source.tier
    return report


def _render_protected(
    resolution: ResolutionResult | None,
    dest: Path,
    variables: Mapping[str, Any],
    report: CopyReport,
) -> None:
    if resolution is None:
        return
    if dest.exists():
        logger.debug("Keeping existing %s", dest)
        report.skipped.append(dest)
        return
    render_file(resolution.path, dest, variables)
    report.written.append(dest)


def copy_settings(project_type: ProjectType, template_root: Path, target_root: Path, report: CopyReport) -> None:
    """Copy ``settings.json`` verbatim unless the project already has one."""
    resolution = resolve_template(SETTINGS_TEMPLATE, project_type, template_root)
    dest = target_root / SETTINGS_FILE
    if resolution is None:
        return
    if dest.exists():
        report.skipped.append(dest)
        return
    dest.parent.mkdir(parents=True, exist_ok=True)
    shutil.copy2(resolution.path, dest)
    report.written.append(dest)


def render_and_copy(
    config: ProjectConfig,
    template_root: Path,
    target_root: Path,
    variables: Mapping[str, Any],
    *,
    update: bool = False,
    skip_journal: bool = False,
) -> CopyReport:
    """Render and copy every template into *target_root*.

    The guidance document and the development journal are rendered only
    when absent; command documents are always rewritten. With ``update``
    the guidance document is not considered at all.

    Raises:
        TemplateRenderError: If the configuration is for an unknown project
            type, or a template fails to render.
    """
    if not config.is_known:
        raise TemplateRenderError("Cannot render templates for an unknown project type")

    project_type = config.project_type
    report = CopyReport()

    if not update:
        _render_protected(
            resolve_template(GUIDANCE_TEMPLATE, project_type, template_root),
            target_root / GUIDANCE_FILE,
            variables,
            report,
        )

    copy_commands(project_type, template_root, target_root, variables, report)
    copy_settings(project_type, template_root, target_root, report)

    if not skip_journal:
        _render_protected(
            resolve_template(JOURNAL_TEMPLATE, project_type, template_root),
            target_root / JOURNAL_FILE,
            variables,
            report,
        )

    logger.debug("Wrote %d files, skipped %d", len(report.written), len(report.skipped))
    return report


def available_workflows(project_type: ProjectType, template_root: Path) -> dict[str, tuple[Path, Path]]:
    """Map workflow names to ``(template, source_dir)`` for the project type.

    Names are template file stems. A type-specific template shadows a
    shared one with the same name.
    """
    catalog: dict[str, tuple[Path, Path]] = {}
    for source in resolve_command_dirs(project_type, template_root):
        for template in _iter_command_templates(source.path):
            name = output_name(template).removesuffix(".md")
            catalog[name] = (template, source.path)
    return catalog


def copy_workflow(
    name: str,
    project_type: ProjectType,
    template_root: Path,
    target_root: Path,
    variables: Mapping[str, Any],
) -> Path:
    """Copy one named workflow into the command tree.

    Raises:
        UnknownWorkflowError: If *name* is not in the catalog.
    """
    catalog = available_workflows(project_type, template_root)
    if name not in catalog:
        raise UnknownWorkflowError(name, catalog)
    template, source_dir = catalog[name]
    target = _command_target(template, source_dir, target_root)
    return render_file(template, target, variables)


def backup_commands(target_root: Path, now: datetime | None = None) -> Path | None:
    """Copy ``.claude/commands`` to a timestamped sibling directory.

    A backup taken in the same second as an earlier one gets a numeric
    suffix (``.1``, ``.2``, ...).

    Returns:
        The backup directory, or None when there is nothing to back up.
    """
    commands = target_root / COMMANDS_DIR
    if not commands.is_dir():
        return None
    stamp = (now or datetime.now()).strftime("%Y%m%d%H%M%S")
    backup = commands.with_name(f"{commands.name}.backup.{stamp}")
    counter = 0
    while backup.exists():
        counter += 1
        backup = commands.with_name(f"{commands.name}.backup.{stamp}.{counter}")
    shutil.copytree(commands, backup)
    return backup


__all__ = [
    "CopyReport",
    "available_workflows",
    "backup_commands",
    "build_variables",
    "copy_commands",
    "copy_settings",
    "copy_workflow",
    "create_directories",
    "render_and_copy",
]
