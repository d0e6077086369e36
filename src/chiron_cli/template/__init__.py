"""Template management for chiron."""

from .manager import (
    CopyReport,
    available_workflows,
    backup_commands,
    build_variables,
    copy_commands,
    copy_workflow,
    create_directories,
    render_and_copy,
)
from .renderer import has_template_syntax, render_file, render_string
from .resolver import (
    ResolutionResult,
    TemplateTier,
    get_template_root,
    resolve_command_dirs,
    resolve_template,
)

__all__ = [
    "CopyReport",
    "ResolutionResult",
    "TemplateTier",
    "available_workflows",
    "backup_commands",
    "build_variables",
    "copy_commands",
    "copy_workflow",
    "create_directories",
    "get_template_root",
    "has_template_syntax",
    "render_and_copy",
    "render_file",
    "render_string",
    "resolve_command_dirs",
    "resolve_template",
]
