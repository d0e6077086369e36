"""Migration from a legacy ``.cursor/rules`` layout to ``.claude/commands``.

Each ``*.mdc`` rule becomes a Markdown command document:
- its front-matter block is stripped
- it is routed into a command subdirectory by filename
"""

from __future__ import annotations

import re
import shutil
from dataclasses import dataclass, field
from pathlib import Path

from chiron_cli.core.constants import COMMANDS_DIR, CURSOR_RULES_DIR
from chiron_cli.errors import IncompatibleProjectError

RULE_SUFFIX = ".mdc"
DEFAULT_RULE_SUBDIR = "workflows"

# Rule filename stem -> command subdirectory; anything else goes to workflows.
RULE_ROUTES = {
    "create-prd": "workflows",
    "generate-tasks": "workflows",
    "process-task-list": "workflows",
    "rails": "conventions",
    "view_component": "conventions",
    "test-driven": "quality",
}

_FRONTMATTER_RE = re.compile(r"---.*?---", re.DOTALL)


@dataclass
class MigrationReport:
    """Outcome of a rule migration."""

    migrated: list[tuple[Path, Path]] = field(default_factory=list)  # (rule, command)


def route_rule(stem: str) -> str:
    """Return the command subdirectory a rule named *stem* belongs in."""
    return RULE_ROUTES.get(stem, DEFAULT_RULE_SUBDIR)


def strip_frontmatter(content: str) -> str:
    """Remove the first ``---``-delimited block and surrounding whitespace."""
    return _FRONTMATTER_RE.sub("", content, count=1).strip()


def migrate_cursor_rules(project_dir: Path) -> MigrationReport:
    """Convert every rule under ``.cursor/rules`` into a command document.

    Command subdirectories are created as needed; existing command files
    with the same name are overwritten.

    Raises:
        IncompatibleProjectError: If ``.cursor/rules`` does not exist.
    """
    rules_dir = project_dir / CURSOR_RULES_DIR
    if not rules_dir.is_dir():
        raise IncompatibleProjectError(f"No {CURSOR_RULES_DIR} directory found!")

    report = MigrationReport()
    for rule in sorted(rules_dir.glob(f"*{RULE_SUFFIX}")):
        target_dir = project_dir / COMMANDS_DIR / route_rule(rule.stem)
        target_dir.mkdir(parents=True, exist_ok=True)
        target = target_dir / f"{rule.stem}.md"
        content = strip_frontmatter(rule.read_text(encoding="utf-8"))
        target.write_text(content + "\n", encoding="utf-8")
        report.migrated.append((rule, target))
    return report


def remove_cursor_dir(project_dir: Path) -> bool:
    """Delete the ``.cursor`` directory; return False if it was absent."""
    cursor_dir = project_dir / ".cursor"
    if not cursor_dir.exists():
        return False
    shutil.rmtree(cursor_dir)
    return True


__all__ = [
    "MigrationReport",
    "RULE_ROUTES",
    "migrate_cursor_rules",
    "remove_cursor_dir",
    "route_rule",
    "strip_frontmatter",
]
