"""Tests for .cursor/rules migration."""

from pathlib import Path

import pytest

from chiron_cli.errors import IncompatibleProjectError
from chiron_cli.migration import (
    migrate_cursor_rules,
    remove_cursor_dir,
    route_rule,
    strip_frontmatter,
)


def _create_rule(project: Path, name: str, content: str) -> Path:
    rules = project / ".cursor" / "rules"
    rules.mkdir(parents=True, exist_ok=True)
    path = rules / name
    path.write_text(content, encoding="utf-8")
    return path


@pytest.mark.parametrize(
    ("stem", "subdir"),
    [
        ("create-prd", "workflows"),
        ("rails", "conventions"),
        ("view_component", "conventions"),
        ("test-driven", "quality"),
        ("something-else", "workflows"),
    ],
)
def test_route_rule(stem: str, subdir: str) -> None:
    assert route_rule(stem) == subdir


def test_strip_frontmatter() -> None:
    text = "---\ndescription: PRD\nglobs: *\n---\n\n# Create PRD\n\nSteps\n"
    assert strip_frontmatter(text) == "# Create PRD\n\nSteps"


def test_strip_frontmatter_without_block() -> None:
    assert strip_frontmatter("\n# Title\n") == "# Title"


def test_migrate_routes_and_strips(tmp_path: Path) -> None:
    _create_rule(tmp_path, "rails.mdc", "---\nalwaysApply: true\n---\nUse Rails way\n")
    _create_rule(tmp_path, "test-driven.mdc", "Red green refactor")
    _create_rule(tmp_path, "notes.txt", "ignored")

    report = migrate_cursor_rules(tmp_path)

    commands = tmp_path / ".claude" / "commands"
    assert (commands / "conventions" / "rails.md").read_text(encoding="utf-8") == "Use Rails way\n"
    assert (commands / "quality" / "test-driven.md").read_text(encoding="utf-8") == "Red green refactor\n"
    assert [rule.name for rule, _ in report.migrated] == ["rails.mdc", "test-driven.mdc"]
    assert not (commands / "workflows" / "notes.md").exists()


def test_migrate_without_rules_dir(tmp_path: Path) -> None:
    with pytest.raises(IncompatibleProjectError):
        migrate_cursor_rules(tmp_path)


def test_remove_cursor_dir(tmp_path: Path) -> None:
    _create_rule(tmp_path, "rails.mdc", "x")
    assert remove_cursor_dir(tmp_path) is True
    assert not (tmp_path / ".cursor").exists()
    assert remove_cursor_dir(tmp_path) is False
