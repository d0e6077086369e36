"""Tests for doctor health checks."""

from pathlib import Path

from chiron_cli.doctor import run_checks
from chiron_cli.template import create_directories


def _by_name(checks):
    return {check.name: check for check in checks}


def test_empty_directory_fails(tmp_path: Path) -> None:
    checks = _by_name(run_checks(tmp_path))

    assert checks["Unknown project"].passed is False
    assert checks["CLAUDE.md exists"].passed is False
    assert checks[".gitignore entry"].passed is False
    assert "Gemfile exists" not in checks
    assert "Python package file" not in checks


def test_rails_project_checks(tmp_path: Path) -> None:
    (tmp_path / "Gemfile").write_text("gem 'rails'\n", encoding="utf-8")
    (tmp_path / "app").mkdir()

    checks = _by_name(run_checks(tmp_path))

    assert checks["Rails project"].passed is True
    assert checks["Gemfile exists"].passed is True
    assert checks["Rails app structure"].passed is True


def test_configured_python_project(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text("[project]\nname = 'x'\n", encoding="utf-8")
    create_directories(tmp_path)
    (tmp_path / "CLAUDE.md").write_text("# CLAUDE.md\n", encoding="utf-8")
    (tmp_path / "docs" / "development_journal.md").write_text("journal\n", encoding="utf-8")
    (tmp_path / ".gitignore").write_text(".claude/*\n", encoding="utf-8")

    checks = run_checks(tmp_path)

    assert all(check.passed for check in checks), [c.name for c in checks if not c.passed]
    assert _by_name(checks)["Python package file"].passed is True
