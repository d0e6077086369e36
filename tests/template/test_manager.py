"""Tests for the render-and-copy pass and workflow catalog."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest

from chiron_cli.core.project_config import build_config
from chiron_cli.core.types import Framework, ProjectType
from chiron_cli.errors import TemplateRenderError, UnknownWorkflowError
from chiron_cli.template.manager import (
    available_workflows,
    backup_commands,
    build_variables,
    copy_workflow,
    create_directories,
    render_and_copy,
)
from chiron_cli.template.resolver import TemplateTier, get_package_template_root


def _create_file(path: Path, content: str = "placeholder") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def _variables(config, **flags):
    return build_variables(config, "demo", "Tester", **flags)


@pytest.fixture()
def shared_only_root(tmp_path: Path) -> Path:
    root = tmp_path / "templates"
    _create_file(root / "shared" / "CLAUDE.md.j2", "# {{ project_name }} ({{ framework_name }})\n")
    _create_file(root / "shared" / "development_journal.md.j2", "Journal by {{ user_name }}\n")
    _create_file(root / "shared" / "commands" / "workflows" / "create-prd.md", "PRD steps\n")
    _create_file(root / "shared" / "claude" / "settings.json", '{"permissions": {}}\n')
    return root


@pytest.fixture()
def target(tmp_path: Path) -> Path:
    project = tmp_path / "project"
    project.mkdir()
    create_directories(project)
    return project


def test_create_directories_reports_new_only(tmp_path: Path) -> None:
    created = create_directories(tmp_path)
    assert tmp_path / ".claude" / "commands" / "workflows" in created
    assert (tmp_path / "tasks").is_dir()
    assert (tmp_path / "docs").is_dir()
    assert create_directories(tmp_path) == []


def test_shared_tier_fallback_for_rails(shared_only_root: Path, target: Path) -> None:
    config = build_config(ProjectType.RAILS, project_dir=target)

    report = render_and_copy(config, shared_only_root, target, _variables(config))

    assert (target / "CLAUDE.md").read_text(encoding="utf-8") == "# demo (Rails)\n"
    assert (target / ".claude" / "commands" / "workflows" / "create-prd.md").read_text() == "PRD steps\n"
    assert (target / ".claude" / "settings.json").exists()
    assert (target / "docs" / "development_journal.md").read_text() == "Journal by Tester\n"
    assert set(report.command_sources.values()) == {TemplateTier.SHARED}


def test_type_specific_command_overrides_shared(shared_only_root: Path, target: Path) -> None:
    _create_file(shared_only_root / "rails" / "commands" / "workflows" / "create-prd.md", "Rails PRD\n")
    config = build_config(ProjectType.RAILS, project_dir=target)

    render_and_copy(config, shared_only_root, target, _variables(config))

    assert (target / ".claude" / "commands" / "workflows" / "create-prd.md").read_text() == "Rails PRD\n"


def test_legacy_layout(tmp_path: Path, target: Path) -> None:
    root = tmp_path / "legacy"
    _create_file(root / "CLAUDE.md.j2", "Legacy {{ project_type }}\n")
    _create_file(root / "commands" / "quality" / "review.md", "Review\n")
    config = build_config(ProjectType.PYTHON, project_dir=target)

    report = render_and_copy(config, root, target, _variables(config))

    assert (target / "CLAUDE.md").read_text() == "Legacy python\n"
    assert (target / ".claude" / "commands" / "quality" / "review.md").exists()
    assert set(report.command_sources.values()) == {TemplateTier.LEGACY}


def test_protected_files_are_not_overwritten(shared_only_root: Path, target: Path) -> None:
    config = build_config(ProjectType.RAILS, project_dir=target)
    (target / "CLAUDE.md").write_text("my edits", encoding="utf-8")
    (target / "docs" / "development_journal.md").write_text("my journal", encoding="utf-8")
    command = target / ".claude" / "commands" / "workflows" / "create-prd.md"
    command.write_text("stale", encoding="utf-8")

    report = render_and_copy(config, shared_only_root, target, _variables(config))

    assert (target / "CLAUDE.md").read_text() == "my edits"
    assert (target / "docs" / "development_journal.md").read_text() == "my journal"
    assert command.read_text() == "PRD steps\n"
    assert target / "CLAUDE.md" in report.skipped


def test_existing_settings_are_kept(shared_only_root: Path, target: Path) -> None:
    settings = target / ".claude" / "settings.json"
    settings.write_text('{"mine": true}', encoding="utf-8")
    config = build_config(ProjectType.RAILS, project_dir=target)

    render_and_copy(config, shared_only_root, target, _variables(config))

    assert settings.read_text() == '{"mine": true}'


def test_update_skips_guidance_document(shared_only_root: Path, target: Path) -> None:
    config = build_config(ProjectType.RAILS, project_dir=target)

    render_and_copy(config, shared_only_root, target, _variables(config), update=True)

    assert not (target / "CLAUDE.md").exists()
    assert (target / ".claude" / "commands" / "workflows" / "create-prd.md").exists()


def test_skip_journal(shared_only_root: Path, target: Path) -> None:
    config = build_config(ProjectType.RAILS, project_dir=target)
    render_and_copy(config, shared_only_root, target, _variables(config), skip_journal=True)
    assert not (target / "docs" / "development_journal.md").exists()


def test_missing_template_root_copies_nothing(tmp_path: Path, target: Path) -> None:
    config = build_config(ProjectType.PYTHON, project_dir=target)
    report = render_and_copy(config, tmp_path / "absent", target, _variables(config))
    assert report.written == []
    assert not (target / "CLAUDE.md").exists()


def test_unknown_project_type_is_refused(shared_only_root: Path, target: Path) -> None:
    config = build_config(ProjectType.UNKNOWN, project_dir=target)
    with pytest.raises(TemplateRenderError):
        render_and_copy(config, shared_only_root, target, {})


def test_bundled_fastapi_guidance(target: Path) -> None:
    (target / "requirements.txt").write_text("fastapi\nuvicorn", encoding="utf-8")
    config = build_config(ProjectType.PYTHON, Framework.FASTAPI, target)

    render_and_copy(config, get_package_template_root(), target, _variables(config))

    guidance = (target / "CLAUDE.md").read_text(encoding="utf-8")
    assert "FastAPI" in guidance
    assert "pytest" in guidance
    assert "uvicorn main:app" in guidance
    assert "Django" not in guidance
    assert (target / ".claude" / "commands" / "conventions" / "python.md").exists()
    assert (target / ".claude" / "commands" / "quality" / "python-testing.md").exists()
    assert (target / ".claude" / "commands" / "workflows" / "create-prd.md").exists()


def test_bundled_rails_guidance_with_viewcomponents(target: Path) -> None:
    config = build_config(ProjectType.RAILS, project_dir=target)

    render_and_copy(
        config,
        get_package_template_root(),
        target,
        _variables(config, with_viewcomponents=True, with_oauth=True),
    )

    guidance = (target / "CLAUDE.md").read_text(encoding="utf-8")
    assert "CLAUDE.md" in guidance
    assert "bin/rspec" in guidance
    assert "ViewComponent" in guidance
    assert "OmniAuth" in guidance
    assert not (target / ".claude" / "commands" / "conventions" / "python.md").exists()


def test_available_workflows_prefers_type_specific(shared_only_root: Path) -> None:
    specific = _create_file(shared_only_root / "python" / "commands" / "workflows" / "create-prd.md")
    _create_file(shared_only_root / "python" / "commands" / "conventions" / "python.md")

    catalog = available_workflows(ProjectType.PYTHON, shared_only_root)

    assert set(catalog) == {"create-prd", "python"}
    assert catalog["create-prd"][0] == specific


def test_copy_workflow(shared_only_root: Path, target: Path) -> None:
    config = build_config(ProjectType.RAILS, project_dir=target)
    path = copy_workflow("create-prd", ProjectType.RAILS, shared_only_root, target, _variables(config))
    assert path == target / ".claude" / "commands" / "workflows" / "create-prd.md"
    assert path.read_text() == "PRD steps\n"


def test_copy_unknown_workflow(shared_only_root: Path, target: Path) -> None:
    with pytest.raises(UnknownWorkflowError) as excinfo:
        copy_workflow("nope", ProjectType.RAILS, shared_only_root, target, {})
    assert excinfo.value.available == ["create-prd"]


def test_backup_commands(target: Path) -> None:
    _create_file(target / ".claude" / "commands" / "workflows" / "x.md", "x")

    backup = backup_commands(target, now=datetime(2024, 5, 6, 7, 8, 9))

    assert backup == target / ".claude" / "commands.backup.20240506070809"
    assert (backup / "workflows" / "x.md").read_text() == "x"


def test_backup_twice_in_same_second(target: Path) -> None:
    _create_file(target / ".claude" / "commands" / "workflows" / "x.md", "x")
    now = datetime(2024, 5, 6, 7, 8, 9)

    first = backup_commands(target, now=now)
    second = backup_commands(target, now=now)
    third = backup_commands(target, now=now)

    assert first.name == "commands.backup.20240506070809"
    assert second.name == "commands.backup.20240506070809.1"
    assert third.name == "commands.backup.20240506070809.2"
    assert (second / "workflows" / "x.md").read_text() == "x"


def test_backup_without_commands(tmp_path: Path) -> None:
    assert backup_commands(tmp_path) is None
