from __future__ import annotations

from pathlib import Path

import pytest

from chiron_cli.core import project_config as project_config_module


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep tests independent of the developer's environment."""
    monkeypatch.delenv("CHIRON_TEMPLATE_ROOT", raising=False)
    monkeypatch.setenv("CHIRON_NON_INTERACTIVE", "1")
    monkeypatch.setattr(project_config_module, "_probe_version", lambda command: None)


@pytest.fixture()
def project_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """An empty project directory that is also the working directory."""
    project = tmp_path / "demo"
    project.mkdir()
    monkeypatch.chdir(project)
    return project
