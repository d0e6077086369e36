from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

from chiron_cli.core import identity


def test_git_name_preferred(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr(identity, "git_user_name", lambda project_dir: "Ada Lovelace")
    monkeypatch.setenv("USER", "ada")
    assert identity.detect_user_name(tmp_path) == "Ada Lovelace"


def test_falls_back_to_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr(identity, "git_user_name", lambda project_dir: None)
    monkeypatch.delenv("USER", raising=False)
    monkeypatch.setenv("USERNAME", "grace")
    assert identity.detect_user_name(tmp_path) == "grace"


def test_none_when_nothing_found(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr(identity, "git_user_name", lambda project_dir: None)
    monkeypatch.delenv("USER", raising=False)
    monkeypatch.delenv("USERNAME", raising=False)
    assert identity.detect_user_name(tmp_path) is None


def test_git_failure_returns_none(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    def fake_run(*args, **kwargs):
        raise subprocess.CalledProcessError(1, args[0])

    monkeypatch.setattr(identity.subprocess, "run", fake_run)
    assert identity.git_user_name(tmp_path) is None


def test_git_missing_returns_none(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    def fake_run(*args, **kwargs):
        raise FileNotFoundError("git")

    monkeypatch.setattr(identity.subprocess, "run", fake_run)
    assert identity.git_user_name(tmp_path) is None
