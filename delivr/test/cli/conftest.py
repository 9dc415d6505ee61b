"""Shared fixtures for CLI tests."""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from typer.testing import CliRunner


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def cli_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> tuple[Path, Path]:
    """Run from an empty project with an isolated home and no DELIVR_* variables."""
    project = tmp_path / "project"
    home_dir = tmp_path / "home"
    project.mkdir()
    home_dir.mkdir()

    for name in list(os.environ):
        if name.startswith(("DELIVR_", "CODE_PUSH_")):
            monkeypatch.delenv(name)
    monkeypatch.setenv("HOME", str(home_dir))
    monkeypatch.setenv("USERPROFILE", str(home_dir))
    monkeypatch.chdir(project)
    return project, home_dir
