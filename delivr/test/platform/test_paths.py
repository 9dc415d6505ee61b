"""Tests for delivr.platform.paths module."""

from __future__ import annotations

import os
from pathlib import Path

from delivr.platform.paths import (
    global_config_dir,
    global_config_path,
    home,
    legacy_global_config_path,
    xcode_derived_data_dir,
)

_HOME_KEY = "USERPROFILE" if os.name == "nt" else "HOME"


class TestHome:
    """Test home directory lookup."""

    def test_from_environ(self, tmp_path: Path) -> None:
        assert home({_HOME_KEY: str(tmp_path)}) == tmp_path

    def test_empty_value_falls_back(self) -> None:
        assert home({_HOME_KEY: ""}) == Path.home()

    def test_not_cached(self, tmp_path: Path) -> None:
        first = tmp_path / "a"
        second = tmp_path / "b"
        assert home({_HOME_KEY: str(first)}) == first
        assert home({_HOME_KEY: str(second)}) == second


class TestConfigPaths:
    """Test global config and DerivedData locations."""

    def test_global_config(self, tmp_path: Path) -> None:
        assert global_config_dir(tmp_path) == tmp_path / ".delivr"
        assert global_config_path(tmp_path) == tmp_path / ".delivr" / "config.json"

    def test_legacy_global_config(self, tmp_path: Path) -> None:
        assert legacy_global_config_path(tmp_path) == tmp_path / ".dota.config"

    def test_derived_data(self, tmp_path: Path) -> None:
        expected = tmp_path / "Library" / "Developer" / "Xcode" / "DerivedData"
        assert xcode_derived_data_dir(tmp_path) == expected
