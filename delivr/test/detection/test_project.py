"""Tests for delivr.detection.project module."""

from __future__ import annotations

import json
from pathlib import Path

from delivr.detection.project import detect_expo, read_dependencies


def _package_json(root: Path, data: object) -> None:
    (root / "package.json").write_text(json.dumps(data), encoding="utf-8")


class TestReadDependencies:
    """Test reading package.json dependencies."""

    def test_union_of_dependency_tables(self, tmp_path: Path) -> None:
        _package_json(
            tmp_path,
            {"dependencies": {"react": "18"}, "devDependencies": {"jest": "29"}},
        )
        assert read_dependencies(tmp_path) == {"react": "18", "jest": "29"}

    def test_missing_manifest(self, tmp_path: Path) -> None:
        assert read_dependencies(tmp_path) is None

    def test_malformed_manifest(self, tmp_path: Path) -> None:
        (tmp_path / "package.json").write_text("{oops", encoding="utf-8")
        assert read_dependencies(tmp_path) is None

    def test_manifest_without_dependencies(self, tmp_path: Path) -> None:
        _package_json(tmp_path, {"name": "app"})
        assert read_dependencies(tmp_path) == {}


class TestDetectExpo:
    """Test Expo project detection."""

    def test_bare_react_native(self, tmp_path: Path) -> None:
        _package_json(tmp_path, {"dependencies": {"react-native": "0.74.1"}})
        info = detect_expo(tmp_path)
        assert info.is_expo is False
        assert info.project_root == tmp_path
        assert info.react_native_version == "0.74.1"

    def test_expo_dependency(self, tmp_path: Path) -> None:
        _package_json(tmp_path, {"dependencies": {"expo": "~50.0.0"}})
        assert detect_expo(tmp_path).is_expo is True

    def test_expo_cli_dev_dependency(self, tmp_path: Path) -> None:
        _package_json(tmp_path, {"devDependencies": {"expo-cli": "6"}})
        assert detect_expo(tmp_path).is_expo is True

    def test_expo_config_file_alone(self, tmp_path: Path) -> None:
        (tmp_path / "app.config.ts").write_text("export default {}", encoding="utf-8")
        info = detect_expo(tmp_path)
        assert info.is_expo is True
        assert info.react_native_version is None

    def test_broken_manifest_is_not_expo(self, tmp_path: Path) -> None:
        (tmp_path / "package.json").write_text("not json", encoding="utf-8")
        assert detect_expo(tmp_path).is_expo is False
