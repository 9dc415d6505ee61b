"""Shared fixtures for detection tests.

Build directories are backdated relative to a fixed clock so freshness checks
do not depend on when the tests run.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path

import pytest

from delivr.detection.types import DetectionSettings

NOW = 1_700_000_000.0
HOUR = 3600.0

type BuildDirFactory = Callable[..., Path]


def _backdate(path: Path, age_hours: float) -> None:
    stamp = NOW - age_hours * HOUR
    os.utime(path, (stamp, stamp))


@pytest.fixture
def now() -> float:
    return NOW


@pytest.fixture
def settings(tmp_path: Path) -> DetectionSettings:
    """Fixed clock and an empty DerivedData directory inside tmp_path."""
    derived = tmp_path / "DerivedData"
    derived.mkdir()
    return DetectionSettings(derived_data_dir=derived, clock=lambda: NOW)


@pytest.fixture
def project(tmp_path: Path) -> Path:
    root = tmp_path / "app"
    root.mkdir()
    return root


@pytest.fixture
def build_dir(project: Path) -> BuildDirFactory:
    """Create project/relative holding the given entries, aged age_hours."""

    def make(relative: str, entries: tuple[str, ...] = (), *, age_hours: float = 1.0) -> Path:
        directory = project / relative
        directory.mkdir(parents=True, exist_ok=True)
        for name in entries:
            (directory / name).write_text("x", encoding="utf-8")
        _backdate(directory, age_hours)
        return directory

    return make


@pytest.fixture
def products_dir(settings: DetectionSettings) -> BuildDirFactory:
    """Create DerivedData/<folder>/Build/Products, aged age_hours."""

    def make(folder: str, *, age_hours: float = 1.0) -> Path:
        assert settings.derived_data_dir is not None
        products = settings.derived_data_dir / folder / "Build" / "Products"
        products.mkdir(parents=True)
        _backdate(products, age_hours)
        return products

    return make
