"""Project type detection (Expo or bare React Native).

A project counts as Expo when either an Expo config file sits at the root or
an Expo package appears in package.json dependencies. Manifest problems never
raise; they simply yield a negative answer.
"""

from __future__ import annotations

import json
from pathlib import Path

from delivr.core.structured import StrDict, as_str_dict

from .constants import (
    EXPO_CONFIG_FILES,
    EXPO_DEPENDENCY_NAMES,
    PACKAGE_JSON_DEP_KEYS,
    PACKAGE_JSON_FILE,
    REACT_NATIVE_DEPENDENCY_NAME,
)
from .types import ProjectInfo

__all__ = ["detect_expo", "read_dependencies"]


def _has_expo_config(project_root: Path) -> bool:
    return any((project_root / name).exists() for name in EXPO_CONFIG_FILES)


def read_dependencies(project_root: Path) -> StrDict | None:
    """Union of dependencies and devDependencies from package.json.

    Returns None if the manifest is missing or unreadable. Later keys in
    PACKAGE_JSON_DEP_KEYS win on conflict.
    """
    path = project_root / PACKAGE_JSON_FILE
    try:
        data: object = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError):
        return None

    manifest = as_str_dict(data)
    if manifest is None:
        return None

    deps: StrDict = {}
    for key in PACKAGE_JSON_DEP_KEYS:
        table = as_str_dict(manifest.get(key))
        if table:
            deps.update(table)
    return deps


def detect_expo(project_root: Path) -> ProjectInfo:
    deps = read_dependencies(project_root)
    has_expo_dep = deps is not None and any(deps.get(name) for name in EXPO_DEPENDENCY_NAMES)

    rn_version = deps.get(REACT_NATIVE_DEPENDENCY_NAME) if deps is not None else None

    return ProjectInfo(
        is_expo=_has_expo_config(project_root) or has_expo_dep,
        project_root=project_root,
        react_native_version=rn_version if isinstance(rn_version, str) else None,
    )
