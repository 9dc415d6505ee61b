"""User-level path locations.

Global config lives in ``~/.delivr/config.json``; the legacy tool stored a
flat file at ``~/.dota.config``. Xcode keeps its build products under the
DerivedData directory of the user's Library.

Nothing here is cached: HOME is re-read on every call so that resolution
follows the environment at call time.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

__all__ = [
    "GLOBAL_CONFIG_DIR",
    "GLOBAL_CONFIG_FILE",
    "LEGACY_GLOBAL_CONFIG_FILE",
    "global_config_dir",
    "global_config_path",
    "home",
    "legacy_global_config_path",
    "xcode_derived_data_dir",
]

GLOBAL_CONFIG_DIR = ".delivr"
GLOBAL_CONFIG_FILE = "config.json"
LEGACY_GLOBAL_CONFIG_FILE = ".dota.config"


def home(environ: Mapping[str, str] | None = None) -> Path:
    """Get the user's home directory.

    Uses USERPROFILE on Windows, HOME elsewhere, then falls back to
    Path.home() which handles the remaining edge cases.
    """
    env = os.environ if environ is None else environ
    key = "USERPROFILE" if os.name == "nt" else "HOME"
    value = env.get(key)
    if value:
        return Path(value)
    return Path.home()


def global_config_dir(home_dir: Path | None = None) -> Path:
    return (home_dir or home()) / GLOBAL_CONFIG_DIR


def global_config_path(home_dir: Path | None = None) -> Path:
    return global_config_dir(home_dir) / GLOBAL_CONFIG_FILE


def legacy_global_config_path(home_dir: Path | None = None) -> Path:
    return (home_dir or home()) / LEGACY_GLOBAL_CONFIG_FILE


def xcode_derived_data_dir(home_dir: Path | None = None) -> Path:
    """~/Library/Developer/Xcode/DerivedData (only populated on macOS)."""
    return (home_dir or home()) / "Library" / "Developer" / "Xcode" / "DerivedData"
