"""Per-user global configuration.

Stored as JSON in ``~/.delivr/config.json``. When that file does not exist the
legacy ``~/.dota.config`` is read and converted. A present but broken file
produces a warning and contributes nothing; the legacy file is not consulted
in that case.
"""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from pathlib import Path

from delivr.core.result import Err, Ok, Result, is_ok
from delivr.output.console import ConsoleProtocol
from delivr.platform.files import atomic_write_json
from delivr.platform.paths import global_config_path, legacy_global_config_path

from .files import decode_config, read_config_bytes
from .legacy import convert_legacy_config
from .types import ConfigFileError, ConfigTree

__all__ = [
    "clear_global_config",
    "load_global_config",
    "load_global_config_async",
    "save_global_config",
]


def _read_global(home_dir: Path | None) -> tuple[Path, Result[bytes | None, ConfigFileError], bool]:
    current = global_config_path(home_dir)
    if current.exists():
        return current, read_config_bytes(current), False
    legacy = legacy_global_config_path(home_dir)
    return legacy, read_config_bytes(legacy), True


def _interpret(
    path: Path,
    raw: Result[bytes | None, ConfigFileError],
    legacy: bool,
    console: ConsoleProtocol | None,
) -> ConfigTree:
    if is_ok(raw):
        parsed = decode_config(path, raw.value)
    else:
        parsed = raw
    match parsed:
        case Err(error):
            if console is not None:
                console.warning(f"Failed to load global config: {error.message}")
            return {}
        case Ok(None):
            return {}
        case Ok(tree):
            return convert_legacy_config(tree) if legacy else tree
    return {}


def load_global_config(
    home_dir: Path | None = None,
    *,
    console: ConsoleProtocol | None = None,
) -> ConfigTree:
    """Read the global config, falling back to the legacy file."""
    path, raw, legacy = _read_global(home_dir)
    return _interpret(path, raw, legacy, console)


async def load_global_config_async(
    home_dir: Path | None = None,
    *,
    console: ConsoleProtocol | None = None,
) -> ConfigTree:
    path, raw, legacy = await asyncio.to_thread(_read_global, home_dir)
    return _interpret(path, raw, legacy, console)


def save_global_config(
    config: Mapping[str, object],
    home_dir: Path | None = None,
) -> Result[Path, ConfigFileError]:
    """Write config to ~/.delivr/config.json, creating the directory."""
    path = global_config_path(home_dir)
    try:
        atomic_write_json(path, dict(config))
    except (OSError, TypeError, ValueError) as e:
        return Err(ConfigFileError(f"Failed to save global config: {e}", path=path))
    return Ok(path)


def clear_global_config(home_dir: Path | None = None) -> Result[None, ConfigFileError]:
    """Remove ~/.delivr/config.json if present. The legacy file is left alone."""
    path = global_config_path(home_dir)
    try:
        path.unlink(missing_ok=True)
    except OSError as e:
        return Err(ConfigFileError(f"Failed to clear global config: {e}", path=path))
    return Ok(None)
