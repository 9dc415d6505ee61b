"""Project configuration file lookup.

Lookup order for the project file:

1. ``DELIVR_NO_CONFIG`` set to a truthy value: no file is read at all.
2. ``DELIVR_CONFIG_PATH``: that file, if it exists and parses.
3. CONFIG_FILE_NAMES in each directory from the start directory up to the
   stop directory (inclusive). The first existing, non-empty, parseable
   mapping wins.
4. LEGACY_CONFIG_FILES in the start directory, converted to the nested shape.

Parse failures are reported as warnings and the lookup moves on. The format
is chosen by extension; extensionless rc files are tried as JSON, then YAML.
"""

from __future__ import annotations

import asyncio
import json
import os
import tomllib
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path

import yaml

from delivr.core.result import Err, Ok, Result, is_err
from delivr.core.structured import as_str_dict
from delivr.output.console import ConsoleProtocol

from .constants import CONFIG_FILE_NAMES, ENV_CONFIG_PATH, LEGACY_CONFIG_FILES
from .env import config_files_disabled
from .legacy import convert_legacy_config
from .types import ConfigFileError, ConfigTree, FileLoadResult

__all__ = [
    "decode_config",
    "iter_search_dirs",
    "load_config_file",
    "load_config_file_async",
    "parse_config_file",
    "read_config_bytes",
]

type ParseResult = Result[ConfigTree | None, ConfigFileError]


def read_config_bytes(path: Path) -> Result[bytes | None, ConfigFileError]:
    """Read a file. Ok(None) means the file does not exist."""
    try:
        return Ok(path.read_bytes())
    except FileNotFoundError:
        return Ok(None)
    except PermissionError:
        return Err(ConfigFileError(f"Permission denied reading: {path}", path=path))
    except OSError as e:
        return Err(ConfigFileError(f"Error reading {path}: {e}", path=path))


def _load_rc(text: str) -> object:
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return yaml.safe_load(text)


def decode_config(path: Path, raw: bytes | None) -> ParseResult:
    """Parse file content into a config tree.

    Returns Ok(None) for missing or blank content, Err for anything that is
    not a mapping once parsed.
    """
    if raw is None:
        return Ok(None)
    try:
        text = raw.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        return Err(ConfigFileError(f"Invalid UTF-8 in {path}: {e}", path=path))
    if not text.strip():
        return Ok(None)

    suffix = path.suffix.lower()
    try:
        if suffix == ".json":
            data: object = json.loads(text)
        elif suffix in (".yaml", ".yml"):
            data = yaml.safe_load(text)
        elif suffix == ".toml":
            data = tomllib.loads(text)
        else:
            data = _load_rc(text)
    except json.JSONDecodeError as e:
        return Err(ConfigFileError(f"Invalid JSON in {path}: {e}", path=path))
    except yaml.YAMLError as e:
        return Err(ConfigFileError(f"Invalid YAML in {path}: {e}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigFileError(f"Invalid TOML in {path}: {e}", path=path))

    if data is None:
        return Ok(None)
    tree = as_str_dict(data)
    if tree is None:
        return Err(ConfigFileError(f"Config root must be a mapping: {path}", path=path))
    return Ok(tree)


def parse_config_file(path: Path) -> ParseResult:
    result = read_config_bytes(path)
    if is_err(result):
        return result
    return decode_config(path, result.value)


async def _parse_config_file_async(path: Path) -> ParseResult:
    result = await asyncio.to_thread(read_config_bytes, path)
    if is_err(result):
        return result
    return decode_config(path, result.value)


def iter_search_dirs(start: Path, stop_dir: Path | None = None) -> Iterator[Path]:
    """Yield start and its parents, ending at stop_dir.

    With no stop_dir only start is searched. A stop_dir that is not an
    ancestor of start lets the walk continue to the filesystem root.
    """
    start = start.resolve()
    stop = start if stop_dir is None else stop_dir.resolve()
    for directory in (start, *start.parents):
        yield directory
        if directory == stop:
            return


@dataclass(frozen=True, slots=True)
class _Attempt:
    path: Path
    legacy: bool = False


def _plan(
    start: Path,
    stop_dir: Path | None,
    environ: Mapping[str, str],
) -> Iterator[_Attempt]:
    explicit = environ.get(ENV_CONFIG_PATH)
    if explicit:
        yield _Attempt(Path(explicit).expanduser())

    for directory in iter_search_dirs(start, stop_dir):
        for name in CONFIG_FILE_NAMES:
            candidate = directory / name
            if candidate.is_file():
                yield _Attempt(candidate)

    for name in LEGACY_CONFIG_FILES:
        candidate = start / name
        if candidate.is_file():
            yield _Attempt(candidate, legacy=True)


def _accept(
    attempt: _Attempt,
    result: ParseResult,
    console: ConsoleProtocol | None,
) -> FileLoadResult | None:
    match result:
        case Err(error):
            if console is not None:
                console.warning(f"Failed to load config file: {error.message}")
            return None
        case Ok(None):
            return None
        case Ok(tree):
            config = convert_legacy_config(tree) if attempt.legacy else tree
            return FileLoadResult(config=config, filepath=attempt.path, is_empty=False)
    return None


def load_config_file(
    search_from: Path | None = None,
    *,
    stop_dir: Path | None = None,
    environ: Mapping[str, str] | None = None,
    console: ConsoleProtocol | None = None,
) -> FileLoadResult:
    """Find and parse the project config file."""
    env = os.environ if environ is None else environ
    if config_files_disabled(env):
        return FileLoadResult()

    start = search_from or Path.cwd()
    for attempt in _plan(start, stop_dir, env):
        loaded = _accept(attempt, parse_config_file(attempt.path), console)
        if loaded is not None:
            return loaded
    return FileLoadResult()


async def load_config_file_async(
    search_from: Path | None = None,
    *,
    stop_dir: Path | None = None,
    environ: Mapping[str, str] | None = None,
    console: ConsoleProtocol | None = None,
) -> FileLoadResult:
    """Async variant of load_config_file; the search and file reads run in worker threads."""
    env = os.environ if environ is None else environ
    if config_files_disabled(env):
        return FileLoadResult()

    start = search_from or Path.cwd()
    attempts = await asyncio.to_thread(list, _plan(start, stop_dir, env))
    for attempt in attempts:
        loaded = _accept(attempt, await _parse_config_file_async(attempt.path), console)
        if loaded is not None:
            return loaded
    return FileLoadResult()
