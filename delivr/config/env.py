"""Environment variable reader.

Maps environment variables onto config paths using ENV_VAR_MAPPINGS. Only
variables that are present contribute; an empty string is a value.
"""

from __future__ import annotations

import os
import re
from collections.abc import Mapping, Sequence

from delivr.core.result import Err, Ok, Result, is_err
from delivr.core.structured import set_path
from delivr.output.console import ConsoleProtocol

from .constants import ENV_NO_CONFIG, ENV_VAR_MAPPINGS, TRUTHY_ENV_VALUES
from .types import ConfigTree, EnvMapping, Transform

__all__ = ["apply_transform", "config_files_disabled", "load_from_env"]

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def apply_transform(transform: Transform, raw: str) -> Result[object, str]:
    """Convert a raw environment string according to its mapping row.

    PARSE_INT reads the leading integer, so ``"5000ms"`` gives 5000.
    """
    match transform:
        case Transform.IDENTITY:
            return Ok(raw)
        case Transform.PARSE_INT:
            m = _LEADING_INT.match(raw)
            if m is None:
                return Err(f"not an integer: {raw!r}")
            return Ok(int(m.group(1)))


def load_from_env(
    environ: Mapping[str, str] | None = None,
    *,
    mappings: Sequence[EnvMapping] = ENV_VAR_MAPPINGS,
    console: ConsoleProtocol | None = None,
) -> ConfigTree:
    """Build a partial config tree from environment variables.

    Rows are applied in table order; a value that fails its transform is
    skipped with a warning.
    """
    env = os.environ if environ is None else environ
    config: ConfigTree = {}

    for mapping in mappings:
        raw = env.get(mapping.env_var)
        if raw is None:
            continue
        result = apply_transform(mapping.transform, raw)
        if is_err(result):
            if console is not None:
                console.warning(f"Ignoring {mapping.env_var}: {result.error}")
            continue
        set_path(config, mapping.config_path, result.value)

    return config


def config_files_disabled(environ: Mapping[str, str] | None = None) -> bool:
    """True when DELIVR_NO_CONFIG asks to skip every file-based source."""
    env = os.environ if environ is None else environ
    return env.get(ENV_NO_CONFIG, "").strip().lower() in TRUTHY_ENV_VALUES
