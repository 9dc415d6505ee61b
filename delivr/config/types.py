"""Configuration types.

A resolved configuration is a plain nested dict (``ConfigTree``) shaped like::

    {
        "server": {"url": ..., "apiEndpoint": ..., "timeout": 30000},
        "auth": {"accessKey": ..., "preserveOnLogout": ...},
        "defaults": {"project": ..., "deploymentName": ...},
        "release": {...}, "build": {...}, "distribution": {...},
    }

``release``, ``build`` and ``distribution`` are passed through untouched.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from pathlib import Path

from delivr.core.structured import StrDict

__all__ = [
    "ConfigFileError",
    "ConfigLoadResult",
    "ConfigSource",
    "ConfigTree",
    "EnvMapping",
    "FileLoadResult",
    "ProvenanceMap",
    "Transform",
]

ConfigTree = StrDict


class ConfigSource(IntEnum):
    """Where a configuration value came from, ordered by priority."""

    DEFAULT = 0
    ENV = 1
    GLOBAL = 2
    FILE = 3
    CLI = 4

    @property
    def label(self) -> str:
        return _SOURCE_LABELS[self]

    def __str__(self) -> str:
        return self.label


_SOURCE_LABELS = {
    ConfigSource.DEFAULT: "default",
    ConfigSource.ENV: "env",
    ConfigSource.GLOBAL: "global",
    ConfigSource.FILE: "file",
    ConfigSource.CLI: "cli",
}

ProvenanceMap = dict[str, ConfigSource]


class Transform(Enum):
    """How a raw environment string is converted before it is stored."""

    IDENTITY = "identity"
    PARSE_INT = "parse_int"


@dataclass(frozen=True, slots=True)
class EnvMapping:
    """One row of the environment variable table."""

    env_var: str
    config_path: str
    transform: Transform = Transform.IDENTITY


@dataclass(frozen=True, slots=True)
class ConfigFileError:
    """A config file exists but could not be read or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class FileLoadResult:
    """Outcome of the project-file lookup.

    ``config`` is None when no file contributed; ``is_empty`` is then True.
    """

    config: ConfigTree | None = None
    filepath: Path | None = None
    is_empty: bool = True


def _empty_sources() -> ProvenanceMap:
    return {}


@dataclass(frozen=True, slots=True)
class ConfigLoadResult:
    """Merged configuration together with per-leaf provenance."""

    config: ConfigTree
    sources: ProvenanceMap = field(default_factory=_empty_sources)
    filepath: Path | None = None
    is_empty: bool = True

    def as_dict(self, *, with_sources: bool = True) -> StrDict:
        """Render as a JSON-ready dict, optionally with a ``_sources`` key."""
        out: StrDict = dict(self.config)
        if with_sources:
            out["_sources"] = {path: src.label for path, src in sorted(self.sources.items())}
        return out
