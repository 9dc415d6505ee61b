"""Helpers for safely working with dynamic (untyped) structures.

Use these at boundaries where JSON/YAML/TOML documents or environment values
are ingested. Dot paths (``server.url``) address leaves in nested mappings.
"""

from __future__ import annotations

from typing import Mapping, TypeGuard, cast

StrDict = dict[str, object]

_MISSING = object()


def is_str_dict(obj: object) -> TypeGuard[StrDict]:
    """Return True if obj is a dict with string keys."""
    if not isinstance(obj, dict):
        return False
    d = cast(dict[object, object], obj)
    return all(isinstance(k, str) for k in d.keys())


def as_str_dict(obj: object) -> StrDict | None:
    """Return obj as StrDict if it matches, else None."""
    if is_str_dict(obj):
        return obj
    return None


def split_path(path: str) -> list[str] | None:
    """Split a dot path into keys. Returns None for empty segments."""
    keys = path.split(".")
    if any(not k for k in keys):
        return None
    return keys


def get_path(tree: Mapping[str, object], path: str, default: object = None) -> object:
    """Look up a dot path in a nested mapping, returning default when absent."""
    keys = split_path(path)
    if keys is None:
        return default
    current: object = tree
    for key in keys:
        table = as_str_dict(current)
        if table is None:
            return default
        current = table.get(key, _MISSING)
        if current is _MISSING:
            return default
    return current


def set_path(tree: StrDict, path: str, value: object) -> bool:
    """Set a dot path in a nested dict, creating intermediate tables.

    A non-table value sitting on an intermediate key is replaced by a table.
    Returns False (and leaves tree untouched) if the path is malformed.
    """
    keys = split_path(path)
    if keys is None:
        return False
    current = tree
    for key in keys[:-1]:
        nested = as_str_dict(current.get(key))
        if nested is None:
            nested = {}
            current[key] = nested
        current = nested
    current[keys[-1]] = value
    return True
