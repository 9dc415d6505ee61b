"""Ranked deep merge of configuration trees.

Raw trees are ingested once into a tagged form: every dict becomes a ``Node``
and everything else (scalars, lists) becomes a ``Leaf`` stamped with the
source it came from. Merging then dispatches on the tag only:

- Node over Node merges key by key, so setting ``server.url`` keeps a
  lower-priority ``server.apiEndpoint``.
- Anything else over anything else replaces. A scalar written over a table
  wins outright, and so does a table written over a scalar.
- ``None`` means "not set": it is dropped at ingestion and never overwrites.

Provenance is read off the merged tagged tree, so its key set is exactly the
merged tree's leaf set.
"""

from __future__ import annotations

import copy
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from delivr.core.structured import as_str_dict

from .constants import DEFAULT_CONFIG
from .types import ConfigSource, ConfigTree, ProvenanceMap

__all__ = [
    "Leaf",
    "Node",
    "get_default_config",
    "ingest",
    "merge_configs",
    "merge_nodes",
    "merge_ranked",
    "to_plain",
    "track_config_sources",
]


@dataclass(frozen=True, slots=True)
class Leaf:
    value: object
    source: ConfigSource | None = None


@dataclass(frozen=True, slots=True)
class Node:
    children: Mapping[str, Leaf | Node]


def ingest(tree: Mapping[str, object], source: ConfigSource | None = None) -> Node:
    """Tag a raw tree. Values are copied; the input is never referenced."""
    children: dict[str, Leaf | Node] = {}
    for key, value in tree.items():
        if value is None:
            continue
        table = as_str_dict(value)
        if table is not None:
            children[key] = ingest(table, source)
        else:
            children[key] = Leaf(copy.deepcopy(value), source)
    return Node(children)


def merge_nodes(base: Node, override: Node) -> Node:
    """Merge override into base, returning a new Node."""
    merged: dict[str, Leaf | Node] = dict(base.children)
    for key, entry in override.children.items():
        current = merged.get(key)
        match (current, entry):
            case (Node(), Node()):
                merged[key] = merge_nodes(current, entry)
            case _:
                merged[key] = entry
    return Node(merged)


def to_plain(node: Node) -> ConfigTree:
    """Convert a tagged tree back to plain dicts."""
    out: ConfigTree = {}
    for key, entry in node.children.items():
        match entry:
            case Node():
                out[key] = to_plain(entry)
            case Leaf(value=value):
                out[key] = copy.deepcopy(value)
    return out


def _collect_sources(node: Node, prefix: str, out: ProvenanceMap) -> None:
    for key, entry in node.children.items():
        path = f"{prefix}.{key}" if prefix else key
        match entry:
            case Node():
                _collect_sources(entry, path, out)
            case Leaf(source=source) if source is not None:
                out[path] = source
            case _:
                pass


def _merge_tagged(ranked: Iterable[tuple[ConfigSource | None, Mapping[str, object]]]) -> Node:
    merged = Node({})
    for source, tree in ranked:
        merged = merge_nodes(merged, ingest(tree, source))
    return merged


def merge_configs(*configs: Mapping[str, object]) -> ConfigTree:
    """Merge trees given lowest priority first."""
    return to_plain(_merge_tagged((None, c) for c in configs))


def track_config_sources(
    ranked: Iterable[tuple[ConfigSource, Mapping[str, object]]],
) -> ProvenanceMap:
    """Map each merged leaf's dot path to the highest-priority source that set it."""
    sources: ProvenanceMap = {}
    _collect_sources(_merge_tagged(ranked), "", sources)
    return sources


def merge_ranked(
    ranked: Iterable[tuple[ConfigSource, Mapping[str, object]]],
) -> tuple[ConfigTree, ProvenanceMap]:
    """Merge and track provenance in a single pass."""
    merged = _merge_tagged(ranked)
    sources: ProvenanceMap = {}
    _collect_sources(merged, "", sources)
    return to_plain(merged), sources


def get_default_config() -> ConfigTree:
    """Return a fresh copy of the built-in defaults."""
    return copy.deepcopy(DEFAULT_CONFIG)
