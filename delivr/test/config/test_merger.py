"""Tests for delivr.config.merger module."""

from __future__ import annotations

from delivr.config.constants import DEFAULT_CONFIG
from delivr.config.merger import (
    Leaf,
    Node,
    get_default_config,
    ingest,
    merge_configs,
    merge_nodes,
    merge_ranked,
    to_plain,
    track_config_sources,
)
from delivr.config.types import ConfigSource


def _leaf_paths(tree: dict[str, object], prefix: str = "") -> set[str]:
    paths: set[str] = set()
    for key, value in tree.items():
        path = f"{prefix}.{key}" if prefix else key
        if isinstance(value, dict):
            paths |= _leaf_paths(value, path)
        else:
            paths.add(path)
    return paths


class TestIngest:
    """Test tagging raw trees into Leaf/Node form."""

    def test_tags_tables_and_leaves(self) -> None:
        node = ingest({"server": {"url": "u"}, "tags": ["a"]}, ConfigSource.FILE)
        server = node.children["server"]
        assert isinstance(server, Node)
        assert server.children["url"] == Leaf("u", ConfigSource.FILE)
        assert node.children["tags"] == Leaf(["a"], ConfigSource.FILE)

    def test_drops_none(self) -> None:
        node = ingest({"a": None, "b": 1})
        assert set(node.children) == {"b"}

    def test_round_trip(self) -> None:
        tree = {"server": {"url": "u", "timeout": 5}, "list": [1, 2]}
        assert to_plain(ingest(tree)) == tree


class TestMergeNodes:
    """Test merging of tagged trees."""

    def test_node_over_node_merges(self) -> None:
        merged = merge_nodes(ingest({"a": {"x": 1}}), ingest({"a": {"y": 2}}))
        assert to_plain(merged) == {"a": {"x": 1, "y": 2}}

    def test_leaf_over_node_replaces(self) -> None:
        merged = merge_nodes(ingest({"a": {"x": 1}}), ingest({"a": "flat"}))
        assert to_plain(merged) == {"a": "flat"}

    def test_node_over_leaf_replaces(self) -> None:
        merged = merge_nodes(ingest({"a": "flat"}), ingest({"a": {"x": 1}}))
        assert to_plain(merged) == {"a": {"x": 1}}


class TestMergeConfigs:
    """Test ranked deep merge of plain trees."""

    def test_nested_merge_keeps_lower_priority_siblings(self) -> None:
        defaults = {"server": {"url": "http://localhost:3000", "apiEndpoint": "/api/v1"}}
        cli = {"server": {"url": "https://x.io"}}
        assert merge_configs(defaults, cli) == {
            "server": {"url": "https://x.io", "apiEndpoint": "/api/v1"}
        }

    def test_later_wins(self) -> None:
        assert merge_configs({"a": 1}, {"a": 2}, {"a": 3}) == {"a": 3}

    def test_none_never_overwrites(self) -> None:
        assert merge_configs({"a": 1}, {"a": None}) == {"a": 1}

    def test_lists_replace_whole(self) -> None:
        merged = merge_configs({"p": ["ios", "android"]}, {"p": ["ios"]})
        assert merged == {"p": ["ios"]}

    def test_scalar_over_object_wins(self) -> None:
        merged = merge_configs({"build": {"ios": {"scheme": "App"}}}, {"build": "none"})
        assert merged == {"build": "none"}

    def test_inputs_not_mutated(self) -> None:
        low = {"server": {"url": "a"}}
        high = {"server": {"timeout": 1}, "list": [1]}
        merged = merge_configs(low, high)
        assert low == {"server": {"url": "a"}}
        assert high == {"server": {"timeout": 1}, "list": [1]}
        merged["list"].append(2)  # type: ignore[union-attr]
        assert high["list"] == [1]

    def test_empty(self) -> None:
        assert merge_configs() == {}


class TestTrackConfigSources:
    """Test provenance tracking per leaf."""

    def test_highest_contributor_recorded(self) -> None:
        sources = track_config_sources(
            [
                (ConfigSource.DEFAULT, {"server": {"url": "a", "timeout": 1}}),
                (ConfigSource.ENV, {"server": {"url": "b"}}),
                (ConfigSource.CLI, {"auth": {"accessKey": "k"}}),
            ]
        )
        assert sources == {
            "server.url": ConfigSource.ENV,
            "server.timeout": ConfigSource.DEFAULT,
            "auth.accessKey": ConfigSource.CLI,
        }

    def test_overwritten_subtree_is_forgotten(self) -> None:
        sources = track_config_sources(
            [
                (ConfigSource.DEFAULT, {"build": {"ios": {"scheme": "App"}}}),
                (ConfigSource.FILE, {"build": "none"}),
            ]
        )
        assert sources == {"build": ConfigSource.FILE}

    def test_none_does_not_claim_provenance(self) -> None:
        sources = track_config_sources(
            [(ConfigSource.DEFAULT, {"a": 1}), (ConfigSource.CLI, {"a": None})]
        )
        assert sources == {"a": ConfigSource.DEFAULT}


class TestMergeRanked:
    """Test merge and provenance computed together."""

    def test_key_set_matches_leaf_set(self) -> None:
        ranked = [
            (ConfigSource.DEFAULT, get_default_config()),
            (ConfigSource.ENV, {"server": {"timeout": 5000}}),
            (ConfigSource.GLOBAL, {"auth": {"accessKey": "g"}, "defaults": "flat"}),
            (ConfigSource.FILE, {"release": {"types": {"codepush": {"mandatory": True}}}}),
            (ConfigSource.CLI, {"server": {"url": "https://x.io"}}),
        ]
        config, sources = merge_ranked(ranked)
        assert set(sources) == _leaf_paths(config)
        assert sources["server.url"] == ConfigSource.CLI
        assert sources["server.timeout"] == ConfigSource.ENV
        assert sources["defaults"] == ConfigSource.GLOBAL
        assert config["defaults"] == "flat"

    def test_matches_separate_functions(self) -> None:
        ranked = [
            (ConfigSource.DEFAULT, {"a": {"b": 1}}),
            (ConfigSource.CLI, {"a": {"c": 2}}),
        ]
        config, sources = merge_ranked(ranked)
        assert config == merge_configs(*(tree for _, tree in ranked))
        assert sources == track_config_sources(ranked)


class TestDefaultConfig:
    """Test built-in defaults."""

    def test_returns_copy(self) -> None:
        config = get_default_config()
        config["server"]["url"] = "changed"  # type: ignore[index]
        assert DEFAULT_CONFIG["server"]["url"] == "http://localhost:3000"  # type: ignore[index]

    def test_values(self) -> None:
        config = get_default_config()
        assert config == {
            "server": {
                "url": "http://localhost:3000",
                "apiEndpoint": "/api/v1",
                "timeout": 30000,
            },
            "defaults": {"deploymentName": "Staging"},
        }
