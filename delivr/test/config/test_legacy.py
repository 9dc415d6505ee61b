"""Tests for delivr.config.legacy module."""

from __future__ import annotations

from delivr.config.legacy import convert_legacy_config


class TestConvertLegacyConfig:
    """Test conversion of the flat legacy shape."""

    def test_full(self) -> None:
        legacy = {
            "accessKey": "abc",
            "customServerUrl": "https://custom",
            "preserveAccessKeyOnLogout": True,
        }
        assert convert_legacy_config(legacy) == {
            "server": {"url": "https://custom"},
            "auth": {"accessKey": "abc", "preserveOnLogout": True},
        }

    def test_server_url_used_without_custom(self) -> None:
        assert convert_legacy_config({"serverUrl": "https://plain"}) == {
            "server": {"url": "https://plain"}
        }

    def test_custom_url_preferred(self) -> None:
        legacy = {"serverUrl": "https://plain", "customServerUrl": "https://custom"}
        assert convert_legacy_config(legacy)["server"] == {"url": "https://custom"}

    def test_false_preserve_is_kept(self) -> None:
        assert convert_legacy_config({"preserveAccessKeyOnLogout": False}) == {
            "auth": {"preserveOnLogout": False}
        }

    def test_empty_access_key_dropped(self) -> None:
        assert convert_legacy_config({"accessKey": ""}) == {}

    def test_unknown_keys_dropped(self) -> None:
        assert convert_legacy_config({"proxy": "http://p", "noProxy": True}) == {}
