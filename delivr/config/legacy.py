"""Conversion of the deprecated flat config shape.

Older releases of the tool wrote flat JSON files such as::

    {"accessKey": "abc", "customServerUrl": "https://...", "preserveAccessKeyOnLogout": true}

These are rewritten into the nested shape. Unknown keys are dropped.
"""

from __future__ import annotations

from collections.abc import Mapping

from .types import ConfigTree

__all__ = ["convert_legacy_config"]


def convert_legacy_config(legacy: Mapping[str, object]) -> ConfigTree:
    config: ConfigTree = {}
    auth: dict[str, object] = {}

    access_key = legacy.get("accessKey")
    if access_key:
        auth["accessKey"] = access_key

    custom_url = legacy.get("customServerUrl")
    server_url = custom_url if custom_url is not None else legacy.get("serverUrl")
    if server_url:
        config["server"] = {"url": server_url}

    preserve = legacy.get("preserveAccessKeyOnLogout")
    if preserve is not None:
        auth["preserveOnLogout"] = preserve

    if auth:
        config["auth"] = auth
    return config
