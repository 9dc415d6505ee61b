"""Configuration constants.

File names searched for project config, environment variables and their
mapping onto config paths, and the built-in defaults.
"""

from __future__ import annotations

from .types import EnvMapping, Transform

# Searched in this order in each directory; first usable file wins.
CONFIG_FILE_NAMES: tuple[str, ...] = (
    ".delivrrc",
    ".delivrrc.json",
    ".delivrrc.yaml",
    ".delivrrc.yml",
    ".delivrrc.toml",
    "delivr.config.json",
    "delivr.config.toml",
)

# Only consulted when none of CONFIG_FILE_NAMES yields a config.
LEGACY_CONFIG_FILES: tuple[str, ...] = (
    ".codepush",
    ".codepush.config",
    ".code-push.config",
    ".dota.config",
)

# Written by `delivr config set` (project scope).
PROJECT_CONFIG_FILE = ".delivrrc.json"

ENV_SERVER_URL = "DELIVR_SERVER_URL"
ENV_ACCESS_KEY = "DELIVR_ACCESS_KEY"
ENV_PROJECT = "DELIVR_PROJECT"
ENV_DEPLOYMENT_NAME = "DELIVR_DEPLOYMENT_NAME"
ENV_API_ENDPOINT = "DELIVR_API_ENDPOINT"
ENV_TIMEOUT = "DELIVR_TIMEOUT"
ENV_CONFIG_PATH = "DELIVR_CONFIG_PATH"
ENV_NO_CONFIG = "DELIVR_NO_CONFIG"

LEGACY_ENV_SERVER_URL = "CODE_PUSH_SERVER_URL"
LEGACY_ENV_ACCESS_KEY = "CODE_PUSH_ACCESS_KEY"

# Applied in order, so a later row overwrites an earlier one for the same
# path: legacy rows come first and the current prefix wins.
ENV_VAR_MAPPINGS: tuple[EnvMapping, ...] = (
    EnvMapping(LEGACY_ENV_SERVER_URL, "server.url"),
    EnvMapping(LEGACY_ENV_ACCESS_KEY, "auth.accessKey"),
    EnvMapping(ENV_SERVER_URL, "server.url"),
    EnvMapping(ENV_ACCESS_KEY, "auth.accessKey"),
    EnvMapping(ENV_PROJECT, "defaults.project"),
    EnvMapping(ENV_DEPLOYMENT_NAME, "defaults.deploymentName"),
    EnvMapping(ENV_API_ENDPOINT, "server.apiEndpoint"),
    EnvMapping(ENV_TIMEOUT, "server.timeout", Transform.PARSE_INT),
)

TRUTHY_ENV_VALUES = frozenset({"1", "true", "yes"})

DEFAULT_CONFIG: dict[str, object] = {
    "server": {
        "url": "http://localhost:3000",
        "apiEndpoint": "/api/v1",
        "timeout": 30000,
    },
    "defaults": {
        "deploymentName": "Staging",
    },
}
