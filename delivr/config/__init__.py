"""Configuration resolution engine."""

from .constants import CONFIG_FILE_NAMES, DEFAULT_CONFIG, ENV_VAR_MAPPINGS, LEGACY_CONFIG_FILES
from .env import load_from_env
from .files import load_config_file, load_config_file_async
from .global_config import clear_global_config, load_global_config, save_global_config
from .legacy import convert_legacy_config
from .merger import get_default_config, merge_configs, track_config_sources
from .resolver import (
    ConfigResolver,
    get_config_resolver,
    load_config,
    load_config_sync,
    reset_config_resolver,
    resolve_config,
)
from .types import ConfigLoadResult, ConfigSource, EnvMapping, Transform

__all__ = [
    # constants
    "CONFIG_FILE_NAMES",
    "DEFAULT_CONFIG",
    "ENV_VAR_MAPPINGS",
    "LEGACY_CONFIG_FILES",
    # types
    "ConfigLoadResult",
    "ConfigSource",
    "EnvMapping",
    "Transform",
    # readers
    "convert_legacy_config",
    "load_config_file",
    "load_config_file_async",
    "load_from_env",
    "load_global_config",
    # global maintenance
    "clear_global_config",
    "save_global_config",
    # merge
    "get_default_config",
    "merge_configs",
    "track_config_sources",
    # resolver
    "ConfigResolver",
    "get_config_resolver",
    "load_config",
    "load_config_sync",
    "reset_config_resolver",
    "resolve_config",
]
