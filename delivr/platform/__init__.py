"""Platform abstraction layer."""

from .files import atomic_write_json, atomic_write_text
from .paths import (
    global_config_path,
    home,
    legacy_global_config_path,
    xcode_derived_data_dir,
)

__all__ = [
    # files
    "atomic_write_json",
    "atomic_write_text",
    # paths
    "global_config_path",
    "home",
    "legacy_global_config_path",
    "xcode_derived_data_dir",
]
