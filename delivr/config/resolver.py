"""Configuration resolution.

Sources, lowest priority first:

    defaults < environment < global file < project file < CLI overrides

``ConfigResolver`` holds only the options it was built with (where to search,
which environment and home directory to read). Every call re-reads the
environment and the filesystem, so two calls with the same inputs give the
same result and nothing needs invalidating.

The lazy process-wide instance (``get_config_resolver``) is a convenience for
command handlers; ``resolve_config`` and ``ConfigResolver`` work without it.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from delivr.output.console import ConsoleProtocol, warnings_console
from delivr.platform.paths import home

from .env import config_files_disabled, load_from_env
from .files import load_config_file, load_config_file_async
from .global_config import load_global_config, load_global_config_async
from .merger import get_default_config, merge_ranked
from .types import ConfigLoadResult, ConfigSource, ConfigTree, FileLoadResult

__all__ = [
    "ConfigResolver",
    "get_config_resolver",
    "load_config",
    "load_config_sync",
    "reset_config_resolver",
    "resolve_config",
]


class ConfigResolver:
    """Merge all configuration sources with provenance tracking.

    Args:
        search_from: Directory where the project-file search starts
            (default: current directory at call time).
        stop_dir: Highest directory the upward search may reach
            (default: search_from itself).
        environ: Environment mapping (default: os.environ at call time).
        home_dir: Home directory for the global file (default: from environ).
        console: Sink for warnings (default: Rich on stderr).
    """

    def __init__(
        self,
        *,
        search_from: Path | None = None,
        stop_dir: Path | None = None,
        environ: Mapping[str, str] | None = None,
        home_dir: Path | None = None,
        console: ConsoleProtocol | None = None,
    ) -> None:
        self._search_from = search_from
        self._stop_dir = stop_dir
        self._environ = environ
        self._home_dir = home_dir
        self._console = console

    def _env(self) -> Mapping[str, str]:
        return os.environ if self._environ is None else self._environ

    def _home(self, env: Mapping[str, str]) -> Path:
        return self._home_dir if self._home_dir is not None else home(env)

    def resolve(self, cli_overrides: Mapping[str, object] | None = None) -> ConfigLoadResult:
        env = self._env()
        console = self._console or warnings_console()

        env_config = load_from_env(env, console=console)
        if config_files_disabled(env):
            global_config: ConfigTree = {}
            file_result = FileLoadResult()
        else:
            global_config = load_global_config(self._home(env), console=console)
            file_result = load_config_file(
                self._search_from,
                stop_dir=self._stop_dir,
                environ=env,
                console=console,
            )
        return _assemble(env_config, global_config, file_result, cli_overrides)

    async def resolve_async(
        self, cli_overrides: Mapping[str, object] | None = None
    ) -> ConfigLoadResult:
        """Same as resolve(); file reads are awaited in worker threads."""
        env = self._env()
        console = self._console or warnings_console()

        env_config = load_from_env(env, console=console)
        if config_files_disabled(env):
            global_config: ConfigTree = {}
            file_result = FileLoadResult()
        else:
            global_config = await load_global_config_async(self._home(env), console=console)
            file_result = await load_config_file_async(
                self._search_from,
                stop_dir=self._stop_dir,
                environ=env,
                console=console,
            )
        return _assemble(env_config, global_config, file_result, cli_overrides)


def _assemble(
    env_config: ConfigTree,
    global_config: ConfigTree,
    file_result: FileLoadResult,
    cli_overrides: Mapping[str, object] | None,
) -> ConfigLoadResult:
    config, sources = merge_ranked(
        [
            (ConfigSource.DEFAULT, get_default_config()),
            (ConfigSource.ENV, env_config),
            (ConfigSource.GLOBAL, global_config),
            (ConfigSource.FILE, file_result.config or {}),
            (ConfigSource.CLI, cli_overrides or {}),
        ]
    )
    return ConfigLoadResult(
        config=config,
        sources=sources,
        filepath=file_result.filepath,
        is_empty=file_result.is_empty,
    )


def resolve_config(
    cli_overrides: Mapping[str, object] | None = None,
    *,
    search_from: Path | None = None,
    stop_dir: Path | None = None,
    environ: Mapping[str, str] | None = None,
    home_dir: Path | None = None,
    console: ConsoleProtocol | None = None,
) -> ConfigLoadResult:
    """Resolve configuration once, without touching the shared instance."""
    resolver = ConfigResolver(
        search_from=search_from,
        stop_dir=stop_dir,
        environ=environ,
        home_dir=home_dir,
        console=console,
    )
    return resolver.resolve(cli_overrides)


_resolver: ConfigResolver | None = None


def get_config_resolver(
    *,
    search_from: Path | None = None,
    console: ConsoleProtocol | None = None,
) -> ConfigResolver:
    """Return the shared resolver, creating it on first use.

    Options only apply when the instance is created; call
    reset_config_resolver() to rebuild it with different ones.
    """
    global _resolver
    if _resolver is None:
        _resolver = ConfigResolver(search_from=search_from, console=console)
    return _resolver


def reset_config_resolver() -> None:
    global _resolver
    _resolver = None


async def load_config(cli_overrides: Mapping[str, object] | None = None) -> ConfigLoadResult:
    """Resolve asynchronously through the shared resolver."""
    return await get_config_resolver().resolve_async(cli_overrides)


def load_config_sync(cli_overrides: Mapping[str, object] | None = None) -> ConfigLoadResult:
    """Resolve synchronously through the shared resolver."""
    return get_config_resolver().resolve(cli_overrides)
