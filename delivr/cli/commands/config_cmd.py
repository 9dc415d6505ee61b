from __future__ import annotations

import json
from pathlib import Path

import typer

from delivr.cli.commands._helpers import exit_on_error, parse_cli_value
from delivr.cli.context import build_context
from delivr.config.constants import PROJECT_CONFIG_FILE
from delivr.config.files import parse_config_file
from delivr.config.global_config import save_global_config
from delivr.core.errors import ErrorCode
from delivr.core.structured import StrDict, get_path, set_path
from delivr.output.console import Style
from delivr.platform.files import atomic_write_json
from delivr.platform.paths import global_config_path

config_app = typer.Typer(no_args_is_help=True, help="Inspect and edit configuration.")

_MISSING = object()


@config_app.command("show")
def show(
    sources: bool = typer.Option(False, "--sources", help="Include where each value came from."),
) -> None:
    """Print the resolved configuration as JSON."""
    ctx = build_context()
    result = ctx.resolver.resolve()
    typer.echo(json.dumps(result.as_dict(with_sources=sources), indent=2))
    if result.filepath is not None:
        ctx.console.print(f"file: {result.filepath}", Style.DIM)


@config_app.command("get")
def get(key: str = typer.Argument(..., help="Dot path, e.g. server.url")) -> None:
    """Print one resolved value."""
    ctx = build_context()
    result = ctx.resolver.resolve()
    value = get_path(result.config, key, _MISSING)
    if value is _MISSING:
        ctx.console.error(f"not set: {key}")
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    typer.echo(json.dumps(value, indent=2))
    source = result.sources.get(key)
    if source is not None:
        ctx.console.print(f"source: {source}", Style.DIM)


@config_app.command("set")
def set_value(
    key: str = typer.Argument(..., help="Dot path, e.g. server.url"),
    value: str = typer.Argument(..., help="JSON literal or plain text"),
    global_: bool = typer.Option(False, "--global", help="Write the per-user config instead."),
) -> None:
    """Set a value in the project (or global) config file."""
    ctx = build_context()
    path = global_config_path() if global_ else Path.cwd() / PROJECT_CONFIG_FILE

    existing = exit_on_error(parse_config_file(path), ctx.console)
    config: StrDict = dict(existing or {})
    if not set_path(config, key, parse_cli_value(value)):
        ctx.console.error(f"invalid key: {key!r}")
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    if global_:
        exit_on_error(save_global_config(config), ctx.console, ErrorCode.IO_ERROR)
    else:
        try:
            atomic_write_json(path, config)
        except OSError as e:
            ctx.console.error(f"could not write {path}: {e}")
            raise typer.Exit(code=int(ErrorCode.IO_ERROR)) from e

    ctx.console.success(f"{key} updated in {path}")
