from __future__ import annotations

import typer

from delivr import __version__
from delivr.cli.commands.config_cmd import config_app
from delivr.cli.commands.output_cmd import output_path

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Commands
app.command("output-path")(output_path)

# Sub-apps
app.add_typer(config_app, name="config")


def _print_version(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit.",
        callback=_print_version,
        is_eager=True,
    ),
) -> None:
    """Release tooling: resolve configuration and locate build outputs."""


def main() -> None:
    app()
