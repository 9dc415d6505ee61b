from __future__ import annotations

from pathlib import Path

import typer

from delivr.core.errors import ErrorCode, UnsupportedPlatformError
from delivr.detection.resolver import format_detection_message, resolve_output_path
from delivr.output.console import RichConsole, Style


def output_path(
    platform: str = typer.Argument(..., help="Target platform: android or ios"),
    output_dir: str | None = typer.Option(
        None, "--output-dir", "-o", help="Use this directory instead of detecting one."
    ),
    project_root: Path | None = typer.Option(
        None, "--project-root", help="Project root (default: current directory)"
    ),
    most_recent: bool = typer.Option(
        False, "--most-recent", help="Prefer the newest build over template order."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Trace detection steps."),
) -> None:
    """Print the directory bundles for PLATFORM should be written to."""
    console = RichConsole(stderr=True)
    root = project_root.expanduser().resolve() if project_root is not None else None

    try:
        result = resolve_output_path(
            platform,
            user_output_dir=output_dir,
            project_root=root,
            verbose=verbose,
            prefer_most_recent=most_recent,
            console=console,
        )
    except UnsupportedPlatformError as e:
        console.error(str(e))
        raise typer.Exit(code=int(ErrorCode.USER_ERROR)) from e

    console.print(format_detection_message(result), Style.DIM)
    typer.echo(str(result.path))
