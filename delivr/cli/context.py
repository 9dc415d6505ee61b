from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from delivr.config.resolver import ConfigResolver
from delivr.output.console import ConsoleProtocol, RichConsole


@dataclass(frozen=True, slots=True)
class CLIContext:
    resolver: ConfigResolver
    console: ConsoleProtocol


def build_context(*, search_from: Path | None = None) -> CLIContext:
    # Status and warnings go to stderr; stdout carries command output only.
    console = RichConsole(stderr=True)
    return CLIContext(
        resolver=ConfigResolver(search_from=search_from, console=console),
        console=console,
    )
