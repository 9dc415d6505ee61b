"""Shared helpers for CLI commands."""

from __future__ import annotations

import json
from typing import TypeVar

import typer

from delivr.core.errors import ErrorCode
from delivr.core.result import Result, is_err
from delivr.output.console import ConsoleProtocol

T = TypeVar("T")
E = TypeVar("E")


def exit_on_error[T, E](
    result: Result[T, E],
    console: ConsoleProtocol,
    error_code: ErrorCode = ErrorCode.CONFIG_ERROR,
) -> T:
    """Return the Ok value, or print the error and exit.

    Expects error objects to have a 'message' attribute.
    """
    if is_err(result):
        message: str = getattr(result.error, "message", str(result.error))
        console.error(message)
        raise typer.Exit(code=int(error_code))
    return result.value


def parse_cli_value(raw: str) -> object:
    """Interpret a command-line value as JSON when possible, else as text.

    ``5000`` becomes an int, ``true`` a bool, ``'["a"]'`` a list; anything
    that is not valid JSON stays a string.
    """
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw
