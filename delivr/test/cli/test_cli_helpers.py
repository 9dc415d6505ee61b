"""Tests for delivr.cli.commands._helpers module."""

from __future__ import annotations

import pytest
import typer

from delivr.cli.commands._helpers import exit_on_error, parse_cli_value
from delivr.config.types import ConfigFileError
from delivr.core.errors import ErrorCode
from delivr.core.result import Err, Ok
from delivr.output.console import MockConsole


class TestExitOnError:
    """Test Result unwrapping for commands."""

    def test_ok_returns_value(self) -> None:
        assert exit_on_error(Ok(5), MockConsole()) == 5

    def test_err_exits_with_code(self) -> None:
        console = MockConsole()
        with pytest.raises(typer.Exit) as exc_info:
            exit_on_error(Err(ConfigFileError("bad file")), console, ErrorCode.IO_ERROR)
        assert exc_info.value.exit_code == int(ErrorCode.IO_ERROR)
        assert console.messages == ["error: bad file"]


class TestParseCliValue:
    """Test command-line value parsing."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("5000", 5000),
            ("true", True),
            ('["ios", "android"]', ["ios", "android"]),
            ('{"a": 1}', {"a": 1}),
            ("https://x.io", "https://x.io"),
            ("Staging", "Staging"),
        ],
    )
    def test_values(self, raw: str, expected: object) -> None:
        assert parse_cli_value(raw) == expected
