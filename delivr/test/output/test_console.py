"""Tests for delivr.output.console module."""

from __future__ import annotations

import pytest

from delivr.output.console import MockConsole, RichConsole, Style


class TestMockConsole:
    """Test output capture in MockConsole."""

    def test_prefixes(self) -> None:
        console = MockConsole()
        console.success("done")
        console.error("bad")
        console.warning("careful")
        console.info("fyi")
        console.header("Title")
        assert console.messages == ["OK done", "error: bad", "warning: careful", "info: fyi", "Title"]

    def test_warnings(self) -> None:
        console = MockConsole()
        console.print("plain")
        assert not console.has_warning()
        console.warning("first")
        assert console.has_warning()
        assert console.warnings == ["warning: first"]

    def test_find_and_text(self) -> None:
        console = MockConsole()
        console.print("Detected: x", Style.DIM)
        console.print("Path: y")
        assert [r.style for r in console.find("Detected")] == [Style.DIM]
        assert console.text == "Detected: x\nPath: y"


class TestRichConsole:
    """Test RichConsole output streams."""

    def test_prints_to_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        RichConsole().print("hello [not markup]")
        assert "hello [not markup]" in capsys.readouterr().out

    def test_warning_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        RichConsole(stderr=True).warning("check [this]")
        captured = capsys.readouterr()
        assert "warning:" in captured.err
        assert "check [this]" in captured.err
        assert captured.out == ""
