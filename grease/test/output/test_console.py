"""Tests for output/console.py."""

from __future__ import annotations

import pytest

from grease.output.console import MockConsole, RichConsole, Style


class TestMockConsole:
    def test_records_styles(self) -> None:
        console = MockConsole()

        console.print("plain")
        console.success("done")
        console.error("broken")
        console.warning("skipped")
        console.info("note")
        console.debug("detail")
        console.header("Section")
        console.newline()

        assert console.messages == [
            "plain",
            "OK done",
            "error: broken",
            "warning: skipped",
            "info: note",
            "debug: detail",
            "Section",
            "",
        ]
        assert console.has_error()
        assert console.has_warning()
        assert console.has_debug()
        assert console.count(Style.DEFAULT) == 2

    def test_find_and_clear(self) -> None:
        console = MockConsole()
        console.print("File match found: a.zip")
        console.print("File match found: b.zip")
        console.print("other")

        assert len(console.find("File match found")) == 2

        console.clear()
        assert console.messages == []
        assert console.text == ""


class TestRichConsole:
    def test_errors_go_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        console = RichConsole()

        console.print("Repo: https://github.com/acme/widgets")
        console.error("Bad argument REPO")
        console.warning("Failed to open dist/x. Skipping.")

        captured = capsys.readouterr()
        assert "Repo: https://github.com/acme/widgets" in captured.out
        assert "error: Bad argument REPO" in captured.err
        assert "warning: Failed to open dist/x. Skipping." in captured.err
        assert "error:" not in captured.out

    def test_markup_in_user_text_is_literal(self, capsys: pytest.CaptureFixture[str]) -> None:
        console = RichConsole()

        console.print("[bold]notes[/bold]")
        console.info("file [1].zip")

        out = capsys.readouterr().out
        assert "[bold]notes[/bold]" in out
        assert "file [1].zip" in out
