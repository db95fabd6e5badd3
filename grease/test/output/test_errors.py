"""Tests for output/errors.py - error presentation and exit codes."""

from __future__ import annotations

import pytest

from grease.core.errors import (
    BadArgument,
    BadGlobPattern,
    GreaseError,
    IncorrectArgumentCount,
    MissingRequiredArgument,
    RemoteError,
)
from grease.output.console import MockConsole, Style
from grease.output.errors import error_exit_code, print_error


class TestExitCodes:
    @pytest.mark.parametrize(
        "error",
        [
            BadGlobPattern(pattern="[a"),
            BadArgument(argument="REPO", reason="blank"),
            IncorrectArgumentCount(expected=3, received=1),
            MissingRequiredArgument(argument="--github-token"),
        ],
    )
    def test_usage_errors_exit_64(self, error: GreaseError) -> None:
        assert error_exit_code(error) == 64

    def test_remote_error_exits_1(self) -> None:
        error = RemoteError(operation="create release", detail="HTTP 500: boom", status=500)

        assert error_exit_code(error) == 1


class TestPrintError:
    def test_message_then_hint(self) -> None:
        console = MockConsole()

        print_error(MissingRequiredArgument(argument="--github-token"), console)

        assert console.messages[0] == 'error: Required argument "--github-token" was not provided'
        assert console.outputs[1].style == Style.DIM
        assert "GITHUB_TOKEN" in console.messages[1]

    def test_count_hint_mentions_help(self) -> None:
        console = MockConsole()

        print_error(IncorrectArgumentCount(expected=2, received=0), console)

        assert "Expected 2 positional arguments but received 0" in console.text
        assert "--help" in console.text

    def test_not_found_hint(self) -> None:
        console = MockConsole()
        error = RemoteError(
            operation="look up release v1", detail="HTTP 404: Not Found", status=404
        )

        print_error(error, console)

        assert console.messages[0] == "error: look up release v1 failed: HTTP 404: Not Found"
        assert len(console.find("hint:")) == 1

    def test_no_hint_for_bad_argument(self) -> None:
        console = MockConsole()

        print_error(BadArgument(argument="REPO", reason="owner portion was blank"), console)

        assert console.messages == ["error: Bad argument REPO: owner portion was blank"]
