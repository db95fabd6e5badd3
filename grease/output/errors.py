"""Error presentation utilities.

Centralized error formatting and exit code mapping for consistent UX.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from grease.core.errors import (
    BadArgument,
    BadGlobPattern,
    ErrorCode,
    GreaseError,
    IncorrectArgumentCount,
    MissingRequiredArgument,
    RemoteError,
)
from grease.output.console import Style

if TYPE_CHECKING:
    from grease.output.console import ConsoleProtocol

__all__ = ["print_error", "error_exit_code"]


def print_error(error: GreaseError, console: ConsoleProtocol) -> None:
    """Print a command error to the console with a hint where one helps."""
    console.error(error.message)
    match error:
        case MissingRequiredArgument(argument="--github-token"):
            console.print("hint: pass --github-token or set GITHUB_TOKEN", Style.DIM)
        case IncorrectArgumentCount():
            console.print("hint: run the command with --help for its usage", Style.DIM)
        case BadGlobPattern():
            console.print("hint: try the pattern with `grease list-files`", Style.DIM)
        case RemoteError(status=401):
            console.print("hint: check that the token is valid", Style.DIM)
        case RemoteError(status=404):
            console.print(
                "hint: check the repository, the tag, and that the token can see them",
                Style.DIM,
            )
        case _:
            pass


def error_exit_code(error: GreaseError) -> int:
    """Get the process exit code for a command error."""
    match error:
        case BadGlobPattern() | BadArgument() | IncorrectArgumentCount():
            return int(ErrorCode.USAGE_ERROR)
        case MissingRequiredArgument():
            return int(ErrorCode.USAGE_ERROR)
        case RemoteError():
            return int(ErrorCode.REMOTE_ERROR)
    # Fallback for exhaustiveness
    return int(ErrorCode.REMOTE_ERROR)
