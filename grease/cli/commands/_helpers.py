"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

import typer

from grease.core.errors import GreaseError
from grease.core.result import Err, Result
from grease.output.errors import error_exit_code, print_error

if TYPE_CHECKING:
    from grease.output.console import ConsoleProtocol


T = TypeVar("T")


def exit_on_error(result: Result[T, GreaseError], console: ConsoleProtocol) -> T:
    """Return the value of an Ok result, or report the error and exit.

    This helper reduces boilerplate for the common pattern:
        match result:
            case Err(e):
                print_error(e, console)
                raise typer.Exit(code=error_exit_code(e))
            case Ok(value):
                ...
    """
    if isinstance(result, Err):
        print_error(result.error, console)
        raise typer.Exit(code=error_exit_code(result.error))
    return result.value
