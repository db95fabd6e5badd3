"""Output abstraction layer."""

from .console import (
    ConsoleProtocol,
    MockConsole,
    RichConsole,
    Style,
)
from .errors import error_exit_code, print_error

__all__ = [
    "ConsoleProtocol",
    "MockConsole",
    "RichConsole",
    "Style",
    "error_exit_code",
    "print_error",
]
