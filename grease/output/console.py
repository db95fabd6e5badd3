"""Terminal output for grease.

Everything user-visible goes through ``ConsoleProtocol``: plan lines,
progress, warnings for skipped assets, errors and ``--debug`` diagnostics.
``RichConsole`` writes to the terminal; ``MockConsole`` keeps the lines in
memory so tests can assert on them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Protocol

__all__ = [
    "Style",
    "ConsoleProtocol",
    "RichConsole",
    "MockConsole",
    "Line",
]


class Style(Enum):
    DEFAULT = auto()
    SUCCESS = auto()
    ERROR = auto()
    WARNING = auto()
    INFO = auto()
    DEBUG = auto()
    DIM = auto()
    HEADER = auto()


class ConsoleProtocol(Protocol):
    """What services and commands may write to."""

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        """Write one line of user data (never interpreted as markup)."""
        ...

    def success(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def info(self, message: str) -> None: ...

    def debug(self, message: str) -> None: ...

    def header(self, message: str) -> None: ...

    def newline(self) -> None: ...


# Rich style and label per Style; label is printed before the message.
_RICH_STYLES: dict[Style, tuple[str, str]] = {
    Style.DEFAULT: ("", ""),
    Style.SUCCESS: ("green", "OK"),
    Style.ERROR: ("red bold", "error:"),
    Style.WARNING: ("yellow", "warning:"),
    Style.INFO: ("cyan", "info:"),
    Style.DEBUG: ("magenta", "debug:"),
    Style.DIM: ("dim", ""),
    Style.HEADER: ("blue bold", ""),
}


class RichConsole:
    """Terminal console backed by rich.

    Errors and warnings go to stderr, so a dry-run plan or ``list-files``
    output on stdout can be piped.
    """

    def __init__(self) -> None:
        from rich.console import Console

        self._out = Console(highlight=False, soft_wrap=True)
        self._err = Console(stderr=True, highlight=False, soft_wrap=True)

    def _labelled(self, style: Style, message: str, *, stderr: bool = False) -> None:
        from rich.text import Text

        color, label = _RICH_STYLES[style]
        line = Text.assemble((label, color), " ", message)
        (self._err if stderr else self._out).print(line)

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        color, _label = _RICH_STYLES[style]
        self._out.print(message, style=color or None, markup=False)

    def success(self, message: str) -> None:
        self._labelled(Style.SUCCESS, message)

    def error(self, message: str) -> None:
        self._labelled(Style.ERROR, message, stderr=True)

    def warning(self, message: str) -> None:
        self._labelled(Style.WARNING, message, stderr=True)

    def info(self, message: str) -> None:
        self._labelled(Style.INFO, message)

    def debug(self, message: str) -> None:
        self._labelled(Style.DEBUG, message)

    def header(self, message: str) -> None:
        self._out.print()
        self.print(message, Style.HEADER)

    def newline(self) -> None:
        self._out.print()


@dataclass(frozen=True, slots=True)
class Line:
    """One line captured by MockConsole."""

    message: str
    style: Style


_MOCK_PREFIXES = {
    Style.SUCCESS: "OK ",
    Style.ERROR: "error: ",
    Style.WARNING: "warning: ",
    Style.INFO: "info: ",
    Style.DEBUG: "debug: ",
}


class MockConsole:
    """In-memory console for tests.

    Labelled methods store their label in the message (``"error: ..."``),
    matching what a user would see.
    """

    def __init__(self) -> None:
        self.outputs: list[Line] = []

    def _add(self, message: str, style: Style) -> None:
        self.outputs.append(Line(_MOCK_PREFIXES.get(style, "") + message, style))

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        self.outputs.append(Line(message, style))

    def success(self, message: str) -> None:
        self._add(message, Style.SUCCESS)

    def error(self, message: str) -> None:
        self._add(message, Style.ERROR)

    def warning(self, message: str) -> None:
        self._add(message, Style.WARNING)

    def info(self, message: str) -> None:
        self._add(message, Style.INFO)

    def debug(self, message: str) -> None:
        self._add(message, Style.DEBUG)

    def header(self, message: str) -> None:
        self._add(message, Style.HEADER)

    def newline(self) -> None:
        self._add("", Style.DEFAULT)

    @property
    def messages(self) -> list[str]:
        return [line.message for line in self.outputs]

    @property
    def text(self) -> str:
        return "\n".join(self.messages)

    def find(self, substring: str) -> list[Line]:
        return [line for line in self.outputs if substring in line.message]

    def count(self, style: Style) -> int:
        return sum(1 for line in self.outputs if line.style is style)

    def has_error(self) -> bool:
        return self.count(Style.ERROR) > 0

    def has_warning(self) -> bool:
        return self.count(Style.WARNING) > 0

    def has_debug(self) -> bool:
        return self.count(Style.DEBUG) > 0

    def clear(self) -> None:
        self.outputs.clear()
