"""Exit codes and the command error taxonomy.

``ErrorCode`` values are part of the command-line contract and must stay
stable: build pipelines branch on them. The error dataclasses are plain
values carried inside ``Err``; ``grease.output.errors`` maps them to
messages and exit codes at the CLI boundary.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

__all__ = [
    "ErrorCode",
    "BadGlobPattern",
    "BadArgument",
    "IncorrectArgumentCount",
    "MissingRequiredArgument",
    "RemoteError",
    "GreaseError",
]


class ErrorCode(IntEnum):
    """Exit codes for grease commands.

    - 0: Success (asset upload failures alone do not change this)
    - 1: A primary GitHub API call failed (lookup, create, update)
    - 64: Usage error (bad arguments, bad glob, missing token), as in sysexits.h
    """

    OK = 0
    REMOTE_ERROR = 1
    USAGE_ERROR = 64

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")

    @property
    def is_success(self) -> bool:
        return self == ErrorCode.OK

    @property
    def is_error(self) -> bool:
        return self != ErrorCode.OK


@dataclass(frozen=True, slots=True)
class BadGlobPattern:
    pattern: str

    @property
    def message(self) -> str:
        return f'The pattern "{self.pattern}" is not a valid glob pattern'


@dataclass(frozen=True, slots=True)
class BadArgument:
    argument: str
    reason: str

    @property
    def message(self) -> str:
        return f"Bad argument {self.argument}: {self.reason}"


@dataclass(frozen=True, slots=True)
class IncorrectArgumentCount:
    expected: int
    received: int

    @property
    def message(self) -> str:
        return f"Expected {self.expected} positional arguments but received {self.received}"


@dataclass(frozen=True, slots=True)
class MissingRequiredArgument:
    argument: str

    @property
    def message(self) -> str:
        return f'Required argument "{self.argument}" was not provided'


@dataclass(frozen=True, slots=True)
class RemoteError:
    """A failed GitHub API call, surfaced as reported by the transport.

    ``status`` is the HTTP status (0 for network-level failures). A missing
    tag on lookup is not distinguished from other failures.
    """

    operation: str
    detail: str
    status: int = 0

    @property
    def message(self) -> str:
        return f"{self.operation} failed: {self.detail}"


GreaseError = (
    BadGlobPattern
    | BadArgument
    | IncorrectArgumentCount
    | MissingRequiredArgument
    | RemoteError
)
