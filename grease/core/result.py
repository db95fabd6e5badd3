"""Result values for operations that can fail in expected ways.

Code below the CLI returns ``Ok(value)`` or ``Err(error)`` and leaves the
reporting to the command that called it.

    match parse_repository("acme/widgets"):
        case Ok(repo):
            ...
        case Err(error):
            ...
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")
E = TypeVar("E")
F = TypeVar("F")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T

    def unwrap(self) -> T:
        return self.value

    def map_err(self, f: Callable[[E], F]) -> Ok[T]:
        return self


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    error: E

    def unwrap(self) -> None:
        """Raises ValueError naming the error; only tests should reach this."""
        raise ValueError(f"unwrap() on Err: {self.error}")

    def map_err(self, f: Callable[[E], F]) -> Err[F]:
        """Convert the error, e.g. an ``HttpError`` into a ``RemoteError``."""
        return Err(f(self.error))


Result: TypeAlias = Ok[T] | Err[E]
