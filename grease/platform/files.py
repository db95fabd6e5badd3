"""Filesystem helpers: glob expansion for asset patterns."""

from __future__ import annotations

import glob
import os
import re
from pathlib import Path

from grease.core.errors import BadGlobPattern
from grease.core.result import Err, Ok, Result

__all__ = ["find_files", "is_valid_pattern"]

_SEPARATORS = re.compile(r"[/\\]" if os.sep == "\\" else r"/")
# Backslash is a path separator on Windows and an escape everywhere else.
_ESCAPES = os.sep != "\\"


def _component_is_valid(component: str) -> bool:
    i = 0
    n = len(component)
    while i < n:
        char = component[i]
        if char == "\\" and _ESCAPES:
            if i + 1 == n:
                return False
            i += 2
            continue
        if char != "[":
            i += 1
            continue
        j = i + 1
        if j < n and component[j] == "!":
            j += 1
        # A leading ']' is a member of the class, not its end.
        if j < n and component[j] == "]":
            j += 1
        while j < n and component[j] != "]":
            j += 2 if component[j] == "\\" and _ESCAPES else 1
        if j >= n:
            return False
        i = j + 1
    return True


def is_valid_pattern(pattern: str) -> bool:
    """Return False for an unterminated bracket expression or a trailing escape.

    Brackets are checked per path component, since a class cannot span a
    separator.
    """
    return all(_component_is_valid(part) for part in _SEPARATORS.split(pattern))


def _to_glob(pattern: str) -> str:
    """Rewrite backslash escapes into the form ``glob`` understands.

    Outside a bracket expression ``\\x`` becomes ``glob.escape(x)``; inside
    one the backslash is dropped. Expects a pattern that passed validation.
    """
    if not _ESCAPES:
        return pattern
    out: list[str] = []
    in_class = False
    i = 0
    n = len(pattern)
    while i < n:
        char = pattern[i]
        if char == "\\" and i + 1 < n:
            escaped = pattern[i + 1]
            out.append(escaped if in_class else glob.escape(escaped))
            i += 2
            continue
        out.append(char)
        i += 1
        if not in_class and char == "[":
            in_class = True
            # Copy a leading negation and a leading ']' member verbatim.
            if i < n and pattern[i] == "!":
                out.append("!")
                i += 1
            if i < n and pattern[i] == "]":
                out.append("]")
                i += 1
        elif in_class and char == "]":
            in_class = False
    return "".join(out)


def find_files(pattern: str) -> Result[list[Path], BadGlobPattern]:
    """Expand a shell-style glob pattern into matching paths.

    Supports ``*``, ``?``, ``[...]`` and ``[!...]``; ``**`` is not recursive.
    Wildcards match names starting with a dot. Outside Windows a backslash
    makes the next character literal, so ``dist/\\*.zip`` names one file.

    Args:
        pattern: Glob pattern, relative to the current directory or absolute

    Returns:
        Ok with matches sorted by path (empty for an empty pattern or no
        matches), or Err with BadGlobPattern for a malformed bracket
        expression or a trailing backslash
    """
    if not pattern:
        return Ok([])

    if not is_valid_pattern(pattern):
        return Err(BadGlobPattern(pattern=pattern))

    matches = glob.glob(_to_glob(pattern), recursive=False, include_hidden=True)
    return Ok([Path(m) for m in sorted(matches)])
