"""Narrowing helpers for decoded JSON response bodies."""

from __future__ import annotations

from collections.abc import Mapping
from typing import cast


def as_str_dict(obj: object) -> dict[str, object] | None:
    """The object as a JSON object, or None if it is anything else."""
    if not isinstance(obj, dict):
        return None
    data = cast(dict[object, object], obj)
    if any(not isinstance(key, str) for key in data):
        return None
    return cast(dict[str, object], data)


def as_obj_list(obj: object) -> list[object] | None:
    return cast(list[object], obj) if isinstance(obj, list) else None


def get_str(data: Mapping[str, object], key: str) -> str | None:
    """Stripped string at ``key``; None when absent, blank, or another type."""
    value = data.get(key)
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def get_int(data: Mapping[str, object], key: str) -> int | None:
    # JSON true/false decode to bool, which is an int subclass.
    value = data.get(key)
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None
