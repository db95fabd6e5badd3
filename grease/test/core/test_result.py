"""Tests for core/result.py."""

from __future__ import annotations

import pytest

from grease.core.result import Err, Ok, Result


def _halve(n: int) -> Result[int, str]:
    if n % 2:
        return Err(f"{n} is odd")
    return Ok(n // 2)


class TestOk:
    def test_unwrap(self) -> None:
        assert Ok(42).unwrap() == 42

    def test_map_err_is_identity(self) -> None:
        result = Ok(1)
        assert result.map_err(len) is result


class TestErr:
    def test_unwrap_raises(self) -> None:
        with pytest.raises(ValueError, match="unwrap"):
            Err("boom").unwrap()

    def test_map_err_converts(self) -> None:
        assert Err("boom").map_err(len) == Err(4)


class TestPatternMatching:
    def test_match(self) -> None:
        outcomes: list[str] = []
        for n in (4, 3):
            match _halve(n):
                case Ok(value):
                    outcomes.append(f"ok {value}")
                case Err(error):
                    outcomes.append(f"err {error}")

        assert outcomes == ["ok 2", "err 3 is odd"]

    def test_equality(self) -> None:
        assert Ok(1) == Ok(1)
        assert Ok(1) != Err(1)
