"""Assertion primitives used inside test actions."""

from __future__ import annotations

from typing import Any, NoReturn

from dietest.failure import Failure


def panic(message: str = "") -> NoReturn:
    """Unconditionally fail the running test."""
    raise Failure(message)


def assert_true(condition: Any, message: str = "assert failed") -> None:
    if not condition:
        raise Failure(message)


def assert_not(condition: Any, message: str = "assert_not failed") -> None:
    if condition:
        raise Failure(message)


def assert_eq(lhs: Any, rhs: Any) -> None:
    """Fail unless ``lhs == rhs``; both values are rendered in the message."""
    if lhs != rhs:
        raise Failure(f"lhs different from rhs, with lhs = {lhs} and rhs = {rhs}")


def assert_ne(lhs: Any, rhs: Any) -> None:
    if lhs == rhs:
        raise Failure(f"either lhs or rhs should be different from {lhs}")
