"""The "hello kitty" series: one test of each kind, all expected to pass."""

from __future__ import annotations

from dietest.assertions import assert_eq, assert_ne
from dietest.framework import Framework

NAME = "hello kitty"
PURPOSE = "Testing the powers of Hello Kitty!"


def smart_kitty() -> None:
    i = 0
    i += 1
    assert_eq(i, 1)


def kitty_panic() -> None:
    i = 0
    i += 1
    assert_ne(i, 1)


def kitty_throws_up() -> None:
    raise RuntimeError("burps")


def register(framework: Framework) -> None:
    framework.add_should_not_panic("smart kitty", smart_kitty)
    framework.add_should_panic("kitty panic", kitty_panic)
    framework.add_should_throw(
        "kitty throws up", RuntimeError("burps"), "RuntimeError", kitty_throws_up
    )
