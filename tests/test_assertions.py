"""Tests for the failure signal and assertion primitives."""

import pytest

from dietest.assertions import assert_eq, assert_ne, assert_not, assert_true, panic
from dietest.failure import NO_MESSAGE, Failure


# --- Failure ---


def test_failure_keeps_message():
    failure = Failure("kitty is sad")
    assert failure.message == "kitty is sad"
    assert str(failure) == "kitty is sad"


def test_failure_empty_message_reads_as_placeholder():
    assert Failure().message == NO_MESSAGE == "(no message)"
    assert str(Failure("")) == "(no message)"


def test_failure_is_an_exception_but_not_a_runtime_error():
    assert issubclass(Failure, Exception)
    assert not issubclass(Failure, RuntimeError)
    assert not issubclass(Failure, AssertionError)


# --- panic ---


def test_panic_always_raises():
    with pytest.raises(Failure, match="boom"):
        panic("boom")


def test_panic_without_message():
    with pytest.raises(Failure) as exc_info:
        panic()
    assert exc_info.value.message == "(no message)"


# --- assert_true / assert_not ---


def test_assert_true_passes_on_truthy():
    assert_true(True)
    assert_true(1)
    assert_true([0])


def test_assert_true_default_message():
    with pytest.raises(Failure) as exc_info:
        assert_true(False)
    assert exc_info.value.message == "assert failed"


def test_assert_true_custom_message():
    with pytest.raises(Failure, match="kitty must purr"):
        assert_true(0, "kitty must purr")


def test_assert_not_passes_on_falsy():
    assert_not(False)
    assert_not(None)
    assert_not("")


def test_assert_not_default_message():
    with pytest.raises(Failure) as exc_info:
        assert_not(True)
    assert exc_info.value.message == "assert_not failed"


def test_assert_not_custom_message():
    with pytest.raises(Failure, match="should be empty"):
        assert_not([1], "should be empty")


# --- assert_eq / assert_ne ---


@pytest.mark.parametrize("value", [0, "kitty", 3.5, (1, 2), None])
def test_assert_eq_same_value_never_raises(value):
    assert_eq(value, value)


def test_assert_eq_message_embeds_both_values():
    with pytest.raises(Failure) as exc_info:
        assert_eq(1, 2)
    assert exc_info.value.message == "lhs different from rhs, with lhs = 1 and rhs = 2"


def test_assert_eq_renders_with_str():
    with pytest.raises(Failure) as exc_info:
        assert_eq("kitty", "doggy")
    assert "lhs = kitty" in exc_info.value.message
    assert "rhs = doggy" in exc_info.value.message


def test_assert_ne_different_values_never_raises():
    assert_ne(1, 2)
    assert_ne("a", "b")


def test_assert_ne_message():
    with pytest.raises(Failure) as exc_info:
        assert_ne(1, 1)
    assert exc_info.value.message == "either lhs or rhs should be different from 1"
