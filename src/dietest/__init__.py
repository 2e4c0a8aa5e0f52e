"""Minimal in-process test harness."""

from dietest.assertions import assert_eq, assert_ne, assert_not, assert_true, panic
from dietest.cases import (
    ExpectFailure,
    ExpectNoFailure,
    ExpectSpecificError,
    TestCase,
    Verdict,
)
from dietest.config import SuiteConfig, UnexpectedErrorPolicy, load_config
from dietest.failure import Failure
from dietest.framework import Framework

__all__ = [
    "ExpectFailure",
    "ExpectNoFailure",
    "ExpectSpecificError",
    "Failure",
    "Framework",
    "SuiteConfig",
    "TestCase",
    "UnexpectedErrorPolicy",
    "Verdict",
    "assert_eq",
    "assert_ne",
    "assert_not",
    "assert_true",
    "load_config",
    "panic",
]
