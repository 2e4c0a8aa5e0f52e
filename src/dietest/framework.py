from __future__ import annotations

import logging
import sys
from typing import TextIO

from dietest.cases import (
    Action,
    ExpectFailure,
    ExpectNoFailure,
    ExpectSpecificError,
    TestCase,
)
from dietest.config import SuiteConfig, UnexpectedErrorPolicy

SEPARATOR = "-" * 80


class Framework:
    """Ordered registry of test cases that runs them and reports the outcome.

    Usage is construct, register, ``run`` once, ``display_summary``. The
    passed counter is never reset, so running the same instance twice counts
    every pass again against the same total.
    """

    def __init__(
        self,
        name: str,
        purpose: str = "",
        *,
        out: TextIO | None = None,
        logger: logging.Logger | None = None,
        unexpected_errors: UnexpectedErrorPolicy | str = UnexpectedErrorPolicy.RAISE,
    ):
        self.name = name
        self.purpose = purpose
        self.unexpected_errors = UnexpectedErrorPolicy(unexpected_errors)
        self.tests: list[TestCase] = []
        self.passed = 0
        self.runs = 0
        self._out = out
        self.logger = logger or logging.getLogger("dietest")

    @classmethod
    def from_config(
        cls,
        config: SuiteConfig,
        *,
        out: TextIO | None = None,
        logger: logging.Logger | None = None,
    ) -> Framework:
        return cls(
            config.name,
            config.purpose,
            out=out,
            logger=logger,
            unexpected_errors=config.unexpected_errors,
        )

    @property
    def out(self) -> TextIO:
        # resolved lazily so a replaced sys.stdout (e.g. under capture) is honoured
        return self._out if self._out is not None else sys.stdout

    @property
    def failed(self) -> int:
        return len(self.tests) - self.passed

    @property
    def all_passed(self) -> bool:
        return self.passed == len(self.tests)

    def _print(self, text: str = "") -> None:
        print(text, file=self.out)

    def display_greetings(self) -> None:
        self._print(SEPARATOR)
        self._print(f"This is test series:\n\t{self.name}")
        if self.purpose:
            self._print(f"Its purpose is:\n\t{self.purpose}")
        self._print(SEPARATOR)

    def add(self, test_case: TestCase) -> TestCase:
        """Register an already constructed test case."""
        self.tests.append(test_case)
        self.logger.debug(
            f"Registered test '{test_case.name}' ({type(test_case).__name__}) "
            f"in series '{self.name}'"
        )
        return test_case

    def add_should_not_panic(self, name: str, action: Action) -> ExpectNoFailure:
        return self.add(ExpectNoFailure(name, action, self.unexpected_errors))

    def add_should_panic(self, name: str, action: Action) -> ExpectFailure:
        return self.add(ExpectFailure(name, action, self.unexpected_errors))

    def add_should_throw(
        self,
        name: str,
        reference: Exception,
        type_label: str | None,
        action: Action,
    ) -> ExpectSpecificError:
        """Register a test expecting ``action`` to raise ``type(reference)`` with its message."""
        return self.add(
            ExpectSpecificError(
                name, reference, type_label, action, self.unexpected_errors
            )
        )

    def run(self) -> None:
        """Run every registered test in registration order."""
        self.runs += 1
        if self.runs > 1:
            self.logger.warning(
                f"Series '{self.name}' is being run again; passed count will "
                f"accumulate across runs ({self.runs} runs so far)"
            )
        self.logger.debug(f"Starting series '{self.name}' with {len(self.tests)} test(s)")

        self._print()
        for test_case in self.tests:
            if test_case.run(self.out, self.logger):
                self.passed += 1
        self._print()

        self.logger.debug(
            f"Series '{self.name}' finished: {self.passed}/{len(self.tests)} passed"
        )

    exec = run

    def display_summary(self) -> None:
        total = len(self.tests)
        self._print(SEPARATOR)
        if self.passed == total:
            self._print(f"all {total} tests passed")
        else:
            failed = total - self.passed
            self._print(f"{self.passed} tests passed ({self.passed / total * 100:g}%)")
            self._print(f"{failed} tests failed ({failed / total * 100:g}%)")
        self._print(SEPARATOR)
