"""Test case variants and their pass/fail classification."""

from __future__ import annotations

import logging
import sys
from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, TextIO

from dietest.config import UnexpectedErrorPolicy
from dietest.failure import Failure

Action = Callable[[], object]


class Verdict(str, Enum):
    NOT_RUN = "not run"
    PASSED = "passed"
    FAILED = "FAILED"


def _describe(exc: BaseException) -> str:
    return f"{type(exc).__name__}: {exc}"


class TestCase(ABC):
    """A named action plus the outcome it is expected to have.

    Subclasses implement ``_execute`` which invokes the action, writes the
    verdict line and returns whether the expectation held. ``run`` wraps it
    to record the verdict.

    Attributes:
        name: Label printed in the verdict line. Need not be unique.
        action: Zero-argument callable under test.
        unexpected_errors: What to do when the action raises something the
            variant does not anticipate. ``raise`` lets it propagate out of
            the run, ``fail`` turns it into a failed verdict.
        verdict: Outcome of the last execution.
        detail: Text printed after the arrow on the last execution.
    """

    # keep pytest from collecting this class when imported into test modules
    __test__ = False

    def __init__(
        self,
        name: str,
        action: Action,
        unexpected_errors: UnexpectedErrorPolicy | str = UnexpectedErrorPolicy.RAISE,
    ):
        self.name = name
        self.action = action
        self.unexpected_errors = UnexpectedErrorPolicy(unexpected_errors)
        self.verdict = Verdict.NOT_RUN
        self.detail = ""

    def run(self, out: TextIO | None = None, logger: logging.Logger | None = None) -> bool:
        """Execute the action once and print the verdict line. Returns True on pass."""
        out = out if out is not None else sys.stdout
        logger = logger or logging.getLogger("dietest")
        logger.debug(f"Running test '{self.name}' ({type(self).__name__})")
        passed = self._execute(out, logger)
        self.verdict = Verdict.PASSED if passed else Verdict.FAILED
        logger.debug(f"Test '{self.name}': {self.verdict.value} {self.detail}".rstrip())
        return passed

    def _report(self, out: TextIO, detail: str) -> None:
        self.detail = detail
        print(f"test {self.name}: {self.expectation} -> {detail}", file=out)

    def _unexpected(self, out: TextIO, logger: logging.Logger, exc: Exception) -> bool:
        if self.unexpected_errors is UnexpectedErrorPolicy.RAISE:
            logger.error(
                f"Test '{self.name}' raised unexpected {_describe(exc)}; aborting run"
            )
            raise
        self._report(out, f"FAILED (unexpected error: {_describe(exc)})")
        return False

    @property
    @abstractmethod
    def expectation(self) -> str:
        """Short description of the expected outcome, e.g. ``should panic``."""
        ...

    @abstractmethod
    def _execute(self, out: TextIO, logger: logging.Logger) -> bool: ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, verdict={self.verdict.value!r})"


class ExpectNoFailure(TestCase):
    """Passes iff the action does not raise :class:`Failure`."""

    expectation = "should not panic"

    def _execute(self, out: TextIO, logger: logging.Logger) -> bool:
        try:
            self.action()
        except Failure as failure:
            self._report(out, f"FAILED (panic: {failure.message})")
            return False
        except Exception as exc:
            return self._unexpected(out, logger, exc)
        self._report(out, "passed")
        return True


class ExpectFailure(TestCase):
    """Passes iff the action raises :class:`Failure`, whatever its message."""

    expectation = "should panic"

    def _execute(self, out: TextIO, logger: logging.Logger) -> bool:
        try:
            self.action()
        except Failure as failure:
            logger.debug(f"Test '{self.name}' panicked as expected: {failure.message}")
            self._report(out, "passed")
            return True
        except Exception as exc:
            return self._unexpected(out, logger, exc)
        self._report(out, "FAILED")
        return False


class ExpectSpecificError(TestCase):
    """Passes iff the action raises the reference's exception type with the same message.

    The type of ``reference`` is the expected kind; subclasses of it match
    too. Only ``Exception`` kinds are accepted, so interpreter exits and
    interrupts always propagate. Messages are compared with ``str()`` and must be identical.
    ``type_label`` is only used for display and defaults to the class name.
    """

    def __init__(
        self,
        name: str,
        reference: Exception,
        type_label: str | None,
        action: Action,
        unexpected_errors: UnexpectedErrorPolicy | str = UnexpectedErrorPolicy.RAISE,
    ):
        if not isinstance(reference, Exception):
            raise TypeError(
                f"reference must be an Exception instance, got {type(reference).__name__}"
            )
        super().__init__(name, action, unexpected_errors)
        self.reference = reference
        self.error_type = type(reference)
        self.type_label = type_label or self.error_type.__name__
        self.expected_message = str(reference)

    @property
    def expectation(self) -> str:
        return f'should throw {self.type_label}("{self.expected_message}")'

    def _report(self, out: TextIO, detail: str) -> None:
        self.detail = detail
        print(detail, file=out)

    def _execute(self, out: TextIO, logger: logging.Logger) -> bool:
        # header goes out before the action so any output it produces lands after it
        print(f"test {self.name}: {self.expectation} -> ", end="", file=out)
        try:
            self.action()
        except Exception as exc:
            if not isinstance(exc, self.error_type):
                logger.debug(
                    f"Test '{self.name}' expected {self.error_type.__name__}, "
                    f"got {_describe(exc)}"
                )
                self._report(out, "FAILED (wrong exception type)")
                return False
            actual = str(exc)
            if actual != self.expected_message:
                self._report(out, f"FAILED (wrong message: {actual})")
                return False
            self._report(out, "passed")
            return True
        self._report(out, "FAILED (didn't throw anything)")
        return False
