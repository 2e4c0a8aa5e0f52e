"""The failure signal raised by assertion primitives."""

from __future__ import annotations

NO_MESSAGE = "(no message)"


class Failure(Exception):
    """Raised when a check inside a test action is violated.

    It is distinct from any error the code under test might raise, so test
    cases can tell "an assertion failed" apart from "something blew up".
    An empty message reads back as ``"(no message)"``.
    """

    def __init__(self, message: str = ""):
        super().__init__(message)
        self._message = message

    @property
    def message(self) -> str:
        return self._message or NO_MESSAGE

    def __str__(self) -> str:
        return self.message
