"""Assertion failures raised by the diagnostics helpers."""

from __future__ import annotations


class DiagnosticsAssertionError(AssertionError):
    """Base class for failed diagnostic assertions."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NullAssertionError(DiagnosticsAssertionError):
    """Raised when a value that must be present is None."""


class InvariantViolationError(DiagnosticsAssertionError):
    """Raised when a condition that must hold is false."""
