"""Console diagnostics: assertions, coloured logging and exception hints."""

__version__ = "0.1.0"
__author__ = "devtoolkit"

from .errors import DiagnosticsAssertionError, NullAssertionError, InvariantViolationError
from .error_info import ErrorCategory, ErrorInfo, categorize
from .suggestions import get_suggestion_for_exception
from .console import ConsoleSink, ConsoleColor, Level
from .debug import (
    assert_not_null,
    assert_true,
    configure,
    log_if,
    log_info,
    log_warning,
    log_error,
    log_exception,
    log_smart_exception,
)

__all__ = [
    "DiagnosticsAssertionError",
    "NullAssertionError",
    "InvariantViolationError",
    "ErrorCategory",
    "ErrorInfo",
    "categorize",
    "get_suggestion_for_exception",
    "ConsoleSink",
    "ConsoleColor",
    "Level",
    "assert_not_null",
    "assert_true",
    "configure",
    "log_if",
    "log_info",
    "log_warning",
    "log_error",
    "log_exception",
    "log_smart_exception",
]
