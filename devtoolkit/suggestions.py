"""Remediation hints for common failure categories."""

from __future__ import annotations

from types import MappingProxyType
from typing import Callable, Mapping, Optional, Union

from .error_info import ErrorCategory, ErrorInfo

INNER_EXCEPTION_PREFIX = "Inner Exception: "


def _missing_file(info: ErrorInfo) -> str:
    name = info.filename if info.filename is not None else info.message
    return f"Make sure the file '{name}' exists and the path is spelled correctly."


def _missing_directory(info: ErrorInfo) -> str:
    return f"Make sure the directory exists and the path points to a directory: {info.message}"


SUGGESTIONS: Mapping[ErrorCategory, Union[str, Callable[[ErrorInfo], str]]] = MappingProxyType({
    ErrorCategory.NULL_REFERENCE: "Check that the object is not None before using its attributes or items.",
    ErrorCategory.INDEX_OUT_OF_RANGE: "Check that the index is within the bounds of the sequence.",
    ErrorCategory.INVALID_ARGUMENT: "Check the values passed to the function; one of them is not accepted.",
    ErrorCategory.INVALID_STATE: "Check that the object is in a valid state for this operation.",
    ErrorCategory.DIVIDE_BY_ZERO: "Check that the divisor is not zero before dividing.",
    ErrorCategory.FILE_NOT_FOUND: _missing_file,
    ErrorCategory.DIRECTORY_NOT_FOUND: _missing_directory,
    ErrorCategory.FORMAT_INVALID: "Check that the input text matches the expected format before parsing it.",
    ErrorCategory.NUMERIC_OVERFLOW: "Check that the result fits the numeric type, or use a wider type.",
    ErrorCategory.KEY_NOT_FOUND: "Check that the key exists before looking it up, or use a default value.",
    ErrorCategory.INVALID_CAST: "Check that the value has the expected type before converting or combining it.",
    ErrorCategory.STACK_OVERFLOW: "Check for unbounded recursion and make sure every recursive call has a base case.",
    ErrorCategory.OUT_OF_MEMORY: "Reduce memory usage, for example by processing data in smaller batches.",
})


def suggestion_for_category(info: ErrorInfo) -> str:
    """Return the hint for a single error, ignoring its inner errors."""
    entry = SUGGESTIONS.get(info.category, "")
    return entry(info) if callable(entry) else entry


def get_suggestion_for_exception(error: Optional[Union[BaseException, ErrorInfo]]) -> str:
    """
    Build a remediation hint for an exception and every error behind it.

    Each inner error contributes a new line starting with
    ``"Inner Exception: "``, even when no hint is known for it.

    Args:
        error: Exception, ErrorInfo, or None

    Returns:
        Hint text, empty when ``error`` is None
    """
    if error is None:
        return ""
    info = error if isinstance(error, ErrorInfo) else ErrorInfo.from_exception(error)

    parts = [suggestion_for_category(info)]
    inner = info.inner
    while inner is not None:
        parts.append(INNER_EXCEPTION_PREFIX + suggestion_for_category(inner))
        inner = inner.inner
    return "\n".join(parts)
