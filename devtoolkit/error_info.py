"""Exception categories and a read-only view over exception chains."""

from __future__ import annotations

import json
import traceback
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from .errors import InvariantViolationError, NullAssertionError


class ErrorCategory(str, Enum):
    """Kinds of failure that have a known remediation hint."""

    NULL_REFERENCE = "null_reference"
    INDEX_OUT_OF_RANGE = "index_out_of_range"
    INVALID_ARGUMENT = "invalid_argument"
    INVALID_STATE = "invalid_state"
    DIVIDE_BY_ZERO = "divide_by_zero"
    FILE_NOT_FOUND = "file_not_found"
    DIRECTORY_NOT_FOUND = "directory_not_found"
    FORMAT_INVALID = "format_invalid"
    NUMERIC_OVERFLOW = "numeric_overflow"
    KEY_NOT_FOUND = "key_not_found"
    INVALID_CAST = "invalid_cast"
    STACK_OVERFLOW = "stack_overflow"
    OUT_OF_MEMORY = "out_of_memory"
    UNKNOWN = "unknown"


# Messages CPython uses when parsing text into numbers, literals or dates
_FORMAT_MESSAGE_MARKERS = (
    "invalid literal for",
    "could not convert string to",
    "malformed node or string",
    "does not match format",
    "invalid isoformat string",
)


def safe_str(error: BaseException) -> str:
    """Return str(error), tolerating exceptions with a broken __str__."""
    try:
        return str(error)
    except Exception:
        return f"<unprintable {type(error).__name__} object>"


def _mentions_none(error: BaseException) -> bool:
    return isinstance(error, (AttributeError, TypeError)) and "'NoneType'" in safe_str(error)


def _is_format_error(error: BaseException) -> bool:
    if isinstance(error, json.JSONDecodeError):
        return True
    if not isinstance(error, ValueError):
        return False
    text = safe_str(error).lower()
    return any(marker in text for marker in _FORMAT_MESSAGE_MARKERS)


def _of_type(*types: type) -> Callable[[BaseException], bool]:
    return lambda error: isinstance(error, types)


# Ordered most specific first; the first match wins.
_CLASSIFIERS: tuple[tuple[ErrorCategory, Callable[[BaseException], bool]], ...] = (
    (ErrorCategory.NULL_REFERENCE, lambda e: isinstance(e, NullAssertionError) or _mentions_none(e)),
    (ErrorCategory.STACK_OVERFLOW, _of_type(RecursionError)),
    (ErrorCategory.OUT_OF_MEMORY, _of_type(MemoryError)),
    (ErrorCategory.DIVIDE_BY_ZERO, _of_type(ZeroDivisionError)),
    (ErrorCategory.NUMERIC_OVERFLOW, _of_type(OverflowError)),
    (ErrorCategory.FILE_NOT_FOUND, _of_type(FileNotFoundError)),
    (ErrorCategory.DIRECTORY_NOT_FOUND, _of_type(NotADirectoryError)),
    (ErrorCategory.KEY_NOT_FOUND, _of_type(KeyError)),
    (ErrorCategory.INDEX_OUT_OF_RANGE, _of_type(IndexError)),
    (ErrorCategory.FORMAT_INVALID, _is_format_error),
    (ErrorCategory.INVALID_ARGUMENT, _of_type(ValueError)),
    (ErrorCategory.INVALID_STATE, _of_type(InvariantViolationError, RuntimeError)),
    (ErrorCategory.INVALID_CAST, _of_type(TypeError)),
)


def categorize(error: BaseException) -> ErrorCategory:
    """Map an exception to its category, or UNKNOWN when nothing matches."""
    for category, matches in _CLASSIFIERS:
        if matches(error):
            return category
    return ErrorCategory.UNKNOWN


def inner_exception(error: BaseException) -> Optional[BaseException]:
    """Return the exception that caused ``error``, if any.

    An explicit ``raise ... from`` cause wins; otherwise the implicit
    context is used unless it was suppressed.
    """
    if error.__cause__ is not None:
        return error.__cause__
    if error.__suppress_context__:
        return None
    return error.__context__


def _format_backtrace(error: BaseException) -> Optional[str]:
    if error.__traceback__ is None:
        return None
    text = "".join(traceback.format_tb(error.__traceback__)).rstrip("\n")
    return text or None


@dataclass(frozen=True)
class ErrorInfo:
    """
    Immutable snapshot of an exception and the chain of errors behind it.

    Optional parts of an exception (backtrace, inner error, file name) are
    carried as ``None`` rather than probed for on the live object.
    """

    category: ErrorCategory
    type_name: str
    message: str
    backtrace: Optional[str] = None
    inner: Optional["ErrorInfo"] = None
    filename: Optional[str] = None

    @classmethod
    def from_exception(cls, error: BaseException) -> "ErrorInfo":
        """
        Build an ErrorInfo chain from a live exception.

        Args:
            error: Exception to describe

        Returns:
            ErrorInfo whose ``inner`` links follow the exception's causes
        """
        errors = []
        seen: set[int] = set()
        current: Optional[BaseException] = error
        # Context chains can loop back on themselves; stop at a repeat.
        while current is not None and id(current) not in seen:
            seen.add(id(current))
            errors.append(current)
            current = inner_exception(current)

        info = None
        for link in reversed(errors):
            info = cls._describe(link, info)
        return info

    @classmethod
    def _describe(cls, error: BaseException, inner: Optional["ErrorInfo"]) -> "ErrorInfo":
        filename = getattr(error, "filename", None)
        return cls(
            category=categorize(error),
            type_name=type(error).__name__,
            message=safe_str(error),
            backtrace=_format_backtrace(error),
            inner=inner,
            filename=None if filename is None else str(filename),
        )
