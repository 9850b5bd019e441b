"""
Assertions, coloured console logging and exception reporting.

All functions write through one process-wide ConsoleSink, which can be
replaced with :func:`configure`. Only the two assert helpers raise; the
logging helpers accept missing errors, empty messages and exceptions without
a traceback.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Callable, Optional, Union

from .console import ConsoleColor, ConsoleSink, Level
from .error_info import ErrorInfo
from .errors import InvariantViolationError, NullAssertionError
from .suggestions import get_suggestion_for_exception
from .utils.config import ConfigManager

logger = logging.getLogger(__name__)

ErrorLike = Union[BaseException, ErrorInfo]

_COLOR_MODES = {"auto": None, "always": True, "never": False}

_config = ConfigManager()
_sink = ConsoleSink()


def sink_from_config(config: ConfigManager) -> ConsoleSink:
    """Build a ConsoleSink from the ``console`` config section."""
    mode = config.get("console.color", "auto")
    if mode not in _COLOR_MODES:
        logger.warning(f"Unknown console.color {mode!r}, falling back to 'auto'")
        mode = "auto"

    stream_name = config.get("console.stream", "stdout")
    if stream_name == "stderr":
        stream = sys.stderr
    else:
        if stream_name != "stdout":
            logger.warning(f"Unknown console.stream {stream_name!r}, falling back to 'stdout'")
        stream = None

    return ConsoleSink(
        stream=stream,
        color=_COLOR_MODES[mode],
        mirror_to_logging=bool(config.get("console.mirror_to_logging", False)),
    )


def configure(
    config: Optional[ConfigManager] = None,
    sink: Optional[ConsoleSink] = None,
) -> tuple[ConfigManager, ConsoleSink]:
    """
    Install the configuration and console sink used by this module.

    Args:
        config: Configuration to use, defaults when None
        sink: Sink to write to; built from ``config`` when None

    Returns:
        The previous (config, sink) pair, so callers can restore it
    """
    global _config, _sink
    previous = (_config, _sink)

    _config = config if config is not None else ConfigManager()
    _sink = sink if sink is not None else sink_from_config(_config)
    logger.debug(f"Console sink configured: color={_sink.color}, mirror={_sink.mirror_to_logging}")
    return previous


def assert_not_null(value: Any, message: str = "Object should not be null") -> None:
    """Raise NullAssertionError if ``value`` is None."""
    if value is None:
        raise NullAssertionError(message)


def assert_true(condition: bool, message: str = "Condition should be true") -> None:
    """Raise InvariantViolationError if ``condition`` is false."""
    if not condition:
        raise InvariantViolationError(message)


def log_if(condition: bool, message: Union[str, Callable[[], str]]) -> None:
    """
    Write ``message`` tagged LOG when ``condition`` holds.

    ``message`` may be a zero-argument callable; it is only called when the
    line is actually written.
    """
    if not condition:
        return
    text = message() if callable(message) else message
    _sink.write_line(Level.LOG, text, ConsoleColor.CYAN)


def log_info(message: str) -> None:
    _sink.write_line(Level.INFO, message, ConsoleColor.GREEN)


def log_warning(message: str) -> None:
    _sink.write_line(Level.WARNING, message, ConsoleColor.YELLOW)


def log_error(message: str) -> None:
    _sink.write_line(Level.ERROR, message, ConsoleColor.RED)


def _as_info(error: Optional[ErrorLike]) -> Optional[ErrorInfo]:
    if error is None or isinstance(error, ErrorInfo):
        return error
    return ErrorInfo.from_exception(error)


def log_exception(error: Optional[ErrorLike]) -> None:
    """Write ``Exception: <Type> - <message>`` tagged ERROR. None writes nothing."""
    info = _as_info(error)
    if info is None:
        logger.debug("log_exception called without an error")
        return
    log_error(f"Exception: {info.type_name} - {info.message}")


def log_smart_exception(
    error: Optional[ErrorLike],
    print_backtrace: Optional[bool] = None,
    suggest_solution: Optional[bool] = None,
) -> None:
    """
    Report an exception with its backtrace and a remediation hint.

    The backtrace is written once in full and then once per line. Flags left
    as None take their values from the ``smart_exception`` config section.

    Args:
        error: Exception or ErrorInfo to report; None writes nothing
        print_backtrace: Write STACKTRACE lines when a backtrace exists
        suggest_solution: Write an INFO ``Suggestion:`` line when a hint exists
    """
    info = _as_info(error)
    if info is None:
        logger.debug("log_smart_exception called without an error")
        return

    if print_backtrace is None:
        print_backtrace = bool(_config.get("smart_exception.print_backtrace", True))
    if suggest_solution is None:
        suggest_solution = bool(_config.get("smart_exception.suggest_solution", True))

    log_exception(info)

    if print_backtrace and info.backtrace:
        _sink.write_line(Level.STACKTRACE, info.backtrace, ConsoleColor.DARK_RED)
        for line in info.backtrace.splitlines():
            _sink.write_line(Level.STACKTRACE, line, ConsoleColor.DARK_GRAY)

    if suggest_solution:
        suggestion = get_suggestion_for_exception(info)
        if suggestion:
            log_info("Suggestion: " + suggestion)
