"""
Line-oriented coloured console output.

Every line has the form ``[<LEVEL>] <message>``. Colour is applied for the
duration of a single write and always reset afterwards, even if the write
fails.

The sink does no locking. Code that logs from several threads must
serialise calls itself, or colour codes and partial lines can interleave.
"""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from enum import Enum
from typing import Iterator, Optional, TextIO

import click

logger = logging.getLogger(__name__)


class Level(str, Enum):
    """Tags written in front of each console line."""

    LOG = "LOG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    STACKTRACE = "STACKTRACE"


class ConsoleColor(str, Enum):
    """Foreground colours, named as click expects them."""

    CYAN = "bright_cyan"
    GREEN = "bright_green"
    YELLOW = "bright_yellow"
    RED = "bright_red"
    DARK_RED = "red"
    DARK_GRAY = "bright_black"


_LOGGING_LEVELS = {
    Level.LOG: logging.DEBUG,
    Level.INFO: logging.INFO,
    Level.WARNING: logging.WARNING,
    Level.ERROR: logging.ERROR,
    Level.STACKTRACE: logging.ERROR,
}


class ConsoleSink:
    """Writes tagged, coloured lines to a text stream."""

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        color: Optional[bool] = None,
        mirror_to_logging: bool = False,
    ):
        """
        Args:
            stream: Output stream; None means sys.stdout at write time
            color: True forces ANSI colours, False strips them,
                   None colours only when the stream is a terminal
            mirror_to_logging: Also forward each line to this module's logger
        """
        self._stream = stream
        self.color = color
        self.mirror_to_logging = mirror_to_logging

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def _emit(self, text: str) -> None:
        click.echo(text, file=self.stream, nl=False, color=self.color)

    @contextmanager
    def foreground(self, color: ConsoleColor) -> Iterator[None]:
        """
        Set the foreground colour for the enclosed writes, then reset it.

        ANSI output cannot read back the terminal's current colour, so the
        exit step resets to the terminal default rather than restoring a
        previously saved colour.
        """
        self._emit(click.style("", fg=color.value, reset=False))
        try:
            yield
        finally:
            self._emit(click.style("", reset=True))

    def write_line(self, level: Level, message: str, color: ConsoleColor) -> None:
        """Write ``[<level>] <message>`` in ``color`` followed by a newline."""
        with self.foreground(color):
            self._emit(f"[{level.value}] {message}")
        self._emit("\n")

        if self.mirror_to_logging:
            logger.log(_LOGGING_LEVELS[level], message)
