"""Shared fixtures for devtoolkit tests."""

import io

import pytest

from devtoolkit import debug
from devtoolkit.console import ConsoleSink


@pytest.fixture
def console():
    """Route diagnostics output to an in-memory buffer without colour codes."""
    buffer = io.StringIO()
    previous = debug.configure(sink=ConsoleSink(stream=buffer, color=False))
    yield buffer
    debug.configure(*previous)


@pytest.fixture
def colored_console():
    """Route diagnostics output to an in-memory buffer, keeping ANSI codes."""
    buffer = io.StringIO()
    previous = debug.configure(sink=ConsoleSink(stream=buffer, color=True))
    yield buffer
    debug.configure(*previous)
