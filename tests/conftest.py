"""Pytest configuration for the ingestkit test suite."""

from __future__ import annotations

import io
from collections.abc import Iterator

import pytest

from ingestkit.core.logging import LogConfig, StructuredLogger, configure_logging
from ingestkit.core.models import AllProperties


@pytest.fixture
def record() -> AllProperties:
    """A fresh configuration record targeting a test table."""

    return AllProperties.for_table("db", "events")


@pytest.fixture
def log_buffer() -> Iterator[io.StringIO]:
    """Route structured logs at DEBUG level into an in-memory buffer."""

    buffer = io.StringIO()
    StructuredLogger(LogConfig(level="DEBUG", console_stream=buffer, console_output=True))
    yield buffer
    configure_logging("WARNING")
