"""Pytest fixtures for xls_stream tests."""

import os
import tempfile
from pathlib import Path
from typing import List, Optional

import pytest

from xls_stream.errors import SinkIOError
from xls_stream.sink import BufferSink, Sink
from xls_stream.writer import XLSWriter


class FailingSink(Sink):
    """Sink that raises SinkIOError on a chosen write attempt (1-based)."""

    def __init__(self, fail_on: int = 1):
        self.fail_on = fail_on
        self.attempts = 0
        self.written: List[bytes] = []

    def write(self, data: bytes) -> None:
        self.attempts += 1
        if self.attempts == self.fail_on:
            raise SinkIOError("simulated failure", 0, len(data))
        self.written.append(bytes(data))

    def flush(self) -> None:
        pass

    def close(self) -> None:
        pass


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def buffer_sink():
    """Create an empty in-memory sink."""
    return BufferSink()


@pytest.fixture
def writer(buffer_sink):
    """Create a permissive writer over an in-memory sink."""
    return XLSWriter(buffer_sink)


@pytest.fixture
def strict_writer():
    """Create a strict writer over an in-memory sink."""
    return XLSWriter(BufferSink(), strict=True)


@pytest.fixture
def failing_sink_factory():
    """Build sinks that fail on a given write attempt."""
    def _make(fail_on: Optional[int] = 1) -> FailingSink:
        return FailingSink(fail_on)
    return _make


@pytest.fixture(autouse=True)
def reset_env():
    """Reset environment variables after each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)
