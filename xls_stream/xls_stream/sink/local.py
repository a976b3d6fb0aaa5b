"""
File and stream sink implementations.
"""

import logging
from pathlib import Path
from typing import Any, BinaryIO, Optional, Union

from ..errors import SinkIOError
from . import Sink

logger = logging.getLogger(__name__)


class StreamSink(Sink):
    """
    Writes records to an open binary file-like object.

    The stream is borrowed: close() flushes it but leaves it open.
    """

    def __init__(self, stream: BinaryIO, *, context: Any = None):
        """
        Initialize stream sink.

        Args:
            stream: Binary stream with a write() method
            context: Opaque value identifying this output to the caller
        """
        self.stream = stream
        self.context = context
        self.bytes_written = 0

    def write(self, data: bytes) -> None:
        expected = len(data)
        try:
            written = self.stream.write(data)
        except OSError as e:
            logger.error(f"Write of {expected} bytes failed: {e}")
            raise SinkIOError(f"Failed to write {expected} bytes: {e}", 0, expected) from e

        # Raw (unbuffered) streams may accept fewer bytes than offered.
        if written is not None and written != expected:
            self.bytes_written += written
            logger.error(f"Short write: {written} of {expected} bytes")
            raise SinkIOError(f"Short write: {written} of {expected} bytes", written, expected)

        self.bytes_written += expected

    def flush(self) -> None:
        try:
            self.stream.flush()
        except OSError as e:
            raise SinkIOError(f"Failed to flush stream: {e}") from e

    def close(self) -> None:
        """Flush but do not close the borrowed stream."""
        if not self.stream.closed:
            self.flush()


class FileSink(StreamSink):
    """
    Writes records to a file on local disk.

    The file is created (parent directories included) and truncated on
    construction, and closed by close().
    """

    def __init__(self, path: Union[str, Path], *, context: Optional[Any] = None):
        """
        Initialize file sink.

        Args:
            path: Output file path, conventionally ending in .xls
            context: Opaque value identifying this output to the caller
        """
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        try:
            stream = open(self.path, "wb")
        except OSError as e:
            raise SinkIOError(f"Cannot open {self.path} for writing: {e}") from e
        super().__init__(stream, context=context)

    def close(self) -> None:
        if self.stream.closed:
            return
        try:
            self.stream.close()
        except OSError as e:
            raise SinkIOError(f"Failed to close {self.path}: {e}") from e
        logger.debug(f"Closed {self.path} after {self.bytes_written} bytes")
