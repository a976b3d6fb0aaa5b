"""
Output sink interface and implementations.

A sink accepts complete byte strings and either stores all of them or
raises SinkIOError. The encoder never buffers; every record goes straight
to the sink it is handed.
"""

from abc import ABC, abstractmethod


class Sink(ABC):
    """
    Abstract base class for output sinks.

    Implementations must write every byte passed to write() before
    returning. A short write must raise SinkIOError, never truncate
    silently. Independent sink instances must not share state.
    """

    @abstractmethod
    def write(self, data: bytes) -> None:
        """
        Write all of ``data`` to the output.

        Args:
            data: Bytes to write

        Raises:
            SinkIOError: If the bytes could not all be written
        """
        pass

    @abstractmethod
    def flush(self) -> None:
        """
        Push written bytes to the underlying storage.
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """
        Close the sink and release any resources.
        """
        pass

    def abort(self) -> None:
        """
        Give up on the output after an error.

        The output may end in a partial record. Sinks that publish their
        output on close() must not publish it here.
        """
        self.close()

    def __enter__(self) -> "Sink":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is not None:
            self.abort()
        else:
            self.close()


from .local import FileSink, StreamSink  # noqa: E402
from .memory import BufferSink  # noqa: E402
from .callback import CallbackSink  # noqa: E402
from .s3 import S3Sink  # noqa: E402

__all__ = ['Sink', 'StreamSink', 'FileSink', 'BufferSink', 'CallbackSink', 'S3Sink']
