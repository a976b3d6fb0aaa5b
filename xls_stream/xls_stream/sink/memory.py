"""
In-memory sink, mostly useful for tests and small documents.
"""


from . import Sink


class BufferSink(Sink):
    """Collects written bytes in a bytearray."""

    def __init__(self):
        self.buffer = bytearray()
        self.writes = 0

    def write(self, data: bytes) -> None:
        self.buffer += data
        self.writes += 1

    def getvalue(self) -> bytes:
        """Return everything written so far."""
        return bytes(self.buffer)

    def flush(self) -> None:
        """No buffering in memory sink, so flush is a no-op."""
        pass

    def close(self) -> None:
        """Contents stay readable after close."""
        pass
