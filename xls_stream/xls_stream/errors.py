"""
Result codes and exceptions raised by the encoder and its sinks.

Every failure is raised immediately to the caller of the failing operation.
Nothing is retried internally. After any error the output stream may hold a
truncated record and should be abandoned.
"""

from enum import Enum
from typing import Optional


class ResultCode(Enum):
    """Numeric result codes of the writer API."""
    SUCCESS = 0
    IO_ERROR = -1
    INVALID_PARAM = -2
    INVALID_STATE = -3  # strict mode only


class XLSWriterError(Exception):
    """Base class for all xls_stream errors."""

    code: ResultCode = ResultCode.IO_ERROR

    def __init__(self, message: str, code: Optional[ResultCode] = None):
        if code is not None:
            self.code = code
        super().__init__(message)


class InvalidParamError(XLSWriterError, ValueError):
    """Raised when the writer, its sink, or a field value is unusable.

    Always raised before anything is handed to the sink.
    """

    code = ResultCode.INVALID_PARAM


class SinkIOError(XLSWriterError, OSError):
    """Raised when a sink fails to accept all of the bytes it was given."""

    code = ResultCode.IO_ERROR

    def __init__(self, message: str, written: Optional[int] = None, expected: Optional[int] = None):
        self.written = written
        self.expected = expected
        super().__init__(message)


class DocumentStateError(XLSWriterError):
    """Raised by a strict writer when a record is out of document order."""

    code = ResultCode.INVALID_STATE

    def __init__(self, operation: str, state: str):
        self.operation = operation
        self.state = state
        super().__init__(f"Cannot {operation} while document is {state}")


__all__ = [
    "ResultCode",
    "XLSWriterError",
    "InvalidParamError",
    "SinkIOError",
    "DocumentStateError",
]
