"""
Callback sink: adapts a plain ``write_func(ptr, data)`` function to the
Sink interface.

The function receives the opaque ``ptr`` value it was registered with, so a
single function can serve several open outputs.
"""

from typing import Any, Callable, Optional, Union

from ..errors import InvalidParamError, ResultCode, SinkIOError, XLSWriterError
from . import Sink

WriteFunc = Callable[[Any, bytes], Optional[Union[ResultCode, bool]]]


class CallbackSink(Sink):
    """
    Sink that forwards every write to a caller-supplied function.

    The function returns ResultCode.SUCCESS (or None/True) when all bytes
    were written. ResultCode.IO_ERROR or False raise SinkIOError and
    ResultCode.INVALID_PARAM raises InvalidParamError.
    """

    def __init__(self, write_func: WriteFunc, ptr: Any = None):
        self.write_func = write_func
        self.ptr = ptr

    def write(self, data: bytes) -> None:
        if self.write_func is None:
            raise InvalidParamError("CallbackSink has no write function")

        result = self.write_func(self.ptr, data)

        if result is None or result is True or result is ResultCode.SUCCESS:
            return
        if result is False or result is ResultCode.IO_ERROR:
            raise SinkIOError(f"Write callback failed for {len(data)} bytes", expected=len(data))
        if result is ResultCode.INVALID_PARAM:
            raise InvalidParamError("Write callback rejected its parameters")
        code = result if isinstance(result, ResultCode) else ResultCode.IO_ERROR
        raise XLSWriterError(f"Write callback returned {result!r}", code)

    def flush(self) -> None:
        """Callbacks are expected to write through."""
        pass

    def close(self) -> None:
        """The callback's target belongs to the caller."""
        pass
