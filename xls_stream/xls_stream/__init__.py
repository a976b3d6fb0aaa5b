"""
xls_stream - Streaming writer for BIFF2 (Excel 2.x) worksheets

This package writes .xls files one record at a time straight to an output
sink, without building the spreadsheet in memory:
- Number and label cells
- Column widths
- Pluggable sinks (file, stream, memory, callback, S3)
"""

from xls_stream.errors import (
    ResultCode,
    XLSWriterError,
    InvalidParamError,
    SinkIOError,
    DocumentStateError,
)
from xls_stream.records import RecordType
from xls_stream.sink import Sink, StreamSink, FileSink, BufferSink, CallbackSink, S3Sink
from xls_stream.writer import (
    DocumentState,
    XLSWriter,
    begin_document,
    set_column_width,
    add_number_cell,
    add_label_cell,
    finish_document,
    document,
)
from xls_stream.config import WriterConfig, load_config, open_sink, open_writer

__version__ = "0.1.0"

__all__ = [
    # Errors
    "ResultCode",
    "XLSWriterError",
    "InvalidParamError",
    "SinkIOError",
    "DocumentStateError",
    # Records
    "RecordType",
    # Sinks
    "Sink",
    "StreamSink",
    "FileSink",
    "BufferSink",
    "CallbackSink",
    "S3Sink",
    # Writer
    "DocumentState",
    "XLSWriter",
    "begin_document",
    "set_column_width",
    "add_number_cell",
    "add_label_cell",
    "finish_document",
    "document",
    # Config
    "WriterConfig",
    "load_config",
    "open_sink",
    "open_writer",
]
