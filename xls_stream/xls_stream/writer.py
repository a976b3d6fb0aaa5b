"""
Streaming BIFF2 worksheet writer.

Each operation encodes exactly one record and hands it to the writer's sink
before returning. Nothing about the document is kept in memory, so a
worksheet of any size can be produced with constant memory:

    with XLSWriter(FileSink("out.xls")) as w:
        begin_document(w)
        set_column_width(w, 0, 256 * 20)
        add_label_cell(w, 0, 0, b"Total")
        add_number_cell(w, 0, 1, 42.0)
        finish_document(w)

The caller sequences the calls (begin, any number of cells and column
widths, finish). By default the order is not checked at all. A writer
created with ``strict=True`` rejects records written before begin or
after finish.

If any operation raises, the output may end in a partial record and should
be discarded.
"""

import logging
from contextlib import contextmanager
from enum import Enum
from typing import Iterator, Optional

from . import records
from .errors import DocumentStateError, InvalidParamError, SinkIOError
from .sink import Sink

logger = logging.getLogger(__name__)


class DocumentState(Enum):
    """Position of a writer within its document."""
    NOT_BEGUN = "not begun"
    OPEN = "open"
    FINISHED = "finished"


class XLSWriter:
    """
    Handle binding the record operations to one output sink.

    Attributes:
        sink: Destination for every record written through this handle
        strict: Reject records that are out of document order
        state: Document state after the last successful record
    """

    def __init__(self, sink: Optional[Sink], *, strict: bool = False):
        self.sink = sink
        self.strict = strict
        self.state = DocumentState.NOT_BEGUN

    def begin(self) -> None:
        begin_document(self)

    def set_column_width(self, col: int, width: int) -> None:
        set_column_width(self, col, width)

    def add_number_cell(self, row: int, col: int, value: float) -> None:
        add_number_cell(self, row, col, value)

    def add_label_cell(self, row: int, col: int, label: bytes, length: Optional[int] = None) -> None:
        add_label_cell(self, row, col, label, length)

    def finish(self) -> None:
        finish_document(self)

    def close(self) -> None:
        """Close the underlying sink."""
        if self.sink is not None:
            self.sink.close()

    def abort(self) -> None:
        """Discard the output of the underlying sink."""
        if self.sink is not None:
            self.sink.abort()

    def __enter__(self) -> "XLSWriter":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is not None:
            logger.warning(f"Abandoning output after {exc_type.__name__}: {exc}")
            self.abort()
        else:
            self.close()

    def __repr__(self) -> str:
        return f"XLSWriter(sink={self.sink!r}, strict={self.strict}, state={self.state.value})"


def _check_writer(writer: Optional[XLSWriter]) -> Sink:
    """Return the writer's sink, or raise if there is nothing to write to."""
    if writer is None:
        raise InvalidParamError("No writer supplied")
    sink = getattr(writer, "sink", None)
    if sink is None or not callable(getattr(sink, "write", None)):
        raise InvalidParamError("Writer has no usable sink")
    return sink


def _check_state(writer: XLSWriter, operation: str, allowed: DocumentState) -> None:
    if writer.strict and writer.state is not allowed:
        raise DocumentStateError(operation, writer.state.value)


def _write(sink: Sink, data: bytes, record: str) -> None:
    try:
        sink.write(data)
    except SinkIOError as e:
        logger.error(f"Sink failed writing {record} record ({len(data)} bytes): {e}")
        raise
    logger.debug(f"Wrote {record} record ({len(data)} bytes)")


def begin_document(writer: XLSWriter) -> None:
    """
    Write the BOF record that starts a BIFF2 worksheet.

    Args:
        writer: The writer

    Raises:
        InvalidParamError: If the writer or its sink is missing
        SinkIOError: If the sink failed
    """
    sink = _check_writer(writer)
    _check_state(writer, "begin document", DocumentState.NOT_BEGUN)
    _write(sink, records.encode_begin(), "BOF")
    writer.state = DocumentState.OPEN


def set_column_width(writer: XLSWriter, col: int, width: int) -> None:
    """
    Set the width of a single column.

    BIFF2 can only give custom widths to the first 256 columns.

    Args:
        writer: The writer
        col: Column index, 0-255 (0 is column A)
        width: Width in 1/256 of the '0' character width in the default font
    """
    sink = _check_writer(writer)
    _check_state(writer, "set column width", DocumentState.OPEN)
    _write(sink, records.encode_column_width(col, width), "COLWIDTH")


def add_number_cell(writer: XLSWriter, row: int, col: int, value: float) -> None:
    """
    Add a numeric cell.

    Args:
        writer: The writer
        row: Row index, 0-65535 (0 is the first row)
        col: Column index, 0-65535 (0 is column A)
        value: Cell value, written as an IEEE-754 double
    """
    sink = _check_writer(writer)
    _check_state(writer, "add number cell", DocumentState.OPEN)
    _write(sink, records.encode_number(row, col, value), "NUMBER")


def add_label_cell(
    writer: XLSWriter,
    row: int,
    col: int,
    label: bytes,
    length: Optional[int] = None,
) -> None:
    """
    Add a text cell.

    The label bytes are written verbatim; no character set conversion is
    done, so text must already be encoded (e.g. cp1252 for Excel).

    The record is written in two parts, the fixed fields then the label
    data. If the first write fails the second is not attempted. If the
    second write fails the output ends in a truncated record.

    Args:
        writer: The writer
        row: Row index, 0-65535
        col: Column index, 0-65535
        label: Label data, at most 255 bytes
        length: Number of bytes of ``label`` to write; defaults to all of it
    """
    sink = _check_writer(writer)
    if not isinstance(label, (bytes, bytearray, memoryview)):
        raise InvalidParamError(
            f"Label must be bytes, not {type(label).__name__}; encode text before writing"
        )
    # Lengths are counted in bytes, whatever the item size of a buffer
    label = bytes(label)
    if length is None:
        length = len(label)
    elif length > len(label):
        raise InvalidParamError(f"Label length {length} exceeds the {len(label)} bytes supplied")

    header = records.encode_label_header(row, col, length)
    _check_state(writer, "add label cell", DocumentState.OPEN)
    _write(sink, header, "LABEL")
    _write(sink, label[:length], "LABEL data")


def finish_document(writer: XLSWriter) -> None:
    """
    Write the EOF record that ends the worksheet.

    The sink is left open; closing it is up to the caller.
    """
    sink = _check_writer(writer)
    _check_state(writer, "finish document", DocumentState.OPEN)
    _write(sink, records.encode_end(), "EOF")
    writer.state = DocumentState.FINISHED


@contextmanager
def document(writer: XLSWriter) -> Iterator[XLSWriter]:
    """
    Bracket a block of cell writes with the BOF and EOF records.

    The EOF record is only written if the block completes without raising.
    """
    begin_document(writer)
    yield writer
    finish_document(writer)


__all__ = [
    "DocumentState",
    "XLSWriter",
    "begin_document",
    "set_column_width",
    "add_number_cell",
    "add_label_cell",
    "finish_document",
    "document",
]
