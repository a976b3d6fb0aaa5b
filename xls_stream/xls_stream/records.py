"""
BIFF2 record layouts.

Every record is framed as::

    tag (2) | length (2) | payload (length bytes)

with all integers little-endian and no padding between fields.

    Record        Tag     Length   Payload
    BOF           0x0009  4        version=0x0002, type=0x0010
    NUMBER        0x0003  15       row(2) col(2) attr(3) value(8)
    LABEL         0x0004  len+7    row(2) col(2) attr(3) len(1) label(len)
    COLWIDTH      0x0024  4        first_col(1) last_col(1) width(2)
    EOF           0x000A  0        -

The functions here are pure: they build bytes and never touch a sink.
"""

import struct
from enum import IntEnum

from .errors import InvalidParamError


class RecordType(IntEnum):
    """BIFF2 record tags."""
    NUMBER = 0x0003
    LABEL = 0x0004
    BOF = 0x0009
    EOF = 0x000A
    COLWIDTH = 0x0024


BIFF_VERSION = 0x0002
SHEET_DATA_TYPE = 0x0010

# Cell attributes are left at zero. Excel may consider these invalid, but
# the correct values are undocumented.
CELL_ATTRIBUTES = b"\x00\x00\x00"

MAX_LABEL_LENGTH = 255

# Value of a LABEL length field for an empty label. The field is always the
# label length plus this constant. This is one less than the 8 fixed bytes
# that actually follow the header (row, col, attributes, length byte), so a
# reader walking records by their length fields loses sync after a LABEL.
# A "Testing" label record must start 04 00 0E 00, so this stays 7.
LABEL_FIXED_LENGTH = 7

HEADER = struct.Struct("<HH")
_BOF = struct.Struct("<HHHH")
_NUMBER = struct.Struct("<HHHH3sd")
_LABEL_HEADER = struct.Struct("<HHHH3sB")
_COLWIDTH = struct.Struct("<HHBBH")

NUMBER_PAYLOAD_LENGTH = _NUMBER.size - HEADER.size
COLWIDTH_PAYLOAD_LENGTH = _COLWIDTH.size - HEADER.size
BOF_PAYLOAD_LENGTH = _BOF.size - HEADER.size


def _pack(layout: struct.Struct, record: str, *fields) -> bytes:
    try:
        return layout.pack(*fields)
    except struct.error as e:
        raise InvalidParamError(f"Invalid {record} field value: {e}") from e


def encode_begin() -> bytes:
    """Build the 8-byte BOF record that opens a worksheet."""
    return _BOF.pack(RecordType.BOF, BOF_PAYLOAD_LENGTH, BIFF_VERSION, SHEET_DATA_TYPE)


def encode_end() -> bytes:
    """Build the 4-byte EOF record."""
    return HEADER.pack(RecordType.EOF, 0)


def encode_number(row: int, col: int, value: float) -> bytes:
    """
    Build a 19-byte NUMBER record.

    Args:
        row: Row index, 0-65535
        col: Column index, 0-65535
        value: Stored as an IEEE-754 double, bit pattern preserved

    Returns:
        The complete record
    """
    return _pack(
        _NUMBER, "NUMBER",
        RecordType.NUMBER, NUMBER_PAYLOAD_LENGTH,
        row, col, CELL_ATTRIBUTES, value,
    )


def encode_label_header(row: int, col: int, length: int) -> bytes:
    """
    Build the fixed 12-byte part of a LABEL record.

    The raw label bytes follow it directly in the stream. The length field
    is the label length plus LABEL_FIXED_LENGTH.

    Args:
        row: Row index, 0-65535
        col: Column index, 0-65535
        length: Number of label bytes that will follow, 0-255
    """
    if not 0 <= length <= MAX_LABEL_LENGTH:
        raise InvalidParamError(
            f"Label length must be between 0 and {MAX_LABEL_LENGTH}, got {length}"
        )
    record_length = length + LABEL_FIXED_LENGTH
    return _pack(
        _LABEL_HEADER, "LABEL",
        RecordType.LABEL, record_length,
        row, col, CELL_ATTRIBUTES, length,
    )


def encode_column_width(col: int, width: int) -> bytes:
    """
    Build an 8-byte COLWIDTH record covering the single column ``col``.

    Args:
        col: Column index, 0-255 (BIFF2 can only size the first 256 columns)
        width: Width in 1/256 of the '0' glyph width of the default font
    """
    return _pack(
        _COLWIDTH, "COLWIDTH",
        RecordType.COLWIDTH, COLWIDTH_PAYLOAD_LENGTH,
        col, col, width,
    )


__all__ = [
    "RecordType",
    "BIFF_VERSION",
    "SHEET_DATA_TYPE",
    "CELL_ATTRIBUTES",
    "MAX_LABEL_LENGTH",
    "LABEL_FIXED_LENGTH",
    "HEADER",
    "encode_begin",
    "encode_end",
    "encode_number",
    "encode_label_header",
    "encode_column_width",
]
