"""Tests for xls_stream.records module."""

import math
import struct

import pytest

from xls_stream.errors import InvalidParamError
from xls_stream.records import (
    LABEL_FIXED_LENGTH,
    MAX_LABEL_LENGTH,
    RecordType,
    encode_begin,
    encode_column_width,
    encode_end,
    encode_label_header,
    encode_number,
)


def _header(record: bytes):
    return struct.unpack_from("<HH", record, 0)


class TestBeginEnd:
    """Tests for the BOF and EOF records."""

    def test_begin_bytes(self):
        assert encode_begin() == bytes([0x09, 0x00, 0x04, 0x00, 0x02, 0x00, 0x10, 0x00])

    def test_end_bytes(self):
        assert encode_end() == bytes([0x0A, 0x00, 0x00, 0x00])

    def test_begin_length_matches_payload(self):
        record = encode_begin()
        tag, length = _header(record)
        assert tag == RecordType.BOF
        assert length == len(record) - 4


class TestNumberRecord:
    """Tests for NUMBER records."""

    def test_layout(self):
        record = encode_number(0, 0, 12345.6)

        assert len(record) == 19
        assert record[:4] == b"\x03\x00\x0f\x00"
        assert record[4:11] == b"\x00" * 7
        assert record[11:] == struct.pack("<d", 12345.6)

    def test_row_and_col_little_endian(self):
        record = encode_number(0x1234, 0xABCD, 0.0)

        assert record[4:6] == b"\x34\x12"
        assert record[6:8] == b"\xcd\xab"

    @pytest.mark.parametrize("row,col", [(0, 0), (65535, 65535), (5, 5), (1, 255)])
    def test_address_round_trip(self, row, col):
        record = encode_number(row, col, 555.5)
        assert struct.unpack_from("<HH", record, 4) == (row, col)

    @pytest.mark.parametrize("bits", [
        0x7FF0000000000000,  # +inf
        0xFFF0000000000000,  # -inf
        0x7FF8000000000000,  # quiet NaN
        0x7FF8000000000123,  # NaN with payload
        0x8000000000000000,  # -0.0
        0x0000000000000001,  # smallest subnormal
    ])
    def test_value_bit_pattern_preserved(self, bits):
        value = struct.unpack("<d", struct.pack("<Q", bits))[0]
        record = encode_number(1, 2, value)
        assert struct.unpack_from("<Q", record, 11)[0] == bits

    def test_integer_value_accepted(self):
        record = encode_number(0, 0, 3)
        assert struct.unpack_from("<d", record, 11)[0] == 3.0

    @pytest.mark.parametrize("row,col", [(-1, 0), (0, -1), (65536, 0), (0, 65536)])
    def test_out_of_range_address(self, row, col):
        with pytest.raises(InvalidParamError):
            encode_number(row, col, 1.0)

    def test_attribute_bytes_are_zero(self):
        record = encode_number(7, 8, math.pi)
        assert record[8:11] == b"\x00\x00\x00"


class TestLabelHeader:
    """Tests for the fixed part of LABEL records."""

    def test_testing_label_header(self):
        header = encode_label_header(0, 1, 7)

        assert header[:4] == b"\x04\x00\x0e\x00"
        assert header[4:] == b"\x00\x00\x01\x00\x00\x00\x00\x07"

    @pytest.mark.parametrize("length", [0, 1, 7, 32, 254, MAX_LABEL_LENGTH])
    def test_length_field(self, length):
        header = encode_label_header(3, 4, length)
        tag, record_length = _header(header)

        assert tag == RecordType.LABEL
        assert record_length == length + LABEL_FIXED_LENGTH
        assert header[11] == length
        assert len(header) == 12

    @pytest.mark.parametrize("length", [-1, 256, 1000])
    def test_length_out_of_range(self, length):
        with pytest.raises(InvalidParamError):
            encode_label_header(0, 0, length)

    def test_length_field_one_short_of_body(self):
        """The length field counts one byte fewer than the fixed fields that follow."""
        header = encode_label_header(0, 0, 5)
        _, record_length = _header(header)

        assert len(header) - 4 == 8
        assert record_length == 5 + 7
        assert record_length == (len(header) - 4 + 5) - 1


class TestColumnWidthRecord:
    """Tests for COLWIDTH records."""

    def test_layout(self):
        record = encode_column_width(2, 256 * 100)
        assert record == b"\x24\x00\x04\x00\x02\x02\x00\x64"

    @pytest.mark.parametrize("col", [0, 1, 128, 255])
    def test_first_and_last_column_match(self, col):
        record = encode_column_width(col, 1234)
        assert record[4] == col
        assert record[5] == col
        assert struct.unpack_from("<H", record, 6)[0] == 1234

    @pytest.mark.parametrize("col,width", [(256, 10), (-1, 10), (0, 65536), (0, -5)])
    def test_out_of_range(self, col, width):
        with pytest.raises(InvalidParamError):
            encode_column_width(col, width)
