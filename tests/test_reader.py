"""Tests for the byte cursor and the chunk header."""
import struct
from datetime import datetime

import pytest

from kwd_decoder.errors import ChunkParsingError, UnexpectedEndOfData
from kwd_decoder.parser import ByteReader, MapDataType, read_header
from kwd_decoder.utils.diagnostics import DiagnosticKind

from builders import chunk, map_chunk, timestamp, triggers_chunk


class TestByteReader:
    def test_little_endian_integers(self):
        reader = ByteReader(struct.pack('<BHhIi', 0xFE, 0xBEEF, -2, 0xDEADBEEF, -5))
        assert reader.read_ubyte() == 0xFE
        assert reader.read_ushort() == 0xBEEF
        assert reader.read_short() == -2
        assert reader.read_uint() == 0xDEADBEEF
        assert reader.read_int() == -5
        assert reader.at_end()

    def test_fixed_point(self):
        reader = ByteReader(struct.pack('<iih', 4096 * 3, 65536 // 2, -2048))
        assert reader.read_int_as_float() == 3.0
        assert reader.read_int_as_double() == 0.5
        assert reader.read_short_as_float() == -0.5

    def test_strings_are_trimmed(self):
        data = b'Lair\0junk'.ljust(32, b'\0') + 'Imp'.encode('utf-16-le').ljust(64, b'\0')
        reader = ByteReader(data)
        assert reader.read_string(32) == 'Lair'
        assert reader.read_string_utf16(32) == 'Imp'
        assert reader.tell() == 96

    def test_read_past_end_raises(self):
        reader = ByteReader(b'\x01\x02')
        with pytest.raises(UnexpectedEndOfData):
            reader.read_uint()
        with pytest.raises(ChunkParsingError):
            reader.read_uint()

    def test_peek_restores_position(self):
        reader = ByteReader(bytes(range(16)))
        reader.skip(2)
        with reader.peek(10):
            assert reader.read_ubyte() == 10
        assert reader.tell() == 2

    def test_timestamp(self):
        when = datetime(1999, 6, 25, 13, 45, 30)
        reader = ByteReader(timestamp(when) + timestamp())
        assert reader.read_timestamp() == when
        assert reader.read_timestamp() is None
        assert reader.tell() == 20

    def test_invalid_timestamp_is_reported(self):
        reader = ByteReader(struct.pack('<HBB2xBBBx', 1999, 31, 2, 0, 0, 0))
        assert reader.read_timestamp() is None
        assert reader.diagnostics.count(DiagnosticKind.INVALID_TIMESTAMP) == 1

    def test_check_null_reports_non_zero(self):
        reader = ByteReader(b'\0\0\0\0\0\x01')
        assert reader.check_null(4)
        assert not reader.check_null(2)
        assert reader.diagnostics.count(DiagnosticKind.NON_ZERO_PADDING) == 1


class TestDriftCorrection:
    @pytest.mark.parametrize('consumed', [10, 20, 23, 24, 25, 30])
    def test_cursor_ends_at_declared_size(self, consumed):
        reader = ByteReader(bytes(64))
        reader.skip(4)
        start = reader.tell()
        reader.read_bytes(consumed)
        reader.check_offset(start, 24)
        assert reader.tell() == start + 24

    def test_drift_is_reported(self):
        reader = ByteReader(bytes(64))
        reader.read_bytes(10)
        assert not reader.check_offset(0, 12)
        events = reader.diagnostics.events_of(DiagnosticKind.RECORD_DRIFT)
        assert len(events) == 1
        assert events[0].data == {'actual': 10, 'expected': 12}

    def test_no_drift_no_event(self):
        reader = ByteReader(bytes(8))
        reader.read_bytes(8)
        assert reader.check_offset(0, 8)
        assert len(reader.diagnostics) == 0


class TestHeader:
    def test_catalog_header(self):
        when = datetime(2000, 1, 2, 3, 4, 5)
        data = chunk(MapDataType.TERRAIN, bytes(100), item_count=4, check_two=7, created=when)
        reader = ByteReader(data)
        header = read_header(reader)
        assert header.id is MapDataType.TERRAIN
        assert header.size == 156
        assert header.item_count == 4
        assert header.item_size == 25
        assert header.date_created == when
        assert header.check_two == 7
        assert header.data_size == 100
        assert reader.tell() == 56
        assert header.end == len(data)

    def test_map_header(self):
        reader = ByteReader(map_chunk(3, 2, [(0, 0, 0, 0)] * 6))
        header = read_header(reader)
        assert (header.width, header.height) == (3, 2)
        assert header.header_size == 36
        assert reader.tell() == 36

    def test_triggers_header_sums_counts(self):
        reader = ByteReader(triggers_chunk([], 3, 4))
        header = read_header(reader)
        assert header.item_count == 7
        assert header.header_size == 60
        assert reader.tell() == 60

    def test_empty_catalog_has_no_item_size(self):
        header = read_header(ByteReader(chunk(MapDataType.DOORS, b'')))
        assert header.item_count == 0
        assert header.item_size == 0

    def test_unknown_kind_keeps_raw_id(self):
        header = read_header(ByteReader(chunk(999, b'')))
        assert header.id is None
        assert header.kind == 999

    def test_header_end_mismatch_is_not_fatal(self):
        data = bytearray(chunk(MapDataType.DOORS, b''))
        struct.pack_into('<I', data, 16, 30)
        reader = ByteReader(bytes(data))
        header = read_header(reader)
        assert reader.tell() == 56
        assert header.data_size == 0
        assert reader.diagnostics.count(DiagnosticKind.HEADER_MISMATCH) == 1
