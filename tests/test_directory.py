"""Tests for header and single directory reading."""

import io
import struct

import pytest

from tiffhax.byteorder import BIG_ENDIAN, LITTLE_ENDIAN
from tiffhax.directory import MAX_ENTRIES, read_directory, read_header
from tiffhax.errors import DecodeError, IOFailure, NotATiff, ShortRead, UnknownByteOrder, UnknownType
from tiffhax.field import Field
from tiffhax.region import Unknown
from tests.conftest import build_tiff


class TestReadHeader:
    def test_little_endian_tiff(self):
        header = read_header(io.BytesIO(build_tiff([], endian='<')))
        assert header.order is LITTLE_ENDIAN
        assert header.first_ifd_offset == 8

    def test_big_endian_tiff(self):
        header = read_header(io.BytesIO(build_tiff([], endian='>')))
        assert header.order is BIG_ENDIAN
        assert header.first_ifd_offset == 8

    def test_invalid_file(self):
        with pytest.raises(UnknownByteOrder):
            read_header(io.BytesIO(b'NOT A TIFF FILE'))

    def test_wrong_magic(self):
        with pytest.raises(NotATiff):
            read_header(io.BytesIO(b'II' + struct.pack('<HI', 99, 8)))

    def test_bigtiff_rejected(self):
        with pytest.raises(NotATiff, match='BigTIFF'):
            read_header(io.BytesIO(b'II' + struct.pack('<HHHQ', 43, 8, 0, 16)))

    def test_truncated(self):
        with pytest.raises(ShortRead):
            read_header(io.BytesIO(b'II*\x00'))


class TestReadDirectory:
    def test_read_entries(self, tmp_tiff):
        with open(tmp_tiff, 'rb') as f:
            header = read_header(f)
            directory = read_directory(f, header.first_ifd_offset, header.order)
        assert len(directory.entries) == 6
        assert directory.next_offset == 0
        assert directory.start == 8
        assert directory.end == 8 + 2 + 12 * 6 + 4
        assert [f.tag_id for f in directory.fields] == [256, 257, 259, 273, 279, 305]
        assert [f.start for f in directory.fields] == [10 + 12 * i for i in range(6)]

    def test_follow_ups(self, tmp_tiff):
        with open(tmp_tiff, 'rb') as f:
            header = read_header(f)
            directory = read_directory(f, header.first_ifd_offset, header.order)
        offsets = directory.offsets
        assert len(offsets) == 1
        assert offsets[0].field_id == 273
        assert offsets[0].is_data is True
        assert offsets[0].to == directory.end
        assert directory.data == []

        f = io.BytesIO(tmp_tiff.read_bytes())
        f.seek(offsets[0].to)
        assert struct.unpack('<III', f.read(offsets[0].size)) == (200, 300, 400)

    def test_inline_strip(self, tmp_tiff_single_strip):
        with open(tmp_tiff_single_strip, 'rb') as f:
            header = read_header(f)
            directory = read_directory(f, header.first_ifd_offset, header.order)
        assert header.order is BIG_ENDIAN
        assert directory.offsets == []
        assert [d.start for d in directory.data] == [118]

    def test_region(self, tmp_tiff):
        with open(tmp_tiff, 'rb') as f:
            header = read_header(f)
            directory = read_directory(f, header.first_ifd_offset, header.order)
        region = directory.region()
        assert region.start == 8
        assert region.end == directory.end
        assert isinstance(region.find(8), Unknown)
        assert region.find(10) is directory.fields[0]
        assert isinstance(region.find(22), Field)
        assert [(u.start, u.end) for u in region.unknown()] == [
            (8, 10), (82, 86)]

    def test_next_offset(self):
        content = build_tiff([(256, 3, 1, 1)], next_ifd=500)
        directory = read_directory(io.BytesIO(content), 8, LITTLE_ENDIAN)
        assert directory.next_offset == 500

    def test_truncated_entries(self):
        content = build_tiff([(256, 3, 1, 1), (257, 3, 1, 1)])
        with pytest.raises(ShortRead):
            read_directory(io.BytesIO(content[:30]), 8, LITTLE_ENDIAN)

    def test_absurd_entry_count(self):
        content = b'II*\x00\x08\x00\x00\x00' + struct.pack('<H', MAX_ENTRIES + 1)
        with pytest.raises(DecodeError, match='entries'):
            read_directory(io.BytesIO(content), 8, LITTLE_ENDIAN)

    def test_unknown_type_propagates(self):
        content = build_tiff([(256, 99, 1, 1)])
        with pytest.raises(UnknownType):
            read_directory(io.BytesIO(content), 8, LITTLE_ENDIAN)

    def test_closed_file(self):
        f = io.BytesIO(build_tiff([(256, 3, 1, 1)]))
        f.close()
        with pytest.raises(IOFailure):
            read_directory(f, 8, LITTLE_ENDIAN)
