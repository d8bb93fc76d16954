"""Shared test fixtures -- synthetic TIFF directory entries and files."""

import struct
import pytest


def pack_entry(tag_id, type_id, count, value, endian='<'):
    """Pack one 12-byte directory entry."""
    return struct.pack(endian + 'HHII', tag_id, type_id, count, value)


def build_tiff(entries, endian='<', extra_data=None, next_ifd=0):
    """Build a minimal TIFF file in memory with given IFD entries.

    Args:
        entries: List of (tag_id, type_id, count, value_or_bytes) tuples.
            For inline values (<=4 bytes), pass an int.
            For out-of-line values, pass bytes.
        endian: '<' for little-endian, '>' for big-endian.
        extra_data: Optional bytes appended after the out-of-line data.
        next_ifd: Value written as the next-directory pointer.

    Returns:
        bytes: Complete TIFF file content. The directory starts at 8 and
        out-of-line data at 8 + 2 + 12 * len(entries) + 4.
    """
    bo = b'II' if endian == '<' else b'MM'
    header = bo + struct.pack(endian + 'HI', 42, 8)

    data_offset = 8 + 2 + 12 * len(entries) + 4
    entry_bytes = b''
    data_bytes = b''

    for tag_id, type_id, count, value in entries:
        if isinstance(value, bytes):
            entry_bytes += pack_entry(tag_id, type_id, count,
                                      data_offset + len(data_bytes), endian)
            data_bytes += value
        else:
            entry_bytes += pack_entry(tag_id, type_id, count, value, endian)

    result = (header + struct.pack(endian + 'H', len(entries)) + entry_bytes
              + struct.pack(endian + 'I', next_ifd) + data_bytes)
    if extra_data:
        result += extra_data
    return result


@pytest.fixture
def strip_entries():
    """Entries for a small image with three strips stored out of line."""
    strip_offsets = struct.pack('<III', 200, 300, 400)
    return [
        (256, 3, 1, 800),             # ImageWidth
        (257, 3, 1, 600),             # ImageLength
        (259, 3, 1, 1),               # Compression: none
        (273, 4, 3, strip_offsets),   # StripOffsets
        (279, 4, 1, 100),             # StripByteCounts
        (305, 2, 4, b'hax\x00'),      # Software
    ]


@pytest.fixture
def tmp_tiff(tmp_path, strip_entries):
    """A little-endian TIFF with out-of-line strip offsets."""
    filepath = tmp_path / 'strips.tif'
    filepath.write_bytes(build_tiff(strip_entries))
    return filepath


@pytest.fixture
def tmp_tiff_single_strip(tmp_path):
    """A big-endian TIFF whose only strip offset is stored inline."""
    entries = [
        (256, 3, 1, 16),
        (273, 4, 1, 118),
        (279, 4, 1, 32),
        (262, 3, 1, 2),
    ]
    filepath = tmp_path / 'single.tif'
    filepath.write_bytes(build_tiff(entries, endian='>'))
    return filepath
