"""Classic TIFF header and single-directory reading.

These are the collaborators an outer walker needs around the field
decoder: picking the byte order from the header and reading one directory
table. Which directories to visit, and in which order, is left to the
caller.
"""

import logging
from typing import BinaryIO, List, Optional, Tuple

from tiffhax.byteorder import ByteOrder, from_marker
from tiffhax.errors import DecodeError, IOFailure, NotATiff, ShortRead
from tiffhax.field import ENTRY_SIZE, Field, decode_field
from tiffhax.models import Data, Offset
from tiffhax.region import Container

logger = logging.getLogger(__name__)

HEADER_SIZE = 8
TIFF_MAGIC = 42
BIGTIFF_MAGIC = 43

# Real directories have a few hundred entries at most. A larger count means
# the directory pointer landed in image data.
MAX_ENTRIES = 1000

Entry = Tuple[Field, Optional[Offset], Optional[Data]]


class TIFFHeader:
    """Parsed classic TIFF file header."""
    __slots__ = ('order', 'first_ifd_offset')

    def __init__(self, order: ByteOrder, first_ifd_offset: int):
        self.order = order
        self.first_ifd_offset = first_ifd_offset


class Directory:
    """One decoded directory table."""
    __slots__ = ('start', 'entries', 'next_offset')

    def __init__(self, start: int, entries: List[Entry], next_offset: int):
        self.start = start
        self.entries = entries
        self.next_offset = next_offset

    @property
    def end(self) -> int:
        # count (2) + entries + next-directory pointer (4)
        return self.start + 2 + ENTRY_SIZE * len(self.entries) + 4

    @property
    def fields(self) -> List[Field]:
        return [field for field, _, _ in self.entries]

    @property
    def offsets(self) -> List[Offset]:
        return [offset for _, offset, _ in self.entries if offset is not None]

    @property
    def data(self) -> List[Data]:
        return [data for _, _, data in self.entries if data is not None]

    def region(self) -> Container:
        """Build a container for the table with every field carved in."""
        container = Container(self.start, self.end, name=f'ifd@{self.start}')
        for field in self.fields:
            container.split(field.start, field.end, field)
        return container


def _read_exact(f: BinaryIO, size: int, offset: int) -> bytes:
    try:
        f.seek(offset)
        data = f.read(size)
    except (OSError, ValueError) as e:
        raise IOFailure(f'could not read {size} bytes at offset {offset}, {e}') from e
    if len(data) != size:
        raise ShortRead(size, len(data), offset)
    return data


def read_header(f: BinaryIO) -> TIFFHeader:
    """Read the 8-byte classic TIFF header and pick the byte order."""
    data = _read_exact(f, HEADER_SIZE, 0)
    order = from_marker(data[0:2])

    magic = order.uint16(data[2:4])
    if magic == BIGTIFF_MAGIC:
        raise NotATiff('BigTIFF files use 20-byte entries and are not supported')
    if magic != TIFF_MAGIC:
        raise NotATiff(f'bad TIFF magic {magic}, expected {TIFF_MAGIC}')

    first = order.uint32(data[4:8])
    logger.debug("header: %s, first directory at %d", order.name, first)
    return TIFFHeader(order, first)


def read_directory(f: BinaryIO, offset: int, order: ByteOrder) -> Directory:
    """Decode the directory table starting at ``offset``."""
    num_entries = order.uint16(_read_exact(f, 2, offset))
    if num_entries > MAX_ENTRIES:
        raise DecodeError(f'directory at {offset} claims {num_entries} entries, '
                          f'more than {MAX_ENTRIES}')

    entries = []
    pos = offset + 2
    for _ in range(num_entries):
        entries.append(decode_field(f, pos, order))
        pos += ENTRY_SIZE

    next_offset = order.uint32(_read_exact(f, 4, pos))
    logger.debug("directory at %d: %d entries, next at %d",
                 offset, num_entries, next_offset)
    return Directory(offset, entries, next_offset)
