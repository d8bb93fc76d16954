"""Decoding of single 12-byte IFD entries.

Layout of a classic TIFF directory entry::

    0      2      4            8            12
    | tag  | type | count      | value/offset |

The last four bytes hold the value itself when ``count * width(type)``
fits in them, otherwise the absolute file offset of the value.
"""

import logging
from dataclasses import dataclass
from typing import BinaryIO, Optional, Tuple

from tiffhax.byteorder import ByteOrder
from tiffhax.constants import DATA_FIELD_IDS, DATA_TYPE_SIZES
from tiffhax.errors import IOFailure, ShortRead, UnknownType
from tiffhax.models import Data, Offset
from tiffhax.region import LeafRegion

logger = logging.getLogger(__name__)

ENTRY_SIZE = 12
INLINE_LIMIT = 4


@dataclass(frozen=True)
class Field(LeafRegion):
    """One decoded IFD entry covering ``[start, start + 12)``."""
    start: int
    end: int
    raw: bytes
    tag_id: int
    dtype: int
    count: int
    value: int
    is_offset: bool

    @property
    def total_size(self) -> int:
        return self.count * DATA_TYPE_SIZES[self.dtype]

    @property
    def value_bytes(self) -> bytes:
        return self.raw[8:12]


def decode_field(stream: BinaryIO, start: int,
                 order: ByteOrder) -> Tuple[Field, Optional[Offset], Optional[Data]]:
    """Decode the entry at the stream's current position.

    ``start`` is the absolute file offset of the entry and is only recorded,
    the stream is not seeked. Returns the Field plus at most one of an
    Offset (value lives elsewhere) or a Data (inline pointer to pixel data).
    """
    try:
        raw = stream.read(ENTRY_SIZE)
    except (OSError, ValueError) as e:
        raise IOFailure(f'could not read ifd field at offset {start}, {e}') from e
    if raw is None or len(raw) != ENTRY_SIZE:
        raise ShortRead(ENTRY_SIZE, len(raw or b''), start)

    tag_id = order.uint16(raw[0:2])
    dtype = order.uint16(raw[2:4])
    count = order.uint32(raw[4:8])
    value = order.uint32(raw[8:12])

    width = DATA_TYPE_SIZES.get(dtype)
    if width is None:
        raise UnknownType(dtype, tag_id)

    is_offset = count * width > INLINE_LIMIT
    field = Field(start, start + ENTRY_SIZE, bytes(raw), tag_id, dtype,
                  count, value, is_offset)

    if is_offset:
        offset = Offset(dtype=dtype, count=count, field_id=tag_id, from_=start,
                        to=value, is_data=tag_id in DATA_FIELD_IDS)
        logger.debug("field %d at %d points to %d (%d x type %d)",
                     tag_id, start, value, count, dtype)
        return field, offset, None

    # A single strip/tile offset fits inline, so the value is the pointer itself.
    if tag_id in DATA_FIELD_IDS:
        logger.debug("field %d at %d holds inline data pointer %d",
                     tag_id, start, value)
        return field, None, Data(value)

    return field, None, None


def read_field_at(f: BinaryIO, offset: int,
                  order: ByteOrder) -> Tuple[Field, Optional[Offset], Optional[Data]]:
    """Seek to ``offset`` and decode the entry there."""
    try:
        f.seek(offset)
    except (OSError, ValueError) as e:
        raise IOFailure(f'could not seek to ifd field at offset {offset}, {e}') from e
    return decode_field(f, offset, order)
