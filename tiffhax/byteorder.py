"""Byte order policies for multi-byte TIFF reads.

A TIFF file declares its byte order once, in the first two bytes of the
header ("II" little-endian, "MM" big-endian). Every later read in that file
must use the same policy, so callers pick one here and pass it down.
"""

import logging
import struct

from tiffhax.errors import UnknownByteOrder

logger = logging.getLogger(__name__)


class ByteOrder:
    """Unsigned 16-/32-bit reads in a fixed endianness."""
    __slots__ = ('name', 'marker', 'endian', '_u16', '_u32')

    def __init__(self, name: str, marker: bytes, endian: str):
        self.name = name
        self.marker = marker
        self.endian = endian
        self._u16 = struct.Struct(endian + 'H')
        self._u32 = struct.Struct(endian + 'I')

    def uint16(self, data: bytes) -> int:
        return self._u16.unpack(data)[0]

    def uint32(self, data: bytes) -> int:
        return self._u32.unpack(data)[0]

    def __repr__(self) -> str:
        return f'ByteOrder({self.name})'


LITTLE_ENDIAN = ByteOrder('little-endian', b'II', '<')
BIG_ENDIAN = ByteOrder('big-endian', b'MM', '>')


def from_marker(marker: bytes) -> ByteOrder:
    """Select the byte order named by a TIFF header's first two bytes."""
    for order in (LITTLE_ENDIAN, BIG_ENDIAN):
        if marker == order.marker:
            logger.debug("byte order marker %r selects %s", marker, order.name)
            return order
    raise UnknownByteOrder(marker)
