"""Exception classes for tiffhax.

Decode errors mean the bytes at hand cannot be turned into a directory
entry and are fatal for that entry. Region errors are answers to a
question ("does this offset/range belong here?") and callers are expected
to try another region rather than abort.
"""

from typing import Optional


class TiffHaxError(Exception):
    """Base exception for all tiffhax errors."""


class DecodeError(TiffHaxError):
    """Raised when bytes cannot be decoded into TIFF structure."""


class ShortRead(DecodeError):
    """Raised when fewer bytes are available than the structure needs."""

    def __init__(self, expected: int, got: int, offset: Optional[int] = None):
        self.expected = expected
        self.got = got
        self.offset = offset
        where = f' at offset {offset}' if offset is not None else ''
        super().__init__(f'short read{where}: got {got} bytes, expected {expected}')


class IOFailure(DecodeError):
    """Raised when the underlying byte source reports an error."""


class UnknownType(DecodeError):
    """Raised when an entry's type code has no known element width."""

    def __init__(self, dtype: int, tag_id: Optional[int] = None):
        self.dtype = dtype
        self.tag_id = tag_id
        super().__init__(f'unknown field type {dtype} for tag {tag_id}')


class UnknownByteOrder(DecodeError):
    """Raised when the header byte-order marker is neither II nor MM."""

    def __init__(self, marker: bytes):
        self.marker = marker
        super().__init__(f'unknown byte order marker {marker!r}')


class NotATiff(DecodeError):
    """Raised when the header magic is not the classic TIFF 42."""


class RegionError(TiffHaxError):
    """Base for region lookup and split failures."""


class OutOfRange(RegionError):
    """Raised when an offset or range falls outside a region."""


class UnsplittableRegion(RegionError):
    """Raised when a split targets a region that cannot be divided."""
