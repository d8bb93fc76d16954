"""tiffhax -- TIFF directory entry decoder and byte-range annotator."""

__version__ = "0.1.0"

from tiffhax.byteorder import BIG_ENDIAN, LITTLE_ENDIAN, ByteOrder, from_marker
from tiffhax.errors import (
    DecodeError,
    IOFailure,
    NotATiff,
    OutOfRange,
    RegionError,
    ShortRead,
    TiffHaxError,
    UnknownByteOrder,
    UnknownType,
    UnsplittableRegion,
)
from tiffhax.field import Field, decode_field, read_field_at
from tiffhax.models import Data, Offset
from tiffhax.region import Container, ImageData, LeafRegion, Region, Unknown
from tiffhax.directory import Directory, TIFFHeader, read_directory, read_header

__all__ = [
    "__version__",
    "ByteOrder",
    "BIG_ENDIAN",
    "LITTLE_ENDIAN",
    "from_marker",
    "TiffHaxError",
    "DecodeError",
    "ShortRead",
    "IOFailure",
    "UnknownType",
    "UnknownByteOrder",
    "NotATiff",
    "RegionError",
    "OutOfRange",
    "UnsplittableRegion",
    "Field",
    "Offset",
    "Data",
    "decode_field",
    "read_field_at",
    "Region",
    "LeafRegion",
    "Unknown",
    "ImageData",
    "Container",
    "TIFFHeader",
    "Directory",
    "read_header",
    "read_directory",
]
