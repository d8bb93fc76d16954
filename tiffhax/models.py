"""Follow-up descriptors returned alongside a decoded field."""

from dataclasses import dataclass
from typing import Optional

from tiffhax.constants import DATA_TYPE_SIZES
from tiffhax.region import ImageData


@dataclass(frozen=True)
class Offset:
    """An entry whose value is the absolute position of out-of-line data.

    The walker should seek to ``to`` and decode ``count`` elements of type
    ``dtype`` there. When ``is_data`` is set the target belongs to pixel
    data (StripOffsets/TileOffsets) rather than another metadata array.
    """
    dtype: int
    count: int
    field_id: int
    from_: int
    to: int
    is_data: bool = False

    @property
    def size(self) -> int:
        """Byte length of the pointed-to array."""
        return self.count * DATA_TYPE_SIZES[self.dtype]

    @property
    def end(self) -> int:
        return self.to + self.size


@dataclass(frozen=True)
class Data:
    """A single pixel-data blob whose position is stored inline."""
    start: int

    def region(self, length: int, field_id: Optional[int] = None) -> ImageData:
        """Build the pixel-data region once its byte length is known."""
        return ImageData(self.start, self.start + length, field_id)
