"""Addressable byte regions.

Every piece of an annotated file is a region over ``[start, end)``. Leaf
regions (decoded fields, pixel data, bytes nobody has explained yet) cannot
be broken down further; containers hold an ordered run of child regions
and are refined by splitting new regions into their unexplained parts.
"""

import logging
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from tiffhax.errors import OutOfRange, UnsplittableRegion

logger = logging.getLogger(__name__)


class Region(ABC):
    """Shared contract for anything that covers a byte range of a file."""

    start: int
    end: int

    def contains(self, offset: int) -> bool:
        return self.start <= offset < self.end

    @abstractmethod
    def contains_region(self, start: int, end: int) -> bool:
        """Check whether ``[start, end)`` nests inside this region."""
        ...

    @abstractmethod
    def find(self, offset: int) -> 'Region':
        """Return the most specific region covering ``offset``.

        Raises OutOfRange if ``offset`` is not inside this region.
        """
        ...

    @abstractmethod
    def split(self, start: int, end: int, new_region: 'Region') -> None:
        """Carve ``new_region`` out of ``[start, end)`` of this region."""
        ...

    @property
    def size(self) -> int:
        return self.end - self.start


class LeafRegion(Region):
    """A region that is one indivisible piece.

    ``contains_region`` only accepts sub-ranges whose end lies strictly
    inside the region: an end bound equal to either the region's start or
    its end is rejected, while the start bound may sit on the region's start.
    """

    def contains_region(self, start: int, end: int) -> bool:
        return (self.start <= start < self.end
                and self.start < end < self.end)

    def find(self, offset: int) -> Region:
        if offset < self.start or offset >= self.end:
            raise OutOfRange(f'find offset {offset} outside of {self.kind} '
                             f'region {self.start} to {self.end}')
        return self

    def split(self, start: int, end: int, new_region: Region) -> None:
        raise UnsplittableRegion(f'{self.kind} can not be split')

    @property
    def kind(self) -> str:
        return type(self).__name__.lower()


class Unknown(LeafRegion):
    """Bytes that have not been explained yet."""
    __slots__ = ('start', 'end')

    def __init__(self, start: int, end: int):
        self.start = start
        self.end = end

    def __repr__(self) -> str:
        return f'Unknown({self.start}, {self.end})'


class ImageData(LeafRegion):
    """An opaque run of pixel data referenced by StripOffsets/TileOffsets."""
    __slots__ = ('start', 'end', 'field_id')

    def __init__(self, start: int, end: int, field_id: Optional[int] = None):
        self.start = start
        self.end = end
        self.field_id = field_id

    def __repr__(self) -> str:
        return f'ImageData({self.start}, {self.end})'


class Container(Region):
    """A region made of contiguous child regions, e.g. a file or a directory.

    A new container is one Unknown child spanning all of it. Each split
    replaces part of an Unknown child with the new region.
    """

    def __init__(self, start: int, end: int, name: str = 'container'):
        self.start = start
        self.end = end
        self.name = name
        self._children: List[Region] = [Unknown(start, end)] if end > start else []

    @property
    def children(self) -> Tuple[Region, ...]:
        return tuple(self._children)

    def contains_region(self, start: int, end: int) -> bool:
        return self.start <= start < end <= self.end

    def _child_index(self, offset: int) -> int:
        for i, child in enumerate(self._children):
            if child.contains(offset):
                return i
        raise OutOfRange(f'offset {offset} outside of {self.name} '
                         f'region {self.start} to {self.end}')

    def find(self, offset: int) -> Region:
        if not self.contains(offset):
            raise OutOfRange(f'find offset {offset} outside of {self.name} '
                             f'region {self.start} to {self.end}')
        return self._children[self._child_index(offset)].find(offset)

    def split(self, start: int, end: int, new_region: Region) -> None:
        if not self.contains_region(start, end):
            raise OutOfRange(f'range {start} to {end} outside of {self.name} '
                             f'region {self.start} to {self.end}')
        if new_region.start != start or new_region.end != end:
            raise OutOfRange(f'new region {new_region.start} to {new_region.end} '
                             f'does not match split range {start} to {end}')

        i = self._child_index(start)
        child = self._children[i]

        if isinstance(child, Container):
            if end > child.end:
                raise UnsplittableRegion(
                    f'range {start} to {end} runs past {child!r} in {self.name}')
            child.split(start, end, new_region)
            return

        if not isinstance(child, Unknown) or end > child.end:
            raise UnsplittableRegion(
                f'range {start} to {end} overlaps already explained '
                f'{child!r} in {self.name}')

        pieces: List[Region] = []
        if child.start < start:
            pieces.append(Unknown(child.start, start))
        pieces.append(new_region)
        if end < child.end:
            pieces.append(Unknown(end, child.end))
        self._children[i:i + 1] = pieces
        logger.debug("%s: split %d to %d into %r", self.name, start, end, new_region)

    def unknown(self) -> List[Unknown]:
        """All still-unexplained spans, depth first."""
        result = []
        for child in self._children:
            if isinstance(child, Unknown):
                result.append(child)
            elif isinstance(child, Container):
                result.extend(child.unknown())
        return result

    def __repr__(self) -> str:
        return f'Container({self.name!r}, {self.start}, {self.end})'
