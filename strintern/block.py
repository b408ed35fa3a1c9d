"""Page-based bump allocator with snapshot and restore support."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

# Sizes of the bookkeeping fields, used when reporting allocated bytes.
_WORD_SIZE = 8
_HEADER_SIZE = 5 * _WORD_SIZE


class BlockError(Exception):
    """Raised when an allocation or a restore cannot be carried out."""


@dataclass(frozen=True)
class BlockSnapshot:
    """A position in a block: number of pages and offset into the last one."""

    count: int
    offset: int


class Block:
    """Hands out chunks of fixed-size pages, adding pages as needed."""

    def __init__(self, page_size: int) -> None:
        if page_size <= 0:
            raise BlockError("page size must be positive")
        self.page_size = page_size
        self._pages: list[bytearray] = [bytearray(page_size)]
        self._offsets: list[int] = [0]
        self._capacity = 1

    @property
    def page_count(self) -> int:
        """Number of pages currently held."""
        return len(self._pages)

    def _add_page(self) -> None:
        if len(self._pages) == self._capacity:
            self._capacity *= 2
        self._pages.append(bytearray(self.page_size))
        self._offsets.append(0)

    def alloc(self, size: int) -> memoryview:
        """Reserve ``size`` bytes and return a writable view of them."""
        if size < 0:
            raise BlockError("allocation size must not be negative")
        if size > self.page_size:
            raise BlockError(
                f"allocation of {size} bytes exceeds page size {self.page_size}"
            )
        offset = self._offsets[-1]
        if self.page_size - offset < size:
            self._add_page()
            offset = 0
        self._offsets[-1] = offset + size
        return memoryview(self._pages[-1])[offset:offset + size]

    def snapshot(self) -> BlockSnapshot:
        """Record the current allocation position."""
        return BlockSnapshot(len(self._pages), self._offsets[-1])

    def restore(self, snapshot: BlockSnapshot) -> None:
        """Drop every allocation made after ``snapshot`` was taken."""
        count = len(self._pages)
        if snapshot.count <= 0 or snapshot.count > count:
            raise BlockError("snapshot does not belong to this block state")
        if snapshot.count == count and self._offsets[-1] < snapshot.offset:
            raise BlockError("snapshot is ahead of the current position")
        del self._pages[snapshot.count:]
        del self._offsets[snapshot.count:]
        self._offsets[-1] = snapshot.offset

    def allocated_bytes(self) -> int:
        """Total bytes held by the allocator, bookkeeping included."""
        return (
            len(self._pages) * self.page_size
            + 2 * self._capacity * _WORD_SIZE
            + _HEADER_SIZE
        )

    def used(self) -> Iterator[memoryview]:
        """Yield the occupied part of each page, in allocation order."""
        for page, offset in zip(self._pages, self._offsets):
            yield memoryview(page)[:offset]