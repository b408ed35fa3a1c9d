"""Repository of interned strings, each identified by a small integer ID."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Iterator, Optional

from strintern.block import Block, BlockError, BlockSnapshot
from strintern.tree import RedBlackTree
from strintern.unsigned import unsigned_string

PAGE_SIZE = 4096
DEFAULT_HASH_SEED = 5381

_UINT32_MASK = 0xFFFFFFFF
_UNSIGNED_TAG = 0x80000000
_HASH_SIZE = 4
# Size of one index record: hash, id, string pointer, two tree links, chain link.
_NODE_SIZE = 40
# Size of the repository header, with and without the inline-number buffer.
_HEADER_SIZE = 80
_HEADER_SIZE_INLINE = 96


class InternError(Exception):
    """Raised when a string cannot be interned or a restore fails."""


@dataclass(frozen=True)
class StringsSnapshot:
    """A position of a repository that it can later be restored to."""

    strings: BlockSnapshot
    hashes: BlockSnapshot
    index: BlockSnapshot
    total: int


@dataclass
class _Entry:
    id: int
    hash: int
    string: str


def _is_small_unsigned(data: bytes) -> bool:
    if not 1 <= len(data) <= 10:
        return False
    if not all(0x30 <= b <= 0x39 for b in data):
        return False
    return len(data) < 10 or data[0] <= ord("2")


def _encode(string: str) -> bytes:
    data = string.encode("utf-8")
    if b"\0" in data:
        raise ValueError("strings must not contain NUL characters")
    return data


class Strings:
    """Assigns each distinct string a stable ID, starting at 1."""

    def __init__(
        self, page_size: int = PAGE_SIZE, inline_unsigned: bool = False
    ) -> None:
        try:
            self._hashes = Block(page_size)
            self._strings = Block(page_size)
            self._index = Block(page_size)
        except BlockError as exc:
            raise InternError(str(exc)) from exc
        self.page_size = page_size
        self.inline_unsigned = inline_unsigned
        self._hash_map = RedBlackTree()
        self._entries: list[_Entry] = []
        self._hash_seed = DEFAULT_HASH_SEED

    @property
    def hash_seed(self) -> int:
        """The seed the string hash starts from."""
        return self._hash_seed

    def set_hash_seed(self, seed: int) -> None:
        """Change the hash seed; only allowed while the repository is empty."""
        if not 0 <= seed <= _UINT32_MASK:
            raise ValueError(f"{seed} is not a 32-bit unsigned integer")
        if self._entries:
            raise InternError("the hash seed must be set before adding strings")
        self._hash_seed = seed

    def _hash(self, data: bytes) -> int:
        value = self._hash_seed
        for byte in data:
            char = byte if byte < 0x80 else byte + 0xFFFFFF00
            value = (value * 33 + char) & _UINT32_MASK
        return value

    def _inline_id(self, data: bytes) -> Optional[int]:
        if self.inline_unsigned and _is_small_unsigned(data):
            number = int(data)
            if number < _UNSIGNED_TAG:
                return number | _UNSIGNED_TAG
        return None

    def _create_entry(self, value: int, string: str, data: bytes) -> _Entry:
        new_id = len(self._entries) + 1
        limit = _UNSIGNED_TAG if self.inline_unsigned else _UINT32_MASK + 1
        if new_id >= limit:
            raise InternError("no more string IDs are available")
        try:
            self._index.alloc(_NODE_SIZE)
            self._strings.alloc(len(data) + 1)[:] = data + b"\0"
            self._hashes.alloc(_HASH_SIZE)[:] = struct.pack("=I", value)
        except BlockError as exc:
            raise InternError(str(exc)) from exc
        entry = _Entry(new_id, value, string)
        self._entries.append(entry)
        return entry

    def intern(self, string: str) -> int:
        """Return the ID of ``string``, adding it if it is new."""
        data = _encode(string)
        inline = self._inline_id(data)
        if inline is not None:
            return inline
        value = self._hash(data)
        bucket = self._hash_map.search(value)
        if bucket is None:
            entry = self._create_entry(value, string, data)
            self._hash_map.insert(value, [entry])
            return entry.id
        for entry in bucket:
            if entry.string == string:
                return entry.id
        entry = self._create_entry(value, string, data)
        bucket.append(entry)
        return entry.id

    def lookup(self, string: str) -> Optional[int]:
        """Return the ID of ``string``, or None if it was never interned."""
        data = _encode(string)
        inline = self._inline_id(data)
        if inline is not None:
            return inline
        bucket = self._hash_map.search(self._hash(data))
        if bucket is None:
            return None
        for entry in bucket:
            if entry.string == string:
                return entry.id
        return None

    def lookup_id(self, id: int) -> Optional[str]:
        """Return the string with ID ``id``, or None if there is none."""
        if self.inline_unsigned and id & _UNSIGNED_TAG:
            return unsigned_string(id & ~_UNSIGNED_TAG & _UINT32_MASK)
        if id <= 0 or id > len(self._entries):
            return None
        entry = self._entries[id - 1]
        bucket = self._hash_map.search(entry.hash) or []
        for candidate in bucket:
            if candidate.id == id:
                return candidate.string
        return None

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        """Yield the stored strings in ID order, read back from storage."""
        for region in self._strings.used():
            raw = bytes(region)
            if not raw:
                continue
            for piece in raw[:-1].split(b"\0"):
                yield piece.decode("utf-8")

    def __contains__(self, string: object) -> bool:
        if not isinstance(string, str):
            return False
        try:
            return self.lookup(string) is not None
        except ValueError:
            return False

    def snapshot(self) -> StringsSnapshot:
        """Record the current state so that it can be restored later."""
        return StringsSnapshot(
            strings=self._strings.snapshot(),
            hashes=self._hashes.snapshot(),
            index=self._index.snapshot(),
            total=len(self._entries),
        )

    def restore(self, snapshot: StringsSnapshot) -> None:
        """Remove every string added after ``snapshot`` was taken."""
        if snapshot.index == self._index.snapshot():
            return
        if snapshot.total > len(self._entries):
            raise InternError("snapshot is ahead of the current state")
        try:
            self._strings.restore(snapshot.strings)
            self._hashes.restore(snapshot.hashes)
            self._index.restore(snapshot.index)
        except BlockError as exc:
            raise InternError(str(exc)) from exc
        del self._entries[snapshot.total:]
        self._hash_map.clear()
        for entry in self._entries:
            bucket = self._hash_map.search(entry.hash)
            if bucket is None:
                self._hash_map.insert(entry.hash, [entry])
            else:
                bucket.append(entry)

    def allocated_bytes(self) -> int:
        """Total bytes held by the repository, bookkeeping included."""
        header = _HEADER_SIZE_INLINE if self.inline_unsigned else _HEADER_SIZE
        return (
            self._strings.allocated_bytes()
            + self._hashes.allocated_bytes()
            + self._index.allocated_bytes()
            + header
        )