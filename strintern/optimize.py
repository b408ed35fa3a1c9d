"""Rebuild a string repository so that frequently used strings get low IDs."""

from __future__ import annotations

from strintern.strings import InternError, Strings

_UINT32_MASK = 0xFFFFFFFF
_UNSIGNED_TAG = 0x80000000


class StringsFrequency:
    """Counts how often each string ID has been seen."""

    def __init__(self, inline_unsigned: bool = False) -> None:
        self.inline_unsigned = inline_unsigned
        self._counts: list[int] = []
        self._max_id = 0

    @property
    def max_id(self) -> int:
        """The highest ID that is currently tracked."""
        return self._max_id

    def count(self, id: int) -> int:
        """Return how many times ``id`` has been recorded."""
        if 1 <= id <= self._max_id:
            return self._counts[id - 1]
        return 0

    def _ensure(self, size: int) -> None:
        if len(self._counts) < size:
            self._counts.extend([0] * (size - len(self._counts)))

    def add(self, id: int) -> None:
        """Record one sighting of ``id``; zero and inlined numbers are ignored."""
        if not 0 <= id <= _UINT32_MASK:
            raise ValueError(f"{id} is not a 32-bit unsigned integer")
        if self.inline_unsigned and id & _UNSIGNED_TAG:
            return
        if not id:
            return
        if self._max_id < id:
            self._ensure(id)
            self._max_id = id
        self._counts[id - 1] += 1

    def add_all(self, strings: Strings) -> None:
        """Record one sighting of every ID in ``strings``."""
        total = len(strings)
        self._ensure(total)
        self._max_id = total
        for index in range(total):
            self._counts[index] += 1

    def ranked(self) -> list[tuple[int, int]]:
        """Return ``(id, count)`` pairs, most frequent first, ties by ID."""
        pairs = enumerate(self._counts[: self._max_id], start=1)
        return sorted(pairs, key=lambda pair: -pair[1])


def optimize(strings: Strings, frequency: StringsFrequency) -> Strings:
    """Return a new repository holding the seen strings, most frequent first.

    The most frequently seen string gets ID 1. Strings that were never seen
    are left out.
    """
    optimized = Strings(
        page_size=strings.page_size, inline_unsigned=strings.inline_unsigned
    )
    for id, count in frequency.ranked():
        if not count:
            break
        string = strings.lookup_id(id)
        if string is None:
            raise InternError(f"no string with ID {id} in the repository")
        optimized.intern(string)
    return optimized