"""Measure the memory overhead of interning many unique strings."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Optional, Sequence

from strintern.strings import Strings

DEFAULT_COUNT = 5_000_000


@dataclass(frozen=True)
class BenchmarkResult:
    """Outcome of one benchmark run."""

    count: int
    string_bytes: int
    allocated_bytes: int

    @property
    def overhead(self) -> int:
        """Bytes allocated beyond the string data itself."""
        return self.allocated_bytes - self.string_bytes

    @property
    def overhead_per_string(self) -> float:
        """Average overhead for each interned string."""
        return self.overhead / self.count


def run(count: int = DEFAULT_COUNT) -> BenchmarkResult:
    """Intern ``count`` unique strings and report the allocation overhead."""
    if count < 1:
        raise ValueError("count must be at least 1")
    strings = Strings()
    string_bytes = 0
    for expected in range(1, count + 1):
        text = f"x{expected}"
        string_bytes += len(text)
        got = strings.intern(text)
        if got != expected:
            raise RuntimeError(f"interning {text!r} gave ID {got}, not {expected}")
    # Each stored string also carries a terminating byte.
    string_bytes += count
    return BenchmarkResult(count, string_bytes, strings.allocated_bytes())


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the benchmark from the command line."""
    parser = argparse.ArgumentParser(
        description="Measure the overhead of interning unique strings."
    )
    parser.add_argument(
        "--count",
        type=int,
        default=DEFAULT_COUNT,
        help="number of unique strings to intern",
    )
    args = parser.parse_args(argv)
    if args.count < 1:
        parser.error("count must be at least 1")
    result = run(args.count)
    print(f"Interned {result.count} unique strings")
    print(f"Overhead per string: {result.overhead_per_string:.1f} bytes")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())