# strintern

`strintern` keeps a repository of unique strings. Each string gets a small
integer ID. IDs start at 1 and go up by one for each new string, so they are
cheap to store and compare. Given an ID, you can get its string back.

## Interning strings

```python
from strintern.strings import Strings

strings = Strings()
apple = strings.intern("apple")   # 1
banana = strings.intern("banana") # 2
strings.intern("apple")           # 1 again; the repository is unchanged

strings.lookup("banana")          # 2
strings.lookup("durian")          # None
strings.lookup_id(apple)          # "apple"
strings.lookup_id(99)             # None
len(strings)                      # 2
"apple" in strings                # True
```

Iterating over a `Strings` repository yields its strings in the order they
were interned, which is also the order of their IDs.

Strings are stored as UTF-8 and must not contain NUL characters; `intern` and
`lookup` raise `ValueError` for such strings.

`Strings(page_size=4096, inline_unsigned=False)` takes the size of the storage
pages and whether to inline small numbers (see below). The hash seed can be
changed with `set_hash_seed` and read back from `hash_seed`. Changing it is
allowed only while the repository is still empty. Failures such as this, or
running out of IDs, are raised as `InternError`.

With `inline_unsigned` enabled, a decimal string of an unsigned integer below
2³¹ is not stored at all. Its value is encoded in the ID (with the top bit
set), and `lookup_id` rebuilds the text from the ID. Without it, IDs may go up
to 2³²−1.

## Snapshots

A snapshot records the current state of a repository. Restoring it removes
every string added after the snapshot was taken:

```python
snap = strings.snapshot()
strings.intern("cherry")
strings.restore(snap)
"cherry" in strings               # False
```

Restoring a snapshot that is ahead of the current state raises `InternError`.

`allocated_bytes()` reports the memory the repository has reserved, including
its bookkeeping overhead.

## Reordering by frequency

`StringsFrequency` counts how often each ID is used. `optimize` then builds a
new repository in which the most frequently used string has ID 1, the next
most frequent has ID 2, and so on. Ties keep the order of the original IDs.

```python
from strintern.optimize import StringsFrequency, optimize

frequency = StringsFrequency()
for word in ["b", "a", "b", "c", "b", "a"]:
    frequency.add(strings.intern(word))

frequency.count(strings.lookup("b"))  # 3
optimized = optimize(strings, frequency)
optimized.lookup("b")                 # 1
```

`add` ignores ID 0 and, when the tracker was made with
`inline_unsigned=True`, inlined number IDs. `ranked()` returns the
`(id, count)` pairs in the order `optimize` uses, and `max_id` is the highest
ID tracked.

Strings that were never counted are left out of the optimized repository. Call
`frequency.add_all(strings)` first to make sure every string is kept. If the
tracker holds an ID the repository does not have, `optimize` raises
`InternError`.

## Lower-level pieces

- `strintern.block.Block`: a page-based bump allocator. `alloc(size)` returns a
  writable `memoryview`, `snapshot()` and `restore()` roll allocations back,
  `used()` yields the occupied part of each page, and `allocated_bytes()`
  reports its size. Errors are raised as `BlockError`. This is the storage
  layer of the repository.
- `strintern.tree.RedBlackTree`: a left-leaning red-black tree with `insert`,
  `search`, `clear`, `len()`, `in` and in-order iteration over its keys.
  Inserting a key that is already present raises `KeyError`. It is used as the
  hash index.
- `strintern.unsigned.unsigned_string`: formats a 32-bit unsigned integer as
  decimal text.

## Benchmark

```
strintern-benchmark
strintern-benchmark --count 100000
```

This interns `--count` unique strings (5,000,000 by default) and prints the
memory overhead per string. The same measurement is available in code as
`strintern.benchmark.run(count)`, which returns a `BenchmarkResult` with
`overhead` and `overhead_per_string`.

## Development

```
pip install -e .[test]
pytest
```