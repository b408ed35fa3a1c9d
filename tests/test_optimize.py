import pytest
from hypothesis import given, strategies as st

from strintern.optimize import StringsFrequency, optimize
from strintern.strings import InternError, Strings


def _repo(*words):
    strings = Strings()
    ids = {word: strings.intern(word) for word in words}
    return strings, ids


def test_most_frequent_string_gets_lowest_id():
    strings, ids = _repo("a", "b", "c")
    frequency = StringsFrequency()
    for word, times in (("b", 3), ("c", 2), ("a", 1)):
        for _ in range(times):
            frequency.add(ids[word])
    optimized = optimize(strings, frequency)
    assert optimized.lookup("b") == 1
    assert optimized.lookup("c") == 2
    assert optimized.lookup("a") == 3
    assert list(optimized) == ["b", "c", "a"]


def test_unseen_strings_are_left_out():
    strings, ids = _repo("a", "b", "c")
    frequency = StringsFrequency()
    frequency.add(ids["b"])
    optimized = optimize(strings, frequency)
    assert list(optimized) == ["b"]
    assert optimized.lookup("a") is None


def test_add_all_keeps_every_string():
    strings, ids = _repo("a", "b", "c", "d")
    frequency = StringsFrequency()
    frequency.add(ids["d"])
    frequency.add_all(strings)
    optimized = optimize(strings, frequency)
    assert len(optimized) == len(strings)
    assert optimized.lookup("d") == 1
    assert set(optimized) == set(strings)


def test_ties_keep_id_order():
    strings, _ = _repo("a", "b", "c")
    frequency = StringsFrequency()
    frequency.add_all(strings)
    optimized = optimize(strings, frequency)
    assert list(optimized) == ["a", "b", "c"]


def test_zero_id_is_ignored():
    strings, _ = _repo("a")
    frequency = StringsFrequency()
    frequency.add(0)
    assert frequency.max_id == 0
    assert len(optimize(strings, frequency)) == 0


def test_inlined_ids_are_ignored():
    strings = Strings(inline_unsigned=True)
    number_id = strings.intern("42")
    word_id = strings.intern("word")
    frequency = StringsFrequency(inline_unsigned=True)
    frequency.add(number_id)
    frequency.add(word_id)
    assert frequency.max_id == word_id
    optimized = optimize(strings, frequency)
    assert list(optimized) == ["word"]


def test_unknown_id_raises():
    strings, _ = _repo("a")
    frequency = StringsFrequency()
    frequency.add(5)
    with pytest.raises(InternError):
        optimize(strings, frequency)


def test_out_of_range_id_raises():
    frequency = StringsFrequency()
    with pytest.raises(ValueError):
        frequency.add(-1)
    with pytest.raises(ValueError):
        frequency.add(1 << 32)


def test_adding_after_optimize_updates_order():
    strings, ids = _repo("a", "b")
    frequency = StringsFrequency()
    frequency.add(ids["a"])
    first = optimize(strings, frequency)
    assert first.lookup("a") == 1
    for _ in range(3):
        frequency.add(ids["b"])
    second = optimize(strings, frequency)
    assert second.lookup("b") == 1
    assert second.lookup("a") == 2
    assert frequency.count(ids["b"]) == 3


def test_optimize_keeps_repository_settings():
    strings = Strings(page_size=128, inline_unsigned=True)
    strings.intern("abc")
    frequency = StringsFrequency(inline_unsigned=True)
    frequency.add_all(strings)
    optimized = optimize(strings, frequency)
    assert optimized.page_size == 128
    assert optimized.inline_unsigned is True


@given(
    words=st.lists(
        st.text(alphabet="abcdef", min_size=1, max_size=5),
        min_size=1,
        max_size=20,
        unique=True,
    ),
    picks=st.lists(st.integers(min_value=0, max_value=19), max_size=60),
)
def test_optimized_order_follows_counts(words, picks):
    strings, ids = _repo(*words)
    frequency = StringsFrequency()
    for pick in picks:
        frequency.add(ids[words[pick % len(words)]])
    frequency.add_all(strings)
    optimized = optimize(strings, frequency)
    assert set(optimized) == set(words)
    counts = [frequency.count(ids[word]) for word in optimized]
    assert counts == sorted(counts, reverse=True)
    for word in words:
        assert optimized.lookup_id(optimized.lookup(word)) == word