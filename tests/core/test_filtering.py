"""Tests for filter, reject and uniq.

Critical Invariants:
- filter and reject partition the input
- uniq keeps first occurrences only and is idempotent
- inputs are never mutated
"""

from collections import Counter

from hypothesis import given
from hypothesis import strategies as st

from underbar import filter, reject, uniq
from underbar.core.equality import strict_equal

values = st.one_of(st.integers(min_value=-5, max_value=5), st.booleans(), st.text(max_size=2))


def is_even(n):
    return n % 2 == 0


def test_filter_keeps_passing_values_in_order():
    assert filter([1, 2, 3, 4, 5, 6], is_even) == [2, 4, 6]


def test_filter_over_mapping_returns_values():
    assert sorted(filter({"a": 1, "b": 2, "c": 4}, is_even)) == [2, 4]


def test_filter_uses_truthiness():
    assert filter([0, 1, "", "x", None, [], [0]], lambda v: v) == [1, "x", [0]]


def test_filter_does_not_mutate_input():
    seq = [1, 2, 3]
    result = filter(seq, lambda v: True)

    assert seq == [1, 2, 3]
    assert result is not seq


def test_reject_keeps_failing_values():
    assert reject([1, 2, 3, 4, 5, 6], is_even) == [1, 3, 5]


@given(s=st.lists(values), threshold=st.integers(min_value=-5, max_value=5))
def test_filter_and_reject_partition(s, threshold):
    """PROPERTY: filter and reject outputs together are a permutation of s."""

    def predicate(v):
        return isinstance(v, int) and v > threshold

    kept = filter(s, predicate)
    dropped = reject(s, predicate)

    def keyed(items):
        return Counter((type(v), v) for v in items)

    assert keyed(kept + dropped) == keyed(s)
    assert all(predicate(v) for v in kept)
    assert not any(predicate(v) for v in dropped)


def test_uniq_keeps_first_occurrences():
    assert uniq([1, 2, 1, 3, 2, 4]) == [1, 2, 3, 4]


def test_uniq_strict_equality_keeps_cross_type_values():
    result = uniq([1, True, 1.0, 1, "1"])

    assert [type(v) for v in result] == [int, bool, float, str]


def test_uniq_handles_unhashable_values():
    assert uniq([[1], [1], {"a": 1}, {"a": 1}, [2]]) == [[1], {"a": 1}, [2]]


def test_uniq_keeps_every_nan():
    """NaN is never strictly equal to itself, not even the same object."""
    nan = float("nan")

    result = uniq([nan, nan, 1, 1])

    assert len(result) == 3
    assert result[0] is nan and result[1] is nan
    assert result[2] == 1


def test_uniq_does_not_mutate_input():
    seq = [3, 3, 1]
    uniq(seq)
    assert seq == [3, 3, 1]


@given(s=st.lists(values))
def test_uniq_distinct_and_idempotent(s):
    """PROPERTY: uniq has no strictly-equal pair and uniq(uniq(s)) == uniq(s)."""
    once = uniq(s)

    for i, a in enumerate(once):
        for b in once[i + 1 :]:
            assert not strict_equal(a, b)

    twice = uniq(once)
    assert [(type(v), v) for v in twice] == [(type(v), v) for v in once]
