"""Tests for strict equality and StrictSet."""

import pytest

from underbar.core.equality import StrictSet, strict_equal


@pytest.mark.parametrize(
    ("a", "b", "expected"),
    [
        (1, 1, True),
        ("x", "x", True),
        (1, 1.0, False),
        (1, True, False),
        (0, False, False),
        ("1", 1, False),
        (None, None, True),
        ([1, 2], [1, 2], True),
        (float("nan"), float("nan"), False),
    ],
)
def test_strict_equal(a, b, expected):
    assert strict_equal(a, b) is expected


def test_strict_set_distinguishes_types():
    values = StrictSet([1, "1"])

    assert 1 in values
    assert "1" in values
    assert True not in values
    assert 1.0 not in values


def test_strict_set_supports_unhashable_values():
    values = StrictSet([[1, 2], {"a": 1}, (1, [2])])

    assert [1, 2] in values
    assert {"a": 1} in values
    assert (1, [2]) in values
    assert [2, 1] not in values
    assert len(values) == 3


def test_strict_set_add_is_idempotent():
    values = StrictSet()
    values.add([1])
    values.add([1])
    values.add(5)
    values.add(5)

    assert len(values) == 2


def test_strict_set_never_contains_nan():
    """Same NaN object is still not a member, matching strict_equal(nan, nan)."""
    nan = float("nan")
    values = StrictSet([nan])

    assert nan not in values
    values.add(nan)
    assert len(values) == 2
