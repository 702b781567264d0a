"""Tests for extend and defaults."""

import pytest

from underbar import defaults, extend


def test_extend_later_sources_win():
    assert extend({"a": 1}, {"a": 2, "b": 3}) == {"a": 2, "b": 3}


def test_extend_mutates_and_returns_target():
    target = {"a": 1}
    result = extend(target, {"b": 2}, {"c": 3})

    assert result is target
    assert target == {"a": 1, "b": 2, "c": 3}


def test_extend_multiple_sources_override_in_order():
    assert extend({}, {"k": 1}, {"k": 2}, {"k": 3}) == {"k": 3}


def test_extend_without_sources_is_noop():
    target = {"a": 1}
    assert extend(target) == {"a": 1}


def test_extend_copies_falsy_values():
    assert extend({"a": 1}, {"a": None, "b": 0}) == {"a": None, "b": 0}


def test_defaults_fills_only_missing_keys():
    assert defaults({"a": 1}, {"a": 2, "b": 3}) == {"a": 1, "b": 3}


def test_defaults_earlier_sources_win():
    assert defaults({}, {"k": "first"}, {"k": "second"}) == {"k": "first"}


def test_defaults_keeps_falsy_and_none_values():
    """A stored None or falsy value counts as present.

    Why: absence is strictly "key not in target", not "value is falsy".
    """
    target = {"zero": 0, "empty": "", "none": None, "false": False}

    defaults(target, {"zero": 1, "empty": "x", "none": "y", "false": True, "new": 5})

    assert target == {"zero": 0, "empty": "", "none": None, "false": False, "new": 5}


def test_defaults_mutates_and_returns_target():
    target = {}
    assert defaults(target, {"a": 1}) is target


@pytest.mark.parametrize("merge", [extend, defaults])
def test_merge_rejects_non_mapping_sources(merge):
    with pytest.raises(TypeError, match="must be mappings"):
        merge({}, [("a", 1)])


def test_extend_does_not_mutate_sources():
    source = {"a": 1}
    extend({"b": 2}, source)
    assert source == {"a": 1}
