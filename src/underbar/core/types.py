"""Core type definitions for Underbar."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from enum import Enum
from typing import Any, Final, Literal

type Collection[T] = Sequence[T] | Mapping[Any, T]
"""Either shape a traversal accepts: an ordered sequence or a keyed mapping."""

type Iterator = Callable[[Any, Any, Any], Any]
"""Per-element callback for `each`: (value, key, collection) -> ignored."""

type Predicate = Callable[[Any], Any]
"""Truth test applied to a single value. Only truthiness of the result matters."""

type Reducer = Callable[[Any, Any], Any]
"""Fold step: (accumulator, value) -> new accumulator."""


class _Missing(Enum):
    """Marker for omitted optional arguments.

    Distinct from None so callers can pass None as a real value.
    """

    MISSING = "MISSING"

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final = _Missing.MISSING
"""Sentinel default for arguments whose absence changes behavior."""

type Missing = Literal[_Missing.MISSING]
