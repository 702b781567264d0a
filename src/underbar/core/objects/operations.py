"""Object merging: copy keys from source mappings onto a target.

Usage:
    options = {"color": "red"}
    extend(options, {"size": 3}, {"color": "blue"})    # {"color": "blue", "size": 3}
    defaults(options, {"color": "green", "shape": 1})  # keeps color, adds shape
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any

from underbar.core.collection.iteration import each


def _require_mapping(source: Any) -> Mapping[Any, Any]:
    if not isinstance(source, Mapping):
        raise TypeError(f"Merge sources must be mappings, got {type(source).__name__}")
    return source


def extend[M: MutableMapping[Any, Any]](target: M, *sources: Mapping[Any, Any]) -> M:
    """Copy every key of every source onto target.

    Later sources override earlier ones and any pre-existing key on target.

    Args:
        target: Mapping to mutate.
        *sources: Mappings to copy from, in priority order (last wins).

    Returns:
        The same target, mutated.

    Raises:
        TypeError: If any source is not a mapping.
    """

    def assign(value: Any, key: Any, source: Any) -> None:
        target[key] = value

    for source in sources:
        each(_require_mapping(source), assign)
    return target


def defaults[M: MutableMapping[Any, Any]](target: M, *sources: Mapping[Any, Any]) -> M:
    """Fill keys missing from target using the sources.

    A key counts as missing only if it is not in target at all; stored None
    or falsy values are kept. Earlier sources win over later ones.

    Args:
        target: Mapping to mutate.
        *sources: Mappings to copy from, in priority order (first wins).

    Returns:
        The same target, mutated.

    Raises:
        TypeError: If any source is not a mapping.
    """

    def fill(value: Any, key: Any, source: Any) -> None:
        if key not in target:
            target[key] = value

    for source in sources:
        each(_require_mapping(source), fill)
    return target
