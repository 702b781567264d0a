"""Function decorators that own per-wrapper state.

Usage:
    @once
    def initialize() -> Config:
        return load_config()

    @memoize
    def fibonacci(n: int) -> int:
        return n if n < 2 else fibonacci(n - 1) + fibonacci(n - 2)

Each wrapper owns its state exclusively: two wrappers around the same function
never share a once-flag or a memo table.
"""

from __future__ import annotations

import functools
import warnings
from collections.abc import Callable
from typing import Any


def once[**P, R](func: Callable[P, R]) -> Callable[P, R]:
    """Wrap func so it runs on the first call only.

    Later calls return the first result regardless of their arguments.
    The wrapper exposes `called` (bool) for inspection.

    Args:
        func: Function to wrap.

    Returns:
        Wrapper that calls func at most once.
    """
    called = False
    result: Any = None

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        nonlocal called, result
        if not called:
            result = func(*args, **kwargs)
            called = True
            wrapper.called = True  # type: ignore[attr-defined]
        return result  # type: ignore[no-any-return]

    wrapper.called = False  # type: ignore[attr-defined]
    return wrapper


def _first_argument_key(*args: Any, **kwargs: Any) -> str:
    """Default memo key: string form of the first positional argument."""
    if not args:
        raise TypeError("memoize requires at least one positional argument")
    return str(args[0])


def memoize[**P, R](
    func: Callable[P, R],
    hasher: Callable[..., Any] | None = None,
) -> Callable[P, R]:
    """Cache func's results by a key derived from its arguments.

    The default key is str() of the first positional argument, so the wrapper
    is meant for functions of one primitive argument. Pass hasher to build the
    key from all arguments instead. A stored result is reused whenever its key
    is present, including falsy results such as 0, False, "" or None.

    On a method the first positional argument is the receiver, so the default
    key is str(self): every call on one instance shares a single entry and the
    method arguments trigger the ignored-argument warning. Memoize methods with
    a hasher that includes the arguments, e.g. `lambda self, n: (id(self), n)`.

    The memo table is exposed as `wrapper.cache`.

    Args:
        func: Function to wrap.
        hasher: Optional function of the call arguments returning a hashable key.

    Returns:
        Memoizing wrapper.

    Raises:
        TypeError: When called with no positional argument and no hasher.
    """
    memo: dict[Any, Any] = {}
    key_of = hasher or _first_argument_key

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        if hasher is None and (len(args) > 1 or kwargs):
            warnings.warn(
                f"memoize({func.__name__}) keys only on the first argument; "
                f"other arguments do not affect cached results. Pass a hasher to include them.",
                stacklevel=2,
            )
        key = key_of(*args, **kwargs)
        if key not in memo:
            memo[key] = func(*args, **kwargs)
        return memo[key]  # type: ignore[no-any-return]

    wrapper.cache = memo  # type: ignore[attr-defined]
    return wrapper
