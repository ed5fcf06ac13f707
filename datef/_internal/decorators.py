"""Custom decorators for datef.

This module provides decorator utilities for the library:
    - @memoize: Simple memoization decorator

This module is not part of the public API.
"""

from __future__ import annotations

import functools
from typing import Callable, TypeVar, ParamSpec

P = ParamSpec("P")
T = TypeVar("T")


def memoize(func: Callable[P, T]) -> Callable[P, T]:
    """Simple memoization decorator for functions with hashable arguments.

    Results are cached for the lifetime of the process. Used for work
    that depends only on its arguments, such as splitting a layout
    string into chunks.

    Args:
        func: The function to memoize.

    Returns:
        A memoized version of the function.

    Examples:
        >>> @memoize
        ... def expensive_calculation(n: int) -> int:
        ...     return n ** 2
    """
    cache: dict[tuple, T] = {}

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
        key = (args, tuple(sorted(kwargs.items())))
        if key not in cache:
            cache[key] = func(*args, **kwargs)
        return cache[key]

    # Expose cache for testing/introspection
    wrapper._cache = cache  # type: ignore[attr-defined]
    wrapper._clear_cache = cache.clear  # type: ignore[attr-defined]
    return wrapper


__all__ = [
    "memoize",
]
