"""Caching for calendar facts.

Calendar facts such as the length of an Umm al-Qura year never change once
looked up, and the same few years are asked about over and over while
dates are added and compared.

This module is not part of the public API.
"""

from __future__ import annotations

import functools
from typing import Callable, Hashable, TypeVar

T = TypeVar("T")


def memoize(func: Callable[..., T]) -> Callable[..., T]:
    """Cache a function of hashable positional arguments.

    Failed lookups (raised exceptions) are not cached, so a year outside
    a calendar's tables keeps raising. The cache is exposed as
    ``wrapper.cache`` and emptied with ``wrapper.cache_clear()``.

    Examples:
        >>> @memoize
        ... def year_length(year: int) -> int:
        ...     return 355 if year % 3 == 0 else 354
        >>> year_length(1447)
        354
        >>> year_length.cache
        {(1447,): 354}
    """
    cache: dict[tuple[Hashable, ...], T] = {}

    @functools.wraps(func)
    def wrapper(*args: Hashable) -> T:
        try:
            return cache[args]
        except KeyError:
            value = cache[args] = func(*args)
            return value

    wrapper.cache = cache  # type: ignore[attr-defined]
    wrapper.cache_clear = cache.clear  # type: ignore[attr-defined]
    return wrapper


__all__ = [
    "memoize",
]
