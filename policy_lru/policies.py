"""Built-in eviction policies."""

from __future__ import annotations

import logging
from typing import Any, Callable

from .exceptions import ValidationError

logger = logging.getLogger(__name__)


def _check_bound(value: Any, field: str) -> int:
    # bool is an int subclass but never a sensible bound
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{field} must be an integer, got {value!r}", field=field)
    if value < 0:
        raise ValidationError(f"{field} must be >= 0, got {value}", field=field)
    return value


class MaxCountPolicy:
    """Evicts the oldest entry whenever the cache holds more than ``limit`` keys."""

    __slots__ = ('limit',)

    def __init__(self, limit: int):
        self.limit = _check_bound(limit, "max_count")

    def evict(self, key: Any, value: Any, count: int) -> bool:
        return count > self.limit

    def __repr__(self) -> str:
        return f"MaxCountPolicy({self.limit})"


def max_count(limit: int) -> MaxCountPolicy:
    """Return a policy bounding the cache to ``limit`` entries."""
    return MaxCountPolicy(limit)


class SizeLimitPolicy:
    """Bounds the aggregate size of the values held in a cache.

    This is both an EvictionPolicy and a ChangeHandler: the running total is
    kept up to date from ``added``/``removed`` notifications, so the same
    instance must be installed as the cache's policy and as (part of) its
    handler:

        policy = SizeLimitPolicy(100)
        cache = OrderedCache(policy, policy)

    Args:
        max_size: Largest total size allowed before eviction kicks in
        sizer: Maps a value to its size (defaults to ``len``)
    """

    def __init__(self, max_size: int, sizer: Callable[[Any], int] = len):
        self.max_size = _check_bound(max_size, "max_size")
        self.sizer = sizer
        self.total_size = 0

    def evict(self, key: Any, value: Any, count: int) -> bool:
        return self.total_size > self.max_size

    def added(self, key: Any, old: Any, new: Any, updated: bool) -> None:
        # Size both values first so a failing sizer leaves the total untouched
        delta = self.sizer(new)
        if updated:
            delta -= self.sizer(old)
        self.total_size += delta

    def removed(self, key: Any, value: Any) -> None:
        self.total_size -= self.sizer(value)
        logger.debug(f"Released {key!r}, total size is now {self.total_size}")

    def __repr__(self) -> str:
        return f"SizeLimitPolicy(max_size={self.max_size}, total_size={self.total_size})"
