"""Function adapters - use plain callables as policies or handlers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable


@dataclass(frozen=True, slots=True)
class PolicyFunc:
    """EvictionPolicy that forwards to ``fn(key, value, count)``.

    Example:
        >>> cache = OrderedCache(PolicyFunc(lambda k, v, n: n > 10))
    """
    fn: Callable[[Any, Any, int], bool]

    def evict(self, key: Any, value: Any, count: int) -> bool:
        return self.fn(key, value, count)


@dataclass(frozen=True, slots=True)
class AddedFunc:
    """ChangeHandler that forwards additions to ``fn``; removals are ignored."""
    fn: Callable[[Any, Any, Any, bool], None]

    def added(self, key: Any, old: Any, new: Any, updated: bool) -> None:
        self.fn(key, old, new, updated)

    def removed(self, key: Any, value: Any) -> None:
        pass


@dataclass(frozen=True, slots=True)
class RemovedFunc:
    """ChangeHandler that forwards removals to ``fn``; additions are ignored."""
    fn: Callable[[Any, Any], None]

    def added(self, key: Any, old: Any, new: Any, updated: bool) -> None:
        pass

    def removed(self, key: Any, value: Any) -> None:
        self.fn(key, value)
