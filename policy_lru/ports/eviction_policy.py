"""Eviction policy port - decides when the oldest entry must go."""

from __future__ import annotations

from typing import Hashable, Protocol, TypeVar, runtime_checkable

K = TypeVar('K', bound=Hashable, contravariant=True)
V = TypeVar('V', contravariant=True)


@runtime_checkable
class EvictionPolicy(Protocol[K, V]):
    """Port for cache eviction decisions."""

    def evict(self, key: K, value: V, count: int) -> bool:
        """Decide whether the given entry should be evicted.

        The cache only ever asks about its least recently used entry.
        Immediately after this returns True, the entry is removed from the
        cache that asked.

        Args:
            key: Key of the least recently used entry
            value: Value of the least recently used entry
            count: Number of entries in the cache before removal

        Returns:
            True if the entry should be evicted
        """
        ...
