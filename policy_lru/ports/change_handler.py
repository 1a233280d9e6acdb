"""Change handler port - interface for cache add/remove notifications."""

from __future__ import annotations

from typing import Hashable, Protocol, TypeVar, runtime_checkable

K = TypeVar('K', bound=Hashable, contravariant=True)
V = TypeVar('V', contravariant=True)


@runtime_checkable
class ChangeHandler(Protocol[K, V]):
    """Port for observing cache changes.

    Both methods are called synchronously by the cache. Implementations
    must not call back into the cache that notified them.
    """

    def added(self, key: K, old: V, new: V, updated: bool) -> None:
        """Called after a key is added or its value replaced.

        Args:
            key: The key that was written
            old: Previous value, or the cache default for a new key
            new: The value now stored
            updated: True if the key was already present
        """
        ...

    def removed(self, key: K, value: V) -> None:
        """Called after a key is removed, by eviction, remove() or clear()."""
        ...
