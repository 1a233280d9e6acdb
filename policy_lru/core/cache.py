"""Policy-driven LRU cache."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable, Generic, Hashable, Iterator, Optional, TypeVar

from .ordering import Entry, RecencyList

if TYPE_CHECKING:
    from ..config import CacheConfig
    from ..ports.change_handler import ChangeHandler
    from ..ports.eviction_policy import EvictionPolicy

logger = logging.getLogger(__name__)

K = TypeVar('K', bound=Hashable)
V = TypeVar('V')


class OrderedCache(Generic[K, V]):
    """LRU cache whose eviction rule is supplied by an EvictionPolicy.

    Entries are kept in recency order: every add() and every successful
    get() moves the entry to the front. After each add() the cache runs an
    eviction sweep, asking the policy about the least recently used entry
    until the policy declines or the cache is empty.

    The cache is not safe for concurrent access, and policies and handlers
    must not call back into the cache that invoked them.

    Attributes:
        policy: Eviction policy. If None, nothing is ever evicted and
            eviction is left to the caller.
        handler: Optional handler notified of every addition and removal.
        default: Value returned on a miss and passed as the old value when
            a new key is added.
    """

    def __init__(
        self,
        policy: Optional[EvictionPolicy[K, V]] = None,
        handler: Optional[ChangeHandler[K, V]] = None,
        *,
        default: Optional[V] = None,
    ):
        self.policy = policy
        self.handler = handler
        self.default = default
        # Materialized on first write, torn down by clear().
        self._order: Optional[RecencyList] = None
        self._index: Optional[dict[K, Entry]] = None

    @classmethod
    def from_config(
        cls,
        config: CacheConfig,
        handler: Optional[ChangeHandler[K, V]] = None,
        *,
        default: Optional[V] = None,
        sizer: Optional[Callable[[Any], int]] = None,
    ) -> OrderedCache[K, V]:
        """Create a cache from a CacheConfig.

        A policy that also tracks changes (such as SizeLimitPolicy) is
        installed as a handler too, ahead of any logging handler and the
        explicit ``handler``.

        Args:
            config: Validated cache configuration
            handler: Extra handler to notify
            default: Miss value for the new cache
            sizer: Value size function for a ``max_size`` config

        Returns:
            A new, empty cache
        """
        from ..adapters.handlers import HandlerChain, LoggingHandler
        from ..ports.change_handler import ChangeHandler

        policy = config.create_policy(sizer)
        handlers: list[ChangeHandler] = []
        if policy is not None and isinstance(policy, ChangeHandler):
            handlers.append(policy)
        if config.log_events:
            handlers.append(LoggingHandler())
        if handler is not None:
            handlers.append(handler)

        chained: Optional[ChangeHandler] = None
        if len(handlers) == 1:
            chained = handlers[0]
        elif handlers:
            chained = HandlerChain(*handlers)

        logger.debug(f"Creating cache from {config!r} with {len(handlers)} handler(s)")
        return cls(policy, chained, default=default)

    def _materialize(self) -> None:
        self._order = RecencyList()
        self._index = {}

    def add(self, key: K, value: V) -> None:
        """Add or update a key, then run an eviction sweep."""
        if self._index is None:
            self._materialize()
        handler = self.handler
        entry = self._index.get(key)
        if entry is not None:
            self._order.move_to_front(entry)
            old = entry.value
            entry.value = value
            if handler is not None:
                handler.added(key, old, value, True)
        else:
            self._index[key] = self._order.push_front(key, value)
            if handler is not None:
                handler.added(key, self.default, value, False)
        self.evict()

    def get(self, key: K) -> tuple[Optional[V], bool]:
        """Look up a key, marking it most recently used on a hit.

        Returns:
            ``(value, True)`` on a hit, ``(default, False)`` on a miss
        """
        if self._index is None:
            return self.default, False
        entry = self._index.get(key)
        if entry is None:
            return self.default, False
        self._order.move_to_front(entry)
        return entry.value, True

    def remove(self, key: K) -> bool:
        """Remove a key from the cache.

        Returns:
            True if the key was present
        """
        if self._index is None:
            return False
        entry = self._index.get(key)
        if entry is None:
            return False
        self._remove_entry(entry)
        return True

    def evict(self) -> int:
        """Remove the oldest entry for as long as the policy says so.

        The sweep stops the first time the policy declines the current
        oldest entry, or when the cache is empty. It never skips past a
        declined entry to look at newer ones.

        Returns:
            Number of entries removed
        """
        policy = self.policy
        if policy is None or self._order is None:
            return 0

        evicted = 0
        entry = self._order.back()
        while entry is not None:
            if not policy.evict(entry.key, entry.value, len(self._order)):
                break
            logger.debug(f"Evicting {entry.key!r}")
            self._remove_entry(entry)
            evicted += 1
            entry = self._order.back()

        if evicted:
            logger.debug(f"Eviction sweep removed {evicted} entries, {len(self)} left")
        return evicted

    def clear(self) -> None:
        """Remove every entry, notifying the handler for each one."""
        if self._index is None:
            return
        for entry in list(self._index.values()):
            self._remove_entry(entry)
        self._order = None
        self._index = None

    def _remove_entry(self, entry: Entry) -> None:
        # Every removal path goes through here.
        self._order.remove(entry)
        del self._index[entry.key]
        if self.handler is not None:
            self.handler.removed(entry.key, entry.value)

    def __len__(self) -> int:
        if self._order is None:
            return 0
        return len(self._order)

    def __contains__(self, key: object) -> bool:
        """Check membership without touching the key."""
        return self._index is not None and key in self._index

    def __iter__(self) -> Iterator[K]:
        """Iterate keys from most to least recently used."""
        if self._order is None:
            return iter(())
        return iter([entry.key for entry in self._order])

    def __repr__(self) -> str:
        return f"{type(self).__name__}(len={len(self)}, policy={self.policy!r})"
