"""Doubly linked recency list backing OrderedCache.

Nodes never leave the cache; this module is an implementation detail.
"""

from __future__ import annotations

from typing import Any, Iterator, Optional


class Entry:
    """A cache entry and its links in the recency list."""

    __slots__ = ('key', 'value', 'prev', 'next')

    def __init__(self, key: Any = None, value: Any = None):
        self.key = key
        self.value = value
        self.prev: Entry = self
        self.next: Entry = self


class RecencyList:
    """Circular doubly linked list with a sentinel root.

    ``root.next`` is the front (most recently touched) and ``root.prev`` is
    the back (least recently touched). Every operation is O(1) except
    iteration.
    """

    __slots__ = ('_root', '_len')

    def __init__(self):
        self._root = Entry()
        self._len = 0

    def __len__(self) -> int:
        return self._len

    def back(self) -> Optional[Entry]:
        if self._len == 0:
            return None
        return self._root.prev

    def push_front(self, key: Any, value: Any) -> Entry:
        """Create an entry at the front and return it."""
        entry = Entry(key, value)
        self._link_after(entry, self._root)
        self._len += 1
        return entry

    def move_to_front(self, entry: Entry) -> None:
        if self._root.next is entry:
            return
        self._unlink(entry)
        self._link_after(entry, self._root)

    def remove(self, entry: Entry) -> None:
        self._unlink(entry)
        # Drop references so a stale node cannot reach live ones.
        entry.prev = entry.next = entry
        self._len -= 1

    def __iter__(self) -> Iterator[Entry]:
        """Iterate entries front to back."""
        node = self._root.next
        while node is not self._root:
            yield node
            node = node.next

    @staticmethod
    def _link_after(entry: Entry, at: Entry) -> None:
        entry.prev = at
        entry.next = at.next
        at.next.prev = entry
        at.next = entry

    @staticmethod
    def _unlink(entry: Entry) -> None:
        entry.prev.next = entry.next
        entry.next.prev = entry.prev
