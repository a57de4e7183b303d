"""A bounded mapping that evicts its least recently used entry."""

from __future__ import annotations

from collections import OrderedDict
from typing import Generic, Hashable, Optional, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class LruMap(Generic[K, V]):
    """Mapping that holds at most ``size`` entries.

    When full, inserting a new key evicts the entry that was used least
    recently. Both a successful lookup and an insert count as a use.
    """

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError(f"size must be at least 1, got {size}")
        self.size = size
        self._entries: OrderedDict[K, V] = OrderedDict()

    def find(self, key: K) -> Optional[V]:
        """Return the value stored under ``key`` and mark it used, or None."""
        if key not in self._entries:
            return None
        self._entries.move_to_end(key, last=False)
        return self._entries[key]

    def insert(self, key: K, value: V) -> None:
        """Store ``value`` under ``key``, evicting the oldest entry if full."""
        if key in self._entries:
            self._entries[key] = value
            self._entries.move_to_end(key, last=False)
            return
        if len(self._entries) >= self.size:
            self._entries.popitem(last=True)
        self._entries[key] = value
        self._entries.move_to_end(key, last=False)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries