"""Bounded FIFO cache for date parsing.

DateParseCache memoizes the result of parsing a raw date string, including
failed parses (stored as None). Capacity is fixed; when the cache is full,
inserting a new key evicts the single oldest-inserted entry. Reads do not
refresh an entry's position (FIFO, not LRU).

Lookup and insertion run under one lock so the cache can be shared between
threads without exceeding capacity or evicting the wrong entry.
"""

import logging
import threading
from collections import OrderedDict
from collections.abc import Callable, Hashable
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 1000

V = TypeVar("V")


class DateParseCache(Generic[V]):
    """Fixed-capacity memo table with oldest-first eviction.

    Attributes:
        capacity: Maximum number of entries held
        hits: Number of lookups answered from the cache
        misses: Number of lookups that ran the compute function

    Example:
        >>> cache = DateParseCache(capacity=2)
        >>> cache.get_or_compute("a", lambda key: 1)
        1
        >>> cache.get_or_compute("b", lambda key: 2)
        2
        >>> cache.get_or_compute("c", lambda key: 3)
        3
        >>> "a" in cache
        False
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self.hits = 0
        self.misses = 0
        self._entries: OrderedDict[Hashable, V] = OrderedDict()
        self._lock = threading.Lock()

    def get_or_compute(self, key: Hashable, compute: Callable[[Hashable], V]) -> V:
        """Return the cached value for ``key``, computing and storing it on a miss."""
        with self._lock:
            if key in self._entries:
                self.hits += 1
                return self._entries[key]

            self.misses += 1
            value = compute(key)

            if len(self._entries) >= self.capacity:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug("Date cache full (%d), evicted %r", self.capacity, evicted)

            self._entries[key] = value
            return value

    def clear(self) -> None:
        """Drop every entry and reset the hit/miss counters."""
        with self._lock:
            self._entries.clear()
            self.hits = 0
            self.misses = 0

    def keys(self) -> list[Hashable]:
        """Cached keys, oldest first."""
        with self._lock:
            return list(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
