"""Bounded memoization for pure matching functions."""

import threading
from collections.abc import Callable, Hashable
from typing import Generic, TypeVar

from cachetools import LRUCache

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class BoundedCache(Generic[K, V]):
    """Thread-safe LRU cache with a fixed capacity.

    Only safe for pure functions: keys must capture every input. A capacity
    of zero or less disables caching.
    """

    def __init__(self, maxsize: int = 512):
        self.maxsize = maxsize
        self._cache: LRUCache | None = LRUCache(maxsize=maxsize) if maxsize > 0 else None
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def get_or_compute(self, key: K, compute: Callable[[], V]) -> V:
        """Return the cached value for ``key``, computing and storing it on a miss."""
        if self._cache is None:
            return compute()
        with self._lock:
            if key in self._cache:
                self.hits += 1
                return self._cache[key]
            self.misses += 1
        value = compute()
        with self._lock:
            self._cache[key] = value
        return value

    def clear(self) -> None:
        with self._lock:
            if self._cache is not None:
                self._cache.clear()
            self.hits = 0
            self.misses = 0

    def __len__(self) -> int:
        return len(self._cache) if self._cache is not None else 0

    def stats(self) -> dict[str, int]:
        return {"size": len(self), "maxsize": self.maxsize, "hits": self.hits, "misses": self.misses}
