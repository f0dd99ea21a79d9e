"""Tree options and runtime cache statistics."""

from __future__ import annotations

import threading
from dataclasses import dataclass


class Statistics:
    """Thread-safe counters describing node cache behaviour."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._cache_hit = 0
        self._cache_miss = 0
        self._fast_cache_hit = 0
        self._fast_cache_miss = 0

    def inc_cache_hit(self) -> None:
        """Count a node lookup served from the cache."""
        with self._lock:
            self._cache_hit += 1

    def inc_cache_miss(self) -> None:
        """Count a node or fast-node lookup that missed the cache."""
        with self._lock:
            self._cache_miss += 1

    def inc_fast_cache_hit(self) -> None:
        """Count a fast-node lookup served from the cache."""
        with self._lock:
            self._fast_cache_hit += 1

    def inc_fast_cache_miss(self) -> None:
        """Count a fast-node lookup that missed the cache."""
        with self._lock:
            self._fast_cache_miss += 1

    @property
    def cache_hit_count(self) -> int:
        with self._lock:
            return self._cache_hit

    @property
    def cache_miss_count(self) -> int:
        with self._lock:
            return self._cache_miss

    @property
    def fast_cache_hit_count(self) -> int:
        with self._lock:
            return self._fast_cache_hit

    @property
    def fast_cache_miss_count(self) -> int:
        with self._lock:
            return self._fast_cache_miss

    def reset(self) -> None:
        """Set every counter back to zero."""
        with self._lock:
            self._cache_hit = 0
            self._cache_miss = 0
            self._fast_cache_hit = 0
            self._fast_cache_miss = 0

    def __repr__(self) -> str:
        return (
            f"Statistics(cache_hit={self.cache_hit_count}, "
            f"cache_miss={self.cache_miss_count}, "
            f"fast_cache_hit={self.fast_cache_hit_count}, "
            f"fast_cache_miss={self.fast_cache_miss_count})"
        )


@dataclass
class Options:
    """Tree options.

    ``sync`` flushes every write to storage synchronously.
    ``initial_version`` is the version number used by the first save.
    ``stat`` collects cache statistics when set.
    """

    sync: bool = False
    initial_version: int = 0
    stat: Statistics | None = None


def default_options() -> Options:
    """Return the default tree options."""
    return Options()