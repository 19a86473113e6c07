"""
Caching abstraction for loaded resources.

Provides a ``CacheBackend`` protocol and a bounded in-memory implementation.
:class:`~dimcontent.resources.cached.CachedResourceLoader` memoizes loaded
resources per ``(id, locale, params)`` in a backend, so one page that
references the same media five times hits the repository once.

Architecture:
    ::

        CacheBackend (Protocol)
        └── InMemoryCache   single-process, bounded LRU, optional TTL

        API: get(key) → value | None
             set(key, value, ttl_seconds=None)
             delete(key)
             exists(key) → bool
             clear()

Examples:
    >>> from dimcontent.core.cache import InMemoryCache
    >>> cache = InMemoryCache(max_size=1000, default_ttl_seconds=None)
    >>> cache.set("pages:123", {"title": "Home"})
    >>> cache.get("pages:123")
    {'title': 'Home'}

Tags:
    cache, lru, ttl, dimcontent
"""

from __future__ import annotations

import time
from collections import OrderedDict
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class CacheBackend(Protocol):
    """Key/value cache contract."""

    def get(self, key: str) -> Any | None:
        """Return the cached value or ``None`` when missing or expired."""
        ...

    def set(self, key: str, value: Any, *, ttl_seconds: int | None = None) -> None:
        """Store a value. ``ttl_seconds=None`` uses the backend default."""
        ...

    def delete(self, key: str) -> None:
        """Remove a key. No-op if it does not exist."""
        ...

    def exists(self, key: str) -> bool:
        """``True`` if key exists and has not expired."""
        ...

    def clear(self) -> None:
        """Remove all keys."""
        ...


class InMemoryCache:
    """Bounded in-memory cache with TTL support.

    Uses LRU eviction when ``max_size`` is reached. Values are stored as-is
    (no serialization), so cached resources keep their identity.

    Attributes:
        max_size: Maximum number of keys before LRU eviction.
        default_ttl_seconds: Default TTL for keys (``None`` → no expiry).
    """

    def __init__(
        self,
        *,
        max_size: int = 10_000,
        default_ttl_seconds: int | None = None,
    ):
        self._store: OrderedDict[str, tuple[Any, float | None]] = OrderedDict()
        self._max_size = max_size
        self._default_ttl = default_ttl_seconds

    def get(self, key: str) -> Any | None:
        """Retrieve a value by key."""
        if not self.exists(key):
            return None

        self._store.move_to_end(key)
        return self._store[key][0]

    def set(self, key: str, value: Any, *, ttl_seconds: int | None = None) -> None:
        """Store a value with optional TTL."""
        ttl = ttl_seconds if ttl_seconds is not None else self._default_ttl
        expires_at = (time.time() + ttl) if ttl else None

        if key not in self._store and len(self._store) >= self._max_size:
            self._store.popitem(last=False)

        self._store[key] = (value, expires_at)
        self._store.move_to_end(key)

    def delete(self, key: str) -> None:
        """Remove a key from the cache."""
        self._store.pop(key, None)

    def exists(self, key: str) -> bool:
        """Check if key exists and is not expired."""
        if key not in self._store:
            return False

        _, expires_at = self._store[key]
        if expires_at is not None and time.time() > expires_at:
            self.delete(key)
            return False

        return True

    def clear(self) -> None:
        """Remove all keys."""
        self._store.clear()

    def size(self) -> int:
        """Return current number of cached keys."""
        return len(self._store)


__all__ = [
    "CacheBackend",
    "InMemoryCache",
]
