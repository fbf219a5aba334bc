"""In-memory cache provider implementation."""

import threading
from typing import Any

from cachetools import TTLCache  # type: ignore[import-untyped]


class InMemoryCacheProvider:
    """In-memory persisted query store using LRU with TTL support.

    Suitable for single-process deployments. Uses cachetools for LRU
    eviction and TTL expiration; access is serialized with a lock since
    TTLCache is not thread-safe.
    """

    def __init__(
        self,
        maxsize: int = 1000,
        default_ttl: float = 24 * 60 * 60.0,
    ) -> None:
        """Initialize the in-memory cache provider.

        Args:
            maxsize: Maximum number of queries kept.
            default_ttl: TTL in seconds for stored queries.
        """
        self._maxsize = maxsize
        self._default_ttl = default_ttl
        self._cache: TTLCache[str, str] = TTLCache(
            maxsize=maxsize,
            ttl=default_ttl,
        )
        self._lock = threading.Lock()

    async def get(self, sha256_hash: str, **options: Any) -> str | None:
        """Fetch a query document by hash.

        Args:
            sha256_hash: The hex-encoded SHA-256 of the query.
            **options: Ignored.

        Returns:
            The stored query, or None if not found or expired.
        """
        with self._lock:
            result = self._cache.get(sha256_hash)
        return result if isinstance(result, str) else None

    async def put(self, sha256_hash: str, query: str, **options: Any) -> bool:
        """Store a query document under its hash.

        Note: TTLCache uses a global TTL, so a ``ttl`` option is
        accepted but not applied per item. Use the Redis provider for
        per-item TTL.

        Args:
            sha256_hash: The hex-encoded SHA-256 of the query.
            query: The query text.
            **options: Ignored.

        Returns:
            Always True.
        """
        with self._lock:
            self._cache[sha256_hash] = query
        return True

    async def clear(self) -> None:
        """Remove all stored queries."""
        with self._lock:
            self._cache.clear()

    def __len__(self) -> int:
        """Return the number of stored queries."""
        with self._lock:
            return len(self._cache)

    @property
    def maxsize(self) -> int:
        """Return the maximum size of the cache."""
        return self._maxsize
