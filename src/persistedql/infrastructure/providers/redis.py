"""Redis cache provider implementation."""

import logging
from datetime import timedelta
from typing import Any

import redis.asyncio as redis
from redis.exceptions import RedisError

logger = logging.getLogger(__name__)


class RedisCacheProvider:
    """Redis persisted query store for distributed deployments.

    Queries are shared by every server process pointing at the same
    Redis database, so a hash registered on one process resolves on
    all of them.
    """

    def __init__(
        self,
        redis_url: str = "redis://localhost:6379",
        key_prefix: str = "apq",
        default_ttl: int | None = 24 * 60 * 60,
        client: redis.Redis | None = None,
    ) -> None:
        """Initialize the Redis cache provider.

        Args:
            redis_url: Redis connection URL. Ignored when ``client`` is given.
            key_prefix: Prefix for all keys.
            default_ttl: Default TTL in seconds, None to keep queries forever.
            client: Optional pre-built ``redis.asyncio`` client.
        """
        if client is None:
            client = redis.from_url(redis_url)  # type: ignore
        self._redis: redis.Redis = client
        self._key_prefix = key_prefix
        self._default_ttl = default_ttl

    async def get(self, sha256_hash: str, **options: Any) -> str | None:
        """Fetch a query document by hash.

        Args:
            sha256_hash: The hex-encoded SHA-256 of the query.
            **options: Ignored.

        Returns:
            The stored query, or None if not found or expired.
        """
        value = await self._redis.get(self._prefixed_key(sha256_hash))
        if value is None:
            return None
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return str(value)

    async def put(self, sha256_hash: str, query: str, **options: Any) -> bool:
        """Store a query document under its hash.

        Args:
            sha256_hash: The hex-encoded SHA-256 of the query.
            query: The query text.
            **options: ``ttl`` (timedelta or seconds) overrides the default
                TTL. Values under one second are stored for one second.

        Returns:
            True if Redis accepted the write, False on a Redis error.
        """
        key = self._prefixed_key(sha256_hash)
        ttl = self._ttl_seconds(options.get("ttl"))

        try:
            if ttl is not None:
                await self._redis.setex(key, ttl, query)
            elif self._default_ttl is not None:
                await self._redis.setex(key, self._default_ttl, query)
            else:
                await self._redis.set(key, query)
        except RedisError:
            logger.warning("Failed to store persisted query %s", key, exc_info=True)
            return False

        return True

    def _ttl_seconds(self, ttl: timedelta | int | float | None) -> int | None:
        if ttl is None:
            return None
        if isinstance(ttl, timedelta):
            ttl = ttl.total_seconds()
        # SETEX rejects expiries below one second
        return max(1, int(ttl))

    def _prefixed_key(self, sha256_hash: str) -> str:
        return f"{self._key_prefix}:{sha256_hash}"

    async def close(self) -> None:
        """Close the Redis connection."""
        await self._redis.aclose()

    async def __aenter__(self) -> "RedisCacheProvider":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: type, exc_val: Exception, exc_tb: object) -> None:
        """Async context manager exit."""
        await self.close()
