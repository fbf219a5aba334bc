"""Cache provider interface."""

from typing import Any, Protocol


class ICacheProvider(Protocol):
    """Contract for persisted query stores.

    A provider maps a lowercase hex SHA-256 hash to the query text it
    was computed from. Eviction, expiry and persistence are up to the
    provider. Implementations must be safe to call concurrently;
    concurrent puts for the same hash always carry the same text.
    """

    async def get(self, sha256_hash: str, **options: Any) -> str | None:
        """Fetch a query document by hash.

        Args:
            sha256_hash: The hex-encoded SHA-256 of the query.
            **options: Provider-specific options.

        Returns:
            The stored query text, or None if not found or expired.
        """
        ...

    async def put(self, sha256_hash: str, query: str, **options: Any) -> bool:
        """Store a query document under its hash.

        Args:
            sha256_hash: The hex-encoded SHA-256 of the query.
            query: The query text.
            **options: Provider-specific options (e.g. ``ttl``).

        Returns:
            True if the query was stored, False otherwise.
        """
        ...
