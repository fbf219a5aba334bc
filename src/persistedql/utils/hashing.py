"""Hashing utilities for persisted queries."""

import hashlib


def sha256_hexdigest(query: str) -> str:
    """Hash a query document the way APQ clients do.

    Args:
        query: The exact GraphQL query text.

    Returns:
        The lowercase hex SHA-256 digest of the UTF-8 encoded text.
    """
    return hashlib.sha256(query.encode("utf-8")).hexdigest()


def query_size(query: str) -> int:
    """Return the size of a query document in UTF-8 bytes."""
    return len(query.encode("utf-8"))
