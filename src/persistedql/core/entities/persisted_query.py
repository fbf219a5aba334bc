"""Persisted query descriptor entity."""

from collections.abc import Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class PersistedQuery:
    """The ``persistedQuery`` block of a request's extensions.

    A hash that is not a string can never be used for a store or a
    fetch, so it is recorded as malformed here instead of raising.
    """

    version: int | None
    sha256_hash: str | None
    hash_malformed: bool = False

    @classmethod
    def from_extension(cls, block: object) -> "PersistedQuery":
        """Build a descriptor from a raw ``persistedQuery`` value.

        Args:
            block: The value found under ``extensions["persistedQuery"]``.

        Returns:
            A new PersistedQuery. Non-string hashes (or a block that is
            not a mapping at all) yield ``hash_malformed=True``.
        """
        if not isinstance(block, Mapping):
            return cls(version=None, sha256_hash=None, hash_malformed=True)

        version = block.get("version")
        if isinstance(version, bool) or not isinstance(version, int):
            version = None

        sha256_hash = block.get("sha256Hash")
        if not isinstance(sha256_hash, str):
            return cls(version=version, sha256_hash=None, hash_malformed=True)

        return cls(version=version, sha256_hash=sha256_hash)
