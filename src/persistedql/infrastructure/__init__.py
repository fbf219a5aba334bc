"""Infrastructure layer implementations for persistedql."""

from persistedql.infrastructure.codecs import JsonCodec
from persistedql.infrastructure.providers import InMemoryCacheProvider

__all__ = [
    "InMemoryCacheProvider",
    "JsonCodec",
]
