"""Core interfaces (Protocol classes) for persistedql."""

from persistedql.core.interfaces.cache_provider import ICacheProvider
from persistedql.core.interfaces.document_provider import IDocumentProvider
from persistedql.core.interfaces.json_codec import IJsonCodec

__all__ = [
    "ICacheProvider",
    "IDocumentProvider",
    "IJsonCodec",
]
