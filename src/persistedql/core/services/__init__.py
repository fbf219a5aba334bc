"""Domain services for persistedql."""

from persistedql.core.services.apq_resolver import ApqResolver
from persistedql.core.services.document_providers import (
    ApqDocumentProvider,
    DefaultDocumentProvider,
    DocumentProviderChain,
)
from persistedql.core.services.extensions_extractor import (
    ExtensionsExtractor,
    extract_persisted_query,
)

__all__ = [
    "ApqDocumentProvider",
    "ApqResolver",
    "DefaultDocumentProvider",
    "DocumentProviderChain",
    "ExtensionsExtractor",
    "extract_persisted_query",
]
