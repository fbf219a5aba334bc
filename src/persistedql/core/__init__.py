"""Core domain layer for persistedql."""

from persistedql.core.entities import (
    ApqConfig,
    ApqErrorKind,
    Deferred,
    Failed,
    PersistedQuery,
    RequestContext,
    ResolutionOutcome,
    Resolved,
)
from persistedql.core.exceptions import (
    ApqConfigurationError,
    ExtensionsDecodeError,
    PersistedQLError,
)
from persistedql.core.interfaces import ICacheProvider, IDocumentProvider, IJsonCodec
from persistedql.core.services import (
    ApqDocumentProvider,
    ApqResolver,
    DefaultDocumentProvider,
    DocumentProviderChain,
)

__all__ = [
    # Entities
    "ApqConfig",
    "ApqErrorKind",
    "Deferred",
    "Failed",
    "PersistedQuery",
    "RequestContext",
    "ResolutionOutcome",
    "Resolved",
    # Exceptions
    "ApqConfigurationError",
    "ExtensionsDecodeError",
    "PersistedQLError",
    # Interfaces
    "ICacheProvider",
    "IDocumentProvider",
    "IJsonCodec",
    # Services
    "ApqDocumentProvider",
    "ApqResolver",
    "DefaultDocumentProvider",
    "DocumentProviderChain",
]
