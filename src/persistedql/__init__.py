"""persistedql - Automatic Persisted Queries for GraphQL servers.

Clients send the SHA-256 hash of a query instead of the full query
text. The first request carries both the query and its hash and the
server stores the query under the hash; later requests carry only the
hash and the server looks the query up.

Example with Ariadne:
    from ariadne import make_executable_schema
    from persistedql import ApqConfig, InMemoryCacheProvider
    from persistedql.adapters.ariadne import ApqGraphQL

    schema = make_executable_schema(type_defs, query)

    app = ApqGraphQL(
        schema,
        cache_provider=InMemoryCacheProvider(maxsize=5000),
        config=ApqConfig(max_query_size=16_384),
    )

A client then sends:
    {
        "extensions": {
            "persistedQuery": {"version": 1, "sha256Hash": "<hex digest>"}
        }
    }

and gets ``{"errors": [{"message": "PersistedQueryNotFound"}]}`` until
it has sent the query once together with its hash.

Using the resolver directly:
    from persistedql import ApqResolver, RequestContext, Resolved

    resolver = ApqResolver(cache_provider=InMemoryCacheProvider())
    outcome = await resolver.resolve(RequestContext.from_params(params))
    if isinstance(outcome, Resolved):
        execute(outcome.query)
"""

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
from persistedql.core.interfaces import (
    ICacheProvider,
    IDocumentProvider,
    IJsonCodec,
)
from persistedql.core.services import (
    ApqDocumentProvider,
    ApqResolver,
    DefaultDocumentProvider,
    DocumentProviderChain,
    ExtensionsExtractor,
    extract_persisted_query,
)
from persistedql.infrastructure import (
    InMemoryCacheProvider,
    JsonCodec,
)
from persistedql.utils.hashing import sha256_hexdigest

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Core entities
    "ApqConfig",
    "ApqErrorKind",
    "PersistedQuery",
    "RequestContext",
    # Outcomes
    "ResolutionOutcome",
    "Resolved",
    "Deferred",
    "Failed",
    # Exceptions
    "PersistedQLError",
    "ApqConfigurationError",
    "ExtensionsDecodeError",
    # Core interfaces
    "ICacheProvider",
    "IDocumentProvider",
    "IJsonCodec",
    # Core services
    "ApqResolver",
    "ExtensionsExtractor",
    "extract_persisted_query",
    # Document providers
    "ApqDocumentProvider",
    "DefaultDocumentProvider",
    "DocumentProviderChain",
    # Infrastructure implementations
    "InMemoryCacheProvider",
    "JsonCodec",
    # Utilities
    "sha256_hexdigest",
]
