"""Document providers - pipeline stages resolving a request's query."""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from persistedql.core.entities.apq_config import ApqConfig
from persistedql.core.entities.outcome import Deferred, ResolutionOutcome, Resolved
from persistedql.core.entities.request_context import RequestContext
from persistedql.core.interfaces.cache_provider import ICacheProvider
from persistedql.core.interfaces.document_provider import IDocumentProvider
from persistedql.core.interfaces.json_codec import IJsonCodec
from persistedql.core.services.apq_resolver import ApqResolver

logger = logging.getLogger(__name__)


class ApqDocumentProvider:
    """Document provider resolving queries through automatic persisted queries.

    Usage:
        from persistedql import (
            ApqConfig,
            ApqDocumentProvider,
            InMemoryCacheProvider,
            JsonCodec,
        )

        provider = ApqDocumentProvider(
            cache_provider=InMemoryCacheProvider(),
            config=ApqConfig(max_query_size=16_384),
            json_codec=JsonCodec(),
        )
    """

    def __init__(
        self,
        cache_provider: ICacheProvider,
        config: ApqConfig | None = None,
        json_codec: IJsonCodec | None = None,
    ) -> None:
        """Initialize the provider.

        Args:
            cache_provider: Store mapping query hashes to query text.
            config: Optional APQ configuration. Uses defaults if not provided.
            json_codec: Codec for string-encoded ``extensions``. Required
                when requests may send ``extensions`` as a JSON string.
        """
        self._config = config or ApqConfig()
        self._resolver = ApqResolver(
            cache_provider=cache_provider,
            json_codec=json_codec,
            cache_options=self._config.cache_options,
        )

    @property
    def config(self) -> ApqConfig:
        return self._config

    @property
    def resolver(self) -> ApqResolver:
        return self._resolver

    async def process(self, params: Mapping[str, Any]) -> ResolutionOutcome:
        if not self._config.enabled:
            return Deferred()

        context = RequestContext.from_params(
            params, max_query_size=self._config.max_query_size
        )
        return await self._resolver.resolve(context)


class DefaultDocumentProvider:
    """Resolves the query sent in the request's ``query`` parameter."""

    async def process(self, params: Mapping[str, Any]) -> ResolutionOutcome:
        query = params.get("query")
        if isinstance(query, str) and query:
            return Resolved(query)
        return Deferred()


class DocumentProviderChain:
    """Ordered list of document providers, first decisive outcome wins."""

    def __init__(self, providers: Iterable[IDocumentProvider]) -> None:
        self._providers = list(providers)

    @property
    def providers(self) -> list[IDocumentProvider]:
        return list(self._providers)

    async def resolve(self, params: Mapping[str, Any]) -> ResolutionOutcome:
        """Run the providers in order until one does not defer.

        Args:
            params: The request parameter map.

        Returns:
            The first ``Resolved`` or ``Failed`` outcome, or ``Deferred``
            when every provider deferred.
        """
        for provider in self._providers:
            outcome = await provider.process(params)
            if not isinstance(outcome, Deferred):
                return outcome

        logger.debug("No document provider resolved the request")
        return Deferred()
