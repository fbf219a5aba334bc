"""APQ resolver - decides how a request's query text is obtained."""

import logging
from typing import Any

from persistedql.core.entities.outcome import (
    ApqErrorKind,
    Deferred,
    Failed,
    ResolutionOutcome,
    Resolved,
)
from persistedql.core.entities.request_context import RequestContext
from persistedql.core.interfaces.cache_provider import ICacheProvider
from persistedql.core.interfaces.json_codec import IJsonCodec
from persistedql.core.services.extensions_extractor import ExtensionsExtractor
from persistedql.utils.hashing import query_size, sha256_hexdigest

logger = logging.getLogger(__name__)


class ApqResolver:
    """Domain service implementing the automatic persisted queries protocol.

    For each request it either defers (no ``persistedQuery`` extension),
    fails with an :class:`ApqErrorKind`, stores a newly sent query under
    its verified hash, or fetches a previously stored query by hash.

    The resolver keeps no per-request state and can be shared between
    concurrent requests; the cache provider is the only shared resource.
    """

    def __init__(
        self,
        cache_provider: ICacheProvider,
        json_codec: IJsonCodec | None = None,
        cache_options: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the resolver.

        Args:
            cache_provider: Store mapping query hashes to query text.
            json_codec: Codec for string-encoded ``extensions``.
            cache_options: Options forwarded to every provider call.
        """
        self._cache_provider = cache_provider
        self._extractor = ExtensionsExtractor(json_codec)
        self._cache_options = dict(cache_options or {})

    @property
    def cache_provider(self) -> ICacheProvider:
        return self._cache_provider

    async def resolve(self, context: RequestContext) -> ResolutionOutcome:
        """Decide the outcome for one request.

        Args:
            context: The request's query, extensions and size limit.

        Returns:
            ``Deferred`` when the request does not use APQ, ``Failed`` when
            it must not be executed, ``Resolved`` with the query otherwise.

        Raises:
            ApqConfigurationError: If extensions arrive JSON-encoded and no
                codec was configured.
            ExtensionsDecodeError: If JSON-encoded extensions are invalid.
        """
        persisted_query = self._extractor.extract(context.extensions)
        if persisted_query is None:
            return Deferred()

        sha256_hash = persisted_query.sha256_hash
        if persisted_query.hash_malformed or sha256_hash is None:
            return self._fail(ApqErrorKind.HASH_FORMAT_INCORRECT)

        if not context.has_query:
            return await self._fetch(sha256_hash)

        query = context.query
        if not isinstance(query, str):
            return self._fail(ApqErrorKind.QUERY_FORMAT_INCORRECT)

        # Size is checked before hashing so oversized payloads are never hashed
        if (
            context.max_query_size is not None
            and query_size(query) > context.max_query_size
        ):
            return self._fail(ApqErrorKind.PERSISTED_QUERY_LARGER_THAN_MAX_SIZE)

        return await self._store(sha256_hash, query)

    async def _fetch(self, sha256_hash: str) -> ResolutionOutcome:
        query = await self._cache_provider.get(sha256_hash, **self._cache_options)
        if query is None:
            logger.debug("Persisted query %s not found", sha256_hash)
            return Failed(ApqErrorKind.PERSISTED_QUERY_NOT_FOUND)

        logger.debug("Persisted query %s found", sha256_hash)
        return Resolved(query)

    async def _store(self, sha256_hash: str, query: str) -> ResolutionOutcome:
        if sha256_hexdigest(query) != sha256_hash:
            return self._fail(ApqErrorKind.PROVIDED_SHA_DOES_NOT_MATCH)

        # Storing is best effort: the query is already in hand
        try:
            stored = await self._cache_provider.put(
                sha256_hash, query, **self._cache_options
            )
        except Exception:
            logger.warning(
                "Cache provider failed to store persisted query %s",
                sha256_hash,
                exc_info=True,
            )
        else:
            if stored:
                logger.debug("Persisted query %s stored", sha256_hash)
            else:
                logger.warning(
                    "Cache provider did not store persisted query %s", sha256_hash
                )

        return Resolved(query)

    def _fail(self, kind: ApqErrorKind) -> Failed:
        logger.warning("Rejected persisted query request: %s", kind.value)
        return Failed(kind)
