"""APQ-enabled GraphQL ASGI app for Ariadne."""

from collections.abc import Iterable
from typing import Any

from ariadne.asgi import GraphQL

from persistedql.adapters.ariadne.handler import ApqGraphQLHTTPHandler
from persistedql.core.entities.apq_config import ApqConfig
from persistedql.core.interfaces.cache_provider import ICacheProvider
from persistedql.core.interfaces.document_provider import IDocumentProvider
from persistedql.core.interfaces.json_codec import IJsonCodec
from persistedql.core.services.document_providers import (
    ApqDocumentProvider,
    DefaultDocumentProvider,
)
from persistedql.infrastructure.codecs.json import JsonCodec
from persistedql.infrastructure.providers.memory import InMemoryCacheProvider


class ApqGraphQL(GraphQL):
    """Drop-in replacement for Ariadne's GraphQL with automatic persisted queries.

    Example::

        app = ApqGraphQL(
            schema,
            cache_provider=RedisCacheProvider("redis://localhost:6379"),
            config=ApqConfig(max_query_size=16_384),
            debug=True,
        )

    Without ``document_providers`` the app tries APQ first and then the
    plain ``query`` parameter.
    """

    def __init__(
        self,
        schema: Any,
        cache_provider: ICacheProvider | None = None,
        config: ApqConfig | None = None,
        json_codec: IJsonCodec | None = None,
        document_providers: Iterable[IDocumentProvider] | None = None,
        **kwargs: Any,
    ) -> None:
        if document_providers is None:
            document_providers = [
                ApqDocumentProvider(
                    cache_provider=(
                        cache_provider
                        if cache_provider is not None
                        else InMemoryCacheProvider()
                    ),
                    config=config,
                    json_codec=json_codec if json_codec is not None else JsonCodec(),
                ),
                DefaultDocumentProvider(),
            ]

        http_handler = ApqGraphQLHTTPHandler(document_providers=document_providers)

        super().__init__(schema, http_handler=http_handler, **kwargs)

        self._apq_handler = http_handler

    @property
    def document_providers(self) -> list[IDocumentProvider]:
        return self._apq_handler.document_providers
