"""APQ HTTP handler for Ariadne GraphQL."""

import logging
from collections.abc import Iterable
from typing import Any

from ariadne.asgi.handlers import GraphQLHTTPHandler

from persistedql.core.entities.outcome import Failed, Resolved
from persistedql.core.exceptions import ExtensionsDecodeError
from persistedql.core.interfaces.document_provider import IDocumentProvider
from persistedql.core.services.document_providers import DocumentProviderChain

logger = logging.getLogger(__name__)


class ApqGraphQLHTTPHandler(GraphQLHTTPHandler):
    """HTTP handler that resolves query documents through document providers.

    Before execution the request data is passed through the provider
    chain:

    - ``Resolved`` executes the resolved query text.
    - ``Failed`` returns ``{"errors": [{"message": <kind>}]}`` with HTTP
      200 and nothing is executed.
    - ``Deferred`` leaves the request to Ariadne's own handling.
    """

    def __init__(
        self,
        document_providers: Iterable[IDocumentProvider],
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self._chain = DocumentProviderChain(document_providers)

    @property
    def document_providers(self) -> list[IDocumentProvider]:
        return self._chain.providers

    def extract_data_from_get_request(self, request: Any) -> dict:
        data = super().extract_data_from_get_request(request)
        # Kept as the raw JSON string; the APQ provider decodes it
        extensions = request.query_params.get("extensions", "").strip()
        if extensions:
            data["extensions"] = extensions
        return data

    async def execute_graphql_query(
        self,
        request: Any,
        data: Any,
        *,
        context_value: Any = None,
        query_document: Any = None,
    ) -> tuple[bool, dict[str, Any]]:
        if not isinstance(data, dict):
            return await super().execute_graphql_query(
                request, data,
                context_value=context_value,
                query_document=query_document,
            )

        try:
            outcome = await self._chain.resolve(data)
        except ExtensionsDecodeError as e:
            logger.info("Rejected request with undecodable extensions: %s", e)
            return False, {"errors": [{"message": "Extensions must be valid JSON."}]}

        if isinstance(outcome, Failed):
            return True, outcome.to_response()

        if isinstance(outcome, Resolved) and outcome.query != data.get("query"):
            data = {**data, "query": outcome.query}

        return await super().execute_graphql_query(
            request, data,
            context_value=context_value,
            query_document=query_document,
        )
