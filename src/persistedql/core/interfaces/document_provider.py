"""Document provider interface."""

from collections.abc import Mapping
from typing import Any, Protocol

from persistedql.core.entities.outcome import ResolutionOutcome


class IDocumentProvider(Protocol):
    """Contract for a stage that decides which query text to execute.

    Providers are tried in order. Returning ``Deferred`` hands the
    request to the next provider; ``Resolved`` and ``Failed`` end the
    search.
    """

    async def process(self, params: Mapping[str, Any]) -> ResolutionOutcome:
        """Resolve the query document for a request.

        Args:
            params: The request parameter map.

        Returns:
            The resolution outcome.
        """
        ...
