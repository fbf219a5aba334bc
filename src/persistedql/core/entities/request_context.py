"""Request context entity."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class RequestContext:
    """Per-request input to the APQ resolver.

    ``query`` and ``extensions`` are kept exactly as the transport
    received them; ``None`` means the field was not sent.
    ``max_query_size`` of ``None`` means unbounded.
    """

    query: Any = None
    extensions: Any = None
    max_query_size: int | None = None

    @property
    def has_query(self) -> bool:
        return self.query is not None

    @classmethod
    def from_params(
        cls,
        params: Mapping[str, Any],
        max_query_size: int | None = None,
    ) -> "RequestContext":
        """Create a context from a GraphQL request parameter map.

        Args:
            params: Request parameters (``query``, ``extensions``, ...).
            max_query_size: Largest accepted query, in UTF-8 bytes.

        Returns:
            A new RequestContext.
        """
        return cls(
            query=params.get("query"),
            extensions=params.get("extensions"),
            max_query_size=max_query_size,
        )
