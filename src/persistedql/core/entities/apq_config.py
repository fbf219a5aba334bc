"""APQ configuration entity."""

from dataclasses import dataclass
from datetime import timedelta


@dataclass
class ApqConfig:
    """Automatic persisted queries configuration.

    Fixed when the document provider is created; never changed per
    request.

    Attributes:
        enabled: When False the APQ stage always defers to the next
            document provider.
        max_query_size: Largest query text accepted, in UTF-8 bytes.
            ``None`` disables the limit, ``0`` rejects any query text.
        cache_ttl: Optional TTL forwarded to the cache provider as the
            ``ttl`` option when storing a query.
    """

    enabled: bool = True
    max_query_size: int | None = None
    cache_ttl: timedelta | None = None

    def __post_init__(self) -> None:
        """Validate the size limit."""
        if self.max_query_size is not None and self.max_query_size < 0:
            raise ValueError("max_query_size must be None or a non-negative int")

    @property
    def cache_options(self) -> dict[str, object]:
        """Options passed through to every cache provider call."""
        if self.cache_ttl is None:
            return {}
        return {"ttl": self.cache_ttl}
