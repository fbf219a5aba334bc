"""Domain entities for persistedql."""

from persistedql.core.entities.apq_config import ApqConfig
from persistedql.core.entities.outcome import (
    ApqErrorKind,
    Deferred,
    Failed,
    ResolutionOutcome,
    Resolved,
)
from persistedql.core.entities.persisted_query import PersistedQuery
from persistedql.core.entities.request_context import RequestContext

__all__ = [
    "ApqConfig",
    "ApqErrorKind",
    "Deferred",
    "Failed",
    "PersistedQuery",
    "RequestContext",
    "ResolutionOutcome",
    "Resolved",
]
