"""Resolution outcome entities."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


class ApqErrorKind(str, Enum):
    """Per-request APQ errors, named as clients expect to read them."""

    HASH_FORMAT_INCORRECT = "HashFormatIncorrect"
    QUERY_FORMAT_INCORRECT = "QueryFormatIncorrect"
    PERSISTED_QUERY_LARGER_THAN_MAX_SIZE = "PersistedQueryLargerThanMaxSize"
    PROVIDED_SHA_DOES_NOT_MATCH = "ProvidedShaDoesNotMatch"
    PERSISTED_QUERY_NOT_FOUND = "PersistedQueryNotFound"


@dataclass(frozen=True)
class Resolved:
    """The query text to execute for this request."""

    query: str


@dataclass(frozen=True)
class Deferred:
    """This stage does not apply; the next document provider decides."""


@dataclass(frozen=True)
class Failed:
    """The request must not be executed."""

    kind: ApqErrorKind

    def to_response(self) -> dict[str, Any]:
        """Render the GraphQL error payload returned to the client.

        Returns:
            ``{"errors": [{"message": <kind name>}]}``.
        """
        return {"errors": [{"message": self.kind.value}]}


ResolutionOutcome = Union[Resolved, Deferred, Failed]
