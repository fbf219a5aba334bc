"""Extraction of the ``persistedQuery`` extension from request params."""

from collections.abc import Mapping
from typing import Any

from persistedql.core.entities.persisted_query import PersistedQuery
from persistedql.core.exceptions import ApqConfigurationError, ExtensionsDecodeError
from persistedql.core.interfaces.json_codec import IJsonCodec

PERSISTED_QUERY_KEY = "persistedQuery"


def extract_persisted_query(
    extensions: Any,
    json_codec: IJsonCodec | None = None,
) -> PersistedQuery | None:
    """Normalize a request's ``extensions`` into a PersistedQuery.

    ``extensions`` arrives either as a mapping (JSON request bodies) or
    as a JSON string (query string parameters of GET requests).

    Args:
        extensions: The raw ``extensions`` value, or None if not sent.
        json_codec: Codec used to decode string-encoded extensions.

    Returns:
        The descriptor, or None when the request carries no
        ``persistedQuery`` extension.

    Raises:
        ApqConfigurationError: If ``extensions`` is a string and no codec
            was configured.
        ExtensionsDecodeError: If the string is not valid JSON.
    """
    if extensions is None:
        return None

    if isinstance(extensions, str):
        if json_codec is None or not callable(getattr(json_codec, "decode", None)):
            raise ApqConfigurationError(
                "json_codec must be specified and respond to decode"
            )
        try:
            extensions = json_codec.decode(extensions)
        except ValueError as e:
            raise ExtensionsDecodeError(f"Failed to decode extensions: {e}") from e

    if not isinstance(extensions, Mapping) or PERSISTED_QUERY_KEY not in extensions:
        return None

    return PersistedQuery.from_extension(extensions[PERSISTED_QUERY_KEY])


class ExtensionsExtractor:
    """Extracts persisted query descriptors with a fixed JSON codec."""

    def __init__(self, json_codec: IJsonCodec | None = None) -> None:
        self._json_codec = json_codec

    def extract(self, extensions: Any) -> PersistedQuery | None:
        return extract_persisted_query(extensions, self._json_codec)
