"""JSON codec implementation."""

import json
from typing import Any


class JsonCodec:
    """JSON codec for string-encoded request fields.

    Raises ``ValueError`` (``json.JSONDecodeError``) on invalid input,
    as the codec interface requires.
    """

    def decode(self, data: str) -> Any:
        """Decode a JSON document.

        Args:
            data: The JSON text.

        Returns:
            The decoded Python value.
        """
        return json.loads(data)
