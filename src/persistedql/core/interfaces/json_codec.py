"""JSON codec interface."""

from typing import Any, Protocol


class IJsonCodec(Protocol):
    """Contract for decoding JSON-encoded request fields."""

    def decode(self, data: str) -> Any:
        """Decode a JSON document.

        Args:
            data: The JSON text.

        Returns:
            The decoded Python value.

        Raises:
            ValueError: If the text is not valid JSON.
        """
        ...
