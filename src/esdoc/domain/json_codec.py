"""JSON codec protocol - turns object graphs into JSON text and back."""

from typing import Any, Protocol


class JsonCodec(Protocol):
    """Encodes and decodes JSON for documents.

    Implementations follow the ``json`` module conventions for failures:
    ``encode`` raises TypeError or ValueError for values it cannot render
    (unsupported types, cycles, NaN), ``decode`` raises ValueError for
    malformed text.
    """

    def encode(self, obj: Any) -> str: ...

    def decode(self, text: str | bytes) -> Any: ...
