"""Application ports (interfaces for infrastructure)."""

from esdoc.application.ports.document import Document
from esdoc.domain.json_codec import JsonCodec

__all__ = [
    "Document",
    "JsonCodec",
]
