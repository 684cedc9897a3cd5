"""esdoc - ordered key/value documents for a search engine object mapping layer."""

from esdoc.application.document_factory import create_document, document_from, parse_document
from esdoc.application.ports import Document
from esdoc.domain.entities import MapDocument
from esdoc.domain.exceptions import (
    EsdocError,
    IllegalState,
    ParsingFailure,
    SerializationFailure,
)
from esdoc.domain.json_codec import JsonCodec
from esdoc.main import configure_documents

__version__ = "0.1.0"

configure_documents()

__all__ = [
    "Document",
    "EsdocError",
    "IllegalState",
    "JsonCodec",
    "MapDocument",
    "ParsingFailure",
    "SerializationFailure",
    "configure_documents",
    "create_document",
    "document_from",
    "parse_document",
]
