"""Factories for documents handed to the object-document mapping layer."""

from collections.abc import Mapping
from typing import Any

from esdoc.domain.json_codec import JsonCodec
from esdoc.domain.entities import MapDocument
from esdoc.domain.exceptions import ParsingFailure
from esdoc.infrastructure.json import get_json_codec
from esdoc.logging import get_logger

logger = get_logger(__name__)


def create_document(*, codec: JsonCodec | None = None) -> MapDocument:
    """Return an empty document without id or version."""
    return MapDocument(codec=codec if codec is not None else get_json_codec())


def document_from(document_as_map: Mapping[str, Any], *, codec: JsonCodec | None = None) -> MapDocument:
    """Return a document holding a copy of the given entries."""
    return MapDocument(document_as_map, codec=codec if codec is not None else get_json_codec())


def parse_document(json_text: str | bytes, *, codec: JsonCodec | None = None) -> MapDocument:
    """
    Build a document from a plain JSON object, e.g. a search hit's source.

    The object's members become the document content; id and version stay unset.
    Raises ParsingFailure for invalid JSON or when the top level is not an object.
    """
    codec = codec if codec is not None else get_json_codec()
    try:
        data = codec.decode(json_text)
    except (TypeError, ValueError) as e:
        logger.debug("Parsing document JSON failed: %s", e)
        raise ParsingFailure("Cannot parse JSON to document") from e
    if not isinstance(data, dict):
        raise ParsingFailure(f"Expected a JSON object, got {type(data).__name__}")
    return MapDocument(data, codec=codec)
