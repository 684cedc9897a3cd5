"""JSON codec adapters."""

from esdoc.infrastructure.json.stdlib_codec import StdlibJsonCodec, get_json_codec

__all__ = ["StdlibJsonCodec", "get_json_codec"]
