"""Composition root - wires infrastructure into the domain."""

from collections.abc import Callable

from esdoc.domain.entities import MapDocument
from esdoc.domain.json_codec import JsonCodec
from esdoc.infrastructure.json import get_json_codec


def configure_documents(codec_provider: Callable[[], JsonCodec] = get_json_codec) -> None:
    """Set the codec used by documents created without ``codec=``.

    Runs on ``import esdoc`` with the shared settings-based codec; call again
    to swap in another provider.
    """
    MapDocument.codec_provider = codec_provider
