"""JSON codec backed by the standard ``json`` module."""

import json
from dataclasses import dataclass
from functools import lru_cache
from typing import Any

from esdoc.config import get_settings
from esdoc.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class StdlibJsonCodec:
    """Immutable JSON codec; holds configuration only, safe to share across threads."""

    ensure_ascii: bool = False
    sort_keys: bool = False
    indent: int | None = None

    def encode(self, obj: Any) -> str:
        """Render obj as JSON. NaN and infinities are rejected so output stays valid JSON."""
        return json.dumps(
            obj,
            ensure_ascii=self.ensure_ascii,
            sort_keys=self.sort_keys,
            indent=self.indent,
            allow_nan=False,
        )

    def decode(self, text: str | bytes) -> Any:
        return json.loads(text)


@lru_cache
def get_json_codec() -> StdlibJsonCodec:
    """Process-wide codec built once from settings."""
    settings = get_settings()
    codec = StdlibJsonCodec(
        ensure_ascii=settings.json_ensure_ascii,
        sort_keys=settings.json_sort_keys,
        indent=settings.json_indent,
    )
    logger.debug("JSON codec configured: %r", codec)
    return codec
