"""Pytest fixtures for esdoc tests."""

from __future__ import annotations

from typing import Any

import pytest

from esdoc.config import get_settings
from esdoc.domain.entities import MapDocument
from esdoc.infrastructure.json import StdlibJsonCodec, get_json_codec


# --- Fake codecs ---


class FailingJsonCodec:
    """Codec whose encode always fails like json.dumps on an unsupported type."""

    def __init__(self) -> None:
        self.encode_calls = 0

    def encode(self, obj: Any) -> str:
        self.encode_calls += 1
        raise TypeError("Object of type Widget is not JSON serializable")

    def decode(self, text: str | bytes) -> Any:
        raise ValueError("Expecting value: line 1 column 1 (char 0)")


class RecordingJsonCodec:
    """Stdlib codec that remembers what it was asked to encode."""

    def __init__(self) -> None:
        self._inner = StdlibJsonCodec()
        self.encoded: list[Any] = []

    def encode(self, obj: Any) -> str:
        self.encoded.append(obj)
        return self._inner.encode(obj)

    def decode(self, text: str | bytes) -> Any:
        return self._inner.decode(text)


# --- Fixtures ---


@pytest.fixture(autouse=True)
def _reset_cached_settings():
    """Settings and the shared codec are cached per process; start every test clean."""
    get_settings.cache_clear()
    get_json_codec.cache_clear()
    yield
    get_settings.cache_clear()
    get_json_codec.cache_clear()


@pytest.fixture
def codec() -> StdlibJsonCodec:
    """Compact codec with default options."""
    return StdlibJsonCodec()


@pytest.fixture
def failing_codec() -> FailingJsonCodec:
    return FailingJsonCodec()


@pytest.fixture
def recording_codec() -> RecordingJsonCodec:
    return RecordingJsonCodec()


@pytest.fixture
def alice() -> MapDocument:
    """Document with two entries, no id and no version."""
    return MapDocument({"name": "Alice", "age": 30})
