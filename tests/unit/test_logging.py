"""Unit tests for logging setup and log output."""

import io
import logging
from collections.abc import Iterator
from contextlib import contextmanager

import pytest

from esdoc.domain.entities import MapDocument
from esdoc.domain.exceptions import SerializationFailure
from esdoc.logging import configure_logging, get_logger


@contextmanager
def bare_root_logger() -> Iterator[logging.Logger]:
    """Root logger stripped of handlers (pytest's included) for the duration of the block."""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers = []
    try:
        yield root
    finally:
        root.handlers = saved_handlers
        root.setLevel(saved_level)


def test_get_logger_uses_module_name() -> None:
    assert get_logger("esdoc.domain").name == "esdoc.domain"


def test_configure_logging_installs_one_handler() -> None:
    """Repeated calls do not stack handlers."""
    stream = io.StringIO()
    with bare_root_logger() as root:
        configure_logging("debug", stream=stream)
        configure_logging("debug", stream=stream)
        assert len(root.handlers) == 1
        assert root.level == logging.DEBUG

        get_logger("esdoc.test").info("hello")
    assert stream.getvalue() == "[INFO] esdoc.test: hello\n"


def test_configure_logging_defaults_to_settings_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ESDOC_LOG_LEVEL", "warning")
    with bare_root_logger() as root:
        configure_logging(stream=io.StringIO())
        assert root.level == logging.WARNING


def test_rendering_failure_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    """A failed to_json leaves a debug record naming the document."""
    caplog.set_level(logging.DEBUG, logger="esdoc")
    doc = MapDocument({"widget": object()})
    doc.id = "w-1"
    with pytest.raises(SerializationFailure):
        doc.to_json()
    assert "Rendering document w-1 failed" in caplog.text
