"""
Logging setup shared by all esdoc modules.

Modules obtain their logger with::

    from esdoc.logging import get_logger
    logger = get_logger(__name__)

Handlers are only installed by configure_logging(), which applications call
once at startup. The library itself never configures the root logger.
"""

import logging
import sys
from typing import TextIO

from esdoc.config import get_settings

DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def configure_logging(
    level: int | str | None = None,
    fmt: str = DEFAULT_FORMAT,
    stream: TextIO | None = None,
) -> None:
    """
    Configure the root logging handler.

    Falls back to ``Settings.log_level`` when no level is given.
    Safe to call multiple times: a second handler is never added.
    """
    if level is None:
        level = get_settings().log_level
    if isinstance(level, str):
        level = level.upper()

    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(logging.Formatter(fmt))
        root.addHandler(handler)

    root.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module (``get_logger(__name__)``)."""
    return logging.getLogger(name)
