"""
Logging setup for cadence-translator.

Modules obtain loggers with:
    from .logging import get_logger
    logger = get_logger(__name__)

The library never configures handlers on import. Host applications call
configure_logging() once if they want the output.
"""

import logging
import sys

DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def configure_logging(
    level: int = logging.INFO,
    fmt: str = DEFAULT_FORMAT,
    stream=sys.stderr,
):
    """
    Configure the package logger.

    Safe to call multiple times; a handler is only added once.
    """
    root = logging.getLogger("cadence_translator")
    if not root.handlers:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter(fmt))
        root.addHandler(handler)

    root.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Return a logger named after the calling module."""
    return logging.getLogger(name)
