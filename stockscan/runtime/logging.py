"""Logging for the stockscan process.

Everything logs under the ``stockscan`` logger. Parser modules call
``logging.getLogger(__name__)`` and stay free of handler setup; the CLI and
server call ``get_logger`` here, which installs one stderr handler on first use.

``STOCKSCAN_LOG_LEVEL`` (DEBUG, INFO, WARNING, ERROR) picks the starting level.
DEBUG shows every rejected receipt line with its reason.
"""

import logging
import os
import sys

DEFAULT_LOG_LEVEL = logging.INFO

LOG_FORMAT = "%(levelname)s [%(name)s] %(message)s"
LOG_FORMAT_DEBUG = "%(levelname)s [%(name)s:%(lineno)d] %(message)s"

LOGGER_NAMESPACE = "stockscan"

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
}

_handler: logging.Handler | None = None


def _level_from_env() -> int:
    return _LEVELS.get(os.environ.get("STOCKSCAN_LOG_LEVEL", "").upper(), DEFAULT_LOG_LEVEL)


def _format_for(level: int) -> logging.Formatter:
    return logging.Formatter(LOG_FORMAT_DEBUG if level == logging.DEBUG else LOG_FORMAT)


def configure_logging(level: int | None = None) -> None:
    """Attach the stderr handler to the ``stockscan`` logger once.

    Args:
        level: Starting level; None reads STOCKSCAN_LOG_LEVEL.
    """
    global _handler

    if _handler is not None:
        return
    if level is None:
        level = _level_from_env()

    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(_format_for(level))

    namespace_logger = logging.getLogger(LOGGER_NAMESPACE)
    namespace_logger.setLevel(level)
    namespace_logger.addHandler(_handler)
    namespace_logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``stockscan`` namespace for ``name``."""
    configure_logging()

    if name == LOGGER_NAMESPACE or name.startswith(f"{LOGGER_NAMESPACE}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")


def set_log_level(level: int) -> None:
    """Change the ``stockscan`` level; ``parse --verbose`` uses this for DEBUG."""
    configure_logging(level)
    logging.getLogger(LOGGER_NAMESPACE).setLevel(level)
    if _handler is not None:
        _handler.setFormatter(_format_for(level))
