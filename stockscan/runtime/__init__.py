"""Runtime infrastructure for stockscan.

This package provides process/runtime services including:
- Logging setup via get_logger()
- Path resolution via get_paths(), ProjectPaths
- Parser rule loading via load_parser_config()

Usage:
    from stockscan.runtime import get_logger, load_parser_config

    logger = get_logger(__name__)
    config = load_parser_config()
"""

from stockscan.runtime.logging import configure_logging, get_logger, set_log_level
from stockscan.runtime.parser_rules import load_parser_config
from stockscan.runtime.paths import ProjectPaths, get_paths, reset_paths

__all__ = [
    # Logging
    "get_logger",
    "configure_logging",
    "set_log_level",
    # Rules
    "load_parser_config",
    # Paths
    "get_paths",
    "reset_paths",
    "ProjectPaths",
]
