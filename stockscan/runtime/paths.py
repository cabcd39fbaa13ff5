"""Centralized path management for stockscan.

This module provides a single source of truth for all project paths.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path


def _get_project_root() -> Path:
    """Determine the project root directory.

    STOCKSCAN_ROOT wins; otherwise the current working directory is used so
    a deployment can keep its config/ folder next to where it runs.
    """
    env_root = os.environ.get("STOCKSCAN_ROOT")
    if env_root:
        return Path(env_root).expanduser()
    return Path.cwd()


@dataclass
class ProjectPaths:
    """Container for all project-related paths.

    All paths are computed relative to the project root, ensuring consistency
    across all modules regardless of the current working directory.
    """

    root: Path = field(default_factory=_get_project_root)

    def __post_init__(self) -> None:
        # Ensure root is resolved to absolute path
        self.root = self.root.resolve()

    # --- Source code paths ---
    @property
    def src(self) -> Path:
        """Installed stockscan package directory."""
        return Path(__file__).resolve().parents[1]

    # --- Configuration paths ---
    @property
    def config(self) -> Path:
        """Configuration directory (config/)."""
        return self.root / "config"

    @property
    def parser_rules(self) -> Path:
        """Project-level parser rules override TOML file."""
        env_path = os.environ.get("STOCKSCAN_PARSER_RULES")
        if env_path:
            return Path(env_path).expanduser()
        return self.config / "parser_rules.toml"

    @property
    def default_parser_rules(self) -> Path:
        """Packaged default parser rules TOML file."""
        return self.src / "receipt" / "rules" / "default_parser_rules.toml"


# Module-level singleton
_paths: ProjectPaths | None = None


def get_paths() -> ProjectPaths:
    """Get the singleton ProjectPaths instance.

    Returns:
        The global ProjectPaths instance.
    """
    global _paths
    if _paths is None:
        _paths = ProjectPaths()
    return _paths


def reset_paths() -> None:
    """Forget the cached ProjectPaths so the next call re-reads the environment."""
    global _paths
    _paths = None
