"""Runtime loader for receipt parser rules."""

from __future__ import annotations

import tomllib
from functools import lru_cache
from pathlib import Path
from typing import Any

from stockscan.receipt.parser_config import ParserConfig, build_parser_config
from stockscan.runtime.logging import get_logger
from stockscan.runtime.paths import get_paths

logger = get_logger(__name__)


def _load_toml(path: Path) -> dict[str, Any]:
    """Load TOML file and return parsed dict; missing files map to empty dict."""
    if not path.exists():
        return {}

    with open(path, "rb") as f:
        data = tomllib.load(f)
    return data if isinstance(data, dict) else {}


@lru_cache(maxsize=8)
def load_parser_config(config_path: str | None = None) -> ParserConfig:
    """
    Load parser rules from the packaged defaults plus one override file.

    Args:
        config_path: Optional TOML override. If None, uses the project
            parser_rules.toml (or STOCKSCAN_PARSER_RULES) when it exists.

    Returns:
        Merged, validated ParserConfig.

    Raises:
        FileNotFoundError: if an explicit config_path does not exist.
        ValueError: if a rules file contains unknown keys or bad values.
    """
    p = get_paths()
    if config_path is not None:
        override = Path(config_path).expanduser()
        if not override.exists():
            raise FileNotFoundError(f"Parser rules file not found: {override}")
    else:
        override = p.parser_rules

    layers: list[Path] = [p.default_parser_rules]
    if override.resolve() != p.default_parser_rules.resolve():
        layers.append(override)

    configs = []
    for path in layers:
        data = _load_toml(path)
        if data:
            logger.debug("Loaded parser rules from %s", path)
        configs.append(data)

    try:
        return build_parser_config(*configs)
    except ValueError as exc:
        raise ValueError(f"Invalid parser rules ({', '.join(str(path) for path in layers)}): {exc}") from exc
