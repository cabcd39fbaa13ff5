"""Shared pytest fixtures for stockscan tests."""

from __future__ import annotations

import pytest
from stockscan.receipt.parser_config import DEFAULT_PARSER_CONFIG, ParserConfig
from stockscan.runtime.parser_rules import load_parser_config
from stockscan.runtime.paths import reset_paths


@pytest.fixture
def parser_config() -> ParserConfig:
    return DEFAULT_PARSER_CONFIG


@pytest.fixture(autouse=True)
def _isolated_runtime(tmp_path, monkeypatch):
    """Point runtime path resolution at an empty project root per test."""
    monkeypatch.setenv("STOCKSCAN_ROOT", str(tmp_path))
    monkeypatch.delenv("STOCKSCAN_PARSER_RULES", raising=False)
    reset_paths()
    load_parser_config.cache_clear()
    yield
    reset_paths()
    load_parser_config.cache_clear()
