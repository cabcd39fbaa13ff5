"""Discard receipt lines that cannot be purchased items."""

import logging

from ..parser_config import ParserConfig
from .common import (
    ALPHA_RUN_PATTERN,
    DATE_PATTERN,
    DIGITS_ONLY_PATTERN,
    SEPARATOR_CHARS,
    TIME_ONLY_PATTERN,
    _keyword_pattern,
)

logger = logging.getLogger(__name__)


def _is_separator_line(line: str, ratio: float) -> bool:
    """Return True if the line is (almost) all separator characters."""
    if len(line) < 3:
        return False
    separators = sum(1 for c in line if c in SEPARATOR_CHARS)
    return separators / len(line) >= ratio


def _looks_like_section_header(line: str, config: ParserConfig) -> bool:
    """Mostly-uppercase long lines are headers like "FRESH PRODUCE DEPARTMENT"."""
    if len(line) <= config.uppercase_header_min_length:
        return False
    upper_count = sum(1 for c in line if c.isupper())
    return upper_count / len(line) > config.uppercase_header_ratio


def _skip_reason(line: str, config: ParserConfig) -> str | None:
    """Return why ``line`` is not an item line, or None to keep it."""
    if len(line) < config.min_line_length:
        return "too short"

    keywords = _keyword_pattern(config.exclusion_keywords)
    if keywords is not None:
        match = keywords.search(line)
        if match:
            return f"keyword {match.group(0)!r}"

    if not ALPHA_RUN_PATTERN.search(line):
        return "no letters"
    if DIGITS_ONLY_PATTERN.match(line):
        return "digits only"
    if DATE_PATTERN.match(line):
        return "date"
    if TIME_ONLY_PATTERN.match(line):
        return "time"
    if _is_separator_line(line, config.separator_ratio):
        return "separator"
    if _looks_like_section_header(line, config):
        return "section header"
    return None


def _should_skip_line(line: str, config: ParserConfig) -> bool:
    """
    Decide whether a trimmed OCR line should be discarded before price search.

    Each rejection is logged at DEBUG with its reason.
    """
    reason = _skip_reason(line, config)
    if reason is not None:
        logger.debug("Skipping line %r: %s", line, reason)
        return True
    return False
