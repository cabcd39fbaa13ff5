"""Build and validate an item name from the text left of the price."""

import logging
import re
from functools import lru_cache

from ..parser_config import ParserConfig
from .common import DATE_ONLY_PATTERN, TIME_ONLY_PATTERN, _collapse_whitespace

logger = logging.getLogger(__name__)

# "2 x Bread", "3× Eggs", "2* Milk", "4 @ Yoghurt", "2 Bread"
LEADING_QUANTITY = re.compile(r"^(\d{1,2})(?:\s*[x×*@])?\s+", re.IGNORECASE)

# SKU/barcode fragments embedded in the description.
LONG_DIGIT_RUN = re.compile(r"\d{4,}")

# Anything outside letters, digits, spaces and & ' . -
DISALLOWED_CHARS = re.compile(r"[^\w\s&'.\-]|_")

# Structural shapes that are codes, not product names.
CODE_SHAPES = (
    re.compile(r"^[^\W\d_]\d+$"),  # A123
    re.compile(r"^\d+[^\W\d_]$"),  # 123A
    re.compile(r"^(?:ref|sku|id|upc|plu|item|art|code|no)\s*[#:.\-]?\s*\d+$", re.IGNORECASE),
)

ALPHA_PATTERN = re.compile(r"[^\W\d_]")
WORD_START = re.compile(r"\b\w")


@lru_cache(maxsize=16)
def _label_pattern(label_words: tuple[str, ...]) -> re.Pattern[str] | None:
    if not label_words:
        return None
    alternatives = "|".join(re.escape(word) for word in label_words)
    return re.compile(r"^(?:" + alternatives + r")\s*[:.]?$", re.IGNORECASE)


def _split_quantity(text: str, config: ParserConfig) -> tuple[str, int]:
    """
    Strip a leading quantity marker and return ``(rest, quantity)``.

    Out-of-range quantities ("0 x") are left in place and default to 1.
    """
    match = LEADING_QUANTITY.match(text)
    if match is None:
        return text, 1
    quantity = int(match.group(1))
    if not 1 <= quantity <= config.max_quantity:
        return text, 1
    return text[match.end() :], quantity


def _clean_item_name(text: str) -> str:
    """Remove SKU fragments and OCR debris, collapsing whitespace."""
    text = LONG_DIGIT_RUN.sub(" ", text)
    text = DISALLOWED_CHARS.sub(" ", text)
    return _collapse_whitespace(text)


def _is_structural_non_item(name: str, config: ParserConfig) -> bool:
    """Return True for label words, dates, times and code-like names."""
    labels = _label_pattern(config.label_words)
    if labels is not None and labels.match(name):
        return True
    if not ALPHA_PATTERN.search(name):
        return True
    return any(pattern.match(name) for pattern in CODE_SHAPES)


def _same_length_case(char: str, mapped: str) -> str:
    # "ß".upper() == "SS", "ﬁ".upper() == "FI": keep such characters as-is.
    return mapped if len(mapped) == 1 else char


def _capitalize_words(name: str) -> str:
    """Lowercase, then uppercase each word start: "MILK 2L" -> "Milk 2l".

    Characters whose case mapping changes the string length are left
    unchanged, so the result is always as long as ``name``.
    """
    lowered = "".join(_same_length_case(c, c.lower()) for c in name)
    return WORD_START.sub(lambda m: _same_length_case(m.group(0), m.group(0).upper()), lowered)


def _extract_name(prefix: str, config: ParserConfig) -> tuple[str, int] | None:
    """
    Turn the text before a price into ``(name, quantity)``.

    Returns None if nothing usable remains after cleanup.
    """
    text, quantity = _split_quantity(prefix.strip(), config)
    # Dates and times lose their separators during cleanup; check them first.
    if DATE_ONLY_PATTERN.match(text) or TIME_ONLY_PATTERN.match(text):
        logger.debug("Rejecting name %r: date or time", text)
        return None
    name = _clean_item_name(text)

    if _is_structural_non_item(name, config):
        logger.debug("Rejecting name %r: looks like a label or code", name)
        return None

    name = _capitalize_words(name)
    if len(name) < config.min_name_length or len(name) > config.max_name_length:
        logger.debug("Rejecting name %r: length %d", name, len(name))
        return None
    return name, quantity
