"""Parse raw OCR text into proposed inventory items."""

import logging

from stockscan.domain.receipt import ParsedItem

from .ocr_parser import _extract_items
from .parser_config import DEFAULT_PARSER_CONFIG, ParserConfig

logger = logging.getLogger(__name__)

# Shown by callers when a scan yields nothing.
NO_ITEMS_HINT = "No items recognized. Try cropping more tightly around the item list."


def split_receipt_lines(text: str) -> list[str]:
    """Split OCR text into trimmed, non-empty lines."""
    return [line.strip() for line in text.splitlines() if line.strip()]


def parse_receipt_items(text: str | None, config: ParserConfig | None = None) -> list[ParsedItem]:
    """
    Parse OCR text from a receipt photo into a list of items.

    This is a best-effort parser - results should be manually reviewed.
    Malformed input never raises; the worst case is an empty list.

    Args:
        text: Full OCR output, one receipt line per text line
        config: Tuning values; defaults to DEFAULT_PARSER_CONFIG

    Returns:
        Deduplicated items in receipt order, capped at config.max_items
    """
    if config is None:
        config = DEFAULT_PARSER_CONFIG
    if not isinstance(text, str) or not text:
        return []

    lines = split_receipt_lines(text)
    items = _extract_items(lines, config)
    logger.info("Extracted %d items from %d lines", len(items), len(lines))
    return items
