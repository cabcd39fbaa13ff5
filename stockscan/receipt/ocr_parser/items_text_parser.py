"""Text-line based receipt item extraction."""

import logging

from stockscan.domain.receipt import ParsedItem

from ..parser_config import ParserConfig
from .line_filter import _should_skip_line
from .name_extractor import _extract_name
from .price_locator import _find_price

logger = logging.getLogger(__name__)


def _extract_item_from_line(line: str, config: ParserConfig) -> ParsedItem | None:
    """Run filter -> price -> name on one trimmed line."""
    if _should_skip_line(line, config):
        return None

    price = _find_price(line, config)
    if price is None:
        return None

    extracted = _extract_name(line[: price.offset], config)
    if extracted is None:
        return None

    name, quantity = extracted
    return ParsedItem(name=name, price=price.value, quantity=quantity)


def _dedupe_items(items: list[ParsedItem], max_items: int) -> list[ParsedItem]:
    """
    Keep the first item per normalized name, then cap the list.

    Later duplicates are usually the same line read twice by OCR, so they
    are dropped rather than summed.
    """
    seen: set[str] = set()
    unique: list[ParsedItem] = []
    for item in items:
        if item.key in seen:
            logger.debug("Dropping duplicate item %r", item.name)
            continue
        seen.add(item.key)
        unique.append(item)
    if len(unique) > max_items:
        logger.debug("Truncating %d items to %d", len(unique), max_items)
    return unique[:max_items]


def _extract_items(lines: list[str], config: ParserConfig) -> list[ParsedItem]:
    """
    Extract line items from receipt text lines.

    This is heuristic-based and results should always be reviewed by a person.

    Args:
        lines: Text lines from the receipt, in reading order
        config: Thresholds and keyword sets for every stage
    """
    items: list[ParsedItem] = []
    for raw_line in lines:
        line = raw_line.strip()
        if not line:
            continue
        item = _extract_item_from_line(line, config)
        if item is not None:
            items.append(item)
    return _dedupe_items(items, config.max_items)
