"""Composable OCR receipt parser components."""

from .items_text_parser import _dedupe_items, _extract_item_from_line, _extract_items
from .line_filter import _should_skip_line
from .name_extractor import _extract_name
from .price_locator import _find_price, _match_tier

__all__ = [
    "_dedupe_items",
    "_extract_item_from_line",
    "_extract_items",
    "_extract_name",
    "_find_price",
    "_match_tier",
    "_should_skip_line",
]
