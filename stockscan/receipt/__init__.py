"""Receipt text interpretation.

Usage:
    from stockscan.receipt import parse_receipt_items

    items = parse_receipt_items(ocr_text)
"""

from .ocr_result_parser import NO_ITEMS_HINT, parse_receipt_items, split_receipt_lines
from .parser_config import DEFAULT_PARSER_CONFIG, ParserConfig, build_parser_config

__all__ = [
    "DEFAULT_PARSER_CONFIG",
    "NO_ITEMS_HINT",
    "ParserConfig",
    "build_parser_config",
    "parse_receipt_items",
    "split_receipt_lines",
]
