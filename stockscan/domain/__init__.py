"""Core domain models for stockscan.

- ParsedItem: one proposed inventory line item
- PriceMatch, PriceTier: price tokens located inside a receipt line

Usage:
    from stockscan.domain import ParsedItem
"""

from stockscan.domain.receipt import ParsedItem, PriceMatch, PriceTier, normalize_item_key

__all__ = [
    "ParsedItem",
    "PriceMatch",
    "PriceTier",
    "normalize_item_key",
]
