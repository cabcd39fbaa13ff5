"""Data models for receipt item extraction."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class PriceTier(Enum):
    """Price pattern kinds, in descending priority.

    Each value is ``(priority, anchored)``. Anchored tiers only match at the
    end of the line; ``ANYWHERE`` scans the whole line for the rightmost hit.
    """

    CURRENCY_PREFIX_END = (1, True)
    CURRENCY_SUFFIX_END = (2, True)
    BARE_END = (3, True)
    ANYWHERE = (4, False)

    @property
    def priority(self) -> int:
        return self.value[0]

    @property
    def anchored(self) -> bool:
        return self.value[1]


@dataclass(frozen=True)
class PriceMatch:
    """A price token located within one receipt line."""

    value: Decimal
    text: str
    # Character offset of ``text`` within the line it was found in.
    offset: int
    tier: PriceTier


@dataclass(frozen=True)
class ParsedItem:
    """A single purchased item proposed for inventory."""

    name: str
    price: Decimal
    quantity: int = 1

    @property
    def key(self) -> str:
        """Normalized name used for duplicate detection."""
        return normalize_item_key(self.name)

    @property
    def total(self) -> Decimal:
        # Price is the unit price shown on the line.
        return self.price * self.quantity


def normalize_item_key(name: str) -> str:
    """Lowercase ``name`` and drop all whitespace."""
    return "".join(name.lower().split())
