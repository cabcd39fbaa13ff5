"""Locate the most plausible price token on a receipt line."""

import logging
import re
from decimal import Decimal, InvalidOperation
from functools import lru_cache

from stockscan.domain.receipt import PriceMatch, PriceTier

from ..parser_config import ParserConfig

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")

# 1-4 digits, comma or period, exactly two decimals, not followed by a digit.
_NUMBER = r"(?P<num>\d{1,4}[.,]\d{2})(?!\d)"

# Tiers that match a single pattern kind, in priority order.
_PATTERN_TIERS = (PriceTier.CURRENCY_PREFIX_END, PriceTier.CURRENCY_SUFFIX_END, PriceTier.BARE_END)


@lru_cache(maxsize=16)
def _tier_patterns(currency_symbols: tuple[str, ...]) -> dict[PriceTier, re.Pattern[str]]:
    """Compile unanchored patterns for each single-kind tier."""
    # Longest first so multi-character symbols ("kr", "Rs") are tried whole.
    ordered = sorted(currency_symbols, key=len, reverse=True)
    symbols = "(?:" + "|".join(re.escape(s) for s in ordered) + ")"
    return {
        PriceTier.CURRENCY_PREFIX_END: re.compile(symbols + r"\s*" + _NUMBER),
        PriceTier.CURRENCY_SUFFIX_END: re.compile(_NUMBER + r"\s*" + symbols),
        PriceTier.BARE_END: re.compile(_NUMBER),
    }


@lru_cache(maxsize=16)
def _anchored_patterns(currency_symbols: tuple[str, ...]) -> dict[PriceTier, re.Pattern[str]]:
    """Same patterns as ``_tier_patterns`` but anchored at end of line."""
    return {
        tier: re.compile(pattern.pattern + r"\s*$")
        for tier, pattern in _tier_patterns(currency_symbols).items()
    }


def _parse_price(text: str) -> Decimal | None:
    """Parse "2,50" / "2.50" into Decimal("2.50")."""
    try:
        return Decimal(text.replace(",", ".")).quantize(CENTS)
    except InvalidOperation:
        return None


def _to_price_match(line: str, match: re.Match[str], tier: PriceTier) -> PriceMatch | None:
    value = _parse_price(match.group("num"))
    if value is None:
        return None
    text = match.group(0).rstrip()
    return PriceMatch(value=value, text=text, offset=match.start(), tier=tier)


def _is_plausible_price(line: str, candidate: PriceMatch, config: ParserConfig) -> bool:
    """
    Check positional plausibility of a price candidate.

    Receipts right-align prices; a number on the left is more likely a
    quantity, a size or part of a product code.
    """
    value = candidate.value
    offset = candidate.offset
    if value < config.min_price or value > config.max_price:
        return False
    if not line:
        return False

    relative_position = offset / len(line)
    if relative_position < config.min_price_position:
        return False

    prefix = line[:offset]
    if sum(1 for c in prefix if not c.isspace()) < config.min_prefix_chars:
        return False

    # Small numbers left of the midpoint are usually quantities.
    if value < config.small_price_threshold and relative_position <= config.small_price_min_position:
        return False

    trailing = line[offset + len(candidate.text) :].strip()
    if len(trailing) > config.max_trailing_chars:
        return False

    # Tail of a longer digit run ("123456.78") or of a thousands group ("1.234,56").
    if offset >= 1 and line[offset - 1].isdigit():
        return False
    if offset >= 2 and line[offset - 1] in ".," and line[offset - 2].isdigit():
        return False
    return True


def _match_tier(line: str, tier: PriceTier, config: ParserConfig) -> PriceMatch | None:
    """
    Return the valid match for a single tier, or None.

    Anchored tiers look only at the end of the line. ``ANYWHERE`` collects
    every occurrence of the anchored kinds and keeps the rightmost valid one;
    when two kinds cover the same number the higher-priority kind wins.
    """
    if tier.anchored:
        match = _anchored_patterns(config.currency_symbols)[tier].search(line)
        if match is None:
            return None
        candidate = _to_price_match(line, match, tier)
        if candidate is not None and _is_plausible_price(line, candidate, config):
            return candidate
        return None

    found: list[tuple[int, int, PriceMatch]] = []
    for kind, pattern in _tier_patterns(config.currency_symbols).items():
        for match in pattern.finditer(line):
            candidate = _to_price_match(line, match, PriceTier.ANYWHERE)
            if candidate is not None:
                found.append((match.end("num"), kind.priority, candidate))

    # Rightmost number first; ties go to the higher-priority kind.
    found.sort(key=lambda entry: (-entry[0], entry[1]))
    for _, _, candidate in found:
        if _is_plausible_price(line, candidate, config):
            return candidate
    return None


def _find_price(line: str, config: ParserConfig) -> PriceMatch | None:
    """Return the most plausible price on ``line``; first satisfied tier wins."""
    for tier in (*_PATTERN_TIERS, PriceTier.ANYWHERE):
        candidate = _match_tier(line, tier, config)
        if candidate is not None:
            return candidate
    logger.debug("No plausible price in line %r", line)
    return None
