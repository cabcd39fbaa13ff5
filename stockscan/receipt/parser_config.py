"""Tuning values for receipt item extraction.

All heuristics read their thresholds from a ``ParserConfig`` passed into the
parse call. Defaults below match ``rules/default_parser_rules.toml``; runtime
code layers project overrides on top via ``build_parser_config``.

TOML layout (every key optional):

    [line_filter]
    min_line_length = 5
    exclusion_keywords = ["total", ...]   # replaces the list
    extra_exclusion_keywords = ["deposit"]  # extends the list

    [price_locator]
    currency_symbols = ["£", "$"]
    min_price = "0.01"

    [name_extractor]
    max_name_length = 50

    [aggregator]
    max_items = 30
"""

from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from decimal import Decimal, InvalidOperation
from typing import Any

DEFAULT_CURRENCY_SYMBOLS: tuple[str, ...] = ("£", "$", "€", "¥", "₹")

# Non-item receipt content. Matched case-insensitively when not embedded in a
# longer run of letters.
DEFAULT_EXCLUSION_KEYWORDS: tuple[str, ...] = (
    # Totals
    "total",
    "totals",
    "subtotal",
    "sub total",
    "sub-total",
    "amount due",
    "balance due",
    # Tax
    "tax",
    "vat",
    "gst",
    "hst",
    "pst",
    # Payment
    "cash",
    "card",
    "credit",
    "debit",
    "visa",
    "mastercard",
    "amex",
    "change",
    "balance",
    "tender",
    "tendered",
    "payment",
    # Discounts and loyalty
    "discount",
    "coupon",
    "loyalty",
    "points",
    "rewards",
    "savings",
    "you saved",
    "member",
    # Staff
    "operator",
    "cashier",
    "clerk",
    "till",
    # Boilerplate
    "store",
    "receipt",
    "invoice",
    "phone",
    "tel",
    "date",
    "time",
    "thank you",
    "welcome",
    "customer copy",
    # Authorization/reference codes
    "auth",
    "authorization",
    "approval",
    "approved",
    "ref",
    "reference",
    "transaction",
    "txn",
)

DEFAULT_LABEL_WORDS: tuple[str, ...] = ("qty", "quantity", "price", "total", "tax", "vat", "disc", "discount")


@dataclass(frozen=True)
class ParserConfig:
    """Immutable tuning values shared by all extraction stages."""

    # Line filter
    min_line_length: int = 5
    exclusion_keywords: tuple[str, ...] = DEFAULT_EXCLUSION_KEYWORDS
    separator_ratio: float = 0.9
    uppercase_header_ratio: float = 0.8
    uppercase_header_min_length: int = 10

    # Price locator
    currency_symbols: tuple[str, ...] = DEFAULT_CURRENCY_SYMBOLS
    min_price: Decimal = Decimal("0.01")
    max_price: Decimal = Decimal("9999.99")
    min_price_position: float = 0.3  # Prices sit in the right 70% of the line
    small_price_threshold: Decimal = Decimal("10")
    small_price_min_position: float = 0.5
    max_trailing_chars: int = 10
    min_prefix_chars: int = 2

    # Name extractor
    min_name_length: int = 2
    max_name_length: int = 50
    max_quantity: int = 99
    label_words: tuple[str, ...] = DEFAULT_LABEL_WORDS

    # Aggregator
    max_items: int = 30


DEFAULT_PARSER_CONFIG = ParserConfig()

# (section, key) -> ParserConfig field
_CONFIG_KEYS: dict[tuple[str, str], str] = {
    ("line_filter", "min_line_length"): "min_line_length",
    ("line_filter", "exclusion_keywords"): "exclusion_keywords",
    ("line_filter", "separator_ratio"): "separator_ratio",
    ("line_filter", "uppercase_header_ratio"): "uppercase_header_ratio",
    ("line_filter", "uppercase_header_min_length"): "uppercase_header_min_length",
    ("price_locator", "currency_symbols"): "currency_symbols",
    ("price_locator", "min_price"): "min_price",
    ("price_locator", "max_price"): "max_price",
    ("price_locator", "min_price_position"): "min_price_position",
    ("price_locator", "small_price_threshold"): "small_price_threshold",
    ("price_locator", "small_price_min_position"): "small_price_min_position",
    ("price_locator", "max_trailing_chars"): "max_trailing_chars",
    ("price_locator", "min_prefix_chars"): "min_prefix_chars",
    ("name_extractor", "min_name_length"): "min_name_length",
    ("name_extractor", "max_name_length"): "max_name_length",
    ("name_extractor", "max_quantity"): "max_quantity",
    ("name_extractor", "label_words"): "label_words",
    ("aggregator", "max_items"): "max_items",
}

# Keys that append to an existing tuple field instead of replacing it.
_EXTEND_KEYS: dict[tuple[str, str], str] = {
    ("line_filter", "extra_exclusion_keywords"): "exclusion_keywords",
    ("name_extractor", "extra_label_words"): "label_words",
}

_FIELD_TYPES: dict[str, Any] = {f.name: type(f.default) for f in fields(ParserConfig)}


def _normalize_words(raw: Any, where: str) -> tuple[str, ...]:
    """Normalize a TOML string list into a tuple of non-empty stripped strings."""
    if isinstance(raw, str):
        raw = [raw]
    if not isinstance(raw, list):
        raise ValueError(f"{where} must be a list of strings")
    values: list[str] = []
    for value in raw:
        if not isinstance(value, str):
            raise ValueError(f"{where} must be a list of strings")
        value = value.strip()
        if value:
            values.append(value)
    return tuple(values)


def _coerce(field_name: str, raw: Any, where: str) -> Any:
    """Coerce a raw TOML value to the type of ``field_name``."""
    field_type = _FIELD_TYPES[field_name]
    if field_type is tuple:
        return _normalize_words(raw, where)
    if field_type is Decimal:
        if isinstance(raw, bool) or not isinstance(raw, (str, int, float)):
            raise ValueError(f"{where} must be a number or numeric string")
        try:
            return Decimal(str(raw))
        except InvalidOperation as exc:
            raise ValueError(f"{where} is not a valid number: {raw!r}") from exc
    if field_type is int:
        if isinstance(raw, bool) or not isinstance(raw, int):
            raise ValueError(f"{where} must be an integer")
        return raw
    if field_type is float:
        if isinstance(raw, bool) or not isinstance(raw, (int, float)):
            raise ValueError(f"{where} must be a number")
        return float(raw)
    raise ValueError(f"{where} has unsupported type")


def _validate(config: ParserConfig) -> ParserConfig:
    if config.min_price <= 0 or config.min_price > config.max_price:
        raise ValueError("price_locator.min_price must be positive and not above max_price")
    if config.max_quantity < 1:
        raise ValueError("name_extractor.max_quantity must be at least 1")
    if config.min_name_length < 1 or config.min_name_length > config.max_name_length:
        raise ValueError("name_extractor.min_name_length must be between 1 and max_name_length")
    if config.max_items < 0:
        raise ValueError("aggregator.max_items must not be negative")
    if not config.currency_symbols:
        raise ValueError("price_locator.currency_symbols must not be empty")
    return config


def build_parser_config(
    *configs: Mapping[str, Any],
    base: ParserConfig = DEFAULT_PARSER_CONFIG,
) -> ParserConfig:
    """Merge in-memory TOML configs over ``base``; later configs win.

    Raises:
        ValueError: on unknown sections/keys or values of the wrong type.
    """
    overrides: dict[str, Any] = {}
    for config in configs:
        for section, table in config.items():
            if not isinstance(table, Mapping):
                raise ValueError(f"Unknown parser config key: {section}")
            # Replace keys first so an extra_* list extends the table's own list.
            ordered = sorted(table.items(), key=lambda kv: (section, kv[0]) in _EXTEND_KEYS)
            for key, raw in ordered:
                where = f"{section}.{key}"
                if (section, key) in _CONFIG_KEYS:
                    field_name = _CONFIG_KEYS[(section, key)]
                    overrides[field_name] = _coerce(field_name, raw, where)
                elif (section, key) in _EXTEND_KEYS:
                    field_name = _EXTEND_KEYS[(section, key)]
                    current = overrides.get(field_name, getattr(base, field_name))
                    extra = _coerce(field_name, raw, where)
                    overrides[field_name] = current + tuple(v for v in extra if v not in current)
                else:
                    raise ValueError(f"Unknown parser config key: {where}")

    return _validate(replace(base, **overrides))
