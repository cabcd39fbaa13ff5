from dataclasses import replace
from decimal import Decimal

from stockscan.domain.receipt import PriceTier
from stockscan.receipt.ocr_parser.price_locator import _find_price, _match_tier


def test_bare_price_at_end_of_line(parser_config) -> None:
    match = _find_price("Milk 2L                 1.99", parser_config)

    assert match is not None
    assert match.value == Decimal("1.99")
    assert match.text == "1.99"
    assert match.offset == 24
    assert match.tier is PriceTier.BARE_END


def test_currency_prefix_with_comma_decimal(parser_config) -> None:
    match = _find_price("Apple Juice £2,50", parser_config)

    assert match is not None
    assert match.value == Decimal("2.50")
    assert match.text == "£2,50"
    assert match.offset == 12
    assert match.tier is PriceTier.CURRENCY_PREFIX_END


def test_currency_suffix_at_end_of_line(parser_config) -> None:
    match = _find_price("Coffee Beans 12.99€", parser_config)

    assert match is not None
    assert match.value == Decimal("12.99")
    assert match.text == "12.99€"
    assert match.tier is PriceTier.CURRENCY_SUFFIX_END


def test_currency_prefix_beats_earlier_bare_number(parser_config) -> None:
    match = _find_price("Chocolate 3.99 £4.50", parser_config)

    assert match is not None
    assert match.value == Decimal("4.50")
    assert match.offset == 15
    assert match.tier is PriceTier.CURRENCY_PREFIX_END


def test_price_followed_by_tax_marker_uses_anywhere_tier(parser_config) -> None:
    match = _find_price("Eggs 6 pack 3.49 H", parser_config)

    assert match is not None
    assert match.value == Decimal("3.49")
    assert match.offset == 12
    assert match.tier is PriceTier.ANYWHERE


def test_anywhere_tier_prefers_currency_form_of_same_number(parser_config) -> None:
    match = _match_tier("Orange Juice £2.50 ea", PriceTier.ANYWHERE, parser_config)

    assert match is not None
    assert match.text == "£2.50"
    assert match.offset == 13


def test_each_tier_is_checked_independently(parser_config) -> None:
    line = "Apple Juice £2,50"

    bare = _match_tier(line, PriceTier.BARE_END, parser_config)
    assert bare is not None
    assert bare.value == Decimal("2.50")
    assert bare.offset == 13
    assert _match_tier(line, PriceTier.CURRENCY_SUFFIX_END, parser_config) is None


def test_left_positioned_number_is_not_a_price(parser_config) -> None:
    assert _find_price("2.50 Fresh Basil Leaves", parser_config) is None


def test_small_value_before_midpoint_is_treated_as_quantity(parser_config) -> None:
    assert _find_price("Rice Bag 1.50 Basmati", parser_config) is None

    match = _find_price("Rice Bag 15.50 Basmati", parser_config)
    assert match is not None
    assert match.value == Decimal("15.50")


def test_price_buried_mid_line_is_rejected(parser_config) -> None:
    assert _find_price("Green Tea Bags 12.50 extra honey pot", parser_config) is None


def test_tail_of_longer_number_is_rejected(parser_config) -> None:
    assert _find_price("Item code 123456.78", parser_config) is None
    assert _find_price("Television 1.234,56", parser_config) is None


def test_out_of_range_values_are_rejected(parser_config) -> None:
    assert _find_price("Gold Watch 0.00", parser_config) is None


def test_price_needs_room_for_a_name(parser_config) -> None:
    assert _find_price("A    12.99", parser_config) is None


def test_custom_multi_character_currency_symbol(parser_config) -> None:
    config = replace(parser_config, currency_symbols=("kr",))

    match = _find_price("Kaffe Bryggmalet 45,90 kr", config)

    assert match is not None
    assert match.value == Decimal("45.90")
    assert match.tier is PriceTier.CURRENCY_SUFFIX_END
