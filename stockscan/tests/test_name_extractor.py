from decimal import Decimal

from stockscan.receipt import parse_receipt_items
from stockscan.receipt.ocr_parser.name_extractor import (
    _capitalize_words,
    _clean_item_name,
    _extract_name,
    _split_quantity,
)


def test_plain_name_defaults_to_quantity_one(parser_config) -> None:
    assert _extract_name("Milk 2L                 ", parser_config) == ("Milk 2l", 1)


def test_leading_quantity_with_multiplier_marker(parser_config) -> None:
    assert _extract_name("2 x Bread Rolls", parser_config) == ("Bread Rolls", 2)
    assert _extract_name("3× Eggs Free Range", parser_config) == ("Eggs Free Range", 3)
    assert _extract_name("4* Yoghurt Pots", parser_config) == ("Yoghurt Pots", 4)
    assert _extract_name("12 @ Tea Lights", parser_config) == ("Tea Lights", 12)


def test_leading_quantity_without_marker(parser_config) -> None:
    assert _extract_name("2 Baguettes", parser_config) == ("Baguettes", 2)


def test_digits_attached_to_a_word_are_not_a_quantity(parser_config) -> None:
    assert _split_quantity("7UP Cans", parser_config) == ("7UP Cans", 1)
    assert _split_quantity("2x4 Timber", parser_config) == ("2x4 Timber", 1)


def test_out_of_range_quantity_is_left_in_name(parser_config) -> None:
    assert _split_quantity("0 x Bananas", parser_config) == ("0 x Bananas", 1)


def test_sku_fragments_and_ocr_debris_are_removed() -> None:
    assert _clean_item_name("Chicken Breast 5012345678") == "Chicken Breast"
    assert _clean_item_name("Bread*** (Sliced)") == "Bread Sliced"
    assert _clean_item_name("M&S  Fruit-Salad") == "M&S Fruit-Salad"
    assert _clean_item_name("Ice_Cream | Tub") == "Ice Cream Tub"


def test_names_outside_length_bounds_are_rejected(parser_config) -> None:
    assert _extract_name("X", parser_config) is None
    assert _extract_name("Organic " * 7, parser_config) is None


def test_label_words_are_rejected(parser_config) -> None:
    for prefix in ["qty", "Total", "TAX:", "Disc", "Price"]:
        assert _extract_name(prefix, parser_config) is None, prefix


def test_code_shaped_names_are_rejected(parser_config) -> None:
    for prefix in ["A123", "123A", "SKU 123", "Ref# 889", "ID: 42", "12/03/24", "14:05", "12 03"]:
        assert _extract_name(prefix, parser_config) is None, prefix


def test_capitalize_words() -> None:
    assert _capitalize_words("MILK 2L") == "Milk 2l"
    assert _capitalize_words("bread rolls") == "Bread Rolls"
    assert _capitalize_words("m&s fruit-salad") == "M&S Fruit-Salad"


def test_capitalize_words_keeps_characters_whose_case_mapping_grows() -> None:
    assert _capitalize_words("ﬁsh FINGERS") == "ﬁsh Fingers"
    assert _capitalize_words("STRAßE brot") == "Straße Brot"
    assert _capitalize_words("İzmir figs") == "İzmir Figs"


def test_extracted_name_never_exceeds_max_length(parser_config) -> None:
    name = " ".join(["ßx"] * 17)
    assert len(name) == 50

    extracted = _extract_name(name, parser_config)

    assert extracted == (name, 1)
    assert len(extracted[0]) <= parser_config.max_name_length


def test_ligature_names_parse_with_one_capital() -> None:
    items = parse_receipt_items("ﬁsh Fingers      2.99")

    assert [item.name for item in items] == ["ﬁsh Fingers"]
    assert items[0].price == Decimal("2.99")

    long_items = parse_receipt_items(" ".join(["ßx"] * 17) + "      5.99")
    assert len(long_items) == 1
    assert len(long_items[0].name) == 50
