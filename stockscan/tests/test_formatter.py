from decimal import Decimal

from stockscan.domain.receipt import ParsedItem
from stockscan.receipt.formatter import format_items_table, item_to_dict, items_to_dicts


def test_format_items_table_aligns_rows_and_sums_totals() -> None:
    items = [
        ParsedItem(name="Milk 2l", price=Decimal("1.99")),
        ParsedItem(name="Bread Rolls", price=Decimal("3.50"), quantity=2),
    ]

    lines = format_items_table(items).splitlines()

    assert lines[0].startswith("  1. Milk 2l")
    assert lines[0].endswith("1.99")
    assert lines[1].startswith("  2. Bread Rolls")
    assert lines[1].endswith("x2  3.50")
    assert len(lines[0]) == len(lines[1])
    assert lines[-1] == "Items: 2  Total: 8.99"


def test_format_items_table_empty() -> None:
    assert format_items_table([]) == "Items: 0  Total: 0.00"


def test_item_to_dict_uses_string_price() -> None:
    item = ParsedItem(name="Apple Juice", price=Decimal("2.5"))

    assert item_to_dict(item) == {"name": "Apple Juice", "quantity": 1, "price": "2.50"}
    assert items_to_dicts([item, item]) == [item_to_dict(item), item_to_dict(item)]


def test_parsed_item_key_and_total() -> None:
    item = ParsedItem(name="Bread  Rolls ", price=Decimal("3.50"), quantity=3)

    assert item.key == "breadrolls"
    assert item.total == Decimal("10.50")
