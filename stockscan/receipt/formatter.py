"""Format parsed receipt items for review output."""

from decimal import Decimal
from typing import Any

from stockscan.domain.receipt import ParsedItem


def _format_rows_aligned(rows: list[tuple[str, str, str]], indent: str = "  ") -> list[str]:
    """
    Format (label, quantity, price) rows with aligned columns.

    Args:
        rows: List of (label, quantity_text, price_text) tuples
        indent: Indentation prefix for each line

    Returns:
        List of formatted lines with left-aligned labels and right-aligned prices
    """
    if not rows:
        return []

    max_label_len = max(len(label) for label, _, _ in rows)
    max_qty_len = max(len(qty) for _, qty, _ in rows)
    max_price_len = max(len(price) for _, _, price in rows)

    lines = []
    for label, qty, price in rows:
        line = f"{indent}{label.ljust(max_label_len)}  {qty.rjust(max_qty_len)}  {price.rjust(max_price_len)}"
        lines.append(line.rstrip())
    return lines


def format_items_table(items: list[ParsedItem]) -> str:
    """Render items as a numbered, column-aligned table with a total footer."""
    rows: list[tuple[str, str, str]] = []
    for i, item in enumerate(items, 1):
        qty_str = f"x{item.quantity}" if item.quantity > 1 else ""
        rows.append((f"{i}. {item.name}", qty_str, f"{item.price:.2f}"))

    lines = _format_rows_aligned(rows)
    total = sum((item.total for item in items), Decimal("0"))
    lines.append(f"Items: {len(items)}  Total: {total:.2f}")
    return "\n".join(lines)


def item_to_dict(item: ParsedItem) -> dict[str, Any]:
    """JSON-ready mapping; price is a two-decimal string to avoid float drift."""
    return {
        "name": item.name,
        "quantity": item.quantity,
        "price": f"{item.price:.2f}",
    }


def items_to_dicts(items: list[ParsedItem]) -> list[dict[str, Any]]:
    return [item_to_dict(item) for item in items]
