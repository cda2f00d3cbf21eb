"""Plain-text rendering of items, receipts and sales reports."""

from __future__ import annotations

from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal, localcontext

from .models import Item, Receipt
from .store.ledger import SalesReport

_CENTS = Decimal("0.01")


def format_currency(amount: Decimal, symbol: str = "₱") -> str:
    """Two decimals with thousands separators, e.g. ``₱1,234.50``."""
    amount = Decimal(amount)
    with localcontext() as ctx:
        # Room for every integer digit plus cents.
        ctx.prec = max(ctx.prec, amount.adjusted() + 4)
        rounded = amount.quantize(_CENTS, rounding=ROUND_HALF_UP)
        sign = "-" if rounded < 0 else ""
        return f"{sign}{symbol}{rounded.copy_abs():,.2f}"


def format_item(item: Item, symbol: str = "₱") -> str:
    return "\n".join([
        f"Name: {item.name}",
        f"Price (per kilo): {format_currency(item.price, symbol)}",
        f"Quantity (in kilo): {item.quantity}",
        f"Expiration Date: {item.expiration_date.isoformat()}",
    ])


def format_inventory(items: Iterable[Item], symbol: str = "₱") -> str:
    blocks = [format_item(i, symbol) for i in items]
    if not blocks:
        return "No items in inventory."
    return "\n\n".join(blocks)


def format_receipt(
    receipt: Receipt,
    shop_name: str = "MeatMart",
    symbol: str = "₱",
) -> str:
    """Render a receipt as a block of text."""
    at = receipt.purchased_at
    return "\n".join([
        "Receipt:",
        f"Item: {receipt.item_name}",
        f"Quantity: {receipt.quantity} kilos",
        f"Unit Price: {format_currency(receipt.unit_price, symbol)}",
        f"Total Price: {format_currency(receipt.total_price, symbol)}",
        f"Purchase Date: {at:%Y-%m-%d} at {at:%H:%M}",
        f"Thank you for purchasing at {shop_name}.",
    ])


def format_sales_report(report: SalesReport, symbol: str = "₱") -> str:
    lines = ["Daily Sales Report:"]
    lines += [f"{day.isoformat()}: {format_currency(v, symbol)}" for day, v in report.daily]
    lines += ["", "Weekly Sales Report:"]
    lines += [
        f"Week {week} of {year}: {format_currency(v, symbol)}"
        for (year, week), v in report.weekly
    ]
    lines += ["", "Monthly Sales Report:"]
    lines += [
        f"Month {month} of {year}: {format_currency(v, symbol)}"
        for (year, month), v in report.monthly
    ]
    lines += ["", f"Total Sales: {format_currency(report.total, symbol)}"]
    return "\n".join(lines)
