"""Tests for Item validation and value types."""

from datetime import date, datetime
from decimal import Decimal

import pytest

from meatmart.errors import ValidationError
from meatmart.models import (
    MAX_KILOS,
    MAX_PRICE,
    Item,
    Receipt,
    to_decimal,
    to_whole_kilos,
)


def test_create_normalizes_fields():
    """create converts text input into typed fields."""
    item = Item.create("  Chicken ", "205.00", "8", date(2025, 1, 10))
    assert item.name == "Chicken"
    assert item.price == Decimal("205.00")
    assert item.quantity == 8
    assert item.expiration_date == date(2025, 1, 10)


def test_create_truncates_datetime_to_date():
    item = Item.create("Beef", 280, 9, datetime(2025, 1, 10, 15, 30))
    assert item.expiration_date == date(2025, 1, 10)


@pytest.mark.parametrize(
    "name, price, quantity",
    [
        ("", "1", 1),
        ("Pork, belly", "1", 1),
        ("Pork\nbelly", "1", 1),
        ("Pork", "-1", 1),
        ("Pork", "abc", 1),
        ("Pork", "1", -2),
        ("Pork", "1", "2.5"),
    ],
)
def test_create_rejects_invalid_input(name, price, quantity):
    """Empty names, separators, negative or malformed values are rejected."""
    with pytest.raises(ValidationError):
        Item.create(name, price, quantity, date(2025, 1, 1))


def test_key_is_case_insensitive():
    assert Item.create("ChIcKeN", 1, 1, date(2025, 1, 1)).key == "chicken"


def test_expiry_helpers():
    item = Item.create("Beef", 1, 1, date(2025, 1, 10))
    assert item.days_until_expiry(date(2025, 1, 7)) == 3
    assert item.is_expired(date(2025, 1, 11)) is True
    assert item.is_expired(date(2025, 1, 10)) is False


def test_to_decimal_avoids_float_noise():
    assert to_decimal(0.1) == Decimal("0.1")


def test_to_whole_kilos():
    assert to_whole_kilos("3") == 3
    assert to_whole_kilos(Decimal("4.0")) == 4
    with pytest.raises(ValidationError, match="whole number"):
        to_whole_kilos("1.5")
    with pytest.raises(ValidationError):
        to_whole_kilos(True)


def test_receipt_is_immutable():
    receipt = Receipt("Chicken", 3, Decimal("205.00"), Decimal("615.00"), datetime(2025, 1, 1))
    with pytest.raises(AttributeError):
        receipt.total_price = Decimal("0")  # type: ignore[misc]


def test_create_rejects_oversized_price():
    with pytest.raises(ValidationError, match="must not exceed"):
        Item.create("Wagyu", "1" + "0" * 27, 1, date(2025, 1, 1))
    assert Item.create("Wagyu", MAX_PRICE, 1, date(2025, 1, 1)).price == MAX_PRICE


def test_to_whole_kilos_bounds():
    """Huge amounts are rejected before any integer conversion."""
    assert to_whole_kilos(MAX_KILOS) == MAX_KILOS
    assert to_whole_kilos(str(MAX_KILOS)) == MAX_KILOS
    for value in ("1e5000000", "-1e5000000", 10**10, Decimal("1E+10")):
        with pytest.raises(ValidationError, match="must not exceed"):
            to_whole_kilos(value)
