"""Value types for stock items, sale events and receipts."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation

from .errors import ValidationError

# Characters the flat record store cannot represent inside a name.
_FORBIDDEN_NAME_CHARS = (",", "\n", "\r")

# Upper bounds keep price x quantity within the default 28-digit Decimal context.
MAX_PRICE = Decimal("1000000000000")
MAX_KILOS = 1_000_000_000


def to_decimal(value: object, field_name: str = "price") -> Decimal:
    """Convert user or file input into a finite Decimal."""
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except (InvalidOperation, ValueError):
            raise ValidationError(f"Invalid {field_name}: {value!r}")
    if not result.is_finite():
        raise ValidationError(f"Invalid {field_name}: {value!r}")
    return result


def to_whole_kilos(value: object, field_name: str = "quantity") -> int:
    """Convert input into a whole number of kilos.

    Fractional amounts are rejected instead of being truncated.
    """
    if isinstance(value, bool):
        raise ValidationError(f"Invalid {field_name}: {value!r}")
    if isinstance(value, int):
        amount = Decimal(value)
    else:
        amount = to_decimal(value, field_name)
    if amount.copy_abs() > MAX_KILOS:
        raise ValidationError(
            f"{field_name.capitalize()} must not exceed {MAX_KILOS:,} kilos: {value}"
        )
    if isinstance(value, int):
        return value
    if amount != amount.to_integral_value():
        raise ValidationError(
            f"{field_name.capitalize()} must be a whole number of kilos: {value}"
        )
    return int(amount)


def validate_name(name: str) -> str:
    name = (name or "").strip()
    if not name:
        raise ValidationError("Item name must not be empty")
    if any(ch in name for ch in _FORBIDDEN_NAME_CHARS):
        raise ValidationError(
            f"Item name must not contain commas or line breaks: {name!r}"
        )
    return name


@dataclass
class Item:
    """One stock-keeping unit, sold by the kilo."""

    name: str
    price: Decimal  # per kilo
    quantity: int  # whole kilos on hand
    expiration_date: date

    @classmethod
    def create(
        cls,
        name: str,
        price: object,
        quantity: object,
        expiration_date: date,
    ) -> Item:
        """Build an item from loosely typed input, validating every field.

        Raises:
            ValidationError: If any field is empty, negative or malformed.
        """
        price = to_decimal(price)
        if price < 0:
            raise ValidationError(f"Price must not be negative: {price}")
        if price > MAX_PRICE:
            raise ValidationError(f"Price must not exceed {MAX_PRICE:,}: {price}")
        quantity = to_whole_kilos(quantity)
        if quantity < 0:
            raise ValidationError(f"Quantity must not be negative: {quantity}")
        if isinstance(expiration_date, datetime):
            expiration_date = expiration_date.date()
        if not isinstance(expiration_date, date):
            raise ValidationError(f"Invalid expiration date: {expiration_date!r}")
        return cls(
            name=validate_name(name),
            price=price,
            quantity=quantity,
            expiration_date=expiration_date,
        )

    @property
    def key(self) -> str:
        """Case-folded name used for case-insensitive lookups."""
        return self.name.casefold()

    def is_expired(self, today: date | None = None) -> bool:
        return self.expiration_date < (today or date.today())

    def days_until_expiry(self, today: date | None = None) -> int:
        return (self.expiration_date - (today or date.today())).days


@dataclass(frozen=True)
class SaleEvent:
    """A completed purchase amount at a point in time."""

    timestamp: datetime
    amount: Decimal


@dataclass(frozen=True)
class Receipt:
    """Snapshot of one completed purchase."""

    item_name: str
    quantity: int
    unit_price: Decimal
    total_price: Decimal
    purchased_at: datetime
