"""Exception types raised by the inventory, ledger and checkout layers."""

from __future__ import annotations


class MeatMartError(Exception):
    """Base class for all errors the shell reports to the user."""


class ValidationError(MeatMartError, ValueError):
    """Malformed or duplicate input data."""


class NotFoundError(MeatMartError, LookupError):
    """An item name did not match anything in the inventory."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Item not found in inventory: {name!r}")
        self.name = name


class InsufficientStockError(MeatMartError):
    """A purchase asked for more kilos than are on hand."""

    def __init__(self, name: str, requested: int, available: int) -> None:
        super().__init__(
            f"Not enough quantity available for purchase: "
            f"{requested} kg of {name} requested, {available} kg on hand"
        )
        self.name = name
        self.requested = requested
        self.available = available


class PersistenceError(MeatMartError, OSError):
    """The inventory file could not be read or written."""
