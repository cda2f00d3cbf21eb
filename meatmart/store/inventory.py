"""In-memory inventory with flat file persistence."""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, timedelta
from pathlib import Path

from ..errors import (
    InsufficientStockError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from ..models import Item, to_whole_kilos
from .flatfile import read_records, write_records

logger = logging.getLogger(__name__)


class InventoryStore:
    """Owns the ordered list of stock items.

    Every accessor hands out copies, so callers can never mutate stock
    except through the methods below.
    """

    def __init__(self, path: str | Path = "inventory.txt", *, autosave: bool = True) -> None:
        self._path = Path(path).expanduser()
        self._autosave = autosave
        self._items: list[Item] = []

    @property
    def path(self) -> Path:
        return self._path

    def __len__(self) -> int:
        return len(self._items)

    # -- lookups ---------------------------------------------------------

    def _find_exact(self, name: str) -> Item | None:
        return next((i for i in self._items if i.name == name), None)

    def _find_folded(self, name: str) -> Item | None:
        key = (name or "").strip().casefold()
        return next((i for i in self._items if i.key == key), None)

    def list(self) -> tuple[Item, ...]:
        """Return copies of all items in insertion order."""
        return tuple(replace(i) for i in self._items)

    def get(self, name: str) -> Item:
        """Case-insensitive lookup.

        Raises:
            NotFoundError: If no item has that name.
        """
        item = self._find_folded(name)
        if item is None:
            raise NotFoundError(name)
        return replace(item)

    def expiring_within(self, days: int, today: date | None = None) -> list[Item]:
        """Return items expiring on or before ``today + days``, soonest first."""
        cutoff = (today or date.today()) + timedelta(days=days)
        soon = [replace(i) for i in self._items if i.expiration_date <= cutoff]
        return sorted(soon, key=lambda i: i.expiration_date)

    # -- mutations -------------------------------------------------------

    def create(self, item: Item) -> Item:
        """Append a new item.

        Raises:
            ValidationError: If the item is invalid or its name is taken
                (case-insensitive).
        """
        item = Item.create(item.name, item.price, item.quantity, item.expiration_date)
        if self._find_folded(item.name) is not None:
            raise ValidationError(f"Item already exists in inventory: {item.name!r}")
        self._items.append(item)
        logger.info("Created item %s", item.name)
        self._changed()
        return replace(item)

    def update(
        self,
        name: str,
        quantity: object,
        price: object,
        expiration_date: date,
    ) -> Item:
        """Overwrite quantity, price and expiration of the item named exactly ``name``.

        Raises:
            NotFoundError: If no item has exactly that name.
            ValidationError: If the new values are invalid.
        """
        item = self._find_exact(name)
        if item is None:
            raise NotFoundError(name)
        checked = Item.create(item.name, price, quantity, expiration_date)
        item.quantity = checked.quantity
        item.price = checked.price
        item.expiration_date = checked.expiration_date
        logger.info("Updated item %s", item.name)
        self._changed()
        return replace(item)

    def delete(self, name: str) -> None:
        """Remove the item named exactly ``name``.

        Raises:
            NotFoundError: If no item has exactly that name.
        """
        item = self._find_exact(name)
        if item is None:
            raise NotFoundError(name)
        self._items.remove(item)
        logger.info("Deleted item %s", item.name)
        self._changed()

    def deduct(self, name: str, amount: object) -> Item:
        """Validate and subtract ``amount`` kilos from an item in one step.

        Raises:
            NotFoundError: If no item matches ``name`` (case-insensitive).
            ValidationError: If ``amount`` is not a positive whole number.
            InsufficientStockError: If ``amount`` exceeds the stock on hand.
        """
        item = self._find_folded(name)
        if item is None:
            raise NotFoundError(name)
        kilos = to_whole_kilos(amount)
        if kilos <= 0:
            raise ValidationError(f"Quantity must be positive: {amount}")
        if kilos > item.quantity:
            raise InsufficientStockError(item.name, kilos, item.quantity)
        item.quantity -= kilos
        logger.info("Deducted %d kg of %s, %d kg left", kilos, item.name, item.quantity)
        self._changed()
        return replace(item)

    def seed(self, items: list[Item]) -> int:
        """Add starter stock, but only into an empty inventory."""
        if self._items:
            return 0
        for item in items:
            self._items.append(
                Item.create(item.name, item.price, item.quantity, item.expiration_date)
            )
        if items:
            logger.info("Seeded inventory with %d items", len(items))
            self._changed()
        return len(items)

    # -- persistence -----------------------------------------------------

    def load(self) -> int | None:
        """Replace the in-memory items with the file contents.

        A missing file leaves the inventory empty. Read errors are logged
        and the current items are kept.

        Returns:
            Number of items loaded, or None if the file could not be read.
        """
        if not self._path.exists():
            logger.info("No inventory file at %s", self._path)
            return 0
        try:
            items = read_records(self._path)
        except PersistenceError:
            logger.exception("Inventory load failed")
            return None

        loaded: list[Item] = []
        seen: set[str] = set()
        for item in items:
            if item.key in seen:
                logger.warning("Skipping duplicate item %s in %s", item.name, self._path)
                continue
            seen.add(item.key)
            loaded.append(item)
        self._items = loaded
        logger.info("Loaded %d items from %s", len(loaded), self._path)
        return len(loaded)

    def save(self) -> bool:
        """Write all items to the file.

        Write errors are logged; the in-memory state is kept as is.

        Returns:
            True if the file was written.
        """
        try:
            write_records(self._path, self._items)
        except PersistenceError:
            logger.exception("Inventory save failed")
            return False
        return True

    def _changed(self) -> None:
        if self._autosave:
            self.save()
