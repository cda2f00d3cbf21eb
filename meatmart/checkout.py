"""Purchase flow: stock check, deduction, sale recording and receipt."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from .models import Receipt, SaleEvent, to_whole_kilos
from .store import InventoryStore, SalesLedger

logger = logging.getLogger(__name__)


class Checkout:
    """Coordinates one customer purchase against the store and the ledger."""

    def __init__(
        self,
        inventory: InventoryStore,
        ledger: SalesLedger,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._inventory = inventory
        self._ledger = ledger
        self._clock = clock

    def purchase(self, item_name: str, quantity: object) -> Receipt:
        """Sell ``quantity`` kilos of ``item_name``.

        A rejected purchase leaves the inventory untouched and records
        no sale.

        Returns:
            The receipt for the completed purchase.

        Raises:
            NotFoundError: If the item does not exist (case-insensitive).
            ValidationError: If ``quantity`` is not a positive whole number.
            InsufficientStockError: If ``quantity`` exceeds the stock on hand.
        """
        item = self._inventory.get(item_name)
        kilos = to_whole_kilos(quantity)
        total = item.price * kilos

        # Validates quantity and stock before touching anything.
        self._inventory.deduct(item.name, kilos)

        now = self._clock()
        self._ledger.record(SaleEvent(timestamp=now, amount=total))
        logger.info("Sold %d kg of %s for %s", kilos, item.name, total)

        return Receipt(
            item_name=item.name,
            quantity=kilos,
            unit_price=item.price,
            total_price=total,
            purchased_at=now,
        )
