"""Inventory and point-of-sale simulator for a shop selling goods by the kilo."""

from .checkout import Checkout
from .config import (
    InventoryConfig,
    LoggingConfig,
    MeatMartConfig,
    PrinterConfig,
    ReportsConfig,
    ShopConfig,
    load_config,
)
from .errors import (
    InsufficientStockError,
    MeatMartError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from .models import Item, Receipt, SaleEvent
from .receipt import format_receipt, format_sales_report
from .store import InventoryStore, SalesLedger, SalesReport

__all__ = [
    "Item",
    "SaleEvent",
    "Receipt",
    "InventoryStore",
    "SalesLedger",
    "SalesReport",
    "Checkout",
    "format_receipt",
    "format_sales_report",
    "MeatMartError",
    "ValidationError",
    "NotFoundError",
    "InsufficientStockError",
    "PersistenceError",
    "MeatMartConfig",
    "ShopConfig",
    "InventoryConfig",
    "PrinterConfig",
    "ReportsConfig",
    "LoggingConfig",
    "load_config",
]
