"""Inventory storage and sales bookkeeping."""

from .flatfile import format_record, parse_record, read_records, write_records
from .inventory import InventoryStore
from .ledger import SalesLedger, SalesReport, week_of_year

__all__ = [
    "InventoryStore",
    "SalesLedger",
    "SalesReport",
    "week_of_year",
    "format_record",
    "parse_record",
    "read_records",
    "write_records",
]
