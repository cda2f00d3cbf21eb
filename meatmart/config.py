"""TOML configuration loader for the shop."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from datetime import date, timedelta
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    try:
        import tomli as tomllib
    except ImportError:
        tomllib = None  # type: ignore[assignment]

from .models import Item, to_decimal


@dataclass
class SeedItem:
    name: str
    price: str
    quantity: int
    shelf_life_days: int

    def to_item(self, today: date | None = None) -> Item:
        expires = (today or date.today()) + timedelta(days=self.shelf_life_days)
        return Item.create(self.name, to_decimal(self.price), self.quantity, expires)


def _default_seed() -> list[SeedItem]:
    return [
        SeedItem(name="Chicken", price="205.00", quantity=8, shelf_life_days=5),
        SeedItem(name="Beef", price="280.00", quantity=9, shelf_life_days=7),
    ]


@dataclass
class ShopConfig:
    name: str = "MeatMart"
    currency_symbol: str = "₱"


@dataclass
class InventoryConfig:
    path: str = "inventory.txt"
    autosave: bool = True
    seed_defaults: bool = True
    expiring_days: int = 3
    seed: list[SeedItem] = field(default_factory=_default_seed)


@dataclass
class PrinterConfig:
    enabled: bool = False
    printer_name: str = ""


@dataclass
class ReportsConfig:
    pdf_dir: str = "reports"


@dataclass
class LoggingConfig:
    level: str = "WARNING"
    file: str = ""


@dataclass
class MeatMartConfig:
    shop: ShopConfig = field(default_factory=ShopConfig)
    inventory: InventoryConfig = field(default_factory=InventoryConfig)
    printer: PrinterConfig = field(default_factory=PrinterConfig)
    reports: ReportsConfig = field(default_factory=ReportsConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | Path | None = None) -> MeatMartConfig:
    """Load configuration from a TOML file.

    Falls back to defaults if no path is given or the file doesn't exist.
    The inventory path and log level can be overridden via environment
    variables.
    """
    raw: dict = {}

    if path is not None:
        p = Path(path)
        if p.exists():
            if tomllib is None:
                raise ImportError(
                    "tomli is required on Python < 3.11: pip install tomli"
                )
            with open(p, "rb") as f:
                raw = tomllib.load(f)

    shp = raw.get("shop", {})
    inv = raw.get("inventory", {})
    prn = raw.get("printer", {})
    rpt = raw.get("reports", {})
    log = raw.get("logging", {})

    # Resolve overrides: environment variable → config file → default
    inventory_path = os.environ.get("MEATMART_INVENTORY_PATH") or inv.get(
        "path", "inventory.txt"
    )
    log_level = os.environ.get("MEATMART_LOG_LEVEL") or log.get("level", "WARNING")

    if "seed" in inv:
        seed = [
            SeedItem(
                name=s.get("name", ""),
                price=str(s.get("price", "0")),
                quantity=s.get("quantity", 0),
                shelf_life_days=s.get("shelf_life_days", 7),
            )
            for s in inv["seed"]
        ]
    else:
        seed = _default_seed()

    return MeatMartConfig(
        shop=ShopConfig(
            name=shp.get("name", "MeatMart"),
            currency_symbol=shp.get("currency_symbol", "₱"),
        ),
        inventory=InventoryConfig(
            path=inventory_path,
            autosave=inv.get("autosave", True),
            seed_defaults=inv.get("seed_defaults", True),
            expiring_days=inv.get("expiring_days", 3),
            seed=seed,
        ),
        printer=PrinterConfig(
            enabled=prn.get("enabled", False),
            printer_name=prn.get("printer_name", ""),
        ),
        reports=ReportsConfig(
            pdf_dir=rpt.get("pdf_dir", "reports"),
        ),
        logging=LoggingConfig(
            level=str(log_level).upper(),
            file=log.get("file", ""),
        ),
    )
