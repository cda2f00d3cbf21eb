"""CLI entry point for the shop simulator."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from dotenv import load_dotenv

from .checkout import Checkout
from .config import MeatMartConfig, load_config
from .errors import MeatMartError, PersistenceError
from .models import Item
from .receipt import format_inventory
from .shell import Shell
from .store import InventoryStore, SalesLedger

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="meatmart",
        description="MeatMart inventory and point-of-sale simulator",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path to a TOML configuration file",
    )
    parser.add_argument(
        "--inventory",
        type=str,
        default=None,
        metavar="FILE",
        help="Inventory file (overrides the configuration)",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Log at INFO level"
    )

    sub = parser.add_subparsers(dest="command")

    # shell
    sub.add_parser("shell", help="Run the interactive Owner/Customer menus")

    # items
    items_parser = sub.add_parser("items", help="Print the inventory")
    items_parser.add_argument("--json", action="store_true", help="Output as JSON")

    # expiring
    exp_parser = sub.add_parser("expiring", help="List items expiring soon")
    exp_parser.add_argument(
        "--days", type=int, default=None, help="Look-ahead window in days"
    )
    exp_parser.add_argument("--json", action="store_true", help="Output as JSON")

    args = parser.parse_args(argv)

    load_dotenv()
    config = load_config(args.config)
    if args.inventory:
        config.inventory.path = args.inventory
    if args.verbose:
        config.logging.level = "INFO"
    setup_logging(config)

    try:
        inventory = open_inventory(
            config, read_only=args.command in ("items", "expiring")
        )
    except MeatMartError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    match args.command:
        case None | "shell":
            _cmd_shell(config, inventory)
            sys.exit(0)
        case "items":
            _cmd_items(config, inventory, args)
        case "expiring":
            _cmd_expiring(config, inventory, args)


def setup_logging(config: MeatMartConfig) -> None:
    """Configure the root logger from the [logging] section."""
    level = getattr(logging, config.logging.level, logging.WARNING)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if config.logging.file:
        handlers.append(logging.FileHandler(config.logging.file, encoding="utf-8"))
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=handlers,
        force=True,
    )


def open_inventory(config: MeatMartConfig, *, read_only: bool = False) -> InventoryStore:
    """Load the inventory file.

    Starter stock is seeded only when no inventory file exists yet. A
    read-only store never writes the file back.

    Raises:
        PersistenceError: If the file exists but cannot be read.
        ValidationError: If a configured seed entry is invalid.
    """
    inventory = InventoryStore(
        config.inventory.path,
        autosave=config.inventory.autosave and not read_only,
    )
    existed = inventory.path.exists()
    if inventory.load() is None:
        raise PersistenceError(
            f"Cannot read inventory file {inventory.path}; leaving it untouched"
        )
    if config.inventory.seed_defaults and not existed and not read_only:
        inventory.seed([s.to_item() for s in config.inventory.seed])
    return inventory


def _cmd_shell(config: MeatMartConfig, inventory: InventoryStore) -> None:
    ledger = SalesLedger()
    shell = Shell(inventory, ledger, Checkout(inventory, ledger), config)
    shell.run()


def _item_dict(item: Item) -> dict:
    return {
        "name": item.name,
        "price": str(item.price),
        "quantity": item.quantity,
        "expiration_date": item.expiration_date.isoformat(),
    }


def _cmd_items(config: MeatMartConfig, inventory: InventoryStore, args) -> None:
    items = inventory.list()
    if args.json:
        print(json.dumps([_item_dict(i) for i in items], ensure_ascii=False, indent=2))
    else:
        print(format_inventory(items, config.shop.currency_symbol))


def _cmd_expiring(config: MeatMartConfig, inventory: InventoryStore, args) -> None:
    days = args.days if args.days is not None else config.inventory.expiring_days
    items = inventory.expiring_within(days)
    if args.json:
        print(json.dumps([_item_dict(i) for i in items], ensure_ascii=False, indent=2))
        return
    if not items:
        print(f"No items expire within {days} days.")
        return
    print(f"Items expiring within {days} days: {len(items)}")
    for item in items:
        print(f"  {item.name:<12} {item.expiration_date.isoformat()}  ({item.quantity} kg)")
