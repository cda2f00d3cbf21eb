"""Interactive role selection loop with Owner and Customer menus."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date, datetime
from pathlib import Path

from .checkout import Checkout
from .config import MeatMartConfig
from .errors import MeatMartError, NotFoundError
from .models import Item, to_decimal, to_whole_kilos
from .printer import Printer
from .receipt import (
    format_currency,
    format_inventory,
    format_receipt,
    format_sales_report,
)
from .store import InventoryStore, SalesLedger
from .store.flatfile import parse_date

logger = logging.getLogger(__name__)

OWNER_MENU = """
Owner Menu:
1. Create Item
2. Read Items
3. Update Item
4. Delete Item
5. View Sales Reports
6. Export Sales Report (PDF)
7. Show Expiring Items
8. Back to Main Menu
9. Exit
"""

CUSTOMER_MENU = """
Customer Menu:
1. Display Available Products
2. Buy Product
3. Back to Main Menu
4. Exit
"""


class Shell:
    """Text menus driving the inventory, ledger and checkout.

    ``input_fn`` and ``output`` default to the console and are swapped out
    in tests.
    """

    def __init__(
        self,
        inventory: InventoryStore,
        ledger: SalesLedger,
        checkout: Checkout,
        config: MeatMartConfig | None = None,
        *,
        input_fn: Callable[[str], str] | None = None,
        output: Callable[[str], None] | None = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._inventory = inventory
        self._ledger = ledger
        self._checkout = checkout
        self._config = config or MeatMartConfig()
        self._input = input_fn or input
        self._out = output or print
        self._today = today

    @property
    def _symbol(self) -> str:
        return self._config.shop.currency_symbol

    def _ask(self, prompt: str) -> str:
        return self._input(prompt).strip()

    def run(self) -> None:
        """Loop until the user exits or input ends, then save the inventory."""
        try:
            while True:
                role = self._ask(
                    "\nEnter 'O' for Owner, 'C' for Customer or 'Q' to quit: "
                ).upper()
                if role == "O":
                    if self.owner_menu():
                        break
                elif role == "C":
                    if self.customer_menu():
                        break
                elif role == "Q":
                    break
                else:
                    self._out("Invalid user type. 'O' for Owner or 'C' for Customer only.")
        except (EOFError, KeyboardInterrupt):
            self._out("")
        self._save()

    # -- menus -----------------------------------------------------------

    def owner_menu(self) -> bool:
        """Run the owner menu. Returns True when the user chose Exit."""
        actions = {
            1: self._create_item,
            2: self._read_items,
            3: self._update_item,
            4: self._delete_item,
            5: self._show_sales,
            6: self._export_sales_pdf,
            7: self._show_expiring,
        }
        while True:
            self._out(OWNER_MENU)
            choice = self._read_choice()
            if choice is None:
                continue
            if choice == 8:
                self._save()
                return False
            if choice == 9:
                return True
            action = actions.get(choice)
            if action is None:
                self._out("Invalid choice. Please try again.")
                continue
            self._dispatch(action)

    def customer_menu(self) -> bool:
        """Run the customer menu. Returns True when the user chose Exit."""
        while True:
            self._out(CUSTOMER_MENU)
            choice = self._read_choice()
            if choice is None:
                continue
            match choice:
                case 1:
                    self._dispatch(self._display_products)
                case 2:
                    self._dispatch(self._buy_product)
                case 3:
                    return False
                case 4:
                    return True
                case _:
                    self._out("Invalid choice. Please try again.")

    def _read_choice(self) -> int | None:
        try:
            return int(self._ask("> "))
        except ValueError:
            self._out("Invalid input format. Please enter a number.")
            return None

    def _dispatch(self, action: Callable[[], None]) -> None:
        try:
            action()
        except MeatMartError as e:
            self._out(str(e))
        except ValueError:
            self._out("Invalid input format.")
        except EOFError:
            raise
        except Exception as e:
            logger.exception("Unexpected error in menu action")
            self._out(f"An error occurred: {e}")

    def _save(self) -> None:
        if self._inventory.save():
            self._out("Inventory saved to file.")
        else:
            self._out("Error saving inventory to file.")

    # -- owner actions ---------------------------------------------------

    def _create_item(self) -> None:
        name = self._ask("Enter item name: ")
        price = to_decimal(self._ask("Enter price (per kilo): "))
        quantity = to_whole_kilos(self._ask("Enter quantity (in kilo): "))
        expires = parse_date(self._ask("Enter expiration date (yyyy-MM-dd): "))
        self._inventory.create(Item.create(name, price, quantity, expires))
        self._out("Item added to inventory.")

    def _read_items(self) -> None:
        self._out("Inventory Items:\n")
        self._out(format_inventory(self._inventory.list(), self._symbol))

    def _update_item(self) -> None:
        name = self._ask("Enter item name to update: ")
        price = to_decimal(self._ask("Enter new price (per kilo): "))
        quantity = to_whole_kilos(self._ask("Enter new quantity (in kilo): "))
        expires = parse_date(self._ask("Enter new expiration date (yyyy-MM-dd): "))
        self._inventory.update(name, quantity, price, expires)
        self._out("Item updated in inventory.")

    def _delete_item(self) -> None:
        name = self._ask("Enter item name to delete: ")
        self._inventory.delete(name)
        self._out("Item deleted from inventory.")

    def _show_sales(self) -> None:
        report = self._ledger.report()
        if report.empty:
            self._out("No sales recorded yet.")
            return
        self._out(format_sales_report(report, self._symbol))

    def _export_sales_pdf(self) -> None:
        from .pdf import generate_sales_pdf

        now = datetime.now()
        target = Path(self._config.reports.pdf_dir) / f"sales_{now:%Y%m%d_%H%M%S}.pdf"
        try:
            path = generate_sales_pdf(
                self._ledger.report(),
                target,
                shop_name=self._config.shop.name,
                currency_symbol=self._symbol,
                generated_at=now,
            )
        except (ImportError, OSError) as e:
            self._out(f"PDF export error: {e}")
            return
        self._out(f"Sales report saved to: {path}")

    def _show_expiring(self) -> None:
        days = self._config.inventory.expiring_days
        today = self._today()
        items = self._inventory.expiring_within(days, today)
        if not items:
            self._out(f"No items expire within {days} days.")
            return
        self._out(f"Items expiring within {days} days:")
        for item in items:
            if item.is_expired(today):
                status = "EXPIRED"
            else:
                status = f"{item.days_until_expiry(today)} day(s) left"
            self._out(f"  {item.name:<12} {item.expiration_date.isoformat()}  {status}")

    # -- customer actions ------------------------------------------------

    def _display_products(self) -> None:
        self._out("Available Products:\n")
        self._out(format_inventory(self._inventory.list(), self._symbol))

    def _buy_product(self) -> None:
        name = self._ask("Enter the name of the product you want to buy: ")
        try:
            item = self._inventory.get(name)
        except NotFoundError:
            self._out("Product not found.")
            return
        self._out(
            f"{item.name}: {format_currency(item.price, self._symbol)} per kilo, "
            f"{item.quantity} kilos available"
        )
        quantity = self._ask(f"Enter the quantity (in kilos) of {item.name} to buy: ")
        receipt = self._checkout.purchase(item.name, quantity)
        self._out(
            f"Customer bought {receipt.quantity} kilos of {receipt.item_name} "
            f"for {format_currency(receipt.total_price, self._symbol)}"
        )
        text = format_receipt(receipt, self._config.shop.name, self._symbol)
        self._out("\n" + text)
        if self._config.printer.enabled:
            try:
                Printer.print_text(text, self._config.printer.printer_name or None)
            except RuntimeError as e:
                self._out(f"Receipt printing failed: {e}")
