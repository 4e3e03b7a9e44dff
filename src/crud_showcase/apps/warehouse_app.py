"""Warehouse Program - electronics and groceries stock management."""

import logging
from datetime import date, timedelta
from typing import Callable, Optional

from rich.console import Console

from crud_showcase.apps.base import ConsoleProgram
from crud_showcase.domain.ports import (
    DuplicateItemError,
    InvalidQuantityError,
    ItemNotFoundError,
    ShowcaseError,
)
from crud_showcase.domain.repository import InventoryRepository, S
from crud_showcase.domain.warehouse import ElectronicItem, GroceryItem

logger = logging.getLogger(__name__)


class WarehouseManager(ConsoleProgram):
    """Owns one repository per item type and the stock operations on them.

    ``increase_stock``, ``decrease_stock`` and ``remove_item_by_id`` print
    domain errors instead of raising them; the repositories themselves
    still raise.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        today: Callable[[], date] = date.today
    ):
        super().__init__(console)
        self.today = today
        self.electronics: InventoryRepository[ElectronicItem] = InventoryRepository(ElectronicItem)
        self.groceries: InventoryRepository[GroceryItem] = InventoryRepository(GroceryItem)

    def seed_data(self) -> None:
        """Add three electronic and three grocery items."""
        self.electronics.add(ElectronicItem(id=1, name="Laptop", quantity=10, brand="Dell", warranty_months=24))
        self.electronics.add(ElectronicItem(id=2, name="Smartphone", quantity=25, brand="Samsung", warranty_months=12))
        self.electronics.add(ElectronicItem(id=3, name="Headphones", quantity=50, brand="Sony", warranty_months=6))

        today = self.today()
        self.groceries.add(GroceryItem(id=101, name="Milk", quantity=100, expiry_date=today + timedelta(days=7)))
        self.groceries.add(GroceryItem(id=102, name="Bread", quantity=75, expiry_date=today + timedelta(days=3)))
        self.groceries.add(GroceryItem(id=103, name="Eggs", quantity=200, expiry_date=today + timedelta(days=14)))

    def print_all_items(self, repo: InventoryRepository[S]) -> None:
        items = repo.get_all()
        self.write()
        self.write(f"=== {repo.item_type_name.upper()} INVENTORY (Total: {len(items)}) ===")

        if not items:
            self.write("No items found.")
            return

        for item in items:
            self.write(str(item))

    def increase_stock(self, repo: InventoryRepository[S], item_id: int, quantity: int) -> None:
        """Add ``quantity`` units to an item, printing any error."""
        try:
            item = repo.get_by_id(item_id)
            new_quantity = item.quantity + quantity
            repo.update_quantity(item_id, new_quantity)
            self.write(f"Updated {repo.item_type_name} ID {item_id}: New quantity = {new_quantity}")
        except (ItemNotFoundError, InvalidQuantityError) as e:
            self.write(f"Error: {e}")

    def decrease_stock(self, repo: InventoryRepository[S], item_id: int, quantity: int) -> None:
        """Take ``quantity`` units out of an item, printing any error.

        Taking out more than is in stock is reported as an invalid quantity
        and leaves the item unchanged.
        """
        try:
            item = repo.get_by_id(item_id)
            new_quantity = item.quantity - quantity
            if new_quantity < 0:
                raise InvalidQuantityError(
                    f"Cannot remove {quantity} units from {repo.item_type_name} ID {item_id}: "
                    f"only {item.quantity} in stock."
                )
            repo.update_quantity(item_id, new_quantity)
            self.write(f"Updated {repo.item_type_name} ID {item_id}: New quantity = {new_quantity}")
        except (ItemNotFoundError, InvalidQuantityError) as e:
            self.write(f"Error: {e}")

    def remove_item_by_id(self, repo: InventoryRepository[S], item_id: int) -> None:
        """Remove an item, printing any error."""
        try:
            if repo.remove(item_id):
                self.write(f"{repo.item_type_name} with ID {item_id} was successfully removed.")
        except ItemNotFoundError as e:
            self.write(f"Error: {e}")

    def low_stock_items(self, repo: InventoryRepository[S], threshold: int) -> list[S]:
        """Return the items whose quantity is below ``threshold``, lowest first."""
        return sorted(
            (item for item in repo.get_all() if item.quantity < threshold),
            key=lambda item: item.quantity
        )

    def run(self) -> None:
        self.write("=== Warehouse Inventory Management System ===")
        self.write()

        self.write("Loading sample data...")
        self.seed_data()

        self.write()
        self.write("=== Current Inventory ===")
        self.print_all_items(self.electronics)
        self.print_all_items(self.groceries)

        self.write()
        self.write("=== Testing Operations ===")

        self.write()
        self.write("1. Attempting to add a duplicate electronic item...")
        try:
            self.electronics.add(ElectronicItem(id=1, name="Smart Watch", quantity=15, brand="Samsung", warranty_months=12))
        except DuplicateItemError as e:
            self.write(f"Expected error: {e}")

        self.write()
        self.write("2. Attempting to remove a non-existent item...")
        self.remove_item_by_id(self.electronics, 999)

        self.write()
        self.write("3. Attempting to update with invalid quantity...")
        try:
            self.electronics.update_quantity(1, -5)
        except ShowcaseError as e:
            self.write(f"Expected error: {e}")

        self.write()
        self.write("4. Performing valid operations...")
        self.electronics.add(ElectronicItem(id=4, name="Tablet", quantity=30, brand="Apple", warranty_months=12))
        self.write("Added new tablet to electronics.")
        self.increase_stock(self.groceries, 101, 50)
        self.remove_item_by_id(self.electronics, 2)

        self.write()
        self.write("=== Final Inventory ===")
        self.print_all_items(self.electronics)
        self.print_all_items(self.groceries)

        self.write()
        self.write("=== All operations completed successfully! ===")
