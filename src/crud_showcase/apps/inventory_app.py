"""Inventory Program - JSON-persisted inventory with an interactive menu."""

import logging
from datetime import datetime, timedelta
from pathlib import Path
from typing import Callable, Optional, Union

from rich.console import Console
from rich.prompt import Confirm, Prompt
from rich.table import Table

from crud_showcase.adapters.inventory_logger import InventoryLogger
from crud_showcase.apps.base import ConsoleProgram
from crud_showcase.domain.inventory import InventoryItem
from crud_showcase.domain.ports import ShowcaseError, SourceNotFoundError

logger = logging.getLogger(__name__)

MENU_CHOICES = ["1", "2", "3", "4", "5"]


class InventoryApp(ConsoleProgram):
    """Inventory manager backed by an ``InventoryLogger`` JSON file.

    Example Usage:
        ```python
        app = InventoryApp("inventory_data.json")
        app.seed_sample_data()
        app.save_data()
        app.load_data()
        app.print_all_items()
        ```
    """

    def __init__(
        self,
        file_path: Union[str, Path] = "inventory_data.json",
        console: Optional[Console] = None,
        clock: Callable[[], datetime] = datetime.now
    ):
        super().__init__(console)
        self.file_path = Path(file_path)
        self.clock = clock
        self.inventory: InventoryLogger[InventoryItem] = InventoryLogger(self.file_path, InventoryItem)

    def seed_sample_data(self) -> None:
        """Replace the in-memory inventory with five sample items."""
        if self.inventory.count > 0:
            self.write("Clearing existing inventory data...")
        self.inventory.clear()

        now = self.clock()
        samples = [
            (1, "Laptop", 10, 30),
            (2, "Smartphone", 25, 15),
            (3, "Headphones", 50, 7),
            (4, "Tablet", 15, 3),
            (5, "Smartwatch", 30, 1),
        ]
        for item_id, name, quantity, days_ago in samples:
            self.inventory.add(InventoryItem(
                id=item_id,
                name=name,
                quantity=quantity,
                date_added=now - timedelta(days=days_ago),
            ))

        self.write(f"Added {len(samples)} sample items to inventory.")

    def save_data(self) -> None:
        """Save the inventory; StorageError propagates."""
        self.inventory.save_to_file()
        self.write(f"Successfully saved {self.inventory.count} items to file.")

    def load_data(self) -> None:
        """Load the inventory from disk.

        A missing file is reported and leaves the inventory empty. Any other
        failure propagates as StorageError.
        """
        try:
            self.inventory.load_from_file()
        except SourceNotFoundError:
            self.inventory.clear()
            self.write("No existing inventory file found. Starting with an empty inventory.")
            return

        if self.inventory.count:
            self.write(f"Loaded {self.inventory.count} items from file.")
        else:
            self.write("No items found in the inventory file.")

    def print_all_items(self) -> None:
        items = sorted(self.inventory.get_all(), key=lambda item: item.id)
        if not items:
            self.write("No items in inventory.")
            return

        table = Table(title="INVENTORY ITEMS", show_header=True, header_style="bold")
        table.add_column("ID", justify="right")
        table.add_column("Name", style="cyan")
        table.add_column("Quantity", justify="right")
        table.add_column("Added On")
        table.add_column("In Stock")

        for item in items:
            table.add_row(
                str(item.id),
                item.name,
                str(item.quantity),
                f"{item.date_added:%Y-%m-%d}",
                "Yes" if item.is_in_stock else "No"
            )

        self.write()
        self.console.print(table)

        self.write()
        self.write("=== SUMMARY ===")
        self.write(f"Total Items: {len(items)}")
        self.write(f"Total Quantity: {sum(item.quantity for item in items)}")
        self.write(f"In Stock: {sum(1 for item in items if item.is_in_stock)} of {len(items)}")

    def display_menu(self) -> None:
        self.write()
        self.write("=== MAIN MENU ===")
        self.write("1. View all inventory items")
        self.write("2. Add sample data")
        self.write("3. Save data to file")
        self.write("4. Reload data from file")
        self.write("5. Exit")

    def handle_choice(self, choice: str) -> bool:
        """Run one menu action.

        Returns:
            bool: False once the user asked to exit
        """
        if choice == "1":
            self.print_all_items()
        elif choice == "2":
            self.write("Adding sample data...")
            self.seed_sample_data()
            self.save_data()
            self.write("Sample data has been added and saved.")
        elif choice == "3":
            self.write("Saving data...")
            self.save_data()
            self.write("Data saved successfully!")
        elif choice == "4":
            self.write("Reloading data...")
            self.load_data()
            self.write("Data reloaded successfully!")
        elif choice == "5":
            self.write("Exiting...")
            return False
        else:
            self.write("Invalid choice. Please try again.")
        return True

    def start(self, confirm_seed: Callable[[], bool]) -> None:
        """Load the data file if it exists, otherwise offer to seed it."""
        self.write("=== INVENTORY MANAGEMENT SYSTEM ===")
        self.write()

        if self.file_path.is_file():
            self.write("Loading existing inventory data...")
            self.load_data()
            self.write("Data loaded successfully!")
        else:
            self.write("No existing inventory data found.")
            if confirm_seed():
                self.write("Seeding with sample data...")
                self.seed_sample_data()
                self.save_data()
                self.write("Sample data has been created and saved.")
            else:
                self.write("Starting with an empty inventory.")

    def run(
        self,
        ask_choice: Optional[Callable[[], str]] = None,
        confirm_seed: Optional[Callable[[], bool]] = None
    ) -> None:
        """Start up and run the menu loop until the user exits.

        Errors raised by a menu action are printed with their cause and the
        loop continues. Errors during start-up propagate.

        Parameters:
            ask_choice: Returns the next menu choice (default: rich prompt)
            confirm_seed: Asks whether to seed a missing file (default: rich confirm)
        """
        ask_choice = ask_choice or self._prompt_choice
        self.start(confirm_seed or self._confirm_seed)

        running = True
        while running:
            self.display_menu()
            choice = ask_choice().strip()
            try:
                running = self.handle_choice(choice)
            except ShowcaseError as e:
                logger.error(f"Menu action {choice} failed: {e}")
                self.write(f"Error: {e}")
                if e.__cause__ is not None:
                    self.write(f"Details: {e.__cause__}")

    def _prompt_choice(self) -> str:
        return Prompt.ask("Enter your choice", choices=MENU_CHOICES, console=self.console)

    def _confirm_seed(self) -> bool:
        return Confirm.ask("Would you like to seed with sample data?", default=False, console=self.console)
