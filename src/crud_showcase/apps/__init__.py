"""Console programs for crud-showcase.

Each program owns its sample data and prints to a rich Console; the CLI
wires them to commands.
"""

from crud_showcase.apps.finance_app import FinanceApp
from crud_showcase.apps.grading_app import GradingApp
from crud_showcase.apps.health_app import HealthSystemApp
from crud_showcase.apps.inventory_app import InventoryApp
from crud_showcase.apps.warehouse_app import WarehouseManager

__all__ = ["FinanceApp", "GradingApp", "HealthSystemApp", "InventoryApp", "WarehouseManager"]
