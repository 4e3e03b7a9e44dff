"""Domain layer for crud-showcase.

This module contains the records, the generic repository and the error
contracts of the five programs. All domain models are pure Python with no
external dependencies beyond Pydantic (and pandas for the summaries).
"""

from .finance import Account, SavingsAccount, Transaction
from .grading import Student
from .health import Patient, Prescription
from .inventory import InventoryItem
from .repository import InventoryRepository, Repository
from .warehouse import ElectronicItem, GroceryItem

__all__ = [
    "Account",
    "SavingsAccount",
    "Transaction",
    "Student",
    "Patient",
    "Prescription",
    "InventoryItem",
    "Repository",
    "InventoryRepository",
    "ElectronicItem",
    "GroceryItem",
]
