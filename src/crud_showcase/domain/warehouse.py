"""Warehouse Records - Electronic and Grocery stock items.

Quantities are the only mutable field: they change through
InventoryRepository.update_quantity, and assignment is re-validated so a
record can never hold a negative quantity.
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _StockItem(BaseModel):
    """Fields shared by every warehouse item."""

    id: int = Field(..., description="Item identifier")
    name: str = Field(..., description="Item name")
    quantity: int = Field(..., description="Units in stock (non-negative)")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v_stripped = v.strip()
        if not v_stripped:
            raise ValueError("Name cannot be empty or whitespace only")
        return v_stripped

    @field_validator("quantity")
    @classmethod
    def validate_quantity(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Quantity cannot be negative.")
        return v

    model_config = ConfigDict(validate_assignment=True)


class ElectronicItem(_StockItem):
    """An electronic product with a brand and warranty.

    Parameters:
        id: Item identifier
        name: Product name
        quantity: Units in stock
        brand: Manufacturer
        warranty_months: Warranty length in months
    """

    brand: str = Field(..., min_length=1, description="Manufacturer")
    warranty_months: int = Field(..., ge=0, description="Warranty length in months")

    def __str__(self) -> str:
        return (
            f"ID: {self.id}, Name: {self.name}, Brand: {self.brand}, "
            f"Quantity: {self.quantity}, Warranty: {self.warranty_months} months"
        )


class GroceryItem(_StockItem):
    """A perishable grocery product.

    Parameters:
        id: Item identifier
        name: Product name
        quantity: Units in stock
        expiry_date: Best-before date
    """

    expiry_date: date = Field(..., description="Best-before date")

    def __str__(self) -> str:
        return f"ID: {self.id}, Name: {self.name}, Quantity: {self.quantity}, Expires: {self.expiry_date:%Y-%m-%d}"
