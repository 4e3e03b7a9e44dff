"""Inventory Records - items persisted by the JSON inventory logger.

The JSON layout uses PascalCase keys ("Id", "Name", "Quantity", "DateAdded")
so files written by earlier versions of the inventory manager load
unchanged. "IsInStock" is written for readers of the file but recomputed on
load.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator


class InventoryItem(BaseModel):
    """An immutable inventory entry.

    Parameters:
        id: Item identifier
        name: Item name
        quantity: Units in stock
        date_added: When the item was added to the inventory
    """

    id: int = Field(..., alias="Id", description="Item identifier")
    name: str = Field(..., alias="Name", description="Item name")
    quantity: int = Field(..., alias="Quantity", ge=0, description="Units in stock")
    date_added: datetime = Field(..., alias="DateAdded", description="When the item was added")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v_stripped = v.strip()
        if not v_stripped:
            raise ValueError("Name cannot be empty or whitespace only")
        return v_stripped

    @computed_field(alias="IsInStock")
    @property
    def is_in_stock(self) -> bool:
        return self.quantity > 0

    def __str__(self) -> str:
        return (
            f"ID: {self.id}, Name: {self.name}, Quantity: {self.quantity}, "
            f"Added: {self.date_added:%Y-%m-%d}, In Stock: {'Yes' if self.is_in_stock else 'No'}"
        )

    model_config = ConfigDict(frozen=True, populate_by_name=True)
