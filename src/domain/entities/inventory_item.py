"""
InventoryItem Entity

Stocked part or consumable.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import CheckConstraint
from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utcnow


class InventoryItem(SQLModel, table=True):
    """
    InventoryItem entity.

    Business Rules:
    - quantity never goes negative (no partial consumption)
    - low stock is derived (quantity <= min_quantity), never stored
    """

    __tablename__ = "inventory"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255, index=True)
    sku: str = Field(max_length=100, index=True)

    quantity: int = Field(default=0)
    min_quantity: int = Field(default=0)
    unit_price: float = Field(default=0)

    location: str = Field(max_length=255)
    category: str = Field(max_length=100)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        CheckConstraint("quantity >= 0", name="ck_inventory_quantity_non_negative"),
        CheckConstraint("min_quantity >= 0", name="ck_inventory_min_quantity_non_negative"),
    )

    @property
    def low_stock(self) -> bool:
        return self.quantity <= self.min_quantity
