"""
Inventory Use Case DTOs (Data Transfer Objects)
"""

from typing import List, Optional

from src.app.use_cases.dtos import CamelModel
from src.domain.entities import InventoryItem


class CreateInventoryItemCommand(CamelModel):
    """Fields for a new inventory item"""

    name: str
    sku: str
    quantity: int
    min_quantity: int = 0
    unit_price: float = 0
    location: str
    category: str


class InventoryItemResponse(CamelModel):
    """Inventory item with its derived low-stock flag"""

    id: str
    name: str
    sku: str
    quantity: int
    min_quantity: int
    unit_price: float
    location: str
    category: str
    low_stock: bool

    @classmethod
    def from_item(cls, item: InventoryItem) -> "InventoryItemResponse":
        return cls(
            id=str(item.id),
            name=item.name,
            sku=item.sku,
            quantity=item.quantity,
            min_quantity=item.min_quantity,
            unit_price=item.unit_price,
            location=item.location,
            category=item.category,
            low_stock=item.low_stock,
        )


class InventoryListResponse(CamelModel):
    items: List[InventoryItemResponse]


class ConsumeInventoryResponse(CamelModel):
    """Response for consume inventory use case"""

    item: InventoryItemResponse
    low_stock: bool


class UpdateInventoryItemCommand(CamelModel):
    """Partial update; only fields present in the request are applied"""

    name: Optional[str] = None
    sku: Optional[str] = None
    quantity: Optional[int] = None
    min_quantity: Optional[int] = None
    unit_price: Optional[float] = None
    location: Optional[str] = None
    category: Optional[str] = None
