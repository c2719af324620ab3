"""
Inventory Use Cases
"""

from .consume_inventory_use_case import ConsumeInventoryUseCase
from .create_inventory_item_use_case import CreateInventoryItemUseCase
from .delete_inventory_item_use_case import DeleteInventoryItemUseCase
from .dtos import (
    ConsumeInventoryResponse,
    CreateInventoryItemCommand,
    InventoryItemResponse,
    InventoryListResponse,
    UpdateInventoryItemCommand,
)
from .get_inventory_item_use_case import GetInventoryItemUseCase
from .list_inventory_use_case import ListInventoryUseCase
from .update_inventory_item_use_case import UpdateInventoryItemUseCase

__all__ = [
    "ConsumeInventoryUseCase",
    "CreateInventoryItemUseCase",
    "DeleteInventoryItemUseCase",
    "GetInventoryItemUseCase",
    "ListInventoryUseCase",
    "UpdateInventoryItemUseCase",
    "ConsumeInventoryResponse",
    "CreateInventoryItemCommand",
    "InventoryItemResponse",
    "InventoryListResponse",
    "UpdateInventoryItemCommand",
]
