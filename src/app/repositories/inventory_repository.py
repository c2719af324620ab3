from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import InventoryItem


class IInventoryRepository(ABC):
    """Inventory repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, item_id: UUID) -> Optional[InventoryItem]:
        """Get item by ID, always reading the stored row"""
        pass

    @abstractmethod
    async def list_all(self) -> List[InventoryItem]:
        """List all items ordered by name"""
        pass

    @abstractmethod
    async def create(self, item: InventoryItem) -> InventoryItem:
        """Create a new item"""
        pass

    @abstractmethod
    async def decrement_quantity(
        self, item_id: UUID, amount: int
    ) -> Optional[InventoryItem]:
        """
        Subtract amount from quantity in one conditional write.

        The write only applies while quantity >= amount.

        Returns:
            The updated item, or None when no row matched
        """
        pass

    @abstractmethod
    async def update(self, item_id: UUID, changes: dict) -> Optional[InventoryItem]:
        """Apply field changes; returns the stored item, or None if it does not exist"""
        pass

    @abstractmethod
    async def delete(self, item_id: UUID) -> bool:
        """Delete an item; False if no row matched"""
        pass
