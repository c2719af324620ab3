from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete, update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.inventory_repository import IInventoryRepository
from src.domain.entities import InventoryItem


class InventoryRepository(IInventoryRepository):
    """Inventory repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, item_id: UUID) -> Optional[InventoryItem]:
        """Get item by ID, overwriting any stale copy in the identity map"""
        stmt = (
            select(InventoryItem)
            .where(InventoryItem.id == item_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_all(self) -> List[InventoryItem]:
        """List all items ordered by name"""
        stmt = select(InventoryItem).order_by(InventoryItem.name)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, item: InventoryItem) -> InventoryItem:
        """Create a new item"""
        self.session.add(item)
        await self.session.flush()
        await self.session.refresh(item)
        return item

    async def decrement_quantity(
        self, item_id: UUID, amount: int
    ) -> Optional[InventoryItem]:
        """UPDATE ... SET quantity = quantity - ? WHERE id = ? AND quantity >= ?"""
        stmt = (
            update(InventoryItem)
            .where(InventoryItem.id == item_id, InventoryItem.quantity >= amount)
            .values(quantity=InventoryItem.quantity - amount)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        if result.rowcount != 1:
            return None
        return await self.get_by_id(item_id)

    async def update(self, item_id: UUID, changes: dict) -> Optional[InventoryItem]:
        """Apply field changes; None if the item does not exist"""
        stmt = (
            update(InventoryItem)
            .where(InventoryItem.id == item_id)
            .values(**changes)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        if result.rowcount != 1:
            return None
        return await self.get_by_id(item_id)

    async def delete(self, item_id: UUID) -> bool:
        """Delete an item; False if no row matched"""
        stmt = delete(InventoryItem).where(InventoryItem.id == item_id)
        result = await self.session.execute(stmt)
        return result.rowcount == 1
