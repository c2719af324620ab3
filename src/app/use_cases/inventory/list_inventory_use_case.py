from src.app.services.unit_of_work import UnitOfWork
from src.domain.result import Result, Return

from .dtos import InventoryItemResponse, InventoryListResponse


class ListInventoryUseCase:
    """List every inventory item, ordered by name."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[InventoryListResponse]:
        async with self.uow:
            items = await self.uow.inventory.list_all()
            return Return.ok(
                InventoryListResponse(
                    items=[InventoryItemResponse.from_item(i) for i in items]
                )
            )
