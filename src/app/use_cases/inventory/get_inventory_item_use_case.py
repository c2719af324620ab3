from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.result import Error, ErrorKind, Result, Return

from .dtos import InventoryItemResponse


class GetInventoryItemUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, item_id: UUID) -> Result[InventoryItemResponse]:
        async with self.uow:
            item = await self.uow.inventory.get_by_id(item_id)
            if item is None:
                return Return.err(
                    Error(
                        "INVENTORY_NOT_FOUND",
                        "Inventory item not found",
                        ErrorKind.not_found,
                    )
                )
            return Return.ok(InventoryItemResponse.from_item(item))
