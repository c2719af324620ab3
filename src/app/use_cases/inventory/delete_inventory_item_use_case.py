"""
Delete Inventory Item Use Case
"""

from uuid import UUID

from src.app.services.activity_logger import ActivityLogger
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.dtos import MessageResponse
from src.domain.entities import ActivityType, UserPermission
from src.domain.principal import Principal
from src.domain.result import Error, ErrorKind, Result, Return


class DeleteInventoryItemUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow
        self.activity = ActivityLogger(uow)

    async def execute(self, actor: Principal, item_id: UUID) -> Result[MessageResponse]:
        if not actor.has_permission(UserPermission.MANAGE_INVENTORY):
            return Return.err(
                Error("INSUFFICIENT_PERMISSIONS", "Insufficient permissions", ErrorKind.authz)
            )

        async with self.uow:
            deleted = await self.uow.inventory.delete(item_id)
            if not deleted:
                return Return.err(
                    Error(
                        "INVENTORY_NOT_FOUND",
                        "Inventory item not found",
                        ErrorKind.not_found,
                    )
                )
            await self.uow.commit()

            await self.activity.record(
                actor.id, "Deleted Inventory", ActivityType.DELETE, target=str(item_id)
            )

        return Return.ok(MessageResponse(message="Inventory item deleted successfully"))
