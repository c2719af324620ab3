"""
Update Inventory Item Use Case
"""

from uuid import UUID

from src.app.services.activity_logger import ActivityLogger
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import ActivityType, UserPermission
from src.domain.principal import Principal
from src.domain.result import Error, ErrorKind, Result, Return

from .dtos import InventoryItemResponse, UpdateInventoryItemCommand
from .validation import REQUIRED_TEXT, field_errors


class UpdateInventoryItemUseCase:
    """
    Use case for editing an inventory item.

    Business Rules:
    - Actor needs MANAGE_INVENTORY
    - Only fields present in the command change; each obeys the create rules
    - A quantity sent here is an absolute stock correction, not a consumption
    - Records "Updated Inventory" with the applied changes
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow
        self.activity = ActivityLogger(uow)

    async def execute(
        self, actor: Principal, item_id: UUID, command: UpdateInventoryItemCommand
    ) -> Result[InventoryItemResponse]:
        if not actor.has_permission(UserPermission.MANAGE_INVENTORY):
            return Return.err(
                Error("INSUFFICIENT_PERMISSIONS", "Insufficient permissions", ErrorKind.authz)
            )

        changes = command.model_dump(exclude_unset=True)
        if not changes:
            return Return.err(
                Error(
                    "VALIDATION_FAILED",
                    "Validation failed",
                    ErrorKind.validation,
                    details={"body": "No fields to update"},
                )
            )

        errors = field_errors(changes)
        if errors:
            return Return.err(
                Error("VALIDATION_FAILED", "Validation failed", ErrorKind.validation, details=errors)
            )

        for field in REQUIRED_TEXT:
            if field in changes:
                changes[field] = changes[field].strip()

        async with self.uow:
            item = await self.uow.inventory.update(item_id, changes)
            if item is None:
                return Return.err(
                    Error(
                        "INVENTORY_NOT_FOUND",
                        "Inventory item not found",
                        ErrorKind.not_found,
                    )
                )
            await self.uow.commit()

            response = InventoryItemResponse.from_item(item)
            await self.activity.record(
                actor.id,
                "Updated Inventory",
                ActivityType.UPDATE,
                target=response.name,
                metadata={"inventory_id": response.id, "changes": changes},
            )

        return Return.ok(response)
