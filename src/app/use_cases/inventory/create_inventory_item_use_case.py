"""
Create Inventory Item Use Case
"""

from src.app.services.activity_logger import ActivityLogger
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import ActivityType, InventoryItem, UserPermission
from src.domain.principal import Principal
from src.domain.result import Error, ErrorKind, Result, Return

from .dtos import CreateInventoryItemCommand, InventoryItemResponse
from .validation import field_errors


class CreateInventoryItemUseCase:
    """
    Use case for adding an item to inventory.

    Business Rules:
    - Actor needs MANAGE_INVENTORY
    - name, sku, location and category are required
    - quantity, min_quantity and unit_price are non-negative
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow
        self.activity = ActivityLogger(uow)

    async def execute(
        self, actor: Principal, command: CreateInventoryItemCommand
    ) -> Result[InventoryItemResponse]:
        if not actor.has_permission(UserPermission.MANAGE_INVENTORY):
            return Return.err(
                Error("INSUFFICIENT_PERMISSIONS", "Insufficient permissions", ErrorKind.authz)
            )

        errors = field_errors(command.model_dump())
        if errors:
            return Return.err(
                Error("VALIDATION_FAILED", "Validation failed", ErrorKind.validation, details=errors)
            )

        async with self.uow:
            item = await self.uow.inventory.create(
                InventoryItem(
                    name=command.name.strip(),
                    sku=command.sku.strip(),
                    quantity=command.quantity,
                    min_quantity=command.min_quantity,
                    unit_price=command.unit_price,
                    location=command.location.strip(),
                    category=command.category.strip(),
                )
            )
            await self.uow.commit()

            response = InventoryItemResponse.from_item(item)
            await self.activity.record(
                actor.id,
                "Created Inventory Item",
                ActivityType.CREATE,
                target=response.name,
                metadata={"inventory_id": response.id, "sku": response.sku},
            )

        return Return.ok(response)
