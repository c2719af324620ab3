"""
Consume Inventory Use Case

Takes stock out of a single inventory item.
"""

import logging
from uuid import UUID

from src.app.services.activity_logger import ActivityLogger
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import ActivityType, UserPermission
from src.domain.principal import Principal
from src.domain.result import Error, ErrorKind, Result, Return

from .dtos import ConsumeInventoryResponse, InventoryItemResponse

logger = logging.getLogger(__name__)


def _insufficient_stock(available: int, requested: int) -> Error:
    return Error(
        "INSUFFICIENT_STOCK",
        "Insufficient stock",
        ErrorKind.state_conflict,
        details={"available": available, "requested": requested},
    )


class ConsumeInventoryUseCase:
    """
    Use case for consuming inventory.

    Business Rules:
    - Actor needs MANAGE_INVENTORY (ADMIN holds every permission)
    - quantity must be a positive integer
    - All or nothing: a request larger than the stock is rejected and the
      stored quantity is left unchanged
    - The decrement is one conditional write (quantity >= requested), so
      concurrent consumers can never drive stock below zero
    - low_stock = new quantity <= min_quantity, derived after the write
    - Every success records "Consumed Inventory"; while the item sits in the
      low band it also records "Stock Depleted" (0) or "Low Stock Warning",
      on every consumption, not only when first crossing the threshold
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow
        self.activity = ActivityLogger(uow)

    async def execute(
        self, actor: Principal, item_id: UUID, quantity: int
    ) -> Result[ConsumeInventoryResponse]:
        if not actor.has_permission(UserPermission.MANAGE_INVENTORY):
            return Return.err(
                Error("INSUFFICIENT_PERMISSIONS", "Insufficient permissions", ErrorKind.authz)
            )

        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
            return Return.err(
                Error(
                    "INVALID_QUANTITY",
                    "Quantity must be a positive integer",
                    ErrorKind.validation,
                )
            )

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

            if item.quantity < quantity:
                return Return.err(_insufficient_stock(item.quantity, quantity))

            updated = await self.uow.inventory.decrement_quantity(item_id, quantity)
            if updated is None:
                # Lost a race with another consumer between the read and the write
                await self.uow.rollback()
                current = await self.uow.inventory.get_by_id(item_id)
                available = current.quantity if current is not None else 0
                return Return.err(_insufficient_stock(available, quantity))

            await self.uow.commit()

            # Snapshot before logging; a failed log write rolls back and expires rows
            response = ConsumeInventoryResponse(
                item=InventoryItemResponse.from_item(updated),
                low_stock=updated.low_stock,
            )
            await self._record(actor, response.item, quantity)

        return Return.ok(response)

    async def _record(
        self, actor: Principal, item: InventoryItemResponse, consumed: int
    ) -> None:
        await self.activity.record(
            actor.id,
            "Consumed Inventory",
            ActivityType.UPDATE,
            target=item.name,
            metadata={
                "inventory_id": item.id,
                "quantity_consumed": consumed,
                "new_quantity": item.quantity,
            },
        )

        if not item.low_stock:
            return

        action = "Stock Depleted" if item.quantity == 0 else "Low Stock Warning"
        logger.info("%s: %s (%s left)", action, item.name, item.quantity)
        await self.activity.record(
            actor.id,
            action,
            ActivityType.SYSTEM,
            target=f"{item.name} (Qty: {item.quantity} / Min: {item.min_quantity})",
            metadata={"inventory_id": item.id},
        )
