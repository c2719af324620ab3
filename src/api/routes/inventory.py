from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import Field, StrictInt

from src.api.error import raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.dtos import CamelModel, MessageResponse
from src.app.use_cases.inventory import (
    ConsumeInventoryResponse,
    ConsumeInventoryUseCase,
    CreateInventoryItemCommand,
    CreateInventoryItemUseCase,
    DeleteInventoryItemUseCase,
    GetInventoryItemUseCase,
    InventoryItemResponse,
    InventoryListResponse,
    ListInventoryUseCase,
    UpdateInventoryItemCommand,
    UpdateInventoryItemUseCase,
)
from src.depends import get_current_principal, get_unit_of_work
from src.domain.principal import Principal

router = APIRouter(prefix="/inventory", tags=["Inventory"])


class ConsumeRequest(CamelModel):
    inventory_id: UUID
    quantity: StrictInt = Field(..., description="Units to take out of stock (> 0)")


@router.get("", response_model=InventoryListResponse, response_model_by_alias=True)
async def list_inventory(
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListInventoryUseCase(uow).execute()
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=InventoryItemResponse,
    response_model_by_alias=True,
)
async def create_inventory_item(
    request: CreateInventoryItemCommand,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Raises:
        - 400 Bad Request: Field validation failed (see error.details)
        - 403 Forbidden: MANAGE_INVENTORY required
    """
    result = await CreateInventoryItemUseCase(uow).execute(principal, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/consume", response_model=ConsumeInventoryResponse, response_model_by_alias=True
)
async def consume_inventory(
    request: ConsumeRequest,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Consume Inventory

    Decrements stock with a conditional write, so concurrent consumers can
    never drive the quantity below zero. Crossing the minimum level records
    a low-stock (or stock-depleted) activity entry.

    Raises:
        - 400 Bad Request: Non-positive quantity or insufficient stock
          (details carry available/requested)
        - 403 Forbidden: MANAGE_INVENTORY required
        - 404 Not Found: Unknown item
    """
    result = await ConsumeInventoryUseCase(uow).execute(
        principal, request.inventory_id, request.quantity
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get(
    "/{item_id}", response_model=InventoryItemResponse, response_model_by_alias=True
)
async def get_inventory_item(
    item_id: UUID,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetInventoryItemUseCase(uow).execute(item_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.patch(
    "/{item_id}", response_model=InventoryItemResponse, response_model_by_alias=True
)
async def update_inventory_item(
    item_id: UUID,
    request: UpdateInventoryItemCommand,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Inventory Item

    Applies only the fields present in the body. A quantity sent here
    replaces the stored stock level (a count correction, not a consumption).

    Raises:
        - 400 Bad Request: Empty body or invalid field values
        - 403 Forbidden: MANAGE_INVENTORY required
        - 404 Not Found: Unknown item
    """
    result = await UpdateInventoryItemUseCase(uow).execute(principal, item_id, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete("/{item_id}", response_model=MessageResponse)
async def delete_inventory_item(
    item_id: UUID,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await DeleteInventoryItemUseCase(uow).execute(principal, item_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
