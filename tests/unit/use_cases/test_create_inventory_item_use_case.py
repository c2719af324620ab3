import pytest

from src.app.use_cases.inventory import (
    CreateInventoryItemCommand,
    CreateInventoryItemUseCase,
    ListInventoryUseCase,
)
from src.domain.entities import UserPermission, UserRole
from src.domain.result import ErrorKind
from tests.unit.factories import make_item, make_principal, recorded_actions


def command(**overrides):
    fields = dict(
        name="V-Belt A42",
        sku="VB-A42",
        quantity=12,
        min_quantity=4,
        unit_price=9.75,
        location="Cage 2",
        category="Belts",
    )
    fields.update(overrides)
    return CreateInventoryItemCommand(**fields)


@pytest.mark.asyncio
async def test_create_item(mock_uow):
    manager = make_principal(UserRole.MANAGER, [UserPermission.MANAGE_INVENTORY])

    result = await CreateInventoryItemUseCase(mock_uow).execute(manager, command())

    assert result.is_ok()
    assert result.value.sku == "VB-A42"
    assert result.value.low_stock is False
    mock_uow.commit.assert_awaited()
    assert recorded_actions(mock_uow) == ["Created Inventory Item"]


@pytest.mark.asyncio
async def test_create_item_reports_every_bad_field(mock_uow):
    manager = make_principal(UserRole.MANAGER, [UserPermission.MANAGE_INVENTORY])

    result = await CreateInventoryItemUseCase(mock_uow).execute(
        manager, command(name=" ", quantity=-1, unit_price=-0.5)
    )

    assert result.is_err()
    assert result.error.code == "VALIDATION_FAILED"
    assert result.error.kind == ErrorKind.validation
    assert set(result.error.details) == {"name", "quantity", "unit_price"}
    mock_uow.inventory.create.assert_not_called()


@pytest.mark.asyncio
async def test_create_item_requires_permission(mock_uow):
    technician = make_principal(UserRole.TECHNICIAN, [UserPermission.MANAGE_WORK_ORDERS])

    result = await CreateInventoryItemUseCase(mock_uow).execute(technician, command())

    assert result.is_err()
    assert result.error.code == "INSUFFICIENT_PERMISSIONS"


@pytest.mark.asyncio
async def test_list_inventory(mock_uow):
    mock_uow.inventory.list_all.return_value = [
        make_item(quantity=1, min_quantity=5),
        make_item(quantity=50, min_quantity=5),
    ]

    result = await ListInventoryUseCase(mock_uow).execute()

    assert result.is_ok()
    assert [i.low_stock for i in result.value.items] == [True, False]
