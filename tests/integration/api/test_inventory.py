import pytest
from httpx import AsyncClient
from sqlmodel import select

from src.domain.entities import ActivityLog, ActivityType, UserPermission, UserRole


@pytest.fixture
def storekeeper(create_account):
    async def _create():
        return await create_account(
            "stores@example.com",
            role=UserRole.TECHNICIAN,
            permissions=[UserPermission.MANAGE_INVENTORY],
        )

    return _create


@pytest.mark.asyncio
async def test_consume_into_low_stock(client: AsyncClient, storekeeper, create_item, db_session):
    user_id, headers = await storekeeper()
    item_id = await create_item(quantity=10, min_quantity=5)

    response = await client.post(
        "/inventory/consume",
        json={"inventoryId": str(item_id), "quantity": 6},
        headers=headers,
    )

    assert response.status_code == 200
    data = response.json()
    assert data["item"]["quantity"] == 4
    assert data["item"]["lowStock"] is True
    assert data["lowStock"] is True

    logs = (await db_session.exec(select(ActivityLog).order_by(ActivityLog.created_at))).all()
    assert [log.action for log in logs] == ["Consumed Inventory", "Low Stock Warning"]
    assert logs[1].type == ActivityType.SYSTEM
    assert logs[1].target == "Bearing 6204 (Qty: 4 / Min: 5)"
    assert logs[0].user_id == user_id


@pytest.mark.asyncio
async def test_consume_above_threshold(client: AsyncClient, storekeeper, create_item, db_session):
    _, headers = await storekeeper()
    item_id = await create_item(quantity=10, min_quantity=5)

    response = await client.post(
        "/inventory/consume",
        json={"inventoryId": str(item_id), "quantity": 3},
        headers=headers,
    )

    assert response.status_code == 200
    assert response.json()["item"]["quantity"] == 7
    assert response.json()["lowStock"] is False
    actions = (await db_session.exec(select(ActivityLog.action))).all()
    assert actions == ["Consumed Inventory"]


@pytest.mark.asyncio
async def test_consume_more_than_available(client: AsyncClient, storekeeper, create_item):
    _, headers = await storekeeper()
    item_id = await create_item(quantity=3, min_quantity=1)

    response = await client.post(
        "/inventory/consume",
        json={"inventoryId": str(item_id), "quantity": 5},
        headers=headers,
    )

    assert response.status_code == 400
    error = response.json()["error"]
    assert error["code"] == "INSUFFICIENT_STOCK"
    assert error["details"] == {"available": 3, "requested": 5}

    current = await client.get(f"/inventory/{item_id}", headers=headers)
    assert current.json()["quantity"] == 3


@pytest.mark.asyncio
@pytest.mark.parametrize("quantity", [0, -1, 2.5, "three"])
async def test_consume_invalid_quantity(
    client: AsyncClient, storekeeper, create_item, quantity
):
    _, headers = await storekeeper()
    item_id = await create_item()

    response = await client.post(
        "/inventory/consume",
        json={"inventoryId": str(item_id), "quantity": quantity},
        headers=headers,
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] in ("INVALID_QUANTITY", "VALIDATION_ERROR")


@pytest.mark.asyncio
async def test_consume_unknown_item(client: AsyncClient, storekeeper):
    _, headers = await storekeeper()

    response = await client.post(
        "/inventory/consume",
        json={"inventoryId": "00000000-0000-0000-0000-000000000000", "quantity": 1},
        headers=headers,
    )

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "INVENTORY_NOT_FOUND"


@pytest.mark.asyncio
async def test_consume_requires_manage_inventory(client: AsyncClient, create_account, create_item):
    _, headers = await create_account("client@example.com", role=UserRole.CLIENT)
    item_id = await create_item()

    response = await client.post(
        "/inventory/consume",
        json={"inventoryId": str(item_id), "quantity": 1},
        headers=headers,
    )

    assert response.status_code == 403
    assert response.json()["error"]["code"] == "INSUFFICIENT_PERMISSIONS"


@pytest.mark.asyncio
async def test_create_and_list_inventory(client: AsyncClient, storekeeper):
    _, headers = await storekeeper()

    created = await client.post(
        "/inventory",
        json={
            "name": "V-Belt A42",
            "sku": "VB-A42",
            "quantity": 2,
            "minQuantity": 4,
            "unitPrice": 9.75,
            "location": "Cage 2",
            "category": "Belts",
        },
        headers=headers,
    )

    assert created.status_code == 201
    assert created.json()["lowStock"] is True

    listing = await client.get("/inventory", headers=headers)
    assert listing.status_code == 200
    assert [i["sku"] for i in listing.json()["items"]] == ["VB-A42"]


@pytest.mark.asyncio
async def test_create_inventory_validation(client: AsyncClient, storekeeper):
    _, headers = await storekeeper()

    response = await client.post(
        "/inventory",
        json={
            "name": "",
            "sku": "X-1",
            "quantity": -3,
            "location": "Cage 2",
            "category": "Belts",
        },
        headers=headers,
    )

    assert response.status_code == 400
    error = response.json()["error"]
    assert error["code"] == "VALIDATION_FAILED"
    assert set(error["details"]) == {"name", "quantity"}


@pytest.mark.asyncio
async def test_update_inventory_item(client: AsyncClient, storekeeper, create_item, db_session):
    _, headers = await storekeeper()
    item_id = await create_item(quantity=10, min_quantity=5)

    response = await client.patch(
        f"/inventory/{item_id}",
        json={"quantity": 3, "location": "Shelf C2"},
        headers=headers,
    )

    assert response.status_code == 200
    data = response.json()
    assert data["quantity"] == 3
    assert data["location"] == "Shelf C2"
    assert data["name"] == "Bearing 6204"
    assert data["lowStock"] is True

    current = await client.get(f"/inventory/{item_id}", headers=headers)
    assert current.json()["quantity"] == 3

    log = (await db_session.exec(select(ActivityLog))).one()
    assert log.action == "Updated Inventory"
    assert log.type == ActivityType.UPDATE
    assert log.event_metadata["changes"] == {"quantity": 3, "location": "Shelf C2"}


@pytest.mark.asyncio
async def test_update_inventory_rejects_negative_stock(
    client: AsyncClient, storekeeper, create_item
):
    _, headers = await storekeeper()
    item_id = await create_item(quantity=10)

    response = await client.patch(
        f"/inventory/{item_id}", json={"quantity": -1}, headers=headers
    )

    assert response.status_code == 400
    assert response.json()["error"]["details"] == {"quantity": "Quantity must be positive"}
    current = await client.get(f"/inventory/{item_id}", headers=headers)
    assert current.json()["quantity"] == 10


@pytest.mark.asyncio
async def test_update_unknown_inventory_item(client: AsyncClient, storekeeper):
    _, headers = await storekeeper()

    response = await client.patch(
        "/inventory/00000000-0000-0000-0000-000000000000",
        json={"quantity": 1},
        headers=headers,
    )

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "INVENTORY_NOT_FOUND"


@pytest.mark.asyncio
async def test_delete_inventory_item(client: AsyncClient, storekeeper, create_item, db_session):
    _, headers = await storekeeper()
    item_id = await create_item()

    response = await client.delete(f"/inventory/{item_id}", headers=headers)

    assert response.status_code == 200
    assert response.json() == {"message": "Inventory item deleted successfully"}
    assert (await client.get(f"/inventory/{item_id}", headers=headers)).status_code == 404
    assert (await client.delete(f"/inventory/{item_id}", headers=headers)).status_code == 404

    actions = (await db_session.exec(select(ActivityLog.action))).all()
    assert actions == ["Deleted Inventory"]


@pytest.mark.asyncio
async def test_edit_and_delete_require_manage_inventory(
    client: AsyncClient, create_account, create_item
):
    _, headers = await create_account("client@example.com", role=UserRole.CLIENT)
    item_id = await create_item()

    patched = await client.patch(f"/inventory/{item_id}", json={"quantity": 1}, headers=headers)
    deleted = await client.delete(f"/inventory/{item_id}", headers=headers)

    assert patched.status_code == 403
    assert deleted.status_code == 403
