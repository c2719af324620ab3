from datetime import timedelta
from typing import Iterable, Optional
from uuid import UUID, uuid4

from src.app.services.credential_store import AuthSession
from src.domain.base import utcnow
from src.domain.entities import (
    InventoryItem,
    Invitation,
    User,
    UserPermission,
    UserRole,
    UserStatus,
)
from src.domain.principal import Principal


def make_principal(
    role: UserRole = UserRole.MANAGER,
    permissions: Iterable[UserPermission] = (),
) -> Principal:
    return Principal(
        id=uuid4(),
        email=f"{role.value.lower()}@example.com",
        name="Test Principal",
        role=role,
        permissions=frozenset(permissions),
    )


def make_user(
    user_id: Optional[UUID] = None,
    email: str = "bob@example.com",
    role: UserRole = UserRole.TECHNICIAN,
    status: UserStatus = UserStatus.ACTIVE,
    permissions: Iterable[str] = (),
) -> User:
    return User(
        id=user_id or uuid4(),
        email=email,
        name="Bob",
        role=role,
        permissions=list(permissions),
        status=status,
    )


def make_invitation(
    email: str = "bob@example.com",
    role: UserRole = UserRole.TECHNICIAN,
    used: bool = False,
    expires_in: timedelta = timedelta(days=7),
) -> Invitation:
    return Invitation(
        email=email,
        role=role,
        permissions=["MANAGE_WORK_ORDERS"],
        invited_by=uuid4(),
        token="ab" * 32,
        used=used,
        expires_at=utcnow() + expires_in,
    )


def make_item(
    quantity: int = 10,
    min_quantity: int = 5,
    item_id: Optional[UUID] = None,
) -> InventoryItem:
    return InventoryItem(
        id=item_id or uuid4(),
        name="Bearing 6204",
        sku="BRG-6204",
        quantity=quantity,
        min_quantity=min_quantity,
        unit_price=4.5,
        location="Shelf A1",
        category="Parts",
    )


def make_auth_session(user_id: Optional[UUID] = None) -> AuthSession:
    return AuthSession(
        access_token="header.payload.signature",
        expires_at=utcnow() + timedelta(hours=1),
        user_id=str(user_id or uuid4()),
    )


def recorded_actions(uow) -> list:
    """Actions of every activity entry handed to the repository, in order"""
    return [c.args[0].action for c in uow.activity_logs.create.call_args_list]
