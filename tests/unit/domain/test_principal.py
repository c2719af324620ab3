from uuid import uuid4

import pytest
from pydantic import ValidationError

from src.domain.entities import UserPermission, UserRole
from src.domain.principal import Principal


def principal(role, permissions=()):
    return Principal(
        id=uuid4(),
        email="someone@example.com",
        name="Someone",
        role=role,
        permissions=frozenset(permissions),
    )


def test_admin_holds_every_permission():
    admin = principal(UserRole.ADMIN)

    assert admin.is_admin
    assert all(admin.has_permission(p) for p in UserPermission)


def test_permission_must_be_granted():
    manager = principal(UserRole.MANAGER, [UserPermission.MANAGE_TEAM])

    assert manager.has_permission(UserPermission.MANAGE_TEAM)
    assert not manager.has_permission(UserPermission.MANAGE_INVENTORY)


def test_principal_is_immutable():
    manager = principal(UserRole.MANAGER)

    with pytest.raises(ValidationError):
        manager.role = UserRole.ADMIN
