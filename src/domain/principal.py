"""
Principal

Resolved identity of an authenticated caller. Built once by the
authorization guard and passed around immutably afterwards.
"""

from typing import FrozenSet
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from src.domain.entities import User, UserPermission, UserRole


class Principal(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: UUID
    email: str
    name: str
    role: UserRole
    permissions: FrozenSet[UserPermission] = frozenset()

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    def has_permission(self, permission: UserPermission) -> bool:
        """ADMIN implicitly holds every permission."""
        return self.is_admin or permission in self.permissions

    @classmethod
    def from_user(cls, user: User) -> "Principal":
        # Unknown capability strings in a stored profile grant nothing
        known = {p.value for p in UserPermission}
        return cls(
            id=user.id,
            email=user.email,
            name=user.name,
            role=UserRole(user.role),
            permissions=frozenset(
                UserPermission(p) for p in (user.permissions or []) if p in known
            ),
        )
