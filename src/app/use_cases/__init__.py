"""
Use Cases

Organized into domain folders:
- auth/: Invitation lifecycle, login, authorization guard
- inventory/: Inventory listing, creation, editing, removal and consumption
- users/: Team directory and account removal

Import from subdirectories for better organization.
"""

from .auth import (
    AuthenticateUseCase,
    GetProfileUseCase,
    IssueInvitationUseCase,
    LoginUseCase,
    RedeemInvitationUseCase,
    VerifyInvitationUseCase,
)
from .inventory import (
    ConsumeInventoryUseCase,
    CreateInventoryItemUseCase,
    DeleteInventoryItemUseCase,
    GetInventoryItemUseCase,
    ListInventoryUseCase,
    UpdateInventoryItemUseCase,
)
from .users import DeleteUserUseCase, ListUsersUseCase

__all__ = [
    # Auth
    "AuthenticateUseCase",
    "GetProfileUseCase",
    "IssueInvitationUseCase",
    "LoginUseCase",
    "RedeemInvitationUseCase",
    "VerifyInvitationUseCase",
    # Inventory
    "ConsumeInventoryUseCase",
    "CreateInventoryItemUseCase",
    "GetInventoryItemUseCase",
    "DeleteInventoryItemUseCase",
    "ListInventoryUseCase",
    "UpdateInventoryItemUseCase",
    # Users
    "DeleteUserUseCase",
    "ListUsersUseCase",
]
