"""
User Management Use Cases

Team directory and account removal.
"""

from .delete_user_use_case import DeleteUserUseCase
from .dtos import UserListResponse
from .list_users_use_case import ListUsersUseCase

__all__ = [
    "DeleteUserUseCase",
    "ListUsersUseCase",
    "UserListResponse",
]
