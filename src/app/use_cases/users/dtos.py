"""
User Management DTOs
"""

from typing import List

from src.app.use_cases.auth.dtos import UserProfile
from src.app.use_cases.dtos import CamelModel


class UserListResponse(CamelModel):
    users: List[UserProfile]
