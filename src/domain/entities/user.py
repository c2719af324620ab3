"""
User Entity

Profile of a person who can sign in. Shares its id with the credential.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlmodel import JSON, Column, DateTime, Field, SQLModel

from src.domain.base import utcnow

from .enums import UserRole, UserStatus


class User(SQLModel, table=True):
    """
    User entity - the profile half of an account.

    Business Rules:
    - id equals the credential's principal id; no profile without a credential
    - Email must be unique across all users
    - Only ACTIVE users may call protected operations
    """

    __tablename__ = "users"

    id: UUID = Field(primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    name: str = Field(max_length=255)

    role: UserRole = Field(nullable=False)
    permissions: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    status: UserStatus = Field(default=UserStatus.ACTIVE)

    invited_by: Optional[UUID] = Field(default=None)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
