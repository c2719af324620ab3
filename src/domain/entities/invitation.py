"""
Invitation Entity

Single-use invitations to create an account.
"""

from datetime import datetime
from typing import List
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow

from .enums import UserRole


class Invitation(SQLModel, table=True):
    """
    Invitation entity - single-use token for provisioning one account.

    Business Rules:
    - Created by a user holding MANAGE_TEAM (or an ADMIN)
    - Expires 7 days after creation, never extended
    - Token is 256 bits of randomness rendered as 64 hex chars
    - used flips to True exactly once and never back
    - Never deleted (kept as audit trail)
    """

    __tablename__ = "user_invitations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    email: str = Field(max_length=255, nullable=False, index=True)
    role: UserRole = Field(nullable=False)
    permissions: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    invited_by: UUID = Field(nullable=False)

    token: str = Field(unique=True, index=True, max_length=64)
    used: bool = Field(default=False)

    # Timestamps
    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_invitation_expires_at", "expires_at"),
        Index("idx_invitation_used", "used"),
    )

    def is_expired(self, now: datetime) -> bool:
        return now > self.expires_at
