"""
ActivityLog Entity

Immutable log of user and system activity.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow

from .enums import ActivityType


class ActivityLog(SQLModel, table=True):
    """
    ActivityLog entity - never updated or deleted.

    Written best-effort: a failed write never fails the operation it describes.
    """

    __tablename__ = "activity_logs"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: Optional[UUID] = Field(default=None, index=True)
    action: str = Field(max_length=100)  # e.g. "Invited User", "Stock Depleted"
    type: ActivityType = Field(nullable=False)
    target: Optional[str] = Field(default=None, max_length=255)
    event_metadata: Optional[dict] = Field(default=None, sa_column=Column("metadata", JSON))

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_activity_created_at", "created_at"),
        Index("idx_activity_action", "action"),
    )
