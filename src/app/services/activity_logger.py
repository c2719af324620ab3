"""
Activity Logger

Best-effort writer for activity_logs. A failed write is logged and rolled
back; it never turns a successful operation into a failure.
"""

import logging
from typing import Optional
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import ActivityLog, ActivityType

logger = logging.getLogger(__name__)


class ActivityLogger:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def record(
        self,
        user_id: Optional[UUID],
        action: str,
        type: ActivityType,
        target: Optional[str] = None,
        metadata: Optional[dict] = None,
    ) -> bool:
        entry = ActivityLog(
            user_id=user_id,
            action=action,
            type=type,
            target=target,
            event_metadata=metadata,
        )
        try:
            await self.uow.activity_logs.create(entry)
            await self.uow.commit()
            return True
        except Exception:
            logger.exception("Failed to write activity log entry %r", action)
            await self.uow.rollback()
            return False
