from abc import ABC, abstractmethod

from src.domain.entities import ActivityLog


class IActivityLogRepository(ABC):
    """ActivityLog repository interface - application layer"""

    @abstractmethod
    async def create(self, entry: ActivityLog) -> ActivityLog:
        """Append an activity log entry (immutable)"""
        pass
