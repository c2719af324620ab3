from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.domain.entities import Invitation


class IInvitationRepository(ABC):
    """Invitation repository interface - application layer"""

    @abstractmethod
    async def get_by_token(self, token: str) -> Optional[Invitation]:
        """Get invitation by token (used or not)"""
        pass

    @abstractmethod
    async def create(self, invitation: Invitation) -> Invitation:
        """Create a new invitation"""
        pass

    @abstractmethod
    async def claim(self, invitation_id: UUID) -> bool:
        """
        Mark an unused invitation as used in one conditional write.

        Returns:
            True if this call flipped used from False to True,
            False if the invitation was already used (or does not exist)
        """
        pass
