from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import User, UserStatus


class IUserRepository(ABC):
    """User profile repository interface - application layer"""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address"""
        pass

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def list_all(self, status: Optional[UserStatus] = None) -> List[User]:
        """List users, newest first, optionally only those with the given status"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Create a new user profile"""
        pass

    @abstractmethod
    async def delete(self, user_id: UUID) -> bool:
        """Delete a user profile; False if no row matched"""
        pass
