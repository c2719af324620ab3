"""
Credential Store

Holds login secrets and issues / validates bearer session tokens.
Writes are committed immediately and are not part of any unit of work,
so callers that pair a credential with other rows must compensate
themselves on failure.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from src.domain.result import Result


class AuthSession(BaseModel):
    """Opaque session handed back to the caller"""

    access_token: str
    token_type: str = "bearer"
    expires_at: datetime
    user_id: str


class ICredentialStore(ABC):
    @abstractmethod
    async def create_credential(self, email: str, password: str) -> Result[UUID]:
        """Create a credential and return its principal id"""
        pass

    @abstractmethod
    async def delete_credential(self, principal_id: UUID) -> bool:
        """Delete a credential. Raises if the store cannot be reached."""
        pass

    @abstractmethod
    async def sign_in(self, email: str, password: str) -> Optional[AuthSession]:
        """Return a session for valid credentials, None otherwise"""
        pass

    @abstractmethod
    async def verify_token(self, token: str) -> Optional[UUID]:
        """Return the principal id of a valid bearer token, None otherwise"""
        pass
