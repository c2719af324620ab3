from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.domain.entities import Credential


class ICredentialRepository(ABC):
    """Credential repository interface - used by the credential store only"""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[Credential]:
        pass

    @abstractmethod
    async def get_by_id(self, credential_id: UUID) -> Optional[Credential]:
        pass

    @abstractmethod
    async def create(self, credential: Credential) -> Credential:
        pass

    @abstractmethod
    async def delete(self, credential_id: UUID) -> bool:
        pass
