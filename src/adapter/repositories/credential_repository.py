from typing import Optional
from uuid import UUID

from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.credential_repository import ICredentialRepository
from src.domain.entities import Credential


class CredentialRepository(ICredentialRepository):
    """Credential repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_email(self, email: str) -> Optional[Credential]:
        stmt = select(Credential).where(Credential.email == email)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_id(self, credential_id: UUID) -> Optional[Credential]:
        stmt = select(Credential).where(Credential.id == credential_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, credential: Credential) -> Credential:
        self.session.add(credential)
        await self.session.flush()
        await self.session.refresh(credential)
        return credential

    async def delete(self, credential_id: UUID) -> bool:
        stmt = delete(Credential).where(Credential.id == credential_id)
        result = await self.session.execute(stmt)
        return result.rowcount == 1
