"""
SQL-backed credential store.

Passwords are bcrypt hashes (cost factor 12); sessions are HS256 JWTs.
Every write commits immediately.
"""

import logging
from typing import Optional
from uuid import UUID

import bcrypt
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.credential_repository import CredentialRepository
from src.api.utils.jwt import create_access_token, verify_jwt
from src.app.services.credential_store import AuthSession, ICredentialStore
from src.domain.entities import Credential
from src.domain.result import Error, ErrorKind, Result, Return

logger = logging.getLogger(__name__)

# Pre-computed so unknown emails cost the same as a wrong password
_DUMMY_HASH = bcrypt.hashpw(b"dummy_password", bcrypt.gensalt(12))


class SqlCredentialStore(ICredentialStore):
    def __init__(self, session: AsyncSession):
        self.session = session
        self.credentials = CredentialRepository(session)

    async def create_credential(self, email: str, password: str) -> Result[UUID]:
        if await self.credentials.get_by_email(email) is not None:
            return Return.err(
                Error(
                    "USER_ALREADY_EXISTS",
                    "An account with this email already exists",
                    ErrorKind.state_conflict,
                )
            )

        password_hash = bcrypt.hashpw(
            password.encode("utf-8"), bcrypt.gensalt(12)
        ).decode("utf-8")

        try:
            credential = await self.credentials.create(
                Credential(email=email, password_hash=password_hash)
            )
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            return Return.err(
                Error(
                    "USER_ALREADY_EXISTS",
                    "An account with this email already exists",
                    ErrorKind.state_conflict,
                )
            )
        except SQLAlchemyError:
            logger.exception("Credential store write failed for %s", email)
            await self.session.rollback()
            return Return.err(
                Error("CREDENTIAL_STORE_ERROR", "Failed to create user", ErrorKind.dependency)
            )

        return Return.ok(credential.id)

    async def delete_credential(self, principal_id: UUID) -> bool:
        deleted = await self.credentials.delete(principal_id)
        await self.session.commit()
        return deleted

    async def sign_in(self, email: str, password: str) -> Optional[AuthSession]:
        credential = await self.credentials.get_by_email(email)

        if credential is None:
            bcrypt.checkpw(password.encode("utf-8"), _DUMMY_HASH)
            return None

        if not bcrypt.checkpw(
            password.encode("utf-8"), credential.password_hash.encode("utf-8")
        ):
            return None

        access_token, expires_at = create_access_token(credential.id, credential.email)
        return AuthSession(
            access_token=access_token,
            expires_at=expires_at,
            user_id=str(credential.id),
        )

    async def verify_token(self, token: str) -> Optional[UUID]:
        payload = verify_jwt(token)
        if payload is None:
            return None

        try:
            principal_id = UUID(payload["sub"])
        except (KeyError, ValueError):
            return None

        # A deleted credential invalidates its outstanding tokens
        if await self.credentials.get_by_id(principal_id) is None:
            return None
        return principal_id
