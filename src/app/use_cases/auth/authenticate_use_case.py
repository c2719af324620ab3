"""
Authenticate Use Case

Authorization guard: turns a bearer token into a Principal.
"""

from typing import Optional

from src.app.services.credential_store import ICredentialStore
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import UserStatus
from src.domain.principal import Principal
from src.domain.result import Error, ErrorKind, Result, Return


class AuthenticateUseCase:
    """
    Resolve a bearer token to an immutable Principal.

    Unknown tokens, missing profiles and non-ACTIVE accounts are all
    rejected, regardless of whether the credential itself is valid.
    """

    def __init__(self, uow: UnitOfWork, credential_store: ICredentialStore):
        self.uow = uow
        self.credentials = credential_store

    async def execute(self, token: Optional[str]) -> Result[Principal]:
        if not token:
            return Return.err(
                Error(
                    "MISSING_TOKEN",
                    "No authorization token provided",
                    ErrorKind.unauthenticated,
                )
            )

        async with self.uow:
            principal_id = await self.credentials.verify_token(token)
            if principal_id is None:
                return Return.err(
                    Error(
                        "INVALID_TOKEN",
                        "Invalid or expired token",
                        ErrorKind.unauthenticated,
                    )
                )

            user = await self.uow.users.get_by_id(principal_id)
            if user is None:
                return Return.err(
                    Error("PROFILE_NOT_FOUND", "User profile not found", ErrorKind.authz)
                )

            if user.status != UserStatus.ACTIVE:
                return Return.err(
                    Error(
                        "ACCOUNT_INACTIVE", "User account is not active", ErrorKind.authz
                    )
                )

            # Leaving the unit of work rolls back and expires the row
            return Return.ok(Principal.from_user(user))
