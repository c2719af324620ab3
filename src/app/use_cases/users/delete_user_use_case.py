"""
Delete User Use Case

Removes an account: the credential first, then the profile.
"""

import logging
from uuid import UUID

from src.app.services.activity_logger import ActivityLogger
from src.app.services.credential_store import ICredentialStore
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.dtos import MessageResponse
from src.domain.entities import ActivityType
from src.domain.principal import Principal
from src.domain.result import Error, ErrorKind, Result, Return

logger = logging.getLogger(__name__)


class DeleteUserUseCase:
    """
    Use case for an admin removing a team member.

    Business Rules:
    - Only ADMIN may delete users
    - An admin cannot delete their own account
    - The credential goes first so a half-finished delete never leaves a
      login without a profile; retrying finishes the profile removal
    - Records "Deleted User"
    """

    def __init__(self, uow: UnitOfWork, credential_store: ICredentialStore):
        self.uow = uow
        self.credentials = credential_store
        self.activity = ActivityLogger(uow)

    async def execute(self, actor: Principal, user_id: UUID) -> Result[MessageResponse]:
        if not actor.is_admin:
            return Return.err(
                Error(
                    "ADMIN_REQUIRED",
                    "Unauthorized: Admin access required",
                    ErrorKind.authz,
                )
            )
        if user_id == actor.id:
            return Return.err(
                Error(
                    "CANNOT_DELETE_SELF",
                    "Cannot delete your own account",
                    ErrorKind.validation,
                )
            )

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found", ErrorKind.not_found))
            email = user.email

            try:
                removed = await self.credentials.delete_credential(user_id)
            except Exception:
                logger.exception("Deleting credential for user %s failed", user_id)
                return Return.err(
                    Error("USER_DELETION_FAILED", "Failed to delete user", ErrorKind.dependency)
                )
            if not removed:
                logger.warning("User %s had no credential to delete", user_id)

            try:
                await self.uow.users.delete(user_id)
                await self.uow.commit()
            except Exception:
                logger.critical(
                    "Credential for %s is gone but profile %s remains; retry the delete",
                    email,
                    user_id,
                    exc_info=True,
                )
                await self.uow.rollback()
                return Return.err(
                    Error("USER_DELETION_FAILED", "Failed to delete user", ErrorKind.dependency)
                )

            await self.activity.record(
                actor.id,
                "Deleted User",
                ActivityType.DELETE,
                target=str(user_id),
                metadata={"email": email},
            )

        return Return.ok(MessageResponse(message="User deleted successfully"))
