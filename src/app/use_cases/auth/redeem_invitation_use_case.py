"""
Redeem Invitation Use Case

Creates an account (credential + profile) from an invitation token.
"""

import logging
from uuid import UUID

from src.app.services.activity_logger import ActivityLogger
from src.app.services.credential_store import ICredentialStore
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import ActivityType, User, UserStatus
from src.domain.result import Error, ErrorKind, Result, Return

from .dtos import (
    RedeemInvitationCommand,
    RedeemInvitationResponse,
    SessionInfo,
    UserProfile,
)
from .verify_invitation_use_case import check_redeemable

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 8


class RedeemInvitationUseCase:
    """
    Use case for signing up through an invitation.

    Steps:
    1. Validate name and password
    2. Look up the token; reject unknown, expired or used invitations
    3. Create the credential
    4. Create the ACTIVE profile with the invitation's role/permissions;
       on failure delete the credential
    5. Claim the invitation with a conditional write (used: False -> True);
       if another redemption won, or the write fails, delete the profile
       and the credential
    6. Sign in (failure leaves session=None, the account still exists)
    7. Record "User Registered"

    No step relies on a multi-statement transaction; every partial failure
    is undone by explicit compensation.
    """

    def __init__(self, uow: UnitOfWork, credential_store: ICredentialStore):
        self.uow = uow
        self.credentials = credential_store
        self.activity = ActivityLogger(uow)

    async def execute(
        self, command: RedeemInvitationCommand
    ) -> Result[RedeemInvitationResponse]:
        name = command.name.strip()
        if not name or not command.token:
            return Return.err(
                Error(
                    "INVALID_INPUT",
                    "Name, password, and token are required",
                    ErrorKind.validation,
                )
            )
        if len(command.password) < MIN_PASSWORD_LENGTH:
            return Return.err(
                Error(
                    "INVALID_PASSWORD",
                    f"Password must be at least {MIN_PASSWORD_LENGTH} characters long",
                    ErrorKind.validation,
                )
            )

        async with self.uow:
            invitation = await self.uow.invitations.get_by_token(command.token)
            error = check_redeemable(invitation)
            if error is not None:
                return Return.err(error)

            # A failed flush or rollback expires the row; use plain values from here on
            invitation_id = invitation.id
            email = invitation.email
            role = invitation.role
            permissions = list(invitation.permissions or [])
            invited_by = invitation.invited_by

            created = await self.credentials.create_credential(email, command.password)
            if created.is_err():
                return Return.err(created.error)
            principal_id = created.value

            try:
                profile = await self.uow.users.create(
                    User(
                        id=principal_id,
                        email=email,
                        name=name,
                        role=role,
                        permissions=permissions,
                        status=UserStatus.ACTIVE,
                        invited_by=invited_by,
                    )
                )
                await self.uow.commit()
            except Exception:
                logger.exception("Profile creation failed for %s", email)
                await self.uow.rollback()
                await self._compensate(principal_id, profile_created=False)
                return Return.err(
                    Error(
                        "PROFILE_CREATION_FAILED",
                        "Registration failed",
                        ErrorKind.dependency,
                    )
                )

            user = UserProfile.from_user(profile)

            try:
                claimed = await self.uow.invitations.claim(invitation_id)
                if claimed:
                    await self.uow.commit()
            except Exception:
                logger.exception("Claiming invitation %s failed", invitation_id)
                await self.uow.rollback()
                await self._compensate(principal_id, profile_created=True)
                return Return.err(
                    Error(
                        "INVITATION_CLAIM_FAILED",
                        "Registration failed",
                        ErrorKind.dependency,
                    )
                )

            if not claimed:
                logger.warning(
                    "Invitation %s was redeemed concurrently; undoing account %s",
                    invitation_id,
                    principal_id,
                )
                await self.uow.rollback()
                await self._compensate(principal_id, profile_created=True)
                return Return.err(
                    Error(
                        "INVITATION_ALREADY_USED",
                        "This invitation has already been used",
                        ErrorKind.state_conflict,
                    )
                )

            session = None
            try:
                auth_session = await self.credentials.sign_in(email, command.password)
                if auth_session is None:
                    logger.error("Auto-login after signup failed for %s", email)
                else:
                    session = SessionInfo.from_auth_session(auth_session)
            except Exception:
                logger.exception("Session creation error for %s", email)

            await self.activity.record(
                principal_id,
                "User Registered",
                ActivityType.CREATE,
                target=name,
                metadata={"invitation_id": str(invitation_id)},
            )

        return Return.ok(RedeemInvitationResponse(user=user, session=session))

    async def _compensate(self, principal_id: UUID, profile_created: bool) -> None:
        """Undo a half-provisioned account. Failures here leave orphans and are logged as such."""
        if profile_created:
            try:
                await self.uow.users.delete(principal_id)
                await self.uow.commit()
            except Exception:
                logger.critical(
                    "Rollback failed: orphaned profile %s needs manual cleanup",
                    principal_id,
                    exc_info=True,
                )
                await self.uow.rollback()

        try:
            await self.credentials.delete_credential(principal_id)
        except Exception:
            logger.critical(
                "Rollback failed: orphaned credential %s needs manual cleanup",
                principal_id,
                exc_info=True,
            )
