"""
Verify Invitation Use Case

Read-only check that an invitation token can still be redeemed.
"""

from typing import Optional

from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import Invitation, UserRole
from src.domain.result import Error, ErrorKind, Result, Return

from .dtos import VerifyInvitationResponse


def check_redeemable(invitation: Optional[Invitation]) -> Optional[Error]:
    """
    Shared token checks for verify and redeem.

    Expiry is checked before use, so an expired invitation reports
    INVITATION_EXPIRED whether or not it was used.
    """
    if invitation is None:
        return Error(
            "INVITATION_NOT_FOUND", "Invalid invitation token", ErrorKind.not_found
        )

    if invitation.is_expired(utcnow()):
        return Error(
            "INVITATION_EXPIRED",
            "This invitation has expired",
            ErrorKind.state_conflict,
            details={"expires_at": invitation.expires_at.isoformat()},
        )

    if invitation.used:
        return Error(
            "INVITATION_ALREADY_USED",
            "This invitation has already been used",
            ErrorKind.state_conflict,
        )

    return None


class VerifyInvitationUseCase:
    """
    Use case for checking an invitation before signup.

    Never mutates state; safe to call repeatedly.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, token: str) -> Result[VerifyInvitationResponse]:
        if not token:
            return Return.err(
                Error("TOKEN_REQUIRED", "Token is required", ErrorKind.validation)
            )

        async with self.uow:
            invitation = await self.uow.invitations.get_by_token(token)
            error = check_redeemable(invitation)
            if error is not None:
                return Return.err(error)

            return Return.ok(
                VerifyInvitationResponse(
                    email=invitation.email,
                    role=UserRole(invitation.role).value,
                    expires_at=invitation.expires_at,
                )
            )
