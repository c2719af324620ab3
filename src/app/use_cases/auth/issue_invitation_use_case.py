"""
Issue Invitation Use Case

Lets a team manager invite someone to create an account.
"""

import logging
import secrets
from datetime import timedelta

from src.app.services.activity_logger import ActivityLogger
from src.app.services.notification_sender import INotificationSender
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import ActivityType, Invitation, UserPermission, UserRole
from src.domain.principal import Principal
from src.domain.result import Error, ErrorKind, Result, Return

from .dtos import InvitationInfo, IssueInvitationCommand, IssueInvitationResponse

logger = logging.getLogger(__name__)

INVITATION_TTL = timedelta(days=7)

INVITATION_EMAIL_TEMPLATE = """
<div style="font-family: Arial, sans-serif; padding: 20px; color: #333;">
    <h2>Welcome to CMMS!</h2>
    <p>You have been invited to join the maintenance management system as a <b>{role}</b>.</p>
    <p>Click the button below to accept the invitation and set up your account:</p>
    <a href="{link}" style="background-color: #007bff; color: white; padding: 10px 20px; text-decoration: none; border-radius: 5px; display: inline-block; margin: 10px 0;">Accept Invitation</a>
    <p>Or copy this link: <br> {link}</p>
    <p>This link expires in 7 days.</p>
</div>
"""


class IssueInvitationUseCase:
    """
    Use case for inviting a new user.

    Business Rules:
    - Inviter needs MANAGE_TEAM (ADMIN holds every permission)
    - Only an ADMIN may issue an ADMIN invitation
    - Email must not already belong to a provisioned profile
    - Token is 256 random bits as 64 hex chars; the unique index is the
      authoritative collision guard
    - Invitation expires 7 days after issue
    - E-mail delivery failure does not fail the invitation
    """

    def __init__(
        self, uow: UnitOfWork, notifier: INotificationSender, frontend_url: str
    ):
        self.uow = uow
        self.notifier = notifier
        self.frontend_url = frontend_url.rstrip("/")
        self.activity = ActivityLogger(uow)

    async def execute(
        self, inviter: Principal, command: IssueInvitationCommand
    ) -> Result[IssueInvitationResponse]:
        """
        Execute issue invitation use case.

        Args:
            inviter: Authenticated principal sending the invite
            command: Email, role and permissions for the new account

        Returns:
            Result with IssueInvitationResponse DTO, or Error
        """
        if not inviter.has_permission(UserPermission.MANAGE_TEAM):
            return Return.err(
                Error(
                    "PERMISSION_DENIED",
                    "Permission denied: MANAGE_TEAM required",
                    ErrorKind.authz,
                )
            )

        try:
            role = UserRole(command.role)
        except ValueError:
            return Return.err(
                Error(
                    "INVALID_ROLE",
                    f"Invalid role: {command.role}",
                    ErrorKind.validation,
                    details={"allowed": [r.value for r in UserRole]},
                )
            )

        try:
            permissions = sorted({UserPermission(p).value for p in command.permissions})
        except ValueError:
            return Return.err(
                Error(
                    "INVALID_PERMISSION",
                    "Unknown permission in request",
                    ErrorKind.validation,
                    details={"allowed": [p.value for p in UserPermission]},
                )
            )

        email = command.email.strip().lower()
        if not email:
            return Return.err(
                Error("INVALID_EMAIL", "Email and role required", ErrorKind.validation)
            )

        async with self.uow:
            if role == UserRole.ADMIN and not inviter.is_admin:
                logger.warning(
                    "Blocked ADMIN invitation for %s by non-admin %s", email, inviter.id
                )
                await self.activity.record(
                    inviter.id,
                    "Blocked Admin Invitation",
                    ActivityType.SYSTEM,
                    target=email,
                    metadata={"inviter_role": inviter.role.value},
                )
                return Return.err(
                    Error(
                        "ADMIN_ESCALATION",
                        "Only Admins can create other Admin accounts",
                        ErrorKind.authz,
                    )
                )

            existing = await self.uow.users.get_by_email(email)
            if existing is not None:
                return Return.err(
                    Error(
                        "USER_ALREADY_EXISTS",
                        "User already exists",
                        ErrorKind.state_conflict,
                    )
                )

            invitation = Invitation(
                email=email,
                role=role,
                permissions=permissions,
                invited_by=inviter.id,
                token=secrets.token_hex(32),
                expires_at=utcnow() + INVITATION_TTL,
            )
            invitation = await self.uow.invitations.create(invitation)
            await self.uow.commit()

            info = InvitationInfo(
                id=str(invitation.id),
                email=invitation.email,
                role=role.value,
                expires_at=invitation.expires_at,
            )
            invite_link = f"{self.frontend_url}/#/signup?token={invitation.token}"

            await self.activity.record(
                inviter.id,
                "Invited User",
                ActivityType.CREATE,
                target=email,
                metadata={"role": role.value, "permissions": permissions},
            )

        email_sent = await self._send_invitation(email, role, invite_link)

        return Return.ok(
            IssueInvitationResponse(
                invitation=info, invite_link=invite_link, email_sent=email_sent
            )
        )

    async def _send_invitation(self, email: str, role: UserRole, link: str) -> bool:
        try:
            sent = await self.notifier.send(
                email,
                "You're invited to CMMS",
                INVITATION_EMAIL_TEMPLATE.format(role=role.value, link=link),
            )
        except Exception:
            logger.exception("Invitation e-mail to %s raised", email)
            return False

        if not sent:
            logger.warning("Invitation e-mail to %s was not delivered", email)
        return sent
