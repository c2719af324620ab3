"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for auth domain.
Provides type safety and clear contracts between layers.
"""

from datetime import datetime
from typing import List, Optional

from src.app.services.credential_store import AuthSession
from src.app.use_cases.dtos import CamelModel
from src.domain.entities import User, UserRole, UserStatus


# ============================================================================
# Command DTOs
# ============================================================================


class IssueInvitationCommand(CamelModel):
    """Validated intent to invite someone"""

    email: str
    role: str
    permissions: List[str] = []


class RedeemInvitationCommand(CamelModel):
    """Validated intent to create an account from an invitation"""

    token: str
    name: str
    password: str


# ============================================================================
# Response DTOs
# ============================================================================


class InvitationInfo(CamelModel):
    """Public-safe projection of an invitation"""

    id: str
    email: str
    role: str
    expires_at: datetime


class IssueInvitationResponse(CamelModel):
    """Response for issue invitation use case"""

    invitation: InvitationInfo
    invite_link: str
    email_sent: bool


class VerifyInvitationResponse(CamelModel):
    """Response for verify invitation use case"""

    email: str
    role: str
    expires_at: datetime


class SessionInfo(CamelModel):
    """Bearer session returned after sign-in"""

    access_token: str
    token_type: str
    expires_at: datetime
    user_id: str

    @classmethod
    def from_auth_session(cls, session: AuthSession) -> "SessionInfo":
        return cls(**session.model_dump())


class UserProfile(CamelModel):
    """User profile as exposed over the API"""

    id: str
    email: str
    name: str
    role: str
    permissions: List[str]
    status: str
    invited_by: Optional[str] = None

    @classmethod
    def from_user(cls, user: User) -> "UserProfile":
        return cls(
            id=str(user.id),
            email=user.email,
            name=user.name,
            role=UserRole(user.role).value,
            permissions=list(user.permissions or []),
            status=UserStatus(user.status).value,
            invited_by=str(user.invited_by) if user.invited_by else None,
        )


class RedeemInvitationResponse(CamelModel):
    """Response for redeem invitation use case; session is None if auto-login failed"""

    user: UserProfile
    session: Optional[SessionInfo] = None


class LoginResponse(CamelModel):
    """Response for login use case"""

    user: UserProfile
    session: SessionInfo
