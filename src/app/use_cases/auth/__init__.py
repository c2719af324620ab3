"""
Authentication Use Cases

Invitation lifecycle, login and the authorization guard.
"""

from .authenticate_use_case import AuthenticateUseCase
from .dtos import (
    InvitationInfo,
    IssueInvitationCommand,
    IssueInvitationResponse,
    LoginResponse,
    RedeemInvitationCommand,
    RedeemInvitationResponse,
    SessionInfo,
    UserProfile,
    VerifyInvitationResponse,
)
from .get_profile_use_case import GetProfileUseCase
from .issue_invitation_use_case import IssueInvitationUseCase
from .login_use_case import LoginUseCase
from .redeem_invitation_use_case import RedeemInvitationUseCase
from .verify_invitation_use_case import VerifyInvitationUseCase

__all__ = [
    # Use Cases
    "AuthenticateUseCase",
    "GetProfileUseCase",
    "IssueInvitationUseCase",
    "LoginUseCase",
    "RedeemInvitationUseCase",
    "VerifyInvitationUseCase",
    # DTOs - Commands
    "IssueInvitationCommand",
    "RedeemInvitationCommand",
    # DTOs - Responses
    "IssueInvitationResponse",
    "LoginResponse",
    "RedeemInvitationResponse",
    "VerifyInvitationResponse",
    # DTOs - Nested Models
    "InvitationInfo",
    "SessionInfo",
    "UserProfile",
]
