from typing import List

from fastapi import APIRouter, Depends, Query, status
from pydantic import EmailStr, Field

from config import ApplicationConfig
from src.api.error import raise_for_error
from src.app.services.credential_store import ICredentialStore
from src.app.services.notification_sender import INotificationSender
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    GetProfileUseCase,
    IssueInvitationCommand,
    IssueInvitationResponse,
    IssueInvitationUseCase,
    LoginResponse,
    LoginUseCase,
    RedeemInvitationCommand,
    RedeemInvitationResponse,
    RedeemInvitationUseCase,
    UserProfile,
    VerifyInvitationResponse,
    VerifyInvitationUseCase,
)
from src.app.use_cases.dtos import CamelModel
from src.depends import (
    get_credential_store,
    get_current_principal,
    get_notification_sender,
    get_unit_of_work,
)
from src.domain.principal import Principal

router = APIRouter(prefix="/auth", tags=["Authentication"])


class InviteRequest(CamelModel):
    """
    Invite HTTP request payload

    Role and permission names are checked by the use case so that
    unknown values come back as INVALID_ROLE / INVALID_PERMISSION.
    """

    email: EmailStr = Field(..., description="Invitee email address")
    role: str = Field(..., min_length=1, description="Role granted on signup")
    permissions: List[str] = Field(default_factory=list)


class SignupRequest(CamelModel):
    token: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., description="Account password (min 8 chars)")


class LoginRequest(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


@router.post(
    "/invite",
    status_code=status.HTTP_201_CREATED,
    response_model=IssueInvitationResponse,
    response_model_by_alias=True,
)
async def invite(
    request: InviteRequest,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: INotificationSender = Depends(get_notification_sender),
):
    """
    Issue Invitation

    Requires MANAGE_TEAM (ADMIN holds every permission). Only ADMINs may
    invite ADMINs. The e-mail is sent best-effort; `emailSent` reports it.

    Raises:
        - 400 Bad Request: Unknown role/permission or email already registered
        - 401 Unauthorized: Missing or invalid token
        - 403 Forbidden: Missing permission or ADMIN escalation attempt
    """
    command = IssueInvitationCommand(
        email=request.email, role=request.role, permissions=request.permissions
    )
    use_case = IssueInvitationUseCase(uow, notifier, ApplicationConfig.FRONTEND_URL)
    result = await use_case.execute(principal, command)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get(
    "/verify-invitation",
    response_model=VerifyInvitationResponse,
    response_model_by_alias=True,
)
async def verify_invitation(
    token: str = Query(""), uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    Check an invitation token without consuming it.

    Raises:
        - 400 Bad Request: Missing token, expired or already used invitation
        - 404 Not Found: Unknown token
    """
    result = await VerifyInvitationUseCase(uow).execute(token)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/signup",
    status_code=status.HTTP_201_CREATED,
    response_model=RedeemInvitationResponse,
    response_model_by_alias=True,
)
async def signup(
    request: SignupRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    credential_store: ICredentialStore = Depends(get_credential_store),
):
    """
    Redeem Invitation

    Creates the credential and profile, claims the invitation and signs
    the new user in. `session` is null if the automatic sign-in failed.

    Raises:
        - 400 Bad Request: Invalid input, expired or already used invitation,
          email already registered
        - 404 Not Found: Unknown token
        - 500 Internal Server Error: Provisioning failed (partial work undone)
    """
    command = RedeemInvitationCommand(
        token=request.token, name=request.name, password=request.password
    )
    result = await RedeemInvitationUseCase(uow, credential_store).execute(command)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("/login", response_model=LoginResponse, response_model_by_alias=True)
async def login(
    request: LoginRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    credential_store: ICredentialStore = Depends(get_credential_store),
):
    """
    Raises:
        - 401 Unauthorized: Invalid credentials
        - 403 Forbidden: Account not ACTIVE
    """
    result = await LoginUseCase(uow, credential_store).execute(
        request.email, request.password
    )
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("/me", response_model=UserProfile, response_model_by_alias=True)
async def me(
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetProfileUseCase(uow).execute(principal)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
