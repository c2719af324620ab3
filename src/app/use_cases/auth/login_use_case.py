"""
Login Use Case

Password sign-in for existing accounts.
"""

from src.app.services.activity_logger import ActivityLogger
from src.app.services.credential_store import ICredentialStore
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import ActivityType, UserStatus
from src.domain.result import Error, ErrorKind, Result, Return

from .dtos import LoginResponse, SessionInfo, UserProfile


class LoginUseCase:
    """
    Use case for user login.

    Business Rules:
    - Credentials are checked by the credential store
    - The profile must exist and be ACTIVE
    - Records a "User Login" activity entry
    """

    def __init__(self, uow: UnitOfWork, credential_store: ICredentialStore):
        self.uow = uow
        self.credentials = credential_store
        self.activity = ActivityLogger(uow)

    async def execute(self, email: str, password: str) -> Result[LoginResponse]:
        email = email.strip().lower()
        if not email or not password:
            return Return.err(
                Error(
                    "INVALID_INPUT", "Email and password required", ErrorKind.validation
                )
            )

        async with self.uow:
            auth_session = await self.credentials.sign_in(email, password)
            if auth_session is None:
                return Return.err(
                    Error(
                        "INVALID_CREDENTIALS",
                        "Invalid credentials",
                        ErrorKind.unauthenticated,
                    )
                )

            user = await self.uow.users.get_by_email(email)
            if user is None:
                return Return.err(
                    Error(
                        "PROFILE_NOT_FOUND",
                        "Failed to fetch user profile",
                        ErrorKind.dependency,
                    )
                )

            if user.status != UserStatus.ACTIVE:
                return Return.err(
                    Error("ACCOUNT_INACTIVE", "Account is not active", ErrorKind.authz)
                )

            response = LoginResponse(
                user=UserProfile.from_user(user),
                session=SessionInfo.from_auth_session(auth_session),
            )
            await self.activity.record(
                user.id, "User Login", ActivityType.LOGIN, metadata={"email": email}
            )

        return Return.ok(response)
