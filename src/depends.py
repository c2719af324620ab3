from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.services.credential_store import SqlCredentialStore
from src.adapter.services.email_sender import EmailNotificationSender
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import raise_for_error
from src.app.services.credential_store import ICredentialStore
from src.app.services.notification_sender import INotificationSender
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import AuthenticateUseCase
from src.domain.principal import Principal

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer(auto_error=False)


async def get_session() -> AsyncSession:
    async with AsyncSessionLocal() as session:
        yield session


# FastAPI caches get_session per request, so the unit of work and the
# credential store of one request share a single session.
async def get_unit_of_work(session: AsyncSession = Depends(get_session)) -> UnitOfWork:
    return SqlAlchemyUnitOfWork(session)


async def get_credential_store(
    session: AsyncSession = Depends(get_session),
) -> ICredentialStore:
    return SqlCredentialStore(session)


def get_notification_sender() -> INotificationSender:
    return EmailNotificationSender(ApplicationConfig)


async def get_current_principal(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    uow: UnitOfWork = Depends(get_unit_of_work),
    credential_store: ICredentialStore = Depends(get_credential_store),
) -> Principal:
    """
    Dependency resolving the bearer token to an ACTIVE user's Principal.

    Raises:
        ClientError: 401 if the token is missing or invalid,
                     403 if the profile is missing or not ACTIVE
    """
    token = credentials.credentials if credentials else None
    result = await AuthenticateUseCase(uow, credential_store).execute(token)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
