from typing import List, Tuple

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.services.credential_store import SqlCredentialStore
from src.api.utils.jwt import create_access_token
from src.app.services.notification_sender import INotificationSender
from src.depends import get_notification_sender, get_session
from src.domain.entities import InventoryItem, User, UserRole, UserStatus


class RecordingSender(INotificationSender):
    """Captures outgoing e-mail instead of delivering it"""

    def __init__(self):
        self.sent: List[Tuple[str, str, str]] = []

    async def send(self, to: str, subject: str, html: str) -> bool:
        self.sent.append((to, subject, html))
        return True


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
def sender():
    return RecordingSender()


@pytest_asyncio.fixture
async def client(db_session, sender):
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_session():
        yield db_session

    app.dependency_overrides[get_session] = override_get_session
    app.dependency_overrides[get_notification_sender] = lambda: sender

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
def create_account(db_session):
    """
    Factory creating a credential + profile directly in the database.

    Returns (user id, auth headers). Plain values, since the unit of work
    rolls back on exit and expires any ORM instance held by a test.
    """

    async def _create(
        email: str,
        role: UserRole = UserRole.ADMIN,
        permissions=(),
        status: UserStatus = UserStatus.ACTIVE,
        password: str = "Passw0rd!",
    ):
        created = await SqlCredentialStore(db_session).create_credential(email, password)
        user = User(
            id=created.value,
            email=email,
            name=email.split("@")[0].title(),
            role=role,
            permissions=[p.value for p in permissions],
            status=status,
        )
        db_session.add(user)
        await db_session.commit()
        token, _ = create_access_token(user.id, email)
        return user.id, {"Authorization": f"Bearer {token}"}

    return _create


@pytest_asyncio.fixture
def create_item(db_session):
    async def _create(quantity: int = 10, min_quantity: int = 5, name: str = "Bearing 6204"):
        item = InventoryItem(
            name=name,
            sku=name.upper().replace(" ", "-"),
            quantity=quantity,
            min_quantity=min_quantity,
            unit_price=4.5,
            location="Shelf A1",
            category="Parts",
        )
        db_session.add(item)
        await db_session.commit()
        return item.id

    return _create
