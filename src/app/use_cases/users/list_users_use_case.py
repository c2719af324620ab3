"""
List Users Use Case
"""

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth.dtos import UserProfile
from src.domain.entities import UserStatus
from src.domain.principal import Principal
from src.domain.result import Result, Return

from .dtos import UserListResponse


class ListUsersUseCase:
    """Team directory. Admins see every profile, everyone else only ACTIVE ones."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor: Principal) -> Result[UserListResponse]:
        status = None if actor.is_admin else UserStatus.ACTIVE
        async with self.uow:
            users = await self.uow.users.list_all(status=status)
            return Return.ok(
                UserListResponse(users=[UserProfile.from_user(u) for u in users])
            )
