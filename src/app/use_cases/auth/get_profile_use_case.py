"""
Get Profile Use Case

Loads the caller's own profile.
"""

from src.app.services.unit_of_work import UnitOfWork
from src.domain.principal import Principal
from src.domain.result import Error, ErrorKind, Result, Return

from .dtos import UserProfile


class GetProfileUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, principal: Principal) -> Result[UserProfile]:
        async with self.uow:
            user = await self.uow.users.get_by_id(principal.id)
            if user is None:
                return Return.err(
                    Error(
                        "PROFILE_NOT_FOUND", "User profile not found", ErrorKind.not_found
                    )
                )
            return Return.ok(UserProfile.from_user(user))
