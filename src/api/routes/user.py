from uuid import UUID

from fastapi import APIRouter, Depends

from src.api.error import raise_for_error
from src.app.services.credential_store import ICredentialStore
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.dtos import MessageResponse
from src.app.use_cases.users import DeleteUserUseCase, ListUsersUseCase, UserListResponse
from src.depends import get_credential_store, get_current_principal, get_unit_of_work
from src.domain.principal import Principal

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("", response_model=UserListResponse, response_model_by_alias=True)
async def list_users(
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Users

    Admins see every profile; other roles see only ACTIVE members.
    """
    result = await ListUsersUseCase(uow).execute(principal)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete("/{user_id}", response_model=MessageResponse)
async def delete_user(
    user_id: UUID,
    principal: Principal = Depends(get_current_principal),
    uow: UnitOfWork = Depends(get_unit_of_work),
    credential_store: ICredentialStore = Depends(get_credential_store),
):
    """
    Delete User

    Removes the user's credential and profile.

    Raises:
        - 400 Bad Request: Attempt to delete your own account
        - 403 Forbidden: ADMIN only
        - 404 Not Found: Unknown user
        - 500 Internal Server Error: Credential or profile removal failed
    """
    result = await DeleteUserUseCase(uow, credential_store).execute(principal, user_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
