from uuid import uuid4

import pytest

from src.app.use_cases.auth import AuthenticateUseCase
from src.domain.entities import UserPermission, UserRole, UserStatus
from src.domain.result import ErrorKind
from tests.unit.factories import make_user


@pytest.mark.asyncio
async def test_missing_token(mock_uow, mock_credential_store):
    result = await AuthenticateUseCase(mock_uow, mock_credential_store).execute(None)

    assert result.is_err()
    assert result.error.code == "MISSING_TOKEN"
    assert result.error.kind == ErrorKind.unauthenticated
    mock_credential_store.verify_token.assert_not_called()


@pytest.mark.asyncio
async def test_invalid_token(mock_uow, mock_credential_store):
    result = await AuthenticateUseCase(mock_uow, mock_credential_store).execute("garbage")

    assert result.is_err()
    assert result.error.code == "INVALID_TOKEN"
    assert result.error.kind == ErrorKind.unauthenticated


@pytest.mark.asyncio
async def test_valid_token_without_profile(mock_uow, mock_credential_store):
    mock_credential_store.verify_token.return_value = uuid4()

    result = await AuthenticateUseCase(mock_uow, mock_credential_store).execute("token")

    assert result.is_err()
    assert result.error.code == "PROFILE_NOT_FOUND"
    assert result.error.kind == ErrorKind.authz


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [UserStatus.INACTIVE, UserStatus.PENDING])
async def test_non_active_account_rejected(mock_uow, mock_credential_store, status):
    user = make_user(status=status)
    mock_credential_store.verify_token.return_value = user.id
    mock_uow.users.get_by_id.return_value = user

    result = await AuthenticateUseCase(mock_uow, mock_credential_store).execute("token")

    assert result.is_err()
    assert result.error.code == "ACCOUNT_INACTIVE"
    assert result.error.kind == ErrorKind.authz


@pytest.mark.asyncio
async def test_active_account_resolves_principal(mock_uow, mock_credential_store):
    user = make_user(
        role=UserRole.MANAGER,
        permissions=["MANAGE_TEAM", "MANAGE_INVENTORY", "SOMETHING_RETIRED"],
    )
    mock_credential_store.verify_token.return_value = user.id
    mock_uow.users.get_by_id.return_value = user

    result = await AuthenticateUseCase(mock_uow, mock_credential_store).execute("token")

    assert result.is_ok()
    principal = result.value
    assert principal.id == user.id
    assert principal.role == UserRole.MANAGER
    assert principal.permissions == frozenset(
        {UserPermission.MANAGE_TEAM, UserPermission.MANAGE_INVENTORY}
    )
