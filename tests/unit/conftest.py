from unittest.mock import AsyncMock, MagicMock

import pytest


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with all repositories"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_email = AsyncMock(return_value=None)
    uow.users.get_by_id = AsyncMock(return_value=None)
    uow.users.create = AsyncMock(side_effect=lambda user: user)
    uow.users.list_all = AsyncMock(return_value=[])
    uow.users.delete = AsyncMock(return_value=True)

    uow.invitations = MagicMock()
    uow.invitations.get_by_token = AsyncMock(return_value=None)
    uow.invitations.create = AsyncMock(side_effect=lambda invitation: invitation)
    uow.invitations.claim = AsyncMock(return_value=True)

    uow.inventory = MagicMock()
    uow.inventory.get_by_id = AsyncMock(return_value=None)
    uow.inventory.list_all = AsyncMock(return_value=[])
    uow.inventory.create = AsyncMock(side_effect=lambda item: item)
    uow.inventory.decrement_quantity = AsyncMock(return_value=None)
    uow.inventory.update = AsyncMock(return_value=None)
    uow.inventory.delete = AsyncMock(return_value=False)

    uow.activity_logs = MagicMock()
    uow.activity_logs.create = AsyncMock(side_effect=lambda entry: entry)

    return uow


@pytest.fixture
def mock_credential_store():
    store = MagicMock()
    store.create_credential = AsyncMock()
    store.delete_credential = AsyncMock(return_value=True)
    store.sign_in = AsyncMock(return_value=None)
    store.verify_token = AsyncMock(return_value=None)
    return store
