import pytest
from unittest.mock import AsyncMock, MagicMock

from src.libs.result import Return
from src.app.settings import AuthSettings


def _mock_principal_repository():
    repository = MagicMock()
    repository.get_by_email = AsyncMock(return_value=None)
    repository.get_by_id = AsyncMock(return_value=None)
    repository.create = AsyncMock(side_effect=lambda principal: principal)
    repository.update = AsyncMock(side_effect=lambda principal: principal)
    repository.get_by_reset_token = AsyncMock(return_value=None)
    repository.consume_reset_token = AsyncMock(return_value=True)
    repository.clear_reset_token = AsyncMock(return_value=True)
    repository.purge_expired_reset_tokens = AsyncMock(return_value=0)
    return repository


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = _mock_principal_repository()
    uow.admins = _mock_principal_repository()
    return uow


@pytest.fixture
def settings():
    return AuthSettings(
        jwt_secret="unit-test-secret",
        bcrypt_rounds=4,
        frontend_url="http://frontend.test",
    )


@pytest.fixture
def notification_service():
    service = MagicMock()
    service.send = AsyncMock(return_value=Return.ok(None))
    return service
