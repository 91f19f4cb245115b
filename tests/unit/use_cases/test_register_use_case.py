from uuid import uuid4

import bcrypt
import pytest

from src.app.repositories.principal_repository import DuplicatePrincipalError
from src.app.services.principal_scope import AdminScope, UserScope
from src.app.use_cases.auth.dtos import RegisterCommand
from src.app.use_cases.auth.register_use_case import RegisterUseCase
from src.domain.entities import Admin, User


def make_command(**overrides) -> RegisterCommand:
    fields = dict(
        full_name="Jane Seeker",
        email="Jane@Example.com",
        username="jane",
        password="Str0ng!Pass",
        confirm_password="Str0ng!Pass",
    )
    fields.update(overrides)
    return RegisterCommand(**fields)


@pytest.mark.asyncio
async def test_successful_registration(mock_uow, settings):
    # Arrange
    use_case = RegisterUseCase(mock_uow, UserScope(), settings)

    # Act
    result = await use_case.execute(make_command())

    # Assert
    assert result.is_ok()
    assert result.value.message == "User registered successfully"
    assert result.value.principal.email == "jane@example.com"

    mock_uow.users.create.assert_called_once()
    created = mock_uow.users.create.call_args.args[0]
    assert isinstance(created, User)
    assert created.email == "jane@example.com"
    assert bcrypt.checkpw(b"Str0ng!Pass", created.password_hash.encode())
    assert created.reset_token is None

    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_duplicate_email_conflict(mock_uow, settings):
    mock_uow.users.get_by_email.return_value = User(
        id=uuid4(),
        full_name="Existing",
        email="jane@example.com",
        username="existing",
        password_hash="hash",
    )

    result = await RegisterUseCase(mock_uow, UserScope(), settings).execute(make_command())

    assert result.is_err()
    assert result.error.code == "EMAIL_ALREADY_EXISTS"
    mock_uow.users.create.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_password_mismatch_rejected_before_storage(mock_uow, settings):
    result = await RegisterUseCase(mock_uow, UserScope(), settings).execute(
        make_command(confirm_password="Different1!")
    )

    assert result.is_err()
    assert result.error.code == "PASSWORDS_DO_NOT_MATCH"
    mock_uow.__aenter__.assert_not_called()


@pytest.mark.asyncio
async def test_weak_password_rejected_with_first_rule(mock_uow, settings):
    result = await RegisterUseCase(mock_uow, UserScope(), settings).execute(
        make_command(password="abcdefgh", confirm_password="abcdefgh")
    )

    assert result.is_err()
    assert result.error.code == "WEAK_PASSWORD"
    assert result.error.message == "Password must contain at least one uppercase letter"
    mock_uow.users.create.assert_not_called()


@pytest.mark.asyncio
async def test_blank_fields_rejected(mock_uow, settings):
    result = await RegisterUseCase(mock_uow, UserScope(), settings).execute(
        make_command(full_name="   ")
    )

    assert result.is_err()
    assert result.error.code == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_admin_registration_keeps_super_admin_flag(mock_uow, settings):
    result = await RegisterUseCase(mock_uow, AdminScope(), settings).execute(
        make_command(is_super_admin=True)
    )

    assert result.is_ok()
    assert result.value.message == "Admin registered successfully"
    assert result.value.principal.is_super_admin is True

    created = mock_uow.admins.create.call_args.args[0]
    assert isinstance(created, Admin)
    assert created.is_super_admin is True
    mock_uow.users.create.assert_not_called()


@pytest.mark.asyncio
async def test_duplicate_detected_on_insert(mock_uow, settings):
    """A concurrent registration that slips past the lookup still yields a conflict"""
    mock_uow.users.create.side_effect = DuplicatePrincipalError("jane@example.com")

    result = await RegisterUseCase(mock_uow, UserScope(), settings).execute(make_command())

    assert result.is_err()
    assert result.error.code == "EMAIL_ALREADY_EXISTS"
    assert result.error.message == "User already exists with this email"
    mock_uow.commit.assert_not_called()
