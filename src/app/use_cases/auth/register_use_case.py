"""
Register Use Case

Creates a user or admin account.
"""

import bcrypt

from src.libs.result import Error, Result, Return
from src.app.repositories.principal_repository import DuplicatePrincipalError
from src.app.services.password_policy import validate_password_strength
from src.app.services.principal_scope import PrincipalScope
from src.app.services.unit_of_work import UnitOfWork
from src.app.settings import AuthSettings
from .dtos import PrincipalInfo, RegisterCommand, RegisterResponse


class RegisterUseCase:
    """
    Register Use Case

    Business Logic:
    1. All fields are required
    2. password and confirm_password must match
    3. Password must satisfy the strength policy
    4. Email must not already exist for this principal type (the unique index
       settles concurrent registrations)
    5. Hash password with bcrypt and persist the principal
    """

    def __init__(self, uow: UnitOfWork, scope: PrincipalScope, settings: AuthSettings):
        self.uow = uow
        self.scope = scope
        self.settings = settings

    def _email_taken(self) -> Error:
        return Error(
            "EMAIL_ALREADY_EXISTS",
            f"{self.scope.kind.capitalize()} already exists with this email",
        )

    async def execute(self, command: RegisterCommand) -> Result[RegisterResponse]:
        """
        Execute register use case

        Args:
            command: RegisterCommand with profile fields and password pair

        Returns:
            Result[RegisterResponse] with the public profile, or Error

        Errors:
            - VALIDATION_ERROR: A required field is blank
            - PASSWORDS_DO_NOT_MATCH: Confirmation differs from password
            - WEAK_PASSWORD: Password fails the strength policy
            - EMAIL_ALREADY_EXISTS: Email already registered
        """
        full_name = command.full_name.strip()
        email = command.email.strip().lower()
        username = command.username.strip()

        if not (full_name and email and username and command.password and command.confirm_password):
            return Return.err(Error("VALIDATION_ERROR", "All fields are required"))

        if command.password != command.confirm_password:
            return Return.err(Error("PASSWORDS_DO_NOT_MATCH", "Passwords do not match"))

        password_validation = validate_password_strength(command.password)
        if password_validation.is_err():
            return Return.err(password_validation.error)

        async with self.uow:
            repository = self.scope.repository(self.uow)

            existing = await repository.get_by_email(email)
            if existing:
                return Return.err(self._email_taken())

            password_hash = bcrypt.hashpw(
                command.password.encode(), bcrypt.gensalt(self.settings.bcrypt_rounds)
            )

            principal = self.scope.new_principal(
                full_name=full_name,
                email=email,
                username=username,
                password_hash=password_hash.decode(),
                is_super_admin=command.is_super_admin,
            )
            try:
                principal = await repository.create(principal)
            except DuplicatePrincipalError:
                return Return.err(self._email_taken())

            await self.uow.commit()

            return Return.ok(
                RegisterResponse(
                    message=f"{self.scope.kind.capitalize()} registered successfully",
                    principal=PrincipalInfo.from_entity(principal),
                )
            )
