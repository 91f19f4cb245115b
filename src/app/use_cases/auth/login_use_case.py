"""
Login Use Case

Verifies credentials and issues a signed access token.
"""

import bcrypt

from src.libs.result import Error, Result, Return
from src.app.services.principal_scope import PrincipalScope
from src.app.services.unit_of_work import UnitOfWork
from src.app.settings import AuthSettings
from src.api.utils.jwt import generate_jwt
from .dtos import LoginResponse, PrincipalInfo

INVALID_CREDENTIALS = Error("INVALID_CREDENTIALS", "Invalid email or password")


class LoginUseCase:
    """
    Use case for login and JWT issuance.

    Business Rules:
    - Constant-time password comparison to prevent timing attacks
    - Unknown email and wrong password fail with the same error
    - JWT carries id, email and the admin / super-admin flags
    - Password hash is never returned
    """

    def __init__(self, uow: UnitOfWork, scope: PrincipalScope, settings: AuthSettings):
        self.uow = uow
        self.scope = scope
        self.settings = settings

    async def execute(self, email: str, password: str) -> Result[LoginResponse]:
        """
        Execute login use case.

        Args:
            email: Principal email
            password: Plain text password

        Returns:
            Result with LoginResponse containing the access token, or Error
        """
        async with self.uow:
            repository = self.scope.repository(self.uow)
            principal = await repository.get_by_email(email.strip().lower())

            # Always perform hash check even if principal not found
            if principal is None:
                bcrypt.checkpw(b"dummy_password", bcrypt.gensalt(self.settings.bcrypt_rounds))
                return Return.err(INVALID_CREDENTIALS)

            password_valid = bcrypt.checkpw(
                password.encode(), principal.password_hash.encode()
            )

            if not password_valid:
                return Return.err(INVALID_CREDENTIALS)

            access_token = generate_jwt(self.scope.claims(principal), self.settings)

            return Return.ok(
                LoginResponse(
                    message="Login successful",
                    access_token=access_token,
                    expires_in=self.settings.access_token_expire_minutes * 60,
                    principal=PrincipalInfo.from_entity(principal),
                )
            )
