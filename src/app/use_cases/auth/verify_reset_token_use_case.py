"""
Verify Reset Token Use Case

Read-only check used by the reset form to pre-fill the email.
"""

from src.libs.result import Error, Result, Return
from src.app.services.principal_scope import PrincipalScope
from src.app.services.reset_tokens import hash_reset_token
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from .dtos import VerifyResetTokenResponse

INVALID_OR_EXPIRED_TOKEN = Error("INVALID_OR_EXPIRED_TOKEN", "Invalid or expired token")


class VerifyResetTokenUseCase:
    """
    Valid iff a principal's stored token matches and its expiry is after now.
    Never changes state and never echoes the token back.
    """

    def __init__(self, uow: UnitOfWork, scope: PrincipalScope):
        self.uow = uow
        self.scope = scope

    async def execute(self, token: str) -> Result[VerifyResetTokenResponse]:
        token = token.strip()
        if not token:
            return Return.err(Error("VALIDATION_ERROR", "Token is required"))

        async with self.uow:
            repository = self.scope.repository(self.uow)
            principal = await repository.get_by_reset_token(hash_reset_token(token), utcnow())

            if principal is None:
                return Return.err(INVALID_OR_EXPIRED_TOKEN)

            return Return.ok(
                VerifyResetTokenResponse(valid=True, message="Token is valid", email=principal.email)
            )
