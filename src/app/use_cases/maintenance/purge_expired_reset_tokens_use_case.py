"""
Use Case: Purge Expired Reset Tokens

Expired tokens are already rejected at verify time; this only tidies up
the stored digests. Safe to run at any time.
"""

from pydantic import BaseModel

from src.libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow


class PurgeExpiredResetTokensResponse(BaseModel):
    """Response DTO for PurgeExpiredResetTokensUseCase"""

    status: str
    users_purged: int
    admins_purged: int


class PurgeExpiredResetTokensUseCase:
    """
    Clear reset_token / reset_token_expiry on every principal whose token
    expired at or before now. Unexpired tokens are left untouched.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[PurgeExpiredResetTokensResponse]:
        async with self.uow:
            now = utcnow()
            users_purged = await self.uow.users.purge_expired_reset_tokens(now)
            admins_purged = await self.uow.admins.purge_expired_reset_tokens(now)

            await self.uow.commit()

            return Return.ok(
                PurgeExpiredResetTokensResponse(
                    status="purged",
                    users_purged=users_purged,
                    admins_purged=admins_purged,
                )
            )
