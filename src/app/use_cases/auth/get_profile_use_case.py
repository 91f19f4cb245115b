"""
Get Profile Use Case

Loads the public profile of the authenticated principal.
"""

from uuid import UUID

from src.libs.result import Error, Result, Return
from src.app.services.principal_scope import PrincipalScope
from src.app.services.unit_of_work import UnitOfWork
from .dtos import PrincipalInfo


class GetProfileUseCase:
    def __init__(self, uow: UnitOfWork, scope: PrincipalScope):
        self.uow = uow
        self.scope = scope

    async def execute(self, principal_id: UUID) -> Result[PrincipalInfo]:
        async with self.uow:
            principal = await self.scope.repository(self.uow).get_by_id(principal_id)
            if principal is None:
                return Return.err(Error("PRINCIPAL_NOT_FOUND", "Account not found"))

            return Return.ok(PrincipalInfo.from_entity(principal))
