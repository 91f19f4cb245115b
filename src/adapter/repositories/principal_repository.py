from datetime import datetime
from typing import Optional, Type
from uuid import UUID

from sqlalchemy import update
from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.principal_repository import (
    DuplicatePrincipalError,
    IPrincipalRepository,
)
from src.domain.entities import Principal, PrincipalBase


class SqlPrincipalRepository(IPrincipalRepository):
    """
    Principal repository implementation using SQLModel

    Subclasses bind ``model`` to a concrete principal table. Token writes go
    through conditional UPDATE statements so that the database, not the
    caller, arbitrates concurrent requests.
    """

    model: Type[PrincipalBase]

    def __init__(self, session: AsyncSession):
        self.session = session

    def _select(self):
        # Bulk UPDATEs bypass the identity map, so reads always refresh
        return select(self.model).execution_options(populate_existing=True)

    async def get_by_email(self, email: str) -> Optional[Principal]:
        """Get principal by email address"""
        stmt = self._select().where(self.model.email == email)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_id(self, principal_id: UUID) -> Optional[Principal]:
        """Get principal by ID"""
        stmt = self._select().where(self.model.id == principal_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, principal: Principal) -> Principal:
        """Create a new principal"""
        self.session.add(principal)
        try:
            await self.session.flush()
        except IntegrityError as e:
            # Unique email index; a concurrent registration got there first
            raise DuplicatePrincipalError(principal.email) from e
        await self.session.refresh(principal)
        return principal

    async def update(self, principal: Principal) -> Principal:
        """Update existing principal"""
        self.session.add(principal)
        await self.session.flush()
        await self.session.refresh(principal)
        return principal

    async def get_by_reset_token(
        self, token_hash: str, now: datetime
    ) -> Optional[Principal]:
        """Get principal whose reset token matches and expires after now"""
        stmt = self._select().where(
            self.model.reset_token == token_hash,
            self.model.reset_token_expiry > now,
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def consume_reset_token(
        self, principal_id: UUID, token_hash: str, password_hash: str, now: datetime
    ) -> bool:
        """Set the new password and clear the token if it is still current"""
        stmt = (
            update(self.model)
            .where(
                self.model.id == principal_id,
                self.model.reset_token == token_hash,
                self.model.reset_token_expiry > now,
            )
            .values(
                password_hash=password_hash,
                reset_token=None,
                reset_token_expiry=None,
                updated_at=now,
            )
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount == 1

    async def clear_reset_token(self, principal_id: UUID, token_hash: str) -> bool:
        """Clear the reset token only if it still equals token_hash"""
        stmt = (
            update(self.model)
            .where(
                self.model.id == principal_id,
                self.model.reset_token == token_hash,
            )
            .values(reset_token=None, reset_token_expiry=None)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount == 1

    async def purge_expired_reset_tokens(self, now: datetime) -> int:
        """Clear every reset token that expired at or before now"""
        stmt = (
            update(self.model)
            .where(
                self.model.reset_token.is_not(None),
                self.model.reset_token_expiry <= now,
            )
            .values(reset_token=None, reset_token_expiry=None)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount
