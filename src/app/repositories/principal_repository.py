from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from uuid import UUID

from src.domain.entities import Principal


class DuplicatePrincipalError(Exception):
    """Raised by create when the email is already taken for this principal type"""


class IPrincipalRepository(ABC):
    """
    Principal repository interface - application layer

    One interface for every principal table so that authentication and
    password-reset use cases run unchanged for users and admins.
    """

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[Principal]:
        """Get principal by email address"""
        pass

    @abstractmethod
    async def get_by_id(self, principal_id: UUID) -> Optional[Principal]:
        """Get principal by ID"""
        pass

    @abstractmethod
    async def create(self, principal: Principal) -> Principal:
        """Create a new principal"""
        pass

    @abstractmethod
    async def update(self, principal: Principal) -> Principal:
        """Update existing principal"""
        pass

    @abstractmethod
    async def get_by_reset_token(
        self, token_hash: str, now: datetime
    ) -> Optional[Principal]:
        """Get principal whose reset token matches and expires after now"""
        pass

    @abstractmethod
    async def consume_reset_token(
        self, principal_id: UUID, token_hash: str, password_hash: str, now: datetime
    ) -> bool:
        """
        Replace the password and clear the reset token in one conditional update.

        Only applies while the stored token still matches and is unexpired.
        Returns False when another request consumed or replaced it first.
        """
        pass

    @abstractmethod
    async def clear_reset_token(self, principal_id: UUID, token_hash: str) -> bool:
        """Clear the reset token only if it still equals token_hash"""
        pass

    @abstractmethod
    async def purge_expired_reset_tokens(self, now: datetime) -> int:
        """Clear every reset token that expired at or before now"""
        pass
