"""
Request Password Reset Use Case

Issues a reset token and emails the reset link to its owner.
"""

import logging
from datetime import timedelta
from typing import Callable, Optional
from uuid import UUID

from src.libs.result import Result, Return
from src.app.services.email_templates import build_reset_link_email
from src.app.services.notification_service import INotificationService
from src.app.services.principal_scope import PrincipalScope
from src.app.services.reset_tokens import generate_reset_token, hash_reset_token
from src.app.services.unit_of_work import UnitOfWork
from src.app.settings import AuthSettings
from src.domain.base import utcnow
from .dtos import RequestPasswordResetResponse

logger = logging.getLogger(__name__)

RESET_REQUESTED_MESSAGE = (
    "If an account with that email exists, a password reset link has been sent."
)


class RequestPasswordResetUseCase:
    """
    Use case for requesting password reset.

    Business Rules:
    - 256-bit random token, only its SHA-256 digest is stored
    - Token expires exactly reset_token_ttl_minutes (1 hour) after issuance
    - A new request overwrites any earlier token (one active token per principal)
    - Token is committed before the email is sent
    - Email is sent after the transaction closes
    - If the email cannot be delivered the token is cleared again in a second
      transaction; a failed clear is logged, never surfaced
    - No email enumeration (same response whether or not the account exists)
    """

    def __init__(
        self,
        uow: UnitOfWork,
        scope: PrincipalScope,
        notification_service: INotificationService,
        settings: AuthSettings,
        token_factory: Optional[Callable[[], str]] = None,
    ):
        self.uow = uow
        self.scope = scope
        self.notification_service = notification_service
        self.settings = settings
        self.token_factory = token_factory or generate_reset_token

    def _response(self) -> RequestPasswordResetResponse:
        return RequestPasswordResetResponse(status="sent", message=RESET_REQUESTED_MESSAGE)

    def _reset_url(self, token: str) -> str:
        return f"{self.settings.frontend_url.rstrip('/')}{self.scope.reset_path}?token={token}"

    async def execute(self, email: str) -> Result[RequestPasswordResetResponse]:
        """
        Execute request password reset use case.

        Args:
            email: Principal's email address

        Returns:
            Result with the generic reset status

        Note:
            For security (no email enumeration), always returns the same
            success even if the email doesn't exist or delivery failed.
        """
        async with self.uow:
            repository = self.scope.repository(self.uow)
            principal = await repository.get_by_email(email.strip().lower())

            if principal is None:
                return Return.ok(self._response())

            reset_token = self.token_factory()
            token_hash = hash_reset_token(reset_token)

            now = utcnow()
            principal.reset_token = token_hash
            principal.reset_token_expiry = now + timedelta(
                minutes=self.settings.reset_token_ttl_minutes
            )
            principal.updated_at = now
            await repository.update(principal)

            # Persist before delivery so the emailed link is always backed by a row
            await self.uow.commit()

            principal_id = principal.id
            recipient = principal.email

        subject, html = build_reset_link_email(
            self._reset_url(reset_token), self.settings.reset_token_ttl_minutes
        )
        delivery = await self.notification_service.send(recipient, subject, html)

        if delivery.is_err():
            logger.warning(
                f"Reset email for {self.scope.kind} {principal_id} not delivered "
                f"({delivery.error.code}); invalidating token"
            )
            await self._invalidate(principal_id, token_hash)
        else:
            logger.info(f"Reset email sent to {self.scope.kind} {principal_id}")

        return Return.ok(self._response())

    async def _invalidate(self, principal_id: UUID, token_hash: str) -> None:
        """Clear the undelivered token unless a newer one replaced it"""
        try:
            async with self.uow:
                repository = self.scope.repository(self.uow)
                await repository.clear_reset_token(principal_id, token_hash)
                await self.uow.commit()
        except Exception:
            # The caller still gets the generic response; the token expires on its own
            logger.exception(
                f"Could not invalidate undelivered reset token for {self.scope.kind} {principal_id}"
            )
