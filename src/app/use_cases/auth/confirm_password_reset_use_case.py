"""
Confirm Password Reset Use Case

Consumes a reset token and sets the new password.
"""

import logging

import bcrypt

from src.libs.result import Error, Result, Return
from src.app.services.email_templates import build_reset_confirmation_email
from src.app.services.notification_service import INotificationService
from src.app.services.password_policy import validate_password_strength
from src.app.services.principal_scope import PrincipalScope
from src.app.services.reset_tokens import hash_reset_token
from src.app.services.unit_of_work import UnitOfWork
from src.app.settings import AuthSettings
from src.domain.base import utcnow
from .dtos import ConfirmPasswordResetCommand, ConfirmPasswordResetResponse
from .verify_reset_token_use_case import INVALID_OR_EXPIRED_TOKEN

logger = logging.getLogger(__name__)


class ConfirmPasswordResetUseCase:
    """
    Use case for confirming password reset.

    Business Rules:
    - Input is validated before storage is touched, so a rejected request never mutates state
    - New password must match its confirmation and satisfy the strength policy
    - Token is validated by hashing and comparing with the stored digest
    - Token must not be expired
    - Password update and token clearing happen in one conditional update,
      so only one of two concurrent requests with the same token succeeds
    - Confirmation email is best effort and never undoes the reset
    """

    def __init__(
        self,
        uow: UnitOfWork,
        scope: PrincipalScope,
        notification_service: INotificationService,
        settings: AuthSettings,
    ):
        self.uow = uow
        self.scope = scope
        self.notification_service = notification_service
        self.settings = settings

    async def execute(
        self, command: ConfirmPasswordResetCommand
    ) -> Result[ConfirmPasswordResetResponse]:
        """
        Execute confirm password reset use case.

        Args:
            command: token from the email plus the new password pair

        Returns:
            Result with confirmation status, or Error

        Errors:
            - VALIDATION_ERROR: Token or password fields are blank
            - PASSWORDS_DO_NOT_MATCH: Confirmation differs from new password
            - WEAK_PASSWORD: New password fails the strength policy
            - INVALID_OR_EXPIRED_TOKEN: Token unknown, expired or already consumed
        """
        token = command.token.strip()
        if not token or not command.new_password or not command.confirm_password:
            return Return.err(
                Error(
                    "VALIDATION_ERROR",
                    "Token, new password, and confirm password are required",
                )
            )

        if command.new_password != command.confirm_password:
            return Return.err(Error("PASSWORDS_DO_NOT_MATCH", "Passwords do not match"))

        password_validation = validate_password_strength(command.new_password)
        if password_validation.is_err():
            return Return.err(password_validation.error)

        token_hash = hash_reset_token(token)

        async with self.uow:
            repository = self.scope.repository(self.uow)

            now = utcnow()
            principal = await repository.get_by_reset_token(token_hash, now)
            if principal is None:
                return Return.err(INVALID_OR_EXPIRED_TOKEN)

            password_hash = bcrypt.hashpw(
                command.new_password.encode(), bcrypt.gensalt(self.settings.bcrypt_rounds)
            )

            consumed = await repository.consume_reset_token(
                principal.id, token_hash, password_hash.decode(), now
            )
            if not consumed:
                # Lost the race to a concurrent reset or a newer token
                return Return.err(INVALID_OR_EXPIRED_TOKEN)

            await self.uow.commit()

            principal_id = principal.id
            email = principal.email

        subject, html = build_reset_confirmation_email()
        delivery = await self.notification_service.send(email, subject, html)
        if delivery.is_err():
            logger.warning(
                f"Reset confirmation for {self.scope.kind} {principal_id} not delivered "
                f"({delivery.error.code})"
            )

        return Return.ok(
            ConfirmPasswordResetResponse(
                status="success",
                message="Password has been reset successfully",
            )
        )
