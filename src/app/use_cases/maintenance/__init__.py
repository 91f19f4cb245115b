"""
Maintenance Use Cases

Housekeeping operations for internal callers.
"""

from .purge_expired_reset_tokens_use_case import (
    PurgeExpiredResetTokensResponse,
    PurgeExpiredResetTokensUseCase,
)

__all__ = [
    "PurgeExpiredResetTokensUseCase",
    "PurgeExpiredResetTokensResponse",
]
