"""
Use Cases

Organized into domain folders:
- auth/: Registration, login and password reset for users and admins
- maintenance/: Housekeeping for internal callers

Import from subdirectories for better organization.
"""

from .auth import (
    RegisterUseCase,
    LoginUseCase,
    GetProfileUseCase,
    RequestPasswordResetUseCase,
    VerifyResetTokenUseCase,
    ConfirmPasswordResetUseCase,
)
from .maintenance import PurgeExpiredResetTokensUseCase

__all__ = [
    # Auth
    "RegisterUseCase",
    "LoginUseCase",
    "GetProfileUseCase",
    "RequestPasswordResetUseCase",
    "VerifyResetTokenUseCase",
    "ConfirmPasswordResetUseCase",
    # Maintenance
    "PurgeExpiredResetTokensUseCase",
]
