"""
Authentication Use Cases

All authentication-related business logic, shared by users and admins.
"""

from .register_use_case import RegisterUseCase
from .login_use_case import LoginUseCase
from .get_profile_use_case import GetProfileUseCase
from .request_password_reset_use_case import RequestPasswordResetUseCase
from .verify_reset_token_use_case import VerifyResetTokenUseCase
from .confirm_password_reset_use_case import ConfirmPasswordResetUseCase
from .dtos import (
    RegisterCommand,
    ConfirmPasswordResetCommand,
    PrincipalInfo,
    RegisterResponse,
    LoginResponse,
    RequestPasswordResetResponse,
    VerifyResetTokenResponse,
    ConfirmPasswordResetResponse,
    LogoutResponse,
)

__all__ = [
    # Use Cases
    "RegisterUseCase",
    "LoginUseCase",
    "GetProfileUseCase",
    "RequestPasswordResetUseCase",
    "VerifyResetTokenUseCase",
    "ConfirmPasswordResetUseCase",
    # DTOs - Commands
    "RegisterCommand",
    "ConfirmPasswordResetCommand",
    # DTOs - Responses
    "RegisterResponse",
    "LoginResponse",
    "RequestPasswordResetResponse",
    "VerifyResetTokenResponse",
    "ConfirmPasswordResetResponse",
    "LogoutResponse",
    # DTOs - Nested Models
    "PrincipalInfo",
]
