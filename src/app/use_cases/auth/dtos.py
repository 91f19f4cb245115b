"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for the auth domain.
Provides type safety and clear contracts between layers.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from src.domain.entities import Principal


# ============================================================================
# Command DTOs
# ============================================================================


class RegisterCommand(BaseModel):
    """
    Register command - represents validated registration intent

    is_super_admin is only honoured for admin accounts.
    """

    full_name: str
    email: str
    username: str
    password: str
    confirm_password: str
    is_super_admin: bool = False


class ConfirmPasswordResetCommand(BaseModel):
    """Confirm password reset command"""

    token: str
    new_password: str
    confirm_password: str


# ============================================================================
# Response DTOs
# ============================================================================


class PrincipalInfo(BaseModel):
    """Public principal profile - never carries password or reset fields"""

    id: str
    full_name: str
    email: str
    username: str
    is_verified: bool
    is_super_admin: Optional[bool] = None
    created_at: datetime

    @classmethod
    def from_entity(cls, principal: Principal) -> "PrincipalInfo":
        return cls(
            id=str(principal.id),
            full_name=principal.full_name,
            email=principal.email,
            username=principal.username,
            is_verified=principal.is_verified,
            is_super_admin=getattr(principal, "is_super_admin", None),
            created_at=principal.created_at,
        )


class RegisterResponse(BaseModel):
    """Response for register use case"""

    message: str
    principal: PrincipalInfo


class LoginResponse(BaseModel):
    """Response for login use case"""

    message: str
    access_token: str
    token_type: str = "bearer"
    expires_in: int
    principal: PrincipalInfo


class RequestPasswordResetResponse(BaseModel):
    """Response for request password reset use case"""

    status: str
    message: str


class VerifyResetTokenResponse(BaseModel):
    """Response for verify reset token use case"""

    valid: bool
    message: str
    email: Optional[str] = None


class ConfirmPasswordResetResponse(BaseModel):
    """Response for confirm password reset use case"""

    status: str
    message: str


class LogoutResponse(BaseModel):
    """Response for logout"""

    message: str
