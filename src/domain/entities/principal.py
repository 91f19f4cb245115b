"""
Principal Base

Columns shared by every authenticable account type.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel

from src.domain.base import utcnow


class PrincipalBase(SQLModel):
    """
    Shared principal columns - concrete tables subclass this with table=True.

    Business Rules:
    - Email must be unique within a principal table
    - Password stored as bcrypt hash (cost factor 12)
    - reset_token holds the SHA-256 hex digest of the emailed token, never the token itself
    - reset_token and reset_token_expiry are always written and cleared together
    - A reset token is valid only while present and reset_token_expiry > now
    """

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    full_name: str = Field(max_length=255)
    email: str = Field(unique=True, index=True, max_length=255)
    username: str = Field(max_length=100)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    # Password reset
    reset_token: Optional[str] = Field(default=None, index=True, max_length=64)
    reset_token_expiry: Optional[datetime] = None

    # Email verification (not used by the reset flow)
    is_verified: bool = Field(default=False)
    verification_token: Optional[str] = Field(default=None, max_length=64)
    verification_token_expiry: Optional[datetime] = None

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
