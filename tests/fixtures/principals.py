from datetime import timedelta
from typing import Optional, Tuple, Type

import bcrypt
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.services.reset_tokens import generate_reset_token, hash_reset_token
from src.domain.base import utcnow
from src.domain.entities import PrincipalBase


async def create_principal(
    db_session: AsyncSession,
    model: Type[PrincipalBase],
    email: str = "test@example.com",
    password: str = "OldPass123!",
    with_token: bool = False,
    expired: bool = False,
    **extra,
) -> Tuple[PrincipalBase, Optional[str]]:
    """
    Insert a principal directly, optionally holding a reset token.

    Returns:
        Tuple of (principal, plain_token or None)
    """
    plain_token = None
    fields = dict(
        full_name="Test Person",
        email=email,
        username=email.split("@")[0],
        password_hash=bcrypt.hashpw(password.encode(), bcrypt.gensalt(4)).decode(),
        **extra,
    )

    if with_token:
        plain_token = generate_reset_token()
        fields["reset_token"] = hash_reset_token(plain_token)
        fields["reset_token_expiry"] = (
            utcnow() - timedelta(hours=2) if expired else utcnow() + timedelta(minutes=30)
        )

    principal = model(**fields)
    db_session.add(principal)
    await db_session.commit()
    await db_session.refresh(principal)

    return principal, plain_token
