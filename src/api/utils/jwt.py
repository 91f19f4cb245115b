from datetime import UTC, datetime, timedelta
from typing import Any, Dict, Optional

from jose import JWTError, jwt

from src.app.settings import AuthSettings


def generate_jwt(claims: Dict[str, Any], settings: AuthSettings) -> str:
    """
    Generate JWT access token

    Args:
        claims: Principal claims (id, email, admin flags)
        settings: Auth settings carrying secret, algorithm and lifetime

    Returns:
        JWT token string (HS256 by default)
    """
    now = datetime.now(UTC)
    payload = {
        **claims,
        "exp": now + timedelta(minutes=settings.access_token_expire_minutes),
        "iat": now,
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_jwt(token: str, settings: AuthSettings) -> Optional[dict]:
    """
    Verify and decode JWT token

    Args:
        token: JWT token string
        settings: Auth settings carrying secret and algorithm

    Returns:
        Decoded payload dict or None if invalid
    """
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
        return payload
    except JWTError:
        return None
