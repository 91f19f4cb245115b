"""
Auth Settings

Immutable settings built once from ApplicationConfig at startup and
injected into use cases. Business code never reads config directly.
"""

from pydantic import BaseModel, ConfigDict


class AuthSettings(BaseModel):
    """Settings consumed by authentication and password-reset use cases"""

    model_config = ConfigDict(frozen=True)

    jwt_secret: str
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 60
    reset_token_ttl_minutes: int = 60
    bcrypt_rounds: int = 12
    frontend_url: str = "http://localhost:3000"

    @classmethod
    def from_config(cls, config) -> "AuthSettings":
        return cls(
            jwt_secret=config.JWT_SECRET,
            jwt_algorithm=config.JWT_ALGORITHM,
            access_token_expire_minutes=config.ACCESS_TOKEN_EXPIRE_MINUTES,
            reset_token_ttl_minutes=config.RESET_TOKEN_TTL_MINUTES,
            bcrypt_rounds=config.BCRYPT_ROUNDS,
            frontend_url=config.FRONTEND_URL,
        )
