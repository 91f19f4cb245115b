from typing import Optional

from fastapi import Depends, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.libs.result import Error
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError
from src.api.utils.jwt import verify_jwt
from src.app.services.notification_service import INotificationService
from src.app.services.principal_scope import PrincipalScope
from src.app.settings import AuthSettings

security = HTTPBearer(auto_error=False)


async def get_unit_of_work(request: Request):
    async with request.app.state.session_factory() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_auth_settings(request: Request) -> AuthSettings:
    return request.app.state.auth_settings


def get_notification_service(request: Request) -> INotificationService:
    return request.app.state.notification_service


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    settings: AuthSettings = Depends(get_auth_settings),
) -> dict:
    """
    Dependency to extract and verify JWT token from Authorization header.

    Args:
        credentials: Bearer token from Authorization header

    Returns:
        Decoded JWT payload containing id, email, admin flags

    Raises:
        ClientError: 401 if token is missing, invalid or expired
    """
    if credentials is None:
        raise ClientError(
            Error("UNAUTHORIZED", "No token provided"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    payload = verify_jwt(credentials.credentials, settings)

    if payload is None:
        raise ClientError(
            Error("INVALID_TOKEN", "Invalid or expired token"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    return payload


def principal_guard(scope: PrincipalScope):
    """
    Build a dependency that only admits credentials issued for ``scope``.

    Admin routes reject user tokens and vice versa, since the two principal
    types live in separate tables.
    """

    async def dependency(payload: dict = Depends(get_current_user)) -> dict:
        if bool(payload.get("admin")) != scope.is_admin:
            raise ClientError(
                Error("FORBIDDEN", f"{scope.kind.capitalize()} credentials required"),
                status_code=status.HTTP_403_FORBIDDEN,
            )
        return payload

    return dependency
