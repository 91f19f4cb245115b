from uuid import UUID

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, EmailStr, Field

from src.libs.result import Error
from src.api.error import ClientError, ServerError
from src.app.services.notification_service import INotificationService
from src.app.services.principal_scope import PrincipalScope, UserScope
from src.app.services.unit_of_work import UnitOfWork
from src.app.settings import AuthSettings
from src.app.use_cases.auth import (
    RegisterCommand,
    ConfirmPasswordResetCommand,
    RegisterUseCase,
    LoginUseCase,
    GetProfileUseCase,
    RequestPasswordResetUseCase,
    VerifyResetTokenUseCase,
    ConfirmPasswordResetUseCase,
    PrincipalInfo,
    RegisterResponse,
    LoginResponse,
    RequestPasswordResetResponse,
    VerifyResetTokenResponse,
    ConfirmPasswordResetResponse,
    LogoutResponse,
)
from src.depends import (
    get_auth_settings,
    get_notification_service,
    get_unit_of_work,
    principal_guard,
)

BAD_REQUEST_CODES = (
    "VALIDATION_ERROR",
    "PASSWORDS_DO_NOT_MATCH",
    "WEAK_PASSWORD",
    "INVALID_OR_EXPIRED_TOKEN",
)


class RegisterRequest(BaseModel):
    """
    Register HTTP request payload

    Validates incoming HTTP request before converting to RegisterCommand.
    Password strength is enforced by the use case so the client gets the
    itemized rule that failed.
    """

    full_name: str = Field(..., min_length=1, max_length=255, description="Full name")
    email: EmailStr = Field(..., description="Email address")
    username: str = Field(..., min_length=1, max_length=100, description="Username")
    password: str = Field(..., description="Password")
    confirm_password: str = Field(..., description="Password confirmation")
    is_super_admin: bool = Field(False, description="Admin accounts only; ignored for users")


class LoginRequest(BaseModel):
    """Login HTTP request payload"""

    email: EmailStr = Field(..., description="Email address")
    password: str = Field(..., description="Password")


class ForgotPasswordRequest(BaseModel):
    """Forgot password HTTP request payload"""

    email: EmailStr = Field(..., description="Email address to send the reset link to")


class VerifyResetTokenRequest(BaseModel):
    """Verify reset token HTTP request payload"""

    token: str = Field(..., description="Reset token from email")


class ResetPasswordRequest(BaseModel):
    """Reset password HTTP request payload"""

    token: str = Field(..., description="Reset token from email")
    new_password: str = Field(..., description="New password")
    confirm_password: str = Field(..., description="New password confirmation")


def build_auth_router(scope: PrincipalScope, prefix: str, tag: str) -> APIRouter:
    """
    Build the authentication routes for one principal type.

    Users and admins get identical endpoints backed by the same use cases;
    only the scope differs.
    """
    router = APIRouter(prefix=prefix, tags=[tag])
    current_principal = principal_guard(scope)

    @router.post(
        "/register", status_code=status.HTTP_201_CREATED, response_model=RegisterResponse
    )
    async def register(
        request: RegisterRequest,
        uow: UnitOfWork = Depends(get_unit_of_work),
        settings: AuthSettings = Depends(get_auth_settings),
    ):
        """
        Register

        Raises:
            - 400 Bad Request: Passwords do not match or password too weak
            - 409 Conflict: Email already exists
            - 422 Unprocessable Entity: Invalid input (handled by FastAPI)
        """
        command = RegisterCommand(
            full_name=request.full_name,
            email=request.email,
            username=request.username,
            password=request.password,
            confirm_password=request.confirm_password,
            is_super_admin=request.is_super_admin,
        )

        use_case = RegisterUseCase(uow, scope, settings)
        result = await use_case.execute(command)

        if result.is_err():
            error = result.error
            if error.code == "EMAIL_ALREADY_EXISTS":
                raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
            elif error.code in BAD_REQUEST_CODES:
                raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
            raise ServerError(error)

        return result.value

    @router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
    async def login(
        request: LoginRequest,
        uow: UnitOfWork = Depends(get_unit_of_work),
        settings: AuthSettings = Depends(get_auth_settings),
    ):
        """
        Login

        Returns a signed access token. Unknown email and wrong password
        produce the same 401 response.
        """
        use_case = LoginUseCase(uow, scope, settings)
        result = await use_case.execute(request.email, request.password)

        if result.is_err():
            error = result.error
            if error.code == "INVALID_CREDENTIALS":
                raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
            raise ServerError(error)

        return result.value

    @router.post(
        "/forgot-password",
        status_code=status.HTTP_200_OK,
        response_model=RequestPasswordResetResponse,
    )
    async def forgot_password(
        request: ForgotPasswordRequest,
        uow: UnitOfWork = Depends(get_unit_of_work),
        settings: AuthSettings = Depends(get_auth_settings),
        notification_service: INotificationService = Depends(get_notification_service),
    ):
        """
        Request Password Reset

        Security:
            - No email enumeration (same response for valid/invalid emails)
            - Token is cryptographically secure (32 bytes) and expires in 1 hour
            - Token is invalidated again if the email cannot be delivered

        Returns:
            - 200 OK: Always returns the generic message
        """
        use_case = RequestPasswordResetUseCase(uow, scope, notification_service, settings)
        result = await use_case.execute(request.email)

        if result.is_err():
            raise ServerError(result.error)

        return result.value

    @router.post(
        "/verify-reset-token",
        status_code=status.HTTP_200_OK,
        response_model=VerifyResetTokenResponse,
        responses={400: {"model": VerifyResetTokenResponse}},
    )
    async def verify_reset_token(
        request: VerifyResetTokenRequest,
        uow: UnitOfWork = Depends(get_unit_of_work),
    ):
        """
        Verify Reset Token

        Read-only. Returns the owner's email so the reset form can show it.

        Returns:
            - 200 OK: {valid: true, email}
            - 400 Bad Request: {valid: false}
        """
        use_case = VerifyResetTokenUseCase(uow, scope)
        result = await use_case.execute(request.token)

        if result.is_err():
            error = result.error
            if error.code in BAD_REQUEST_CODES:
                return JSONResponse(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    content=VerifyResetTokenResponse(
                        valid=False, message=error.message
                    ).model_dump(exclude_none=True),
                )
            raise ServerError(error)

        return result.value

    @router.post(
        "/reset-password",
        status_code=status.HTTP_200_OK,
        response_model=ConfirmPasswordResetResponse,
    )
    async def reset_password(
        request: ResetPasswordRequest,
        uow: UnitOfWork = Depends(get_unit_of_work),
        settings: AuthSettings = Depends(get_auth_settings),
        notification_service: INotificationService = Depends(get_notification_service),
    ):
        """
        Confirm Password Reset

        Raises:
            - 400 Bad Request: Passwords do not match, weak password, invalid or expired token
            - 500 Internal Server Error: Storage failure
        """
        command = ConfirmPasswordResetCommand(
            token=request.token,
            new_password=request.new_password,
            confirm_password=request.confirm_password,
        )

        use_case = ConfirmPasswordResetUseCase(uow, scope, notification_service, settings)
        result = await use_case.execute(command)

        if result.is_err():
            error = result.error
            if error.code in BAD_REQUEST_CODES:
                raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
            raise ServerError(error)

        return result.value

    @router.get("/me", status_code=status.HTTP_200_OK, response_model=PrincipalInfo)
    async def me(
        payload: dict = Depends(current_principal),
        uow: UnitOfWork = Depends(get_unit_of_work),
    ):
        """
        Current Principal

        Raises:
            - 401 Unauthorized: Missing, invalid or expired token
            - 403 Forbidden: Token issued for the other principal type
            - 404 Not Found: Account no longer exists
        """
        try:
            principal_id = UUID(payload["id"])
        except (KeyError, TypeError, ValueError):
            raise ClientError(
                Error("INVALID_TOKEN", "Invalid or expired token"),
                status_code=status.HTTP_401_UNAUTHORIZED,
            )

        use_case = GetProfileUseCase(uow, scope)
        result = await use_case.execute(principal_id)

        if result.is_err():
            error = result.error
            if error.code == "PRINCIPAL_NOT_FOUND":
                raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
            raise ServerError(error)

        return result.value

    @router.api_route(
        "/logout",
        methods=["GET", "POST"],
        status_code=status.HTTP_200_OK,
        response_model=LogoutResponse,
    )
    async def logout():
        """
        Logout

        Access tokens are stateless; the client discards its token.
        """
        return LogoutResponse(message="Logged out successfully")

    return router


router = build_auth_router(UserScope(), prefix="/auth", tag="Authentication")
