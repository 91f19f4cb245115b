from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.services.smtp_notification_service import SmtpNotificationService
from src.app.services.notification_service import INotificationService
from src.app.settings import AuthSettings
from .error import ClientError, ServerError
import src.domain.entities  # noqa: F401  registers tables on SQLModel.metadata
import logging

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    error_dict = {"code": exc.base_error.code, "message": exc.base_error.message}
    logger.warning(f"Client error: {error_dict}")
    return JSONResponse(status_code=exc.status_code, content={"error": error_dict})


async def handle_server_error(request: Request, exc: ServerError):
    error_dict = {"code": exc.base_error.code, "message": "Internal server error"}
    logger.error(f"Server error: {exc.base_error.code}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


async def handle_storage_error(request: Request, exc: SQLAlchemyError):
    error_dict = {"code": "STORAGE_FAILURE", "message": "Internal server error"}
    logger.error(f"Storage failure on {request.url.path}: {exc.__class__.__name__}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


def create_app(
    ApplicationConfig, notification_service: Optional[INotificationService] = None
) -> FastAPI:
    engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if ApplicationConfig.AUTO_CREATE_TABLES:
            async with engine.begin() as conn:
                await conn.run_sync(SQLModel.metadata.create_all)
        yield
        await engine.dispose()

    app = FastAPI(title="Job Portal Auth API", version="0.1.0", lifespan=lifespan)

    # Built once here and injected through src.depends
    app.state.session_factory = sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )
    app.state.auth_settings = AuthSettings.from_config(ApplicationConfig)
    app.state.notification_service = (
        notification_service or SmtpNotificationService.from_config(ApplicationConfig)
    )
    app.state.admin_api_key = ApplicationConfig.ADMIN_API_KEY

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from src.api.routes import admin, auth, health_check, maintenance

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(auth.router, tags=["Authentication"])
    app.include_router(admin.router, tags=["Admin Authentication"])
    app.include_router(maintenance.router, tags=["Maintenance"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(SQLAlchemyError, handle_storage_error)

    return app
