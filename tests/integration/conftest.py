import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from tests.fixtures.json_loader import TestDataLoader
from tests.fixtures.notification import RecordingNotificationService
from src.depends import get_unit_of_work
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
import src.domain.entities  # noqa: F401


class IntegrationConfig(ApplicationConfig):
    JWT_SECRET = "integration-secret"
    BCRYPT_ROUNDS = 4
    FRONTEND_URL = "http://frontend.test"
    ADMIN_API_KEY = "test-admin-key-12345"
    AUTO_CREATE_TABLES = False


@pytest_asyncio.fixture
def test_data():
    return TestDataLoader()


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest.fixture
def notifier():
    return RecordingNotificationService()


@pytest_asyncio.fixture
async def client(db_session, notifier):
    from src.api.app import create_app

    app = create_app(IntegrationConfig, notification_service=notifier)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
