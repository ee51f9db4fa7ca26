import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from config import ApplicationConfig
from src.adapter.services.database import Database
import src.domain  # noqa: F401  registers the projects table


class IntegrationConfig(ApplicationConfig):
    API_PREFIX = ""
    ENABLE_LOGGING_MIDDLEWARE = True
    CORS_ORIGINS = ["*"]


@pytest_asyncio.fixture
async def engine():
    # Single shared in-memory SQLite connection for the whole test
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    # Cleanup
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture
async def database(engine):
    return Database.from_engine(engine)


@pytest_asyncio.fixture
async def app(database):
    from src.api.app import create_app

    return create_app(IntegrationConfig, database=database)


@pytest_asyncio.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
