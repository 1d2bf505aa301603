from contextlib import asynccontextmanager

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.app import create_app
from src.api.utils.jwt import TokenCodec
from src.depends import get_unit_of_work
from tests.fixtures.json_loader import FixtureData


class IntegrationConfig(ApplicationConfig):
    JWT_SECRET = "integration-test-secret"
    BCRYPT_ROUNDS = 4
    CREATE_TABLES = False
    FRONTEND_URL = None
    RESET_TOKEN_TTL_MINUTES = None


class SilentResetConfig(IntegrationConfig):
    FRONTEND_URL = "https://kostentram.example.com"


@pytest_asyncio.fixture
def test_data():
    return FixtureData()


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


@asynccontextmanager
async def _client_for(config, db_session):
    app = create_app(config)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def client(db_session):
    async with _client_for(IntegrationConfig, db_session) as ac:
        yield ac


@pytest_asyncio.fixture
async def silent_client(db_session):
    """Client for an app configured with FRONTEND_URL"""
    async with _client_for(SilentResetConfig, db_session) as ac:
        yield ac


@pytest_asyncio.fixture
async def auth_headers(client, test_data):
    """Register and log in the default owner, return its Bearer header"""
    await client.post("/auth/register", json=test_data.payload("owner"))
    response = await client.post("/auth/login", json=test_data.credentials("owner"))
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest_asyncio.fixture
async def other_headers(client, test_data):
    """Bearer header for a second, unrelated user"""
    await client.post("/auth/register", json=test_data.payload("other_user"))
    response = await client.post("/auth/login", json=test_data.credentials("other_user"))
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest_asyncio.fixture
def token_codec():
    return TokenCodec(IntegrationConfig.JWT_SECRET)
