"""
Pytest fixtures - test DB, client, auth.
Challenge: Isolated tests; every test gets a fresh in-memory SQLite database.
"""

import os
import tempfile
from typing import AsyncGenerator

os.environ.setdefault("UPLOAD_DIR", tempfile.mkdtemp(prefix="trophyvault_test_"))
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.core.security import create_access_token
from app.db import models  # noqa: F401 - register tables on Base.metadata
from app.db.base import Base
from app.db.session import get_db
from app.main import app
from app.services.file_service import FileService, get_file_service

TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    @event.listens_for(engine.sync_engine, "connect")
    def enable_foreign_keys(dbapi_connection, connection_record):
        # SQLite ignores ON DELETE rules unless this is set per connection
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine) -> AsyncGenerator[AsyncSession, None]:
    async_session = async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False
    )
    async with async_session() as s:
        yield s


@pytest_asyncio.fixture
async def client(session: AsyncSession, tmp_path):
    async def override_get_db():
        yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_file_service] = lambda: FileService(upload_root=tmp_path, max_bytes=1024)
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
    app.dependency_overrides.clear()


def make_headers(sub: str, **claims) -> dict:
    """Bearer header carrying a provider-style identity token."""
    token = create_access_token(sub, extra=claims)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def token_headers():
    """Factory for headers with custom claims."""
    return make_headers


@pytest.fixture
def alice_headers() -> dict:
    return make_headers("user-alice", email="alice@example.com", first_name="Alice", last_name="Archer")


@pytest.fixture
def bob_headers() -> dict:
    return make_headers("user-bob", email="bob@example.com", first_name="Bob", last_name="Bowman")


@pytest.fixture
def carol_headers() -> dict:
    return make_headers("user-carol", email="carol@example.com", first_name="Carol")


@pytest.fixture
def trophy_data() -> dict:
    return {
        "species": "Whitetail Deer",
        "name": "Opening Day Buck",
        "date": "2025-11-15",
        "location": "Wisconsin",
        "method": "Rifle",
    }


@pytest.fixture
def weapon_data() -> dict:
    return {"name": "Old Reliable", "type": "Rifle", "caliber": ".30-06"}
