import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

from datetime import date

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import green.models  # noqa: F401
from green.core.clock import FrozenClock
from green.core.deps import get_clock
from green.core.security import create_access_token
from green.db.base import Base
from green.db.session import get_db
from green.main import app

# Planting day used across the suite (a Wednesday).
D = date(2026, 4, 1)


@pytest_asyncio.fixture
async def db():
    # StaticPool keeps the single in-memory SQLite connection alive for the whole test.
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session
    await engine.dispose()


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock.on(D)


@pytest_asyncio.fixture
async def client(db: AsyncSession, clock: FrozenClock):
    async def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_clock] = lambda: clock

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def auth() -> dict:
    return {"Authorization": f"Bearer {create_access_token('household-1')}"}


@pytest.fixture
def other_auth() -> dict:
    return {"Authorization": f"Bearer {create_access_token('household-2')}"}
