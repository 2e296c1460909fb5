# tests/conftest.py
from __future__ import annotations

import os
from typing import AsyncGenerator

# Keep the app module's engine off PostgreSQL; every test overrides the session anyway.
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from db.database import Base, get_async_session  # noqa: E402
from main import app  # noqa: E402
from routers.stock import get_ledger  # noqa: E402
from services.ledger import StockLedger  # noqa: E402


@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
def session_maker(engine: AsyncEngine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db(session_maker) -> AsyncGenerator[AsyncSession, None]:
    async with session_maker() as sess:
        yield sess


@pytest.fixture
def published() -> list:
    return []


@pytest.fixture
def ledger(published) -> StockLedger:
    return StockLedger(notify=published.append)


@pytest_asyncio.fixture
async def client(session_maker, ledger) -> AsyncGenerator[AsyncClient, None]:
    async def _session_override():
        async with session_maker() as sess:
            yield sess

    app.dependency_overrides[get_async_session] = _session_override
    app.dependency_overrides[get_ledger] = lambda: ledger
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as c:
            yield c
    finally:
        app.dependency_overrides.clear()

