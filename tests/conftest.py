"""Shared pytest fixtures for the test suite.

Fixture overview
----------------
engine     : async engine on a fresh SQLite file with all tables created
db         : AsyncSession bound to that engine, for repository-level tests
client     : httpx.AsyncClient driving the FastAPI app in-process, with
              get_db overridden to use the test engine
make_task  : coroutine factory inserting a task through the repository
"""

from __future__ import annotations

import os

# Must be set before app.db.session is imported
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import httpx  # noqa: E402
import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402

from app.db import get_db, init_models  # noqa: E402
from app.features.tasks import TaskCreate, TaskRepository  # noqa: E402
from app.main import app  # noqa: E402


@pytest.fixture
async def engine(tmp_path):
    test_engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await init_models(test_engine)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        autoflush=False,
        expire_on_commit=False,
    )


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    # Let the unexpected-error handler answer instead of re-raising into the test
    transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as http_client:
        yield http_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_task(session_factory):
    async def _make_task(name: str = "Write report", **fields):
        async with session_factory() as session:
            return await TaskRepository(session).create(TaskCreate(name=name, **fields))

    return _make_task
