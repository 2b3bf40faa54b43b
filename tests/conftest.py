# tests/conftest.py
from __future__ import annotations

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from api.app.config import Settings, get_settings
from api.app.dependencies import get_session
from api.app.main import app
from models import Base
from tests.helpers import JWT_SECRET, WEBHOOK_SECRET


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        database_url="sqlite+aiosqlite://",
        openai_api_key=None,
        elevenlabs_webhook_secret=WEBHOOK_SECRET,
        elevenlabs_agent_id="agent_test",
        auth_jwt_secret=JWT_SECRET,
    )


@pytest_asyncio.fixture
async def db_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(session_factory, settings):
    async def _session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_session] = _session
    app.dependency_overrides[get_settings] = lambda: settings
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def tokyo_event() -> dict:
    return {
        "type": "post_call_transcription",
        "data": {
            "conversation_id": "c1",
            "agent_id": "a1",
            "status": "completed",
            "transcript": [{"role": "user", "message": "I want Tokyo"}],
            "analysis": {"transcript_summary": "Trip to Tokyo"},
        },
    }
