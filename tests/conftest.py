"""Pytest configuration and fixtures for rebac.

In-memory fakes stand in for the external collaborators: a key-value store
with a controllable clock (decision cache) and a tuple-set decision store.
db_session talks to a real Postgres and skips when none is configured.
"""

import os

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from rebac.core.config import get_settings
from rebac.infrastructure.cache.decision_cache import DecisionCache
from rebac.infrastructure.persistence import models  # noqa: F401  (registers tables)
from rebac.infrastructure.persistence.database import Base
from tests.fakes import FakeClock, FakeDecisionStore, InMemoryKeyValueStore


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Each test sees settings built from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def kv_store(clock: FakeClock) -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore(clock)


@pytest.fixture
def decision_cache(kv_store: InMemoryKeyValueStore) -> DecisionCache:
    return DecisionCache(kv_store)


@pytest.fixture
def decision_store() -> FakeDecisionStore:
    return FakeDecisionStore(tuples={"user:1#owner@doc:42"})


@pytest.fixture
async def db_session() -> AsyncSession:
    """Postgres session with the relation tables created. Rolls back after the test.

    Skips unless DATABASE_URL points at Postgres. Use @pytest.mark.requires_db;
    run without DB via: pytest -m 'not requires_db'.
    """
    url = os.environ.get("DATABASE_URL", "")
    if not url.startswith("postgresql"):
        pytest.skip("Postgres not configured: set DATABASE_URL=postgresql+asyncpg://...")
    engine = create_async_engine(url)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    session_factory = async_sessionmaker(bind=engine, expire_on_commit=False)
    async with session_factory() as session:
        yield session
        await session.rollback()
    await engine.dispose()
