"""Root conftest — async test DB seeded with the canonical dataset + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database, seeded before the test runs
    - get_db dependency overridden to use the test DB
    - db_manager points at the test engine so readiness probes see it

Design Decisions:
    - SQLite in-memory with StaticPool: all sessions share one connection, hence one database
    - Environment defaults set before the app is imported: never touches a real PostgreSQL
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

import game_reviews.infrastructure.database as db_module  # noqa: E402
import game_reviews.models  # noqa: E402,F401
from game_reviews.db.base import Base  # noqa: E402
from game_reviews.db.seed import seed_database  # noqa: E402
from game_reviews.infrastructure.database import (  # noqa: E402
    DatabaseSessionManager, get_db,
)
from game_reviews.main import app  # noqa: E402
from tests.seed_data import TEST_DATA  # noqa: E402


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    factory = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )
    async with factory() as session:
        await seed_database(session, TEST_DATA)
    return factory


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    manager = DatabaseSessionManager.from_engine(test_engine)

    async def override_get_db():
        async with manager.session() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    original_manager = db_module.db_manager
    db_module.db_manager = manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
