import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from portfolio.db.base import Base
from portfolio.db.session import get_session
from portfolio.main import app


@pytest.fixture()
def db_client():
    """TestClient whose requests share one in-memory SQLite database."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    session_factory = async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)

    async def create_tables() -> None:
        async with engine.begin() as connection:
            await connection.run_sync(Base.metadata.create_all)

    async def override_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_session] = override_session
    # Requests inside the block run on the portal's event loop, which owns the connection.
    with TestClient(app) as client:
        client.portal.call(create_tables)
        yield client
        client.portal.call(engine.dispose)
    app.dependency_overrides.clear()
