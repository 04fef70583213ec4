"""Database fixtures for integration tests (file-backed SQLite)."""

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession

from dockeriq.infrastructure.persistence.sqlalchemy.database import (
    create_engine,
    create_session_maker,
    create_tables,
)


@pytest.fixture
def database_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'dockeriq-test.db'}"


@pytest_asyncio.fixture(scope="function")
async def test_db_engine(database_url):
    engine = create_engine(database_url)
    await create_tables(engine)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_maker(test_db_engine):
    return create_session_maker(test_db_engine)


@pytest_asyncio.fixture(scope="function")
async def test_db_session(session_maker):
    session: AsyncSession
    async with session_maker() as session:
        yield session
