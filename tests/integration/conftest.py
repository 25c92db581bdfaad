"""Fixtures for tests that need a real PostgreSQL.

Point DATABASE__URL at a disposable database. Tests are skipped when it
cannot be reached.
"""

import pytest
import pytest_asyncio
from sqlalchemy.exc import DBAPIError

from auth0link.config import Settings
from auth0link.persistence.database import create_engine, create_session_factory
from auth0link.persistence.tables import access_tokens_table, metadata, users_table


@pytest_asyncio.fixture
async def session_factory():
    """Session factory over freshly emptied tables."""
    engine = create_engine(Settings())
    try:
        async with engine.begin() as conn:
            await conn.run_sync(metadata.create_all)
    except (OSError, DBAPIError) as e:
        await engine.dispose()
        pytest.skip(f"PostgreSQL not available: {e}")

    async with engine.begin() as conn:
        await conn.execute(access_tokens_table.delete())
        await conn.execute(users_table.delete())

    yield create_session_factory(engine)

    await engine.dispose()
