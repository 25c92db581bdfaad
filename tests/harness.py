"""Test harness building DI-backed fixtures.

Settings are loaded from environment variables; conftest.py forces
ENVIRONMENT=test.
"""

import pytest_asyncio

from auth0link.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    The fixture yields a request-scoped container; APP-scoped mocks (remote
    users, in-memory repositories) are shared with any further request
    scopes opened from the same root.

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        unit_env = create_env_fixture()

        @pytest.mark.asyncio
        async def test_upsert(unit_env):
            use_case = await unit_env.get(UpsertUserUseCase)
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment
