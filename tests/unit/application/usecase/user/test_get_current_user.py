"""Unit tests for GetCurrentUserUseCase."""

import pytest

from auth0link.application.usecase.user import GetCurrentUserUseCase
from auth0link.application.usecase.user.get_current_user import GetCurrentUserRequest
from auth0link.domain.error import NotFoundError
from auth0link.domain.service import UserService
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetCurrentUserUseCase:
    @pytest.mark.asyncio
    async def test_returns_user_linked_to_sub(self, unit_env):
        user_service = await unit_env.get(UserService)
        use_case = await unit_env.get(GetCurrentUserUseCase)
        user = await user_service.upsert_by_email("a@x.com", "A B")
        await user_service.link_sub(user, "auth0|123")

        response = await use_case.execute(GetCurrentUserRequest(sub="auth0|123"))

        assert response.user_id == str(user.id)
        assert response.name == "A B"

    @pytest.mark.asyncio
    async def test_unknown_sub_raises(self, unit_env):
        use_case = await unit_env.get(GetCurrentUserUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetCurrentUserRequest(sub="auth0|nobody"))
