"""Unit tests for UpsertUserUseCase."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from auth0link.adapter.auth0 import MockAuth0Client
from auth0link.adapter.error import ApiError
from auth0link.application.usecase.user.upsert_user import (
    UpsertUserRequest,
    UpsertUserUseCase,
)
from auth0link.domain.model import User
from auth0link.domain.repository import UserRepository
from auth0link.domain.service import IdentityClient, UserService
from auth0link.domain.value import ReconcileOutcome, UserId
from auth0link.persistence.repository.inmemory import InMemoryUserRepository
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestUpsertUserRequest:
    """Tests for request name handling."""

    def test_joins_first_and_last_name(self):
        request = UpsertUserRequest(email="a@x.com", first_name="A", last_name="B")

        assert request.name == "A B"

    def test_explicit_name_wins(self):
        request = UpsertUserRequest(
            email="a@x.com", name="Full", first_name="A", last_name="B"
        )

        assert request.name == "Full"

    def test_requires_some_name(self):
        with pytest.raises(ValidationError):
            UpsertUserRequest(email="a@x.com", first_name="A")


class TestUpsertUserUseCase:
    """Tests for UpsertUserUseCase."""

    @pytest.mark.asyncio
    async def test_creates_remote_user_when_none_exists(self, unit_env):
        """No remote match: create remotely and store the new id as sub."""
        # Arrange
        use_case = await unit_env.get(UpsertUserUseCase)
        remote = await unit_env.get(MockAuth0Client)
        user_repo = await unit_env.get(UserRepository)

        # Act
        response = await use_case.execute(
            UpsertUserRequest(email="a@x.com", first_name="A", last_name="B")
        )

        # Assert
        assert response.outcome == ReconcileOutcome.CREATED
        assert remote.count("create_user") == 1
        created = remote.users[0]
        assert created.email == "a@x.com"
        assert created.name == "A B"

        saved = await user_repo.find_by_email("a@x.com")
        assert saved.name == "A B"
        assert saved.sub == created.user_id
        assert response.user == saved

    @pytest.mark.asyncio
    async def test_links_existing_remote_user(self, unit_env):
        """Existing remote match: link without creating or changing passwords."""
        use_case = await unit_env.get(UpsertUserUseCase)
        remote = await unit_env.get(MockAuth0Client)
        user_repo = await unit_env.get(UserRepository)
        remote.add_user("a@x.com", name="A B", user_id="auth0|123")

        response = await use_case.execute(UpsertUserRequest(email="a@x.com", name="A B"))

        assert response.outcome == ReconcileOutcome.LINKED
        assert response.user.sub == "auth0|123"
        assert (await user_repo.find_by_email("a@x.com")).sub == "auth0|123"
        assert remote.count("create_user") == 0
        assert remote.count("change_password") == 0

    @pytest.mark.asyncio
    async def test_first_remote_match_wins(self, unit_env):
        use_case = await unit_env.get(UpsertUserUseCase)
        remote = await unit_env.get(MockAuth0Client)
        user_repo = await unit_env.get(UserRepository)
        existing = User(id=UserId(uuid4()), name="A", email="a@x.com")
        await user_repo.save(existing)
        remote.add_user("a@x.com", user_id="auth0|first")
        remote.add_user("a@x.com", user_id="auth0|second")

        response = await use_case.execute(UpsertUserRequest(email="a@x.com", name="A"))

        assert response.outcome == ReconcileOutcome.LINKED
        assert response.user.id == existing.id
        assert response.user.sub == "auth0|first"
        saved = await user_repo.find_by_email("a@x.com")
        assert saved.id == existing.id
        assert saved.sub == "auth0|first"

    @pytest.mark.asyncio
    async def test_password_is_pushed_to_linked_user(self, unit_env):
        use_case = await unit_env.get(UpsertUserUseCase)
        remote = await unit_env.get(MockAuth0Client)
        remote.add_user("a@x.com", user_id="auth0|123")

        await use_case.execute(
            UpsertUserRequest(email="a@x.com", name="A B", password="n3w-pass")
        )

        assert remote.count("change_password") == 1
        assert remote.passwords["auth0|123"] == "n3w-pass"

    @pytest.mark.asyncio
    async def test_password_is_sent_on_create(self, unit_env):
        use_case = await unit_env.get(UpsertUserUseCase)
        remote = await unit_env.get(MockAuth0Client)

        await use_case.execute(
            UpsertUserRequest(email="a@x.com", name="A B", password="pw")
        )

        assert remote.calls[-1] == ("create_user", ("a@x.com", "A B", "pw"))
        assert remote.count("change_password") == 0

    @pytest.mark.asyncio
    async def test_existing_local_user_keeps_id_and_gets_new_name(self, unit_env):
        use_case = await unit_env.get(UpsertUserUseCase)
        user_repo = await unit_env.get(UserRepository)
        existing = User(id=UserId(uuid4()), name="Old", email="a@x.com")
        await user_repo.save(existing)

        response = await use_case.execute(UpsertUserRequest(email="a@x.com", name="New"))

        assert response.user.id == existing.id
        assert response.user.name == "New"

    @pytest.mark.asyncio
    async def test_search_ignores_other_connections(self, unit_env):
        """A social identity with the same email does not count as a match."""
        use_case = await unit_env.get(UpsertUserUseCase)
        remote = await unit_env.get(MockAuth0Client)
        remote.add_user("a@x.com", user_id="google-oauth2|9", connection="google-oauth2")

        response = await use_case.execute(UpsertUserRequest(email="a@x.com", name="A"))

        assert response.outcome == ReconcileOutcome.CREATED
        assert response.user.sub != "google-oauth2|9"

    @pytest.mark.asyncio
    async def test_remote_failure_keeps_local_upsert(self):
        """Remote errors propagate and nothing local is rolled back."""

        class FailingIdentityClient(IdentityClient):
            async def search_user_by_email_and_connection(self, email, connection=None):
                raise ApiError.from_status(429)

        repo = InMemoryUserRepository()
        use_case = UpsertUserUseCase(UserService(repo), FailingIdentityClient())

        with pytest.raises(ApiError) as exc_info:
            await use_case.execute(UpsertUserRequest(email="a@x.com", name="A B"))

        assert exc_info.value.message == "Too many attempts"
        saved = await repo.find_by_email("a@x.com")
        assert saved.name == "A B"
        assert saved.sub is None

    @pytest.mark.asyncio
    async def test_rerun_after_partial_failure_links_created_user(self, unit_env):
        """A retry finds the remote user created by the failed run."""
        use_case = await unit_env.get(UpsertUserUseCase)
        remote = await unit_env.get(MockAuth0Client)
        # Remote creation happened but the local sub was never saved
        remote.add_user("a@x.com", user_id="auth0|orphan")

        response = await use_case.execute(UpsertUserRequest(email="a@x.com", name="A"))

        assert response.outcome == ReconcileOutcome.LINKED
        assert response.user.sub == "auth0|orphan"
        assert remote.count("create_user") == 0
