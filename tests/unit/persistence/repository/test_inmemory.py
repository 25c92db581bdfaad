"""Unit tests for the in-memory repositories."""

from datetime import datetime, timezone
from uuid import uuid4

import pytest

from auth0link.domain.model import AccessToken, User
from auth0link.domain.value import UserId
from auth0link.persistence.repository.inmemory import (
    InMemoryAccessTokenRepository,
    InMemoryUserRepository,
)


class TestInMemoryUserRepository:
    @pytest.mark.asyncio
    async def test_email_is_unique(self):
        repo = InMemoryUserRepository()
        await repo.save(User(id=UserId(uuid4()), name="A", email="a@x.com"))

        with pytest.raises(ValueError):
            await repo.save(User(id=UserId(uuid4()), name="B", email="a@x.com"))

    @pytest.mark.asyncio
    async def test_find_by_sub(self):
        repo = InMemoryUserRepository()
        user = User(id=UserId(uuid4()), name="A", email="a@x.com", sub="auth0|1")
        await repo.save(user)

        assert await repo.find_by_sub("auth0|1") == user
        assert await repo.find_by_sub("auth0|2") is None


class TestInMemoryAccessTokenRepository:
    @pytest.mark.asyncio
    async def test_save_replaces_row_with_same_name(self):
        repo = InMemoryAccessTokenRepository()
        now = datetime.now(timezone.utc)

        await repo.save(AccessToken(name="auth0", token="one", refreshed_at=now))
        await repo.save(AccessToken(name="auth0", token="two", refreshed_at=now))

        assert len(repo) == 1
        assert (await repo.find_by_name("auth0")).token == "two"
