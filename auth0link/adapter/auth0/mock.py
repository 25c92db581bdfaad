"""In-memory identity client for tests and local development."""

from datetime import datetime
from typing import Any
from uuid import uuid4

from auth0link.adapter.error import ApiError
from auth0link.domain.model.remote import (
    LinkedIdentity,
    LoginLogEvent,
    PasswordlessChallenge,
    RemoteIdentity,
    RemoteRole,
    TokenSet,
    UserInfo,
)
from auth0link.domain.service.identity_client import IdentityClient
from auth0link.domain.value import Sub


class MockAuth0Client(IdentityClient):
    """IdentityClient that keeps remote users in memory.

    Every call is appended to `calls` as (method name, args) so tests can
    assert on what was sent. Unknown users raise the same ApiError(404) the
    real API would.
    """

    def __init__(self, connection: str = "Username-Password-Authentication") -> None:
        self.connection = connection
        self.users: list[RemoteIdentity] = []
        self.passwords: dict[str, str] = {}
        self.roles: dict[str, list[RemoteRole]] = {}
        self.logs: list[LoginLogEvent] = []
        self.calls: list[tuple[str, tuple[Any, ...]]] = []

    def add_user(
        self,
        email: str,
        name: str | None = None,
        user_id: str | None = None,
        connection: str | None = None,
    ) -> RemoteIdentity:
        """Seed a remote user."""
        user_id = user_id or f"auth0|{uuid4().hex[:24]}"
        provider, _, provider_id = user_id.partition("|")
        user = RemoteIdentity(
            user_id=user_id,
            email=email,
            name=name,
            identities=[
                LinkedIdentity(
                    connection=connection or self.connection,
                    provider=provider,
                    user_id=provider_id,
                )
            ],
        )
        self.users.append(user)
        return user

    def count(self, method: str) -> int:
        return sum(1 for name, _ in self.calls if name == method)

    def _record(self, method: str, *args: Any) -> None:
        self.calls.append((method, args))

    def _get(self, user_id: str) -> RemoteIdentity:
        for user in self.users:
            if user.user_id == user_id:
                return user
        raise ApiError.from_status(404)

    def _replace(self, user: RemoteIdentity) -> RemoteIdentity:
        self.users = [user if u.user_id == user.user_id else u for u in self.users]
        return user

    async def fetch_user_by_id(self, user_id: str) -> RemoteIdentity:
        self._record("fetch_user_by_id", user_id)
        return self._get(user_id)

    async def fetch_users_by_email(self, email: str) -> list[RemoteIdentity]:
        self._record("fetch_users_by_email", email)
        return [u for u in self.users if u.email == email]

    async def search_user_by_email_and_connection(
        self, email: str, connection: str | None = None
    ) -> list[RemoteIdentity]:
        connection = connection or self.connection
        self._record("search_user_by_email_and_connection", email, connection)
        return [
            u
            for u in self.users
            if u.email == email and any(i.connection == connection for i in u.identities)
        ]

    async def create_user(
        self, email: str, name: str, password: str | None = None
    ) -> RemoteIdentity:
        self._record("create_user", email, name, password)
        user = self.add_user(email=email, name=name)
        if password:
            self.passwords[user.user_id] = password
        return user

    async def update_user(self, user_id: str, email: str, name: str) -> RemoteIdentity:
        self._record("update_user", user_id, email, name)
        user = self._get(user_id).model_copy(
            update={"email": email, "name": name, "email_verified": True}
        )
        return self._replace(user)

    async def update_user_metadata(
        self, user_id: str, metadata: dict[str, Any]
    ) -> dict[str, Any]:
        self._record("update_user_metadata", user_id, metadata)
        user = self._get(user_id)
        merged = {**user.user_metadata, **metadata}
        self._replace(user.model_copy(update={"user_metadata": merged}))
        return merged

    async def change_password(self, user_id: str, password: str) -> bool:
        self._record("change_password", user_id, password)
        self._get(user_id)
        self.passwords[user_id] = password
        return True

    async def generate_password_reset_link(self, user_id: str) -> str:
        self._record("generate_password_reset_link", user_id)
        self._get(user_id)
        return f"https://mock.auth0.local/lo/reset?ticket={uuid4().hex}"

    async def delete_user(self, user_id: str) -> None:
        self._record("delete_user", user_id)
        self._get(user_id)
        self.users = [u for u in self.users if u.user_id != user_id]

    async def get_user_roles(self, user_id: str) -> list[RemoteRole]:
        self._record("get_user_roles", user_id)
        return self.roles.get(user_id, [])

    async def get_login_logs(
        self, start: datetime, end: datetime, user_id: str | None = None
    ) -> list[LoginLogEvent]:
        self._record("get_login_logs", start, end, user_id)
        return [
            log
            for log in self.logs
            if start <= log.date <= end and (user_id is None or log.user_id == user_id)
        ]

    async def link_accounts(
        self, primary_sub: str, secondary_sub: str
    ) -> list[LinkedIdentity]:
        primary = Sub.parse(primary_sub)
        secondary = Sub.parse(secondary_sub)
        self._record("link_accounts", primary.root, secondary.root)
        user = self._get(primary.root)
        identities = [
            *user.identities,
            LinkedIdentity(
                connection=secondary.provider,
                provider=secondary.provider,
                user_id=secondary.user_id,
            ),
        ]
        self._replace(user.model_copy(update={"identities": identities}))
        return identities

    async def get_user_info(self, access_token: str) -> UserInfo:
        self._record("get_user_info", access_token)
        # Mock access tokens are "mock-access-<user_id>"
        user = self._get(access_token.removeprefix("mock-access-"))
        return UserInfo(
            sub=user.user_id, email=user.email, email_verified=True, name=user.name
        )

    async def exchange_authorization_code(
        self, code: str, redirect_uri: str | None = None
    ) -> TokenSet:
        # Mock codes are "mock-code-<user_id>"
        self._record("exchange_authorization_code", code, redirect_uri)
        user = self._get(code.removeprefix("mock-code-"))
        return TokenSet(access_token=f"mock-access-{user.user_id}", expires_in=86400)

    async def get_token_via_password(self, username: str, password: str) -> TokenSet:
        self._record("get_token_via_password", username)
        for user in self.users:
            if user.email == username and self.passwords.get(user.user_id) == password:
                return TokenSet(access_token=f"mock-access-{user.user_id}")
        raise ApiError.from_status(403)

    async def start_passwordless_email(self, email: str) -> PasswordlessChallenge:
        self._record("start_passwordless_email", email)
        return PasswordlessChallenge(id=uuid4().hex, email=email)

    async def verify_passwordless_code(self, email: str, code: str) -> TokenSet:
        self._record("verify_passwordless_code", email, code)
        for user in self.users:
            if user.email == email:
                return TokenSet(access_token=f"mock-access-{user.user_id}")
        raise ApiError.from_status(403)
