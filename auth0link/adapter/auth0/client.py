"""Auth0 Management and Authentication API client.

Each method is one request against Auth0, decoded into a typed model.

Docs:
    https://auth0.com/docs/api/management/v2
    https://auth0.com/docs/api/authentication
"""

import hashlib
import secrets
from base64 import urlsafe_b64encode
from datetime import datetime
from typing import Any, TypeVar

import logfire
from pydantic import TypeAdapter, ValidationError

from auth0link.adapter.auth0.requester import ApiRequester
from auth0link.adapter.error import ResponseDecodeError
from auth0link.config import ClientConfig
from auth0link.domain.model.remote import (
    LinkedIdentity,
    LoginLogEvent,
    PasswordChangeTicket,
    PasswordlessChallenge,
    RemoteIdentity,
    RemoteRole,
    TokenSet,
    UserInfo,
)
from auth0link.domain.service.identity_client import IdentityClient
from auth0link.domain.value import LoginEventType, Sub

T = TypeVar("T")

# Password reset tickets stay valid for 30 days
PASSWORD_RESET_TTL_SECONDS = 30 * 24 * 60 * 60

USER_SCOPE = "openid profile email offline_access"
PASSWORDLESS_OTP_GRANT = "http://auth0.com/oauth/grant-type/passwordless/otp"


def decode(text: str, type_: type[T]) -> T:
    """Decode a JSON response body into a typed model.

    Args:
        text: Raw response body
        type_: Target type, e.g. RemoteIdentity or list[RemoteRole]

    Returns:
        Decoded value

    Raises:
        ResponseDecodeError: If the payload does not match the schema
    """
    try:
        return TypeAdapter(type_).validate_json(text)
    except ValidationError as e:
        raise ResponseDecodeError(f"Unexpected Auth0 response: {e}") from e


def generate_throwaway_password() -> str:
    """Random password for accounts created before the user picks one.

    Nobody knows it, so it cannot be used to log in until a reset.
    """
    digest = hashlib.sha256(secrets.token_bytes(32)).digest()
    return "!" + urlsafe_b64encode(digest).decode("utf-8").rstrip("=")


class Auth0Client(IdentityClient):
    """IdentityClient backed by the Auth0 REST APIs."""

    def __init__(self, requester: ApiRequester, config: ClientConfig) -> None:
        """Initialize Auth0 client.

        Args:
            requester: Requester carrying the machine token
            config: Auth0 client configuration
        """
        self.requester = requester
        self.config = config

    async def _management(
        self,
        method: str,
        path: str,
        body: dict[str, Any] | None = None,
        params: dict[str, str] | None = None,
    ) -> str:
        url = self.config.management_url(path)
        with logfire.span("auth0.management", method=method, path=path):
            return await self.requester.request(method, url, body, params)

    async def _authentication(self, path: str, body: dict[str, Any]) -> str:
        url = f"{self.config.base_url}/{path}"
        with logfire.span("auth0.authentication", path=path):
            return await self.requester.request("POST", url, body)

    # Management API: users

    async def fetch_user_by_id(self, user_id: str) -> RemoteIdentity:
        response = await self._management("GET", f"users/{user_id}")
        return decode(response, RemoteIdentity)

    async def fetch_users_by_email(self, email: str) -> list[RemoteIdentity]:
        response = await self._management(
            "GET", "users-by-email", params={"email": email}
        )
        return decode(response, list[RemoteIdentity])

    async def search_user_by_email_and_connection(
        self, email: str, connection: str | None = None
    ) -> list[RemoteIdentity]:
        connection = connection or self.config.connection
        query = f'(email:"{email}" AND identities.connection:"{connection}")'
        response = await self._management(
            "GET", "users", params={"search_engine": "v3", "q": query}
        )
        users = decode(response, list[RemoteIdentity])
        logfire.info(
            "Remote user search", email=email, connection=connection, count=len(users)
        )
        return users

    async def create_user(
        self, email: str, name: str, password: str | None = None
    ) -> RemoteIdentity:
        body = {
            "email": email,
            "name": name,
            "connection": self.config.connection,
            "password": password or generate_throwaway_password(),
            "email_verified": True,
        }
        response = await self._management("POST", "users", body)
        user = decode(response, RemoteIdentity)
        logfire.info(
            "Remote user created",
            user_id=user.user_id,
            connection=self.config.connection,
            generated_password=password is None,
        )
        return user

    async def update_user(self, user_id: str, email: str, name: str) -> RemoteIdentity:
        body = {"email": email, "name": name, "email_verified": True}
        response = await self._management("PATCH", f"users/{user_id}", body)
        return decode(response, RemoteIdentity)

    async def update_user_metadata(
        self, user_id: str, metadata: dict[str, Any]
    ) -> dict[str, Any]:
        response = await self._management(
            "PATCH", f"users/{user_id}", {"user_metadata": metadata}
        )
        return decode(response, RemoteIdentity).user_metadata

    async def change_password(self, user_id: str, password: str) -> bool:
        await self._management("PATCH", f"users/{user_id}", {"password": password})
        logfire.info("Remote password changed", user_id=user_id)
        return True

    async def generate_password_reset_link(self, user_id: str) -> str:
        body = {
            "user_id": user_id,
            "result_url": self.config.app_url,
            "ttl_sec": PASSWORD_RESET_TTL_SECONDS,
        }
        response = await self._management("POST", "tickets/password-change", body)
        return decode(response, PasswordChangeTicket).ticket

    async def delete_user(self, user_id: str) -> None:
        await self._management("DELETE", f"users/{user_id}")
        logfire.info("Remote user deleted", user_id=user_id)

    async def get_user_roles(self, user_id: str) -> list[RemoteRole]:
        response = await self._management("GET", f"users/{user_id}/roles")
        return decode(response, list[RemoteRole])

    async def get_login_logs(
        self, start: datetime, end: datetime, user_id: str | None = None
    ) -> list[LoginLogEvent]:
        types = " OR ".join(f"type:{t.value}" for t in LoginEventType)
        query = (
            f"date:[{start.isoformat()} TO {end.isoformat()}]"
            f" AND (connection:{self.config.connection})"
            f" AND ({types})"
        )
        path = f"users/{user_id}/logs" if user_id else "logs"
        response = await self._management("GET", path, params={"q": query})
        return decode(response, list[LoginLogEvent])

    async def link_accounts(
        self, primary_sub: str, secondary_sub: str
    ) -> list[LinkedIdentity]:
        primary = Sub.parse(primary_sub)
        secondary = Sub.parse(secondary_sub)
        body = {"provider": secondary.provider, "user_id": secondary.user_id}
        response = await self._management(
            "POST", f"users/{primary.root}/identities", body
        )
        logfire.info(
            "Remote accounts linked", primary=primary.root, secondary=secondary.root
        )
        return decode(response, list[LinkedIdentity])

    # Authentication API

    async def get_user_info(self, access_token: str) -> UserInfo:
        with logfire.span("auth0.userinfo"):
            response = await self.requester.with_token(access_token).request(
                "GET", self.config.userinfo_url
            )
        return decode(response, UserInfo)

    async def exchange_authorization_code(
        self, code: str, redirect_uri: str | None = None
    ) -> TokenSet:
        body = {
            "grant_type": "authorization_code",
            "client_id": self.config.client_id,
            "client_secret": self.config.client_secret,
            "code": code,
            "redirect_uri": redirect_uri,
        }
        return decode(await self._authentication("oauth/token", body), TokenSet)

    async def get_token_via_password(self, username: str, password: str) -> TokenSet:
        body = {
            "grant_type": "password",
            "username": username,
            "password": password,
            "audience": self.config.audience,
            "client_id": self.config.client_id,
            "client_secret": self.config.client_secret,
            "scope": USER_SCOPE,
        }
        return decode(await self._authentication("oauth/token", body), TokenSet)

    async def start_passwordless_email(self, email: str) -> PasswordlessChallenge:
        body = {
            "connection": "email",
            "email": email,
            "send": "code",
            "client_id": self.config.client_id,
            "client_secret": self.config.client_secret,
        }
        response = await self._authentication("passwordless/start", body)
        return decode(response, PasswordlessChallenge)

    async def verify_passwordless_code(self, email: str, code: str) -> TokenSet:
        body = {
            "grant_type": PASSWORDLESS_OTP_GRANT,
            "username": email,
            "otp": code,
            "realm": "email",
            "audience": self.config.audience,
            "client_id": self.config.client_id,
            "client_secret": self.config.client_secret,
            "scope": USER_SCOPE,
        }
        return decode(await self._authentication("oauth/token", body), TokenSet)
