"""Identity provider client interface."""

from datetime import datetime
from typing import Any

from auth0link.domain.model.remote import (
    LinkedIdentity,
    LoginLogEvent,
    PasswordlessChallenge,
    RemoteIdentity,
    RemoteRole,
    TokenSet,
    UserInfo,
)


class IdentityClient:
    """Operations against the identity provider's Management and
    Authentication APIs.

    Implementations hold no state between calls beyond their credentials.
    """

    # Management API: users

    async def fetch_user_by_id(self, user_id: str) -> RemoteIdentity:
        raise NotImplementedError

    async def fetch_users_by_email(self, email: str) -> list[RemoteIdentity]:
        """All remote users with this email, across every connection."""
        raise NotImplementedError

    async def search_user_by_email_and_connection(
        self, email: str, connection: str | None = None
    ) -> list[RemoteIdentity]:
        """Remote users with this email on one connection.

        Email alone is not unique remotely; scoping to a connection narrows
        the match but can still return several records.

        Args:
            email: Email to search for
            connection: Connection name, defaults to the configured one

        Returns:
            Matching users in provider order (may be empty)
        """
        raise NotImplementedError

    async def create_user(
        self, email: str, name: str, password: str | None = None
    ) -> RemoteIdentity:
        """Create a remote user on the configured connection.

        Args:
            email: Email address, marked verified
            name: Full name
            password: Initial password; a random hashed one is used if omitted

        Returns:
            The created remote user
        """
        raise NotImplementedError

    async def update_user(self, user_id: str, email: str, name: str) -> RemoteIdentity:
        raise NotImplementedError

    async def update_user_metadata(
        self, user_id: str, metadata: dict[str, Any]
    ) -> dict[str, Any]:
        """Merge metadata into user_metadata and return the result."""
        raise NotImplementedError

    async def change_password(self, user_id: str, password: str) -> bool:
        raise NotImplementedError

    async def generate_password_reset_link(self, user_id: str) -> str:
        """Create a password change ticket and return its URL."""
        raise NotImplementedError

    async def delete_user(self, user_id: str) -> None:
        raise NotImplementedError

    async def get_user_roles(self, user_id: str) -> list[RemoteRole]:
        raise NotImplementedError

    async def get_login_logs(
        self, start: datetime, end: datetime, user_id: str | None = None
    ) -> list[LoginLogEvent]:
        """Login successes and failures on the configured connection.

        Args:
            start: Range start (inclusive)
            end: Range end (inclusive)
            user_id: Restrict to one user's log endpoint when given

        Returns:
            Log events returned by the provider
        """
        raise NotImplementedError

    async def link_accounts(
        self, primary_sub: str, secondary_sub: str
    ) -> list[LinkedIdentity]:
        """Attach the secondary identity to the primary account.

        Raises:
            PreconditionError: If either sub is not "provider|id"
        """
        raise NotImplementedError

    # Authentication API

    async def get_user_info(self, access_token: str) -> UserInfo:
        """Profile for an end-user access token (not the machine token)."""
        raise NotImplementedError

    async def exchange_authorization_code(
        self, code: str, redirect_uri: str | None = None
    ) -> TokenSet:
        raise NotImplementedError

    async def get_token_via_password(self, username: str, password: str) -> TokenSet:
        raise NotImplementedError

    async def start_passwordless_email(self, email: str) -> PasswordlessChallenge:
        raise NotImplementedError

    async def verify_passwordless_code(self, email: str, code: str) -> TokenSet:
        raise NotImplementedError
