"""Typed views of Auth0 API responses.

These are owned by the identity provider and never persisted locally.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import AliasChoices, Field

from auth0link.domain.model.common import RemoteModel


class LinkedIdentity(RemoteModel):
    """One identity (connection + provider id) attached to an Auth0 user."""

    connection: str
    provider: str
    user_id: str
    is_social: bool = False


class RemoteIdentity(RemoteModel):
    """An Auth0 user as returned by the Management API."""

    user_id: str
    email: Optional[str] = None  # Absent for SMS and some social connections
    name: Optional[str] = None
    email_verified: bool = False
    identities: list[LinkedIdentity] = Field(default_factory=list)
    user_metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def connection(self) -> Optional[str]:
        """Connection of the primary identity, if the payload included one."""
        return self.identities[0].connection if self.identities else None


class RemoteRole(RemoteModel):
    """A role assigned to an Auth0 user."""

    id: str
    name: str
    description: Optional[str] = None


class LoginLogEvent(RemoteModel):
    """A login-related tenant log entry."""

    date: datetime
    type: str
    user_id: Optional[str] = None
    user_name: Optional[str] = None
    description: Optional[str] = None
    connection: Optional[str] = None
    ip: Optional[str] = None


class PasswordChangeTicket(RemoteModel):
    """Password reset ticket."""

    ticket: str


class TokenSet(RemoteModel):
    """Tokens returned by the /oauth/token endpoint."""

    access_token: str
    id_token: Optional[str] = None
    refresh_token: Optional[str] = None
    token_type: str = "Bearer"
    expires_in: Optional[int] = None
    scope: Optional[str] = None


class PasswordlessChallenge(RemoteModel):
    """Result of starting a passwordless email flow."""

    id: str = Field(validation_alias=AliasChoices("_id", "id"))
    email: str
    email_verified: bool = False


class UserInfo(RemoteModel):
    """OIDC profile returned by /userinfo for an end-user access token."""

    sub: str
    email: Optional[str] = None
    email_verified: bool = False
    name: Optional[str] = None
    given_name: Optional[str] = None
    family_name: Optional[str] = None
    nickname: Optional[str] = None
    picture: Optional[str] = None
