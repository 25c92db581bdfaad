"""Domain model entities."""

from auth0link.domain.model.access_token import AccessToken
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
from auth0link.domain.model.user import User

__all__ = [
    "AccessToken",
    "User",
    "LinkedIdentity",
    "LoginLogEvent",
    "PasswordChangeTicket",
    "PasswordlessChallenge",
    "RemoteIdentity",
    "RemoteRole",
    "TokenSet",
    "UserInfo",
]
