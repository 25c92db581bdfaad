"""Session token utilities.

The browser session is a short HS256 JWT carrying the Auth0 subject. A
second, shorter-lived token carries the pending login (OAuth state and the
page to return to) across the Auth0 redirect.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel, ValidationError

from auth0link.config import SessionSettings
from auth0link.util.error import UtilError


class SessionPayload(BaseModel):
    """Session token payload."""

    sub: str
    exp: datetime


class LoginStatePayload(BaseModel):
    """Pending login token payload."""

    state: str
    next_url: str
    exp: datetime


class SessionTokenError(UtilError):
    """Session token is missing, malformed or expired."""

    pass


def create_session_token(sub: str, settings: SessionSettings) -> str:
    """Create a signed session token.

    Args:
        sub: Auth0 user id of the logged-in user
        settings: Session settings

    Returns:
        Encoded JWT
    """
    expiry = datetime.now(timezone.utc) + timedelta(days=settings.expiry_days)
    payload = {"sub": sub, "exp": expiry}
    return jwt.encode(payload, settings.secret, algorithm=settings.algorithm)


def create_login_state_token(
    state: str, next_url: str, settings: SessionSettings
) -> str:
    """Create a signed token for a login that is waiting on Auth0."""
    expiry = datetime.now(timezone.utc) + timedelta(
        minutes=settings.login_expiry_minutes
    )
    payload = {"state": state, "next_url": next_url, "exp": expiry}
    return jwt.encode(payload, settings.secret, algorithm=settings.algorithm)


def _decode(token: str, settings: SessionSettings) -> dict:
    try:
        return jwt.decode(token, settings.secret, algorithms=[settings.algorithm])
    except jwt.ExpiredSignatureError:
        raise SessionTokenError("Session has expired")
    except jwt.InvalidTokenError:
        raise SessionTokenError("Invalid session")


def verify_session_token(token: str, settings: SessionSettings) -> SessionPayload:
    """Verify and decode a session token.

    Raises:
        SessionTokenError: If token is invalid or expired
    """
    try:
        return SessionPayload(**_decode(token, settings))
    except ValidationError:
        raise SessionTokenError("Invalid session")


def verify_login_state_token(
    token: str, settings: SessionSettings
) -> LoginStatePayload:
    """Verify and decode a pending login token.

    Raises:
        SessionTokenError: If token is invalid, expired or not a login token
    """
    try:
        return LoginStatePayload(**_decode(token, settings))
    except ValidationError:
        raise SessionTokenError("Invalid login state")
