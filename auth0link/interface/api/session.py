"""Cookie-backed browser session."""

from typing import Optional

from fastapi import Request, status
from fastapi.responses import RedirectResponse

from auth0link.application.usecase.auth import LoginState, SessionContext
from auth0link.config import SessionSettings
from auth0link.util.jwt import (
    SessionTokenError,
    create_login_state_token,
    create_session_token,
    verify_login_state_token,
    verify_session_token,
)


class CookieSession(SessionContext):
    """SessionContext stored in signed HTTP-only cookies.

    The session itself lives in one cookie and a pending login in another.
    Changes made through start(), invalidate() and remember_login() are
    applied to the response returned by redirect().
    """

    def __init__(self, request: Request, settings: SessionSettings) -> None:
        self.request = request
        self.settings = settings
        self._token: str | None = None
        self._clear = False
        self._login: LoginState | None = None
        self._clear_login = False

    def is_authenticated(self) -> bool:
        token = self.request.cookies.get(self.settings.cookie_name)
        if not token:
            return False
        try:
            verify_session_token(token, self.settings)
        except SessionTokenError:
            return False
        return True

    def start(self, sub: str) -> None:
        self._token = create_session_token(sub, self.settings)
        self._clear = False
        self._login = None
        self._clear_login = True

    def invalidate(self) -> None:
        self._token = None
        self._clear = True

    def remember_login(self, login: LoginState) -> None:
        self._login = login
        self._clear_login = False

    def pending_login(self) -> Optional[LoginState]:
        token = self.request.cookies.get(self.settings.login_cookie_name)
        if not token:
            return None
        try:
            payload = verify_login_state_token(token, self.settings)
        except SessionTokenError:
            return None
        return LoginState(state=payload.state, next_url=payload.next_url)

    def redirect(self, url: str) -> RedirectResponse:
        response = RedirectResponse(url=url, status_code=status.HTTP_302_FOUND)
        if self._token:
            response.set_cookie(
                key=self.settings.cookie_name,
                value=self._token,
                httponly=True,
                samesite="lax",
                path="/",
                max_age=self.settings.expiry_days * 24 * 60 * 60,
            )
        elif self._clear:
            response.delete_cookie(key=self.settings.cookie_name, path="/")

        # Lax still sends it on the top-level GET back from Auth0
        if self._login:
            response.set_cookie(
                key=self.settings.login_cookie_name,
                value=create_login_state_token(
                    self._login.state, self._login.next_url, self.settings
                ),
                httponly=True,
                samesite="lax",
                path="/",
                max_age=self.settings.login_expiry_minutes * 60,
            )
        elif self._clear_login:
            response.delete_cookie(key=self.settings.login_cookie_name, path="/")
        return response
