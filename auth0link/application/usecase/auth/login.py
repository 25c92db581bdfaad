"""Login use case."""

import secrets
from typing import Any
from urllib.parse import urlencode, urlsplit

import logfire

from auth0link.application.usecase.auth.session import LoginState, SessionContext
from auth0link.config import ClientConfig

LOGIN_SCOPE = "openid name email email_verified"


def safe_next_url(next_url: str | None) -> str:
    """Local path to continue to after login.

    Anything that could leave the site (absolute URLs, "//host",
    backslash tricks) falls back to "/".
    """
    if not next_url or not next_url.startswith("/") or next_url.startswith("//"):
        return "/"
    if "\\" in next_url:
        return "/"
    parts = urlsplit(next_url)
    if parts.scheme or parts.netloc:
        return "/"
    return next_url


class LoginUseCase:
    """Use case for starting the Auth0 universal login."""

    def __init__(self, config: ClientConfig) -> None:
        self.config = config

    def authorize_url(self, state: str) -> str:
        """Auth0 /authorize URL for this application."""
        query = urlencode(
            {
                "response_type": "code",
                "scope": LOGIN_SCOPE,
                "client_id": self.config.client_id,
                "redirect_uri": self.config.callback_url,
                "state": state,
            }
        )
        return f"{self.config.base_url}/authorize?{query}"

    async def execute(self, session: SessionContext, next_url: str | None = None) -> Any:
        """Redirect to the intended page if logged in, otherwise to Auth0.

        Args:
            session: Caller's session
            next_url: Page the caller wanted; only local paths are honoured

        Returns:
            Redirect response built by the session
        """
        next_url = safe_next_url(next_url)
        if session.is_authenticated():
            return session.redirect(next_url)

        # CSRF protection for the callback
        login = LoginState(state=secrets.token_urlsafe(32), next_url=next_url)
        session.remember_login(login)

        logfire.info("Redirecting to Auth0 login", domain=self.config.domain)
        return session.redirect(self.authorize_url(login.state))
