"""Browser session port used by the login flows."""

from typing import Any, Optional

from pydantic import BaseModel


class LoginState(BaseModel):
    """A login started on this browser that has not come back from Auth0 yet."""

    state: str
    next_url: str = "/"


class SessionContext:
    """The caller's browser session.

    The interface layer implements this on top of its own request and
    response objects, so the use cases never touch HTTP directly.
    """

    def is_authenticated(self) -> bool:
        raise NotImplementedError

    def start(self, sub: str) -> None:
        """Mark the session as logged in as the given remote user.

        Also discards any pending login.
        """
        raise NotImplementedError

    def invalidate(self) -> None:
        raise NotImplementedError

    def remember_login(self, login: LoginState) -> None:
        """Keep the pending login until the callback arrives."""
        raise NotImplementedError

    def pending_login(self) -> Optional[LoginState]:
        """The login remembered by this browser, if any and still valid."""
        raise NotImplementedError

    def redirect(self, url: str) -> Any:
        """Build the framework response that sends the browser to url."""
        raise NotImplementedError
