"""Logout use case."""

from typing import Any
from urllib.parse import urlencode

import logfire

from auth0link.application.usecase.auth.session import SessionContext
from auth0link.config import ClientConfig


class LogoutUseCase:
    """Use case for ending the local session and the Auth0 one."""

    def __init__(self, config: ClientConfig) -> None:
        self.config = config

    def logout_url(self) -> str:
        query = urlencode(
            {"client_id": self.config.client_id, "returnTo": self.config.app_url}
        )
        return f"{self.config.base_url}/v2/logout?{query}"

    async def execute(self, session: SessionContext) -> Any:
        session.invalidate()
        logfire.info("Session invalidated")
        return session.redirect(self.logout_url())
