"""Complete login use case (authorization code callback)."""

import secrets
from typing import Any

import logfire
from pydantic import BaseModel

from auth0link.application.usecase.auth.session import SessionContext
from auth0link.application.usecase.user.upsert_user import (
    UpsertUserRequest,
    UpsertUserUseCase,
)
from auth0link.config import ClientConfig
from auth0link.domain.error import PreconditionError
from auth0link.domain.service import IdentityClient


class CompleteLoginRequest(BaseModel):
    """Parameters Auth0 appends to the callback URL."""

    code: str
    state: str


class CompleteLoginUseCase:
    """Use case for finishing the Auth0 login redirect.

    Exchanges the code, reads the profile, reconciles the local user and
    starts the session.
    """

    def __init__(
        self,
        identity_client: IdentityClient,
        upsert_user: UpsertUserUseCase,
        config: ClientConfig,
    ) -> None:
        """Initialize complete login use case.

        Args:
            identity_client: Identity provider client
            upsert_user: Reconciler for the logged-in user
            config: Auth0 client configuration
        """
        self.identity_client = identity_client
        self.upsert_user = upsert_user
        self.config = config

    async def execute(
        self, request: CompleteLoginRequest, session: SessionContext
    ) -> Any:
        """Run the callback flow and redirect to the intended page.

        Raises:
            PreconditionError: If the state does not match the pending login,
                or the profile has no email
            ApiError: If Auth0 rejects the code or the token
        """
        pending = session.pending_login()
        if pending is None or not secrets.compare_digest(
            pending.state.encode(), request.state.encode()
        ):
            logfire.warn("Login state mismatch", has_pending=pending is not None)
            raise PreconditionError("Login state does not match")

        with logfire.span("complete_login"):
            tokens = await self.identity_client.exchange_authorization_code(
                request.code, self.config.callback_url
            )
            info = await self.identity_client.get_user_info(tokens.access_token)
            if not info.email:
                raise PreconditionError("Auth0 profile has no email")

            result = await self.upsert_user.execute(
                UpsertUserRequest(email=info.email, name=info.name or info.email)
            )
            session.start(info.sub)

            logfire.info(
                "Login completed",
                user_id=str(result.user.id),
                sub=info.sub,
                outcome=result.outcome.value,
            )
            return session.redirect(pending.next_url)
