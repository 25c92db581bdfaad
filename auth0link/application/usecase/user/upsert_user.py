"""Upsert user use case.

Keeps a local user and its Auth0 account in step: the local row is keyed by
email, the remote account is found (or created) on the configured connection,
and its id is stored on the local row as `sub`.
"""

from typing import Self

import logfire
from pydantic import BaseModel, model_validator

from auth0link.application.usecase.base import BaseUseCase
from auth0link.domain.model import User
from auth0link.domain.service import IdentityClient, UserService
from auth0link.domain.value import ReconcileOutcome


class UpsertUserRequest(BaseModel):
    """Upsert user request.

    Either `name` or both `first_name` and `last_name` must be given.
    """

    email: str
    name: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    password: str | None = None  # Forwarded to Auth0 only

    @model_validator(mode="after")
    def join_name(self) -> Self:
        if self.name:
            return self
        if self.first_name and self.last_name:
            self.name = f"{self.first_name} {self.last_name}"
            return self
        raise ValueError("Either name or first_name and last_name is required")


class UpsertUserResponse(BaseModel):
    """Upsert user response."""

    user: User
    outcome: ReconcileOutcome


class UpsertUserUseCase(BaseUseCase):
    """Use case for creating or linking the remote account of a local user."""

    def __init__(
        self, user_service: UserService, identity_client: IdentityClient
    ) -> None:
        """Initialize upsert user use case.

        Args:
            user_service: User domain service
            identity_client: Identity provider client
        """
        self.user_service = user_service
        self.identity_client = identity_client

    async def execute(self, request: UpsertUserRequest) -> UpsertUserResponse:
        """Reconcile the local user with Auth0.

        Steps:
        1. Upsert the local user by email
        2. Search Auth0 for the email on the configured connection
        3. No match: create the remote user and link its id
        4. Matches: link the first one and push the password if given

        Each step is awaited before the next. Nothing is undone on failure:
        a remote user created before a failed local save is picked up by the
        search on the next run.

        Args:
            request: Upsert user request

        Returns:
            The linked local user and whether the remote account was created

        Raises:
            ApiError: If an Auth0 call is rejected
            TransportError: If Auth0 cannot be reached
        """
        name = request.name or ""

        with logfire.span("upsert_user", email=request.email):
            user = await self.user_service.upsert_by_email(
                request.email, name
            )

            matches = await self.identity_client.search_user_by_email_and_connection(
                request.email
            )

            if not matches:
                remote = await self.identity_client.create_user(
                    request.email, name, request.password
                )
                user = await self.user_service.link_sub(user, remote.user_id)
                logfire.info(
                    "Remote user created and linked",
                    user_id=str(user.id),
                    sub=remote.user_id,
                )
                return UpsertUserResponse(user=user, outcome=ReconcileOutcome.CREATED)

            if len(matches) > 1:
                logfire.warn(
                    "Several remote users match, linking the first",
                    email=request.email,
                    candidates=[m.user_id for m in matches],
                )

            remote = matches[0]
            user = await self.user_service.link_sub(user, remote.user_id)
            if request.password:
                await self.identity_client.change_password(
                    remote.user_id, request.password
                )

            logfire.info(
                "Existing remote user linked",
                user_id=str(user.id),
                sub=remote.user_id,
                password_changed=bool(request.password),
            )
            return UpsertUserResponse(user=user, outcome=ReconcileOutcome.LINKED)
