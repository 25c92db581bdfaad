"""User domain service."""

from datetime import datetime, timezone
from uuid import uuid4

import logfire

from auth0link.domain.error import NotFoundError
from auth0link.domain.model import User
from auth0link.domain.repository import UserRepository
from auth0link.domain.value import UserId

from .base import Service


class UserService(Service):
    """Domain service for local user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_by_sub(self, sub: str) -> User:
        """Get the user linked to a remote account.

        Raises:
            NotFoundError: If no local user carries this sub
        """
        with logfire.span("user_service.get_by_sub", sub=sub):
            user = await self.user_repository.find_by_sub(sub)
            if not user:
                logfire.warn("User not found", sub=sub)
                raise NotFoundError("User", sub)
            return user

    async def get_user_by_email(self, email: str) -> User | None:
        """Get user by email.

        Args:
            email: User email

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_service.get_user_by_email", email=email):
            return await self.user_repository.find_by_email(email)

    async def upsert_by_email(self, email: str, name: str) -> User:
        """Create the user for this email, or update the name of the existing one.

        Only the name is touched on an existing row; sub and timestamps of
        creation are kept.

        Args:
            email: Natural key
            name: Display name

        Returns:
            The saved user
        """
        with logfire.span("user_service.upsert_by_email", email=email):
            existing = await self.user_repository.find_by_email(email)
            now = datetime.now(timezone.utc)

            if existing:
                user = existing.model_copy(update={"name": name, "updated_at": now})
                logfire.info("Updating local user", user_id=str(user.id))
            else:
                user = User(
                    id=UserId(uuid4()),
                    name=name,
                    email=email,
                    created_at=now,
                    updated_at=now,
                )
                logfire.info("Creating local user", user_id=str(user.id))

            return await self.user_repository.save(user)

    async def link_sub(self, user: User, sub: str) -> User:
        """Point a local user at a remote account and persist it.

        Args:
            user: Local user
            sub: Remote user id; replaces any previous value

        Returns:
            The saved user
        """
        with logfire.span("user_service.link_sub", user_id=str(user.id), sub=sub):
            if user.sub and user.sub != sub:
                logfire.warn(
                    "Replacing remote link",
                    user_id=str(user.id),
                    previous_sub=user.sub,
                    sub=sub,
                )
            linked = user.model_copy(
                update={"sub": sub, "updated_at": datetime.now(timezone.utc)}
            )
            return await self.user_repository.save(linked)
